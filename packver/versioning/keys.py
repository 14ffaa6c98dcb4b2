# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Convenience comparison helpers built on Version and VersionRange.

This module is format-agnostic: it does NOT read manifests or files. It
accepts version and range text and answers the usual questions: which of
two versions is newer, does a version satisfy a range, and which candidate
is the highest one a range allows.
"""

from __future__ import annotations

from collections.abc import Iterable

from packver.exceptions import BadVersionString
from packver.logging import get_global_logger
from packver.versioning.ranges import VersionRange, parse_range
from packver.versioning.version import Version, parse_version

__all__ = [
    "version_key",
    "compare_versions",
    "is_newer",
    "satisfies",
    "latest_satisfying",
]


def version_key(text: str) -> Version:
    """Return a sort key for version text (the parsed Version itself).

    Example:
        >>> sorted(["1.10", "1.2", "1.2-rc"], key=version_key)
        ['1.2', '1.2-rc', '1.10']
    """
    return parse_version(text)


def compare_versions(a: str, b: str) -> int:
    """Compare two version strings.

    Returns -1 if a < b, 0 if equal, 1 if a > b.

    Raises:
        BadVersionString: If either side does not parse.
    """
    va, vb = parse_version(a), parse_version(b)
    result = (va > vb) - (va < vb)

    logger = get_global_logger()
    if result < 0:
        logger.verbose("COMPARE", f"{a!r} is older than {b!r}")
    elif result > 0:
        logger.verbose("COMPARE", f"{a!r} is newer than {b!r}")
    else:
        logger.verbose("COMPARE", f"{a!r} is the same as {b!r}")
    return result


def is_newer(remote: str, current: str | None) -> bool:
    """Decide if ``remote`` should be considered newer than ``current``.

    A missing current version means anything is newer.
    """
    if current is None:
        get_global_logger().verbose(
            "COMPARE", f"No current version. Treat {remote!r} as newer"
        )
        return True
    return compare_versions(remote, current) > 0


def satisfies(version: str, constraint: str) -> bool:
    """Return True if version text lies within the range expression.

    Raises:
        BadVersionString: If the version or a range boundary does not parse.
        RangeSyntaxError: If the range expression is malformed.
    """
    return parse_range(constraint).contains(parse_version(version))


def latest_satisfying(
    version_range: VersionRange, candidates: Iterable[str]
) -> Version | None:
    """Return the highest candidate inside ``version_range``.

    Candidates that do not parse are skipped. When several candidates
    compare equal (e.g. "1.2" and "1.2.0"), the first one seen wins.

    Args:
        version_range: The single range every candidate is checked against.
        candidates: Version strings, in any order.

    Returns:
        The best matching Version, or None if no candidate satisfies the range.
    """
    logger = get_global_logger()
    best: Version | None = None
    for text in candidates:
        try:
            version = parse_version(text)
        except BadVersionString as err:
            logger.debug("RANGE", f"Skipping candidate: {err}")
            continue
        if not version_range.contains(version):
            logger.debug("RANGE", f"{text!r} is outside {version_range}")
            continue
        if best is None or version > best:
            best = version
    return best
