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

"""Version and VersionPart value types and the version parser.

A Version is an ordered tuple of VersionParts; a VersionPart is an ordered
tuple of non-negative integers. Both compare with implicit right-padding:
missing components count as 0 and missing parts count as NULL_PART, so
"1.2" == "1.2.0" and "1-0" == "1".

The wildcard Version ("*", or the empty string) has no parts. Under
ordinary comparison it therefore behaves as all-zero, the smallest
possible value. Ranges give it a different meaning ("no constraint");
that interpretation lives in packver.versioning.ranges only.

Example:
    >>> parse_version("1.2.3") < parse_version("1.3.0")
    True
    >>> str(parse_version("2.0-beta"))
    '2.0.1'
    >>> parse_version("*").is_wildcard
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Any

from packver.exceptions import BadVersionString
from packver.logging import get_global_logger
from packver.versioning.encode import encode_segment
from packver.versioning.normalize import candidate_segments, normalize_text

__all__ = [
    "WILDCARD",
    "VersionPart",
    "NULL_PART",
    "Version",
    "parse_version",
]

WILDCARD = "*"


def _compare_padded(a: tuple[Any, ...], b: tuple[Any, ...], fill: Any) -> int:
    """Compare two sequences element-wise, padding the shorter with ``fill``.

    Returns -1, 0 or 1; the first differing position decides.
    """
    for x, y in zip_longest(a, b, fillvalue=fill):
        if x < y:
            return -1
        if x > y:
            return 1
    return 0


@dataclass(frozen=True, eq=False)
class VersionPart:
    """One dot-delimited numeric segment of a version.

    Attributes:
        components: Non-negative integers, most significant first.

    A part with no components is equal to an all-zero part of any length.
    """

    components: tuple[int, ...]

    def __post_init__(self) -> None:
        components = tuple(self.components)
        for c in components:
            if isinstance(c, bool) or not isinstance(c, int):
                raise TypeError(f"version component must be int, got {c!r}")
            if c < 0:
                raise ValueError(f"version component must be non-negative, got {c}")
        object.__setattr__(self, "components", components)

    def _cmp(self, other: VersionPart) -> int:
        return _compare_padded(self.components, other.components, 0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionPart):
            return NotImplemented
        return self._cmp(other) == 0

    def __lt__(self, other: VersionPart) -> bool:
        if not isinstance(other, VersionPart):
            return NotImplemented
        return self._cmp(other) < 0

    def __le__(self, other: VersionPart) -> bool:
        if not isinstance(other, VersionPart):
            return NotImplemented
        return self._cmp(other) <= 0

    def __gt__(self, other: VersionPart) -> bool:
        if not isinstance(other, VersionPart):
            return NotImplemented
        return self._cmp(other) > 0

    def __ge__(self, other: VersionPart) -> bool:
        if not isinstance(other, VersionPart):
            return NotImplemented
        return self._cmp(other) >= 0

    def __hash__(self) -> int:
        # Trailing zeros do not affect equality, so they must not affect hash.
        components = self.components
        while components and components[-1] == 0:
            components = components[:-1]
        return hash(components)

    def __str__(self) -> str:
        return ".".join(str(c) for c in self.components)

    def __repr__(self) -> str:
        return f"VersionPart({self.components!r})"


NULL_PART = VersionPart((0,))


@dataclass(frozen=True, eq=False)
class Version:
    """A parsed version: the original text plus its ordered parts.

    Attributes:
        text: Original input text, or "*" for the wildcard.
        parts: VersionParts in order; empty only for the wildcard.

    Instances should come from parse_version() / Version.parse(); direct
    construction is checked against the wildcard invariant.
    """

    text: str
    parts: tuple[VersionPart, ...] = ()

    def __post_init__(self) -> None:
        parts = tuple(self.parts)
        if (self.text == WILDCARD) != (not parts):
            raise ValueError(
                f"version text must be {WILDCARD!r} exactly when parts are empty "
                f"(text={self.text!r}, parts={len(parts)})"
            )
        for p in parts:
            if not isinstance(p, VersionPart):
                raise TypeError(f"version part must be VersionPart, got {p!r}")
        object.__setattr__(self, "parts", parts)

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse version text. See parse_version()."""
        return parse_version(text)

    @classmethod
    def wildcard(cls) -> Version:
        """Return the "any version" value."""
        return cls(WILDCARD, ())

    @property
    def is_wildcard(self) -> bool:
        return not self.parts

    def _cmp(self, other: Version) -> int:
        return _compare_padded(self.parts, other.parts, NULL_PART)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._cmp(other) == 0

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._cmp(other) < 0

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._cmp(other) <= 0

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._cmp(other) > 0

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._cmp(other) >= 0

    def __hash__(self) -> int:
        parts = self.parts
        while parts and parts[-1] == NULL_PART:
            parts = parts[:-1]
        return hash(tuple(hash(p) for p in parts))

    def __str__(self) -> str:
        return ".".join(str(p) for p in self.parts)

    def __repr__(self) -> str:
        return f"Version({self.text!r}, parts={[p.components for p in self.parts]!r})"


def parse_version(text: str) -> Version:
    """Parse a raw version string into a Version.

    Empty text and "*" yield the wildcard. Otherwise the text is
    normalized, split into segments, filtered and encoded; each surviving
    segment becomes one VersionPart.

    Args:
        text: Raw version text, in any case and with any delimiters.

    Returns:
        The parsed Version. Its ``text`` is the unmodified input.

    Raises:
        BadVersionString: If no segment survived validation.

    Example:
        >>> parse_version("1.0.0-rc.1").parts
        (VersionPart((1, 0, 0)), VersionPart((2, 1)))
    """
    if not text or text == WILDCARD:
        return Version.wildcard()

    normalized = normalize_text(text)
    segments = candidate_segments(normalized)
    if not segments:
        raise BadVersionString(text)

    parts = tuple(VersionPart(encode_segment(s)) for s in segments)
    get_global_logger().debug(
        "PARSE", f"{text!r} -> {normalized!r} -> {'-'.join(str(p) for p in parts)}"
    )
    return Version(text, parts)
