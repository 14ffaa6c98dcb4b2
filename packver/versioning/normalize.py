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

"""Text normalization and segmentation for version strings.

This module turns raw version text into the list of candidate segments
that the encoder understands. It does NOT build Version objects; see
packver.versioning.version for that.

Normalization (applied in this exact order):

1. Lowercase the whole string.
2. Rewrite maturity keywords to rank digits, longest first so that
   "pre-release" is consumed before "pre" and "release":
   alpha -> 0, beta -> 1, pre-release/pre/rc/snapshot -> 2, release -> 3.
3. Unify delimiters: "+", "_" and ":" all become "-".

Segmentation then splits on "-" and keeps only segments that are neither
noise (text-only words, commit refs) nor contain characters outside
``[a-z0-9.]``.

Example:
    >>> normalize_text("1.0.0-RC+build_5")
    '1.0.0-2-build-5'
    >>> candidate_segments("1.0.0-2-build-5")
    ['1.0.0', '2', '5']
"""

from __future__ import annotations

import re

from packver.logging import get_global_logger

__all__ = [
    "MATURITY_KEYWORDS",
    "normalize_text",
    "split_segments",
    "is_noise_segment",
    "is_valid_segment",
    "candidate_segments",
]

# Order matters: each pair is applied to the whole string before the next.
MATURITY_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("alpha", "0"),
    ("beta", "1"),
    ("pre-release", "2"),
    ("pre", "2"),
    ("rc", "2"),
    ("snapshot", "2"),
    ("release", "3"),
)

_DELIMITERS = ("+", "_", ":")
_SEGMENT_SEP = "-"

# Whole segment is [digits][letters][alphanumerics], e.g. "abcdef", "3a4b",
# "g1a2b3c". A dot anywhere means the segment carries numeric structure.
_NOISE_RE = re.compile(r"[0-9]*[a-z]+[0-9a-z]*")
_CHARSET_RE = re.compile(r"[a-z0-9.]+")


def normalize_text(text: str) -> str:
    """Lowercase, rewrite maturity keywords and unify delimiters."""
    out = text.lower()
    for keyword, rank in MATURITY_KEYWORDS:
        out = out.replace(keyword, rank)
    for delimiter in _DELIMITERS:
        out = out.replace(delimiter, _SEGMENT_SEP)
    return out


def split_segments(normalized: str) -> list[str]:
    """Split normalized text on "-" and drop empty segments."""
    return [s for s in normalized.split(_SEGMENT_SEP) if s]


def is_noise_segment(segment: str) -> bool:
    """Return True for text-only or commit-ref-like segments.

    A segment is noise when it consists entirely of an optional run of
    digits, then at least one letter, then optional letters/digits through
    the end. Such segments contribute nothing to the version.

    Examples:
        >>> is_noise_segment("abcdef")
        True
        >>> is_noise_segment("g1a2b3c")
        True
        >>> is_noise_segment("1.0a")
        False
        >>> is_noise_segment("123")
        False
    """
    return _NOISE_RE.fullmatch(segment) is not None


def is_valid_segment(segment: str) -> bool:
    """Return True if every character is a lowercase letter, digit or '.'."""
    return _CHARSET_RE.fullmatch(segment) is not None


def candidate_segments(normalized: str) -> list[str]:
    """Return the segments of ``normalized`` that survive validation.

    Rejected segments are dropped silently (with a debug log); deciding
    whether an empty result is an error is left to the caller.
    """
    logger = get_global_logger()
    accepted: list[str] = []
    for segment in split_segments(normalized):
        if is_noise_segment(segment):
            logger.debug("PARSE", f"Dropped noise segment {segment!r}")
            continue
        if not is_valid_segment(segment):
            logger.debug("PARSE", f"Dropped segment with invalid chars {segment!r}")
            continue
        accepted.append(segment)
    return accepted
