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

"""Encode a validated segment into integer components.

Every letter left in a segment is folded into its 1-based alphabet rank
and written in place, with no separator, so the segment becomes a purely
numeric dotted string that splits into integers.

Steps (in order):

1. Strip word-like dotted prefixes: one or more letters followed by one or
   more dots ("build.5" -> "5").
2. Letters directly after a digit become their rank ("2b" -> "22").
3. Every remaining letter becomes its rank ("v1" -> "221").
4. Split on "." and keep the pieces that parse as non-negative integers.

Note:
    Because ranks are concatenated onto neighbouring digits, a short
    letter suffix can outrank a larger plain number: "1.9z" encodes to
    (1, 926), which is greater than "1.100" -> (1, 100).

Example:
    >>> encode_segment("1.2.3")
    (1, 2, 3)
    >>> encode_segment("1.0b")
    (1, 2)
    >>> encode_segment("build.5")
    (5,)
"""

from __future__ import annotations

import re

__all__ = ["letter_rank", "encode_segment"]

_WORD_PREFIX_RE = re.compile(r"[a-z]+\.+")
_LETTER_AFTER_DIGIT_RE = re.compile(r"(?<=[0-9])[a-z]")
_LETTER_RE = re.compile(r"[a-z]")


def letter_rank(letter: str) -> int:
    """Return the 1-based alphabet rank of a lowercase ASCII letter."""
    if len(letter) != 1 or not "a" <= letter <= "z":
        raise ValueError(f"expected a single lowercase letter, got {letter!r}")
    return ord(letter) - ord("a") + 1


def _rank_of_match(m: re.Match[str]) -> str:
    return str(letter_rank(m.group(0)))


def encode_segment(segment: str) -> tuple[int, ...]:
    """Convert one accepted segment into a tuple of integer components.

    Args:
        segment: A segment that passed noise and character-set validation.

    Returns:
        The integer components, in order. Pieces that do not parse (for
        example the empty pieces around doubled dots) are discarded, so
        the result may be empty.
    """
    text = _WORD_PREFIX_RE.sub("", segment)
    text = _LETTER_AFTER_DIGIT_RE.sub(_rank_of_match, text)
    text = _LETTER_RE.sub(_rank_of_match, text)

    components: list[int] = []
    for piece in text.split("."):
        if piece.isdigit():
            components.append(int(piece))
    return tuple(components)
