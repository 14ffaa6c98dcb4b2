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

"""Version ranges: two boundaries and a membership test.

Each side of a VersionRange is a VersionRangePart (a boundary Version and
an inclusive flag). A side whose boundary is the wildcard Version is
unconstrained, whatever its inclusive flag says. This is the only place
where the wildcard means "any"; plain Version comparison treats it as 0.

Range expressions use interval notation, the same text str() produces:

    "*"            any version
    "[1.0,2.0)"    1.0 <= v < 2.0
    "(1.0,*]"      v > 1.0
    "1.4.2"        exactly 1.4.2 (same as "[1.4.2,1.4.2]")

Boundaries render by joining their parts with ".", so a boundary made of
several parts ("1.0-beta") reads back as a single part ("1.0.1").

Example:
    >>> r = parse_range("[1.0.0,2.0.0)")
    >>> r.contains(parse_version("1.5.0"))
    True
    >>> parse_version("2.0.0") in r
    False
    >>> str(r)
    '[1.0.0,2.0.0)'
"""

from __future__ import annotations

from dataclasses import dataclass

from packver.exceptions import RangeSyntaxError
from packver.logging import get_global_logger
from packver.versioning.version import WILDCARD, Version, parse_version

__all__ = ["VersionRangePart", "VersionRange", "parse_range"]

_OPEN = {"[": True, "(": False}
_CLOSE = {"]": True, ")": False}


@dataclass(frozen=True, eq=False)
class VersionRangePart:
    """One side of a range.

    Attributes:
        boundary: Limit version; the wildcard means no limit on this side.
        inclusive: Whether the boundary itself is inside the range.

    Two unbounded sides are equal whatever their inclusive flags. An
    unbounded side never equals a side bounded at "0", although the
    wildcard and "0" compare equal as plain versions.
    """

    boundary: Version
    inclusive: bool = True

    @property
    def unbounded(self) -> bool:
        return self.boundary.text == WILDCARD

    def _key(self) -> tuple[bool, bool | None, Version | None]:
        if self.unbounded:
            return (True, None, None)
        return (False, self.inclusive, self.boundary)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionRangePart):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def _render(self) -> str:
        return WILDCARD if self.unbounded else str(self.boundary)


_ANY_SIDE = VersionRangePart(Version.wildcard(), False)


@dataclass(frozen=True)
class VersionRange:
    """A half-open, closed or open interval of versions.

    Attributes:
        lower: Lower boundary.
        upper: Upper boundary.
    """

    lower: VersionRangePart = _ANY_SIDE
    upper: VersionRangePart = _ANY_SIDE

    @classmethod
    def any(cls) -> VersionRange:
        """Return the range that contains every version."""
        return cls(_ANY_SIDE, _ANY_SIDE)

    @classmethod
    def exact(cls, version: Version) -> VersionRange:
        """Return the closed range containing only ``version``."""
        side = VersionRangePart(version, True)
        return cls(side, side)

    @property
    def unbounded(self) -> bool:
        return self.lower.unbounded and self.upper.unbounded

    def contains(self, version: Version) -> bool:
        """Return True if ``version`` lies within both boundaries."""
        lower, upper = self.lower, self.upper

        if lower.unbounded:
            above = True
        elif lower.inclusive:
            above = lower.boundary <= version
        else:
            above = lower.boundary < version

        if upper.unbounded:
            below = True
        elif upper.inclusive:
            below = upper.boundary >= version
        else:
            below = upper.boundary > version

        return above and below

    def __contains__(self, version: object) -> bool:
        if not isinstance(version, Version):
            raise TypeError(
                f"VersionRange membership requires a Version, got {type(version).__name__}"
            )
        return self.contains(version)

    def __str__(self) -> str:
        if self.unbounded:
            return WILDCARD
        left = "[" if self.lower.inclusive else "("
        right = "]" if self.upper.inclusive else ")"
        return f"{left}{self.lower._render()},{self.upper._render()}{right}"


def _parse_bound(text: str, inclusive: bool) -> VersionRangePart:
    # parse_version maps "" and "*" to the wildcard.
    return VersionRangePart(parse_version(text.strip()), inclusive)


def parse_range(expression: str) -> VersionRange:
    """Parse an interval-notation range expression.

    Args:
        expression: "*", "", a bare version, or "[L,U]" with either bracket
            style on each side. L or U may be "*" or empty for no limit.

    Returns:
        The parsed VersionRange.

    Raises:
        RangeSyntaxError: If brackets or the comma separator are wrong.
        BadVersionString: If a boundary is not a usable version.
    """
    text = expression.strip()
    if not text or text == WILDCARD:
        return VersionRange.any()

    first, last = text[0], text[-1]
    if first not in _OPEN and last not in _CLOSE:
        if "," in text:
            raise RangeSyntaxError(expression, "missing brackets around bounds")
        return VersionRange.exact(parse_version(text))

    if first not in _OPEN:
        raise RangeSyntaxError(expression, "expected '[' or '(' at start")
    if last not in _CLOSE:
        raise RangeSyntaxError(expression, "expected ']' or ')' at end")

    bounds = text[1:-1].split(",")
    if len(bounds) != 2:
        raise RangeSyntaxError(
            expression, f"expected exactly one ',' between bounds, found {len(bounds) - 1}"
        )

    result = VersionRange(
        _parse_bound(bounds[0], _OPEN[first]),
        _parse_bound(bounds[1], _CLOSE[last]),
    )
    get_global_logger().debug("RANGE", f"{expression!r} -> {result}")
    return result
