"""
Version parsing, ordering and range membership for packver.

This package turns inconsistent real-world version strings into a
canonical, strictly ordered representation and answers "does version V
satisfy range R" queries. Everything here is pure: no file or network I/O.

Modules
-------
normalize : module
    Lowercasing, maturity keyword rewriting, delimiter unification and
    segment validation.
encode : module
    Folding letters into integer components.
version : module
    VersionPart and Version value types and the parse_version() entry point.
ranges : module
    VersionRangePart, VersionRange and the parse_range() expression parser.
keys : module
    Convenience comparison helpers (compare_versions, satisfies, ...).

Public API
----------
parse_version : function
    Parse version text into a Version (raises BadVersionString).
Version, VersionPart : dataclass
    Immutable, totally ordered value types.
VersionRange, VersionRangePart : dataclass
    Interval of versions with a contains() membership test.
parse_range : function
    Parse "[1.0,2.0)"-style range expressions.
compare_versions : function
    Compare two version strings, returning -1, 0, or 1.
satisfies : function
    Check version text against a range expression.
latest_satisfying : function
    Pick the highest candidate a single range allows.

Maturity Ranks
--------------
Pre-release keywords are rewritten to digits so they sort alongside
ordinary numbers: alpha (0) < beta (1) < pre/pre-release/rc/snapshot (2)
< release (3).

Examples
--------
    >>> from packver.versioning import parse_version, parse_range
    >>> parse_version("1.2.3") < parse_version("1.3.0")
    True
    >>> parse_version("1.5.0") in parse_range("[1.0.0,2.0.0)")
    True

Notes
-----
- "*" (or "") parses to the wildcard Version. It compares as zero, but as
  a range boundary it means "no limit".
- Segments that look like words or commit refs ("final", "g1a2b3c") are
  ignored; a string made only of those raises BadVersionString.
"""

from .keys import (
    compare_versions,
    is_newer,
    latest_satisfying,
    satisfies,
    version_key,
)
from .ranges import VersionRange, VersionRangePart, parse_range
from .version import NULL_PART, WILDCARD, Version, VersionPart, parse_version

__all__ = [
    "NULL_PART",
    "WILDCARD",
    "Version",
    "VersionPart",
    "VersionRange",
    "VersionRangePart",
    "compare_versions",
    "is_newer",
    "latest_satisfying",
    "parse_range",
    "parse_version",
    "satisfies",
    "version_key",
]
