"""
packver - version parsing and range checks for package constraints

A Python library and CLI that turns inconsistent real-world version strings
into a canonical, strictly ordered form and decides whether a candidate
release satisfies a dependency constraint.

packver provides:
  - Normalization of case, delimiters and maturity keywords (alpha, beta,
    rc, snapshot, release)
  - Noise filtering for commit refs and text-only segments
  - Total ordering of versions with zero padding ("1.2" == "1.2.0")
  - Interval ranges with inclusive/exclusive and unbounded sides
  - YAML constraint manifests with layered organization defaults

Quick Start
-----------
Inspect how a version string parses:

    $ packver parse 2.0.0-RC1+build_7

Test range membership:

    $ packver contains "[1.0,2.0)" 1.5.3

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
core : module
    Checking candidate versions against a manifest.
config : package
    YAML manifest loading and merging.
versioning : package
    Version parsing, ordering and ranges (pure, no I/O).
validation : module
    Manifest validation.

Public API
----------
    from packver.versioning import parse_version, parse_range
    from packver.core import check_manifest
    from packver.validation import validate_manifest
    from packver.config import load_manifest
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"
__description__ = "Version parsing and range checks for package constraints"

from packver.config import load_manifest
from packver.core import check_manifest
from packver.exceptions import BadVersionString
from packver.validation import validate_manifest
from packver.versioning import (
    Version,
    VersionPart,
    VersionRange,
    VersionRangePart,
    parse_range,
    parse_version,
)

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "BadVersionString",
    "Version",
    "VersionPart",
    "VersionRange",
    "VersionRangePart",
    "check_manifest",
    "load_manifest",
    "parse_range",
    "parse_version",
    "validate_manifest",
]
