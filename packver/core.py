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

"""Core orchestration for packver.

This module ties manifest loading to the version engine: given a manifest
and a set of candidate versions (for example, the versions a package index
currently offers), it reports which packages have a candidate inside their
constraint.

Design Principles:

- Each function has a single, clear responsibility
- Functions return structured data (dataclasses) for easy testing
- A bad candidate or constraint is reported per package; only manifest
  loading problems (ConfigError) are raised
- Each package is checked against its own single range; choosing one
  version that satisfies several ranges at once is not attempted

Example:
    Programmatic usage:
        ```python
        from pathlib import Path
        from packver.core import check_manifest

        result = check_manifest(
            Path("packages.yaml"),
            {"libfoo": "1.4.2", "libbar": "3.0-rc1"},
        )
        print(f"All satisfied: {result.ok}")
        ```

"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from packver.config import load_manifest
from packver.exceptions import BadVersionString, RangeSyntaxError
from packver.logging import get_global_logger
from packver.results import CheckResult, ConstraintCheck
from packver.versioning import parse_range, parse_version

__all__ = ["check_candidate", "check_manifest"]


def check_candidate(name: str, constraint: Any, version: str | None) -> ConstraintCheck:
    """Check one candidate version against one constraint.

    Args:
        name: Package name (for reporting only).
        constraint: Range expression from the manifest.
        version: Candidate version text, or None when there is no candidate.

    Returns:
        A ConstraintCheck. Parse failures become status "error".
    """
    logger = get_global_logger()
    constraint_text = constraint if isinstance(constraint, str) else str(constraint)

    if not isinstance(constraint, str):
        return ConstraintCheck(
            name, constraint_text, version, "error", "constraint must be a string"
        )
    if version is None:
        logger.verbose("CHECK", f"{name}: no candidate version")
        return ConstraintCheck(name, constraint_text, None, "missing")

    try:
        version_range = parse_range(constraint)
        candidate = parse_version(version)
    except (RangeSyntaxError, BadVersionString) as err:
        logger.verbose("CHECK", f"{name}: {err}")
        return ConstraintCheck(name, constraint_text, version, "error", str(err))

    if version_range.contains(candidate):
        logger.verbose("CHECK", f"{name}: {version} is within {version_range}")
        return ConstraintCheck(name, constraint_text, version, "satisfied")
    logger.verbose("CHECK", f"{name}: {version} is outside {version_range}")
    return ConstraintCheck(name, constraint_text, version, "unsatisfied")


def check_manifest(manifest_path: Path, candidates: Mapping[str, str]) -> CheckResult:
    """Check candidate versions against every package in a manifest.

    Args:
        manifest_path: Path to the manifest YAML file.
        candidates: Mapping of package name to candidate version text.

    Returns:
        CheckResult with one ConstraintCheck per manifest package, in
        manifest order, plus the candidate names the manifest does not list.

    Raises:
        ConfigError: If the manifest cannot be loaded.
    """
    logger = get_global_logger()

    logger.step(1, 2, "Loading manifest...")
    manifest = load_manifest(manifest_path)

    logger.step(2, 2, "Checking candidates...")
    checks: list[ConstraintCheck] = []
    listed: set[str] = set()
    for entry in manifest["packages"]:
        name = entry.get("name")
        if not isinstance(name, str):
            name = ""
        listed.add(name)
        checks.append(check_candidate(name, entry["constraint"], candidates.get(name)))

    unknown = [name for name in candidates if name not in listed]
    for name in unknown:
        logger.warning("CHECK", f"Candidate '{name}' is not listed in the manifest")

    return CheckResult(
        manifest_path=str(manifest_path),
        checks=checks,
        unknown=unknown,
    )
