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

"""Public API return types for packver.

This module defines dataclasses for return values from public API functions
that work on manifests: validation and constraint checking.

All dataclasses are frozen (immutable) to prevent accidental mutation of
return values.

Example:
    Using result types:
        ```python
        from pathlib import Path
        from packver.core import check_manifest

        result = check_manifest(Path("packages.yaml"), {"libfoo": "1.4.2"})
        for check in result.checks:
            print(check.name, check.status)
        ```

Note:
    Only public API return types belong in this module. Domain types
    (Version, VersionRange) stay in packver.versioning.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

CheckStatus = Literal["satisfied", "unsatisfied", "missing", "error"]


@dataclass(frozen=True)
class ConstraintCheck:
    """Outcome of checking one package's candidate against its constraint.

    Attributes:
        name: Package name from the manifest.
        constraint: Range expression as written in the manifest.
        version: Candidate version text, or None if none was supplied.
        status: "satisfied", "unsatisfied", "missing" (no candidate) or
            "error" (candidate or constraint did not parse).
        error: Error message when status is "error", else None.
    """

    name: str
    constraint: str
    version: str | None
    status: CheckStatus
    error: str | None = None

    @property
    def satisfied(self) -> bool:
        return self.status == "satisfied"


@dataclass(frozen=True)
class CheckResult:
    """Result from checking candidates against a manifest.

    Attributes:
        manifest_path: String path to the manifest.
        checks: One ConstraintCheck per manifest package, in manifest order.
        unknown: Candidate names that the manifest does not list.
    """

    manifest_path: str
    checks: list[ConstraintCheck]
    unknown: list[str]

    @property
    def ok(self) -> bool:
        """True when every package has a candidate inside its range."""
        return all(c.satisfied for c in self.checks)


@dataclass(frozen=True)
class ValidationResult:
    """Result from validating a manifest.

    Attributes:
        status: Validation status ("valid" or "invalid").
        errors: List of error messages (empty if valid).
        warnings: List of warning messages.
        package_count: Number of packages in the manifest.
        manifest_path: String path to the validated manifest file.
    """

    status: str
    errors: list[str]
    warnings: list[str]
    package_count: int
    manifest_path: str
