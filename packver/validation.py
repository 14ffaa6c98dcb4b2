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

"""Manifest validation module.

This module checks a constraints manifest without needing any candidate
versions. It is useful for quick feedback while editing manifests and as a
CI pre-check.

Validation Checks:

- YAML syntax is valid and the manifest loads (defaults merged)
- apiVersion is present and supported
- packages is a non-empty list of mappings
- Each package has a non-empty string name, and names are unique
- Each constraint is a string that parses as a range expression

Example:
    Validate a manifest and handle results:
        ```python
        from pathlib import Path
        from packver.validation import validate_manifest

        result = validate_manifest(Path("packages.yaml"))
        if result.status == "valid":
            print(f"Manifest is valid with {result.package_count} package(s)")
        else:
            for error in result.errors:
                print(f"Error: {error}")
        ```

"""

from __future__ import annotations

from pathlib import Path

from packver.config import SUPPORTED_API_VERSIONS, load_manifest
from packver.exceptions import BadVersionString, ConfigError, RangeSyntaxError
from packver.logging import get_global_logger
from packver.results import ValidationResult
from packver.versioning import parse_range

__all__ = ["validate_manifest"]


def validate_manifest(manifest_path: Path) -> ValidationResult:
    """Validate a manifest file.

    Never raises for manifest problems; every problem found is collected
    into the result instead.

    Args:
        manifest_path: Path to the manifest YAML file to validate.

    Returns:
        ValidationResult with status "valid" or "invalid", the collected
        errors and warnings, and the number of packages found.
    """
    logger = get_global_logger()
    errors: list[str] = []
    warnings: list[str] = []

    def _result(package_count: int = 0) -> ValidationResult:
        status = "valid" if not errors else "invalid"
        return ValidationResult(
            status=status,
            errors=errors,
            warnings=warnings,
            package_count=package_count,
            manifest_path=str(manifest_path),
        )

    logger.verbose("VALIDATE", f"Validating manifest: {manifest_path}")

    try:
        manifest = load_manifest(manifest_path)
    except ConfigError as err:
        errors.append(str(err))
        return _result()

    logger.verbose("VALIDATE", "[OK] YAML syntax is valid")

    if "apiVersion" not in manifest:
        errors.append("Missing required field: apiVersion")
    else:
        api_version = manifest["apiVersion"]
        if not isinstance(api_version, str):
            errors.append("apiVersion must be a string")
        elif api_version not in SUPPORTED_API_VERSIONS:
            warnings.append(
                f"apiVersion '{api_version}' may not be supported "
                f"(expected: {', '.join(SUPPORTED_API_VERSIONS)})"
            )

    packages = manifest["packages"]
    if not packages:
        errors.append("Field 'packages' must contain at least one package")
        return _result()

    seen: set[str] = set()
    for idx, entry in enumerate(packages):
        prefix = f"packages[{idx}]"

        name = entry.get("name")
        if name is None:
            errors.append(f"{prefix}: Missing required field: name")
        elif not isinstance(name, str) or not name.strip():
            errors.append(f"{prefix}: Field 'name' must be a non-empty string")
        elif name in seen:
            errors.append(f"{prefix}: Duplicate package name '{name}'")
        else:
            seen.add(name)
            prefix = f"{prefix} ({name})"

        constraint = entry["constraint"]
        if not isinstance(constraint, str):
            errors.append(f"{prefix}: Field 'constraint' must be a string")
            continue
        try:
            parsed = parse_range(constraint)
        except (RangeSyntaxError, BadVersionString) as err:
            errors.append(f"{prefix}: {err}")
            continue

        if parsed.unbounded and constraint.strip() not in ("", "*"):
            warnings.append(f"{prefix}: constraint '{constraint}' allows any version")
        logger.verbose("VALIDATE", f"[OK] {prefix}: {parsed}")

    result = _result(len(packages))
    if result.status == "valid":
        logger.verbose("VALIDATE", "[OK] Manifest is valid!")
    else:
        logger.verbose("VALIDATE", f"[ERROR] Manifest has {len(errors)} error(s)")
    return result
