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

"""
Constraints manifest loading and merging for packver.

A manifest lists packages and the version range each one must satisfy.
Organization-wide defaults can live in a shared file that every manifest
below it picks up automatically.

Configuration Layers
--------------------
1. **Organization defaults** (defaults/org.yaml)
   - Found by walking upward from the manifest's directory
   - Typically sets defaults.constraint for packages that omit one

2. **Manifest** (any YAML file)
   - Always required; lists the packages
   - Overrides organization defaults

Merge Behavior
--------------
Deep merge with "last wins" semantics:
  - **Dicts**: Recursively merged (keys from overlay override base)
  - **Lists**: Completely replaced (NOT appended/extended)
  - **Scalars**: Overwritten

After merging, every package entry without a ``constraint`` receives
``defaults.constraint`` ("*" when no default is configured).

Manifest Format
---------------
    apiVersion: packver/v1
    defaults:
      constraint: "*"
    packages:
      - name: libfoo
        constraint: "[1.0,2.0)"
      - name: libbar

Error Handling
--------------
- ConfigError: missing file, YAML parse error, empty file, top level not a
  mapping, or ``packages`` not a list of mappings
- All errors are chained with "from err" for better debugging

Examples
--------
    >>> from pathlib import Path
    >>> from packver.config import load_manifest
    >>> cfg = load_manifest(Path("manifests/app.yaml"))
    >>> cfg["packages"][0]["constraint"]
    '[1.0,2.0)'
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from packver.exceptions import ConfigError
from packver.logging import get_global_logger
from packver.versioning import WILDCARD

SUPPORTED_API_VERSIONS = ("packver/v1",)

# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """Load a YAML file and return the parsed Python object.

    Raises:
        ConfigError: When the file does not exist, is not valid YAML, or is empty.
    """
    if not p.exists():
        raise ConfigError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge two dicts with "overlay wins".

    Rules:
      - dict + dict -> deep merge
      - list + list -> overlay REPLACES base (not concatenated)
      - everything else -> overlay overwrites base

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


def _find_defaults_root(start_dir: Path) -> Path | None:
    """Walk upward from 'start_dir' looking for 'defaults/org.yaml'.

    Returns the 'defaults' directory, or None if not found.
    """
    for parent in [start_dir] + list(start_dir.parents):
        candidate = parent / "defaults" / "org.yaml"
        if candidate.exists():
            return parent / "defaults"
    return None


def _apply_default_constraint(cfg: dict[str, Any]) -> None:
    """Fill in ``constraint`` for packages that omit it. Modifies cfg in place."""
    defaults = cfg.get("defaults") or {}
    if not isinstance(defaults, dict):
        raise ConfigError("'defaults' must be a mapping")
    default_constraint = defaults.get("constraint", WILDCARD)

    packages = cfg.setdefault("packages", [])
    if not isinstance(packages, list):
        raise ConfigError("'packages' must be a list")
    for i, entry in enumerate(packages):
        if not isinstance(entry, dict):
            raise ConfigError(f"packages[{i}] must be a mapping, got {type(entry).__name__}")
        entry.setdefault("constraint", default_constraint)


def _log_yaml_content(data: dict[str, Any], indent: int = 0) -> None:
    """Dump YAML content through the debug logger."""
    logger = get_global_logger()
    yaml_str = yaml.dump(data, default_flow_style=False, sort_keys=False)
    for line in yaml_str.split("\n"):
        if line.strip():
            logger.debug("CONFIG", " " * indent + line)


# -------------------------------
# Public API
# -------------------------------


def load_manifest(manifest_path: Path) -> dict[str, Any]:
    """Load and merge the effective configuration for a manifest.

    Steps
      1) Read manifest YAML.
      2) Find defaults root by scanning upwards for 'defaults/org.yaml'.
      3) Merge: org defaults -> manifest (dicts deep-merge, lists replace).
      4) Fill missing package constraints from defaults.constraint.

    Args:
        manifest_path: Path to the manifest YAML file.

    Returns:
        The merged configuration dict. ``packages`` is always present and
        every entry carries a ``constraint`` string.

    Raises:
        ConfigError: On missing files, YAML errors, or invalid structure.
    """
    logger = get_global_logger()
    manifest_path = manifest_path.resolve()

    logger.verbose("CONFIG", f"Loading manifest: {manifest_path}")
    manifest_obj = _load_yaml_file(manifest_path)
    if not isinstance(manifest_obj, dict):
        raise ConfigError(f"top-level YAML must be a mapping (dict): {manifest_path}")

    merged: dict[str, Any] = {}
    layers_merged = 0

    defaults_root = _find_defaults_root(manifest_path.parent)
    if defaults_root is not None:
        org_path = defaults_root / "org.yaml"
        logger.verbose("CONFIG", f"Found defaults: {org_path}")
        org_defaults = _load_yaml_file(org_path)
        if not isinstance(org_defaults, dict):
            raise ConfigError(f"top-level YAML must be a mapping (dict): {org_path}")
        logger.debug("CONFIG", "--- Content from org.yaml ---")
        _log_yaml_content(org_defaults)
        merged = _deep_merge_dicts(merged, org_defaults)
        layers_merged += 1

    logger.debug("CONFIG", f"--- Content from {manifest_path.name} ---")
    _log_yaml_content(manifest_obj)
    merged = _deep_merge_dicts(merged, manifest_obj)
    layers_merged += 1
    logger.verbose("CONFIG", f"Deep merged {layers_merged} layer(s)")

    _apply_default_constraint(merged)

    api_version = merged.get("apiVersion")
    if api_version not in SUPPORTED_API_VERSIONS:
        logger.warning(
            "CONFIG",
            f"apiVersion {api_version!r} is not one of {', '.join(SUPPORTED_API_VERSIONS)}",
        )

    logger.verbose("CONFIG", f"Manifest lists {len(merged['packages'])} package(s)")
    return merged
