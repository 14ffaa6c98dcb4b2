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

"""Manifest loading for packver.

Manifests are YAML files listing packages and their version constraints,
optionally layered on top of organization defaults (defaults/org.yaml,
found by walking upward from the manifest).

Public API:

- load_manifest: Load and merge configuration for a manifest

Example:
    Basic usage:

        from pathlib import Path
        from packver.config import load_manifest

        config = load_manifest(Path("manifests/app.yaml"))
        for entry in config["packages"]:
            print(entry["name"], entry["constraint"])

"""

from .loader import SUPPORTED_API_VERSIONS, load_manifest

__all__ = ["SUPPORTED_API_VERSIONS", "load_manifest"]
