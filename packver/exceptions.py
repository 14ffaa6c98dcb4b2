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

"""Exception hierarchy for packver.

This module defines a custom exception hierarchy that allows library users
to distinguish between different types of errors:

- BadVersionString: A version string had no usable segment
- RangeSyntaxError: A range expression is malformed
- ConfigError: Manifest-related errors (YAML parse, missing fields)

All exceptions inherit from PackverError, allowing users to catch all packver
errors with a single except clause if needed. The two parsing errors also
inherit from ValueError, since they describe a bad input value.

Example:
    Catching specific error types:
        ```python
        from packver.exceptions import BadVersionString
        from packver.versioning import parse_version

        try:
            version = parse_version("abcdef")
        except BadVersionString as e:
            print(f"Bad version: {e.text}")
        ```

    Catching all packver errors:
        ```python
        from packver.exceptions import PackverError

        try:
            result = check_manifest(Path("packages.yaml"), {"libfoo": "1.2"})
        except PackverError as e:
            print(f"packver error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "PackverError",
    "BadVersionString",
    "RangeSyntaxError",
    "ConfigError",
]


class PackverError(Exception):
    """Base exception for all packver errors.

    All packver-specific exceptions inherit from this class, allowing users
    to catch all packver errors with a single except clause if needed.
    """

    pass


class BadVersionString(PackverError, ValueError):
    """Raised when a version string yields no acceptable segment.

    Parsing drops noise segments (text-only words, commit refs) and
    segments with characters outside ``[a-z0-9.]``. When nothing is left,
    this error is raised once, after every segment has been examined.

    Attributes:
        text: The original, unmodified input.

    Example:
        ```python
        try:
            parse_version("abcdef")
        except BadVersionString as e:
            print(e)  # Invalid version format: 'abcdef'
        ```
    """

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid version format: '{text}'")


class RangeSyntaxError(PackverError, ValueError):
    """Raised when a range expression cannot be parsed.

    Attributes:
        expression: The range expression as given.
        reason: Short description of what is wrong with it.
    """

    def __init__(self, expression: str, reason: str) -> None:
        self.expression = expression
        self.reason = reason
        super().__init__(f"Invalid range expression '{expression}': {reason}")


class ConfigError(PackverError):
    """Raised for manifest-related errors.

    This exception is raised when there are problems with:

    - YAML parsing (syntax errors, empty files)
    - Missing manifest or defaults files
    - Invalid manifest structure (top level not a mapping, packages
        not a list)

    Example:
        Catching configuration errors:
            ```python
            from packver.exceptions import ConfigError

            try:
                manifest = load_manifest(Path("invalid.yaml"))
            except ConfigError as e:
                print(f"Config error: {e}")
            ```
    """

    pass
