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

"""Output channel for packver library code.

Parsing, range checks and manifest handling report what they do through a
Logger instead of calling print(). Nothing is printed unless a caller
installs a logger, so the version engine can be embedded quietly; the CLI
installs a stdout logger from its -v/--debug flags.

Prefixes name the layer that is talking:

- PARSE: segments dropped while parsing a version string
- RANGE: range expressions and candidates rejected by a range
- COMPARE: results of string-level comparisons
- CONFIG: manifest and defaults loading
- VALIDATE, CHECK: manifest validation and candidate checks

Example:
    Show every dropped segment while parsing:
        ```python
        from packver.logging import get_logger, set_global_logger
        from packver.versioning import parse_version

        set_global_logger(get_logger(debug=True))
        parse_version("2.1.0-g1a2b3c")
        # [PARSE] Dropped noise segment 'g1a2b3c'
        ```
"""

from __future__ import annotations

from typing import Protocol


class Logger(Protocol):
    """What packver needs from a logger.

    ``step`` and ``warning`` are for messages a CLI user should always
    see; ``verbose`` and ``debug`` may be filtered by the implementation.
    """

    def step(self, step: int, total: int, message: str) -> None: ...

    def warning(self, prefix: str, message: str) -> None: ...

    def verbose(self, prefix: str, message: str) -> None: ...

    def debug(self, prefix: str, message: str) -> None: ...


class DefaultLogger:
    """Print to stdout as "[PREFIX] message".

    Args:
        verbose: Show verbose messages.
        debug: Show debug messages too; turns verbose on as well.
    """

    def __init__(self, verbose: bool = False, debug: bool = False) -> None:
        self._show_verbose = verbose or debug
        self._show_debug = debug

    def step(self, step: int, total: int, message: str) -> None:
        print(f"[{step}/{total}] {message}")

    def warning(self, prefix: str, message: str) -> None:
        print(f"[{prefix}] WARNING: {message}")

    def verbose(self, prefix: str, message: str) -> None:
        if self._show_verbose:
            print(f"[{prefix}] {message}")

    def debug(self, prefix: str, message: str) -> None:
        if self._show_debug:
            print(f"[{prefix}] {message}")


class SilentLogger:
    """Discard everything. Installed by default."""

    def step(self, step: int, total: int, message: str) -> None:
        pass

    def warning(self, prefix: str, message: str) -> None:
        pass

    def verbose(self, prefix: str, message: str) -> None:
        pass

    def debug(self, prefix: str, message: str) -> None:
        pass


_current: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Build a stdout logger; see DefaultLogger for the flags."""
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Return the logger library code writes to."""
    return _current


def set_global_logger(logger: Logger) -> None:
    """Route all library output to ``logger``.

    The setting is process-wide. Tests that change it restore the previous
    logger afterwards (see the ``restore_global_logger`` fixture).
    """
    global _current
    _current = logger
