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

"""Command-line interface for packver.

This module provides the main CLI entry point for the packver tool, offering
commands for inspecting how version strings parse, comparing versions,
testing range membership, and checking candidates against a manifest.

Commands:

    parse: Show how a version string is normalized and encoded
    compare: Compare two version strings
    contains: Test whether a version lies within a range
    validate: Validate manifest syntax and constraints
    check: Check candidate versions against a manifest

Example:
    Inspect a version string:
        ```bash
        $ packver parse 2.0.0-RC1+build_7
        ```

    Test range membership:
        ```bash
        $ packver contains "[1.0,2.0)" 1.5.3
        ```

    Check candidates against a manifest:
        ```bash
        $ packver check packages.yaml libfoo=1.4.2 libbar=3.0-rc1
        ```

Exit Codes:

- 0: Success (valid manifest, version within range, all candidates satisfied)
- 1: Error, invalid manifest, version outside range, or unsatisfied candidate

Note:
    The CLI uses argparse for command parsing (stdlib, zero dependencies).
    Each command has its own handler function (cmd_<command>).
    Debug mode implies verbose mode and shows every dropped segment.

"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import sys

from packver.core import check_manifest
from packver.exceptions import BadVersionString, PackverError, RangeSyntaxError
from packver.logging import get_logger, set_global_logger
from packver.validation import validate_manifest
from packver.versioning import compare_versions, parse_range, parse_version
from packver.versioning.normalize import normalize_text


def _configure_logger(args: argparse.Namespace) -> None:
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)


def _report_error(args: argparse.Namespace, err: Exception) -> int:
    print(f"Error: {err}")
    if args.verbose or args.debug:
        import traceback

        traceback.print_exc()
    return 1


def cmd_parse(args: argparse.Namespace) -> int:
    """Handler for 'packver parse' command.

    Prints the normalized text, the encoded parts, and the canonical
    rendering of a version string.

    Returns:
        Exit code (0 if the string parses, 1 otherwise).
    """
    _configure_logger(args)

    try:
        parsed = parse_version(args.version)
    except BadVersionString as err:
        return _report_error(args, err)

    print("=" * 70)
    print("PARSE RESULTS")
    print("=" * 70)
    print(f"Input:       {args.version!r}")
    if parsed.is_wildcard:
        print("Wildcard:    yes (any version)")
    else:
        print(f"Normalized:  {normalize_text(args.version)!r}")
        for idx, part in enumerate(parsed.parts):
            print(f"Part {idx}:      {list(part.components)}")
    print(f"Canonical:   {parsed}")
    print("=" * 70)
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Handler for 'packver compare' command.

    Returns:
        Exit code (0 when both versions parse, 1 otherwise).
    """
    _configure_logger(args)

    try:
        result = compare_versions(args.a, args.b)
    except BadVersionString as err:
        return _report_error(args, err)

    symbol = {-1: "<", 0: "==", 1: ">"}[result]
    print(f"{args.a} {symbol} {args.b}")
    return 0


def cmd_contains(args: argparse.Namespace) -> int:
    """Handler for 'packver contains' command.

    Returns:
        Exit code (0 if the version is within the range, 1 if it is outside
        or either argument fails to parse).
    """
    _configure_logger(args)

    try:
        version_range = parse_range(args.range)
        candidate = parse_version(args.version)
    except (BadVersionString, RangeSyntaxError) as err:
        return _report_error(args, err)

    if version_range.contains(candidate):
        print(f"[OK] {args.version} is within {version_range}")
        return 0
    print(f"[X] {args.version} is outside {version_range}")
    return 1


def cmd_validate(args: argparse.Namespace) -> int:
    """Handler for 'packver validate' command.

    Returns:
        Exit code (0 for a valid manifest, 1 for an invalid one).
    """
    _configure_logger(args)

    manifest_path = Path(args.manifest).resolve()
    print(f"Validating manifest: {manifest_path}")
    print()

    result = validate_manifest(manifest_path)

    print("=" * 70)
    print("VALIDATION RESULTS")
    print("=" * 70)
    print(f"Manifest:      {result.manifest_path}")
    print(f"Status:        {result.status.upper()}")
    print(f"Package Count: {result.package_count}")
    print()

    if result.warnings:
        print(f"Warnings ({len(result.warnings)}):")
        for warning in result.warnings:
            print(f"  [WARNING] {warning}")
        print()

    if result.errors:
        print(f"Errors ({len(result.errors)}):")
        for error in result.errors:
            print(f"  [X] {error}")
        print()

    print("=" * 70)

    if result.status == "valid":
        print()
        print("[SUCCESS] Manifest is valid!")
        return 0
    print()
    print(f"[FAILED] Manifest validation failed with {len(result.errors)} error(s).")
    return 1


def _parse_candidates(pairs: list[str]) -> dict[str, str]:
    candidates: dict[str, str] = {}
    for pair in pairs:
        name, sep, text = pair.partition("=")
        if not sep or not name:
            raise argparse.ArgumentTypeError(
                f"candidate must look like NAME=VERSION, got {pair!r}"
            )
        candidates[name] = text
    return candidates


def cmd_check(args: argparse.Namespace) -> int:
    """Handler for 'packver check' command.

    Returns:
        Exit code (0 when every manifest package has a candidate inside its
        constraint, 1 otherwise).
    """
    _configure_logger(args)

    manifest_path = Path(args.manifest).resolve()
    try:
        candidates = _parse_candidates(args.candidates)
        result = check_manifest(manifest_path, candidates)
    except argparse.ArgumentTypeError as err:
        return _report_error(args, err)
    except PackverError as err:
        return _report_error(args, err)

    print("=" * 70)
    print("CHECK RESULTS")
    print("=" * 70)
    for check in result.checks:
        marker = "[OK]" if check.satisfied else "[X]"
        line = f"  {marker} {check.name:<20} {check.constraint:<20} {check.version or '-'}"
        if check.status != "satisfied":
            line += f"  ({check.error or check.status})"
        print(line)
    print("=" * 70)

    if result.ok:
        print()
        print("[SUCCESS] All constraints satisfied!")
        return 0
    failed = sum(1 for c in result.checks if not c.satisfied)
    print()
    print(f"[FAILED] {failed} package(s) not satisfied.")
    return 1


def _add_output_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )


def _package_version() -> str:
    try:
        return version("packver")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with every subcommand registered."""
    parser = argparse.ArgumentParser(
        prog="packver",
        description="packver - version parsing and range checks for package constraints",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"packver {_package_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    parser_parse = subparsers.add_parser(
        "parse",
        help="Show how a version string is parsed",
        description="Normalize and encode a version string, printing each part.",
    )
    parser_parse.add_argument("version", help="Version string to parse")
    _add_output_flags(parser_parse)
    parser_parse.set_defaults(func=cmd_parse)

    parser_compare = subparsers.add_parser(
        "compare",
        help="Compare two version strings",
        description="Print whether A is older than, the same as, or newer than B.",
    )
    parser_compare.add_argument("a", help="First version string")
    parser_compare.add_argument("b", help="Second version string")
    _add_output_flags(parser_compare)
    parser_compare.set_defaults(func=cmd_compare)

    parser_contains = subparsers.add_parser(
        "contains",
        help="Test whether a version lies within a range",
        description="Exit 0 if VERSION lies within RANGE (e.g. '[1.0,2.0)'), else 1.",
    )
    parser_contains.add_argument("range", help="Range expression, e.g. '[1.0,2.0)'")
    parser_contains.add_argument("version", help="Version string to test")
    _add_output_flags(parser_contains)
    parser_contains.set_defaults(func=cmd_contains)

    parser_validate = subparsers.add_parser(
        "validate",
        help="Validate manifest syntax and constraints",
        description="Check a manifest for YAML errors, missing fields and bad range expressions.",
    )
    parser_validate.add_argument("manifest", help="Path to the manifest YAML file")
    _add_output_flags(parser_validate)
    parser_validate.set_defaults(func=cmd_validate)

    parser_check = subparsers.add_parser(
        "check",
        help="Check candidate versions against a manifest",
        description="Check NAME=VERSION candidates against each package's constraint.",
    )
    parser_check.add_argument("manifest", help="Path to the manifest YAML file")
    parser_check.add_argument(
        "candidates",
        nargs="*",
        metavar="NAME=VERSION",
        help="Candidate version for a package",
    )
    _add_output_flags(parser_check)
    parser_check.set_defaults(func=cmd_check)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the packver CLI.

    This function is registered as the 'packver' console script in pyproject.toml.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
