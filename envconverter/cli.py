#!/usr/bin/env python3
"""
EnvConverter CLI

Command-line interface for converting .env files into spreadsheet-friendly
formats. Two argument conventions are provided over the same engine:

    envconverter <input-file> [-o OUTPUT] [-f FORMAT]    # flag style
    env-parser <input-file> [OUTPUT] [-f FORMAT]         # positional style

Options:
    -o, --output PATH    Output file path (flag style only)
    -f, --format TYPE    Output format: csv | tsv | json | md (default: csv)
    --formats            Show all supported output formats
    -h, --help           Show help
    -v, --version        Show version
"""

import argparse
import sys
from dataclasses import dataclass
from typing import Optional

from . import __version__
from .core import EnvConverter
from .models import InvalidFormatError


PROG = "envconverter"

DESCRIPTION = (
    "envconverter - Convert .env file to spreadsheet-friendly formats\n\n"
    "Converts .env files into formats easily pasteable into Google Sheets,\n"
    "Excel, or other tools."
)


@dataclass
class CliOptions:
    """Arguments shared by both command-line conventions."""
    input: Optional[str]
    output: Optional[str]
    format: str
    formats: bool = False


def build_flag_parser() -> argparse.ArgumentParser:
    """Parser taking the output path through -o/--output."""
    parser = _base_parser(
        prog=PROG,
        epilog=(
            "Examples:\n"
            "  envconverter .env\n"
            "  envconverter .env -o output.csv\n"
            "  envconverter .env --format tsv\n"
            "  envconverter .env --format json -o output.json\n"
            "  envconverter .env --format md -o output.md\n"
        ),
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output file path (default: print to stdout)",
    )
    return parser


def build_positional_parser() -> argparse.ArgumentParser:
    """Parser taking the output path as a second positional argument."""
    parser = _base_parser(
        prog="env-parser",
        epilog=(
            "Examples:\n"
            "  env-parser .env\n"
            "  env-parser .env output.csv\n"
            "  env-parser .env output.json --format json\n"
            "  env-parser .env --format md output.md\n"
        ),
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output file path (default: print to stdout)",
    )
    return parser


def _base_parser(prog: str, epilog: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Path to the .env file to convert",
    )
    parser.add_argument(
        "-f", "--format",
        default=EnvConverter.DEFAULT_FORMAT,
        help="Output format: csv | tsv | json | md (default: csv)",
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"{PROG} v{__version__}",
    )
    parser.add_argument(
        "--formats",
        action="store_true",
        help="Show all supported output formats and exit",
    )
    return parser


def _to_options(args: argparse.Namespace) -> CliOptions:
    return CliOptions(args.input, args.output, args.format, args.formats)


def parse_flag_args(argv: Optional[list[str]] = None) -> CliOptions:
    """Parse arguments using the -o/--output convention."""
    return _to_options(build_flag_parser().parse_args(argv))


def parse_positional_args(argv: Optional[list[str]] = None) -> CliOptions:
    """Parse arguments using the positional output convention."""
    # intermixed so options may sit between <input> and [output]
    return _to_options(build_positional_parser().parse_intermixed_args(argv))


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the flag style (``envconverter``)."""
    parser = build_flag_parser()
    run(_to_options(parser.parse_args(argv)), parser)


def main_positional(argv: Optional[list[str]] = None) -> None:
    """Entry point for the positional style (``env-parser``)."""
    parser = build_positional_parser()
    run(_to_options(parser.parse_intermixed_args(argv)), parser)


def run(options: CliOptions, parser: argparse.ArgumentParser) -> None:
    """Execute one conversion. Exits with status 1 on any failure."""
    if options.formats:
        _show_formats()
        return

    if not options.input:
        parser.print_help(sys.stderr)
        print("\nError: Input file required", file=sys.stderr)
        sys.exit(1)

    engine = EnvConverter()

    try:
        result = engine.convert_file(options.input, options.format)
    except FileNotFoundError:
        print(f"Error: File not found: {engine.resolve_path(options.input)}", file=sys.stderr)
        sys.exit(1)
    except InvalidFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {options.input}: {e}", file=sys.stderr)
        sys.exit(1)

    if not options.output:
        print(result)
        return

    try:
        out_path = engine.write_output(result, options.output)
    except OSError as e:
        print(f"Error: Cannot write {options.output}: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"[SAVED] Output written to: {out_path}")


def _show_formats():
    """Display all supported output formats."""
    print("\nSupported Output Formats:")
    print("-" * 40)
    for name in EnvConverter.supported_formats():
        print(f"  {name}")
    print()


if __name__ == "__main__":
    main()
