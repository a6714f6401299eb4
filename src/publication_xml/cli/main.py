"""Main CLI entry point for publication XML conversion."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .. import __version__
from ..config import load_settings
from ..core.validation import validate
from ..pipelines.conversion import convert_file, converted_file_name, read_document

NEWLINES = {"lf": "\n", "crlf": "\r\n"}


def _settings_from_args(args):
    """Build settings from the config file, the environment and the CLI options."""
    try:
        return load_settings(
            args.config,
            cutoff_date=args.cutoff_date,
            xml_output={
                "person_group_sequence": args.group_sequence,
                "person_group_name": args.group_name,
                "newline": NEWLINES.get(args.newline),
            },
        )
    except (ValidationError, OSError, ValueError) as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        sys.exit(2)


def convert_command(args):
    """Convert a JSON publication record to PublishedItem XML."""
    settings = _settings_from_args(args)
    try:
        output_dir = args.output_dir
        if args.output:
            output_dir = None
        result = convert_file(args.input, settings, output_dir=output_dir)
        if not result.success:
            print(result.error_message, file=sys.stderr)
            sys.exit(1)

        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8", newline="") as f:
                f.write(result.xml_content)
            print(f"Converted XML saved to: {output_path}")
        elif output_dir:
            print(f"Converted XML saved to: {Path(output_dir) / converted_file_name(args.input)}")
        else:
            print(result.xml_content)

    except Exception as e:
        print(f"Error converting {args.input}: {e}", file=sys.stderr)
        sys.exit(1)


def validate_command(args):
    """Check a JSON publication record against the publishing rules only."""
    settings = _settings_from_args(args)
    try:
        document = read_document(args.input)
    except (OSError, ValueError, RecursionError) as e:
        print(f"Error reading {args.input}: {e}", file=sys.stderr)
        sys.exit(1)

    result = validate(document, settings.cutoff_date)
    if not result.is_valid:
        print(result.error_message, file=sys.stderr)
        sys.exit(1)
    print("valid")


def main(argv: Optional[list] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="publication-xml",
        description="Convert publication records (JSON) into PublishedItem XML",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"publication-xml {__version__}"
    )
    parser.add_argument("--config", type=Path, help="JSON settings file")
    parser.add_argument(
        "--cutoff-date",
        type=str,
        default=None,
        help="Earliest accepted publish date (YYYY-MM-DD), overrides the settings",
    )
    parser.add_argument("--group-sequence", type=int, default=None, help="Person group sequence number")
    parser.add_argument("--group-name", type=str, default=None, help="Person group name")
    parser.add_argument(
        "--newline",
        choices=sorted(NEWLINES),
        default=None,
        help="Line breaks of the XML output",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Convert command
    convert_parser = subparsers.add_parser("convert", help="Convert a JSON record to XML")
    convert_parser.add_argument("input", type=Path, help="Input JSON file")
    convert_parser.add_argument("--output", type=Path, help="Output XML file")
    convert_parser.add_argument(
        "--output-dir",
        type=Path,
        help="Output directory, the file is named <input>_converted.xml",
    )
    convert_parser.set_defaults(func=convert_command)

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Check a JSON record against the publishing rules")
    validate_parser.add_argument("input", type=Path, help="Input JSON file")
    validate_parser.set_defaults(func=validate_command)

    # Parse arguments
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(level=args.log_level, format='%(asctime)s - %(levelname)s - %(message)s')

    # Execute command
    args.func(args)


if __name__ == "__main__":
    main()
