#!/usr/bin/env python3
"""
CLI for generating biodata PDFs.

Usage:
    python -m reporting.cli sample
    python -m reporting.cli generate <biodata_json>

Examples:
    # Generate the sample biodata for a visual check
    python -m reporting.cli sample --variant minimal

    # Generate from a JSON record with the canvas renderer only
    python -m reporting.cli generate exports/biodata_1042.json --renderer imperative
"""

import argparse
import json
import sys
from pathlib import Path

from biodata import BiodataRecord, InvalidRecordError, Variant, create_sample_biodata
from utils.config import Config

from .service import (
    FALLBACK_ORDER,
    DocumentGenerationError,
    download_biodata,
    render_biodata,
    write_biodata,
)

AUTO_RENDERER = "auto"


def _render(record: BiodataRecord, args) -> Path:
    variant = Variant.from_string(args.variant)
    if args.renderer == AUTO_RENDERER:
        rendered = download_biodata(record, variant)
    else:
        rendered = render_biodata(record, variant, renderer=args.renderer)

    output_path = write_biodata(rendered, Path(args.output_dir))
    print(f"Renderer: {rendered.renderer}")
    if rendered.dropped_sections:
        print(f"Sections dropped (page full): {', '.join(rendered.dropped_sections)}")
    return output_path


def cmd_sample(args):
    """Generate the sample biodata PDF for testing."""
    print("Generating sample biodata...")

    output_path = _render(create_sample_biodata(), args)

    print(f"Biodata generated: {output_path}")
    return 0


def cmd_generate(args):
    """Generate a biodata PDF from a JSON record file."""
    input_path = Path(args.biodata_file)

    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    print(f"Loading biodata from: {input_path}")

    try:
        with open(input_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
        return 1

    if not isinstance(data, dict):
        print("Error: Biodata JSON must be an object", file=sys.stderr)
        return 1

    record = BiodataRecord.from_dict(data)

    try:
        output_path = _render(record, args)
    except InvalidRecordError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except DocumentGenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Biodata generated: {output_path}")
    return 0


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="SabrSpace - Biodata PDF Generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m reporting.cli sample
    python -m reporting.cli generate exports/biodata_1042.json --variant minimal

Output:
    PDFs are saved to: <output-dir>/<Full_Name>-<variant>.pdf
        """,
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--variant",
        choices=[v.value for v in Variant],
        default=config.default_variant,
        help="Detail level (default: %(default)s)",
    )
    common.add_argument(
        "--renderer",
        choices=[AUTO_RENDERER, *FALLBACK_ORDER],
        default=AUTO_RENDERER,
        help="Back-end to use; 'auto' falls back from declarative to imperative",
    )
    common.add_argument(
        "--output-dir",
        default=config.output_dir,
        help="Directory for generated PDFs (default: %(default)s)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Sample command
    sample_parser = subparsers.add_parser(
        "sample",
        parents=[common],
        help="Generate a PDF for the built-in sample biodata",
    )
    sample_parser.set_defaults(func=cmd_sample)

    # Generate command
    gen_parser = subparsers.add_parser(
        "generate",
        parents=[common],
        help="Generate a PDF from a JSON biodata file",
    )
    gen_parser.add_argument(
        "biodata_file",
        help="Path to JSON biodata file",
    )
    gen_parser.set_defaults(func=cmd_generate)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser(Config.load())
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
