"""
CLI interface for the GS1 barcode package.

Usage:
    python -m gs1_barcode "<barcode text>" [options]

Options:
    --json               Output as JSON
    --names              Use human-readable field names (JSON only)
    --hri                Print only the HRI string
    --require AI         Require an AI (repeatable)
    --forbid AI          Forbid an AI (repeatable)
    --fail-fast          Stop validating at the first failing stage
    --rules FILE         Load required/forbidden AIs from a JSON file
    --gs TEXT            Text used as group separator (default ASCII 29)
    -v, --verbose        Debug logging

Exit codes: 0 ok, 1 decode error, 2 validation failed, 3 unusable rules file.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .consts import GS_SYMBOL
from .core.data_structure import DataStructure
from .core.parser import ParseError, ParseOptions, parse_gs1
from .formatters.hri import to_hri
from .formatters.json_formatter import build_report, field_name
from .validators.rules import ValidationReport, ValidatorConfig, validate

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_INVALID = 2
EXIT_CONFIG_ERROR = 3


def format_result(ds: DataStructure, report: Optional[ValidationReport] = None) -> str:
    """Format decode (and validation) result for display."""
    lines = [
        "=" * 60,
        "GS1 Parse Result",
        "=" * 60,
        f"Raw Input: {ds.content!r}",
        f"Barcode Kind: {ds.kind.value}",
    ]

    if ds.symbology_prefix:
        lines.append(f"Symbology: {ds.symbology_prefix}")

    lines.extend([
        "",
        "Elements:",
        "-" * 40,
    ])

    for ai in sorted(ds.ais):
        lines.append(f"  AI({ai}): {field_name(ai)}")
        lines.append(f"    Value: {ds.ais[ai]!r}")

    if report is not None:
        lines.extend([
            "",
            "Validation:",
            "-" * 40,
            f"  Valid: {report.valid}",
        ])
        for error in report.errors:
            lines.append(f"  [{error.kind.value}] {error.message}")

    return '\n'.join(lines)


def format_parse_error(error: ParseError) -> str:
    lines = [f"Parse error [{error.code.value}]: {error.message}"]
    if error.ai is not None:
        lines.append(f"  AI: {error.ai}")
        lines.append(f"  Data: {error.data!r}")
    if error.at_index is not None:
        lines.append(f"  at index: {error.at_index}")
    return '\n'.join(lines)


def build_config(args: argparse.Namespace) -> ValidatorConfig:
    """Validator config from --rules, --require, --forbid and --fail-fast."""
    if args.rules:
        data = json.loads(Path(args.rules).read_text(encoding="utf-8"))
        config = ValidatorConfig.from_dict(data)
    else:
        config = ValidatorConfig()

    for ai in args.require:
        config = config.add_required_ai(ai)
    for ai in args.forbid:
        config = config.add_forbidden_ai(ai)
    if args.fail_fast:
        config = config.with_fail_fast(True)

    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='gs1_barcode',
        description='Decode and validate GS1 element strings from barcodes'
    )

    parser.add_argument(
        'barcode',
        help='Barcode data to parse'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '--names',
        action='store_true',
        help='Use human-readable field names in JSON output'
    )

    parser.add_argument(
        '--hri',
        action='store_true',
        help='Print the Human Readable Interpretation only'
    )

    parser.add_argument(
        '--require',
        action='append',
        default=[],
        metavar='AI',
        help='AI that must be present (repeatable)'
    )

    parser.add_argument(
        '--forbid',
        action='append',
        default=[],
        metavar='AI',
        help='AI that must not be present (repeatable)'
    )

    parser.add_argument(
        '--fail-fast',
        action='store_true',
        help='Stop validating at the first stage that reports errors'
    )

    parser.add_argument(
        '--rules',
        default=None,
        help='JSON file with fail_fast, required_ais and forbidden_ais'
    )

    parser.add_argument(
        '--gs',
        default=GS_SYMBOL,
        help='Text used as group separator (default: ASCII 29)'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except (OSError, ValueError, TypeError) as e:
        print(f"Cannot load rules from {args.rules}: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    options = ParseOptions(group_separator=args.gs, strip_whitespace=True)

    try:
        ds = parse_gs1(args.barcode, options=options)
    except ParseError as e:
        if args.json:
            print(json.dumps({'input': args.barcode, 'error': e.to_dict()}, indent=2, ensure_ascii=False))
        else:
            print(format_parse_error(e))
        return EXIT_PARSE_ERROR

    report = validate(ds, config)

    if args.hri:
        print(to_hri(ds))
    elif args.json:
        output = build_report(ds, report, human_readable=args.names)
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        print(format_result(ds, report))

    if not report.valid:
        return EXIT_INVALID
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
