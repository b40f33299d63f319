"""
JSON Formatter for decoded GS1 data

Provides clean JSON output with:
- Either raw AI keys or human-readable field names
- Date formatting (dd/mm/yyyy) for date AIs
- Optional rule validation report
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from ..core.data_structure import DataStructure
from ..core.parser import ParseError, ParseOptions, parse_gs1
from ..validators.rules import ValidationReport, ValidatorConfig, validate
from ..validators.validators import validate_date


# AI Code to Human-Readable Name Mapping
AI_FIELD_NAMES = {
    "00": "SSCC",
    "01": "GTIN Code",
    "02": "Contained GTIN",
    "10": "Batch/Lot Number",
    "11": "Production Date",
    "12": "Due Date",
    "13": "Packaging Date",
    "15": "Best Before Date",
    "16": "Sell By Date",
    "17": "Expiry Date",
    "20": "Variant",
    "21": "Serial Number",
    "22": "Consumer Product Variant",
    "235": "Third Party Controlled",
    "240": "Additional Product Identification",
    "241": "Customer Part Number",
    "242": "Made-to-Order Variation Number",
    "243": "Packaging Component Number",
    "250": "Secondary Serial Number",
    "251": "Reference to Source Entity",
    "253": "Global Document Type Identifier",
    "254": "GLN Extension Component",
    "255": "Global Coupon Number",
    "30": "Variable Count",
    "37": "Count of Trade Items",
    "400": "Order Number",
    "410": "Ship To GLN",
    "414": "Location GLN",
    "90": "Internal Company Code 1",
    "91": "Internal Company Code 2",
    "92": "Internal Company Code 3",
    "93": "Internal Company Code 4",
    "94": "Internal Company Code 5",
    "95": "Internal Company Code 6",
    "96": "Internal Company Code 7",
    "97": "Internal Company Code 8",
    "98": "Internal Company Code 9",
    "99": "Internal Company Code 10",
}

DATE_AIS = frozenset({"11", "12", "13", "15", "16", "17"})


def field_name(ai: str) -> str:
    return AI_FIELD_NAMES.get(ai, f"AI({ai})")


def format_date_ddmmyyyy(date_value: str) -> str:
    """
    Format a YYMMDD date as dd/mm/yyyy.

    Handles:
    - Normal dates: YYMMDD -> dd/mm/yyyy
    - Unknown day (DD=00): -> XX/mm/yyyy
    - Anything that is not a date is returned unchanged
    """
    result = validate_date(date_value, "YYMMD0")
    if not result.valid:
        return date_value

    if result.meta.get('day_unspecified'):
        return f"XX/{result.meta['month']:02d}/{result.meta['year']:04d}"

    return result.meta['date_ddmmyyyy']


def ds_to_dict(ds: DataStructure, human_readable: bool = False) -> Dict[str, Any]:
    """
    Convert decoded AIs to a flat dict, sorted by AI.

    Args:
        ds: Decoded data structure
        human_readable: Use field names and dd/mm/yyyy dates instead of
            raw AI keys and values
    """
    output: Dict[str, Any] = {}

    for ai in sorted(ds.ais):
        value = ds.ais[ai]
        if not human_readable:
            output[ai] = value
            continue

        key = field_name(ai)
        if key in output:
            raise ValueError(f"Duplicate field in output: {key}")
        output[key] = format_date_ddmmyyyy(value) if ai in DATE_AIS else value

    return output


def build_report(
    ds: DataStructure,
    report: Optional[ValidationReport] = None,
    human_readable: bool = False,
) -> Dict[str, Any]:
    """Decoded structure plus optional validation report as one dict."""
    output: Dict[str, Any] = {
        'content': ds.content,
        'kind': ds.kind.value,
        'symbology_prefix': ds.symbology_prefix,
        'ais': ds_to_dict(ds, human_readable=human_readable),
    }
    if report is not None:
        output['validation'] = report.to_dict()
    return output


def parse_gs1_to_dict(
    barcode_data: str,
    config: Optional[ValidatorConfig] = None,
    human_readable: bool = True,
    options: Optional[ParseOptions] = None,
) -> Dict[str, Any]:
    """
    Parse and (optionally) validate, returning a plain dict.

    Decode failures are reported under an "error" key instead of raising.
    """
    try:
        ds = parse_gs1(barcode_data, options=options)
    except ParseError as e:
        return {'input': barcode_data, 'error': e.to_dict()}

    report = validate(ds, config) if config is not None else None
    return build_report(ds, report, human_readable=human_readable)


def parse_gs1_to_json(
    barcode_data: str,
    config: Optional[ValidatorConfig] = None,
    human_readable: bool = True,
    indent: int = 2,
    options: Optional[ParseOptions] = None,
) -> str:
    """JSON string version of parse_gs1_to_dict()."""
    output = parse_gs1_to_dict(
        barcode_data,
        config=config,
        human_readable=human_readable,
        options=options,
    )
    return json.dumps(output, ensure_ascii=False, indent=indent)
