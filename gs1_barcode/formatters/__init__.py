"""
Output formatters for the GS1 barcode package.
"""

from .hri import to_hri, to_element_string
from .json_formatter import (
    parse_gs1_to_json,
    parse_gs1_to_dict,
    ds_to_dict,
    build_report,
    format_date_ddmmyyyy,
)

__all__ = [
    "to_hri",
    "to_element_string",
    "parse_gs1_to_json",
    "parse_gs1_to_dict",
    "ds_to_dict",
    "build_report",
    "format_date_ddmmyyyy",
]
