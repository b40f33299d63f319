"""
Symbology identifier (FNC1 prefix) detection.
"""

from __future__ import annotations

from typing import List, Tuple

from ..consts import (
    SYMBOLOGY_DATABAR,
    SYMBOLOGY_DATAMATRIX,
    SYMBOLOGY_GS1_128,
    SYMBOLOGY_QRCODE,
)
from .data_structure import BarcodeKind


SYMBOLOGY_PREFIXES: List[Tuple[str, BarcodeKind]] = [
    (SYMBOLOGY_DATAMATRIX, BarcodeKind.DATAMATRIX),
    (SYMBOLOGY_QRCODE, BarcodeKind.QRCODE),
    (SYMBOLOGY_DATABAR, BarcodeKind.DATABAR),
    (SYMBOLOGY_GS1_128, BarcodeKind.GS1_128),
]

# Longest sequences are tried first
_BY_LENGTH = sorted(SYMBOLOGY_PREFIXES, key=lambda item: len(item[0]), reverse=True)


def match_symbology(text: str) -> Tuple[BarcodeKind, str, str]:
    """
    Match the lead of `text` against the known symbology identifiers.

    Returns:
        (kind, matched_prefix, rest). Unmatched input gives
        (BarcodeKind.UNKNOWN, "", text).

    Examples:
        >>> match_symbology("]d20104600494694202")
        (<BarcodeKind.DATAMATRIX: 'gs1_datamatrix'>, ']d2', '0104600494694202')
    """
    for prefix, kind in _BY_LENGTH:
        if text.startswith(prefix):
            return kind, prefix, text[len(prefix):]
    return BarcodeKind.UNKNOWN, "", text
