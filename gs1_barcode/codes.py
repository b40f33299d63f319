"""
GTIN and SSCC helpers: detection, payload extraction and normalization
between GTIN-8, GTIN-12, GTIN-13 and GTIN-14.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from .validators.validators import calculate_check_digit_mod10, is_valid_check_digit


class CodeType(str, Enum):
    GTIN8 = "gtin8"
    GTIN12 = "gtin12"
    GTIN13 = "gtin13"
    GTIN14 = "gtin14"
    SSCC = "sscc"


class CodeError(ValueError):
    """
    Raised when a code cannot be detected or normalized.

    `reason` is one of: invalid_input, invalid_length, invalid_checksum,
    cannot_normalize, invalid_indicator.
    """

    def __init__(self, reason: str, code: object = None):
        super().__init__(f"{reason}: {code!r}")
        self.reason = reason
        self.code = code


_BY_LENGTH = {
    8: CodeType.GTIN8,
    12: CodeType.GTIN12,
    13: CodeType.GTIN13,
    14: CodeType.GTIN14,
    18: CodeType.SSCC,
}


def detect_code(code: str) -> CodeType:
    """
    Detect the type of a GTIN or SSCC by length and check digit.

    Raises:
        CodeError: invalid_input, invalid_length or invalid_checksum
    """
    if not isinstance(code, str):
        raise CodeError("invalid_input", code)

    code_type = _BY_LENGTH.get(len(code))
    if code_type is None:
        raise CodeError("invalid_length", code)

    if not is_valid_check_digit(code):
        raise CodeError("invalid_checksum", code)

    return code_type


def code_payload(code: str) -> str:
    """Return a valid code without its check digit."""
    detect_code(code)
    return code[:-1]


def to_gtin12(code: str) -> str:
    """Pad a GTIN-8 to GTIN-12."""
    if detect_code(code) is not CodeType.GTIN8:
        raise CodeError("cannot_normalize", code)
    return code.zfill(12)


def to_gtin13(code: str) -> str:
    """
    Normalize a GTIN-8, 12 or 14 to GTIN-13.

    A GTIN-14 loses its packaging level indicator and gets a new check
    digit: "10123456789019" -> "0123456789012".
    """
    code_type = detect_code(code)

    if code_type in (CodeType.GTIN8, CodeType.GTIN12):
        return code.zfill(13)
    if code_type is CodeType.GTIN13:
        return code
    if code_type is CodeType.GTIN14:
        payload = code[1:13]
        return payload + str(calculate_check_digit_mod10(payload))

    raise CodeError("cannot_normalize", code)


def to_gtin14(indicator: Union[int, str], code: str) -> str:
    """
    Normalize a GTIN-8, 12 or 13 to GTIN-14 with packaging level
    `indicator` (0-9, int or single digit string).
    """
    if isinstance(indicator, str) and len(indicator) == 1 and indicator.isdigit():
        indicator = int(indicator)
    if isinstance(indicator, bool) or not isinstance(indicator, int) or not 0 <= indicator <= 9:
        raise CodeError("invalid_indicator", indicator)

    if detect_code(code) not in (CodeType.GTIN8, CodeType.GTIN12, CodeType.GTIN13):
        raise CodeError("cannot_normalize", code)

    if indicator == 0:
        return code.zfill(14)

    payload = str(indicator) + code[:-1].zfill(12)
    return payload + str(calculate_check_digit_mod10(payload))
