"""
GS1 Validation Functions

Low-level checks used by the rule validator and the code helpers:
- Check digit calculation and validation (Mod10 for GTIN, SSCC, GLN, etc.)
- Date validation (YYMMDD, YYMMD0) with GS1 century determination
- Numeric field validation

Based on GS1 General Specifications (7.9 check digit calculation,
7.12 determination of century in dates).
"""

from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


NUMERIC = frozenset('0123456789')

DATE_FORMATS = ("YYMMDD", "YYMMD0")


def _is_digits(value: Any) -> bool:
    return isinstance(value, str) and all(c in NUMERIC for c in value)


def calculate_check_digit_mod10(digits: str) -> int:
    """
    Calculate GS1 Mod10 check digit.

    Algorithm (GS1 General Specifications):
    1. From right to left, alternate multipliers 3 and 1
    2. Sum all products
    3. Check digit = (10 - (sum mod 10)) mod 10

    Args:
        digits: Numeric string without check digit (may be empty)

    Returns:
        Calculated check digit (0-9)
    """
    if not _is_digits(digits):
        raise ValueError("Input must be a numeric string")

    total = 0
    for i, digit in enumerate(reversed(digits)):
        multiplier = 3 if i % 2 == 0 else 1
        total += int(digit) * multiplier

    return (10 - (total % 10)) % 10


def is_valid_check_digit(value: str) -> bool:
    """
    True if the last digit of `value` is its GS1 Mod10 check digit.

    Even-length strings (GTIN-8/12/14, SSCC-18) start with weight 3,
    odd-length strings (GTIN-13) with weight 1. Empty or non-numeric
    input is never valid.
    """
    if not value or not _is_digits(value):
        return False

    weight = 3 if len(value) % 2 == 0 else 1
    total = 0
    for digit in value:
        total += int(digit) * weight
        weight = 4 - weight

    return total % 10 == 0


def validate_check_digit(
    value: str,
    ai_code: str = ""
) -> ValidationResult:
    """
    Validate GS1 check digit for GTIN, SSCC, GLN, etc.

    Args:
        value: The complete value including check digit
        ai_code: Optional AI code for context

    Returns:
        ValidationResult with check digit status
    """
    result = ValidationResult(valid=True)
    if ai_code:
        result.meta['ai'] = ai_code

    if not value or not _is_digits(value):
        result.valid = False
        result.errors.append("Value must be numeric for check digit validation")
        return result

    provided_check = int(value[-1])
    calculated_check = calculate_check_digit_mod10(value[:-1])

    result.meta['calculated_check_digit'] = calculated_check
    result.meta['provided_check_digit'] = provided_check
    result.meta['check_digit_valid'] = (provided_check == calculated_check)

    if provided_check != calculated_check:
        result.valid = False
        result.errors.append(
            f"Check digit mismatch: expected {calculated_check}, got {provided_check}"
        )

    return result


def resolve_century(yy: int, current_year: Optional[int] = None) -> int:
    """
    Resolve a two-digit year into a full year (GS1 GenSpec 7.12).

    If YY is 51 or more years ahead of the current two-digit year the
    previous century is assumed; if it is 50 or more years behind, the
    next century; otherwise the current one.
    """
    if current_year is None:
        current_year = date.today().year

    century, current_yy = divmod(current_year, 100)
    gap = yy - current_yy

    if gap >= 51:
        century -= 1
    elif gap <= -50:
        century += 1

    return century * 100 + yy


def validate_date(
    value: str,
    format_type: str = "YYMMDD",
    current_year: Optional[int] = None
) -> ValidationResult:
    """
    Validate GS1 date formats.

    Formats:
    - YYMMDD: Standard date, day must be a real calendar day
    - YYMMD0: Day=00 additionally allowed, meaning the last day of the month

    Args:
        value: 6-digit date string
        format_type: YYMMDD or YYMMD0
        current_year: Reference year for the century window (default: today)

    Returns:
        ValidationResult with the resolved date in meta
    """
    result = ValidationResult(valid=True)

    if format_type not in DATE_FORMATS:
        result.valid = False
        result.errors.append(f"Unknown date format: {format_type}")
        return result

    if not isinstance(value, str) or len(value) != 6:
        result.valid = False
        result.errors.append(f"{format_type} date must be 6 digits")
        return result

    if not _is_digits(value):
        result.valid = False
        result.errors.append("Date must be numeric")
        return result

    yy = int(value[0:2])
    mm = int(value[2:4])
    dd = int(value[4:6])

    year = resolve_century(yy, current_year)

    if mm < 1 or mm > 12:
        result.valid = False
        result.errors.append(f"Invalid month: {mm}")
        return result

    max_day = monthrange(year, mm)[1]

    if dd == 0 and format_type == "YYMMD0":
        result.meta['day_unspecified'] = True
        dd = max_day
    elif dd < 1 or dd > max_day:
        result.valid = False
        result.errors.append(f"Day {dd} invalid for month {mm} in year {year}")
        return result

    result.meta['year'] = year
    result.meta['month'] = mm
    result.meta['day'] = dd
    result.meta['date'] = date(year, mm, dd)
    result.meta['iso_date'] = f"{year:04d}-{mm:02d}-{dd:02d}"
    result.meta['date_ddmmyyyy'] = f"{dd:02d}/{mm:02d}/{year:04d}"

    return result


def is_valid_date(
    value: str,
    format_type: str = "YYMMDD",
    current_year: Optional[int] = None
) -> bool:
    return validate_date(value, format_type, current_year).valid


def to_date(
    value: str,
    format_type: str = "YYMMDD",
    current_year: Optional[int] = None
) -> date:
    """
    Convert a 6-digit GS1 date into a `datetime.date`.

    With YYMMD0 a "00" day becomes the last day of the month, so
    "240200" is 2024-02-29 and "230200" is 2023-02-28.

    Raises:
        ValueError: if the value is not a valid date in `format_type`
    """
    result = validate_date(value, format_type, current_year)
    if not result.valid:
        raise ValueError(f"Invalid {format_type} date {value!r}: {result.errors[0]}")
    return result.meta['date']


def validate_numeric(
    value: str,
    min_length: int = 0,
    max_length: int = 0,
    fixed_length: Optional[int] = None
) -> ValidationResult:
    """
    Check that `value` is all digits and its length fits the bounds.

    `fixed_length` wins over `min_length`/`max_length`; a zero bound is
    not checked.
    """
    errors: List[str] = []

    if not value:
        if min_length > 0 or fixed_length:
            errors.append("Empty value for a field with a minimum length")
    elif not _is_digits(value):
        errors.append("Only digits 0-9 are allowed")
    elif fixed_length is not None:
        if len(value) != fixed_length:
            errors.append(f"Expected {fixed_length} digits, got {len(value)}")
    elif min_length and len(value) < min_length:
        errors.append(f"Expected at least {min_length} digits, got {len(value)}")
    elif max_length and len(value) > max_length:
        errors.append(f"Expected at most {max_length} digits, got {len(value)}")

    return ValidationResult(valid=not errors, errors=errors)


def _validate_keyed(value: str, length: int, ai_code: str) -> ValidationResult:
    result = validate_numeric(value, fixed_length=length)

    if result.valid:
        check_result = validate_check_digit(value, ai_code)
        result.valid = check_result.valid
        result.errors.extend(check_result.errors)
        result.meta.update(check_result.meta)

    return result


def validate_gtin(value: str) -> ValidationResult:
    """
    Validate a GTIN-8, GTIN-12, GTIN-13 or GTIN-14 (AI 01, 02).
    """
    if isinstance(value, str) and len(value) in (8, 12, 13):
        return _validate_keyed(value, len(value), "01")
    return _validate_keyed(value, 14, "01")


def validate_sscc(value: str) -> ValidationResult:
    """
    Validate SSCC (AI 00).

    SSCC-18 format: N18 with check digit in position 18.
    """
    return _validate_keyed(value, 18, "00")


def validate_gln(value: str) -> ValidationResult:
    """
    Validate GLN (AI 410-417).

    GLN-13 format: N13 with check digit in position 13.
    """
    return _validate_keyed(value, 13, "410")
