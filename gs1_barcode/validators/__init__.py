"""
Validation modules for the GS1 barcode package.
"""

from .validators import (
    calculate_check_digit_mod10,
    is_valid_check_digit,
    validate_check_digit,
    resolve_century,
    validate_date,
    is_valid_date,
    to_date,
    validate_numeric,
    validate_gtin,
    validate_sscc,
    validate_gln,
    ValidationResult,
    NUMERIC,
)
from .rules import (
    ErrorKind,
    ValidationError,
    ValidationReport,
    ValidatorConfig,
    Validator,
    validate,
)
from . import constraints

__all__ = [
    "calculate_check_digit_mod10",
    "is_valid_check_digit",
    "validate_check_digit",
    "resolve_century",
    "validate_date",
    "is_valid_date",
    "to_date",
    "validate_numeric",
    "validate_gtin",
    "validate_sscc",
    "validate_gln",
    "ValidationResult",
    "NUMERIC",
    "ErrorKind",
    "ValidationError",
    "ValidationReport",
    "ValidatorConfig",
    "Validator",
    "validate",
    "constraints",
]
