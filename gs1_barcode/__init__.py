"""
GS1 Barcode Element String Decoder and Validator

Decodes GS1 element strings from barcodes (GS1 DataMatrix, GS1 QR Code,
GS1-128, GS1 DataBar) into Application Identifier / data pairs and validates
them against configurable business rules.

Based on GS1 General Specifications and the GS1 Barcode Syntax Dictionary.
"""

from .core.parser import parse_gs1, ParseOptions, ParseError, ErrorCode, GS1Parser
from .core.data_structure import DataStructure, BarcodeKind
from .core.ai_registry import AIRegistry, DEFAULT_REGISTRY
from .core.tokenizer import Tokenizer, TokenizeError, Token, TokenKind, tokenize
from .validators.validators import (
    calculate_check_digit_mod10,
    is_valid_check_digit,
    validate_check_digit,
    validate_date,
    is_valid_date,
    to_date,
)
from .validators.rules import (
    ErrorKind,
    ValidationError,
    ValidationReport,
    ValidatorConfig,
    Validator,
    validate,
)
from .validators import constraints
from .formatters.hri import to_hri, to_element_string
from .formatters.json_formatter import parse_gs1_to_json, parse_gs1_to_dict
from .codes import CodeType, CodeError, detect_code

__version__ = "1.0.0"
__all__ = [
    "parse_gs1",
    "ParseOptions",
    "ParseError",
    "ErrorCode",
    "GS1Parser",
    "DataStructure",
    "BarcodeKind",
    "AIRegistry",
    "DEFAULT_REGISTRY",
    "Tokenizer",
    "TokenizeError",
    "Token",
    "TokenKind",
    "tokenize",
    "calculate_check_digit_mod10",
    "is_valid_check_digit",
    "validate_check_digit",
    "validate_date",
    "is_valid_date",
    "to_date",
    "ErrorKind",
    "ValidationError",
    "ValidationReport",
    "ValidatorConfig",
    "Validator",
    "validate",
    "constraints",
    "to_hri",
    "to_element_string",
    "parse_gs1_to_json",
    "parse_gs1_to_dict",
    "CodeType",
    "CodeError",
    "detect_code",
]
