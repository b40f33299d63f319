"""
Core decoding modules for the GS1 barcode package.
"""

from .ai_registry import AIRegistry, DEFAULT_REGISTRY
from .data_structure import BarcodeKind, DataStructure
from .parser import parse_gs1, ParseOptions, ParseError, ErrorCode, GS1Parser
from .symbology import match_symbology
from .tokenizer import Token, TokenKind, Tokenizer, TokenizeError, tokenize

__all__ = [
    "AIRegistry",
    "DEFAULT_REGISTRY",
    "BarcodeKind",
    "DataStructure",
    "parse_gs1",
    "ParseOptions",
    "ParseError",
    "ErrorCode",
    "GS1Parser",
    "match_symbology",
    "Token",
    "TokenKind",
    "Tokenizer",
    "TokenizeError",
    "tokenize",
]
