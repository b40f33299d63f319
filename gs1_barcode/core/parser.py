"""
GS1 Barcode Element String Parser

Decodes GS1 element strings from GS1 DataMatrix, GS1 QR Code, GS1-128 and
GS1 DataBar barcodes into a DataStructure.

Pipeline:
1. Symbology identifier matching (e.g. "]d2" for GS1 DataMatrix)
2. Tokenization into (two-digit AI, data) segments
3. Normalization: reconstruction of 3 and 4 digit AIs from the data
   (e.g. "31" + "03" -> "3103") and compliance checks against the registry
4. DataStructure creation

Decoding is fail-fast: the first structural problem raises one ParseError
that points at the offending AI and data, or at the offset in the input.
Check digits and dates are not verified here; see validators.rules.

Key GS1 Rules:
- Variable-length AIs SHALL be delimited by FNC1/GS unless they are the last element
- FNC1 is transmitted as <GS> (ASCII 29, 0x1D) by scanners
- Fixed-length AIs do not require separators
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..consts import BASE_AI_LEN, GS_SYMBOL
from .ai_registry import DEFAULT_REGISTRY, AIRegistry
from .data_structure import DataStructure
from .symbology import match_symbology
from .tokenizer import Token, TokenizeError, Tokenizer

logger = logging.getLogger(__name__)

# Characters trimmed by strip_whitespace, GS (0x1D) excluded
SCANNER_WHITESPACE = " \t\r\n"


class ErrorCode(str, Enum):
    """Decode error codes."""
    EMPTY = "EMPTY"
    INVALID_INPUT = "INVALID_INPUT"
    TOKENIZE = "TOKENIZE"
    UNKNOWN_AI = "UNKNOWN_AI"
    DUPLICATE_AI = "DUPLICATE_AI"
    NOT_ENOUGH_DATA = "NOT_ENOUGH_DATA"
    AI_PART_NON_NUMERIC = "AI_PART_NON_NUMERIC"


class ParseError(ValueError):
    """
    Raised when an element string cannot be decoded.

    Attributes:
        code: ErrorCode of the failure
        message: Human-readable description
        ai: Offending AI (for AI errors)
        data: Data associated with the offending AI
        at_index: Position in the original input (for tokenize errors)
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        ai: Optional[str] = None,
        data: Optional[str] = None,
        at_index: Optional[int] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.ai = ai
        self.data = data
        self.at_index = at_index

    def to_dict(self) -> Dict[str, Any]:
        return {
            'code': self.code.value,
            'message': self.message,
            'ai': self.ai,
            'data': self.data,
            'at_index': self.at_index,
        }


@dataclass
class ParseOptions:
    """
    Configuration options for parsing.

    Attributes:
        group_separator: Character terminating variable-length fields
        registry: AI registry used for lengths and compliance checks
        strip_whitespace: Trim surrounding spaces, tabs, CR and LF (scanner
            suffixes) before prefix detection. The group separator is
            never trimmed. `content` holds the trimmed text, while
            `at_index` still points into the input as received
    """
    group_separator: str = GS_SYMBOL
    registry: AIRegistry = field(default_factory=lambda: DEFAULT_REGISTRY)
    strip_whitespace: bool = False


class GS1Parser:
    """
    Main GS1 parser class.

    A parser is immutable after construction and may be shared between
    threads.
    """

    def __init__(self, options: Optional[ParseOptions] = None):
        self.options = options or ParseOptions()
        self.registry = self.options.registry
        self.tokenizer = Tokenizer(
            fixed_ais=self.registry.fixed_length_table(),
            group_separator=self.options.group_separator,
        )

    def parse(self, text: str) -> DataStructure:
        """
        Parse a GS1 element string.

        Args:
            text: Raw barcode data

        Returns:
            DataStructure with the decoded AIs

        Raises:
            ParseError: on the first decode problem
        """
        if not isinstance(text, str):
            raise ParseError(
                ErrorCode.INVALID_INPUT,
                f"Input must be a string, got {type(text).__name__}",
            )

        lead = 0
        if self.options.strip_whitespace:
            trimmed = text.lstrip(SCANNER_WHITESPACE)
            lead = len(text) - len(trimmed)
            text = trimmed.rstrip(SCANNER_WHITESPACE)

        if not text:
            raise ParseError(ErrorCode.EMPTY, "Input is empty")

        kind, prefix, rest = match_symbology(text)
        logger.debug("Symbology: %s (prefix %r)", kind.value, prefix)

        try:
            tokens = self.tokenizer.tokenize(rest)
        except TokenizeError as e:
            at_index = lead + len(prefix) + e.offset
            raise ParseError(
                ErrorCode.TOKENIZE,
                e.reason,
                at_index=at_index,
            ) from e

        ais = self._normalize(tokens)
        return DataStructure(
            content=text,
            kind=kind,
            symbology_prefix=prefix,
            ais=ais,
        )

    def _normalize(self, tokens: List[Token]) -> Dict[str, str]:
        ais: Dict[str, str] = {}

        for token in tokens:
            ai, data = self._normalize_ai(token.ai, token.data)

            if ai in ais:
                raise ParseError(
                    ErrorCode.DUPLICATE_AI,
                    f"Duplicate AI ({ai})",
                    ai=ai,
                    data=data,
                )
            ais[ai] = data

        return ais

    def _normalize_ai(self, ai: str, data: str) -> Tuple[str, str]:
        length = self.registry.declared_length(ai)

        if length == BASE_AI_LEN:
            return ai, data

        if length in (3, 4):
            return self._reconstruct_and_verify(ai, data, length)

        raise ParseError(
            ErrorCode.UNKNOWN_AI,
            f"Unknown AI ({ai})",
            ai=ai,
            data=data,
        )

    def _reconstruct_and_verify(self, ai: str, data: str, length: int) -> Tuple[str, str]:
        full_ai, remaining = self._reconstruct_ai(ai, data, length)

        if not self.registry.is_compliant(full_ai):
            raise ParseError(
                ErrorCode.UNKNOWN_AI,
                f"Unknown AI ({full_ai})",
                ai=full_ai,
                data=remaining,
            )

        logger.debug("Reconstructed AI %s -> %s", ai, full_ai)
        return full_ai, remaining

    def _reconstruct_ai(self, ai: str, data: str, length: int) -> Tuple[str, str]:
        if length not in (3, 4):
            raise ValueError(f"AI reconstruction needs length 3 or 4, got {length}")

        take = length - BASE_AI_LEN

        # At least one data character must remain after the suffix
        if len(data) <= take:
            raise ParseError(
                ErrorCode.NOT_ENOUGH_DATA,
                f"Not enough data to reconstruct AI from ({ai})",
                ai=ai,
                data=data,
            )

        suffix, rest = data[:take], data[take:]
        if not (suffix.isascii() and suffix.isdigit()):
            raise ParseError(
                ErrorCode.AI_PART_NON_NUMERIC,
                f"Non-numeric AI suffix {suffix!r} after ({ai})",
                ai=ai,
                data=data,
            )

        return ai + suffix, rest


_DEFAULT_PARSER = GS1Parser()


def parse_gs1(
    input_text: str,
    *,
    options: Optional[ParseOptions] = None
) -> DataStructure:
    """
    Parse a GS1 element string from a barcode.

    Main entry point for the parser.

    Args:
        input_text: Raw barcode data string
        options: Optional parsing configuration

    Returns:
        DataStructure with the decoded AIs

    Raises:
        ParseError: if the input cannot be decoded

    Examples:
        >>> ds = parse_gs1("]d20198765432109876")
        >>> ds.kind.value
        'gs1_datamatrix'
        >>> dict(ds.ais)
        {'01': '98765432109876'}
    """
    if options is not None:
        return GS1Parser(options).parse(input_text)
    return _DEFAULT_PARSER.parse(input_text)
