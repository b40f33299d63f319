"""
GS1 Element String Tokenizer

Splits an element string into raw (AI, data) segments. The tokenizer is
deliberately "dumb": it knows which two-digit lexemes are fixed-length and
nothing else about GS1 semantics. Every token carries the AI in its minimal
two-digit form, even when the real AI is longer; the parser reconstructs and
verifies the canonical AI afterwards.

Grammar (left to right, greedy):

    element_string := segment+ EOS
    segment        := (fixed | variable) GS?
    fixed          := FIXED_AI DIGIT{n}          n = declared length - 2
    variable       := !FIXED_AI DIGIT DIGIT RAW+ &(GS | EOS)

A variable segment that is not followed by GS swallows everything valid up to
the end of input, so "10BATCH21SERIAL" is a single AI (10) with data
"BATCH21SERIAL". The separator between variable fields is mandatory by
convention only.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..consts import BASE_AI_LEN, GS_SYMBOL
from .ai_registry import FIXED_LENGTH_AIS

logger = logging.getLogger(__name__)


# Characters allowed in variable-length data
RAW_CHARS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    "!\"%&'()*+,-_./:;<=>?"
)

_RAW_DATA = re.compile("[" + re.escape(RAW_CHARS) + "]+")
_BASE_AI = re.compile(r"[0-9]{2}")

ERR_NO_SEGMENT = "expected variable-length AI while processing AI segment"
ERR_TRAILING = "expected end of string"


class TokenKind(str, Enum):
    FIXED = "ai_fixed"
    VARIABLE = "ai_var"


@dataclass(frozen=True)
class Token:
    """A raw segment: two-digit AI lexeme and everything after it."""
    kind: TokenKind
    ai: str
    data: str


class TokenizeError(ValueError):
    """Raised when the input cannot be split into segments."""

    def __init__(self, reason: str, offset: int):
        super().__init__(f"{reason} at offset {offset}")
        self.reason = reason
        self.offset = offset


class Tokenizer:
    """
    Tokenizer configured with a fixed-length AI table and a group separator.

    Args:
        fixed_ais: Two-digit lexeme -> total element length (AI + data)
        group_separator: Separator terminating variable-length fields
    """

    def __init__(
        self,
        fixed_ais: Optional[Dict[str, int]] = None,
        group_separator: str = GS_SYMBOL,
    ):
        if not group_separator:
            raise ValueError("group_separator must be a non-empty string")

        self.fixed_ais = dict(FIXED_LENGTH_AIS if fixed_ais is None else fixed_ais)
        self.group_separator = group_separator

        # Precompile the numeric data pattern of every fixed AI
        self._fixed_patterns = {
            ai: re.compile(r"[0-9]{%d}" % (length - BASE_AI_LEN))
            for ai, length in self.fixed_ais.items()
        }

    def tokenize(self, text: str) -> List[Token]:
        """
        Split `text` into tokens.

        Raises:
            TokenizeError: at the first position where no segment matches
        """
        tokens: List[Token] = []
        pos = 0

        while True:
            token, end = self._match_segment(text, pos)
            if token is None:
                reason = ERR_TRAILING if tokens else ERR_NO_SEGMENT
                raise TokenizeError(reason, pos)

            tokens.append(token)
            pos = end

            if text.startswith(self.group_separator, pos):
                pos += len(self.group_separator)

            if pos == len(text):
                logger.debug("Tokenized %d segment(s) from %d chars", len(tokens), len(text))
                return tokens

    def _match_segment(self, text: str, pos: int) -> Tuple[Optional[Token], int]:
        lexeme = text[pos:pos + BASE_AI_LEN]

        if lexeme in self._fixed_patterns:
            return self._match_fixed(text, pos, lexeme)

        return self._match_variable(text, pos)

    def _match_fixed(self, text: str, pos: int, lexeme: str) -> Tuple[Optional[Token], int]:
        data_start = pos + BASE_AI_LEN
        match = self._fixed_patterns[lexeme].match(text, data_start)
        if not match:
            return None, pos
        return Token(TokenKind.FIXED, lexeme, match.group()), match.end()

    def _match_variable(self, text: str, pos: int) -> Tuple[Optional[Token], int]:
        base = _BASE_AI.match(text, pos)
        if not base:
            return None, pos

        data = _RAW_DATA.match(text, base.end())
        if not data:
            return None, pos

        end = data.end()
        # Terminator is looked at, not consumed
        if end != len(text) and not text.startswith(self.group_separator, end):
            return None, pos

        return Token(TokenKind.VARIABLE, base.group(), data.group()), end


_DEFAULT_TOKENIZER = Tokenizer()


def tokenize(text: str) -> List[Token]:
    """Tokenize with the default fixed-length table and ASCII 29 separator."""
    return _DEFAULT_TOKENIZER.tokenize(text)
