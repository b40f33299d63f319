"""
Tests for the element string tokenizer.

Tests cover:
- Fixed-length segments with and without separators
- Variable-length segments terminated by GS or end of input
- Greedy consumption when a separator is missing
- Error reasons and offsets
"""

import pytest

from gs1_barcode.core.tokenizer import (
    ERR_NO_SEGMENT,
    ERR_TRAILING,
    Token,
    TokenKind,
    Tokenizer,
    TokenizeError,
    tokenize,
)


GS = "\x1d"


class TestFixedSegments:
    """Fixed-length AIs never need a separator."""

    def test_single_gtin(self):
        tokens = tokenize("0104600494694202")
        assert tokens == [Token(TokenKind.FIXED, "01", "04600494694202")]

    def test_consecutive_fixed(self):
        tokens = tokenize("010460049469420217250101")
        assert [(t.ai, t.data) for t in tokens] == [
            ("01", "04600494694202"),
            ("17", "250101"),
        ]
        assert all(t.kind is TokenKind.FIXED for t in tokens)

    def test_fixed_followed_by_optional_separator(self):
        tokens = tokenize("0104600494694202" + GS + "17250101")
        assert [t.ai for t in tokens] == ["01", "17"]

    def test_four_digit_ai_lexeme_is_two_digits(self):
        """A 310x weight is emitted as lexeme "31" with 8 data digits."""
        tokens = tokenize("3103001234")
        assert tokens == [Token(TokenKind.FIXED, "31", "03001234")]

    def test_short_fixed_data_fails(self):
        with pytest.raises(TokenizeError) as exc_info:
            tokenize("01123")
        assert exc_info.value.reason == ERR_NO_SEGMENT
        assert exc_info.value.offset == 0


class TestVariableSegments:
    """Variable-length AIs run up to GS or end of input."""

    def test_variable_at_end(self):
        tokens = tokenize("10BATCH123")
        assert tokens == [Token(TokenKind.VARIABLE, "10", "BATCH123")]

    def test_variable_with_separator(self):
        tokens = tokenize("10ABC" + GS + "21XYZ")
        assert [(t.ai, t.data) for t in tokens] == [("10", "ABC"), ("21", "XYZ")]
        assert all(t.kind is TokenKind.VARIABLE for t in tokens)

    def test_missing_separator_is_greedy(self):
        """Without GS the first variable AI swallows the rest."""
        tokens = tokenize("10BATCH21SERIAL")
        assert tokens == [Token(TokenKind.VARIABLE, "10", "BATCH21SERIAL")]

    def test_trailing_separator_is_consumed(self):
        tokens = tokenize("10ABC" + GS)
        assert tokens == [Token(TokenKind.VARIABLE, "10", "ABC")]

    def test_special_characters_allowed(self):
        tokens = tokenize("400FREE_TEXT/1.2-3")
        assert tokens[0].data == "0FREE_TEXT/1.2-3"

    def test_mixed_fixed_and_variable(self):
        text = "0104600494694202" + "10LOT1" + GS + "17250101" + "21SN"
        tokens = tokenize(text)
        assert [(t.kind, t.ai, t.data) for t in tokens] == [
            (TokenKind.FIXED, "01", "04600494694202"),
            (TokenKind.VARIABLE, "10", "LOT1"),
            (TokenKind.FIXED, "17", "250101"),
            (TokenKind.VARIABLE, "21", "SN"),
        ]

    def test_variable_needs_data(self):
        with pytest.raises(TokenizeError) as exc_info:
            tokenize("10")
        assert exc_info.value.reason == ERR_NO_SEGMENT


class TestTokenizeErrors:
    """Error reasons and offsets."""

    def test_empty_input(self):
        with pytest.raises(TokenizeError) as exc_info:
            tokenize("")
        assert exc_info.value.reason == ERR_NO_SEGMENT
        assert exc_info.value.offset == 0

    def test_garbage_input(self):
        with pytest.raises(TokenizeError) as exc_info:
            tokenize("BAD_INPUT")
        assert exc_info.value.reason == ERR_NO_SEGMENT
        assert exc_info.value.offset == 0

    def test_trailing_garbage_after_fixed(self):
        with pytest.raises(TokenizeError) as exc_info:
            tokenize("0104600494694202XX")
        assert exc_info.value.reason == ERR_TRAILING
        assert exc_info.value.offset == 16

    def test_double_separator(self):
        with pytest.raises(TokenizeError) as exc_info:
            tokenize("10ABC" + GS + GS)
        assert exc_info.value.reason == ERR_TRAILING
        assert exc_info.value.offset == 6

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            tokenize("#")


class TestTokenizerConfiguration:
    """Custom separator and fixed-length tables."""

    def test_custom_separator(self):
        tokenizer = Tokenizer(group_separator="|")
        tokens = tokenizer.tokenize("10ABC|21XYZ")
        assert [(t.ai, t.data) for t in tokens] == [("10", "ABC"), ("21", "XYZ")]

    def test_empty_separator_rejected(self):
        with pytest.raises(ValueError):
            Tokenizer(group_separator="")

    def test_custom_fixed_table(self):
        tokenizer = Tokenizer(fixed_ais={"99": 5})
        tokens = tokenizer.tokenize("99123" + "01ABC")
        assert tokens == [
            Token(TokenKind.FIXED, "99", "123"),
            Token(TokenKind.VARIABLE, "01", "ABC"),
        ]
