"""
Tests for the Application Identifier registry.
"""

from gs1_barcode.core.ai_registry import (
    DEFAULT_REGISTRY,
    AIRegistry,
    declared_length,
    fixed_length_table,
    is_compliant,
    numeric_range_for,
)


class TestDeclaredLength:
    """Real AI length from the first two digits."""

    def test_two_digit_ais(self):
        for ai in ("00", "01", "10", "17", "21", "90", "99"):
            assert declared_length(ai) == 2, ai

    def test_three_digit_ais(self):
        for ai in ("23", "24", "25", "40", "41", "42", "71"):
            assert declared_length(ai) == 3, ai

    def test_four_digit_ais(self):
        for ai in ("31", "32", "39", "43", "70", "80", "82"):
            assert declared_length(ai) == 4, ai

    def test_only_first_two_digits_matter(self):
        assert declared_length("3103") == 4
        assert declared_length("240") == 3

    def test_unknown_lexeme(self):
        assert declared_length("77") is None
        assert declared_length("") is None
        assert declared_length("1") is None
        assert declared_length(None) is None


class TestNumericRange:
    """Allocated blocks for 3 and 4 digit AIs."""

    def test_three_digit_range(self):
        assert numeric_range_for("240") == (240, 243)
        assert numeric_range_for("410") == (410, 417)

    def test_four_digit_range(self):
        assert numeric_range_for("3103") == (3100, 3105)
        assert numeric_range_for("3923") == (3920, 3929)
        assert numeric_range_for("7003") == (7001, 7009)

    def test_unknown_range(self):
        assert numeric_range_for("999") is None
        assert numeric_range_for("10") is None
        assert numeric_range_for("31000") is None


class TestCompliance:
    """Membership of candidate AIs."""

    def test_known_two_digit(self):
        assert is_compliant("01")
        assert is_compliant("21")

    def test_two_digit_lexeme_of_longer_ai_is_not_an_ai(self):
        assert not is_compliant("31")
        assert not is_compliant("24")

    def test_in_range(self):
        assert is_compliant("240")
        assert is_compliant("243")
        assert is_compliant("3103")
        assert is_compliant("8020")

    def test_out_of_range(self):
        assert not is_compliant("244")
        assert not is_compliant("3106")
        assert not is_compliant("7000")

    def test_non_numeric(self):
        assert not is_compliant("2A0")
        assert not is_compliant("")
        assert not is_compliant(None)
        assert not is_compliant("٠١")

    def test_unknown(self):
        assert not is_compliant("77")
        assert not is_compliant("12345")


class TestTables:
    """Fixed-length table and rule sets."""

    def test_fixed_length_totals(self):
        table = fixed_length_table()
        assert table["00"] == 20
        assert table["01"] == 16
        assert table["17"] == 8
        assert table["20"] == 4
        assert table["31"] == 10
        assert table["41"] == 16
        assert "10" not in table
        assert "21" not in table

    def test_fixed_length_table_is_a_copy(self):
        table = fixed_length_table()
        table["10"] = 99
        assert "10" not in fixed_length_table()

    def test_is_fixed_length(self):
        assert DEFAULT_REGISTRY.is_fixed_length("01")
        assert DEFAULT_REGISTRY.is_fixed_length("3103")
        assert not DEFAULT_REGISTRY.is_fixed_length("10")
        assert not DEFAULT_REGISTRY.is_fixed_length("240")

    def test_rule_sets(self):
        assert DEFAULT_REGISTRY.check_digit_ais() == frozenset({"00", "01", "02"})
        assert DEFAULT_REGISTRY.date_ais() == frozenset({"11", "12", "13", "15", "17"})

    def test_custom_registry(self):
        registry = AIRegistry(ai_lengths={"01": 2}, check_digit_ais=frozenset({"01"}))
        assert registry.declared_length("01") == 2
        assert registry.declared_length("10") is None
        assert registry.check_digit_ais() == frozenset({"01"})
