"""
Tests for JSON formatter output.

Ensures clean JSON output with:
- Human-readable field names or raw AI keys
- Proper date formatting (dd/mm/yyyy)
- Validation report when a config is given
- Decode errors reported instead of raised
"""

import json

from gs1_barcode import ParseOptions, ValidatorConfig, parse_gs1, validate
from gs1_barcode.formatters.json_formatter import (
    build_report,
    ds_to_dict,
    format_date_ddmmyyyy,
    parse_gs1_to_dict,
    parse_gs1_to_json,
)


GS = "\x1d"
PHARMA_BARCODE = "01062867400002491728043010GB2C" + GS + "2171490437969853"


class TestJSONOutput:
    """Test JSON output formatting."""

    def test_basic_json_output(self):
        """Test basic JSON output format."""
        data = json.loads(parse_gs1_to_json(PHARMA_BARCODE))
        ais = data["ais"]

        # Check field names are human-readable
        assert ais["GTIN Code"] == "06286740000249"
        assert ais["Expiry Date"] == "30/04/2028"
        assert ais["Batch/Lot Number"] == "GB2C"
        assert ais["Serial Number"] == "71490437969853"

        # Should NOT contain AI codes
        for ai in ("01", "17", "10", "21"):
            assert ai not in ais

    def test_raw_keys(self):
        data = parse_gs1_to_dict(PHARMA_BARCODE, human_readable=False)
        assert data["ais"] == {
            "01": "06286740000249",
            "10": "GB2C",
            "17": "280430",
            "21": "71490437969853",
        }
        assert list(data["ais"]) == ["01", "10", "17", "21"]

    def test_structure_fields(self):
        data = parse_gs1_to_dict("]d2" + PHARMA_BARCODE)
        assert data["content"] == "]d2" + PHARMA_BARCODE
        assert data["kind"] == "gs1_datamatrix"
        assert data["symbology_prefix"] == "]d2"
        assert "validation" not in data

    def test_json_with_parse_options(self):
        options = ParseOptions(group_separator="|")
        data = json.loads(parse_gs1_to_json("10ABC|21XYZ", human_readable=False, options=options))
        assert data["ais"] == {"10": "ABC", "21": "XYZ"}

    def test_unknown_ai_name(self):
        data = parse_gs1_to_dict("7003" + "2501311230")
        assert data["ais"] == {"AI(7003)": "2501311230"}


class TestDateFormatting:
    """dd/mm/yyyy output for date AIs."""

    def test_date_formatting_ddmmyyyy(self):
        data = parse_gs1_to_dict("010628509600084217290131")
        assert data["ais"]["Expiry Date"] == "31/01/2029"

    def test_unknown_day_dd00(self):
        """DD=00 is formatted as XX/mm/yyyy."""
        data = parse_gs1_to_dict("010625115902606717290400")
        assert data["ais"]["Expiry Date"] == "XX/04/2029"

    def test_invalid_date_left_unchanged(self):
        assert format_date_ddmmyyyy("291301") == "291301"
        assert format_date_ddmmyyyy("ABC") == "ABC"


class TestValidationReport:
    """Validation report embedded in the output."""

    def test_valid_report(self):
        data = parse_gs1_to_dict(PHARMA_BARCODE, config=ValidatorConfig())
        assert data["validation"] == {"valid": True, "errors": []}

    def test_invalid_report(self):
        config = ValidatorConfig(fail_fast=False, required_ais=("11",))
        data = parse_gs1_to_dict("0193712345678905", config=config)
        assert data["validation"]["valid"] is False
        assert [e["kind"] for e in data["validation"]["errors"]] == [
            "missing_ai",
            "invalid_check_digit",
        ]

    def test_build_report(self):
        ds = parse_gs1("0193712345678904")
        output = build_report(ds, validate(ds))
        assert output["ais"] == ds_to_dict(ds)
        assert output["validation"]["valid"] is True


class TestDecodeErrors:
    """Decode failures are part of the output."""

    def test_error_output(self):
        data = parse_gs1_to_dict("7712345")
        assert data["input"] == "7712345"
        assert data["error"]["code"] == "UNKNOWN_AI"
        assert data["error"]["ai"] == "77"

    def test_error_json(self):
        data = json.loads(parse_gs1_to_json("BAD_INPUT"))
        assert data["error"]["code"] == "TOKENIZE"
        assert data["error"]["at_index"] == 0
