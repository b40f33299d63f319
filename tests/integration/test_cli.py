"""
Tests for the command line interface.
"""

import json

from gs1_barcode.__main__ import (
    EXIT_CONFIG_ERROR,
    EXIT_INVALID,
    EXIT_OK,
    EXIT_PARSE_ERROR,
    main,
)


GS = "\x1d"


class TestCLI:
    """main() with argument lists."""

    def test_text_output(self, capsys):
        assert main(["]d20106285096000842" + "10ABC"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "GS1 Parse Result" in out
        assert "Barcode Kind: gs1_datamatrix" in out
        assert "AI(01): GTIN Code" in out
        assert "Valid: True" in out

    def test_hri_output(self, capsys):
        assert main(["0106285096000842" + "10ABC", "--hri"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "(01)06285096000842(10)ABC"

    def test_json_output(self, capsys):
        assert main(["0106285096000842", "--json"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["ais"] == {"01": "06285096000842"}
        assert data["validation"]["valid"] is True

    def test_json_names(self, capsys):
        assert main(["0106285096000842", "--json", "--names"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["ais"] == {"GTIN Code": "06285096000842"}

    def test_parse_error(self, capsys):
        assert main(["7712345"]) == EXIT_PARSE_ERROR
        out = capsys.readouterr().out
        assert "UNKNOWN_AI" in out
        assert "AI: 77" in out

    def test_parse_error_json(self, capsys):
        assert main(["BAD_INPUT", "--json"]) == EXIT_PARSE_ERROR
        data = json.loads(capsys.readouterr().out)
        assert data["error"]["at_index"] == 0

    def test_check_digit_failure(self, capsys):
        assert main(["0193712345678905"]) == EXIT_INVALID
        assert "invalid_check_digit" in capsys.readouterr().out

    def test_require_and_forbid(self, capsys):
        argv = ["0106285096000842" + "10ABC", "--require", "21", "--forbid", "10", "--json"]
        assert main(argv) == EXIT_INVALID
        data = json.loads(capsys.readouterr().out)
        assert [e["kind"] for e in data["validation"]["errors"]] == ["missing_ai", "forbidden_ai"]

    def test_fail_fast_flag(self, capsys):
        argv = ["0106285096000842" + "10ABC", "--require", "21", "--forbid", "10", "--fail-fast", "--json"]
        assert main(argv) == EXIT_INVALID
        data = json.loads(capsys.readouterr().out)
        assert [e["kind"] for e in data["validation"]["errors"]] == ["missing_ai"]

    def test_rules_file(self, capsys, tmp_path):
        rules = tmp_path / "rules.json"
        rules.write_text(json.dumps({"fail_fast": False, "required_ais": ["17", "21"]}), encoding="utf-8")
        assert main(["0106285096000842", "--rules", str(rules), "--json"]) == EXIT_INVALID
        data = json.loads(capsys.readouterr().out)
        assert [e["ai"] for e in data["validation"]["errors"]] == ["17", "21"]

    def test_custom_separator(self, capsys):
        assert main(["10ABC|21XYZ", "--gs", "|", "--hri"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "(10)ABC(21)XYZ"

    def test_surrounding_whitespace_is_stripped(self, capsys):
        assert main(["0106285096000842\n", "--hri"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "(01)06285096000842"

    def test_error_position_points_into_raw_argument(self, capsys):
        barcode = "  ]d2" + "0106285096000842XX"
        assert main([barcode, "--json"]) == EXIT_PARSE_ERROR
        data = json.loads(capsys.readouterr().out)
        assert data["input"] == barcode
        assert data["input"][data["error"]["at_index"]:] == "XX"

    def test_trailing_separator_kept_in_content(self, capsys):
        assert main(["10ABC" + GS + "\n", "--json"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["content"] == "10ABC" + GS


class TestRulesFile:
    """--rules files that cannot be turned into a config."""

    def run_with_rules(self, capsys, path):
        code = main(["0106285096000842", "--rules", str(path), "--json"])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Cannot load rules" in captured.err
        return code

    def test_wrong_type(self, capsys, tmp_path):
        rules = tmp_path / "rules.json"
        rules.write_text(json.dumps({"fail_fast": "yes"}), encoding="utf-8")
        assert self.run_with_rules(capsys, rules) == EXIT_CONFIG_ERROR

    def test_string_instead_of_list(self, capsys, tmp_path):
        rules = tmp_path / "rules.json"
        rules.write_text(json.dumps({"required_ais": "01"}), encoding="utf-8")
        assert self.run_with_rules(capsys, rules) == EXIT_CONFIG_ERROR

    def test_invalid_json(self, capsys, tmp_path):
        rules = tmp_path / "rules.json"
        rules.write_text("{not json", encoding="utf-8")
        assert self.run_with_rules(capsys, rules) == EXIT_CONFIG_ERROR

    def test_not_an_object(self, capsys, tmp_path):
        rules = tmp_path / "rules.json"
        rules.write_text(json.dumps(["01"]), encoding="utf-8")
        assert self.run_with_rules(capsys, rules) == EXIT_CONFIG_ERROR

    def test_missing_file(self, capsys, tmp_path):
        assert self.run_with_rules(capsys, tmp_path / "missing.json") == EXIT_CONFIG_ERROR
