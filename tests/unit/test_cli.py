"""Unit tests for the command-line interface."""

import json

from sqrl.cli import main


class TestFormatCommand:
    def test_dollar(self, capsys):
        assert main(["format", "--placeholder", "dollar", "a = ? AND b = ?"]) == 0
        assert capsys.readouterr().out.strip() == "a = $1 AND b = $2"

    def test_default_is_passthrough(self, capsys):
        assert main(["format", "a = ?"]) == 0
        assert capsys.readouterr().out.strip() == "a = ?"

    def test_from_config(self, capsys, tmp_path):
        f = tmp_path / "sqrl.json"
        f.write_text(json.dumps({"sqrl": {"placeholder": "atp"}}))
        assert main(["format", "--config", str(f), "a = ?"]) == 0
        assert capsys.readouterr().out.strip() == "a = @p1"

    def test_unknown_placeholder(self, capsys):
        assert main(["format", "--placeholder", "percent", "a = ?"]) == 1
        assert "error:" in capsys.readouterr().err

    def test_missing_config(self, capsys, tmp_path):
        assert main(["format", "--config", str(tmp_path / "nope.json"), "a = ?"]) == 1
        assert "not found" in capsys.readouterr().err


class TestMain:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out.lower()
