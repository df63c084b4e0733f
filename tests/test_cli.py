"""Command-line front end tests."""

from __future__ import annotations

import pytest

from main import main


class TestCommandLine:
    def test_words_command(self, capsys):
        assert main(["words", "1234567"]) == 0
        out = capsys.readouterr().out
        assert "(12,34,567)" in out

    def test_number_command_joins_words(self, capsys):
        assert main(["number", "one", "lakh", "five"]) == 0
        out = capsys.readouterr().out
        assert "1,00,005" in out

    def test_failed_conversion_exits_1(self, capsys):
        assert main(["number", "banana"]) == 1
        out = capsys.readouterr().out
        assert "INVALID_WORD" in out

    def test_demo_runs(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "NUMBER -> WORDS" in out
        assert "Invalid number" in out

    def test_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["words"])
        assert exc_info.value.code == 2
