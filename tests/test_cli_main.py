"""Tests for linediff/cli - CLI entry point."""

import json

import pytest
import yaml

from linediff import __version__
from linediff.cli import main


@pytest.fixture
def pair(tmp_path):
    def _write(text_a: str, text_b: str) -> tuple[str, str]:
        file_a = tmp_path / "old.txt"
        file_b = tmp_path / "new.txt"
        file_a.write_text(text_a, newline="")
        file_b.write_text(text_b, newline="")
        return str(file_a), str(file_b)

    return _write


class TestCLIExitCodes:
    """Exit status follows diff(1): 0 identical, 1 different, 2 trouble."""

    def test_identical(self, pair, capsys):
        a, b = pair("one\ntwo\n", "one\ntwo\n")
        assert main([a, b]) == 0
        assert capsys.readouterr().out == ""

    def test_different(self, pair, capsys):
        a, b = pair("a\nb\nc\n", "a\nx\nc\n")
        assert main([a, b]) == 1
        out = capsys.readouterr().out
        assert out == f"--- {a}\n+++ {b}\n@@ -1,3 +1,3 @@\n a\n-b\n+x\n c\n"

    def test_missing_file(self, pair, tmp_path, capsys):
        a, _ = pair("a\n", "a\n")
        assert main([a, str(tmp_path / "nope.txt")]) == 2
        assert "could not read inputs" in capsys.readouterr().err

    def test_negative_context(self, pair, capsys):
        a, b = pair("a\n", "b\n")
        assert main(["--unified=-1", a, b]) == 2
        assert "Invalid configuration" in capsys.readouterr().err

    def test_unknown_engine(self, pair):
        a, b = pair("a\n", "b\n")
        assert main(["--engine", "patience", a, b]) == 2

    def test_bad_display(self, pair):
        a, b = pair("a\n", "b\n")
        assert main(["--display", "xml", a, b]) == 2

    def test_missing_arguments(self, capsys):
        assert main([]) == 2
        assert "Usage error" in capsys.readouterr().err


class TestCLIOptions:
    def test_help(self, capsys):
        assert main(["--help"]) == 0
        assert "FILE_A" in capsys.readouterr().out

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.strip() == f"linediff {__version__}"

    def test_context_lines(self, pair, capsys):
        a, b = pair("1\n2\n3\n4\n5\n", "1\n2\nX\n4\n5\n")
        assert main(["-U", "0", a, b]) == 1
        assert "@@ -3 +3 @@\n-3\n+X\n" in capsys.readouterr().out

    def test_full(self, pair, capsys):
        a, b = pair("a\nb\nc\n", "a\nx\nc\n")
        assert main(["--full", a, b]) == 1
        assert capsys.readouterr().out == " a\n-b\n+x\n c\n"

    def test_brief(self, pair, capsys):
        a, b = pair("a\n", "b\n")
        assert main(["--brief", a, b]) == 1
        assert capsys.readouterr().out == f"Files {a} and {b} differ\n"

    def test_brief_identical(self, pair, capsys):
        a, b = pair("a\n", "a\n")
        assert main(["-q", a, b]) == 0
        assert capsys.readouterr().out == ""

    def test_ignore_case(self, pair):
        a, b = pair("Hello\nWorld\n", "hello\nworld\n")
        assert main([a, b]) == 1
        assert main(["-i", a, b]) == 0

    def test_ignore_trailing_space(self, pair):
        a, b = pair("a \nb\n", "a\nb\n")
        assert main(["-Z", a, b]) == 0

    def test_strip_trailing_cr(self, pair):
        a, b = pair("a\r\nb\r\n", "a\nb\n")
        assert main([a, b]) == 1
        assert main(["--strip-trailing-cr", a, b]) == 0

    @pytest.mark.parametrize("engine", ["lcs", "hirschberg", "myers", "auto"])
    def test_engines_agree(self, pair, capsys, engine):
        a, b = pair("a\nb\nc\nd\n", "a\nc\nd\ne\n")
        assert main(["--engine", engine, a, b]) == 1
        out = capsys.readouterr().out
        assert out.endswith("@@ -1,4 +1,4 @@\n a\n-b\n c\n d\n+e\n")

    def test_display_json(self, pair, capsys):
        a, b = pair("a\n", "b\n")
        assert main(["--display", "json", a, b]) == 1
        data = json.loads(capsys.readouterr().out)
        assert data["status"] == "success"
        assert data["metadata"]["engine_used"] == "lcs"
        assert data["hunks"][0]["lines"][0] == {"kind": "remove", "text": "a\n", "a_index": 0, "b_index": None}

    def test_display_yaml(self, pair, capsys):
        a, b = pair("a\n", "a\n")
        assert main(["-d", "yaml", a, b]) == 0
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["metadata"]["is_identical"] is True

    def test_verbose_reports_progress(self, pair, capsys):
        a, b = pair("a\n", "b\n")
        assert main(["-v", a, b]) == 1
        err = capsys.readouterr().err
        assert "Diffing" in err
        assert "Files differ (1 hunk)" in err

    def test_config_file(self, pair, linediff_home, capsys):
        (linediff_home / "config.json").write_text(json.dumps({"diff": {"context_lines": 0}}))
        a, b = pair("1\n2\n3\n", "1\nX\n3\n")
        assert main([a, b]) == 1
        assert "@@ -2 +2 @@" in capsys.readouterr().out

    def test_invalid_config_file(self, pair, linediff_home, capsys):
        (linediff_home / "config.json").write_text("{not json")
        a, b = pair("a\n", "a\n")
        assert main([a, b]) == 2
        assert "Invalid configuration" in capsys.readouterr().err
