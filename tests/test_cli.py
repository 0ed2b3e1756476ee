import builtins

import pytest

from zset.__main__ import main
from zset.runtime import evaluator


@pytest.fixture(autouse=True)
def keep_debug_switch(monkeypatch):
    monkeypatch.setattr(evaluator, "DEBUG_EVAL", False)


def write(tmp_path, source):
    path = tmp_path / "program.zs"
    path.write_text(source, encoding="utf-8")
    return str(path)


def feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)


class TestFileMode:

    def test_runs_a_file(self, tmp_path, capsys):
        assert main([write(tmp_path, "a = 3\na + 4")]) == 0
        assert capsys.readouterr().out == "Result: 7\n"

    def test_null_result_is_not_printed(self, tmp_path, capsys):
        assert main([write(tmp_path, "@tcr(4, 9)")]) == 0
        assert capsys.readouterr().out == "true\n"

    def test_evaluation_error(self, tmp_path, capsys):
        assert main([write(tmp_path, "3 + true")]) == 1
        assert capsys.readouterr().out.startswith("Evaluation error: ")

    def test_nocheck(self, tmp_path, capsys):
        assert main([write(tmp_path, "(1 + 2"), "nocheck"]) == 1
        assert "end of input" in capsys.readouterr().out

    def test_debug(self, tmp_path, capsys):
        assert main([write(tmp_path, "res {[x: x cong 2 (3), x cong 3 (5)]}"), "debug"]) == 0
        out = capsys.readouterr().out
        assert "Result: {Set: 1}" in out
        assert "Delimiter check: enabled" in out
        assert evaluator.DEBUG_EVAL

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.zs")]) == 1
        assert "Failed to read file" in capsys.readouterr().out

    def test_usage(self, capsys):
        assert main([]) == 1
        assert "Usage" in capsys.readouterr().out


class TestRepl:

    def test_repl(self, monkeypatch, capsys):
        feed(monkeypatch, ["a = 3", "a + 1", "", ":clear", "a", "3 + true", ":quit", "never read"])
        assert main(["repl"]) == 0
        out = capsys.readouterr().out
        assert "Result: 4" in out
        assert "Result: f(a): a" in out
        assert "Evaluation error: " in out

    def test_repl_stops_at_end_of_input(self, monkeypatch, capsys):
        feed(monkeypatch, ["@print(1)"])
        assert main(["repl"]) == 0
        assert "1\n" in capsys.readouterr().out
