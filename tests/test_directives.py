import pytest

from zset.errors import SemanticError, ZSetTypeError
from zset.runtime import directives
from zset.runtime.types import NULL


class TestDirectives:

    def test_print(self, engine, capsys):
        assert engine.eval("@print(1, <7, 5>, true)") is NULL
        assert capsys.readouterr().out == "1\n[2] (mod 5)\ntrue\n"

    def test_print_renders_sets_and_formulas(self, engine, capsys):
        engine.eval("@print(x cong 1 (mod 4), x + 1)")
        assert capsys.readouterr().out == "{Set: 1}\nf(x): x + 1\n"

    def test_print_keeps_grouping_in_formulas(self, engine, capsys):
        engine.eval("@print(2 * (x + 1), -(x + 1))")
        assert capsys.readouterr().out == "f(x): 2 * (x + 1)\nf(x): -(x + 1)\n"

    def test_print_without_arguments(self, engine, capsys):
        engine.eval("@print()")
        assert capsys.readouterr().out == ""

    def test_ext(self, engine, capsys):
        engine.eval("@ext({1, 2}, x cong 1 (mod 4), empty)")
        assert capsys.readouterr().out == "{1, 2}\n{[1] (mod 4)}\n{}\n"

    def test_ext_only_accepts_sets(self, engine):
        with pytest.raises(ZSetTypeError, match="sets"):
            engine.eval("@ext(3)")

    def test_tcr(self, engine, capsys):
        engine.eval("@tcr(4, 9, 25)")
        engine.eval("@tcr(4, 6)")
        assert capsys.readouterr().out == "true\nfalse\n"

    def test_tcr_only_accepts_numbers(self, engine):
        with pytest.raises(ZSetTypeError, match="numbers"):
            engine.eval("@tcr(4, <1, 2>)")

    def test_unknown_directive(self, engine):
        with pytest.raises(SemanticError, match="nope"):
            engine.eval("@nope(1)")

    def test_directives_run_after_expressions(self, engine, capsys):
        engine.eval("@print(a)\na = 5")
        assert capsys.readouterr().out == "5\n"

    def test_registry(self):
        assert set(directives.registry) == {"print", "ext", "tcr"}
