import pytest

from zset.errors import ResourceError, SemanticError, ZSetTypeError
from zset.parser import parse
from zset.runtime.evaluator import Evaluator
from zset.runtime.types import EMPTY, FALSE, TRUE, ClassVal, NumVal, SetVal, SystemVal
from zset.solver import CongruenceSolver, fresh_name, substitution


def classes(*pairs):
    return SetVal.of([ClassVal(NumVal(r), NumVal(m)) for r, m in pairs])


@pytest.fixture
def solver():
    return Evaluator().solver


def solve(solver, env, source):
    return solver.solve(env, parse(source))


def resolve(solver, env, source):
    return solver.resolve(env, SystemVal(parse(source)))


class TestCongruence:

    def test_numeric_congruence(self, solver, env):
        assert solve(solver, env, "17 cong 2 (5)") is TRUE
        assert solve(solver, env, "17 cong 3 (mod 5)") is FALSE

    def test_bare_unknown(self, solver, env):
        assert solve(solver, env, "x cong 1 (mod 4)") == classes((1, 4))
        assert solve(solver, env, "9 cong x (4)") == classes((1, 4))

    def test_mod_of_a_class_in_the_modulus(self, solver, env):
        env.store("c", ClassVal(NumVal(1), NumVal(5)))
        assert solve(solver, env, "x cong 1 (mod c)") == classes((1, 5))
        assert solve(solver, env, "2 * x cong 1 (mod c)") == classes((3, 5))
        assert resolve(solver, env, "{[x: x cong 2 (mod c), x cong 1 (3)]}") == classes((7, 15))

    def test_scan(self, solver, env):
        assert solve(solver, env, "2 * x + 1 cong 3 (5)") == classes((1, 5))
        assert solve(solver, env, "x ^ 2 cong 1 (8)") == classes((1, 8), (3, 8), (5, 8), (7, 8))

    def test_scan_without_solution(self, solver, env):
        assert solve(solver, env, "2 * x cong 1 (4)") == EMPTY

    def test_scan_binds_only_in_a_child_scope(self, solver, env):
        solve(solver, env, "2 * x cong 0 (4)")
        assert env.lookup("x") is None

    def test_scan_limit(self, env):
        solver = Evaluator(scan_limit=10).solver
        assert solve(solver, env, "2 * x cong 1 (9)") == classes((5, 9))
        with pytest.raises(ResourceError, match="scan limit"):
            solve(solver, env, "2 * x cong 1 (11)")

    def test_two_unknowns(self, solver, env):
        with pytest.raises(SemanticError, match="more than one unknown"):
            solve(solver, env, "x + y cong 1 (3)")

    def test_unknowns_on_both_sides(self, solver, env):
        with pytest.raises(SemanticError, match="both sides"):
            solve(solver, env, "x cong y (3)")

    def test_modulus_must_be_a_number(self, solver, env):
        with pytest.raises(ZSetTypeError):
            solve(solver, env, "x cong 1 (true)")

    def test_known_side_must_be_a_number(self, solver, env):
        with pytest.raises(ZSetTypeError):
            solve(solver, env, "x cong <1, 2> (3)")


class TestSystem:

    def test_crt(self, solver, env):
        assert resolve(solver, env, "{[x: x cong 2 (3), x cong 3 (5)]}") == classes((8, 15))
        assert resolve(solver, env, "{[x: x cong 2 (3), x cong 3 (5), x cong 2 (7)]}") == classes((23, 105))

    def test_crt_with_scanned_congruence(self, solver, env):
        # 3x = 1 (mod 4) gives x = 3; with x = 1 (mod 5) that is 11 (mod 20)
        assert resolve(solver, env, "{[x: 3 * x cong 1 (4), x cong 1 (5)]}") == classes((11, 20))

    def test_crt_leaves_the_unknown_free(self, solver, env):
        resolve(solver, env, "{[x: x cong 2 (3), x cong 3 (5)]}")
        assert env.lookup("x") is None

    def test_system_sizes(self, solver, env):
        assert resolve(solver, env, "{[x: ]}") is EMPTY
        assert resolve(solver, env, "{[x: x cong 9 (7)]}") == classes((2, 7))

    def test_single_congruence_without_unknown(self, solver, env):
        with pytest.raises(SemanticError, match="no 'unknown'"):
            resolve(solver, env, "{[x: 3 cong 3 (7)]}")

    def test_moduli_must_be_coprime(self, solver, env):
        with pytest.raises(SemanticError, match="co-primes"):
            resolve(solver, env, "{[x: x cong 1 (4), x cong 2 (6)]}")

    def test_step_without_solution_short_circuits(self, solver, env):
        assert resolve(solver, env, "{[x: x cong 1 (3), 2 * x cong 1 (4)]}") is EMPTY


class TestNames:

    def test_fresh_names_are_distinct(self):
        a, b = fresh_name("x"), fresh_name("x")
        assert a != b
        assert a.startswith("x'")

    def test_substitution(self):
        node = substitution(ClassVal(NumVal(2), NumVal(3)), "y")
        assert str(node) == "3 * y + 2"

    def test_solver_calls_back_into_the_evaluator(self, env):
        seen = []

        def evaluate(node, scope):
            seen.append(str(node))
            return NumVal(int(str(node).strip("()")))

        solver = CongruenceSolver(evaluate)
        assert solver.solve(env, parse("4 cong 9 (5)")) is TRUE
        assert seen == ["4", "9", "(5)"]
