import itertools
import logging
from functools import reduce
from typing import Callable, List, Optional

from .errors import ResourceError, SemanticError, ZSetTypeError
from .prelude import arithmetic, logic
from .runtime.types import (
    EMPTY, FALSE, TRUE, BoolVal, ClassVal, Env, FormulaVal, NumVal, SetVal,
    SystemVal, UnknownVal, Value,
)
from .syntax import ast

logger = logging.getLogger(__name__)

# ======================================
# Congruence & System Resolution
# ======================================

Evaluate = Callable[[ast.Node, Env], Value]

_counter = itertools.count(1)

def fresh_name(prefix: str) -> str:
    # "'" never appears in a lexed identifier, so these cannot collide with source names
    return f"{prefix}'{next(_counter)}"

class CongruenceSolver:
    """Solves single congruences by scanning and merges systems of them.

    ``evaluate`` is the evaluator's entry point; the solver calls back into it
    for the sides of each congruence and for formula bodies during a scan.
    """

    def __init__(self, evaluate: Evaluate, scan_limit: Optional[int] = None):
        self.evaluate = evaluate
        self.scan_limit = scan_limit

    def solve(self, env: Env, node: ast.Congruence) -> Value:
        """Evaluate ``L cong R (M)`` to a Boolean or to a set of classes."""
        left = self.evaluate(node.left, env)
        right = self.evaluate(node.right, env)
        mod = self.modulus(env, node)

        if not isinstance(mod, NumVal):
            raise ZSetTypeError("the modulo value must be a number")

        if isinstance(left, NumVal) and isinstance(right, NumVal):
            return logic.congruent(env, left, right, mod)

        if isinstance(left, FormulaVal) and isinstance(right, FormulaVal):
            raise SemanticError("cannot resolve congruence with unknowns on both sides")
        if isinstance(left, FormulaVal):
            formula, known = left, right
        elif isinstance(right, FormulaVal):
            formula, known = right, left
        else:
            raise ZSetTypeError(f"both sides of a congruence must be numbers, got {left.kind} and {right.kind}")

        if len(formula.unknowns) > 1:
            raise SemanticError("cannot resolve congruence with more than one unknown")
        if not isinstance(known, NumVal):
            raise ZSetTypeError(f"the known side of a congruence must be a number, got {known.kind}")

        if isinstance(formula.node, ast.Ident):
            return SetVal.of([arithmetic.congruence_class(env, known, mod)])

        return self.scan(env, formula, known, mod)

    def modulus(self, env: Env, node: ast.Congruence) -> Value:
        """Evaluate the ``(M)`` or ``(mod M)`` part of a congruence.

        In ``(mod M)`` the keyword extracts the modulus when ``M`` is a
        congruence class and is only a marker when ``M`` is anything else.
        """
        expr = node.mod.expr
        if isinstance(expr, ast.Unary) and expr.op == "mod":
            m = self.evaluate(expr.expr, env)
            return m.modulus if isinstance(m, ClassVal) else m
        return self.evaluate(node.mod, env)

    def scan(self, env: Env, formula: FormulaVal, known: NumVal, mod: NumVal) -> SetVal:
        """Try every residue in ``[0, mod)`` for the formula's single unknown."""
        if mod.is_infinite:
            raise ZSetTypeError("cannot scan a congruence modulo infinity")
        if self.scan_limit is not None and mod.n > self.scan_limit:
            raise ResourceError(f"the modulus {mod} is larger than the scan limit {self.scan_limit}")

        unknown = formula.unknowns[0]
        scope = env.child()
        found: List[ClassVal] = []

        for i in range(mod.n):
            x = scope.store(unknown.name, scope.number_of(i))
            value = self.evaluate(formula.node, scope)
            if not isinstance(value, NumVal):
                raise ZSetTypeError("one side of the congruence cannot be result into a number")
            if logic.congruent(scope, value, known, mod) is TRUE:
                found.append(arithmetic.congruence_class(scope, x, mod))

        logger.debug("scan %s cong %s (%s): %d solution(s)", formula.node, known, mod, len(found))
        return SetVal.of(found)

    def resolve(self, env: Env, system: SystemVal) -> SetVal:
        """Merge a system of congruences into a single class (generalized CRT)."""
        node = system.system
        congruences = node.congruences

        if not congruences:
            return EMPTY

        if len(congruences) == 1:
            return self._solved(env, congruences[0])

        scope = env.child()
        moduli: List[NumVal] = []
        for c in congruences:
            m = self.modulus(scope, c)
            if not isinstance(m, NumVal):
                raise ZSetTypeError("the modulus value must be a number")
            moduli.append(m)

        if logic.coprime(scope, moduli) is FALSE:
            raise SemanticError("there is no unique solution because the modulus of the congruence aren't co-primes")

        running = node.unknown.name
        classes: List[ClassVal] = []
        for c in congruences:
            solved = self._solved(scope, c)
            if solved.cardinal == 0:
                logger.debug("system %s: no solution for %s", system, c)
                return EMPTY

            cls = solved.at(0)
            nxt = fresh_name(node.unknown.name)
            # running = modulus * next + remainder
            scope.store(running, FormulaVal(substitution(cls, nxt), (UnknownVal(nxt),)))
            logger.debug("system %s: %s -> %s, %s = %s", system, c, cls, running, scope.lookup(running))
            running = nxt
            classes.append(cls)

        return SetVal.of([reduce(lambda a, b: arithmetic.compose(scope, a, b), classes)])

    def _solved(self, env: Env, c: ast.Congruence) -> SetVal:
        ret = self.solve(env, c)
        if isinstance(ret, BoolVal):
            raise SemanticError("there is no 'unknown' to resolve")
        return ret

def substitution(cls: ClassVal, name: str) -> ast.Expr:
    return ast.Binary(
        "+",
        ast.Binary("*", ast.Num(str(cls.modulus)), ast.Ident(name)),
        ast.Num(str(cls.remainder)),
    )
