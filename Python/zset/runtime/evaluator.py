import logging
from typing import Optional

from .. import solver as congruence_solver
from ..errors import ZSetTypeError
from ..prelude import arithmetic, primitives
from ..syntax import ast
from . import directives
from .types import (
    FALSE, NULL, TRUE, BoolVal, ClassVal, Env, FormulaVal, NumVal, SetVal,
    SystemVal, UnknownVal, Value,
)

logger = logging.getLogger(__name__)

DEBUG_EVAL = False

def log(msg: str):
    if DEBUG_EVAL:
        logger.debug(f"[EVAL] {msg}")

class Evaluator:
    """Tree-walking evaluator over ``syntax.ast`` nodes."""

    def __init__(self, scan_limit: Optional[int] = None):
        self.solver = congruence_solver.CongruenceSolver(self.eval_expr, scan_limit)

    def eval_expr(self, node: ast.Node, env: Env) -> Value:
        if isinstance(node, ast.Ident): return self.eval_ident(node, env)
        if isinstance(node, ast.Num): return self.eval_num(node, env)
        if isinstance(node, ast.Parenthesis): return self.eval_expr(node.expr, env)
        if isinstance(node, ast.Unary): return self.eval_unary(node, env)
        if isinstance(node, ast.Binary): return self.eval_binary(node, env)
        if isinstance(node, ast.Assignment): return self.eval_assignment(node, env)
        if isinstance(node, ast.Congruence): return self.solver.solve(env, node)
        if isinstance(node, ast.CongruenceClass): return self.eval_congruence_class(node, env)
        if isinstance(node, ast.SetLiteral): return self.eval_set(node, env)
        if isinstance(node, ast.Index): return self.eval_index(node, env)
        if isinstance(node, ast.CongruenceSystem): return SystemVal(node)
        if isinstance(node, ast.ForAll): return self.eval_forall(node, env)
        if isinstance(node, ast.Directive):
            self.eval_directive(node, env)
            return NULL
        if isinstance(node, ast.Source): return self.eval_source(node, env)
        raise ZSetTypeError(f"invalid node: {node!r}")

    def eval_ident(self, node: ast.Ident, env: Env) -> Value:
        obj = env.lookup(node.name)
        if obj is None:
            log(f"eval_ident: {node.name} is free")
            return FormulaVal(node, (UnknownVal(node.name),))
        if isinstance(obj, FormulaVal):
            log(f"eval_ident: {node.name} -> {obj}")
            return self.eval_expr(obj.node, env)
        return obj

    def eval_num(self, node: ast.Num, env: Env) -> NumVal:
        return env.number_of(int(node.value))

    def eval_unary(self, node: ast.Unary, env: Env) -> Value:
        obj = self.eval_expr(node.expr, env)

        if isinstance(obj, FormulaVal):
            return FormulaVal.of(ast.Unary(node.op, obj.node), obj)

        if node.op == "res":
            if not isinstance(obj, SystemVal):
                raise ZSetTypeError('the "res" operator is only allowed for system of congruence equations')
            log(f"eval_unary: resolving {obj}")
            return self.solver.resolve(env, obj)

        return primitives.eval_unary(env, node.op, obj)

    def eval_binary(self, node: ast.Binary, env: Env) -> Value:
        left = self.eval_expr(node.left, env)
        right = self.eval_expr(node.right, env)

        if node.op in ("equal", "in"):
            return primitives.eval_primitive(env, node.op, left, right)

        if isinstance(left, FormulaVal) or isinstance(right, FormulaVal):
            return self.defer(node, left, right)

        return primitives.eval_primitive(env, node.op, left, right)

    def defer(self, node: ast.Binary, left: Value, right: Value) -> FormulaVal:
        """Build a formula for a binary operation with at least one free operand.

        Known numeric operands are substituted as literals so the formula no
        longer depends on the scope it was built in.
        """
        parts = [v for v in (left, right) if isinstance(v, FormulaVal)]
        return FormulaVal.of(
            ast.Binary(node.op, self.literal(left, node.op), self.literal(right, node.op)),
            *parts,
        )

    def literal(self, v: Value, op: str) -> ast.Expr:
        if isinstance(v, FormulaVal):
            return v.node
        if isinstance(v, NumVal) and not v.is_infinite:
            return ast.Num(str(v.n))
        raise ZSetTypeError(f"the {op} operation cannot mix a formula with a {v.kind}")

    def eval_assignment(self, node: ast.Assignment, env: Env) -> Value:
        value = self.eval_expr(node.value, env)
        log(f"eval_assignment: {node.name} = {value}")
        return env.store(node.name.name, value)

    def eval_congruence_class(self, node: ast.CongruenceClass, env: Env) -> ClassVal:
        r = self.eval_expr(node.remainder, env)
        if not isinstance(r, NumVal):
            raise ZSetTypeError("the remainder value must be a number")
        m = self.eval_expr(node.modulus, env)
        if not isinstance(m, NumVal):
            raise ZSetTypeError("the modulus value must be a number")
        return arithmetic.congruence_class(env, r, m)

    def eval_set(self, node: ast.SetLiteral, env: Env) -> SetVal:
        elements = []
        for e in node.elements:
            obj = self.eval_expr(e, env)
            if not isinstance(obj, (NumVal, ClassVal, SetVal)):
                raise ZSetTypeError(f"invalid type set's element: {obj.kind}")
            elements.append(obj)
        return SetVal.of(elements)

    def eval_index(self, node: ast.Index, env: Env) -> Value:
        target = self.eval_expr(node.expr, env)
        i = self.eval_expr(node.index, env)
        return primitives.index(env, target, i)

    def eval_forall(self, node: ast.ForAll, env: Env) -> BoolVal:
        iterator = self.eval_expr(node.iterator, env)
        scope = env.child()

        if isinstance(iterator, SetVal):
            bindings = iter(iterator.items())
        elif isinstance(iterator, SystemVal):
            bindings = (self.solver.solve(scope, c) for c in iterator.system.congruences)
        else:
            raise ZSetTypeError(f"the object is not iterable: {iterator.kind}")

        for element in bindings:
            scope.store(node.variable.name, element)
            ret = self.eval_expr(node.body, scope)
            if not isinstance(ret, BoolVal):
                raise ZSetTypeError("only boolean results are allowed at forall verification")
            if ret is FALSE:
                log(f"eval_forall: {node.variable} = {element} fails")
                return FALSE
        return TRUE

    def eval_directive(self, node: ast.Directive, env: Env):
        args = [self.eval_expr(a, env) for a in node.args]
        directives.run(env, node.name.name, args)

    def eval_source(self, node: ast.Source, env: Env) -> Value:
        ret: Value = NULL
        for e in node.expressions:
            ret = self.eval_expr(e, env)
        for d in node.directives:
            self.eval_directive(d, env)
        return ret
