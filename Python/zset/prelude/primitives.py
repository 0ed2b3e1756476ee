from ..errors import ZSetTypeError
from ..runtime.types import (
    INFINITY, NULL, BoolVal, ClassVal, Env, NumVal, SetVal, Value,
)
from . import arithmetic, logic

def eval_primitive(env: Env, op: str, a: Value, b: Value) -> Value:
    """Binary operators over already-evaluated, formula-free operands."""
    if op == "equal":
        return logic.values_equal(a, b)

    if op == "in":
        if isinstance(b, SetVal):
            return logic.in_set(a, b)
        if isinstance(b, ClassVal):
            if not isinstance(a, NumVal):
                raise ZSetTypeError("the left side of 'in' operator for congruence class must have a number")
            return logic.in_class(env, a, b)
        raise ZSetTypeError("the right side of 'in' operator must be a set-like type")

    if type(a) is not type(b):
        raise ZSetTypeError(f"both side of binary operation must have the same type, got {a.kind} and {b.kind}")

    if isinstance(a, ClassVal) and isinstance(b, ClassVal):
        return arithmetic.eval_class_arithmetic(env, op, a, b)
    if isinstance(a, NumVal) and isinstance(b, NumVal):
        return arithmetic.eval_arithmetic(env, op, a, b)

    raise ZSetTypeError(f"invalid type for binary operation: {a.kind}")

def cardinal(env: Env, s: Value) -> NumVal:
    if isinstance(s, ClassVal):
        return INFINITY
    if isinstance(s, SetVal):
        return env.number_of(s.cardinal)
    raise ZSetTypeError('the "#" operator is only allowed for set-like types')

def index(env: Env, target: Value, i: Value) -> Value:
    if not isinstance(i, NumVal):
        raise ZSetTypeError("the index value must be a number")
    if isinstance(target, ClassVal):
        return arithmetic.index_class(env, target, i)
    if isinstance(target, SetVal):
        if i.is_infinite:
            return NULL
        found = target.at(i.n)
        return found if found is not None else NULL
    raise ZSetTypeError("only set-like types are allowed to access them with an index")

def eval_unary(env: Env, op: str, v: Value) -> Value:
    """Prefix operators other than ``res``, which the evaluator hands to the solver."""
    if op == "not":
        if not isinstance(v, BoolVal):
            raise ZSetTypeError('the "not" operator is only allowed for booleans')
        return logic.negate(v)
    if op == "#":
        return cardinal(env, v)
    if op == "-":
        if not isinstance(v, NumVal):
            raise ZSetTypeError('the "-" operator is only allowed for numbers')
        return arithmetic.neg(env, v)
    if op in ("mod", "rem"):
        if not isinstance(v, ClassVal):
            raise ZSetTypeError(f'the "{op}" operator is only allowed for congruence class types')
        return v.modulus if op == "mod" else v.remainder
    raise ZSetTypeError(f"invalid operator: {op}")
