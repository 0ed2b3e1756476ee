from typing import Callable, Dict

from ..errors import ResourceError, SemanticError, ZSetTypeError
from ..runtime.types import ClassVal, Env, NumVal

def zmod(a: int, b: int) -> int:
    """Remainder with a single-step fix-up for negative dividends.

    ``a`` is shifted by ``b`` once when negative, then the remainder takes the
    sign of the (shifted) dividend. Values below ``-b`` stay negative:
    ``zmod(-3, 5) == 2`` but ``zmod(-7, 5) == -2``.
    """
    if b == 0:
        raise ResourceError("modulo by zero")
    x = a if a >= 0 else a + b
    r = abs(x) % abs(b)
    return -r if x < 0 else r

def _finite(op: str, *nums: NumVal):
    for n in nums:
        if n.is_infinite:
            raise ZSetTypeError(f"the {op} operation is not defined for infinity")

def add(env: Env, a: NumVal, b: NumVal) -> NumVal:
    _finite("+", a, b)
    return env.number_of(a.n + b.n)

def sub(env: Env, a: NumVal, b: NumVal) -> NumVal:
    _finite("-", a, b)
    return env.number_of(a.n - b.n)

def mul(env: Env, a: NumVal, b: NumVal) -> NumVal:
    _finite("*", a, b)
    return env.number_of(a.n * b.n)

def power(env: Env, a: NumVal, b: NumVal) -> NumVal:
    _finite("^", a, b)
    if b.n < 0:
        raise ZSetTypeError("the ^ operation needs a non-negative exponent")
    return env.number_of(a.n ** b.n)

def modulo(env: Env, a: NumVal, b: NumVal) -> NumVal:
    _finite("mod", a, b)
    return env.number_of(zmod(a.n, b.n))

def gcd(env: Env, a: NumVal, b: NumVal) -> NumVal:
    _finite("gcd", a, b)
    while b.n != 0:
        a, b = b, modulo(env, a, b)
    return a

def neg(env: Env, a: NumVal) -> NumVal:
    _finite("-", a)
    return env.number_of(-a.n)

number_ops: Dict[str, Callable[[Env, NumVal, NumVal], NumVal]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "^": power,
    "mod": modulo,
    "gcd": gcd,
}

def eval_arithmetic(env: Env, op: str, a: NumVal, b: NumVal) -> NumVal:
    fn = number_ops.get(op)
    if fn is None:
        raise ZSetTypeError(f"the {op} is not a valid operation for numbers")
    return fn(env, a, b)

# ======================================
# Congruence classes
# ======================================

def congruence_class(env: Env, r: NumVal, m: NumVal) -> ClassVal:
    return ClassVal(modulo(env, r, m), m)

def compose(env: Env, a: ClassVal, b: ClassVal) -> ClassVal:
    """Merge two classes into one modulo ``a.modulus * b.modulus``."""
    return congruence_class(
        env,
        add(env, mul(env, b.remainder, a.modulus), a.remainder),
        mul(env, a.modulus, b.modulus),
    )

class_ops = {"+": add, "-": sub, "*": mul, "^": power}

def eval_class_arithmetic(env: Env, op: str, a: ClassVal, b: ClassVal) -> ClassVal:
    if op == "|":
        return compose(env, a, b)
    if a.modulus != b.modulus:
        raise SemanticError("both congruence class must have the same modulus")
    fn = class_ops.get(op)
    if fn is None:
        raise ZSetTypeError(f"the {op} is not a valid operation for congruence classes")
    return congruence_class(env, fn(env, a.remainder, b.remainder), a.modulus)

def index_class(env: Env, c: ClassVal, i: NumVal) -> NumVal:
    return add(env, c.remainder, mul(env, c.modulus, i))
