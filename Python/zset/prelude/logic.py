from typing import Sequence

from ..runtime.types import FALSE, TRUE, BoolVal, ClassVal, Env, NumVal, SetVal, Value, boolean
from .arithmetic import gcd, modulo

def negate(b: BoolVal) -> BoolVal:
    return FALSE if b is TRUE else TRUE

def values_equal(a: Value, b: Value) -> BoolVal:
    return boolean(a.key == b.key)

def congruent(env: Env, a: NumVal, b: NumVal, m: NumVal) -> BoolVal:
    return values_equal(modulo(env, a, m), modulo(env, b, m))

def in_class(env: Env, a: NumVal, c: ClassVal) -> BoolVal:
    return congruent(env, a, c.remainder, c.modulus)

def in_set(a: Value, s: SetVal) -> BoolVal:
    return boolean(a in s)

def coprime(env: Env, nums: Sequence[NumVal]) -> BoolVal:
    """True when every pair in ``nums`` has gcd 1."""
    one = env.number_of(1)
    for i in range(len(nums)):
        for j in range(i + 1, len(nums)):
            if values_equal(gcd(env, nums[i], nums[j]), one) is FALSE:
                return FALSE
    return TRUE
