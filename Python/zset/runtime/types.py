import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ..syntax import ast

# ======================================
# Values
# ======================================

class Value:
    """Base of the closed set of runtime values.

    Every value exposes ``key``, a string that is a pure function of its kind
    and contents. Equality, set membership and deduplication all go through it.
    """
    kind = "value"

    @property
    def key(self) -> str:
        raise NotImplementedError

    def __eq__(self, other: Any):
        return isinstance(other, Value) and self.key == other.key

    def __hash__(self):
        return hash(self.key)

@dataclass(eq=False)
class NullVal(Value):
    kind = "null"
    @property
    def key(self) -> str: return "Z0"
    def __str__(self): return "null"

@dataclass(eq=False)
class NumVal(Value):
    n: Union[int, float]
    kind = "number"

    @property
    def is_infinite(self) -> bool:
        return isinstance(self.n, float) and math.isinf(self.n)

    @property
    def key(self) -> str: return f"N{self}"

    def __str__(self):
        if self.is_infinite:
            return "infinity" if self.n > 0 else "-infinity"
        return str(self.n)

    def __repr__(self): return f"NumVal({self})"

@dataclass(eq=False)
class BoolVal(Value):
    b: bool
    kind = "boolean"
    @property
    def key(self) -> str: return "B1" if self.b else "B0"
    def __str__(self): return str(self.b).lower()
    def __bool__(self): return self.b

@dataclass(eq=False)
class ClassVal(Value):
    """A congruence class. Build it through ``prelude.arithmetic.congruence_class``
    so the remainder is reduced."""
    remainder: NumVal
    modulus: NumVal
    kind = "congruence class"
    @property
    def key(self) -> str: return f"C{self.remainder.key}M{self.modulus.key}"
    def __str__(self): return f"[{self.remainder}] (mod {self.modulus})"
    def __repr__(self): return f"ClassVal({self.remainder}, {self.modulus})"

@dataclass(eq=False)
class UnknownVal(Value):
    name: str
    kind = "unknown"
    @property
    def key(self) -> str: return f"U{self.name}"
    def __str__(self): return self.name

@dataclass(eq=False)
class FormulaVal(Value):
    node: ast.Expr
    unknowns: Tuple[UnknownVal, ...]
    kind = "formula"

    def __post_init__(self):
        seen: Dict[str, UnknownVal] = {}
        for u in self.unknowns:
            seen.setdefault(u.name, u)
        if not seen:
            raise ValueError("a formula needs at least one unknown")
        self.unknowns = tuple(seen.values())

    @staticmethod
    def of(node: ast.Expr, *parts: 'FormulaVal') -> 'FormulaVal':
        unknowns: List[UnknownVal] = []
        for p in parts:
            unknowns.extend(p.unknowns)
        return FormulaVal(node, tuple(unknowns))

    @property
    def key(self) -> str:
        return f"F{len(self.unknowns)}" + "".join(u.name for u in self.unknowns)

    def __str__(self):
        return f"f({', '.join(str(u) for u in self.unknowns)}): {self.node}"

@dataclass(eq=False)
class SetVal(Value):
    elements: Dict[str, Value] = field(default_factory=dict)
    kind = "set"

    @staticmethod
    def of(items: Iterable[Value]) -> 'SetVal':
        elements: Dict[str, Value] = {}
        for item in items:
            elements.setdefault(item.key, item)
        return SetVal(elements)

    @property
    def cardinal(self) -> int:
        return len(self.elements)

    def items(self) -> List[Value]:
        return list(self.elements.values())

    def at(self, i: int) -> Optional[Value]:
        if 0 <= i < len(self.elements):
            return self.items()[i]
        return None

    def __contains__(self, value: Value) -> bool:
        return value.key in self.elements

    @property
    def key(self) -> str:
        return f"S{self.cardinal}" + "|".join(sorted(self.elements))

    def __str__(self): return f"{{Set: {self.cardinal}}}"

    def show_elements(self) -> str:
        return "{" + ", ".join(str(e) for e in self.items()) + "}"

@dataclass(eq=False)
class SystemVal(Value):
    system: ast.CongruenceSystem
    kind = "system"

    @property
    def key(self) -> str:
        return f"Y{self.system.unknown.name}:" + ";".join(str(c) for c in self.system.congruences)

    def __str__(self):
        return f"{{[{self.system.unknown.name}: {len(self.system.congruences)}]}}"

NULL = NullVal()
TRUE = BoolVal(True)
FALSE = BoolVal(False)
INFINITY = NumVal(math.inf)
EMPTY = SetVal()

def boolean(b: bool) -> BoolVal:
    return TRUE if b else FALSE

# ======================================
# Environment
# ======================================

class Env:
    """One scope in a parent-linked chain.

    ``objects`` is private to the scope. ``constants`` and ``numbers`` are the
    root's dictionaries, shared by reference with every descendant.
    """

    def __init__(self, outer: Optional['Env'] = None):
        self.outer = outer
        self.numbers: Dict[Any, NumVal] = outer.numbers if outer is not None else {}
        self.constants: Dict[str, Value] = outer.constants if outer is not None else {}
        self.objects: Dict[str, Value] = {}

    def store(self, name: str, val: Value) -> Value:
        self.objects[name] = val
        return val

    def const(self, name: str, val: Value) -> Value:
        self.constants[name] = val
        return val

    def lookup(self, name: str) -> Optional[Value]:
        if name in self.constants:
            return self.constants[name]
        if name in self.objects:
            return self.objects[name]
        if self.outer is not None:
            return self.outer.lookup(name)
        return None

    def number_of(self, n: Union[int, float]) -> NumVal:
        if n not in self.numbers:
            self.numbers[n] = NumVal(n)
        return self.numbers[n]

    def child(self) -> 'Env':
        return Env(self)

    @staticmethod
    def initial(constants: Dict[str, Value]) -> 'Env':
        env = Env()
        for name, val in constants.items():
            env.const(name, val)
        env.number_of(0)
        return env
