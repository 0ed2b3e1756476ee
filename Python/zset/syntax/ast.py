from dataclasses import dataclass, field
from typing import Dict, List

# ======================================
# AST Nodes
# ======================================

class Node:
    pass

class Expr(Node):
    pass

@dataclass
class Ident(Expr):
    name: str
    def __repr__(self): return f"Ident({self.name})"
    def __str__(self): return self.name

@dataclass
class Num(Expr):
    value: str
    def __repr__(self): return f"Num({self.value})"
    def __str__(self): return self.value

@dataclass
class Unary(Expr):
    op: str
    expr: Expr
    def __repr__(self): return f"Unary({self.op}, {self.expr!r})"
    def __str__(self):
        if self.op == "not" and isinstance(self.expr, Binary) and self.expr.op in ("equal", "in"):
            e = self.expr
            return f"{bracket(e.left, 2)} not {e.op} {bracket(e.right, 3)}"
        operand = bracket(self.expr, 6)
        if self.op.isalpha():
            return f"{self.op} {operand}"
        return f"{self.op}{operand}"

@dataclass
class Binary(Expr):
    op: str
    left: Expr
    right: Expr
    def __repr__(self): return f"Binary({self.op}, {self.left!r}, {self.right!r})"
    def __str__(self):
        p = precedence.get(self.op, 0)
        # left-associative, and the right operand of equal/in is read at term level
        right_min = p + 1 if p > 1 else 3
        return f"{bracket(self.left, p)} {self.op} {bracket(self.right, right_min)}"

# Binding strength of the binary operators, loosest first
precedence: Dict[str, int] = {
    "equal": 1, "in": 1,
    "|": 2, "gcd": 2,
    "+": 3, "-": 3,
    "*": 4, "mod": 4,
    "^": 5,
}

def bracket(e: Expr, min_precedence: int) -> str:
    if isinstance(e, Binary) and precedence.get(e.op, 0) < min_precedence:
        return f"({e})"
    return str(e)

@dataclass
class Assignment(Expr):
    name: Ident
    value: Expr
    def __repr__(self): return f"Assignment({self.name!r}, {self.value!r})"
    def __str__(self): return f"{self.name} = {self.value}"

@dataclass
class Parenthesis(Expr):
    expr: Expr
    def __repr__(self): return f"Parenthesis({self.expr!r})"
    def __str__(self): return f"({self.expr})"

@dataclass
class Congruence(Expr):
    left: Expr
    right: Expr
    mod: Parenthesis
    def __repr__(self): return f"Congruence({self.left!r}, {self.right!r}, {self.mod!r})"
    def __str__(self): return f"{self.left} cong {self.right} {self.mod}"

@dataclass
class CongruenceClass(Expr):
    remainder: Expr
    modulus: Expr
    def __repr__(self): return f"CongruenceClass({self.remainder!r}, {self.modulus!r})"
    def __str__(self): return f"<{self.remainder}, {self.modulus}>"

@dataclass
class SetLiteral(Expr):
    elements: List[Expr]
    def __repr__(self): return f"SetLiteral({self.elements!r})"
    def __str__(self): return "{" + ", ".join(str(e) for e in self.elements) + "}"

@dataclass
class Index(Expr):
    expr: Expr
    index: Expr
    def __repr__(self): return f"Index({self.expr!r}, {self.index!r})"
    def __str__(self): return f"{self.expr}[{self.index}]"

@dataclass
class CongruenceSystem(Expr):
    unknown: Ident
    congruences: List[Congruence]
    def __repr__(self): return f"CongruenceSystem({self.unknown!r}, {self.congruences!r})"
    def __str__(self):
        return "{[" + f"{self.unknown}: " + ", ".join(str(c) for c in self.congruences) + "]}"

@dataclass
class ForAll(Expr):
    variable: Ident
    iterator: Expr
    body: Expr
    def __repr__(self): return f"ForAll({self.variable!r}, {self.iterator!r}, {self.body!r})"
    def __str__(self): return f"forall {self.variable} in {self.iterator}: {self.body}"

@dataclass
class Directive(Node):
    name: Ident
    args: List[Expr]
    def __repr__(self): return f"Directive({self.name!r}, {self.args!r})"
    def __str__(self): return f"@{self.name}(" + ", ".join(str(a) for a in self.args) + ")"

# Comments are keyed by the index of the expression they follow (-1 before any).
@dataclass
class Source(Node):
    expressions: List[Expr]
    directives: List[Directive]
    comments: Dict[int, str] = field(default_factory=dict)
    def __repr__(self): return f"Source({self.expressions!r}, {self.directives!r})"
    def __str__(self):
        return "\n".join([str(e) for e in self.expressions] + [str(d) for d in self.directives])
