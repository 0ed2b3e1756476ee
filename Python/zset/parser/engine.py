import logging
from typing import Dict, List, Optional, Set

from ..errors import ParseError
from ..lexing import Comment, Delim, Ident, Keyword, Number, Op, Token, WS
from ..syntax import ast

logger = logging.getLogger(__name__)

class Parser:
    """Recursive-descent parser over a lexed token list.

    Precedence, loosest first: ``cong`` suffix, ``equal``/``in``/``not``,
    ``|``/``gcd``, ``+``/``-``, ``*``/``mod``, ``^``, prefix unary operators.
    """

    binary_logic: Set[str] = {"in", "equal", "not"}
    binary_expr: Set[str] = {"|", "gcd"}
    binary_term: Set[str] = {"+", "-"}
    binary_factor: Set[str] = {"*", "mod"}
    binary_exponent: Set[str] = {"^"}
    unary_operators: Set[str] = {"-", "not", "#", "rem", "mod", "res"}

    def __init__(self, tokens: List[Token]):
        self.tokens = [t for t in tokens if not isinstance(t, WS)]
        self.pos = 0

    # --- token helpers ---

    @property
    def tok(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def next(self):
        self.pos += 1

    def at(self, *lexemes: str) -> bool:
        """True when the current token is an operator, delimiter or keyword in ``lexemes``."""
        t = self.tok
        return isinstance(t, (Op, Delim, Keyword)) and t.lexeme in lexemes

    def expect(self, lexeme: str):
        if not self.at(lexeme):
            raise ParseError(f"invalid token, expected '{lexeme}' but got '{self.describe()}'", self.describe())
        self.next()

    def describe(self) -> str:
        return self.tok.lexeme if self.tok is not None else "end of input"

    # --- primaries ---

    def parse_ident(self) -> ast.Ident:
        if not isinstance(self.tok, Ident):
            raise ParseError(f"invalid token, expected 'identifier' but got '{self.describe()}'", self.describe())
        n = ast.Ident(self.tok.lexeme)
        self.next()
        return n

    def parse_num(self) -> ast.Num:
        if not isinstance(self.tok, Number):
            raise ParseError(f"invalid token, expected 'number' but got '{self.describe()}'", self.describe())
        n = ast.Num(self.tok.lexeme)
        self.next()
        return n

    def parse_parenthesis(self) -> ast.Parenthesis:
        self.expect("(")
        n = ast.Parenthesis(self.parse_expr())
        self.expect(")")
        return n

    def parse_congruence_class(self) -> ast.CongruenceClass:
        self.expect("<")
        r = self.parse_expr()
        self.expect(",")
        m = self.parse_expr()
        self.expect(">")
        return ast.CongruenceClass(r, m)

    def parse_set(self) -> ast.SetLiteral:
        self.expect("{")
        if self.at("}"):
            self.next()
            return ast.SetLiteral([])
        elements = [self.parse_expr()]
        while self.at(","):
            self.next()
            elements.append(self.parse_expr())
        self.expect("}")
        return ast.SetLiteral(elements)

    def parse_system(self) -> ast.CongruenceSystem:
        self.expect("{[")
        u = self.parse_ident()
        self.expect(":")
        congruences: List[ast.Congruence] = []
        if not self.at("]}"):
            congruences.append(self.parse_system_entry())
            while self.at(","):
                self.next()
                congruences.append(self.parse_system_entry())
        self.expect("]}")
        return ast.CongruenceSystem(u, congruences)

    def parse_system_entry(self) -> ast.Congruence:
        e = self.parse_expr()
        if not isinstance(e, ast.Congruence):
            raise ParseError("the expression inside of the system must be a congruence")
        return e

    def parse_forall(self) -> ast.ForAll:
        self.expect("forall")
        v = self.parse_ident()
        self.expect("in")
        iterator = self.parse_expr()
        self.expect(":")
        return ast.ForAll(v, iterator, self.parse_expr())

    def parse_minimal_expr(self) -> ast.Expr:
        if isinstance(self.tok, Ident):
            n = self.parse_ident()
            if self.at("["):
                self.next()
                index = self.parse_expr()
                self.expect("]")
                return ast.Index(n, index)
            return n
        if self.at("("):
            return self.parse_parenthesis()
        if self.at("<"):
            return self.parse_congruence_class()
        if self.at("{"):
            return self.parse_set()
        if self.at("{["):
            return self.parse_system()
        if self.at("forall"):
            return self.parse_forall()
        return self.parse_num()

    # --- operators ---

    def parse_unary(self) -> ast.Expr:
        if not self.at(*self.unary_operators):
            return self.parse_minimal_expr()
        op = self.tok.lexeme
        self.next()
        return ast.Unary(op, self.parse_minimal_expr())

    def parse_generic_binary(self, ops: Set[str], next_level) -> ast.Expr:
        n = next_level()
        while self.at(*ops):
            op = self.tok.lexeme
            self.next()
            n = ast.Binary(op, n, next_level())
        return n

    def parse_binary_exponent(self) -> ast.Expr:
        return self.parse_generic_binary(self.binary_exponent, self.parse_unary)

    def parse_binary_factor(self) -> ast.Expr:
        return self.parse_generic_binary(self.binary_factor, self.parse_binary_exponent)

    def parse_binary_term(self) -> ast.Expr:
        return self.parse_generic_binary(self.binary_term, self.parse_binary_factor)

    def parse_binary_expr(self) -> ast.Expr:
        return self.parse_generic_binary(self.binary_expr, self.parse_binary_term)

    def parse_binary_logic(self) -> ast.Expr:
        n = self.parse_binary_expr()
        while self.at(*self.binary_logic):
            op = self.tok.lexeme
            self.next()
            if op == "not":
                if not self.at("equal", "in"):
                    raise ParseError(f"invalid token, expected 'equal' or 'in' but got '{self.describe()}'", self.describe())
                inner = self.tok.lexeme
                self.next()
                n = ast.Unary("not", ast.Binary(inner, n, self.parse_binary_term()))
            else:
                n = ast.Binary(op, n, self.parse_binary_term())
        return n

    # --- statements ---

    def parse_congruence(self, left: ast.Expr) -> ast.Congruence:
        self.expect("cong")
        right = self.parse_expr()
        return ast.Congruence(left, right, self.parse_parenthesis())

    def parse_expr(self) -> ast.Expr:
        n = self.parse_binary_logic()
        if self.at("cong"):
            return self.parse_congruence(n)
        return n

    def parse_directive(self) -> ast.Directive:
        self.expect("@")
        name = self.parse_ident()
        self.expect("(")
        args: List[ast.Expr] = []
        if not self.at(")"):
            args.append(self.parse_expr())
            while self.at(","):
                self.next()
                args.append(self.parse_expr())
        self.expect(")")
        return ast.Directive(name, args)

    def parse_program(self) -> ast.Node:
        exprs: List[ast.Expr] = []
        directives: List[ast.Directive] = []
        comments: Dict[int, str] = {}

        while self.tok is not None:
            if isinstance(self.tok, Comment):
                comments[len(exprs) - 1] = self.tok.text
                self.next()
                continue

            if self.at("@"):
                directives.append(self.parse_directive())
                continue

            expr = self.parse_expr()
            if isinstance(expr, ast.Ident) and self.at("="):
                self.next()
                expr = ast.Assignment(expr, self.parse_expr())
            exprs.append(expr)

        logger.debug("parsed %d expressions, %d directives", len(exprs), len(directives))

        if len(exprs) == 1 and not directives:
            return exprs[0]
        if len(directives) == 1 and not exprs:
            return directives[0]
        return ast.Source(exprs, directives, comments)
