"""
Error types raised by the ZSet front end and evaluator.

    ZSetError (base)
    ├── LexError        - unexpected character, unclosed comment
    ├── ParseError      - unexpected token, malformed system, unbalanced delimiters
    └── EvalError       - evaluation failures
        ├── ZSetTypeError   - operand kind does not match the operation
        ├── SemanticError   - well-typed but meaningless request
        └── ResourceError   - scan limit, recursion depth, modulo by zero

Every error aborts the current ``Engine.eval`` call. Bindings made before the
failure stay in the environment.
"""

from typing import Optional


class ZSetError(Exception):
    """Base class for every error the interpreter raises on purpose."""

    phase = "zset"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class LexError(ZSetError):
    phase = "lexing"

    def __init__(self, message: str, pos: Optional[int] = None):
        super().__init__(message)
        self.pos = pos


class ParseError(ZSetError):
    phase = "parsing"

    def __init__(self, message: str, lexeme: Optional[str] = None):
        super().__init__(message)
        self.lexeme = lexeme


class EvalError(ZSetError):
    phase = "evaluation"


class ZSetTypeError(EvalError):
    pass


class SemanticError(EvalError):
    pass


class ResourceError(EvalError):
    pass
