from typing import List, Optional, Tuple

import z3

from ..errors import ParseError
from ..lexing import Delim, Token

# ======================================
# Token Constraints (Z3)
# ======================================

delimiter_pairs = {
    "(": ")",
    "[": "]",
    "{": "}",
    "<": ">",
    "{[": "]}",
}

def check_nesting_order(tokens: List[Token]) -> Optional[Tuple[str, str]]:
    """Return ``(found, expected)`` for the first misplaced delimiter, or None."""
    stack: List[str] = []
    close_chars = set(delimiter_pairs.values())

    for t in tokens:
        if isinstance(t, Delim):
            d = t.lexeme
            if d in delimiter_pairs:
                stack.append(d)
            elif d in close_chars:
                if not stack:
                    return d, ""
                open_char = stack.pop()
                if delimiter_pairs[open_char] != d:
                    return d, delimiter_pairs[open_char]

    if stack:
        return "", delimiter_pairs[stack[-1]]
    return None

def check_delimiter_counts(tokens: List[Token]) -> bool:
    ctx = z3.Context()
    solver = z3.Solver(ctx=ctx)

    for open_char, close_char in delimiter_pairs.items():
        open_count = sum(1 for t in tokens if isinstance(t, Delim) and t.lexeme == open_char)
        close_count = sum(1 for t in tokens if isinstance(t, Delim) and t.lexeme == close_char)

        open_var = z3.Int(f"open_{open_char}", ctx=ctx)
        close_var = z3.Int(f"close_{close_char}", ctx=ctx)

        solver.add(open_var == open_count)
        solver.add(close_var == close_count)
        solver.add(open_var == close_var)

    return solver.check() == z3.sat

def check_delimiter_balance(tokens: List[Token]) -> None:
    """Raise ParseError unless every delimiter is closed, in order."""
    misplaced = check_nesting_order(tokens)
    if misplaced is not None:
        found, expected = misplaced
        if not found:
            raise ParseError(f"unbalanced delimiters, expected '{expected}' before the end of input")
        if not expected:
            raise ParseError(f"unbalanced delimiters, unexpected '{found}'", found)
        raise ParseError(f"unbalanced delimiters, expected '{expected}' but got '{found}'", found)

    if not check_delimiter_counts(tokens):
        raise ParseError("unbalanced delimiters")
