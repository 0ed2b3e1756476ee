import logging
import re
from typing import Callable, Dict, List, Optional, Set, Tuple

from .errors import LexError

logger = logging.getLogger(__name__)

# ======================================
# Token Definition
# ======================================

class Token:
    def __init__(self, s: str):
        self.s = s

    @property
    def lexeme(self) -> str:
        return self.s

    def __repr__(self):
        return f"{self.__class__.__name__}({self.s})"

    def __eq__(self, other):
        return isinstance(other, self.__class__) and self.s == other.s

    def __hash__(self):
        return hash((self.__class__.__name__, self.s))

class Op(Token): pass
class Ident(Token): pass
class Keyword(Token): pass
class WS(Token): pass
class Number(Token): pass
class Delim(Token): pass

class Comment(Token):
    def __init__(self, s: str, text: str):
        super().__init__(s)
        self.text = text

# ======================================
# Tokenizer Config
# ======================================

class TokenizerConfig:
    def __init__(self, keywords: Set[str], operators: Dict[str, Token], delimiters: Set[str]):
        self.keywords = keywords
        self.operators = operators
        self.delimiters = delimiters

    @staticmethod
    def default() -> 'TokenizerConfig':
        return TokenizerConfig(
            keywords={"mod", "cong", "equal", "not", "in", "rem", "gcd", "res", "forall"},
            operators={
                "=": Op("="),
                "+": Op("+"),
                "-": Op("-"),
                "*": Op("*"),
                "^": Op("^"),
                "#": Op("#"),
                "|": Op("|"),
                "@": Op("@"),
            },
            delimiters={"(", ")", "[", "]", "{", "}", "<", ">", ",", ":", "{[", "]}"}
        )

# ======================================
# Tokenizer Types and Constructors
# ======================================

# Tokenizer: (input_str, pos) -> List[Tuple[Token, next_pos]]
Tokenizer = Callable[[str, int], List[Tuple[Token, int]]]

COMMENT_MARK = "---"

def lex_regex_longest(pattern: str, converter: Callable[[str], Token]) -> Tokenizer:
    regex = re.compile(pattern)

    def tokenizer(input_str: str, pos: int) -> List[Tuple[Token, int]]:
        m = regex.match(input_str, pos)
        if m and m.group(0):
            sub = m.group(0)
            return [(converter(sub), pos + len(sub))]
        return []

    return tokenizer

def lex_delim(delimiters: Set[str]) -> Tokenizer:
    def tokenizer(input_str: str, pos: int) -> List[Tuple[Token, int]]:
        matches = []
        for d in delimiters:
            if input_str.startswith(d, pos):
                matches.append((Delim(d), pos + len(d)))
        return matches
    return tokenizer

def lex_comment() -> Tokenizer:
    def tokenizer(input_str: str, pos: int) -> List[Tuple[Token, int]]:
        if not input_str.startswith(COMMENT_MARK, pos):
            return []
        end = input_str.find(COMMENT_MARK, pos + len(COMMENT_MARK))
        if end < 0:
            raise LexError("the comment was never closed", pos)
        raw = input_str[pos:end + len(COMMENT_MARK)]
        text = input_str[pos + len(COMMENT_MARK):end].lstrip(" \n")
        return [(Comment(raw, text), end + len(COMMENT_MARK))]
    return tokenizer

def build_tokenizers(config: TokenizerConfig) -> List[Tokenizer]:
    ident_regex = r"[a-zA-Z_][a-zA-Z_0-9]*"
    ws_regex = r"[ \t\r\n]+"
    number_regex = r"0|[1-9][0-9]*"

    # Sort operators by length desc to match longest first in regex alternation
    sorted_ops = sorted(config.operators.keys(), key=len, reverse=True)
    op_regex = "|".join(re.escape(k) for k in sorted_ops)

    return [
        lex_regex_longest(ws_regex, lambda s: WS(s)),
        lex_comment(),
        lex_regex_longest(number_regex, lambda s: Number(s)),
        lex_regex_longest(ident_regex, lambda s:
            Keyword(s) if s in config.keywords else Ident(s)
        ),
        lex_regex_longest(op_regex, lambda s: config.operators[s]),
        lex_delim(config.delimiters)
    ]

# ======================================
# Main Lexer
# ======================================

def lex(input_str: str, tokenizers: Optional[List[Tokenizer]] = None) -> List[Token]:
    """Split ``input_str`` into tokens, whitespace included.

    The first tokenizer that matches at a position wins; among its matches the
    longest is taken, so ``{[`` beats ``{``.
    """
    if tokenizers is None:
        tokenizers = build_tokenizers(TokenizerConfig.default())

    tokens: List[Token] = []
    pos = 0
    length = len(input_str)
    while pos < length:
        best: Optional[Tuple[Token, int]] = None
        for tokenizer in tokenizers:
            matches = tokenizer(input_str, pos)
            if matches:
                best = max(matches, key=lambda m: m[1])
                break
        if best is None:
            raise LexError(f"unexpected char: {input_str[pos]}", pos)
        tok, pos = best
        tokens.append(tok)

    logger.debug("lexed %d tokens: %s", len(tokens), show_tokens(tokens))
    return tokens

def significant(tokens: List[Token]) -> List[Token]:
    return [t for t in tokens if not isinstance(t, WS)]

# ======================================
# Display
# ======================================

def show_tokens(tokens: List[Token]) -> str:
    res = []
    for t in tokens:
        if isinstance(t, WS):
            res.append(" ")
        else:
            res.append(t.lexeme)
    return "".join(res)
