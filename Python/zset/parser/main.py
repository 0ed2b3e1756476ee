from typing import List, Optional

from ..config import EngineConfig
from ..constraints import check_delimiter_balance
from ..lexing import Token, Tokenizer, lex, significant
from ..syntax import ast
from .engine import Parser

def parse_all(tokens: List[Token]) -> ast.Node:
    return Parser(tokens).parse_program()

def parse(source: str, config: Optional[EngineConfig] = None, tokenizers: Optional[List[Tokenizer]] = None) -> ast.Node:
    config = config or EngineConfig.default()
    tokens = significant(lex(source, tokenizers))
    if config.check_delimiters:
        check_delimiter_balance(tokens)
    return parse_all(tokens)
