from .errors import ZSetError, LexError, ParseError, EvalError, ZSetTypeError, SemanticError, ResourceError
from .config import EngineConfig
from .lexing import Token, TokenizerConfig, lex
from .parser import parse
from .runtime import (
    Value, NumVal, BoolVal, ClassVal, UnknownVal, FormulaVal, SetVal, SystemVal,
    NULL, TRUE, FALSE, INFINITY, EMPTY, Env,
)
from .core import Engine, eval_program

__all__ = [
    "ZSetError", "LexError", "ParseError", "EvalError", "ZSetTypeError", "SemanticError", "ResourceError",
    "EngineConfig", "Token", "TokenizerConfig", "lex", "parse",
    "Value", "NumVal", "BoolVal", "ClassVal", "UnknownVal", "FormulaVal", "SetVal", "SystemVal",
    "NULL", "TRUE", "FALSE", "INFINITY", "EMPTY", "Env",
    "Engine", "eval_program",
]
