from .types import (
    Value, NullVal, NumVal, BoolVal, ClassVal, UnknownVal, FormulaVal, SetVal, SystemVal,
    NULL, TRUE, FALSE, INFINITY, EMPTY, Env,
)
from .evaluator import Evaluator

__all__ = [
    "Value", "NullVal", "NumVal", "BoolVal", "ClassVal", "UnknownVal", "FormulaVal",
    "SetVal", "SystemVal", "NULL", "TRUE", "FALSE", "INFINITY", "EMPTY", "Env",
    "Evaluator",
]
