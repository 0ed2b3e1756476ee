from ..runtime.types import EMPTY, FALSE, INFINITY, TRUE
from . import arithmetic, logic, primitives

# Constants every root environment starts with
initial_bindings: dict = {
    "true": TRUE,
    "false": FALSE,
    "infinity": INFINITY,
    "empty": EMPTY,
}

eval_primitive = primitives.eval_primitive
eval_unary = primitives.eval_unary
values_equal = logic.values_equal
