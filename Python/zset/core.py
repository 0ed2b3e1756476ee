import logging
from typing import Optional

from .config import EngineConfig
from .errors import ResourceError
from .lexing import TokenizerConfig, build_tokenizers
from .parser import parse
from .prelude import initial_bindings
from .runtime import evaluator
from .runtime.types import Env, Value
from .syntax import ast

logger = logging.getLogger(__name__)

class Engine:
    """Parses and evaluates ZSet source against one long-lived root environment.

    Bindings persist from one ``eval`` call to the next until ``clear``.
    """

    def __init__(self, config: Optional[EngineConfig] = None, tokenizer_config: Optional[TokenizerConfig] = None):
        self.config = config or EngineConfig.default()
        self.tokenizers = build_tokenizers(tokenizer_config or TokenizerConfig.default())
        evaluator.DEBUG_EVAL = self.config.debug
        self.evaluator = evaluator.Evaluator(self.config.scan_limit)
        self.env = Env.initial(initial_bindings)

    def parse(self, code: str) -> ast.Node:
        return parse(code, self.config, self.tokenizers)

    def eval(self, code: str) -> Value:
        node = self.parse(code)
        logger.debug("evaluating %r", node)
        try:
            return self.evaluator.eval_expr(node, self.env)
        except RecursionError as e:
            raise ResourceError("maximum evaluation depth exceeded (is a variable defined in terms of itself?)") from e

    def exec(self, code: str) -> None:
        self.eval(code)

    def clear(self):
        self.env = Env.initial(initial_bindings)

def eval_program(code: str, config: Optional[EngineConfig] = None) -> Value:
    """Evaluate ``code`` in a fresh engine."""
    return Engine(config).eval(code)
