from .engine import Parser
from .main import parse, parse_all

__all__ = ["Parser", "parse", "parse_all"]
