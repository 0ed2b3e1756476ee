from . import ast

__all__ = ["ast"]
