from typing import Callable, Dict, List

from ..errors import SemanticError, ZSetTypeError
from ..prelude import logic
from .types import Env, NumVal, SetVal, Value

# ======================================
# Directives: @name(args...)
# ======================================

Directive = Callable[[Env, List[Value]], None]

def print_directive(env: Env, args: List[Value]):
    for arg in args:
        print(str(arg))

def ext_directive(env: Env, args: List[Value]):
    for arg in args:
        if not isinstance(arg, SetVal):
            raise ZSetTypeError("ext directive only accepts sets")
        print(arg.show_elements())

def tcr_directive(env: Env, args: List[Value]):
    nums = []
    for arg in args:
        if not isinstance(arg, NumVal):
            raise ZSetTypeError("tcr directive only accepts numbers")
        nums.append(arg)
    print(str(logic.coprime(env, nums)))

registry: Dict[str, Directive] = {
    "print": print_directive,
    "ext": ext_directive,
    "tcr": tcr_directive,
}

def run(env: Env, name: str, args: List[Value]):
    directive = registry.get(name)
    if directive is None:
        raise SemanticError(f'the "{name}" directive doesn\'t exist')
    directive(env, args)
