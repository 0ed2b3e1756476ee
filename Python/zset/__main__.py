import logging
import os
import sys
import time

from .config import EngineConfig
from .core import Engine
from .errors import ZSetError
from .runtime.types import NULL

def print_result(engine: Engine, code: str, use_debug: bool = False) -> bool:
    start = time.time() * 1000
    try:
        result = engine.eval(code)
    except ZSetError as e:
        print(f"Evaluation error: {e}")
        if use_debug:
            print(f"  Phase: {e.phase}")
        return False

    if result is not NULL:
        print(f"Result: {result}")
    if use_debug:
        print(f"  Time: {int(time.time() * 1000 - start)}ms")
    return True

def repl(engine: Engine, use_debug: bool = False):
    print("ZSet REPL (:clear resets the environment, :quit exits)")
    while True:
        try:
            line = input("zset> ")
        except EOFError:
            print()
            return
        line = line.strip()
        if not line:
            continue
        if line == ":quit":
            return
        if line == ":clear":
            engine.clear()
            continue
        print_result(engine, line, use_debug)

def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 1:
        print_usage()
        return 1

    options = set(args[1:])
    use_debug = "debug" in options
    config = EngineConfig(check_delimiters="nocheck" not in options, debug=use_debug)

    if use_debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")

    engine = Engine(config)

    if args[0] == "repl":
        repl(engine, use_debug)
        return 0

    input_path = os.path.abspath(args[0])
    try:
        with open(input_path, 'r', encoding='utf-8') as f:
            input_str = f.read()
    except OSError as e:
        print(f"Failed to read file: {input_path}")
        print(f"Error: {e}")
        return 1

    if use_debug:
        print("=== ZSet ===")
        print(f"Input: {input_path}")
        print(f"Delimiter check: {'enabled' if config.check_delimiters else 'disabled'}")
        print()

    return 0 if print_result(engine, input_str, use_debug) else 1

def print_usage():
    print("""Usage:
  python -m zset <input-file> [options...]
  python -m zset repl [options...]

Options:
  debug    - Enable evaluator debug logging
  nocheck  - Skip the delimiter balance check

Examples:
  python -m zset tests/crt.zs
  python -m zset tests/crt.zs debug
""")

if __name__ == "__main__":
    sys.exit(main())
