from dataclasses import dataclass
from typing import Optional


@dataclass
class EngineConfig:
    """Knobs for one ``Engine``.

    check_delimiters -- run the z3 delimiter check before parsing.
    scan_limit       -- largest modulus a brute-force congruence scan may walk;
                        None leaves scans unbounded.
    debug            -- turn on evaluator debug logging.
    """
    check_delimiters: bool = True
    scan_limit: Optional[int] = None
    debug: bool = False

    @staticmethod
    def default() -> 'EngineConfig':
        return EngineConfig()
