"""Genesis state construction."""

from .assembler import ENDOWMENT, FINALITY_WEIGHT, build, pair_authorities
from .runtime import EMPTY_RUNTIME_CODE, load_runtime_code

__all__ = [
    "ENDOWMENT",
    "FINALITY_WEIGHT",
    "build",
    "pair_authorities",
    "EMPTY_RUNTIME_CODE",
    "load_runtime_code",
]
