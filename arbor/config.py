from __future__ import annotations
import os
from typing import Optional


_TRUE_VALUES = ("1", "true", "yes", "on")

# Convenience constants bound in every fresh top-level environment.
INITIAL_BINDINGS: dict[str, int] = {"i": 1, "v": 5, "x": 10}


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


def int_from_env(var: str, default: Optional[int] = None, minimum: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if minimum is not None and value < minimum:
        raise ValueError(f"{var} must be at least {minimum}, got {value}")
    return value


def get_strict_identifiers() -> bool:
    return flag_from_env('ARBOR_STRICT_IDENTIFIERS')


def get_recursion_limit() -> Optional[int]:
    return int_from_env('ARBOR_RECURSION_LIMIT', minimum=1)
