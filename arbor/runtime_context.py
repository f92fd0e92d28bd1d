from __future__ import annotations

from arbor import config

# NOTE: For now this is process-global. If threading is introduced,
# consider switching to contextvars or threading.local.
_strict_identifiers: bool = config.get_strict_identifiers()


def set_strict_identifiers(strict: bool) -> None:
    """Select how an identifier bound nowhere evaluates.

    Strict mode raises ArborUnboundSymbol; permissive mode (the default) yields
    the identifier's name as a String value.
    """
    global _strict_identifiers
    _strict_identifiers = strict


def get_strict_identifiers() -> bool:
    return _strict_identifiers
