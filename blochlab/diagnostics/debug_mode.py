"""Debug mode for blochlab.

When enabled, the simulator verifies the state after every gate via
:func:`check_state`. The initial value comes from ``BLOCHLAB_DEBUG``.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

import torch

from .core import assert_normalized

DEBUG_ENV_VAR = "BLOCHLAB_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def debug_flag_from_env(environ: Optional[dict] = None) -> bool:
    """Read the debug flag from ``environ`` (default: ``os.environ``)."""
    env = os.environ if environ is None else environ
    return env.get(DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = debug_flag_from_env()


def is_debug_enabled() -> bool:
    """Return whether debug mode is currently enabled."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Globally enable or disable debug mode."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily enable or disable debug mode.

    Example
    -------
    >>> with debug_context(True):
    ...     sim.apply_single_qubit_gate("H", 0)
    """
    prev = is_debug_enabled()
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(prev)


def check_state(state: torch.Tensor, after: str = "gate", atol: float = 1e-6) -> None:
    """
    Verify ``state`` is a normalized statevector when debug mode is on.

    Does nothing when debug mode is off.

    Raises
    ------
    ValueError
        If debug mode is on and the norm deviates from 1 by more than ``atol``.
    """
    if not _debug_enabled:
        return
    try:
        assert_normalized(state, atol=atol)
    except ValueError as exc:
        raise ValueError(f"State check failed after {after}: {exc}") from exc


__all__ = [
    "DEBUG_ENV_VAR",
    "debug_flag_from_env",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "check_state",
]
