"""Diagnostics and debugging utilities for blochlab."""

from .core import (
    assert_hermitian,
    assert_normalized,
    assert_unit_trace,
    bloch_vector_norm,
    is_hermitian,
    state_norm,
    trace_of,
)
from .debug_mode import (
    DEBUG_ENV_VAR,
    check_state,
    debug_flag_from_env,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "state_norm",
    "assert_normalized",
    "is_hermitian",
    "assert_hermitian",
    "trace_of",
    "assert_unit_trace",
    "bloch_vector_norm",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "check_state",
    "debug_flag_from_env",
    "DEBUG_ENV_VAR",
]
