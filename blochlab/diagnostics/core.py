"""Invariant checks for states, density matrices and Bloch vectors."""

from __future__ import annotations

import math
from typing import Sequence

import torch


def state_norm(state: torch.Tensor) -> float:
    """
    Compute the L2 norm of a state vector.

    Parameters
    ----------
    state:
        Complex tensor with shape (dim,).

    Returns
    -------
    float
        sqrt(<psi|psi>).
    """
    if state.dim() != 1:
        raise ValueError(
            f"state_norm expects a 1-D state vector, got shape {tuple(state.shape)}"
        )
    norm_sq = (state.conj() * state).sum().real
    return float(torch.sqrt(norm_sq).item())


def assert_normalized(state: torch.Tensor, atol: float = 1e-6) -> None:
    """
    Assert that a state vector has norm ~1 within a tolerance.

    Raises
    ------
    ValueError
        If the norm is non-finite or deviates from 1 by more than ``atol``.
    """
    norm = state_norm(state)
    if not math.isfinite(norm):
        raise ValueError("State norm is not finite.")
    if abs(norm - 1.0) > atol:
        raise ValueError(
            f"State is not normalized within tolerance {atol}. Norm found: {norm}"
        )


def is_hermitian(mat: torch.Tensor, atol: float = 1e-9) -> bool:
    """
    Check whether a square matrix equals its conjugate transpose.

    Parameters
    ----------
    mat:
        Complex tensor with shape (n, n).
    atol:
        Absolute tolerance for checking equality.
    """
    if mat.dim() != 2 or mat.shape[0] != mat.shape[1]:
        return False

    diff = mat - mat.conj().transpose(-2, -1)
    max_dev = diff.abs().max()
    if not torch.isfinite(max_dev):
        return False
    return bool(max_dev <= atol)


def assert_hermitian(mat: torch.Tensor, atol: float = 1e-9) -> None:
    """Raise ValueError unless ``mat`` is Hermitian within ``atol``."""
    if not is_hermitian(mat, atol=atol):
        raise ValueError(f"Matrix is not Hermitian within tolerance {atol}.")


def trace_of(mat: torch.Tensor) -> complex:
    """Return the trace of a square matrix as a builtin complex."""
    if mat.dim() != 2 or mat.shape[0] != mat.shape[1]:
        raise ValueError(f"trace_of expects a square matrix, got shape {tuple(mat.shape)}")
    return complex(torch.diagonal(mat).sum().item())


def assert_unit_trace(mat: torch.Tensor, atol: float = 1e-9) -> None:
    """Raise ValueError unless ``Tr(mat)`` is 1 within ``atol``."""
    tr = trace_of(mat)
    if abs(tr - 1.0) > atol:
        raise ValueError(f"Matrix trace {tr} differs from 1 by more than {atol}.")


def bloch_vector_norm(vector: Sequence[float]) -> float:
    """Euclidean length |r| of a Bloch vector (x, y, z)."""
    x, y, z = vector
    return float((x * x + y * y + z * z) ** 0.5)


__all__ = [
    "state_norm",
    "assert_normalized",
    "is_hermitian",
    "assert_hermitian",
    "trace_of",
    "assert_unit_trace",
    "bloch_vector_norm",
]
