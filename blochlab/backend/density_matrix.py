"""Density matrices derived from pure states.

The full density matrix of an n-qubit state has 4**n entries, so these
helpers are meant for the same small registers as the statevector backend.
Nothing here mutates its input.
"""

from __future__ import annotations

import math
from typing import Optional

import torch

from .statevector import _check_qubit, bit_position


def _infer_n_qubits(dim: int, n_qubits: Optional[int]) -> int:
    if n_qubits is None:
        n_qubits = int(math.log2(dim)) if dim > 0 else 0
        if n_qubits < 1 or 2**n_qubits != dim:
            raise ValueError(
                f"dimension {dim} is not a power of 2. "
                "Please specify n_qubits explicitly."
            )
    elif 2**n_qubits != dim:
        raise ValueError(
            f"dimension {dim} does not match 2**n_qubits = {2**n_qubits}"
        )
    return n_qubits


def density_matrix(state: torch.Tensor) -> torch.Tensor:
    """
    Convert a pure state |psi⟩ into the density matrix |psi⟩⟨psi|.

    rho[i, j] = state[i] * conj(state[j])

    Args:
        state: Complex state vector of shape (2**n_qubits,).

    Returns:
        A complex tensor of shape (dim, dim).
    """
    if not torch.is_complex(state):
        raise ValueError(f"state must be complex dtype, got {state.dtype}")
    if state.dim() != 1:
        raise ValueError(f"state must be 1-D, got shape {tuple(state.shape)}")
    return state.unsqueeze(-1) * state.conj().unsqueeze(-2)


def partial_trace(
    rho: torch.Tensor,
    qubit: int,
    n_qubits: Optional[int] = None,
) -> torch.Tensor:
    """
    Trace out every qubit except ``qubit`` from a full density matrix.

    Entry rho[i, j] contributes to reduced[bit_i, bit_j] exactly when i and
    j agree on every qubit other than ``qubit``, where bit_i is the value of
    ``qubit`` in index i (qubit 0 is the most significant bit).

    Returns:
        The 2x2 reduced density matrix.
    """
    if rho.dim() != 2 or rho.shape[0] != rho.shape[1]:
        raise ValueError(f"rho must be a square matrix, got shape {tuple(rho.shape)}")
    n_qubits = _infer_n_qubits(rho.shape[0], n_qubits)
    _check_qubit(qubit, n_qubits)

    dim = rho.shape[0]
    shift = bit_position(qubit, n_qubits)
    index = torch.arange(dim, device=rho.device)
    bits = (index >> shift) & 1
    others = index & ~(1 << shift)

    same_rest = others.unsqueeze(1) == others.unsqueeze(0)
    reduced = torch.zeros((2, 2), dtype=rho.dtype, device=rho.device)
    for row in range(2):
        for col in range(2):
            mask = same_rest & (bits.unsqueeze(1) == row) & (bits.unsqueeze(0) == col)
            reduced[row, col] = rho[mask].sum()
    return reduced


def reduced_density_matrix(
    state: torch.Tensor,
    qubit: int,
    n_qubits: Optional[int] = None,
) -> torch.Tensor:
    """Single-qubit reduced density matrix of a pure multi-qubit state."""
    n_qubits = _infer_n_qubits(state.shape[-1], n_qubits)
    return partial_trace(density_matrix(state), qubit, n_qubits)


__all__ = ["density_matrix", "partial_trace", "reduced_density_matrix"]
