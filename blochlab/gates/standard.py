"""Standard single-qubit gate matrices."""

from __future__ import annotations

import cmath
import math
from typing import Optional

import torch

from ..logging import get_logger
from .kinds import GateKind

logger = get_logger(__name__)


def _resolve(
    dtype: Optional[torch.dtype], device: Optional[torch.device]
) -> tuple[torch.dtype, torch.device]:
    if dtype is None:
        dtype = torch.complex128
    if device is None:
        device = torch.device("cpu")
    return dtype, device


def I(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    Identity gate.

    Args:
        dtype: Complex dtype for the gate matrix. Defaults to torch.complex128.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) complex tensor.
    """
    dtype, device = _resolve(dtype, device)
    return torch.eye(2, dtype=dtype, device=device)


def X(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Pauli-X gate (bit flip)."""
    dtype, device = _resolve(dtype, device)
    return torch.tensor([[0.0, 1.0], [1.0, 0.0]], dtype=dtype, device=device)


def Y(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Pauli-Y gate."""
    dtype, device = _resolve(dtype, device)
    return torch.tensor([[0.0, -1.0j], [1.0j, 0.0]], dtype=dtype, device=device)


def Z(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Pauli-Z gate (phase flip)."""
    dtype, device = _resolve(dtype, device)
    return torch.tensor([[1.0, 0.0], [0.0, -1.0]], dtype=dtype, device=device)


def H(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Hadamard gate."""
    dtype, device = _resolve(dtype, device)
    sqrt2_inv = 1.0 / math.sqrt(2.0)
    return torch.tensor(
        [[sqrt2_inv, sqrt2_inv], [sqrt2_inv, -sqrt2_inv]], dtype=dtype, device=device
    )


def S(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """S gate (phase gate, √Z)."""
    dtype, device = _resolve(dtype, device)
    return torch.tensor([[1.0, 0.0], [0.0, 1.0j]], dtype=dtype, device=device)


def T(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """T gate (π/4 phase, √S)."""
    dtype, device = _resolve(dtype, device)
    return torch.tensor(
        [[1.0, 0.0], [0.0, cmath.exp(1.0j * math.pi / 4.0)]], dtype=dtype, device=device
    )


def RX(
    theta: float,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """
    Rotation about the X axis: RX(θ) = exp(-iθX/2).

    Matrix form:
        [[cos(θ/2), -i sin(θ/2)],
         [-i sin(θ/2), cos(θ/2)]]
    """
    dtype, device = _resolve(dtype, device)
    cos_half = math.cos(float(theta) / 2.0)
    sin_half = math.sin(float(theta) / 2.0)
    return torch.tensor(
        [[cos_half, -1.0j * sin_half], [-1.0j * sin_half, cos_half]],
        dtype=dtype,
        device=device,
    )


def RY(
    theta: float,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """
    Rotation about the Y axis: RY(θ) = exp(-iθY/2).

    Matrix form:
        [[cos(θ/2), -sin(θ/2)],
         [sin(θ/2), cos(θ/2)]]
    """
    dtype, device = _resolve(dtype, device)
    cos_half = math.cos(float(theta) / 2.0)
    sin_half = math.sin(float(theta) / 2.0)
    return torch.tensor(
        [[cos_half, -sin_half], [sin_half, cos_half]], dtype=dtype, device=device
    )


def RZ(
    theta: float,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """
    Rotation about the Z axis: RZ(θ) = exp(-iθZ/2).

    Matrix form:
        [[exp(-iθ/2), 0],
         [0, exp(iθ/2)]]
    """
    dtype, device = _resolve(dtype, device)
    half_theta = float(theta) / 2.0
    return torch.tensor(
        [[cmath.exp(-1.0j * half_theta), 0.0], [0.0, cmath.exp(1.0j * half_theta)]],
        dtype=dtype,
        device=device,
    )


_FIXED_GATES = {
    GateKind.I: I,
    GateKind.H: H,
    GateKind.X: X,
    GateKind.Y: Y,
    GateKind.Z: Z,
    GateKind.S: S,
    GateKind.T: T,
}

_ROTATION_GATES = {
    GateKind.RX: RX,
    GateKind.RY: RY,
    GateKind.RZ: RZ,
}


def single_qubit_gate(
    name: str | GateKind,
    theta: float | None = None,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """
    Resolve a gate name to its 2x2 matrix.

    Rotation gates read ``theta`` (radians); a missing angle means 0.
    Names that are not single-qubit gates resolve to the identity. This is a
    deliberate permissive fallback: the circuit boundary
    (:meth:`GateKind.parse`) is where unknown names are rejected.
    """
    try:
        kind = GateKind.parse(name)
    except ValueError:
        kind = None

    if kind in _FIXED_GATES:
        return _FIXED_GATES[kind](dtype=dtype, device=device)
    if kind in _ROTATION_GATES:
        angle = 0.0 if theta is None else float(theta)
        return _ROTATION_GATES[kind](angle, dtype=dtype, device=device)

    logger.warning("Gate %r is not a single-qubit gate; substituting identity", name)
    return I(dtype=dtype, device=device)


def is_unitary(matrix: torch.Tensor, atol: float = 1e-9) -> bool:
    """
    Check if a matrix is unitary within a given tolerance.

    A matrix U is unitary if U†U = I, where U† is the conjugate transpose.

    Args:
        matrix: Tensor of shape (..., n, n).
        atol: Absolute tolerance for the check.
    """
    if matrix.dim() < 2 or matrix.shape[-1] != matrix.shape[-2]:
        return False

    adjoint = matrix.conj().transpose(-1, -2)
    product = torch.matmul(adjoint, matrix)

    n = matrix.shape[-1]
    identity = torch.eye(n, dtype=matrix.dtype, device=matrix.device)
    if product.ndim > 2:
        identity = identity.expand(product.shape)

    diff = torch.abs(product - identity)
    return bool(torch.all(diff < atol).item())


__all__ = [
    "I",
    "X",
    "Y",
    "Z",
    "H",
    "S",
    "T",
    "RX",
    "RY",
    "RZ",
    "single_qubit_gate",
    "is_unitary",
]
