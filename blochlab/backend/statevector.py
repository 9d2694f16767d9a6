"""Dense statevector backend.

Operators are built over the full 2**n_qubits space and applied with a
dense matrix-vector product. Every gate therefore costs O(4**n) work, which
is fine for the demonstration-scale registers (n <= ~5) this package targets.

Convention: qubit 0 is the most significant bit of a basis index and qubit
n-1 the least significant. For n = 2, index 1 is |01⟩ (qubit 1 set).
"""

from __future__ import annotations

import numbers

import torch

from ..core.device import Device, resolve_device
from ..gates.kinds import GateKind
from ..gates.standard import I
from ..logging import get_logger

logger = get_logger(__name__)


def _check_qubit(qubit: int, n_qubits: int, label: str = "qubit") -> None:
    if not isinstance(qubit, numbers.Integral) or isinstance(qubit, bool):
        raise TypeError(f"{label} index must be an int, got {type(qubit).__name__}")
    if qubit < 0 or qubit >= n_qubits:
        raise ValueError(f"{label} index {qubit} out of range [0, {n_qubits})")


def check_register_size(n_qubits: int, owner: str = "register") -> int:
    """Validate a register size and return it as a plain ``int``."""
    if not isinstance(n_qubits, numbers.Integral) or isinstance(n_qubits, bool):
        raise TypeError(f"{owner} n_qubits must be an int, got {type(n_qubits).__name__}")
    if n_qubits < 1:
        raise ValueError(f"{owner} requires n_qubits >= 1, got {n_qubits}")
    return int(n_qubits)


def bit_position(qubit: int, n_qubits: int) -> int:
    """Shift that isolates ``qubit`` in a basis index (qubit 0 is the MSB)."""
    return n_qubits - 1 - qubit


def qubit_bit(index: int, qubit: int, n_qubits: int) -> int:
    """Value (0 or 1) of ``qubit`` in the computational-basis ``index``."""
    return (index >> bit_position(qubit, n_qubits)) & 1


def basis_label(index: int, n_qubits: int) -> str:
    """N-bit binary label of a basis index, qubit 0 first."""
    return format(index, f"0{n_qubits}b")


def zero_state(
    n_qubits: int,
    device: Device | torch.device | str | None = None,
    dtype: torch.dtype | None = None,
) -> torch.Tensor:
    """
    Create the basis state |0...0⟩.

    Args:
        n_qubits: Number of qubits. Must be >= 1.
        device: Device specification (Device, name, torch.device or None).
        dtype: Complex dtype. Defaults to the device's complex dtype.

    Returns:
        A complex tensor of shape (2**n_qubits,) with amplitude 1 at index 0.

    Raises:
        ValueError: If n_qubits < 1.
    """
    if n_qubits < 1:
        raise ValueError(f"n_qubits must be >= 1, got {n_qubits}")

    qdevice = resolve_device(device)
    if dtype is None:
        dtype = qdevice.complex_dtype

    state = torch.zeros(2**n_qubits, dtype=dtype, device=qdevice.as_torch_device())
    state[0] = 1.0 + 0.0j
    return state


def tensor_product(a: torch.Tensor, b: torch.Tensor) -> torch.Tensor:
    """
    Kronecker product of two matrices.

    The result has shape (rows_a * rows_b, cols_a * cols_b) with

        result[i, j] = a[i // rows_b, j // cols_b] * b[i % rows_b, j % cols_b]

    Composing unitary factors yields a unitary product.
    """
    if a.dim() != 2 or b.dim() != 2:
        raise ValueError(
            f"tensor_product expects 2-D matrices, got shapes {tuple(a.shape)} and {tuple(b.shape)}"
        )
    rows_a, cols_a = a.shape
    rows_b, cols_b = b.shape
    dtype = torch.promote_types(a.dtype, b.dtype)

    rows = torch.arange(rows_a * rows_b, device=a.device).unsqueeze(1)
    cols = torch.arange(cols_a * cols_b, device=a.device).unsqueeze(0)

    left = a.to(dtype)[rows // rows_b, cols // cols_b]
    right = b.to(dtype)[rows % rows_b, cols % cols_b]
    return left * right


def embed_single_qubit_gate(
    gate: torch.Tensor, qubit: int, n_qubits: int
) -> torch.Tensor:
    """
    Expand a 2x2 gate acting on ``qubit`` to the full 2**n_qubits space.

    The operator is the tensor product, over positions 0..n-1 in order, of
    ``gate`` at ``qubit`` and the identity everywhere else.
    """
    if gate.shape != (2, 2):
        raise ValueError(f"gate must have shape (2, 2), got {tuple(gate.shape)}")
    _check_qubit(qubit, n_qubits)

    identity = I(dtype=gate.dtype, device=gate.device)
    operator = gate if qubit == 0 else identity
    for position in range(1, n_qubits):
        operator = tensor_product(operator, gate if position == qubit else identity)
    return operator


def controlled_gate_matrix(
    name: str | GateKind,
    control: int,
    target: int,
    n_qubits: int,
    dtype: torch.dtype = torch.complex128,
    device: torch.device | None = None,
) -> torch.Tensor:
    """
    Build a controlled two-qubit operator directly over basis indices.

    Starting from the identity:

    - CNOT exchanges rows i and i with the target bit flipped, for every
      index whose control bit is 1 (each pair is exchanged once).
    - CZ negates the diagonal entry of every index whose control and target
      bits are both 1.

    Any other name leaves the identity in place.

    Raises:
        ValueError: If control == target or either index is out of range.
    """
    _check_qubit(control, n_qubits, "control")
    _check_qubit(target, n_qubits, "target")
    if control == target:
        raise ValueError(
            f"control and target must be distinct, got {control} and {target}"
        )

    try:
        kind = GateKind.parse(name)
    except ValueError:
        kind = None

    dim = 2**n_qubits
    matrix = torch.eye(dim, dtype=dtype, device=device)
    control_mask = 1 << bit_position(control, n_qubits)
    target_mask = 1 << bit_position(target, n_qubits)

    if kind is GateKind.CNOT:
        for index in range(dim):
            if index & control_mask and not index & target_mask:
                partner = index | target_mask
                matrix[[index, partner]] = matrix[[partner, index]]
    elif kind is GateKind.CZ:
        for index in range(dim):
            if index & control_mask and index & target_mask:
                matrix[index, index] = -1.0
    else:
        logger.warning(
            "Gate %r is not a controlled gate; substituting identity", name
        )
    return matrix


def apply_operator(state: torch.Tensor, operator: torch.Tensor) -> torch.Tensor:
    """
    Left-multiply a state vector by a full-space operator.

    new_state[i] = sum_j operator[i, j] * state[j]
    """
    dim = state.shape[-1]
    if operator.shape != (dim, dim):
        raise ValueError(
            f"operator shape {tuple(operator.shape)} does not match state dimension {dim}"
        )
    if not torch.is_complex(state):
        raise ValueError(f"state must be complex dtype, got {state.dtype}")
    return torch.matmul(operator.to(state.dtype), state)


def basis_probabilities(state: torch.Tensor) -> torch.Tensor:
    """|amplitude|**2 for every basis index (no renormalisation)."""
    if not torch.is_complex(state):
        raise ValueError(f"state must be complex dtype, got {state.dtype}")
    return (state.abs() ** 2).contiguous()


__all__ = [
    "check_register_size",
    "zero_state",
    "tensor_product",
    "embed_single_qubit_gate",
    "controlled_gate_matrix",
    "apply_operator",
    "basis_probabilities",
    "basis_label",
    "bit_position",
    "qubit_bit",
]
