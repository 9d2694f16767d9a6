"""Backend implementations for state-vector and density-matrix operations."""

from .density_matrix import density_matrix, partial_trace, reduced_density_matrix
from .statevector import (
    apply_operator,
    check_register_size,
    basis_label,
    basis_probabilities,
    controlled_gate_matrix,
    embed_single_qubit_gate,
    qubit_bit,
    tensor_product,
    zero_state,
)

__all__ = [
    "check_register_size",
    "zero_state",
    "tensor_product",
    "embed_single_qubit_gate",
    "controlled_gate_matrix",
    "apply_operator",
    "basis_probabilities",
    "basis_label",
    "qubit_bit",
    "density_matrix",
    "partial_trace",
    "reduced_density_matrix",
]
