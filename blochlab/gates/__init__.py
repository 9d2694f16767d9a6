"""Gate library: fixed and rotation single-qubit unitaries."""

from .kinds import SINGLE_QUBIT_KINDS, TWO_QUBIT_KINDS, GateKind
from .standard import (
    RX,
    RY,
    RZ,
    H,
    I,
    S,
    T,
    X,
    Y,
    Z,
    is_unitary,
    single_qubit_gate,
)

__all__ = [
    "GateKind",
    "SINGLE_QUBIT_KINDS",
    "TWO_QUBIT_KINDS",
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
