"""Ready-made demonstration circuits."""

from __future__ import annotations

import math
from typing import Callable, Dict, Tuple

from blochlab.circuit.core import QuantumCircuit


def bell_circuit(n_qubits: int = 2) -> QuantumCircuit:
    """H on qubit 0 then CNOT(0, 1). Empty when n_qubits < 2."""
    qc = QuantumCircuit(n_qubits)
    if n_qubits >= 2:
        qc.add_gate("H", [0])
        qc.add_gate("CNOT", [0, 1])
    return qc


def ghz_circuit(n_qubits: int = 3) -> QuantumCircuit:
    """Three-qubit GHZ preparation on qubits 0..2. Empty when n_qubits < 3."""
    qc = QuantumCircuit(n_qubits)
    if n_qubits >= 3:
        qc.add_gate("H", [0])
        qc.add_gate("CNOT", [0, 1])
        qc.add_gate("CNOT", [1, 2])
    return qc


def superposition_circuit(n_qubits: int = 1) -> QuantumCircuit:
    """H on every qubit."""
    qc = QuantumCircuit(n_qubits)
    for q in range(n_qubits):
        qc.add_gate("H", [q])
    return qc


def mixed_rotation_circuit(n_qubits: int = 2) -> QuantumCircuit:
    """H and RY(pi/4) on qubit 0, RX(pi/3) on qubit 1. Empty when n_qubits < 2."""
    qc = QuantumCircuit(n_qubits)
    if n_qubits >= 2:
        qc.add_gate("H", [0])
        qc.add_gate("RY", [0], [math.pi / 4])
        qc.add_gate("RX", [1], [math.pi / 3])
    return qc


_EXAMPLES: Dict[str, Callable[[int], QuantumCircuit]] = {
    "bell": bell_circuit,
    "ghz": ghz_circuit,
    "superposition": superposition_circuit,
    "mixed": mixed_rotation_circuit,
}

EXAMPLE_NAMES: Tuple[str, ...] = tuple(_EXAMPLES)


def example_circuit(name: str, n_qubits: int) -> QuantumCircuit:
    """
    Build a named example on a register of ``n_qubits``.

    An example that needs more qubits than available is returned empty.

    Raises
    ------
    ValueError
        If ``name`` is not one of :data:`EXAMPLE_NAMES`.
    """
    key = name.strip().lower()
    if key not in _EXAMPLES:
        raise ValueError(
            f"Unknown example {name!r}. Available examples: {', '.join(EXAMPLE_NAMES)}."
        )
    return _EXAMPLES[key](n_qubits)


__all__ = [
    "EXAMPLE_NAMES",
    "bell_circuit",
    "ghz_circuit",
    "superposition_circuit",
    "mixed_rotation_circuit",
    "example_circuit",
]
