"""Circuit representation and replay."""

from .core import GateRequest, QuantumCircuit, replay
from .library import EXAMPLE_NAMES, example_circuit

__all__ = ["GateRequest", "QuantumCircuit", "replay", "EXAMPLE_NAMES", "example_circuit"]
