"""Closed enumeration of the gates the simulator understands."""

from __future__ import annotations

from enum import Enum


class GateKind(str, Enum):
    """
    Every gate identifier accepted at the circuit boundary.

    Single-qubit kinds act on one target; RX/RY/RZ additionally carry one
    angle. CNOT and CZ act on a (control, target) pair.
    """

    I = "I"
    H = "H"
    X = "X"
    Y = "Y"
    Z = "Z"
    S = "S"
    T = "T"
    RX = "RX"
    RY = "RY"
    RZ = "RZ"
    CNOT = "CNOT"
    CZ = "CZ"

    @property
    def is_parametric(self) -> bool:
        return self in (GateKind.RX, GateKind.RY, GateKind.RZ)

    @property
    def is_controlled(self) -> bool:
        return self in (GateKind.CNOT, GateKind.CZ)

    @property
    def num_qubits(self) -> int:
        return 2 if self.is_controlled else 1

    @classmethod
    def parse(cls, name: "str | GateKind") -> "GateKind":
        """
        Resolve a gate name (case-insensitive) to its kind.

        Raises:
            ValueError: If the name is not a supported gate.
        """
        if isinstance(name, GateKind):
            return name
        key = str(name).strip().upper()
        try:
            return cls(key)
        except ValueError:
            supported = ", ".join(kind.value for kind in cls)
            raise ValueError(
                f"Unsupported gate name {name!r}. Supported gates: {supported}."
            ) from None


SINGLE_QUBIT_KINDS = tuple(kind for kind in GateKind if not kind.is_controlled)
TWO_QUBIT_KINDS = tuple(kind for kind in GateKind if kind.is_controlled)

__all__ = ["GateKind", "SINGLE_QUBIT_KINDS", "TWO_QUBIT_KINDS"]
