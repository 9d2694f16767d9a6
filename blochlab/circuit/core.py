"""Gate-application requests and the ordered circuit that replays them."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import torch

from blochlab.backend.statevector import check_register_size
from blochlab.core.device import Device
from blochlab.gates.kinds import GateKind
from blochlab.logging import get_logger
from blochlab.simulator import StateVectorSimulator

logger = get_logger(__name__)


def _as_index(value: object, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{label} index must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{label} index must be non-negative, got {value}")
    return int(value)


@dataclass(frozen=True)
class GateRequest:
    """
    A single gate application, consumed by :class:`StateVectorSimulator`.

    Either a single-qubit gate on ``target`` (with ``theta`` for RX/RY/RZ)
    or a controlled gate with ``control`` and ``target``. The gate name is
    resolved to a :class:`GateKind` on construction, so an unsupported name
    fails here rather than inside the simulator.

    Attributes
    ----------
    kind:
        Gate kind, or a name accepted by :meth:`GateKind.parse`.
    target:
        Target qubit index (0-based).
    control:
        Control qubit index; required for CNOT/CZ, forbidden otherwise.
    theta:
        Rotation angle in radians for RX/RY/RZ. None means 0.
    """

    kind: GateKind
    target: int
    control: Optional[int] = None
    theta: Optional[float] = None

    def __post_init__(self) -> None:
        kind = GateKind.parse(self.kind)
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "target", _as_index(self.target, "target"))

        if kind.is_controlled:
            if self.control is None:
                raise ValueError(f"Gate {kind.value} requires a control qubit.")
            object.__setattr__(self, "control", _as_index(self.control, "control"))
            if self.control == self.target:
                raise ValueError(
                    f"control and target must be distinct, got {self.control} and {self.target}"
                )
        elif self.control is not None:
            raise ValueError(f"Gate {kind.value} does not take a control qubit.")

        if self.theta is not None:
            if not kind.is_parametric:
                raise ValueError(f"Gate {kind.value} does not take an angle.")
            object.__setattr__(self, "theta", float(self.theta))

    @classmethod
    def single(
        cls, name: str | GateKind, target: int, theta: Optional[float] = None
    ) -> "GateRequest":
        return cls(kind=name, target=target, theta=theta)

    @classmethod
    def controlled(cls, name: str | GateKind, control: int, target: int) -> "GateRequest":
        return cls(kind=name, target=target, control=control)

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def qubits(self) -> Tuple[int, ...]:
        """(control, target) for controlled gates, (target,) otherwise."""
        if self.control is None:
            return (self.target,)
        return (self.control, self.target)

    @property
    def params(self) -> Optional[Tuple[float, ...]]:
        if self.theta is None:
            return None
        return (self.theta,)

    def describe(self) -> str:
        """Short human-readable form, e.g. ``RX(0.785) q1`` or ``CNOT q0->q1``."""
        if self.control is not None:
            return f"{self.name} q{self.control}->q{self.target}"
        if self.theta is not None:
            return f"{self.name}({self.theta:.3f}) q{self.target}"
        return f"{self.name} q{self.target}"


def replay(
    requests: Iterable[GateRequest],
    simulator: StateVectorSimulator,
) -> StateVectorSimulator:
    """Reset ``simulator`` and fold ``requests`` over it in order."""
    return simulator.run(requests)


class QuantumCircuit:
    """
    Ordered list of gate requests on ``n_qubits`` qubits.

    The circuit is the editable history; the simulator never sees edits
    directly. After any structural change, :meth:`simulate` recomputes the
    state from |0...0⟩.
    """

    def __init__(self, n_qubits: int) -> None:
        self._n_qubits = check_register_size(n_qubits, "QuantumCircuit")
        self._requests: List[GateRequest] = []

    @property
    def n_qubits(self) -> int:
        return self._n_qubits

    @property
    def requests(self) -> Tuple[GateRequest, ...]:
        """Read-only tuple of all requests, in application order."""
        return tuple(self._requests)

    def __len__(self) -> int:
        return len(self._requests)

    def __iter__(self):
        return iter(tuple(self._requests))

    def _check_range(self, request: GateRequest) -> None:
        for q in request.qubits:
            if q >= self._n_qubits:
                raise ValueError(
                    f"Qubit index {q} is out of range for this circuit "
                    f"(n_qubits={self._n_qubits})."
                )

    def add(self, request: GateRequest) -> None:
        """Append an already-built request after checking its indices."""
        self._check_range(request)
        self._requests.append(request)

    def add_gate(
        self,
        name: str | GateKind,
        qubits: Sequence[int],
        params: Optional[Sequence[float]] = None,
    ) -> GateRequest:
        """
        Append a gate application to the circuit.

        Parameters
        ----------
        name:
            A supported gate name such as "H", "RX" or "CNOT".
        qubits:
            ``[target]`` for single-qubit gates, ``[control, target]`` for
            CNOT and CZ.
        params:
            At most one angle, for RX/RY/RZ.

        Returns
        -------
        GateRequest
            The appended request.
        """
        kind = GateKind.parse(name)
        q_tuple = tuple(qubits)
        if len(q_tuple) != kind.num_qubits:
            raise ValueError(
                f"Gate {kind.value} acts on {kind.num_qubits} qubit(s), got {len(q_tuple)}."
            )

        theta: Optional[float] = None
        if params is not None:
            p_tuple = tuple(float(p) for p in params)
            if len(p_tuple) > 1:
                raise ValueError(f"Gate {kind.value} takes at most one parameter.")
            if p_tuple:
                theta = p_tuple[0]

        if kind.is_controlled:
            request = GateRequest.controlled(kind, q_tuple[0], q_tuple[1])
        else:
            request = GateRequest.single(kind, q_tuple[0], theta)
        self.add(request)
        return request

    def add_two_qubit_gate(self, name: str | GateKind, qubit: int) -> GateRequest:
        """
        Place a controlled gate using ``qubit`` as control and the next qubit
        (wrapping around) as target.
        """
        if self._n_qubits < 2:
            raise ValueError("Two-qubit gates require a circuit with n_qubits >= 2.")
        return self.add_gate(name, [qubit, (qubit + 1) % self._n_qubits])

    def remove_gate(self, index: int) -> GateRequest:
        """Remove and return the request at ``index``."""
        if not -len(self._requests) <= index < len(self._requests):
            raise IndexError(
                f"gate index {index} out of range for circuit with {len(self._requests)} gate(s)"
            )
        return self._requests.pop(index)

    def clear(self) -> None:
        self._requests.clear()

    def copy(self) -> "QuantumCircuit":
        """Return a copy of this circuit (requests are immutable and shared)."""
        new = QuantumCircuit(self._n_qubits)
        new._requests.extend(self._requests)
        return new

    def gate_counts(self) -> Dict[str, int]:
        """Return a dictionary mapping gate names to their counts."""
        counts: Dict[str, int] = {}
        for request in self._requests:
            counts[request.name] = counts.get(request.name, 0) + 1
        return counts

    def depth(self) -> int:
        """
        Number of sequential layers when gates on disjoint qubits share a
        layer.
        """
        qubit_layer = [0] * self._n_qubits
        max_layer = 0
        for request in self._requests:
            layer = max(qubit_layer[q] for q in request.qubits) + 1
            for q in request.qubits:
                qubit_layer[q] = layer
            max_layer = max(max_layer, layer)
        return max_layer

    def simulate(
        self,
        simulator: Optional[StateVectorSimulator] = None,
        device: Device | torch.device | str | None = None,
        dtype: torch.dtype | None = None,
    ) -> StateVectorSimulator:
        """
        Replay the circuit from |0...0⟩.

        If ``simulator`` is given it is reset and reused; its qubit count must
        match the circuit's. Otherwise a new simulator is created on
        ``device`` with ``dtype``.
        """
        if simulator is None:
            simulator = StateVectorSimulator(self._n_qubits, device=device, dtype=dtype)
        elif simulator.n_qubits != self._n_qubits:
            raise ValueError(
                f"simulator has {simulator.n_qubits} qubit(s), circuit has {self._n_qubits}"
            )
        logger.debug("simulating circuit with %d gate(s)", len(self._requests))
        return replay(self._requests, simulator)

    def to_text_diagram(self) -> str:
        """
        Return a simple text diagram of the circuit.

        Each qubit is a horizontal wire and each request takes one column.
        Controls are drawn as '●', CNOT targets as '⊕', and wires crossed by
        a controlled gate as '┼'.
        """
        width = max([len(r.name) for r in self._requests] + [1]) + 2
        rows: List[List[str]] = [[] for _ in range(self._n_qubits)]

        def cell(symbol: str) -> str:
            return symbol.center(width, "─")

        for request in self._requests:
            column = ["─" * width] * self._n_qubits
            if request.control is None:
                column[request.target] = cell(request.name)
            else:
                low, high = sorted(request.qubits)
                for q in range(low + 1, high):
                    column[q] = cell("┼")
                column[request.control] = cell("●")
                column[request.target] = cell(
                    "⊕" if request.kind is GateKind.CNOT else "●"
                )
            for q in range(self._n_qubits):
                rows[q].append(column[q])

        return "\n".join(f"q{q}: " + "".join(rows[q]) for q in range(self._n_qubits))


__all__ = ["GateRequest", "QuantumCircuit", "replay"]
