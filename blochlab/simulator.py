"""Pure-state simulator over a fixed number of qubits.

:class:`StateVectorSimulator` owns a single state vector, applies gates to it
in place and derives per-qubit observables on demand. It keeps no gate
history: recomputing after an edit means :meth:`StateVectorSimulator.run`
(reset, then apply every request in order).

Example
-------
>>> sim = StateVectorSimulator(2)
>>> sim.apply_single_qubit_gate("H", 0)
>>> sim.apply_controlled_gate("CNOT", 0, 1)
>>> round(sim.purity(0), 6)
0.5
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple

import torch

from .backend.density_matrix import density_matrix as _density_matrix
from .backend.density_matrix import reduced_density_matrix as _reduced_density_matrix
from .backend.statevector import (
    _check_qubit,
    apply_operator,
    check_register_size,
    controlled_gate_matrix,
    embed_single_qubit_gate,
    zero_state,
)
from .core.complex import Complex
from .core.device import Device, resolve_device
from .diagnostics import check_state
from .gates.kinds import GateKind
from .gates.standard import single_qubit_gate
from .logging import get_logger
from .viz.bloch import (
    ENTANGLEMENT_PURITY_THRESHOLD,
    BlochVector,
    MeasurementProbabilities,
    bloch_coords_from_density,
    iter_basis_probabilities,
    measurement_probabilities_from_density,
    purity_from_density,
)

if TYPE_CHECKING:
    from .circuit.core import GateRequest

logger = get_logger(__name__)


def _gate_label(gate: str | GateKind) -> str:
    return gate.value if isinstance(gate, GateKind) else str(gate)


class StateVectorSimulator:
    """
    Dense state-vector engine for a small register.

    Parameters
    ----------
    n_qubits:
        Register size, fixed for the lifetime of the instance (>= 1).
    device:
        Device specification accepted by :func:`blochlab.core.resolve_device`.
    dtype:
        Complex dtype of the state. Defaults to the device's complex dtype
        (complex128 for the built-in devices).
    """

    def __init__(
        self,
        n_qubits: int,
        device: Device | torch.device | str | None = None,
        dtype: torch.dtype | None = None,
    ) -> None:
        self._n_qubits = check_register_size(n_qubits, "StateVectorSimulator")
        self._device = resolve_device(device)
        self._dtype = dtype if dtype is not None else self._device.complex_dtype
        if not self._dtype.is_complex:
            raise ValueError(f"dtype must be a complex dtype, got {self._dtype}")
        self._state = zero_state(self._n_qubits, device=self._device, dtype=self._dtype)

    @property
    def n_qubits(self) -> int:
        return self._n_qubits

    @property
    def device(self) -> Device:
        return self._device

    @property
    def dtype(self) -> torch.dtype:
        return self._dtype

    @property
    def state(self) -> torch.Tensor:
        """A copy of the current state vector."""
        return self._state.clone()

    def __repr__(self) -> str:
        return f"StateVectorSimulator(n_qubits={self._n_qubits}, device={self._device.name!r})"

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Return to |0...0⟩."""
        self._state = zero_state(self._n_qubits, device=self._device, dtype=self._dtype)

    def _evolve(self, operator: torch.Tensor, label: str) -> None:
        new_state = apply_operator(self._state, operator)
        check_state(new_state, after=label)
        self._state = new_state

    def apply_single_qubit_gate(
        self,
        gate: str | GateKind,
        qubit: int,
        theta: Optional[float] = None,
    ) -> None:
        """
        Apply a single-qubit gate to ``qubit``.

        The 2x2 matrix is expanded to the full register (identity on every
        other position) and multiplied into the state.

        Raises
        ------
        ValueError
            If ``qubit`` is outside [0, n_qubits). The state is left unchanged.
        """
        _check_qubit(qubit, self._n_qubits)
        matrix = single_qubit_gate(
            gate,
            theta=theta,
            dtype=self._dtype,
            device=self._device.as_torch_device(),
        )
        logger.debug("apply %s(theta=%s) on qubit %d", _gate_label(gate), theta, qubit)
        self._evolve(
            embed_single_qubit_gate(matrix, qubit, self._n_qubits),
            f"{_gate_label(gate)} on qubit {qubit}",
        )

    def apply_controlled_gate(
        self,
        gate: str | GateKind,
        control: int,
        target: int,
    ) -> None:
        """
        Apply CNOT or CZ with the given control and target.

        Raises
        ------
        ValueError
            If control == target or either index is out of range. The state
            is left unchanged.
        """
        operator = controlled_gate_matrix(
            gate,
            control,
            target,
            self._n_qubits,
            dtype=self._dtype,
            device=self._device.as_torch_device(),
        )
        logger.debug("apply %s with control %d, target %d", _gate_label(gate), control, target)
        self._evolve(operator, f"{_gate_label(gate)} on qubits {control}->{target}")

    def apply(self, request: "GateRequest") -> None:
        """Dispatch one gate-application request."""
        if request.kind.is_controlled:
            self.apply_controlled_gate(request.kind, request.control, request.target)
        else:
            self.apply_single_qubit_gate(request.kind, request.target, request.theta)

    def run(self, requests: Iterable["GateRequest"]) -> "StateVectorSimulator":
        """Reset, then apply ``requests`` in order. Returns ``self``."""
        self.reset()
        count = 0
        for request in requests:
            self.apply(request)
            count += 1
        logger.debug("replayed %d gate(s) on %d qubit(s)", count, self._n_qubits)
        return self

    # ------------------------------------------------------------------
    # Read side (never mutates the state)
    # ------------------------------------------------------------------

    def amplitudes(self) -> Tuple[Complex, ...]:
        """The state vector as immutable :class:`Complex` values."""
        return tuple(Complex(z.real, z.imag) for z in self._state.tolist())

    def density_matrix(self) -> torch.Tensor:
        """Full density matrix |psi⟩⟨psi|."""
        return _density_matrix(self._state)

    def reduced_density_matrix(self, qubit: int) -> torch.Tensor:
        """2x2 reduced density matrix of ``qubit``."""
        return _reduced_density_matrix(self._state, qubit, self._n_qubits)

    def bloch_vector(self, qubit: int) -> BlochVector:
        return bloch_coords_from_density(self.reduced_density_matrix(qubit))

    def purity(self, qubit: int) -> float:
        return purity_from_density(self.reduced_density_matrix(qubit))

    def is_entangled(self, qubit: int) -> bool:
        return self.purity(qubit) < ENTANGLEMENT_PURITY_THRESHOLD

    def measurement_probabilities(self, qubit: int) -> MeasurementProbabilities:
        return measurement_probabilities_from_density(self.reduced_density_matrix(qubit))

    def iter_basis_probabilities(self) -> Iterator[Tuple[str, float]]:
        return iter_basis_probabilities(self._state, self._n_qubits)

    def full_state_probabilities(self) -> List[Tuple[str, float]]:
        """(basis label, probability) for every basis state, qubit 0 first."""
        return list(self.iter_basis_probabilities())


__all__ = ["StateVectorSimulator"]
