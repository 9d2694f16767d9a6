"""Bloch-sphere coordinates, purity and measurement probabilities.

These are the per-qubit quantities a visualization consumes: a Bloch vector,
a purity scalar and the probabilities of measuring the qubit in the
computational (Z), Hadamard (X) and circular (Y) bases. All functions are
pure derivations from a state vector or a 2x2 reduced density matrix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import torch

from ..backend.density_matrix import _infer_n_qubits, reduced_density_matrix
from ..backend.statevector import basis_label, basis_probabilities
from ..gates.standard import X, Y, Z

ENTANGLEMENT_PURITY_THRESHOLD = 0.99

BlochVector = Tuple[float, float, float]


def _check_single_qubit_rho(rho: torch.Tensor) -> None:
    if rho.shape != (2, 2):
        raise ValueError(f"rho must have shape (2, 2), got {tuple(rho.shape)}")


def _trace_product(a: torch.Tensor, b: torch.Tensor) -> float:
    # Re sum_ij a[i, j] * b[j, i] = Re Tr(a b)
    return float(torch.einsum("ij,ji->", a, b.to(a.dtype)).real.item())


def bloch_coords_from_density(rho: torch.Tensor) -> BlochVector:
    """
    Bloch coordinates (x, y, z) of a single-qubit density matrix.

    Each coordinate is the Pauli expectation value Tr(rho sigma), computed as
    Re sum_ij rho[i, j] * sigma[j, i].

    Parameters
    ----------
    rho:
        Density matrix of shape (2, 2).
    """
    _check_single_qubit_rho(rho)
    kwargs = {"dtype": rho.dtype, "device": rho.device}
    return (
        _trace_product(rho, X(**kwargs)),
        _trace_product(rho, Y(**kwargs)),
        _trace_product(rho, Z(**kwargs)),
    )


def purity_from_density(rho: torch.Tensor) -> float:
    """Tr(rho^2) = Re sum_ij rho[i, j] * rho[j, i]."""
    _check_single_qubit_rho(rho)
    return _trace_product(rho, rho)


def bloch_coords_from_statevector(
    psi: torch.Tensor,
    qubit_index: int,
    n_qubits: Optional[int] = None,
) -> BlochVector:
    """
    Bloch coordinates of one qubit of a multi-qubit pure state.

    The qubit's reduced density matrix is computed first, so an entangled
    qubit yields a vector shorter than 1.

    Parameters
    ----------
    psi:
        State vector of shape (2**n_qubits,).
    qubit_index:
        Qubit to analyze (0 = most significant bit).
    n_qubits:
        Number of qubits. If None, inferred from psi.shape.
    """
    return bloch_coords_from_density(reduced_density_matrix(psi, qubit_index, n_qubits))


def purity_from_statevector(
    psi: torch.Tensor,
    qubit_index: int,
    n_qubits: Optional[int] = None,
) -> float:
    """Purity of one qubit's reduced state; 1 when unentangled."""
    return purity_from_density(reduced_density_matrix(psi, qubit_index, n_qubits))


def is_entangled(purity: float, threshold: float = ENTANGLEMENT_PURITY_THRESHOLD) -> bool:
    """A qubit counts as entangled when its purity drops below ``threshold``."""
    return purity < threshold


@dataclass(frozen=True)
class BasisProbabilities:
    """Outcome probabilities for one qubit measured in a single basis."""

    basis: str
    labels: Tuple[str, str]
    first: float
    second: float

    def as_dict(self) -> dict:
        return {self.labels[0]: self.first, self.labels[1]: self.second}


@dataclass(frozen=True)
class MeasurementProbabilities:
    """Per-qubit measurement record in the Z, X and Y bases."""

    computational: BasisProbabilities
    hadamard: BasisProbabilities
    circular: BasisProbabilities

    @property
    def zero(self) -> float:
        return self.computational.first

    @property
    def one(self) -> float:
        return self.computational.second

    def as_dict(self) -> dict:
        return {
            "computational": self.computational.as_dict(),
            "hadamard": self.hadamard.as_dict(),
            "circular": self.circular.as_dict(),
        }


def _plus_minus(basis: str, labels: Tuple[str, str], component: float) -> BasisProbabilities:
    plus = (1.0 + component) / 2.0
    return BasisProbabilities(basis=basis, labels=labels, first=plus, second=1.0 - plus)


def measurement_probabilities_from_density(rho: torch.Tensor) -> MeasurementProbabilities:
    """
    Measurement probabilities of a single-qubit density matrix.

    The computational pair is the diagonal of rho. The X and Y pairs come
    from the Bloch vector: P(+) = (1 + component) / 2, P(-) = 1 - P(+).
    """
    _check_single_qubit_rho(rho)
    x, y, _ = bloch_coords_from_density(rho)
    computational = BasisProbabilities(
        basis="Z",
        labels=("0", "1"),
        first=float(rho[0, 0].real.item()),
        second=float(rho[1, 1].real.item()),
    )
    return MeasurementProbabilities(
        computational=computational,
        hadamard=_plus_minus("X", ("+", "-"), x),
        circular=_plus_minus("Y", ("+i", "-i"), y),
    )


def measurement_probabilities_from_statevector(
    psi: torch.Tensor,
    qubit_index: int,
    n_qubits: Optional[int] = None,
) -> MeasurementProbabilities:
    """Measurement record for one qubit of a multi-qubit pure state."""
    return measurement_probabilities_from_density(
        reduced_density_matrix(psi, qubit_index, n_qubits)
    )


def iter_basis_probabilities(
    psi: torch.Tensor,
    n_qubits: Optional[int] = None,
) -> Iterator[Tuple[str, float]]:
    """Lazily yield (basis label, |amplitude|**2) for every basis state."""
    n_qubits = _infer_n_qubits(psi.shape[-1], n_qubits)
    probs = basis_probabilities(psi).tolist()
    for index, probability in enumerate(probs):
        yield basis_label(index, n_qubits), float(probability)


def full_state_probabilities(
    psi: torch.Tensor,
    n_qubits: Optional[int] = None,
) -> List[Tuple[str, float]]:
    """Eager form of :func:`iter_basis_probabilities`."""
    return list(iter_basis_probabilities(psi, n_qubits))


__all__ = [
    "ENTANGLEMENT_PURITY_THRESHOLD",
    "BlochVector",
    "BasisProbabilities",
    "MeasurementProbabilities",
    "bloch_coords_from_density",
    "bloch_coords_from_statevector",
    "purity_from_density",
    "purity_from_statevector",
    "is_entangled",
    "measurement_probabilities_from_density",
    "measurement_probabilities_from_statevector",
    "iter_basis_probabilities",
    "full_state_probabilities",
]
