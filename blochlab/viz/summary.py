"""Text summaries of a simulator's state.

These helpers turn simulator outputs into the strings and plain dictionaries
a front end displays: the symbolic state vector, truncated density matrices
and a per-qubit report.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO, TYPE_CHECKING, Any, Dict, List, Optional

import torch

from blochlab.backend.density_matrix import _infer_n_qubits
from blochlab.backend.statevector import basis_label
from blochlab.core.complex import DISPLAY_ZERO_TOL, Complex
from blochlab.diagnostics import bloch_vector_norm

from .bloch import ENTANGLEMENT_PURITY_THRESHOLD, BlochVector, MeasurementProbabilities

if TYPE_CHECKING:
    from blochlab.simulator import StateVectorSimulator

MATRIX_DISPLAY_LIMIT = 8


def format_state_vector(state: torch.Tensor, n_qubits: Optional[int] = None) -> str:
    """
    Symbolic form of a state, e.g. ``|ψ⟩ = (0.707)|00⟩ + (0.707)|11⟩``.

    Only amplitudes with magnitude above 1e-10 are listed; if none are, the
    right-hand side is ``0``.
    """
    n_qubits = _infer_n_qubits(state.shape[-1], n_qubits)
    terms = []
    for index, z in enumerate(state.tolist()):
        amplitude = Complex(z.real, z.imag)
        if amplitude.magnitude() > DISPLAY_ZERO_TOL:
            terms.append(f"({amplitude})|{basis_label(index, n_qubits)}⟩")
    return "|ψ⟩ = " + (" + ".join(terms) if terms else "0")


def format_matrix(
    matrix: torch.Tensor,
    name: str = "ρ",
    limit: int = MATRIX_DISPLAY_LIMIT,
) -> str:
    """
    Render a complex matrix row by row, showing at most ``limit`` rows and
    columns; anything beyond is elided with ``...``.
    """
    if matrix.dim() != 2:
        raise ValueError(f"format_matrix expects a 2-D matrix, got shape {tuple(matrix.shape)}")
    rows, cols = matrix.shape
    shown_rows, shown_cols = min(rows, limit), min(cols, limit)
    values = matrix[:shown_rows, :shown_cols].tolist()

    lines = [f"{name} = ["]
    for i, row in enumerate(values):
        entries = ", ".join(str(Complex(z.real, z.imag)) for z in row)
        if cols > limit:
            entries += ", ..."
        lines.append(f"  [{entries}]" + ("," if i < shown_rows - 1 else ""))
    if rows > limit:
        lines.append("  ...")
    lines.append("]")
    return "\n".join(lines)


@dataclass(frozen=True)
class QubitReport:
    """Everything a front end shows for one qubit."""

    qubit: int
    bloch_vector: BlochVector
    bloch_length: float
    purity: float
    entangled: bool
    probabilities: MeasurementProbabilities

    def as_dict(self) -> Dict[str, Any]:
        return {
            "qubit": self.qubit,
            "bloch_vector": list(self.bloch_vector),
            "bloch_length": self.bloch_length,
            "purity": self.purity,
            "entangled": self.entangled,
            "probabilities": self.probabilities.as_dict(),
        }


def qubit_report(simulator: "StateVectorSimulator", qubit: int) -> QubitReport:
    vector = simulator.bloch_vector(qubit)
    purity = simulator.purity(qubit)
    return QubitReport(
        qubit=qubit,
        bloch_vector=vector,
        bloch_length=bloch_vector_norm(vector),
        purity=purity,
        entangled=purity < ENTANGLEMENT_PURITY_THRESHOLD,
        probabilities=simulator.measurement_probabilities(qubit),
    )


def qubit_reports(simulator: "StateVectorSimulator") -> List[QubitReport]:
    return [qubit_report(simulator, q) for q in range(simulator.n_qubits)]


def state_summary(simulator: "StateVectorSimulator") -> Dict[str, Any]:
    """
    Plain-dictionary snapshot of a simulator's observables.

    Returns
    -------
    Dict[str, Any]
        Dictionary containing:
        - n_qubits: int
        - state: str, the symbolic state vector
        - probabilities: Dict[str, float], basis label -> probability, only
          for states with probability above 1e-10
        - qubits: List[dict], one :meth:`QubitReport.as_dict` per qubit
    """
    return {
        "n_qubits": simulator.n_qubits,
        "state": format_state_vector(simulator.state, simulator.n_qubits),
        "probabilities": {
            label: p
            for label, p in simulator.iter_basis_probabilities()
            if p > DISPLAY_ZERO_TOL
        },
        "qubits": [report.as_dict() for report in qubit_reports(simulator)],
    }


def print_state_summary(
    simulator: "StateVectorSimulator",
    file: Optional[IO[str]] = None,
) -> None:
    """
    Pretty-print a state summary to stdout or a file.

    This is a utility function for human-readable output, so it uses print()
    intentionally. For programmatic access, use state_summary() instead.
    """
    if file is None:
        file = sys.stdout

    summary = state_summary(simulator)

    print("State Summary", file=file)
    print("=" * 50, file=file)
    print(f"Qubits: {summary['n_qubits']}", file=file)
    print(summary["state"], file=file)
    print("\nBasis Probabilities:", file=file)
    for label, p in summary["probabilities"].items():
        print(f"  |{label}⟩: {p * 100:.2f}%", file=file)

    for report in qubit_reports(simulator):
        x, y, z = report.bloch_vector
        probs = report.probabilities
        state = "Entangled" if report.entangled else "Pure"
        print(f"\nQubit {report.qubit} ({state})", file=file)
        print(f"  Bloch: x={x:.3f} y={y:.3f} z={z:.3f} |r|={report.bloch_length:.3f}", file=file)
        print(f"  Purity: {report.purity * 100:.2f}%", file=file)
        print(
            f"  P(|0⟩)={probs.zero * 100:.2f}%  P(|1⟩)={probs.one * 100:.2f}%  "
            f"P(|+⟩)={probs.hadamard.first * 100:.2f}%  "
            f"P(|+i⟩)={probs.circular.first * 100:.2f}%",
            file=file,
        )


__all__ = [
    "MATRIX_DISPLAY_LIMIT",
    "format_state_vector",
    "format_matrix",
    "QubitReport",
    "qubit_report",
    "qubit_reports",
    "state_summary",
    "print_state_summary",
]
