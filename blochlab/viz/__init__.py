"""Observables for visualization and text summaries."""

from .bloch import (
    ENTANGLEMENT_PURITY_THRESHOLD,
    BasisProbabilities,
    MeasurementProbabilities,
    bloch_coords_from_density,
    bloch_coords_from_statevector,
    full_state_probabilities,
    is_entangled,
    iter_basis_probabilities,
    measurement_probabilities_from_density,
    measurement_probabilities_from_statevector,
    purity_from_density,
    purity_from_statevector,
)
from .summary import (
    QubitReport,
    format_matrix,
    format_state_vector,
    print_state_summary,
    qubit_report,
    qubit_reports,
    state_summary,
)

__all__ = [
    "ENTANGLEMENT_PURITY_THRESHOLD",
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
    "QubitReport",
    "format_state_vector",
    "format_matrix",
    "qubit_report",
    "qubit_reports",
    "state_summary",
    "print_state_summary",
]
