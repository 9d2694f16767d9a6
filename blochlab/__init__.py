"""blochlab - a small PyTorch-backed quantum state simulator for Bloch-sphere visualization."""

__version__ = "0.1.0"

# Backend operations
from .backend import (
    apply_operator,
    basis_label,
    basis_probabilities,
    controlled_gate_matrix,
    density_matrix,
    embed_single_qubit_gate,
    partial_trace,
    reduced_density_matrix,
    tensor_product,
    zero_state,
)

# Circuit model
from .circuit import EXAMPLE_NAMES, GateRequest, QuantumCircuit, example_circuit, replay
from .core import DISPLAY_ZERO_TOL, Complex, Device, default_device, device, resolve_device

# Diagnostics
from .diagnostics import (
    assert_hermitian,
    assert_normalized,
    assert_unit_trace,
    bloch_vector_norm,
    debug_context,
    is_debug_enabled,
    is_hermitian,
    set_debug_enabled,
    state_norm,
    trace_of,
)

# Gates
from .gates import GateKind, is_unitary, single_qubit_gate

# I/O
from .io import (
    circuit_to_json,
    dump_json_circuit,
    json_to_circuit,
    load_json_circuit,
    validate_json_circuit,
)
from .logging import configure_logging, get_logger, set_log_level
from .simulator import StateVectorSimulator

# Observables and summaries
from .viz import (
    ENTANGLEMENT_PURITY_THRESHOLD,
    MeasurementProbabilities,
    QubitReport,
    format_matrix,
    format_state_vector,
    print_state_summary,
    qubit_reports,
    state_summary,
)

__all__ = [
    "__version__",
    "Complex",
    "DISPLAY_ZERO_TOL",
    "Device",
    "device",
    "default_device",
    "resolve_device",
    "GateKind",
    "single_qubit_gate",
    "is_unitary",
    "zero_state",
    "tensor_product",
    "embed_single_qubit_gate",
    "controlled_gate_matrix",
    "apply_operator",
    "basis_probabilities",
    "basis_label",
    "density_matrix",
    "partial_trace",
    "reduced_density_matrix",
    "StateVectorSimulator",
    "GateRequest",
    "QuantumCircuit",
    "replay",
    "example_circuit",
    "EXAMPLE_NAMES",
    "ENTANGLEMENT_PURITY_THRESHOLD",
    "MeasurementProbabilities",
    "QubitReport",
    "format_state_vector",
    "format_matrix",
    "qubit_reports",
    "state_summary",
    "print_state_summary",
    "circuit_to_json",
    "json_to_circuit",
    "dump_json_circuit",
    "load_json_circuit",
    "validate_json_circuit",
    "state_norm",
    "assert_normalized",
    "is_hermitian",
    "assert_hermitian",
    "trace_of",
    "assert_unit_trace",
    "bloch_vector_norm",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
