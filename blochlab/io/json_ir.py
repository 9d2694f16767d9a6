"""JSON snapshot export and import for circuits.

A snapshot records the qubit count, the ordered gate list and the export
time; replaying it reproduces the simulator state exactly. See schema.py for
the format.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from blochlab.circuit import QuantumCircuit
from blochlab.gates.kinds import GateKind
from blochlab.logging import get_logger

from .schema import SCHEMA_VERSION, validate_json_circuit
from .utils import angle_str_to_float, gate_name_normalize

logger = get_logger(__name__)


def circuit_to_json(circuit: QuantumCircuit, timestamp: Optional[str] = None) -> dict:
    """
    Convert a QuantumCircuit to a snapshot dictionary.

    Parameters
    ----------
    circuit : QuantumCircuit
        Circuit to convert.
    timestamp : str, optional
        Export time. Defaults to the current UTC time in ISO 8601 form.

    Returns
    -------
    dict
        Snapshot following the schema in schema.py.
    """
    gates: List[Dict[str, Any]] = []
    for request in circuit.requests:
        gate_obj: Dict[str, Any] = {"name": request.name, "targets": [request.target]}
        if request.control is not None:
            gate_obj["controls"] = [request.control]
        if request.theta is not None:
            gate_obj["params"] = [request.theta]
        gates.append(gate_obj)

    if timestamp is None:
        timestamp = datetime.now(timezone.utc).isoformat()

    return {
        "version": SCHEMA_VERSION,
        "n_qubits": circuit.n_qubits,
        "gates": gates,
        "timestamp": timestamp,
        "endian": "big",
    }


def _param_to_float(value: Union[int, float, str]) -> float:
    if isinstance(value, str):
        return angle_str_to_float(value)
    return float(value)


def json_to_circuit(obj: dict) -> QuantumCircuit:
    """
    Rebuild a QuantumCircuit from a snapshot dictionary.

    Raises
    ------
    ValueError
        If the snapshot is malformed, names an unsupported gate, or gives a
        gate the wrong number of controls, targets or parameters.
    """
    validate_json_circuit(obj)

    circuit = QuantumCircuit(obj["n_qubits"])
    for i, gate_obj in enumerate(obj["gates"]):
        kind = GateKind.parse(gate_name_normalize(gate_obj["name"]))
        targets = list(gate_obj["targets"])
        controls = list(gate_obj.get("controls", []))
        params = [_param_to_float(p) for p in gate_obj.get("params", [])]

        if kind.is_controlled:
            if len(controls) != 1 or len(targets) != 1:
                raise ValueError(
                    f"Gate at index {i}: {kind.value} must have exactly 1 control and "
                    f"1 target, got {len(controls)} controls and {len(targets)} targets."
                )
        elif controls:
            raise ValueError(f"Gate at index {i}: {kind.value} does not take controls.")
        if params and not kind.is_parametric:
            raise ValueError(f"Gate at index {i}: {kind.value} does not take parameters.")

        circuit.add_gate(kind, controls + targets, params or None)

    logger.info("imported circuit with %d qubit(s), %d gate(s)", circuit.n_qubits, len(circuit))
    return circuit


def dump_json_circuit(
    circuit: QuantumCircuit, path: str, timestamp: Optional[str] = None
) -> None:
    """Write a snapshot of ``circuit`` to ``path``."""
    obj = circuit_to_json(circuit, timestamp=timestamp)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, ensure_ascii=False)
    logger.info("exported circuit with %d gate(s) to %s", len(circuit), path)


def load_json_circuit(path: str) -> QuantumCircuit:
    """
    Load a QuantumCircuit from a snapshot file.

    Raises
    ------
    ValueError
        If the file is not valid JSON or not a valid snapshot.
    FileNotFoundError
        If the file does not exist.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            obj = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"JSON circuit file not found: {path}") from None
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in file {path}: {e}") from None

    return json_to_circuit(obj)


__all__ = [
    "circuit_to_json",
    "json_to_circuit",
    "dump_json_circuit",
    "load_json_circuit",
]
