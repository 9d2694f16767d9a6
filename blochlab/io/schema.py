"""Schema and structural validation for circuit snapshots.

Snapshot structure::

    {
        "version": "blochlab-json-1.0",
        "n_qubits": <integer >= 1>,
        "gates": [
            {
                "name": <string>,
                "targets": [<integer>],
                "controls": [<integer>],        # CNOT / CZ only
                "params": [<number or string>], # RX / RY / RZ only
            },
            ...
        ],
        "timestamp": <string>,                  # optional, ISO 8601
        "endian": "big"                         # optional
    }

Qubit ordering: qubit 0 is the most significant bit of a basis label, which
is recorded as ``"endian": "big"``.
"""

from __future__ import annotations

SCHEMA_VERSION = "blochlab-json-1.0"


def json_circuit_schema() -> dict:
    """Return a structural description of the snapshot format."""
    return {
        "version": {
            "type": "string",
            "description": f"Schema version identifier, e.g. {SCHEMA_VERSION!r}",
            "required": True,
        },
        "n_qubits": {
            "type": "integer",
            "description": "Number of qubits in the circuit",
            "required": True,
            "min": 1,
        },
        "gates": {
            "type": "list",
            "description": "Gate applications in order",
            "required": True,
            "items": {
                "name": {"type": "string", "required": True},
                "targets": {
                    "type": "list",
                    "required": True,
                    "items": {"type": "integer", "min": 0},
                },
                "controls": {
                    "type": "list",
                    "required": False,
                    "items": {"type": "integer", "min": 0},
                },
                "params": {
                    "type": "list",
                    "description": "Angles in radians, as numbers or expressions like 'pi/4'",
                    "required": False,
                    "items": {"type": "number|string"},
                },
            },
        },
        "timestamp": {
            "type": "string",
            "description": "Export time (ISO 8601)",
            "required": False,
        },
        "endian": {
            "type": "string",
            "description": "Qubit ordering convention; qubit 0 is the MSB",
            "required": False,
            "default": "big",
        },
    }


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_index_list(gate: dict, field: str, i: int, n_qubits: int) -> None:
    if not isinstance(gate[field], list):
        raise ValueError(f"Gate at index {i}: field '{field}' must be a list.")
    for j, q in enumerate(gate[field]):
        if not _is_int(q):
            raise ValueError(
                f"Gate at index {i}: {field}[{j}] must be an integer, got {type(q).__name__}."
            )
        if q < 0 or q >= n_qubits:
            raise ValueError(
                f"Gate at index {i}: {field}[{j}] = {q} is out of range [0, {n_qubits})."
            )


def validate_json_circuit(obj: dict) -> None:
    """
    Check required fields, types and index ranges of a snapshot.

    Gate names are not checked here; :func:`json_to_circuit` resolves them.

    Raises
    ------
    ValueError
        If the object does not conform to the schema.
    """
    if not isinstance(obj, dict):
        raise ValueError("JSON circuit must be a dictionary object.")

    for field in ("version", "n_qubits", "gates"):
        if field not in obj:
            raise ValueError(f"JSON circuit missing required field '{field}'.")

    if not isinstance(obj["version"], str):
        raise ValueError("Field 'version' must be a string.")
    if not _is_int(obj["n_qubits"]):
        raise ValueError("Field 'n_qubits' must be an integer.")
    n_qubits = obj["n_qubits"]
    if n_qubits < 1:
        raise ValueError(f"Field 'n_qubits' must be >= 1, got {n_qubits}.")
    if not isinstance(obj["gates"], list):
        raise ValueError("Field 'gates' must be a list.")

    for i, gate in enumerate(obj["gates"]):
        if not isinstance(gate, dict):
            raise ValueError(f"Gate at index {i} must be a dictionary object.")
        if not isinstance(gate.get("name"), str):
            raise ValueError(f"Gate at index {i}: field 'name' must be a string.")
        if "targets" not in gate:
            raise ValueError(f"Gate at index {i} missing required field 'targets'.")
        _validate_index_list(gate, "targets", i, n_qubits)
        if "controls" in gate:
            _validate_index_list(gate, "controls", i, n_qubits)
        if "params" in gate:
            if not isinstance(gate["params"], list):
                raise ValueError(f"Gate at index {i}: field 'params' must be a list.")
            for j, p in enumerate(gate["params"]):
                if isinstance(p, bool) or not isinstance(p, (int, float, str)):
                    raise ValueError(
                        f"Gate at index {i}: params[{j}] must be a number or angle "
                        f"expression, got {type(p).__name__}."
                    )

    if "timestamp" in obj and not isinstance(obj["timestamp"], str):
        raise ValueError("Field 'timestamp' must be a string.")
    if "endian" in obj and obj["endian"] != "big":
        raise ValueError(
            f"Field 'endian' must be 'big' (qubit 0 is the MSB), got {obj['endian']!r}."
        )


__all__ = ["SCHEMA_VERSION", "json_circuit_schema", "validate_json_circuit"]
