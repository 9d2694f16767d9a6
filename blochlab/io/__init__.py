"""I/O for JSON circuit snapshots."""

from .json_ir import circuit_to_json, dump_json_circuit, json_to_circuit, load_json_circuit
from .schema import SCHEMA_VERSION, json_circuit_schema, validate_json_circuit
from .utils import angle_str_to_float, gate_name_normalize

__all__ = [
    "SCHEMA_VERSION",
    "circuit_to_json",
    "json_to_circuit",
    "dump_json_circuit",
    "load_json_circuit",
    "json_circuit_schema",
    "validate_json_circuit",
    "angle_str_to_float",
    "gate_name_normalize",
]
