"""Helpers shared by the JSON snapshot reader and writer."""

from __future__ import annotations

import ast
import math
import re

_ALLOWED_ANGLE_CHARS = re.compile(r"^[0-9\.\s\*\-\+/\(\)pieE]+$", re.IGNORECASE)

_GATE_SYNONYMS = {
    "CX": "CNOT",
    "CNOT": "CNOT",
    "CPHASE": "CZ",
    "CZ": "CZ",
    "ID": "I",
    "NOT": "X",
}


def angle_str_to_float(s: str) -> float:
    """
    Parse an angle expression such as ``"pi/4"`` or ``"-3*pi/2"`` to radians.

    Numbers, ``pi``, ``+ - * /``, unary signs and parentheses are allowed.
    The expression is walked as an AST; nothing is passed to ``eval``.

    Raises
    ------
    ValueError
        If the expression is empty, malformed or uses anything else.
    """
    s = s.strip()
    if not s:
        raise ValueError("Empty angle expression.")
    if not _ALLOWED_ANGLE_CHARS.match(s):
        raise ValueError(
            f"Angle expression contains disallowed characters: {s!r}. "
            "Only numbers, 'pi', '+', '-', '*', '/', '(', ')' are allowed."
        )

    normalized = re.sub(r"\bpi\b", "PI", s, flags=re.IGNORECASE)
    try:
        tree = ast.parse(normalized, mode="eval")
    except SyntaxError as e:
        raise ValueError(f"Invalid angle expression syntax: {s!r}. Error: {e}") from None

    def eval_node(node: ast.AST) -> float:
        if isinstance(node, ast.Constant) and isinstance(node.value, (int, float)):
            return float(node.value)
        if isinstance(node, ast.Name):
            if node.id == "PI":
                return math.pi
            raise ValueError(
                f"Unknown identifier '{node.id}' in angle expression: {s!r}. "
                "Only 'pi' is supported."
            )
        if isinstance(node, ast.UnaryOp) and isinstance(node.op, (ast.USub, ast.UAdd)):
            value = eval_node(node.operand)
            return -value if isinstance(node.op, ast.USub) else value
        if isinstance(node, ast.BinOp):
            left = eval_node(node.left)
            right = eval_node(node.right)
            if isinstance(node.op, ast.Add):
                return left + right
            if isinstance(node.op, ast.Sub):
                return left - right
            if isinstance(node.op, ast.Mult):
                return left * right
            if isinstance(node.op, ast.Div):
                if right == 0:
                    raise ValueError(f"Division by zero in angle expression: {s!r}")
                return left / right
        raise ValueError(f"Unsupported construct in angle expression: {s!r}")

    return float(eval_node(tree.body))


def gate_name_normalize(name: str) -> str:
    """
    Map a gate name to its canonical uppercase form.

    Synonyms: ``CX`` -> ``CNOT``, ``CPHASE`` -> ``CZ``, ``ID`` -> ``I``,
    ``NOT`` -> ``X``. Other names are only upper-cased; whether they are
    supported is decided by :meth:`GateKind.parse`.
    """
    key = name.strip().upper()
    return _GATE_SYNONYMS.get(key, key)


__all__ = ["angle_str_to_float", "gate_name_normalize"]
