"""Immutable complex scalar used for amplitudes and matrix entries."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

import torch

DISPLAY_ZERO_TOL = 1e-10

ComplexLike = Union["Complex", complex, float, int, torch.Tensor]


@dataclass(frozen=True)
class Complex:
    """
    A complex number stored as a ``(real, imag)`` pair of floats.

    Arithmetic never mutates; every operation returns a new value. The class
    is the scalar type handed to callers for amplitudes and density-matrix
    entries, and its ``str`` form is the canonical display used throughout
    the summaries.
    """

    real: float
    imag: float = 0.0

    @classmethod
    def coerce(cls, value: ComplexLike) -> "Complex":
        """Convert a builtin number, 0-d tensor or Complex into a Complex."""
        if isinstance(value, Complex):
            return value
        if isinstance(value, torch.Tensor):
            if value.numel() != 1:
                raise ValueError(
                    f"Only single-element tensors convert to Complex, got shape {tuple(value.shape)}"
                )
            value = value.item()
        z = complex(value)
        return cls(float(z.real), float(z.imag))

    @staticmethod
    def add(a: "Complex", b: "Complex") -> "Complex":
        return Complex(a.real + b.real, a.imag + b.imag)

    @staticmethod
    def multiply(a: "Complex", b: "Complex") -> "Complex":
        return Complex(
            a.real * b.real - a.imag * b.imag,
            a.real * b.imag + a.imag * b.real,
        )

    @staticmethod
    def conjugate(a: "Complex") -> "Complex":
        return Complex(a.real, -a.imag)

    def magnitude(self) -> float:
        return math.sqrt(self.real * self.real + self.imag * self.imag)

    def phase(self) -> float:
        return math.atan2(self.imag, self.real)

    def __add__(self, other: ComplexLike) -> "Complex":
        return Complex.add(self, Complex.coerce(other))

    __radd__ = __add__

    def __mul__(self, other: ComplexLike) -> "Complex":
        return Complex.multiply(self, Complex.coerce(other))

    __rmul__ = __mul__

    def __abs__(self) -> float:
        return self.magnitude()

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __str__(self) -> str:
        if abs(self.imag) < DISPLAY_ZERO_TOL:
            return f"{self.real:.3f}"
        if abs(self.real) < DISPLAY_ZERO_TOL:
            return f"{self.imag:.3f}i"
        sign = "+" if self.imag >= 0 else ""
        return f"{self.real:.3f}{sign}{self.imag:.3f}i"


__all__ = ["Complex", "ComplexLike", "DISPLAY_ZERO_TOL"]
