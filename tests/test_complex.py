"""Tests for the immutable Complex value type."""

import math

import pytest
import torch

from blochlab.core import Complex


class TestArithmetic:
    """Tests for add, multiply, conjugate, magnitude and phase."""

    def test_add(self):
        result = Complex.add(Complex(1.0, 2.0), Complex(3.0, -1.0))
        assert result == Complex(4.0, 1.0)

    def test_multiply(self):
        # (1 + 2i)(3 - i) = 5 + 5i
        result = Complex.multiply(Complex(1.0, 2.0), Complex(3.0, -1.0))
        assert result == Complex(5.0, 5.0)

    def test_multiply_i_squared(self):
        i = Complex(0.0, 1.0)
        assert i * i == Complex(-1.0, 0.0)

    def test_conjugate(self):
        assert Complex.conjugate(Complex(0.5, -0.25)) == Complex(0.5, 0.25)

    def test_magnitude_and_phase(self):
        z = Complex(3.0, 4.0)
        assert z.magnitude() == pytest.approx(5.0)
        assert abs(z) == pytest.approx(5.0)
        assert Complex(0.0, 1.0).phase() == pytest.approx(math.pi / 2)
        assert Complex(-1.0, 0.0).phase() == pytest.approx(math.pi)

    def test_operators_accept_builtin_numbers(self):
        z = Complex(1.0, 1.0)
        assert z + 1 == Complex(2.0, 1.0)
        assert 2 * z == Complex(2.0, 2.0)
        assert z * 1j == Complex(-1.0, 1.0)

    def test_values_are_immutable(self):
        z = Complex(1.0, 0.0)
        with pytest.raises(AttributeError):
            z.real = 2.0  # type: ignore[misc]
        z + Complex(1.0, 0.0)
        assert z == Complex(1.0, 0.0)

    def test_complex_conversion(self):
        assert complex(Complex(0.5, -2.0)) == 0.5 - 2.0j


class TestCoerce:
    def test_from_scalar_tensor(self):
        z = Complex.coerce(torch.tensor(1.0 + 2.0j, dtype=torch.complex128))
        assert z == Complex(1.0, 2.0)

    def test_from_float(self):
        assert Complex.coerce(0.25) == Complex(0.25, 0.0)

    def test_rejects_multi_element_tensor(self):
        with pytest.raises(ValueError, match="single-element"):
            Complex.coerce(torch.tensor([1.0, 2.0]))


class TestDisplay:
    """The canonical display form uses three decimals."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Complex(0.70710678, 0.0), "0.707"),
            (Complex(0.0, -0.5), "-0.500i"),
            (Complex(0.5, 0.25), "0.500+0.250i"),
            (Complex(0.5, -0.25), "0.500-0.250i"),
            (Complex(1.0, 1e-12), "1.000"),
        ],
    )
    def test_str(self, value, expected):
        assert str(value) == expected
