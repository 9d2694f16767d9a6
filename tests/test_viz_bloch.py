"""Tests for Bloch coordinates, purity and measurement probabilities."""

import math

import pytest
import torch

from blochlab.viz.bloch import (
    ENTANGLEMENT_PURITY_THRESHOLD,
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


def _rho(matrix) -> torch.Tensor:
    return torch.tensor(matrix, dtype=torch.complex128)


class TestBlochFromDensity:
    @pytest.mark.parametrize(
        "rho, expected",
        [
            ([[1, 0], [0, 0]], (0.0, 0.0, 1.0)),
            ([[0, 0], [0, 1]], (0.0, 0.0, -1.0)),
            ([[0.5, 0.5], [0.5, 0.5]], (1.0, 0.0, 0.0)),
            ([[0.5, -0.5j], [0.5j, 0.5]], (0.0, 1.0, 0.0)),
            ([[0.5, 0], [0, 0.5]], (0.0, 0.0, 0.0)),
        ],
    )
    def test_cardinal_states(self, rho, expected):
        assert bloch_coords_from_density(_rho(rho)) == pytest.approx(expected)

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError, match="shape"):
            bloch_coords_from_density(torch.eye(4, dtype=torch.complex128))


class TestPurity:
    def test_pure_and_maximally_mixed(self):
        assert purity_from_density(_rho([[1, 0], [0, 0]])) == pytest.approx(1.0)
        assert purity_from_density(_rho([[0.5, 0], [0, 0.5]])) == pytest.approx(0.5)

    def test_threshold(self):
        assert ENTANGLEMENT_PURITY_THRESHOLD == 0.99
        assert is_entangled(0.5)
        assert is_entangled(0.989)
        assert not is_entangled(0.99)
        assert not is_entangled(1.0)


class TestFromStatevector:
    def test_bell_state(self):
        amp = 1 / math.sqrt(2)
        psi = torch.tensor([amp, 0, 0, amp], dtype=torch.complex128)
        for qubit in range(2):
            assert bloch_coords_from_statevector(psi, qubit) == pytest.approx((0.0, 0.0, 0.0), abs=1e-12)
            assert purity_from_statevector(psi, qubit) == pytest.approx(0.5)

    def test_product_state(self):
        # |0⟩ ⊗ |+⟩
        amp = 1 / math.sqrt(2)
        psi = torch.tensor([amp, amp, 0, 0], dtype=torch.complex128)
        assert bloch_coords_from_statevector(psi, 0) == pytest.approx((0.0, 0.0, 1.0))
        assert bloch_coords_from_statevector(psi, 1) == pytest.approx((1.0, 0.0, 0.0))


class TestMeasurementProbabilities:
    def test_from_density(self):
        # RY(θ)|0⟩ has x = sin θ, z = cos θ
        theta = 0.9
        c, s = math.cos(theta / 2), math.sin(theta / 2)
        rho = _rho([[c * c, c * s], [c * s, s * s]])
        probs = measurement_probabilities_from_density(rho)
        assert probs.zero == pytest.approx(c * c)
        assert probs.one == pytest.approx(s * s)
        assert probs.hadamard.first == pytest.approx((1 + math.sin(theta)) / 2)
        assert probs.hadamard.second == pytest.approx((1 - math.sin(theta)) / 2)
        assert probs.circular.first == pytest.approx(0.5)

    def test_labels_and_dict(self):
        probs = measurement_probabilities_from_density(_rho([[1, 0], [0, 0]]))
        assert probs.hadamard.labels == ("+", "-")
        assert probs.circular.labels == ("+i", "-i")
        as_dict = probs.as_dict()
        assert as_dict["computational"] == {"0": 1.0, "1": 0.0}
        assert as_dict["hadamard"]["+"] == pytest.approx(0.5)

    def test_from_statevector(self):
        psi = torch.tensor([0, 1, 0, 0], dtype=torch.complex128)
        assert measurement_probabilities_from_statevector(psi, 1).one == pytest.approx(1.0)
        assert measurement_probabilities_from_statevector(psi, 0).zero == pytest.approx(1.0)


class TestBasisProbabilities:
    def test_labels_are_msb_first(self):
        psi = torch.tensor([0, 0, 0, 0, 0, 0, 1, 0], dtype=torch.complex128)
        probs = full_state_probabilities(psi)
        assert [label for label, _ in probs] == ["000", "001", "010", "011", "100", "101", "110", "111"]
        assert dict(probs)["110"] == 1.0

    def test_iterator_is_lazy(self):
        psi = torch.tensor([1, 0], dtype=torch.complex128)
        it = iter_basis_probabilities(psi)
        assert next(it) == ("0", 1.0)
        assert next(it) == ("1", 0.0)
        with pytest.raises(StopIteration):
            next(it)

    def test_no_renormalisation(self):
        psi = torch.tensor([1, 1], dtype=torch.complex128)
        assert sum(p for _, p in full_state_probabilities(psi)) == pytest.approx(2.0)
