"""Tests for StateVectorSimulator: scenarios, invariants and error handling."""

import logging
import math
from io import StringIO

import numpy as np
import pytest
import torch

import blochlab as bl
from blochlab import StateVectorSimulator
from blochlab.core import Complex
from blochlab.diagnostics import bloch_vector_norm, debug_context, is_hermitian, state_norm, trace_of


def _bell() -> StateVectorSimulator:
    sim = StateVectorSimulator(2)
    sim.apply_single_qubit_gate("H", 0)
    sim.apply_controlled_gate("CNOT", 0, 1)
    return sim


class TestConstruction:
    def test_starts_in_zero_state(self):
        sim = StateVectorSimulator(3)
        assert sim.n_qubits == 3
        assert sim.dtype == torch.complex128
        assert sim.amplitudes()[0] == Complex(1.0, 0.0)
        assert all(a == Complex(0.0, 0.0) for a in sim.amplitudes()[1:])

    def test_n_qubits_is_read_only(self):
        sim = StateVectorSimulator(2)
        with pytest.raises(AttributeError):
            sim.n_qubits = 3  # type: ignore[misc]

    @pytest.mark.parametrize("n", [0, -1])
    def test_invalid_size(self, n):
        with pytest.raises(ValueError, match="n_qubits >= 1"):
            StateVectorSimulator(n)

    @pytest.mark.parametrize("n", [2.7, 2.0, True])
    def test_non_integer_size(self, n):
        with pytest.raises(TypeError, match="n_qubits must be an int"):
            StateVectorSimulator(n)

    def test_numpy_integer_arguments(self):
        sim = StateVectorSimulator(np.int64(2))
        sim.apply_single_qubit_gate("X", np.int64(1))
        assert sim.n_qubits == 2
        assert dict(sim.full_state_probabilities())["01"] == pytest.approx(1.0)

    def test_rejects_real_dtype(self):
        with pytest.raises(ValueError, match="complex"):
            StateVectorSimulator(1, dtype=torch.float64)

    def test_state_is_a_copy(self):
        sim = StateVectorSimulator(1)
        state = sim.state
        state[0] = 0.0
        assert sim.amplitudes()[0] == Complex(1.0, 0.0)

    def test_reset(self):
        sim = _bell()
        sim.reset()
        assert sim.full_state_probabilities()[0] == ("00", 1.0)


class TestScenarios:
    def test_bell_state(self):
        sim = _bell()
        probs = dict(sim.full_state_probabilities())
        assert probs["00"] == pytest.approx(0.5)
        assert probs["11"] == pytest.approx(0.5)
        assert probs["01"] == pytest.approx(0.0, abs=1e-12)
        assert probs["10"] == pytest.approx(0.0, abs=1e-12)
        for qubit in range(2):
            assert sim.purity(qubit) == pytest.approx(0.5)
            assert sim.bloch_vector(qubit) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)
            assert sim.is_entangled(qubit)

    def test_single_hadamard(self):
        sim = StateVectorSimulator(1)
        sim.apply_single_qubit_gate("H", 0)
        assert sim.bloch_vector(0) == pytest.approx((1.0, 0.0, 0.0), abs=1e-9)
        assert sim.purity(0) == pytest.approx(1.0)
        assert not sim.is_entangled(0)
        probs = sim.measurement_probabilities(0)
        assert probs.zero == pytest.approx(0.5)
        assert probs.one == pytest.approx(0.5)
        assert probs.hadamard.first == pytest.approx(1.0)
        assert probs.hadamard.second == pytest.approx(0.0, abs=1e-12)
        assert probs.circular.first == pytest.approx(0.5)

    def test_ghz_state(self):
        sim = StateVectorSimulator(3)
        sim.apply_single_qubit_gate("H", 0)
        sim.apply_controlled_gate("CNOT", 0, 1)
        sim.apply_controlled_gate("CNOT", 1, 2)
        probs = dict(sim.full_state_probabilities())
        assert probs["000"] == pytest.approx(0.5)
        assert probs["111"] == pytest.approx(0.5)
        assert sum(p for label, p in probs.items() if label not in ("000", "111")) == pytest.approx(0.0, abs=1e-12)
        for qubit in range(3):
            assert sim.purity(qubit) == pytest.approx(0.5)

    def test_rz_pi_shifts_phase(self):
        sim = StateVectorSimulator(1)
        sim.apply_single_qubit_gate("RZ", 0, theta=math.pi)
        amplitude = sim.amplitudes()[0]
        assert amplitude.magnitude() == pytest.approx(1.0)
        assert amplitude.phase() == pytest.approx(-math.pi / 2)
        probs = sim.measurement_probabilities(0)
        assert probs.zero == pytest.approx(1.0)
        assert probs.one == pytest.approx(0.0, abs=1e-12)

    def test_circular_basis(self):
        # S H |0⟩ = |+i⟩
        sim = StateVectorSimulator(1)
        sim.apply_single_qubit_gate("H", 0)
        sim.apply_single_qubit_gate("S", 0)
        assert sim.bloch_vector(0) == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)
        assert sim.measurement_probabilities(0).circular.first == pytest.approx(1.0)

    def test_x_on_second_qubit(self):
        sim = StateVectorSimulator(2)
        sim.apply_single_qubit_gate("X", 1)
        assert dict(sim.full_state_probabilities())["01"] == pytest.approx(1.0)
        assert sim.bloch_vector(1)[2] == pytest.approx(-1.0)
        assert sim.bloch_vector(0)[2] == pytest.approx(1.0)

    def test_cz_phase_kickback(self):
        # CZ on |++⟩ entangles; each qubit's x component vanishes
        sim = StateVectorSimulator(2)
        sim.apply_single_qubit_gate("H", 0)
        sim.apply_single_qubit_gate("H", 1)
        sim.apply_controlled_gate("CZ", 0, 1)
        assert sim.amplitudes()[3].real == pytest.approx(-0.5)
        assert sim.purity(0) == pytest.approx(0.5)

    def test_amplitudes_match_state(self):
        sim = _bell()
        amp = 1 / math.sqrt(2)
        amplitudes = sim.amplitudes()
        assert len(amplitudes) == 4
        assert amplitudes[0].real == pytest.approx(amp)
        assert amplitudes[3].real == pytest.approx(amp)


class TestInvariants:
    @pytest.mark.parametrize("n_qubits", [1, 2, 3, 4])
    def test_norm_preserved_after_every_gate(self, n_qubits, random_requests):
        sim = StateVectorSimulator(n_qubits)
        for request in random_requests(n_qubits, 25):
            sim.apply(request)
            assert state_norm(sim.state) == pytest.approx(1.0, abs=1e-6)

    def test_density_matrices_are_valid(self, random_requests):
        sim = StateVectorSimulator(3).run(random_requests(3, 20))
        rho = sim.density_matrix()
        assert is_hermitian(rho)
        assert trace_of(rho) == pytest.approx(1.0)
        for qubit in range(3):
            reduced = sim.reduced_density_matrix(qubit)
            assert is_hermitian(reduced)
            assert trace_of(reduced) == pytest.approx(1.0)

    def test_bloch_length_tracks_purity(self, random_requests):
        sim = StateVectorSimulator(3).run(random_requests(3, 20))
        for qubit in range(3):
            purity = sim.purity(qubit)
            length = bloch_vector_norm(sim.bloch_vector(qubit))
            assert -1e-9 <= purity <= 1.0 + 1e-9
            assert length <= 1.0 + 1e-6
            # For one qubit, purity = (1 + |r|^2) / 2
            assert purity == pytest.approx((1.0 + length**2) / 2.0)

    def test_pure_product_state_has_unit_bloch_vector(self):
        sim = StateVectorSimulator(2)
        sim.apply_single_qubit_gate("RY", 0, theta=0.7)
        sim.apply_single_qubit_gate("RX", 1, theta=-1.3)
        for qubit in range(2):
            assert sim.purity(qubit) == pytest.approx(1.0)
            assert bloch_vector_norm(sim.bloch_vector(qubit)) == pytest.approx(1.0)

    def test_measurement_pairs_sum_to_one(self, random_requests):
        sim = StateVectorSimulator(2).run(random_requests(2, 15))
        probs = sim.measurement_probabilities(1)
        for pair in (probs.computational, probs.hadamard, probs.circular):
            assert pair.first + pair.second == pytest.approx(1.0)
            assert -1e-9 <= pair.first <= 1.0 + 1e-9

    def test_observables_are_idempotent(self):
        sim = _bell()
        before = sim.state
        assert sim.bloch_vector(0) == sim.bloch_vector(0)
        assert sim.purity(1) == sim.purity(1)
        assert sim.full_state_probabilities() == sim.full_state_probabilities()
        assert torch.equal(sim.density_matrix(), sim.density_matrix())
        assert torch.equal(sim.state, before)

    def test_run_replays_from_reset(self, random_requests):
        requests = random_requests(3, 12)
        first = StateVectorSimulator(3).run(requests).state
        sim = StateVectorSimulator(3)
        sim.apply_single_qubit_gate("X", 2)
        assert torch.allclose(sim.run(requests).state, first)

    def test_debug_mode_checks_every_gate(self, random_requests):
        with debug_context(True):
            sim = StateVectorSimulator(2).run(random_requests(2, 10))
        assert state_norm(sim.state) == pytest.approx(1.0)


class TestErrors:
    @pytest.mark.parametrize("qubit", [-1, 2, 5])
    def test_single_qubit_out_of_range_leaves_state(self, qubit):
        sim = _bell()
        before = sim.state
        with pytest.raises(ValueError, match="out of range"):
            sim.apply_single_qubit_gate("X", qubit)
        assert torch.equal(sim.state, before)

    def test_control_equals_target(self):
        sim = _bell()
        before = sim.state
        with pytest.raises(ValueError, match="distinct"):
            sim.apply_controlled_gate("CNOT", 1, 1)
        assert torch.equal(sim.state, before)

    def test_controlled_out_of_range(self):
        sim = StateVectorSimulator(2)
        with pytest.raises(ValueError, match="out of range"):
            sim.apply_controlled_gate("CZ", 0, 2)

    def test_unknown_gate_is_identity_with_warning(self):
        stream = StringIO()
        bl.configure_logging(level=logging.WARNING, stream=stream)
        try:
            sim = _bell()
            before = sim.state
            sim.apply_single_qubit_gate("SQRT_X", 0)
            sim.apply_controlled_gate("SWAP", 0, 1)
        finally:
            bl.configure_logging(level=logging.WARNING)
        assert torch.allclose(sim.state, before)
        output = stream.getvalue()
        assert "SQRT_X" in output
        assert "SWAP" in output

    def test_gate_application_logs_at_debug(self):
        stream = StringIO()
        bl.configure_logging(level=logging.DEBUG, stream=stream)
        try:
            StateVectorSimulator(1).apply_single_qubit_gate("H", 0)
        finally:
            bl.configure_logging(level=logging.WARNING)
        assert "apply H" in stream.getvalue()
