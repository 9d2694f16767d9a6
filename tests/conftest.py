"""Pytest configuration and shared fixtures for blochlab tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- Helpers for building random gate sequences
"""

import os

import numpy as np
import pytest
import torch

from blochlab.circuit import GateRequest
from blochlab.gates import SINGLE_QUBIT_KINDS, TWO_QUBIT_KINDS


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic torch RNG on the default device."""
    from blochlab.core.device import default_device

    generator = torch.Generator(device=default_device().as_torch_device())
    generator.manual_seed(_seed())
    return generator


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed the global numpy and torch generators before every test."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())
    if torch.cuda.is_available():
        torch.cuda.manual_seed_all(_seed())


@pytest.fixture
def random_requests(rng: np.random.Generator):
    """Factory for random gate-request sequences drawn from the seeded RNG."""

    def make(n_qubits: int, n_gates: int):
        requests = []
        for _ in range(n_gates):
            if n_qubits >= 2 and rng.random() < 0.3:
                kind = TWO_QUBIT_KINDS[rng.integers(len(TWO_QUBIT_KINDS))]
                control, target = rng.choice(n_qubits, size=2, replace=False)
                requests.append(GateRequest.controlled(kind, int(control), int(target)))
            else:
                kind = SINGLE_QUBIT_KINDS[rng.integers(len(SINGLE_QUBIT_KINDS))]
                theta = float(rng.uniform(-np.pi, np.pi)) if kind.is_parametric else None
                requests.append(GateRequest.single(kind, int(rng.integers(n_qubits)), theta))
        return requests

    return make
