"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest


def random_simplex(rng, n_categories):
    """Draw a probability vector by normalizing uniform [0, 10) weights."""
    weights = rng.uniform(0.0, 10.0, n_categories)
    total = weights.sum()
    if total == 0.0:
        weights[0] = 1.0
        return weights
    return weights / total


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(42)


@pytest.fixture
def simplex_pairs(rng):
    """Fifty random pairs of 8-category probability vectors."""
    return [(random_simplex(rng, 8), random_simplex(rng, 8)) for _ in range(50)]


@pytest.fixture
def skewed_pair():
    """Mirror-image three-category distributions."""
    return {
        "p": np.array([0.70, 0.20, 0.10]),
        "q": np.array([0.10, 0.20, 0.70]),
        "bc": 2 * np.sqrt(0.07) + 0.2,
    }


class StubPrimitives:
    """Primitives returning a fixed coefficient and recording calls."""

    def __init__(self, bc=1.0, hellinger_value=0.0, error=None):
        self.bc = bc
        self.hellinger_value = hellinger_value
        self.error = error
        self.calls = []

    def bhattacharyya_coeff(self, p, q, tol):
        self.calls.append(("bhattacharyya_coeff", p, q, tol))
        if self.error is not None:
            raise self.error
        return self.bc

    def hellinger(self, p, q, tol):
        self.calls.append(("hellinger", p, q, tol))
        if self.error is not None:
            raise self.error
        return self.hellinger_value


@pytest.fixture
def stub_primitives():
    """Factory for :class:`StubPrimitives`."""
    return StubPrimitives
