"""Pytest configuration and fixtures for indexview tests."""

import numpy as np
import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "vector: one-dimensional container rules")
    config.addinivalue_line("markers", "matrix: two-dimensional container rules")
    config.addinivalue_line("markers", "nested: nested list rules")
    config.addinivalue_line(
        "markers", "bounds: out-of-range detection and diagnostics"
    )
    config.addinivalue_line("markers", "holder: views into engine-owned copies")
    config.addinivalue_line("markers", "jax: immutable JAX array containers")


@pytest.fixture
def v():
    """Vector [10, 20, 30, 40]."""
    return np.array([10, 20, 30, 40])


@pytest.fixture
def m():
    """4x4 matrix with m[i, j] = 10*i + j in 1-based positions."""
    i, j = np.meshgrid(np.arange(1, 5), np.arange(1, 5), indexing="ij")
    return 10 * i + j
