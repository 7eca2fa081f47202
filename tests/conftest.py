"""
Pytest configuration and fixtures for PyNoiseGraph test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import os
import sys
import pytest
import numpy as np


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker in ("unit", "integration", "slow", "importtest"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers and ordering."""
    for item in items:
        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture(scope="session")
def sample_points():
    """Off-lattice coordinates, including negative and larger values."""
    rng = np.random.RandomState(42)  # For reproducible tests
    points = rng.uniform(-8.0, 8.0, size=(40, 3))
    return [tuple(float(c) for c in p) for p in points]


@pytest.fixture(scope="session")
def coordinate_grid():
    """Small regular grid of coordinates that avoids integer lattice points."""
    axis = np.linspace(0.13, 3.71, 6)
    return [(float(x), float(y), float(z)) for x in axis for y in axis[:3] for z in axis[:3]]


class ConstantSource:
    """Helper building Const modules for modifier tests."""

    @staticmethod
    def values(n=21):
        return [float(v) for v in np.linspace(-1.0, 1.0, n)]


@pytest.fixture
def constant_values():
    """Source values spanning [-1, 1]."""
    return ConstantSource.values()
