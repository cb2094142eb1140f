"""Shared fixtures for the sphcollection test suite."""

import numpy as np
import pytest

from sphcollection.config import reset_config


@pytest.fixture(autouse=True)
def _default_config():
    """Run every test against the default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def angle_grid():
    """Broadcastable (theta, phi) grid in double precision, away from the poles."""
    theta = np.linspace(0.1, 3.0, 13)
    phi = np.linspace(0.2, 6.0, 17)
    return np.meshgrid(theta, phi, indexing="ij")


@pytest.fixture
def full_grid():
    """(theta, phi) grid covering the whole sphere including poles and seam."""
    theta = np.linspace(0.0, np.pi, 25)
    phi = np.linspace(0.0, 2.0 * np.pi, 49)
    return np.meshgrid(theta, phi, indexing="ij")
