"""Pytest configuration and shared fixtures."""

import matplotlib

matplotlib.use("Agg")

import pytest

from sample_means.heights import HEIGHTS_CM


@pytest.fixture
def heights():
    """The ten-person height population (cm)."""
    return list(HEIGHTS_CM)
