"""
Pytest configuration and shared fixtures for statviz test suite.

This file is automatically loaded by pytest and provides shared fixtures
that can be used across all test modules.
"""

import logging

import numpy as np
import pytest

from statviz.utils.config import load_config, StatVizConfig


@pytest.fixture
def config() -> StatVizConfig:
    """Load default configuration for tests."""
    return load_config()


@pytest.fixture
def one_to_ten() -> list[float]:
    """The integers 1..10 as floats."""
    return [float(i) for i in range(1, 11)]


@pytest.fixture
def small_data() -> list[float]:
    """The ten-value quick example dataset."""
    return [12.0, 15.0, 18.0, 22.0, 24.0, 27.0, 29.0, 33.0, 35.0, 38.0]


@pytest.fixture
def normal_data() -> np.ndarray:
    """Create a reproducible normal sample."""
    rng = np.random.default_rng(42)
    return rng.normal(50, 10, 500)


@pytest.fixture
def data_with_outlier() -> list[float]:
    """Small dataset with one extreme value."""
    return [1.0, 2.0, 3.0, 4.0, 5.0, 100.0]


@pytest.fixture
def data_with_non_finite() -> list[float]:
    """Create a dataset mixing NaN and infinities into 1..5."""
    return [1.0, 2.0, np.nan, 3.0, np.inf, 4.0, -np.inf, 5.0]


@pytest.fixture
def identical_data() -> list[float]:
    """Create a dataset where every value is the same."""
    return [7.0] * 12


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to captured streams between tests."""
    yield
    logger = logging.getLogger("statviz")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
