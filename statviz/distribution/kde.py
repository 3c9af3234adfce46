"""
Kernel density estimation for statviz.

The density is evaluated on an evenly spaced grid that extends 10%
past the data range on each side, so the tails are not cut off.
"""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

from statviz.utils.exceptions import ConfigurationError
from statviz.utils.logging import get_logger
from statviz.utils.types import (
    KDEResult,
    KernelType,
    NumericData,
    as_float_array,
)

logger = get_logger("kde")

DEFAULT_BANDWIDTH = 0.5
DEFAULT_POINTS = 100
GRID_PADDING = 0.1

_GAUSSIAN_NORM = 1 / math.sqrt(2 * math.pi)


def gaussian_kernel(u: np.ndarray) -> np.ndarray:
    """Standard normal density."""
    return _GAUSSIAN_NORM * np.exp(-0.5 * u * u)


def epanechnikov_kernel(u: np.ndarray) -> np.ndarray:
    """Parabolic kernel on [-1, 1]."""
    return np.where(np.abs(u) <= 1, 0.75 * (1 - u * u), 0.0)


def triangular_kernel(u: np.ndarray) -> np.ndarray:
    """Triangle kernel on [-1, 1]."""
    return np.where(np.abs(u) <= 1, 1 - np.abs(u), 0.0)


KERNELS: dict[KernelType, Callable[[np.ndarray], np.ndarray]] = {
    KernelType.GAUSSIAN: gaussian_kernel,
    KernelType.EPANECHNIKOV: epanechnikov_kernel,
    KernelType.TRIANGULAR: triangular_kernel,
}


def evaluation_grid(data_min: float, data_max: float, points: int) -> np.ndarray:
    """``points`` evenly spaced values over the padded data range."""
    span = (data_max - data_min) * (1 + 2 * GRID_PADDING)
    if math.isfinite(data_min) and math.isfinite(data_max) and not math.isfinite(span):
        # padded span overflows; the grid is linear in the data, so halve and double
        return 2 * evaluation_grid(data_min / 2, data_max / 2, points)
    padding = (data_max - data_min) * GRID_PADDING
    x_min = data_min - padding
    x_max = data_max + padding
    return x_min + (np.arange(points) / (points - 1)) * (x_max - x_min)


def _finite_values(data: NumericData) -> np.ndarray:
    values = as_float_array(data)
    return values[np.isfinite(values)]


def calculate_kde(
    data: NumericData,
    bandwidth: float = DEFAULT_BANDWIDTH,
    points: int = DEFAULT_POINTS,
    kernel: str | KernelType = "gaussian",
    chunk_size: int = 10000,
) -> KDEResult:
    """
    Kernel density estimate of ``data``.

    ``y[i] = sum_j K((x[i] - data[j]) / h) / (n * h)``

    NaN and infinities are left out, so ``n`` counts finite values only.

    Parameters
    ----------
    data : NumericData
        Cleaned values.
    bandwidth : float
        Smoothing parameter h, finite and positive.
    points : int
        Number of grid points, at least 2.
    kernel : str | KernelType
        ``"gaussian"``, ``"epanechnikov"`` or ``"triangular"``.
    chunk_size : int
        Observations evaluated per block; bounds memory at
        ``points * chunk_size`` floats.

    Returns
    -------
    KDEResult
        Grid and density. Empty when ``data`` holds no finite values,
        whatever the bandwidth.

    Raises
    ------
    ConfigurationError
        On a bad bandwidth, point count or kernel name.
    """
    kernel_type = KernelType.from_string(kernel)

    if isinstance(points, bool) or not isinstance(points, (int, np.integer)) or points < 2:
        raise ConfigurationError(f"points must be an integer of at least 2, got {points!r}")
    if chunk_size < 1:
        raise ConfigurationError(f"chunk_size must be positive, got {chunk_size!r}")

    values = _finite_values(data)
    if values.size == 0:
        return KDEResult.empty(bandwidth, kernel_type)

    if not (math.isfinite(bandwidth) and bandwidth > 0):
        raise ConfigurationError(f"bandwidth must be a positive number, got {bandwidth!r}")

    x = evaluation_grid(float(np.min(values)), float(np.max(values)), int(points))

    kernel_fn = KERNELS[kernel_type]
    density = np.zeros_like(x)
    for start in range(0, values.size, chunk_size):
        block = values[start:start + chunk_size]
        u = (x[:, np.newaxis] - block[np.newaxis, :]) / bandwidth
        density += kernel_fn(u).sum(axis=1)

    y = density / (values.size * bandwidth)

    logger.debug(
        f"KDE over {values.size} values: kernel={kernel_type.label}, "
        f"bandwidth={bandwidth:.4g}, points={points}"
    )

    return KDEResult(x=x, y=y, bandwidth=float(bandwidth), kernel=kernel_type)


def estimate_optimal_bandwidth(
    data: NumericData, default: float = DEFAULT_BANDWIDTH
) -> float:
    """
    Silverman's rule of thumb, ``1.06 * sigma * n ** (-1/5)``.

    Uses the population standard deviation of the finite values. The
    estimate is advisory: ``default`` is returned when there is nothing
    to estimate from, when every value is identical (sigma is 0), or
    when sigma overflows.
    """
    values = _finite_values(data)
    if values.size == 0:
        return default

    n = values.size
    mean = np.sum(values) / n
    std_dev = math.sqrt(np.sum((values - mean) ** 2) / n)

    bandwidth = 1.06 * std_dev * n ** (-1 / 5)
    if not (math.isfinite(bandwidth) and bandwidth > 0):
        return default
    return bandwidth
