"""
Distribution shape module for statviz.

Provides histogram binning and kernel density estimation.
"""

from statviz.distribution.histogram import (
    compute_histogram,
    format_bin_label,
)
from statviz.distribution.kde import (
    DEFAULT_BANDWIDTH,
    KERNELS,
    calculate_kde,
    estimate_optimal_bandwidth,
    evaluation_grid,
    gaussian_kernel,
    epanechnikov_kernel,
    triangular_kernel,
)

__all__ = [
    "compute_histogram",
    "format_bin_label",
    "DEFAULT_BANDWIDTH",
    "KERNELS",
    "calculate_kde",
    "estimate_optimal_bandwidth",
    "evaluation_grid",
    "gaussian_kernel",
    "epanechnikov_kernel",
    "triangular_kernel",
]
