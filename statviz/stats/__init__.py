"""
Descriptive statistics module for statviz.
"""

from statviz.stats.descriptive import (
    calculate_mean,
    calculate_median,
    calculate_variance,
    calculate_standard_deviation,
    calculate_coefficient_of_variation,
    calculate_quartiles,
    calculate_descriptive_stats,
)

__all__ = [
    "calculate_mean",
    "calculate_median",
    "calculate_variance",
    "calculate_standard_deviation",
    "calculate_coefficient_of_variation",
    "calculate_quartiles",
    "calculate_descriptive_stats",
]
