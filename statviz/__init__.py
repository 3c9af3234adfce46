"""
statviz: numeric distribution analysis engine.

Parses free-form numeric input, cleans it, and computes descriptive
statistics, an equal-width histogram and a kernel density estimate.
"""

__version__ = "1.0.0"

from statviz.utils.config import StatVizConfig, load_config, get_config
from statviz.utils.exceptions import (
    StatVizError,
    InvalidInputError,
    EmptyDatasetError,
    InsufficientDataError,
    ZeroMeanError,
    ConfigurationError,
)
from statviz.utils.types import (
    ValidationResult,
    DataCleaningOptions,
    Quartiles,
    DescriptiveStatistics,
    HistogramResult,
    KDEResult,
)

from statviz.ingest import validate_numeric_input, parse_numeric_input
from statviz.clean import clean_dataset
from statviz.stats import (
    calculate_mean,
    calculate_median,
    calculate_variance,
    calculate_standard_deviation,
    calculate_coefficient_of_variation,
    calculate_quartiles,
    calculate_descriptive_stats,
)
from statviz.distribution import (
    compute_histogram,
    calculate_kde,
    estimate_optimal_bandwidth,
)
from statviz.pipeline import DistributionAnalysis, AnalysisReport

__all__ = [
    "__version__",
    "StatVizConfig",
    "load_config",
    "get_config",
    "StatVizError",
    "InvalidInputError",
    "EmptyDatasetError",
    "InsufficientDataError",
    "ZeroMeanError",
    "ConfigurationError",
    "ValidationResult",
    "DataCleaningOptions",
    "Quartiles",
    "DescriptiveStatistics",
    "HistogramResult",
    "KDEResult",
    "validate_numeric_input",
    "parse_numeric_input",
    "clean_dataset",
    "calculate_mean",
    "calculate_median",
    "calculate_variance",
    "calculate_standard_deviation",
    "calculate_coefficient_of_variation",
    "calculate_quartiles",
    "calculate_descriptive_stats",
    "compute_histogram",
    "calculate_kde",
    "estimate_optimal_bandwidth",
    "DistributionAnalysis",
    "AnalysisReport",
]
