"""
Utility modules for statviz.

Provides configuration, types, exceptions and logging infrastructure.
"""

from statviz.utils.config import (
    StatVizConfig,
    load_config,
    get_config,
    set_config,
)
from statviz.utils.exceptions import (
    StatVizError,
    InvalidInputError,
    EmptyDatasetError,
    InsufficientDataError,
    ZeroMeanError,
    ConfigurationError,
)
from statviz.utils.types import (
    NumericData,
    OutlierMethod,
    VarianceType,
    KernelType,
    BinLabelMode,
    ValidationResult,
    DataCleaningOptions,
    CleaningStats,
    CleaningResult,
    Quartiles,
    DescriptiveStatistics,
    HistogramResult,
    KDEResult,
    as_float_array,
)
from statviz.utils.logging import setup_logging, get_logger, resolve_level

__all__ = [
    # Config
    "StatVizConfig",
    "load_config",
    "get_config",
    "set_config",
    # Exceptions
    "StatVizError",
    "InvalidInputError",
    "EmptyDatasetError",
    "InsufficientDataError",
    "ZeroMeanError",
    "ConfigurationError",
    # Types
    "NumericData",
    "OutlierMethod",
    "VarianceType",
    "KernelType",
    "BinLabelMode",
    "ValidationResult",
    "DataCleaningOptions",
    "CleaningStats",
    "CleaningResult",
    "Quartiles",
    "DescriptiveStatistics",
    "HistogramResult",
    "KDEResult",
    "as_float_array",
    # Logging
    "setup_logging",
    "resolve_level",
    "get_logger",
]
