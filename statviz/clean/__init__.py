"""
Data cleaning module for statviz.

Provides non-finite filtering and outlier removal.
"""

from statviz.clean.cleaner import (
    DataCleaner,
    OutlierFilter,
    IQROutlierFilter,
    ZScoreOutlierFilter,
    clean_dataset,
)

__all__ = [
    "DataCleaner",
    "OutlierFilter",
    "IQROutlierFilter",
    "ZScoreOutlierFilter",
    "clean_dataset",
]
