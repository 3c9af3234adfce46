"""
Dataset cleaning for statviz.

Removes non-finite values and, optionally, statistical outliers. Never
raises on data; the worst case is an empty result.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
from scipy import stats

from statviz.utils.logging import get_logger
from statviz.utils.types import (
    CleaningResult,
    CleaningStats,
    DataCleaningOptions,
    NumericData,
    OutlierMethod,
    as_float_array,
)

logger = get_logger("clean")


class OutlierFilter(ABC):
    """Abstract base class for outlier rules."""

    @abstractmethod
    def keep_mask(self, values: np.ndarray) -> np.ndarray:
        """Boolean mask of the finite ``values`` to keep."""
        pass


class IQROutlierFilter(OutlierFilter):
    """
    Tukey fences on index-based quartiles.

    Quartiles are ``sorted[floor(n*0.25)]`` and ``sorted[floor(n*0.75)]``,
    not the interpolated quartiles reported by the statistics engine.
    """

    def __init__(self, multiplier: float = 1.5):
        self.multiplier = multiplier

    def bounds(self, values: np.ndarray) -> tuple[float, float]:
        ordered = np.sort(values)
        n = len(ordered)
        q1 = ordered[int(np.floor(n * 0.25))]
        q3 = ordered[int(np.floor(n * 0.75))]
        iqr = q3 - q1
        return q1 - self.multiplier * iqr, q3 + self.multiplier * iqr

    def keep_mask(self, values: np.ndarray) -> np.ndarray:
        lower, upper = self.bounds(values)
        return (values >= lower) & (values <= upper)


class ZScoreOutlierFilter(OutlierFilter):
    """Keeps values whose population z-score is within ``threshold``."""

    def __init__(self, threshold: float = 3.0):
        self.threshold = threshold

    def keep_mask(self, values: np.ndarray) -> np.ndarray:
        if np.std(values) == 0:
            # every z-score is 0
            return np.ones(len(values), dtype=bool)
        z_scores = np.abs(stats.zscore(values, ddof=0))
        return z_scores <= self.threshold


class DataCleaner:
    """
    Main data cleaning orchestrator.

    Filters non-finite values per the options, then applies the
    configured outlier rule to what is left.
    """

    def __init__(self, options: DataCleaningOptions | None = None):
        """
        Initialize data cleaner.

        Parameters
        ----------
        options : DataCleaningOptions | None
            Cleaning options. Uses defaults if None.
        """
        self.options = options or DataCleaningOptions()

        if self.options.method is OutlierMethod.ZSCORE:
            self.outlier_filter: OutlierFilter = ZScoreOutlierFilter(
                threshold=self.options.zscore_threshold
            )
        else:
            self.outlier_filter = IQROutlierFilter()

    def clean(self, data: NumericData) -> CleaningResult:
        """
        Clean a numeric sequence.

        Parameters
        ----------
        data : NumericData
            Values to clean, in input order.

        Returns
        -------
        CleaningResult
            Kept values (input order preserved), removed outliers and
            counts.
        """
        values = as_float_array(data)
        original_count = len(values)

        values = self._remove_non_finite(values)
        non_finite_removed = original_count - len(values)

        outliers = np.array([], dtype=float)
        if self.options.remove_outliers and len(values) > 0:
            values, outliers = self._remove_outliers(values)

        stats = CleaningStats(
            original_count=original_count,
            final_count=len(values),
            non_finite_removed=non_finite_removed,
            outliers_removed=len(outliers),
        )

        if stats.final_count < original_count:
            logger.debug(
                f"Cleaned {original_count} values: removed {non_finite_removed} "
                f"non-finite and {stats.outliers_removed} outliers"
            )

        return CleaningResult(
            values=values.tolist(),
            outliers=outliers.tolist(),
            stats=stats,
        )

    def _remove_non_finite(self, values: np.ndarray) -> np.ndarray:
        """Drop NaN and/or infinite values per the options."""
        if self.options.remove_nan:
            values = values[~np.isnan(values)]
        if self.options.remove_infinite:
            # NaN is not finite either
            values = values[np.isfinite(values)]
        return values

    def _remove_outliers(self, values: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        """Split ``values`` into (kept, outliers); non-finite values are kept."""
        finite = np.isfinite(values)
        if not finite.any():
            return values, np.array([], dtype=float)

        keep = ~finite
        keep[finite] = self.outlier_filter.keep_mask(values[finite])

        return values[keep], values[~keep]


def clean_dataset(
    data: NumericData, options: DataCleaningOptions | None = None
) -> list[float]:
    """
    Convenience function to clean a numeric sequence.

    Parameters
    ----------
    data : NumericData
        Values to clean.
    options : DataCleaningOptions | None
        Cleaning options. Uses defaults if None.

    Returns
    -------
    list[float]
        Cleaned values, possibly empty.
    """
    cleaner = DataCleaner(options)
    return cleaner.clean(data).values
