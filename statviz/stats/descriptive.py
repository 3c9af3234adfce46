"""
Descriptive statistics for statviz.

Every function here is pure and raises EmptyDatasetError on empty
input: statistics are only requested once a caller has confirmed it
holds cleaned, non-empty data.
"""

from __future__ import annotations

import math

import numpy as np

from statviz.utils.exceptions import (
    EmptyDatasetError,
    InsufficientDataError,
    ZeroMeanError,
)
from statviz.utils.types import (
    DescriptiveStatistics,
    NumericData,
    Quartiles,
    VarianceType,
    as_float_array,
)


def _require_data(data: NumericData, statistic: str) -> np.ndarray:
    values = as_float_array(data)
    if values.size == 0:
        raise EmptyDatasetError(f"Cannot calculate {statistic} of empty dataset")
    return values


def calculate_mean(data: NumericData) -> float:
    """Arithmetic mean."""
    values = _require_data(data, "mean")
    return float(np.sum(values) / values.size)


def calculate_median(data: NumericData) -> float:
    """Middle value, or the mean of the two middle values for even length."""
    values = np.sort(_require_data(data, "median"))
    mid = values.size // 2

    if values.size % 2 == 0:
        return float((values[mid - 1] + values[mid]) / 2)
    return float(values[mid])


def calculate_variance(
    data: NumericData, variance_type: str | VarianceType = "population"
) -> float:
    """
    Mean squared deviation from the mean.

    Parameters
    ----------
    data : NumericData
        Values.
    variance_type : str | VarianceType
        ``"population"`` divides by n, ``"sample"`` by n - 1.

    Returns
    -------
    float
        Variance.

    Raises
    ------
    EmptyDatasetError
        If ``data`` is empty.
    InsufficientDataError
        For sample variance of a single value.
    """
    values = _require_data(data, "variance")
    kind = VarianceType.from_string(variance_type)

    n = values.size
    if kind is VarianceType.SAMPLE and n < 2:
        raise InsufficientDataError("Cannot calculate sample variance of fewer than 2 values")

    mean = calculate_mean(values)
    squared_deviations = (values - mean) ** 2
    divisor = n - 1 if kind is VarianceType.SAMPLE else n
    return float(np.sum(squared_deviations) / divisor)


def calculate_standard_deviation(
    data: NumericData, variance_type: str | VarianceType = "population"
) -> float:
    """Square root of the variance; exactly 0 for a single value."""
    values = _require_data(data, "standard deviation")

    if values.size == 1:
        return 0.0

    return math.sqrt(calculate_variance(values, variance_type))


def calculate_coefficient_of_variation(
    data: NumericData, variance_type: str | VarianceType = "population"
) -> float:
    """
    Standard deviation relative to the absolute mean, in percent.

    Raises
    ------
    ZeroMeanError
        If the mean is exactly zero.
    """
    values = _require_data(data, "coefficient of variation")
    mean = calculate_mean(values)

    if mean == 0:
        raise ZeroMeanError("Cannot calculate coefficient of variation when mean is zero")

    standard_deviation = calculate_standard_deviation(values, variance_type)
    return (standard_deviation / abs(mean)) * 100


def _interpolate(ordered: np.ndarray, position: float) -> float:
    """Value at 1-indexed ``position``, linear between neighbours."""
    n = ordered.size
    lower = math.floor(position) - 1
    upper = math.ceil(position) - 1
    fraction = position - math.floor(position)

    if lower < 0:
        return float(ordered[0])
    if upper >= n:
        return float(ordered[n - 1])
    if lower == upper:
        return float(ordered[lower])

    return float(ordered[lower] + fraction * (ordered[upper] - ordered[lower]))


def calculate_quartiles(data: NumericData) -> Quartiles:
    """
    Quartiles by linear interpolation (Hyndman-Fan type 6).

    Positions are ``(n+1)/4`` and ``3(n+1)/4`` in the sorted data,
    1-indexed, clamped to the first and last element. ``q2`` is the
    median, which is the same interpolation at ``(n+1)/2`` computed as
    ``(a + b) / 2`` so the two agree bit for bit.

    >>> calculate_quartiles(range(1, 11))
    Quartiles(q1=2.75, q2=5.5, q3=8.25)
    """
    ordered = np.sort(_require_data(data, "quartiles"))
    n = ordered.size

    return Quartiles(
        q1=_interpolate(ordered, (n + 1) / 4),
        q2=calculate_median(ordered),
        q3=_interpolate(ordered, 3 * (n + 1) / 4),
    )


def calculate_descriptive_stats(
    data: NumericData,
    variance_type: str | VarianceType = "population",
    outliers: list[float] | None = None,
) -> DescriptiveStatistics:
    """
    Compute the full statistics record.

    Parameters
    ----------
    data : NumericData
        Cleaned values.
    variance_type : str | VarianceType
        Divisor convention for the standard deviation.
    outliers : list[float] | None
        Values removed by the cleaner, when outlier removal was requested.

    Returns
    -------
    DescriptiveStatistics
        Statistics record.

    Raises
    ------
    EmptyDatasetError
        If ``data`` is empty.
    ZeroMeanError
        If the mean is zero.
    """
    values = _require_data(data, "statistics")

    return DescriptiveStatistics(
        mean=calculate_mean(values),
        median=calculate_median(values),
        standard_deviation=calculate_standard_deviation(values, variance_type),
        coefficient_of_variation=calculate_coefficient_of_variation(values, variance_type),
        min=float(np.min(values)),
        max=float(np.max(values)),
        count=int(values.size),
        quartiles=calculate_quartiles(values),
        outliers=tuple(outliers) if outliers is not None else None,
    )
