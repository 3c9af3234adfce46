"""
Type definitions and value objects for statviz.

Every result produced by the analysis engine is one of the containers
defined here. They are plain values: built once by a pure function and
never mutated afterwards.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Sequence, TypeAlias

import numpy as np
import pandas as pd

from statviz.utils.exceptions import ConfigurationError


NumericData: TypeAlias = Sequence[float] | np.ndarray | pd.Series


class _NamedEnum(Enum):
    """Enum that can be looked up by its lower-case name."""

    @classmethod
    def from_string(cls, value: str | _NamedEnum) -> Any:
        """Parse a name such as ``"zscore"`` into the enum member."""
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            choices = ", ".join(m.label for m in cls)
            raise ConfigurationError(
                f"Unknown {cls.__name__} '{value}'. Expected one of: {choices}"
            ) from None

    @property
    def label(self) -> str:
        return self.name.lower()


class OutlierMethod(_NamedEnum):
    """Outlier detection rule used by the cleaner."""
    IQR = auto()
    ZSCORE = auto()


class VarianceType(_NamedEnum):
    """Divisor convention for variance."""
    POPULATION = auto()
    SAMPLE = auto()


class KernelType(_NamedEnum):
    """Smoothing kernel for density estimation."""
    GAUSSIAN = auto()
    EPANECHNIKOV = auto()
    TRIANGULAR = auto()


class BinLabelMode(_NamedEnum):
    """How histogram bins are labelled for display."""
    RANGE = auto()
    CENTER = auto()


class ValidationResult:
    """Container for validation results.

    ``is_valid`` is derived from ``errors`` so the two can never disagree.
    """

    def __init__(self, errors: list[str] | None = None, warnings: list[str] | None = None):
        self.errors = errors or []
        self.warnings = warnings or []

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def __bool__(self) -> bool:
        return self.is_valid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return self.errors == other.errors and self.warnings == other.warnings

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(valid=True, warnings={self.warnings})"
        return f"ValidationResult(valid=False, errors={self.errors})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class DataCleaningOptions:
    """Options accepted by the dataset cleaner."""
    remove_nan: bool = True
    remove_infinite: bool = True
    remove_outliers: bool = False
    outlier_method: str = "iqr"
    zscore_threshold: float = 3.0

    def __post_init__(self) -> None:
        OutlierMethod.from_string(self.outlier_method)
        if not self.zscore_threshold >= 0:
            raise ConfigurationError(
                f"zscore_threshold must be non-negative, got {self.zscore_threshold}"
            )

    @property
    def method(self) -> OutlierMethod:
        return OutlierMethod.from_string(self.outlier_method)


@dataclass
class CleaningStats:
    """Counts collected while cleaning a dataset."""
    original_count: int
    final_count: int
    non_finite_removed: int
    outliers_removed: int

    @property
    def removal_pct(self) -> float:
        if self.original_count == 0:
            return 0.0
        return 100 * (self.original_count - self.final_count) / self.original_count


@dataclass(frozen=True)
class CleaningResult:
    """Cleaned values together with what was taken out."""
    values: list[float]
    outliers: list[float]
    stats: CleaningStats


@dataclass(frozen=True)
class Quartiles:
    """First, second and third quartile."""
    q1: float
    q2: float
    q3: float

    @property
    def iqr(self) -> float:
        """Interquartile range."""
        return self.q3 - self.q1

    def to_dict(self) -> dict[str, float]:
        return {"q1": self.q1, "q2": self.q2, "q3": self.q3}


@dataclass(frozen=True)
class DescriptiveStatistics:
    """
    Summary statistics of a cleaned dataset.

    ``outliers`` is only set when the statistics were computed after
    outlier removal; it then holds the values that were removed.
    """
    mean: float
    median: float
    standard_deviation: float
    coefficient_of_variation: float
    min: float
    max: float
    count: int
    quartiles: Quartiles
    outliers: tuple[float, ...] | None = None

    @property
    def has_outliers(self) -> bool:
        return bool(self.outliers)

    def to_dict(self) -> dict[str, Any]:
        """Display/export shape with camelCase keys."""
        record: dict[str, Any] = {
            "mean": self.mean,
            "median": self.median,
            "standardDeviation": self.standard_deviation,
            "coefficientOfVariation": self.coefficient_of_variation,
            "min": self.min,
            "max": self.max,
            "count": self.count,
            "quartiles": self.quartiles.to_dict(),
        }
        if self.outliers is not None:
            record["outliers"] = list(self.outliers)
        return record

    def to_series(self) -> pd.Series:
        """Flat pandas Series, one row per statistic."""
        return pd.Series({
            "count": self.count,
            "mean": self.mean,
            "median": self.median,
            "std": self.standard_deviation,
            "cv_pct": self.coefficient_of_variation,
            "min": self.min,
            "q1": self.quartiles.q1,
            "q2": self.quartiles.q2,
            "q3": self.quartiles.q3,
            "max": self.max,
        }, name="statistics")


@dataclass(frozen=True)
class HistogramResult:
    """
    Equal-width histogram.

    ``labels`` and ``counts`` are parallel; ``edges`` holds the raw bin
    boundaries (one more than the number of bins) for tooltips.
    """
    labels: list[str] = field(default_factory=list)
    counts: list[int] = field(default_factory=list)
    edges: list[float] = field(default_factory=list)
    bin_width: float = 0.0
    label_mode: BinLabelMode = BinLabelMode.RANGE

    @property
    def is_empty(self) -> bool:
        return len(self.counts) == 0

    @property
    def total(self) -> int:
        return int(sum(self.counts))

    @property
    def centers(self) -> list[float]:
        return [left / 2 + right / 2 for left, right in zip(self.edges[:-1], self.edges[1:])]

    def bin_index(self, value: float) -> int | None:
        """Index of the bin ``value`` falls into, or None outside the range."""
        if self.is_empty or not math.isfinite(value):
            return None
        low, high = self.edges[0], self.edges[-1]
        if value < low or value > high:
            return None
        if self.bin_width == 0:
            return 0
        offset, width = value - low, self.bin_width
        if not math.isfinite(offset):
            offset, width = value / 2 - low / 2, width / 2
        return min(int(math.floor(offset / width)), len(self.counts) - 1)

    def to_dict(self) -> dict[str, Any]:
        return {
            "labels": list(self.labels),
            "counts": list(self.counts),
            "edges": list(self.edges),
        }

    def to_frame(self) -> pd.DataFrame:
        """One row per bin: left, right, center, label, count."""
        if self.is_empty:
            return pd.DataFrame(columns=["left", "right", "center", "label", "count"])
        return pd.DataFrame({
            "left": self.edges[:-1],
            "right": self.edges[1:],
            "center": self.centers,
            "label": self.labels,
            "count": self.counts,
        })


@dataclass(frozen=True, eq=False)
class KDEResult:
    """Density curve sampled on an ascending grid."""
    x: np.ndarray
    y: np.ndarray
    bandwidth: float
    kernel: KernelType = KernelType.GAUSSIAN

    @classmethod
    def empty(cls, bandwidth: float, kernel: KernelType = KernelType.GAUSSIAN) -> KDEResult:
        return cls(x=np.array([], dtype=float), y=np.array([], dtype=float),
                   bandwidth=bandwidth, kernel=kernel)

    @property
    def is_empty(self) -> bool:
        return self.x.size == 0

    @property
    def peak(self) -> float | None:
        """Grid point with the highest estimated density."""
        if self.is_empty:
            return None
        return float(self.x[int(np.argmax(self.y))])

    def to_dict(self) -> dict[str, list[float]]:
        return {"x": self.x.tolist(), "y": self.y.tolist()}

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"x": self.x, "density": self.y})


def as_float_array(data: NumericData) -> np.ndarray:
    """Copy ``data`` into a one-dimensional float64 array."""
    if isinstance(data, pd.Series):
        data = data.to_numpy()
    return np.array(data, dtype=float).reshape(-1)
