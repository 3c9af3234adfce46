"""
Equal-width histogram binning for statviz.
"""

from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP

import numpy as np

from statviz.utils.exceptions import ConfigurationError
from statviz.utils.logging import get_logger
from statviz.utils.types import (
    BinLabelMode,
    HistogramResult,
    NumericData,
    as_float_array,
)

logger = get_logger("histogram")


FIXED_NOTATION_LIMIT = 1e21


def _one_decimal(value: float) -> str:
    """
    Fixed one-decimal text; exact ties round away from zero.

    Magnitudes of 1e21 and above switch to shortest exponent notation,
    e.g. ``1e+308``.
    """
    value = float(value)
    if abs(value) >= FIXED_NOTATION_LIMIT:
        return repr(value)
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_bin_label(left: float, right: float, mode: BinLabelMode) -> str:
    """Display label for the bin ``[left, right]``."""
    if mode is BinLabelMode.CENTER:
        return _one_decimal(left / 2 + right / 2)
    return f"{_one_decimal(left)}-{_one_decimal(right)}"


def compute_histogram(
    data: NumericData,
    bin_count: int = 10,
    label_mode: str | BinLabelMode = "range",
) -> HistogramResult:
    """
    Partition ``data`` into ``bin_count`` equal-width bins.

    Bins span ``[min, max]``. A value lands in bin
    ``floor((value - min) / width)``; the maximum, which would land one
    past the end, is counted in the last bin. When every value is the
    same the width is zero and everything goes to bin 0. NaN and
    infinities are not counted.

    Parameters
    ----------
    data : NumericData
        Cleaned values.
    bin_count : int
        Number of bins, at least 1.
    label_mode : str | BinLabelMode
        ``"range"`` for ``"left-right"`` labels, ``"center"`` for the
        bin midpoint.

    Returns
    -------
    HistogramResult
        Labels, counts and raw edges. Empty when ``data`` holds no
        finite values.

    Raises
    ------
    ConfigurationError
        If ``bin_count`` is not a positive integer or the label mode is
        unknown.
    """
    if isinstance(bin_count, bool) or not isinstance(bin_count, (int, np.integer)) or bin_count < 1:
        raise ConfigurationError(f"bin_count must be a positive integer, got {bin_count!r}")
    bin_count = int(bin_count)
    mode = BinLabelMode.from_string(label_mode)

    values = as_float_array(data)
    finite = np.isfinite(values)
    if not finite.all():
        logger.debug(f"Skipping {int(np.count_nonzero(~finite))} non-finite values")
        values = values[finite]
    if values.size == 0:
        return HistogramResult(label_mode=mode)

    data_min = float(np.min(values))
    data_max = float(np.max(values))

    # max - min overflows for ranges near the float limit; bin positions
    # are scale invariant, so work on halved values
    scale = 1.0 if math.isfinite(data_max - data_min) else 0.5
    low = data_min * scale
    width = (data_max * scale - low) / bin_count

    edges = (low + np.arange(bin_count + 1) * width) / scale

    if width == 0:
        indices = np.zeros(values.size, dtype=int)
    else:
        indices = np.floor((values * scale - low) / width).astype(int)
        indices = np.minimum(indices, bin_count - 1)

    bin_width = width / scale
    counts = np.bincount(indices, minlength=bin_count)

    labels = [
        format_bin_label(edges[i], edges[i + 1], mode)
        for i in range(bin_count)
    ]

    logger.debug(f"Binned {values.size} values into {bin_count} bins of width {bin_width:.4g}")

    return HistogramResult(
        labels=labels,
        counts=[int(c) for c in counts],
        edges=[float(e) for e in edges],
        bin_width=bin_width,
        label_mode=mode,
    )
