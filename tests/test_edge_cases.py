"""
Edge case tests for statviz.

Tests degenerate datasets, boundary values, and error handling across
the parse -> clean -> analyze flow.

Run tests with: pytest tests/test_edge_cases.py -v
After installing package with: pip install -e .
"""

import numpy as np
import pytest

from statviz.clean.cleaner import clean_dataset
from statviz.distribution.histogram import compute_histogram
from statviz.distribution.kde import calculate_kde, estimate_optimal_bandwidth
from statviz.ingest.parser import parse_numeric_input, validate_numeric_input
from statviz.pipeline import DistributionAnalysis
from statviz.stats.descriptive import calculate_descriptive_stats
from statviz.utils.exceptions import (
    EmptyDatasetError,
    InsufficientDataError,
    InvalidInputError,
    StatVizError,
)
from statviz.utils.types import DataCleaningOptions


class TestSingleValue:
    """Tests for one-element datasets."""

    def test_parse_warns(self):
        """Test a single value is valid with a warning."""
        result = validate_numeric_input("42")

        assert result.is_valid
        assert result.warnings == ["Only one value provided"]

    def test_statistics(self):
        """Test every statistic collapses onto the value."""
        stats = calculate_descriptive_stats([42.0])

        assert stats.mean == stats.median == stats.min == stats.max == 42.0
        assert stats.standard_deviation == 0
        assert stats.coefficient_of_variation == 0
        assert stats.quartiles.iqr == 0

    def test_pipeline(self, config):
        """Test the full flow on a single value."""
        report = DistributionAnalysis(config).run_text("42")

        assert report.ok
        assert report.histogram.counts[0] == 1
        assert report.histogram.total == 1
        assert report.kde.bandwidth == config.kde.default_bandwidth
        assert np.isfinite(report.kde.y).all()


class TestIdenticalValues:
    """Tests for zero-spread datasets."""

    def test_statistics(self, identical_data):
        """Test zero spread statistics."""
        stats = calculate_descriptive_stats(identical_data)

        assert stats.standard_deviation == 0
        assert stats.quartiles.q1 == stats.quartiles.q3 == 7.0

    def test_kde_grid_degenerates(self, identical_data):
        """Test the zero-width grid sits on the value."""
        result = calculate_kde(identical_data, 0.5, points=10)

        assert (result.x == 7.0).all()
        assert result.y == pytest.approx([0.7978845608] * 10)

    def test_bandwidth_falls_back(self, identical_data):
        """Test zero spread gives the default bandwidth, which the KDE accepts."""
        bandwidth = estimate_optimal_bandwidth(identical_data)

        assert bandwidth == 0.5
        assert not calculate_kde(identical_data, bandwidth).is_empty

    def test_outlier_removal_keeps_all(self, identical_data):
        """Test neither rule removes anything."""
        for method in ("iqr", "zscore"):
            options = DataCleaningOptions(remove_outliers=True, outlier_method=method)
            assert clean_dataset(identical_data, options) == identical_data


class TestNegativeAndMixedSigns:
    """Tests for negative values."""

    def test_negative_only(self):
        """Test statistics on all-negative data."""
        stats = calculate_descriptive_stats([-10.0, -20.0, -30.0])

        assert stats.mean == -20.0
        assert stats.coefficient_of_variation > 0

    def test_parse_signs(self):
        """Test explicit signs and exponents."""
        assert parse_numeric_input("-1, +2, -3.5e1") == [-1.0, 2.0, -35.0]

    def test_histogram_spans_zero(self):
        """Test bins straddling zero."""
        result = compute_histogram([-1.0, 0.0, 1.0], 2)

        assert result.counts == [1, 2]
        assert result.labels == ["-1.0-0.0", "0.0-1.0"]


class TestExtremeValues:
    """Tests for large and small magnitudes."""

    def test_large_magnitudes(self):
        """Test values around 1e15 keep their spread."""
        data = [1e15, 1e15 + 2.0, 1e15 + 4.0]
        stats = calculate_descriptive_stats(data)

        assert stats.mean == pytest.approx(1e15 + 2.0)
        assert stats.standard_deviation == pytest.approx(np.std(data))

    def test_tiny_magnitudes(self):
        """Test KDE on values far below one."""
        data = [1e-9, 2e-9, 3e-9, 4e-9]
        bandwidth = estimate_optimal_bandwidth(data)
        result = calculate_kde(data, bandwidth)

        assert bandwidth > 0
        assert np.isfinite(result.y).all()
        assert result.y.max() > 0

    def test_overflowing_token_rejected(self):
        """Test literals that overflow a float are invalid."""
        assert validate_numeric_input("1, 1e999").errors == ["Invalid number: 1e999"]


class TestInputErrors:
    """Tests for malformed input."""

    @pytest.mark.parametrize("text", ["", "   ", ",,,", "，；"])
    def test_empty_like(self, text):
        """Test input with no tokens is empty."""
        assert validate_numeric_input(text).errors == ["Input cannot be empty"]

    def test_all_errors_reported(self):
        """Test every bad token is listed in order."""
        with pytest.raises(InvalidInputError) as exc_info:
            parse_numeric_input("a 1 b 2 nan")

        assert exc_info.value.errors == [
            "Invalid number: a",
            "Invalid number: b",
            "Invalid number: nan",
        ]

    def test_mixed_delimiters(self):
        """Test ASCII and full-width delimiters in one string."""
        assert parse_numeric_input("1；2，3 4\t5\n6") == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]

    def test_exception_hierarchy(self):
        """Test library errors share a base and stay ValueErrors."""
        assert issubclass(InvalidInputError, StatVizError)
        assert issubclass(InsufficientDataError, EmptyDatasetError)
        assert issubclass(EmptyDatasetError, ValueError)


class TestIdempotence:
    """Tests for repeatable, side-effect free operations."""

    def test_clean_twice(self, data_with_non_finite):
        """Test cleaning a cleaned dataset changes nothing."""
        once = clean_dataset(data_with_non_finite)

        assert clean_dataset(once) == once

    def test_outlier_removal_ignores_order(self, data_with_outlier):
        """Test shuffled input removes the same outliers."""
        options = DataCleaningOptions(remove_outliers=True)
        shuffled = list(reversed(data_with_outlier))

        assert sorted(clean_dataset(shuffled, options)) == clean_dataset(data_with_outlier, options)

    def test_kde_repeatable(self, normal_data):
        """Test identical inputs give identical curves."""
        first = calculate_kde(normal_data, 2.0)
        second = calculate_kde(normal_data, 2.0)

        np.testing.assert_array_equal(first.y, second.y)
