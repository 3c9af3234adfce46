"""
Staged analysis pipeline for statviz.

Implements the flow raw text -> parse -> clean -> {statistics,
histogram, density}. Each stage consumes the cleaned values on its own;
none depends on another's output.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from statviz.clean.cleaner import DataCleaner
from statviz.distribution.histogram import compute_histogram
from statviz.distribution.kde import calculate_kde, estimate_optimal_bandwidth
from statviz.ingest.parser import parse_numeric_input, validate_numeric_input
from statviz.stats.descriptive import calculate_descriptive_stats
from statviz.utils.config import StatVizConfig, get_config
from statviz.utils.exceptions import StatVizError
from statviz.utils.logging import get_logger
from statviz.utils.types import (
    CleaningResult,
    DataCleaningOptions,
    DescriptiveStatistics,
    HistogramResult,
    KDEResult,
    NumericData,
    ValidationResult,
    as_float_array,
)


@dataclass
class AnalysisReport:
    """Everything one pipeline run produced."""
    validation: ValidationResult
    values: list[float] = field(default_factory=list)
    cleaning: CleaningResult | None = None
    statistics: DescriptiveStatistics | None = None
    histogram: HistogramResult | None = None
    kde: KDEResult | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def cleaned(self) -> list[float]:
        return self.cleaning.values if self.cleaning is not None else []

    @property
    def ok(self) -> bool:
        return self.validation.is_valid and not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "validation": self.validation.to_dict(),
            "count": len(self.values),
            "cleaned_count": len(self.cleaned),
            "statistics": self.statistics.to_dict() if self.statistics else None,
            "histogram": self.histogram.to_dict() if self.histogram else None,
            "kde": self.kde.to_dict() if self.kde else None,
            "bandwidth": self.kde.bandwidth if self.kde else None,
            "errors": list(self.errors),
        }


class PipelineStage:
    """Base class for pipeline stages."""

    def __init__(self, name: str, config: StatVizConfig):
        self.name = name
        self.config = config
        self.logger = get_logger(f"pipeline.{name}")

    def run(self, data: Any) -> Any:
        """Execute pipeline stage."""
        raise NotImplementedError


class CleaningStage(PipelineStage):
    """Non-finite and outlier removal stage."""

    def __init__(self, config: StatVizConfig):
        super().__init__("cleaning", config)
        self.cleaner = DataCleaner(DataCleaningOptions(**asdict(config.cleaning)))

    def run(self, data: NumericData) -> CleaningResult:
        result = self.cleaner.clean(data)
        self.logger.info(
            f"Kept {result.stats.final_count} of {result.stats.original_count} values "
            f"({result.stats.removal_pct:.1f}% removed)"
        )
        return result


class StatisticsStage(PipelineStage):
    """Descriptive statistics stage."""

    def __init__(self, config: StatVizConfig):
        super().__init__("statistics", config)

    def run(self, data: CleaningResult) -> DescriptiveStatistics:
        outliers = data.outliers if self.config.cleaning.remove_outliers else None
        return calculate_descriptive_stats(
            data.values,
            variance_type=self.config.statistics.variance_type,
            outliers=outliers,
        )


class HistogramStage(PipelineStage):
    """Histogram binning stage."""

    def __init__(self, config: StatVizConfig):
        super().__init__("histogram", config)

    def run(self, data: list[float]) -> HistogramResult:
        hist_config = self.config.histogram
        return compute_histogram(data, hist_config.bins, hist_config.label_mode)


class DensityStage(PipelineStage):
    """Kernel density stage."""

    def __init__(self, config: StatVizConfig):
        super().__init__("density", config)

    def resolve_bandwidth(self, data: list[float]) -> float:
        """Configured bandwidth, else Silverman's estimate, else the default."""
        kde_config = self.config.kde
        if kde_config.bandwidth is not None:
            return kde_config.bandwidth

        bandwidth = estimate_optimal_bandwidth(data, default=kde_config.default_bandwidth)
        self.logger.debug(f"Estimated bandwidth {bandwidth:.4g}")
        return bandwidth

    def run(self, data: list[float]) -> KDEResult:
        kde_config = self.config.kde
        return calculate_kde(
            data,
            bandwidth=self.resolve_bandwidth(data),
            points=kde_config.points,
            kernel=kde_config.kernel,
            chunk_size=kde_config.chunk_size,
        )


class DistributionAnalysis:
    """
    Orchestrates the analysis stages.

    Parse and clean once, then hand the cleaned values to each
    consumer stage independently.
    """

    def __init__(self, config: StatVizConfig | None = None):
        """
        Initialize pipeline.

        Parameters
        ----------
        config : StatVizConfig | None
            Configuration. Uses global if None.
        """
        self.config = config or get_config()
        self.logger = get_logger("pipeline")

        self.cleaning_stage = CleaningStage(self.config)
        self.statistics_stage = StatisticsStage(self.config)
        self.histogram_stage = HistogramStage(self.config)
        self.density_stage = DensityStage(self.config)

    def run_text(self, text: str) -> AnalysisReport:
        """Validate and parse ``text``, then analyze it."""
        validation = validate_numeric_input(text)
        if not validation.is_valid:
            self.logger.info(f"Rejected input: {len(validation.errors)} errors")
            return AnalysisReport(validation=validation)

        report = self.run(parse_numeric_input(text))
        report.validation = validation
        return report

    def run(self, values: NumericData) -> AnalysisReport:
        """
        Analyze already-numeric values.

        Parameters
        ----------
        values : NumericData
            Raw numbers, possibly containing NaN or infinities.

        Returns
        -------
        AnalysisReport
            Results of every stage. Statistics are skipped when nothing
            survives cleaning; a statistics failure is recorded in
            ``errors`` rather than raised.
        """
        cleaning = self.cleaning_stage.run(values)
        report = AnalysisReport(
            validation=ValidationResult(),
            values=as_float_array(values).tolist(),
            cleaning=cleaning,
        )

        cleaned = cleaning.values
        if not cleaned:
            report.errors.append("No values left after cleaning")
        else:
            try:
                report.statistics = self.statistics_stage.run(cleaning)
            except StatVizError as e:
                self.logger.warning(f"Statistics unavailable: {e}")
                report.errors.append(str(e))

        report.histogram = self.histogram_stage.run(cleaned)
        report.kde = self.density_stage.run(cleaned)

        return report
