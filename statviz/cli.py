"""
statviz command line.

Usage:
    statviz --values "1, 2, 3, 4, 5"
    statviz --sample bimodal --bins 20 --kernel epanechnikov
    cat data.txt | statviz --remove-outliers --outlier-method zscore --json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import pandas as pd

from statviz.ingest.samples import get_sample_dataset, list_sample_datasets
from statviz.pipeline import AnalysisReport, DistributionAnalysis
from statviz.utils.config import StatVizConfig, load_config, set_config
from statviz.utils.logging import get_logger, setup_logging


def create_argument_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="statviz",
        description="statviz: descriptive statistics, histogram and KDE for numeric data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    statviz --values "12, 15, 18, 22"
    statviz --sample skewed --remove-outliers
    statviz --file data.txt --bins 20 --json
        """,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--values",
        type=str,
        default=None,
        help="Numbers separated by commas, semicolons or whitespace",
    )
    source.add_argument(
        "--file",
        type=str,
        default=None,
        help="Text file holding the numbers",
    )
    source.add_argument(
        "--sample",
        type=str,
        default=None,
        choices=[d.id for d in list_sample_datasets()],
        help="Analyze a built-in sample dataset",
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration YAML file",
    )
    parser.add_argument("--bins", type=int, default=None, help="Number of histogram bins")
    parser.add_argument(
        "--label-mode",
        choices=["range", "center"],
        default=None,
        help="Histogram bin labels",
    )
    parser.add_argument(
        "--bandwidth",
        type=float,
        default=None,
        help="KDE bandwidth (default: Silverman's rule of thumb)",
    )
    parser.add_argument("--points", type=int, default=None, help="KDE grid points")
    parser.add_argument(
        "--kernel",
        choices=["gaussian", "epanechnikov", "triangular"],
        default=None,
        help="KDE kernel",
    )
    parser.add_argument(
        "--remove-outliers",
        action="store_true",
        default=False,
        help="Drop statistical outliers before analysis",
    )
    parser.add_argument(
        "--outlier-method",
        choices=["iqr", "zscore"],
        default=None,
        help="Outlier rule used with --remove-outliers",
    )
    parser.add_argument(
        "--zscore-threshold",
        type=float,
        default=None,
        help="Absolute z-score cutoff for the zscore method",
    )
    parser.add_argument(
        "--variance-type",
        choices=["population", "sample"],
        default=None,
        help="Divisor convention for the standard deviation",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the full report as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Enable verbose logging",
    )

    return parser


def apply_overrides(config: StatVizConfig, args: argparse.Namespace) -> StatVizConfig:
    """Copy command line options onto ``config``."""
    if args.verbose:
        config.logging.level = "DEBUG"

    if args.remove_outliers:
        config.cleaning.remove_outliers = True
    if args.outlier_method:
        config.cleaning.outlier_method = args.outlier_method
    if args.zscore_threshold is not None:
        config.cleaning.zscore_threshold = args.zscore_threshold

    if args.variance_type:
        config.statistics.variance_type = args.variance_type

    if args.bins is not None:
        config.histogram.bins = args.bins
    if args.label_mode:
        config.histogram.label_mode = args.label_mode

    if args.bandwidth is not None:
        config.kde.bandwidth = args.bandwidth
    if args.points is not None:
        config.kde.points = args.points
    if args.kernel:
        config.kde.kernel = args.kernel

    return config


def read_input(args: argparse.Namespace, config: StatVizConfig) -> str:
    """Raw text from --values, --file, --sample or stdin."""
    if args.values is not None:
        return args.values
    if args.file is not None:
        return Path(args.file).read_text(encoding="utf-8")
    if args.sample is not None:
        dataset = get_sample_dataset(args.sample, seed=config.samples.seed)
        return ", ".join(repr(v) for v in dataset.data)
    return sys.stdin.read()


def print_report(report: AnalysisReport) -> None:
    """Print a human-readable summary."""
    print("\n" + "=" * 60)
    print("DISTRIBUTION SUMMARY")
    print("=" * 60 + "\n")

    cleaning = report.cleaning
    print(f"Values: {len(report.values)}  Cleaned: {len(report.cleaned)}")
    if cleaning is not None and cleaning.stats.outliers_removed:
        print(f"Outliers removed: {cleaning.outliers}")
    for warning in report.validation.warnings:
        print(f"Warning: {warning}")

    if report.statistics is not None:
        print("\nStatistics:")
        with pd.option_context("display.float_format", lambda x: f"{x:.4f}"):
            print(report.statistics.to_series().to_string())

    if report.histogram is not None and not report.histogram.is_empty:
        print("\nHistogram:")
        frame = report.histogram.to_frame()[["label", "count"]]
        print(frame.to_string(index=False))

    if report.kde is not None and not report.kde.is_empty:
        print("\nDensity:")
        print(f"  Kernel: {report.kde.kernel.label}")
        print(f"  Bandwidth: {report.kde.bandwidth:.4f}")
        print(f"  Peak at: {report.kde.peak:.4f}")

    for error in report.errors:
        print(f"\nError: {error}")

    print("\n" + "=" * 60 + "\n")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    config = apply_overrides(config, args)

    hist_config = config.histogram
    if not hist_config.min_bins <= hist_config.bins <= hist_config.max_bins:
        parser.error(
            f"--bins must be between {hist_config.min_bins} and {hist_config.max_bins}"
        )

    set_config(config)
    setup_logging(config)
    logger = get_logger("main")

    text = read_input(args, config)

    pipeline = DistributionAnalysis(config)
    report = pipeline.run_text(text)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    elif not report.validation.is_valid:
        for error in report.validation.errors:
            print(error, file=sys.stderr)
    else:
        print_report(report)

    if not report.ok:
        logger.warning("Analysis incomplete")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
