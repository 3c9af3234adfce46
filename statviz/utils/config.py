"""
Configuration management for statviz.

Provides centralized configuration loading and access patterns. The
numeric functions never read this module; only the pipeline and the
command line turn configuration into explicit parameters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class CleaningConfig:
    """Default dataset cleaning options."""
    remove_nan: bool = True
    remove_infinite: bool = True
    remove_outliers: bool = False
    outlier_method: str = "iqr"
    zscore_threshold: float = 3.0


@dataclass
class StatisticsConfig:
    """Descriptive statistics parameters."""
    variance_type: str = "population"


@dataclass
class HistogramConfig:
    """Histogram binning parameters."""
    bins: int = 10
    min_bins: int = 5
    max_bins: int = 50
    label_mode: str = "range"


@dataclass
class KDEConfig:
    """Kernel density estimation parameters."""
    bandwidth: float | None = None
    default_bandwidth: float = 0.5
    points: int = 100
    kernel: str = "gaussian"
    chunk_size: int = 10000


@dataclass
class SampleConfig:
    """Sample dataset generation."""
    seed: int = 42


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str | None = None


@dataclass
class StatVizConfig:
    """
    Master configuration container for statviz.

    Aggregates all sub-configurations into a single access point.
    """
    cleaning: CleaningConfig = field(default_factory=CleaningConfig)
    statistics: StatisticsConfig = field(default_factory=StatisticsConfig)
    histogram: HistogramConfig = field(default_factory=HistogramConfig)
    kde: KDEConfig = field(default_factory=KDEConfig)
    samples: SampleConfig = field(default_factory=SampleConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS = {
    "cleaning": CleaningConfig,
    "statistics": StatisticsConfig,
    "histogram": HistogramConfig,
    "kde": KDEConfig,
    "samples": SampleConfig,
    "logging": LoggingConfig,
}

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "default.yaml"


def load_config(config_path: str | Path | None = None) -> StatVizConfig:
    """
    Load configuration from YAML file.

    Parameters
    ----------
    config_path : str | Path | None
        Path to configuration file. If None, uses ``config/default.yaml``
        when present and built-in defaults otherwise.

    Returns
    -------
    StatVizConfig
        Loaded configuration object.

    Raises
    ------
    FileNotFoundError
        If specified config file does not exist.
    """
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return StatVizConfig()
        config_path = DEFAULT_CONFIG_PATH

    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        raw_config = yaml.safe_load(f) or {}

    config = StatVizConfig()

    for section, section_class in _SECTIONS.items():
        if section in raw_config:
            setattr(config, section, section_class(**(raw_config[section] or {})))

    return config


_global_config: StatVizConfig | None = None


def get_config() -> StatVizConfig:
    """
    Get global configuration instance.

    Loads default configuration on first access.

    Returns
    -------
    StatVizConfig
        Global configuration object.
    """
    global _global_config
    if _global_config is None:
        _global_config = load_config()
    return _global_config


def set_config(config: StatVizConfig) -> None:
    """
    Set global configuration instance.

    Parameters
    ----------
    config : StatVizConfig
        Configuration to set as global.
    """
    global _global_config
    _global_config = config
