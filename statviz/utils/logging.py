"""
Logging configuration for statviz.

All modules log under the ``statviz`` logger tree. Console output goes to
stderr by default because stdout carries the report and ``--json``
output of the command line.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from statviz.utils.config import get_config, LoggingConfig, StatVizConfig

ROOT_LOGGER_NAME = "statviz"


def _add_handler(
    logger: logging.Logger,
    handler: logging.Handler,
    level: int,
    formatter: logging.Formatter,
) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def resolve_level(log_config: LoggingConfig) -> int:
    """Numeric level for a configured name such as ``"debug"``; INFO if unknown."""
    level = logging.getLevelName(str(log_config.level).upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    config: StatVizConfig | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Configure the ``statviz`` logger tree.

    Replaces any handlers from an earlier call, so re-running the command
    line in one process does not duplicate output.

    Parameters
    ----------
    config : StatVizConfig | None
        Configuration object. Uses global config if None.
    stream : TextIO | None
        Console destination. Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        The configured ``statviz`` logger.
    """
    if config is None:
        config = get_config()

    log_config = config.logging
    level = resolve_level(log_config)
    formatter = logging.Formatter(log_config.format)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    _add_handler(
        root_logger,
        logging.StreamHandler(stream if stream is not None else sys.stderr),
        level,
        formatter,
    )

    if log_config.file:
        log_file = Path(log_config.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _add_handler(
            root_logger,
            logging.FileHandler(log_file, encoding="utf-8"),
            level,
            formatter,
        )

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Parameters
    ----------
    name : str
        Module name for logger, e.g. ``"kde"`` or ``"pipeline.density"``.

    Returns
    -------
    logging.Logger
        The ``statviz.<name>`` logger.
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
