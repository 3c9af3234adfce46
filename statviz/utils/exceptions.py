"""
Exception hierarchy for statviz.

Input problems are reported through ValidationResult by the parser;
the classes here cover the cases where a caller must be stopped.
"""

from __future__ import annotations


class StatVizError(Exception):
    """Base exception for all statviz errors.

    Example:
        >>> try:
        ...     calculate_mean([])
        ... except StatVizError as e:
        ...     print(f"statviz error: {e}")
    """
    pass


class InvalidInputError(StatVizError, ValueError):
    """Raw text could not be parsed into numbers.

    The individual validation messages are kept on ``errors`` so a
    caller can display them one per line.

    Example:
        >>> raise InvalidInputError(["Invalid number: abc"])
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(f"Invalid input: {', '.join(self.errors)}")


class EmptyDatasetError(StatVizError, ValueError):
    """A statistic was requested on a zero-length sequence.

    Example:
        >>> raise EmptyDatasetError("Cannot calculate mean of empty dataset")
    """
    pass


class InsufficientDataError(EmptyDatasetError):
    """Too few observations for the requested estimator.

    Example:
        >>> raise InsufficientDataError("Sample variance requires at least 2 values")
    """
    pass


class ZeroMeanError(StatVizError, ValueError):
    """Coefficient of variation is undefined for a zero mean.

    Example:
        >>> raise ZeroMeanError("Cannot calculate coefficient of variation when mean is zero")
    """
    pass


class ConfigurationError(StatVizError, ValueError):
    """Invalid parameter or configuration value.

    Raised for things like an unknown kernel name, a non-positive
    bandwidth or a bin count below one.

    Example:
        >>> raise ConfigurationError("bin_count must be a positive integer, got 0")
    """
    pass
