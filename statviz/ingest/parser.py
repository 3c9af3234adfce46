"""
Free-form numeric input parsing for statviz.

Turns pasted or typed text into a list of floats. Values may be
separated by commas, semicolons (ASCII or full-width) or any
whitespace, in any mix.
"""

from __future__ import annotations

import re

from statviz.utils.exceptions import InvalidInputError
from statviz.utils.logging import get_logger
from statviz.utils.types import ValidationResult

logger = get_logger("ingest")

# ASCII and full-width comma/semicolon plus any whitespace
DELIMITER_PATTERN = re.compile(r"[,，;；\s]+")

NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")

EMPTY_INPUT_ERROR = "Input cannot be empty"
SINGLE_VALUE_WARNING = "Only one value provided"


def tokenize(text: str) -> list[str]:
    """Split ``text`` on delimiter runs and drop empty tokens."""
    tokens = (token.strip() for token in DELIMITER_PATTERN.split(text))
    return [token for token in tokens if token]


def _parse_token(token: str) -> float | None:
    """Float value of a decimal token, or None if it is not one."""
    if not NUMBER_PATTERN.match(token):
        return None
    value = float(token)
    # 1e999 matches the pattern but overflows
    if value in (float("inf"), float("-inf")):
        return None
    return value


def validate_numeric_input(text: str | None) -> ValidationResult:
    """
    Check that ``text`` holds only decimal numbers.

    Never raises: every problem is reported in the result.

    Parameters
    ----------
    text : str | None
        Raw user input.

    Returns
    -------
    ValidationResult
        One ``"Invalid number: <token>"`` error per bad token, in input
        order, or the single ``"Input cannot be empty"`` error.
    """
    if text is None or not str(text).strip():
        return ValidationResult([EMPTY_INPUT_ERROR])

    tokens = tokenize(str(text))
    if not tokens:
        return ValidationResult([EMPTY_INPUT_ERROR])

    errors = [f"Invalid number: {token}" for token in tokens if _parse_token(token) is None]

    warnings = []
    if not errors and len(tokens) == 1:
        warnings.append(SINGLE_VALUE_WARNING)

    return ValidationResult(errors, warnings)


def parse_numeric_input(text: str | None) -> list[float]:
    """
    Parse ``text`` into a list of floats, preserving input order.

    Parameters
    ----------
    text : str | None
        Raw user input.

    Returns
    -------
    list[float]
        Parsed values.

    Raises
    ------
    InvalidInputError
        If validation fails; carries the individual messages.
    """
    validation = validate_numeric_input(text)

    if not validation.is_valid:
        raise InvalidInputError(validation.errors)

    values = [_parse_token(token) for token in tokenize(str(text))]
    logger.debug(f"Parsed {len(values)} values")
    return values
