"""
Unit tests for ingestion module.

Run tests with: pytest tests/test_ingest.py -v
After installing package with: pip install -e .
"""

import pytest

from statviz.ingest.parser import (
    tokenize,
    validate_numeric_input,
    parse_numeric_input,
)
from statviz.ingest.samples import (
    SMALL_DATA,
    get_sample_dataset,
    list_sample_datasets,
)
from statviz.utils.exceptions import InvalidInputError
from statviz.utils.types import ValidationResult


class TestTokenize:
    """Tests for delimiter handling."""

    def test_mixed_delimiters(self):
        """Test that commas, semicolons and whitespace all split."""
        assert tokenize("1, 2;3\t4\n5  6") == ["1", "2", "3", "4", "5", "6"]

    def test_full_width_delimiters(self):
        """Test full-width comma and semicolon."""
        assert tokenize("1，2；3") == ["1", "2", "3"]

    def test_collapses_runs(self):
        """Test that consecutive delimiters yield no empty tokens."""
        assert tokenize(",,1,,;; 2 ,") == ["1", "2"]


class TestValidateNumericInput:
    """Tests for validate_numeric_input."""

    def test_empty_input(self):
        """Test empty string is rejected with a single error."""
        result = validate_numeric_input("")

        assert not result.is_valid
        assert result.errors == ["Input cannot be empty"]

    def test_whitespace_only_input(self):
        """Test whitespace-only input short-circuits."""
        result = validate_numeric_input("   \n\t ")

        assert result.errors == ["Input cannot be empty"]

    def test_none_input(self):
        """Test None is treated as empty rather than raising."""
        assert validate_numeric_input(None).errors == ["Input cannot be empty"]

    def test_delimiters_only(self):
        """Test input made of delimiters only."""
        assert validate_numeric_input(",;，").errors == ["Input cannot be empty"]

    def test_invalid_token(self):
        """Test a non-numeric token is reported."""
        result = validate_numeric_input("1,abc,3")

        assert not result.is_valid
        assert "Invalid number: abc" in result.errors

    def test_errors_in_input_order(self):
        """Test one error per bad token, in order."""
        result = validate_numeric_input("x 1 y 2 z")

        assert result.errors == [
            "Invalid number: x",
            "Invalid number: y",
            "Invalid number: z",
        ]

    def test_partial_numbers_rejected(self):
        """Test tokens with trailing garbage are rejected."""
        result = validate_numeric_input("12abc 3")

        assert result.errors == ["Invalid number: 12abc"]

    @pytest.mark.parametrize("token", ["inf", "-Infinity", "nan", "NaN", "1e999", "0x10", "1_000"])
    def test_non_decimal_literals_rejected(self, token):
        """Test literals Python's float() accepts but are not finite decimals."""
        assert not validate_numeric_input(token).is_valid

    @pytest.mark.parametrize("token", ["-3", "+4.5", ".5", "5.", "1e3", "-2.5E-2"])
    def test_decimal_forms_accepted(self, token):
        """Test signs, fractional parts and exponents."""
        assert validate_numeric_input(token).is_valid

    def test_valid_input(self):
        """Test a well-formed list validates cleanly."""
        result = validate_numeric_input("1, 2, 3")

        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    def test_single_value_warning(self):
        """Test a single value is valid but warned about."""
        result = validate_numeric_input("42")

        assert result.is_valid
        assert result.warnings == ["Only one value provided"]

    def test_errors_iff_invalid(self):
        """Test the errors/is_valid invariant."""
        for text in ["", "1 2", "a", "1 b"]:
            result = validate_numeric_input(text)
            assert result.is_valid == (len(result.errors) == 0)


class TestParseNumericInput:
    """Tests for parse_numeric_input."""

    def test_full_width_commas(self):
        """Test full-width commas parse like ASCII commas."""
        assert parse_numeric_input("1，2，3，4，5") == parse_numeric_input("1,2,3,4,5")
        assert parse_numeric_input("1，2，3，4，5") == [1.0, 2.0, 3.0, 4.0, 5.0]

    @pytest.mark.parametrize("text", [
        "1, 2, 3, 4, 5",
        "1， 2， 3， 4， 5",
        "1,2，3,4，5",
        "1；2；3；4；5",
        "1,2\n3,4\n5",
        "1，2\n3，4\n5",
    ])
    def test_delimiter_variants(self, text):
        """Test every delimiter combination yields the same values."""
        assert parse_numeric_input(text) == [1.0, 2.0, 3.0, 4.0, 5.0]

    def test_preserves_order(self):
        """Test input order is kept."""
        assert parse_numeric_input("3 -1 2.5") == [3.0, -1.0, 2.5]

    def test_invalid_raises(self):
        """Test invalid input raises with the joined messages."""
        with pytest.raises(InvalidInputError, match="Invalid number: abc") as exc_info:
            parse_numeric_input("1,abc,3")

        assert exc_info.value.errors == ["Invalid number: abc"]
        assert str(exc_info.value) == "Invalid input: Invalid number: abc"

    def test_empty_raises(self):
        """Test empty input raises."""
        with pytest.raises(InvalidInputError, match="Input cannot be empty"):
            parse_numeric_input("")

    def test_invalid_input_is_value_error(self):
        """Test InvalidInputError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_numeric_input("oops")


class TestValidationResult:
    """Tests for ValidationResult container."""

    def test_truthiness(self):
        """Test bool() follows validity."""
        assert ValidationResult()
        assert not ValidationResult(["bad"])

    def test_to_dict(self):
        """Test display shape."""
        result = ValidationResult(["Invalid number: x"])

        assert result.to_dict() == {
            "isValid": False,
            "errors": ["Invalid number: x"],
            "warnings": [],
        }


class TestSampleDatasets:
    """Tests for built-in sample datasets."""

    def test_all_datasets_present(self):
        """Test the four datasets and their sizes."""
        datasets = {d.id: d for d in list_sample_datasets()}

        assert list(datasets) == ["normal", "bimodal", "skewed", "small"]
        assert len(datasets["normal"].data) == 100
        assert len(datasets["bimodal"].data) == 120
        assert len(datasets["skewed"].data) == 80
        assert datasets["small"].data == SMALL_DATA

    def test_reproducible(self):
        """Test the same seed gives the same data."""
        assert get_sample_dataset("normal", seed=7).data == get_sample_dataset("normal", seed=7).data
        assert get_sample_dataset("normal", seed=7).data != get_sample_dataset("normal", seed=8).data

    def test_bimodal_range(self):
        """Test bimodal values lie inside the two uniform peaks."""
        data = get_sample_dataset("bimodal").data

        assert min(data) >= 155.0
        assert max(data) <= 193.0

    def test_skewed_floor(self):
        """Test skewed incomes are whole numbers above the offset."""
        data = get_sample_dataset("skewed").data

        assert all(v >= 25000 for v in data)
        assert all(v == int(v) for v in data)

    def test_unknown_id(self):
        """Test unknown ids return None."""
        assert get_sample_dataset("missing") is None
