"""
Data ingestion module for statviz.

Provides text parsing/validation and built-in sample datasets.
"""

from statviz.ingest.parser import (
    tokenize,
    validate_numeric_input,
    parse_numeric_input,
)
from statviz.ingest.samples import (
    SampleDataset,
    list_sample_datasets,
    get_sample_dataset,
)

__all__ = [
    "tokenize",
    "validate_numeric_input",
    "parse_numeric_input",
    "SampleDataset",
    "list_sample_datasets",
    "get_sample_dataset",
]
