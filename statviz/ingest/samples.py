"""
Built-in sample datasets for demonstrating the analysis engine.

Each generator draws from a seeded NumPy generator, so a given seed
always yields the same numbers.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SampleDataset:
    """Named example dataset."""
    id: str
    name: str
    description: str
    data: list[float]
    context: str = ""


SMALL_DATA = [12.0, 15.0, 18.0, 22.0, 24.0, 27.0, 29.0, 33.0, 35.0, 38.0]


def generate_normal(
    mean: float, std_dev: float, count: int, rng: np.random.Generator
) -> list[float]:
    """Normally distributed values rounded to two decimals."""
    values = rng.normal(mean, std_dev, count)
    return np.round(values, 2).tolist()


def generate_bimodal(count: int, rng: np.random.Generator) -> list[float]:
    """Two uniform peaks around 165 and 185, rounded to one decimal."""
    first_peak = rng.random(count) < 0.6
    low = 165 + (rng.random(count) - 0.5) * 20
    high = 185 + (rng.random(count) - 0.5) * 16
    return np.round(np.where(first_peak, low, high), 1).tolist()


def generate_skewed(count: int, rng: np.random.Generator) -> list[float]:
    """Right-skewed income-like values (gamma with shape 3), whole numbers."""
    values = rng.gamma(shape=3.0, scale=1.0, size=count) * 15000 + 25000
    return np.round(values).tolist()


def list_sample_datasets(seed: int = 42) -> list[SampleDataset]:
    """
    Build all sample datasets.

    Parameters
    ----------
    seed : int
        Seed for the random generator shared by all generated datasets.

    Returns
    -------
    list[SampleDataset]
        normal, bimodal, skewed and small, in that order.
    """
    rng = np.random.default_rng(seed)
    return [
        SampleDataset(
            id="normal",
            name="Normal Distribution",
            description="Bell curve data (test scores)",
            data=generate_normal(75, 12, 100, rng),
            context="Student test scores out of 100 points",
        ),
        SampleDataset(
            id="bimodal",
            name="Bimodal Distribution",
            description="Two peaks (height data)",
            data=generate_bimodal(120, rng),
            context="Heights in cm from a mixed population",
        ),
        SampleDataset(
            id="skewed",
            name="Skewed Distribution",
            description="Right-skewed (income data)",
            data=generate_skewed(80, rng),
            context="Annual household income in USD",
        ),
        SampleDataset(
            id="small",
            name="Small Dataset",
            description="Quick example (10 values)",
            data=list(SMALL_DATA),
            context="Simple dataset for quick testing",
        ),
    ]


def get_sample_dataset(dataset_id: str, seed: int = 42) -> SampleDataset | None:
    """Look up a sample dataset by id; None if there is no such id."""
    for dataset in list_sample_datasets(seed):
        if dataset.id == dataset_id:
            return dataset
    return None
