"""Shared fixtures for the linreg test suite."""

from pathlib import Path

import numpy as np
import pytest

from linreg.core.data.datasets import Dataset

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def subject_data_path() -> Path:
    """The 24-row mileage/price dataset shipped with the project."""
    return PROJECT_ROOT / "data" / "data.csv"


@pytest.fixture
def linear_dataset() -> Dataset:
    """Noise-free ``price = 120 - 2 * km`` over four rows."""
    return Dataset(
        labels=("km", "price"),
        x=np.array([10.0, 20.0, 30.0, 40.0]),
        y=np.array([100.0, 80.0, 60.0, 40.0]),
    )


@pytest.fixture
def synthetic_dataset() -> Dataset:
    """Noise-free ``y = 3 + 2x`` over x = 0..10."""
    x = np.arange(0.0, 11.0)
    return Dataset(labels=("x", "y"), x=x, y=3.0 + 2.0 * x)
