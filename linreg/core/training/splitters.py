"""Seeded train/test partitioning of a dataset."""

from dataclasses import dataclass
from fractions import Fraction
import math
from typing import Protocol, runtime_checkable

import numpy as np

from linreg.core.data.datasets import Dataset
from linreg.core.errors import ConfigError


@dataclass(slots=True)
class SplitData:
    """Result of data splitting.

    Attributes:
        train_x: Training inputs, in dataset order.
        train_y: Training outputs.
        test_x: Held-out inputs, in dataset order. May be empty.
        test_y: Held-out outputs.
        extremes: Minimum and maximum of ``train_x``.
        seed: Seed the split was drawn with.
    """

    train_x: np.ndarray
    train_y: np.ndarray
    test_x: np.ndarray
    test_y: np.ndarray
    extremes: tuple[float, float]
    seed: int

    @property
    def train_size(self) -> int:
        return len(self.train_x)

    @property
    def test_size(self) -> int:
        return len(self.test_x)


@runtime_checkable
class DataSplitter(Protocol):
    """Protocol for splitting a dataset into train/test subsets."""

    def split(
        self,
        dataset: Dataset,
        training_distribution: float,
        seed: int,
    ) -> SplitData:
        """Split the dataset into train and test subsets.

        Args:
            dataset: The dataset to split.
            training_distribution: Fraction of rows meant for training.
            seed: Random seed for reproducibility.

        Returns:
            SplitData with both subsets and the training input extremes.
        """
        ...


class SeededDataSplitter:
    """Splits a dataset in a single pass driven by one boolean draw per row.

    A row goes to the test subset when its draw is true and the test quota,
    ``floor(len(dataset) * (1 - training_distribution))``, is not exhausted.
    Every other row goes to the training subset. The quota bounds the test
    subset size; it is not guaranteed to be reached.
    """

    def split(
        self,
        dataset: Dataset,
        training_distribution: float,
        seed: int,
    ) -> SplitData:
        if not 0.0 < training_distribution <= 1.0:
            raise ConfigError(
                f"training distribution must be in (0, 1], got {training_distribution}"
            )

        rng = np.random.default_rng(seed)
        draws = rng.random(len(dataset)) < 0.5

        # Decimal arithmetic: 10 rows at 0.9 leave a quota of 1, not 0
        test_quota = math.floor(len(dataset) * (1 - Fraction(str(training_distribution))))
        train_idx: list[int] = []
        test_idx: list[int] = []
        min_key = math.inf
        max_key = -math.inf

        for idx, (key, draw) in enumerate(zip(dataset.x, draws)):
            if draw and test_quota > 0:
                test_idx.append(idx)
                test_quota -= 1
            else:
                train_idx.append(idx)
                min_key = min(min_key, float(key))
                max_key = max(max_key, float(key))

        if not train_idx:
            raise ConfigError("training subset is empty; the dataset has no data rows")

        train = np.asarray(train_idx, dtype=np.intp)
        test = np.asarray(test_idx, dtype=np.intp)

        return SplitData(
            train_x=dataset.x[train].copy(),
            train_y=dataset.y[train].copy(),
            test_x=dataset.x[test].copy(),
            test_y=dataset.y[test].copy(),
            extremes=(min_key, max_key),
            seed=seed,
        )


__all__ = ["SplitData", "DataSplitter", "SeededDataSplitter"]
