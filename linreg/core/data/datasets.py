"""Definition of the in-memory two-column dataset."""

from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass(frozen=True, slots=True)
class Dataset:
    """Ordered sequence of (x, y) pairs together with their column labels.

    Attributes:
        labels: Names of the input and output columns, in that order.
        x: Input values, in file order.
        y: Output values, aligned with ``x``.
    """

    labels: tuple[str, str]
    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        if len(self.x) != len(self.y):
            raise ValueError(f"x and y must have same length. Got x: {len(self.x)}, y: {len(self.y)}")
        # Freeze the buffers so the dataset stays immutable after load
        self.x.setflags(write=False)
        self.y.setflags(write=False)

    @classmethod
    def from_pairs(cls, labels: tuple[str, str], pairs: list[tuple[float, float]]) -> "Dataset":
        """Builds a dataset from a list of (x, y) tuples."""
        if pairs:
            xs, ys = zip(*pairs)
        else:
            xs, ys = (), ()
        return cls(
            labels=labels,
            x=np.asarray(xs, dtype=np.float64),
            y=np.asarray(ys, dtype=np.float64),
        )

    def __len__(self) -> int:
        return len(self.x)

    def pairs(self) -> Iterator[tuple[float, float]]:
        """Yields the (x, y) pairs in input order."""
        for key, value in zip(self.x, self.y):
            yield float(key), float(value)
