"""Tests for the fit plot."""

from pathlib import Path

import numpy as np
import pytest

from linreg.core.data.datasets import Dataset
from linreg.core.modeling.model import Model, Theta
from linreg.services.plotting import bounding_box, plot_fit


class DescribeBoundingBox:
    def it_pads_each_axis_by_its_range(self, linear_dataset: Dataset) -> None:
        # x spans 10..40, y spans 40..100
        box = bounding_box(linear_dataset, padding=0.1)

        assert box == pytest.approx((7.0, 34.0, 43.0, 106.0))

    def it_returns_the_raw_extremes_without_padding(self, linear_dataset: Dataset) -> None:
        assert bounding_box(linear_dataset, padding=0.0) == (10.0, 40.0, 40.0, 100.0)

    def it_rejects_an_empty_dataset(self) -> None:
        empty = Dataset(labels=("x", "y"), x=np.array([]), y=np.array([]))

        with pytest.raises(ValueError):
            bounding_box(empty)


class DescribePlotFit:
    def it_writes_a_png_file(self, linear_dataset: Dataset, tmp_path: Path) -> None:
        model = Model(labels=linear_dataset.labels, theta=Theta(120.0, -2.0))

        path = plot_fit(linear_dataset, model, tmp_path / "stats" / "result.png", caption="seed: 1")

        assert path.exists()
        assert path.read_bytes().startswith(b"\x89PNG")
