"""Plot of a fitted model over its dataset."""

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from linreg.core.data.datasets import Dataset  # noqa: E402
from linreg.core.modeling.model import Model  # noqa: E402


def bounding_box(dataset: Dataset, padding: float = 0.1) -> tuple[float, float, float, float]:
    """Computes the plot area around all dataset pairs.

    Each axis is widened by ``padding`` times its range on both sides.

    Returns:
        Tuple of (x_min, y_min, x_max, y_max).
    """
    if len(dataset) == 0:
        raise ValueError("Cannot compute a bounding box for an empty dataset.")
    x_min, x_max = float(dataset.x.min()), float(dataset.x.max())
    y_min, y_max = float(dataset.y.min()), float(dataset.y.max())
    x_off = (x_max - x_min) * padding
    y_off = (y_max - y_min) * padding
    return x_min - x_off, y_min - y_off, x_max + x_off, y_max + y_off


def plot_fit(
    dataset: Dataset,
    model: Model,
    path: str | Path,
    padding: float = 0.1,
    caption: str | None = None,
) -> Path:
    """Saves a scatter plot of the dataset with the regression line.

    Args:
        dataset: Pairs to scatter.
        model: Fitted model, drawn across the padded x range.
        path: PNG file to write; parent directories are created.
        padding: Relative padding of the bounding box.
        caption: Optional subtitle, e.g. the seed and ratio of the run.

    Returns:
        Path: The written file.
    """
    path = Path(path)
    x_min, y_min, x_max, y_max = bounding_box(dataset, padding)

    fig, ax = plt.subplots(figsize=(10.24, 7.68))
    try:
        ax.scatter(dataset.x, dataset.y, s=12, color="green", label="data")
        ax.plot(
            [x_min, x_max],
            [model.estimate(x_min), model.estimate(x_max)],
            color="red",
            label="fit",
        )

        ax.set_xlim(x_min, x_max)
        ax.set_ylim(y_min, y_max)
        ax.set_xlabel(model.labels[0], fontsize=12)
        ax.set_ylabel(model.labels[1], fontsize=12)
        fig.suptitle("linear regression", fontsize=16)
        if caption:
            ax.set_title(caption, fontsize=10)
        ax.legend(loc="best")
        ax.grid(True, alpha=0.3)

        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path, format="png")
    finally:
        plt.close(fig)

    return path
