"""Inference on top of a stored model."""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel

from linreg.core.modeling.model import Model
from linreg.services.model_store import ModelStore


class Prediction(BaseModel):
    """Result of a single estimate."""

    key: Annotated[float, "Input value the estimate was computed for"]
    estimate: Annotated[float, "Estimated output value"]
    labels: Annotated[tuple[str, str], "Input and output column labels"]

    def describe(self) -> str:
        return (
            f"The estimate for {self.key} [{self.labels[0]}] is "
            f"{self.estimate:.3f} [{self.labels[1]}]."
        )


class Predictor:
    """Computes estimates from a loaded model."""

    def __init__(self, model: Model) -> None:
        self._model = model

    @classmethod
    def from_file(cls, path: str | Path, store: ModelStore | None = None) -> "Predictor":
        """Loads the model at ``path`` and wraps it in a predictor."""
        store = store or ModelStore()
        return cls(store.load(path))

    @property
    def labels(self) -> tuple[str, str]:
        return self._model.labels

    @property
    def model(self) -> Model:
        return self._model

    def predict(self, key: float) -> Prediction:
        return Prediction(key=key, estimate=self._model.estimate(key), labels=self._model.labels)
