"""Accuracy evaluation of a fitted model on the held-out subset."""

from dataclasses import dataclass
import math
import warnings

from loguru import logger
import numpy as np

from linreg.core.errors import ComputeWarning
from linreg.core.modeling.model import Model


@dataclass(frozen=True, slots=True)
class AccuracyReport:
    """Mean relative absolute error of a model on a test subset.

    Attributes:
        mean_relative_error: ``mean(|y - est| / est)``, or None when there was
            no test subset.
        test_size: Number of held-out rows that were scored.
        non_finite: Whether the computation hit a zero estimate or otherwise
            produced an infinite or NaN value.
    """

    mean_relative_error: float | None
    test_size: int
    non_finite: bool = False

    @property
    def available(self) -> bool:
        return self.mean_relative_error is not None

    def describe(self) -> str:
        if self.mean_relative_error is None:
            return "No test set available"
        return f"Average error ~{self.mean_relative_error:.3f}"


class AccuracyEvaluator:
    """Scores a model with the mean relative absolute error.

    Division by a zero estimate is not an error: the value is propagated as an
    IEEE float and reported through a :class:`ComputeWarning`.
    """

    def evaluate(self, model: Model, test_x: np.ndarray, test_y: np.ndarray) -> AccuracyReport:
        test_x = np.asarray(test_x, dtype=np.float64)
        test_y = np.asarray(test_y, dtype=np.float64)

        if len(test_x) == 0:
            logger.info("No test set available; skipping accuracy evaluation")
            return AccuracyReport(mean_relative_error=None, test_size=0)

        estimates = model.theta.theta0 + model.theta.theta1 * test_x
        with np.errstate(divide="ignore", invalid="ignore"):
            relative = np.abs(test_y - estimates) / estimates
        error = float(relative.mean())

        non_finite = bool(np.any(estimates == 0.0)) or not math.isfinite(error)
        if non_finite:
            message = (
                f"Accuracy evaluation produced a non-finite value ({error}); "
                "at least one estimate is zero or the error overflowed"
            )
            logger.warning(message)
            warnings.warn(message, ComputeWarning, stacklevel=2)

        return AccuracyReport(
            mean_relative_error=error,
            test_size=len(test_x),
            non_finite=non_finite,
        )
