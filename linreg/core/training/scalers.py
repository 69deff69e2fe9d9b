"""Min-max scaling of training inputs and descaling of fitted parameters."""

from dataclasses import dataclass
import math

import numpy as np

from linreg.core.errors import ConfigError
from linreg.core.modeling.model import Theta


@dataclass(frozen=True, slots=True)
class MinMaxScaler:
    """Maps training inputs onto [0, 1] using the training subset extremes.

    The model fitted on scaled inputs, ``theta0 + theta1 * (x - min) / span``,
    is converted back to the raw input scale by :meth:`descale`, which folds
    the ``min`` shift into the intercept.
    """

    minimum: float
    maximum: float

    def __post_init__(self) -> None:
        span = self.maximum - self.minimum
        if not (math.isfinite(span) and span > 0.0):
            raise ConfigError(
                "training inputs have no variance "
                f"(min={self.minimum}, max={self.maximum}); cannot normalize"
            )

    @classmethod
    def from_extremes(cls, extremes: tuple[float, float]) -> "MinMaxScaler":
        return cls(minimum=extremes[0], maximum=extremes[1])

    @property
    def span(self) -> float:
        return self.maximum - self.minimum

    def transform(self, x: np.ndarray) -> np.ndarray:
        """Returns ``(x - min) / (max - min)`` as a new array."""
        return (np.asarray(x, dtype=np.float64) - self.minimum) / self.span

    def descale(self, theta: Theta) -> Theta:
        """Converts parameters fitted on scaled inputs to the raw input scale."""
        theta1 = theta.theta1 / self.span
        theta0 = theta.theta0 - theta1 * self.minimum
        return Theta(theta0, theta1)
