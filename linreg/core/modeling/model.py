"""Fitted linear model definitions."""

from dataclasses import dataclass
from typing import NamedTuple


class Theta(NamedTuple):
    """Intercept and slope of a univariate linear model.

    Attributes:
        theta0: Intercept.
        theta1: Slope.
    """

    theta0: float
    theta1: float


@dataclass(frozen=True, slots=True)
class Model:
    """A fitted model expressed in the original input scale."""

    labels: tuple[str, str]
    theta: Theta

    def estimate(self, key: float) -> float:
        """Computes ``theta0 + theta1 * key``."""
        return self.theta.theta0 + self.theta.theta1 * key
