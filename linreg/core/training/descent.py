"""Batch gradient descent for a two-parameter linear model.

For a training subset of size m the parameters are updated each iteration by

    tmp_theta0 = alpha * (1 / m) * sum(theta0 + theta1 * x[i] - y[i])
    tmp_theta1 = alpha * (1 / m) * sum((theta0 + theta1 * x[i] - y[i]) * x[i])

and ``theta -= tmp_theta``. The update pair is also the convergence signal
(the temporal difference).
"""

from dataclasses import dataclass
import math

from loguru import logger
import numpy as np

from linreg.core.errors import ConfigError, ConvergenceError
from linreg.core.modeling.model import Theta


@dataclass(frozen=True, slots=True)
class ConvergencePolicy:
    """Decides when the descent loop stops.

    Attributes:
        iteration_limit: When set, stop after exactly this many iterations and
            ignore ``temp_diff_limit``.
        temp_diff_limit: Otherwise stop once both update components are at
            most this value in magnitude.
    """

    iteration_limit: int | None = None
    temp_diff_limit: float = 0.001

    def is_done(self, iteration: int, temp_diff: tuple[float, float]) -> bool:
        if self.iteration_limit is not None:
            return iteration >= self.iteration_limit
        # At least one update must have happened before precision can be judged
        return (
            iteration > 0
            and abs(temp_diff[0]) <= self.temp_diff_limit
            and abs(temp_diff[1]) <= self.temp_diff_limit
        )


@dataclass(frozen=True, slots=True)
class DescentResult:
    """Outcome of a descent run.

    Attributes:
        theta: Fitted parameters, in the scale of the inputs the engine saw.
        iterations: Number of update steps performed.
        temp_diff: Last update applied, or (1.0, 1.0) if no step ran.
    """

    theta: Theta
    iterations: int
    temp_diff: tuple[float, float]


class GradientDescentEngine:
    """Fits ``theta0 + theta1 * x`` by full-batch gradient descent on MSE.

    There is no divergence correction: a learning rate too large for the input
    scale makes the updates grow. Normalized inputs keep ``0.1`` stable. When
    an update becomes non-finite the run is aborted with ConvergenceError.
    """

    def __init__(
        self,
        learning_rate: float = 0.1,
        policy: ConvergencePolicy | None = None,
        log_every: int = 1000,
    ) -> None:
        self._learning_rate = learning_rate
        self._policy = policy or ConvergencePolicy()
        self._log_every = log_every

    @property
    def policy(self) -> ConvergencePolicy:
        return self._policy

    def fit(self, x: np.ndarray, y: np.ndarray) -> DescentResult:
        """Runs the descent loop until the convergence policy is satisfied.

        Args:
            x: Training inputs (normally min-max scaled).
            y: Training outputs.

        Returns:
            DescentResult with the fitted parameters and iteration count.

        Raises:
            ConfigError: If the training subset is empty.
            ConvergenceError: If an update becomes NaN or infinite.
        """
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        if len(x) == 0:
            raise ConfigError("cannot fit on an empty training subset")

        # m_ratio == 1 / m, computed once instead of dividing every iteration
        m_ratio = 1.0 / len(x)
        theta0, theta1 = 0.0, 0.0
        temp_diff = (1.0, 1.0)
        iteration = 0

        while not self._policy.is_done(iteration, temp_diff):
            error = theta0 + theta1 * x - y
            temp_diff = (
                float(self._learning_rate * m_ratio * error.sum()),
                float(self._learning_rate * m_ratio * (error * x).sum()),
            )
            if not (math.isfinite(temp_diff[0]) and math.isfinite(temp_diff[1])):
                raise ConvergenceError(iteration, temp_diff)

            theta0 -= temp_diff[0]
            theta1 -= temp_diff[1]
            iteration += 1

            if self._log_every and iteration % self._log_every == 0:
                logger.debug(
                    f"Iteration {iteration}: temporal difference {temp_diff}, "
                    f"theta ({theta0}, {theta1})"
                )

        return DescentResult(
            theta=Theta(theta0, theta1),
            iterations=iteration,
            temp_diff=temp_diff,
        )
