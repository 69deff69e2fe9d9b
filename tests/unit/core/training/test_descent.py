"""Tests for the gradient descent engine and its convergence policy."""

import numpy as np
import pytest

from linreg.core.errors import ConfigError, ConvergenceError
from linreg.core.training.descent import ConvergencePolicy, DescentResult, GradientDescentEngine


@pytest.fixture
def scaled_inputs() -> tuple[np.ndarray, np.ndarray]:
    """Inputs already in [0, 1] with ``y = 3 + 2x``."""
    x = np.linspace(0.0, 1.0, 11)
    return x, 3.0 + 2.0 * x


class DescribeConvergencePolicy:
    def it_stops_at_the_iteration_limit(self) -> None:
        policy = ConvergencePolicy(iteration_limit=5)

        assert not policy.is_done(4, (1.0, 1.0))
        assert policy.is_done(5, (1.0, 1.0))

    def it_ignores_the_temporal_difference_when_a_limit_is_set(self) -> None:
        policy = ConvergencePolicy(iteration_limit=5, temp_diff_limit=10.0)

        assert not policy.is_done(1, (0.0, 0.0))

    def it_requires_both_components_within_the_limit(self) -> None:
        policy = ConvergencePolicy(temp_diff_limit=0.01)

        assert not policy.is_done(1, (0.001, 0.02))
        assert not policy.is_done(1, (-0.02, 0.001))
        assert policy.is_done(1, (-0.01, 0.01))

    def it_is_not_done_for_the_initial_difference(self) -> None:
        assert not ConvergencePolicy().is_done(0, (1.0, 1.0))


class DescribeGradientDescentEngine:
    def it_converges_on_noise_free_linear_data(self, scaled_inputs) -> None:
        x, y = scaled_inputs
        engine = GradientDescentEngine(
            learning_rate=0.5, policy=ConvergencePolicy(temp_diff_limit=1e-9)
        )

        result = engine.fit(x, y)

        assert isinstance(result, DescentResult)
        assert result.theta.theta0 == pytest.approx(3.0, abs=1e-2)
        assert result.theta.theta1 == pytest.approx(2.0, abs=1e-2)

    def it_runs_exactly_the_iteration_limit(self, scaled_inputs) -> None:
        x, y = scaled_inputs
        engine = GradientDescentEngine(
            learning_rate=0.1,
            policy=ConvergencePolicy(iteration_limit=37, temp_diff_limit=1e6),
        )

        result = engine.fit(x, y)

        assert result.iterations == 37

    def it_runs_no_iterations_with_a_zero_limit(self, scaled_inputs) -> None:
        x, y = scaled_inputs
        engine = GradientDescentEngine(policy=ConvergencePolicy(iteration_limit=0))

        result = engine.fit(x, y)

        assert result.iterations == 0
        assert result.theta == (0.0, 0.0)
        assert result.temp_diff == (1.0, 1.0)

    def it_always_runs_at_least_one_iteration_in_precision_mode(self, scaled_inputs) -> None:
        x, y = scaled_inputs
        engine = GradientDescentEngine(policy=ConvergencePolicy(temp_diff_limit=1e6))

        result = engine.fit(x, y)

        assert result.iterations == 1

    def it_stops_on_the_first_iteration_within_the_limit(self, scaled_inputs) -> None:
        x, y = scaled_inputs
        limit = 1e-4
        engine = GradientDescentEngine(
            learning_rate=0.1, policy=ConvergencePolicy(temp_diff_limit=limit)
        )

        result = engine.fit(x, y)

        assert abs(result.temp_diff[0]) <= limit
        assert abs(result.temp_diff[1]) <= limit

        # One iteration fewer must not have satisfied the limit
        shorter = GradientDescentEngine(
            learning_rate=0.1,
            policy=ConvergencePolicy(iteration_limit=result.iterations - 1),
        ).fit(x, y)
        assert abs(shorter.temp_diff[0]) > limit or abs(shorter.temp_diff[1]) > limit

    def it_matches_a_hand_computed_first_step(self) -> None:
        x = np.array([0.0, 1.0])
        y = np.array([2.0, 4.0])
        engine = GradientDescentEngine(
            learning_rate=0.5, policy=ConvergencePolicy(iteration_limit=1)
        )

        result = engine.fit(x, y)

        # sum0 = -6, sum1 = -4, m = 2
        assert result.temp_diff == pytest.approx((-1.5, -1.0))
        assert result.theta == pytest.approx((1.5, 1.0))

    def it_rejects_an_empty_training_subset(self) -> None:
        with pytest.raises(ConfigError):
            GradientDescentEngine().fit(np.array([]), np.array([]))

    def it_raises_when_updates_become_non_finite(self) -> None:
        x = np.array([0.0, 1000.0, 2000.0])
        y = np.array([1.0, 2.0, 3.0])
        engine = GradientDescentEngine(
            learning_rate=10.0, policy=ConvergencePolicy(temp_diff_limit=1e-3)
        )

        with pytest.raises(ConvergenceError), np.errstate(over="ignore", invalid="ignore"):
            engine.fit(x, y)
