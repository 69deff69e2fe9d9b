"""Configuration of a single training run."""

from dataclasses import dataclass, field
import math
from pathlib import Path

from linreg.core.errors import ConfigError


@dataclass(frozen=True, slots=True)
class TrainingConfig:
    """Immutable parameters of one training run.

    Attributes:
        training_distribution: Fraction of the dataset assigned to the training
            subset, in (0, 1]. The rest is held out for evaluation.
        seed: Seed of the splitting generator. When None a fresh seed is
            generated by the pipeline and reported in the training result.
        learning_rate: Gradient descent step size (alpha).
        iteration_limit: Fixed number of iterations to run. When set, the
            temporal difference limit is ignored.
        temp_diff_limit: Per-parameter update magnitude below which the
            descent is considered converged.
        outfile: Where the fitted model is written.
        stats_dir: Directory for plots of the fit.
    """

    training_distribution: float = 0.8
    seed: int | None = None
    learning_rate: float = 0.1
    iteration_limit: int | None = None
    temp_diff_limit: float = 0.001
    outfile: Path = field(default_factory=lambda: Path("data/weights"))
    stats_dir: Path = field(default_factory=lambda: Path("stats"))

    def __post_init__(self) -> None:
        if not 0.0 < self.training_distribution <= 1.0:
            raise ConfigError(
                f"training distribution must be in (0, 1], got {self.training_distribution}"
            )
        if not (math.isfinite(self.learning_rate) and self.learning_rate > 0.0):
            raise ConfigError(f"learning rate must be a positive number, got {self.learning_rate}")
        if self.iteration_limit is not None and self.iteration_limit < 0:
            raise ConfigError(f"iteration limit must not be negative, got {self.iteration_limit}")
        if not self.temp_diff_limit > 0.0:
            raise ConfigError(
                f"temporal difference limit must be positive, got {self.temp_diff_limit}"
            )
        if self.seed is not None and not 0 <= self.seed < 2**64:
            raise ConfigError(f"seed must be an unsigned 64-bit integer, got {self.seed}")
