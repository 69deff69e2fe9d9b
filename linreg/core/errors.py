"""Error taxonomy for dataset handling, training and model persistence."""

from pathlib import Path


class RegressionError(Exception):
    """Base exception for all linreg failures."""


class DataIOError(RegressionError):
    """Raised when a dataset or model file cannot be read or written."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"I/O error for '{self.path}': {reason}")


class DataParseError(RegressionError):
    """Raised when a label or numeric field is missing or malformed."""

    def __init__(self, source: str | Path, reason: str, line: int | None = None):
        self.source = str(source)
        self.reason = reason
        self.line = line
        location = f"{self.source}:{line}" if line is not None else self.source
        super().__init__(f"Parse error in '{location}': {reason}")


class ConfigError(RegressionError):
    """Raised when the training configuration or data makes fitting impossible.

    Covers an out-of-range training ratio, non-positive learning rate or limits,
    an empty training subset and a training subset without input variance.
    """


class ConvergenceError(RegressionError):
    """Raised when gradient descent produces a non-finite update."""

    def __init__(self, iteration: int, temp_diff: tuple[float, float]):
        self.iteration = iteration
        self.temp_diff = temp_diff
        super().__init__(
            f"Gradient descent diverged at iteration {iteration} "
            f"(temporal difference {temp_diff}); try a smaller learning rate"
        )


class ComputeWarning(RuntimeWarning):
    """Emitted when an evaluation produces a division by zero or a non-finite value."""


__all__ = [
    "RegressionError",
    "DataIOError",
    "DataParseError",
    "ConfigError",
    "ConvergenceError",
    "ComputeWarning",
]
