"""Training pipeline orchestrator.

This module provides the TrainingPipeline class that coordinates
loading, splitting, normalization, gradient descent, evaluation and
persistence of a model.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable

from loguru import logger

from linreg.core.data.datasets import Dataset
from linreg.core.data.loaders import DatasetLoader
from linreg.core.errors import ConfigError
from linreg.core.modeling.model import Model
from linreg.core.training.config import TrainingConfig
from linreg.core.training.descent import ConvergencePolicy, GradientDescentEngine
from linreg.core.training.evaluators import AccuracyEvaluator, AccuracyReport
from linreg.core.training.scalers import MinMaxScaler
from linreg.core.training.splitters import DataSplitter
from linreg.services.model_store import ModelStore


@dataclass(frozen=True, slots=True)
class TrainingResult:
    """Everything a training run produced.

    Attributes:
        model: Fitted model in the raw input scale.
        config: Configuration of the run, with the seed resolved.
        iterations: Number of descent iterations performed.
        temp_diff: Last update applied by the descent loop.
        accuracy: Evaluation on the held-out subset.
        extremes: Training input minimum and maximum used for scaling.
        train_size: Number of rows used for fitting.
        test_size: Number of held-out rows.
        dataset: The dataset the run was trained on.
        model_path: Where the model was written, if it was saved.
    """

    model: Model
    config: TrainingConfig
    iterations: int
    temp_diff: tuple[float, float]
    accuracy: AccuracyReport
    extremes: tuple[float, float]
    train_size: int
    test_size: int
    dataset: Dataset | None = None
    model_path: Path | None = None

    @property
    def seed(self) -> int:
        if self.config.seed is None:
            raise ConfigError("training result has no resolved seed")
        return self.config.seed


class TrainingPipeline:
    """Orchestrates Load → Split → Normalize → Fit → Descale → Evaluate → Persist."""

    def __init__(
        self,
        loader: DatasetLoader,
        splitter: DataSplitter,
        evaluator: AccuracyEvaluator,
        model_store: ModelStore,
        seed_generator: Callable[[], int],
    ) -> None:
        """Initialize the pipeline.

        Args:
            loader: Parser for dataset files.
            splitter: Train/test partitioning strategy.
            evaluator: Scorer for the held-out subset.
            model_store: Persistence for the fitted model.
            seed_generator: Source of seeds for runs configured without one.
        """
        self._loader = loader
        self._splitter = splitter
        self._evaluator = evaluator
        self._model_store = model_store
        self._seed_generator = seed_generator

    def resolve_config(self, config: TrainingConfig) -> TrainingConfig:
        """Returns ``config`` with a generated seed if it had none."""
        if config.seed is not None:
            return config
        return replace(config, seed=self._seed_generator())

    def run(self, source: str | Path, config: TrainingConfig, save: bool = True) -> TrainingResult:
        """Trains a model on the dataset file at ``source``.

        Args:
            source: Path of the delimited dataset file.
            config: Parameters of the run.
            save: Whether to write the model to ``config.outfile``.

        Returns:
            TrainingResult describing the fitted model and the run.
        """
        with logger.contextualize(source=str(source)):
            logger.info(f"Input data location {source}")
            dataset = self._loader.load_file(source)
            return self.fit(dataset, config, save=save)

    def fit(self, dataset: Dataset, config: TrainingConfig, save: bool = True) -> TrainingResult:
        """Trains a model on an already loaded dataset.

        Raises:
            ConfigError: If the split or the scaling is degenerate.
            DataParseError: If ``save`` is set and the labels cannot be stored.
        """
        config = self.resolve_config(config)
        seed = config.seed
        if seed is None:
            raise ConfigError("seed generator returned no seed")

        if save:
            # Unstorable labels fail before any descent step
            self._model_store.check_labels(dataset.labels)

        with logger.contextualize(seed=seed):
            split = self._splitter.split(dataset, config.training_distribution, seed)
            logger.info(
                f"Split {len(dataset)} rows into {split.train_size} train / "
                f"{split.test_size} test (seed {seed})"
            )

            # Fails on a degenerate input range before any descent step
            scaler = MinMaxScaler.from_extremes(split.extremes)
            engine = GradientDescentEngine(
                learning_rate=config.learning_rate,
                policy=ConvergencePolicy(
                    iteration_limit=config.iteration_limit,
                    temp_diff_limit=config.temp_diff_limit,
                ),
            )
            descent = engine.fit(scaler.transform(split.train_x), split.train_y)
            logger.info(
                f"Training finished after {descent.iterations} iterations. "
                f"Temporal difference {descent.temp_diff}"
            )

            model = Model(labels=dataset.labels, theta=scaler.descale(descent.theta))
            accuracy = self._evaluator.evaluate(model, split.test_x, split.test_y)
            logger.info(accuracy.describe())

            model_path = None
            if save:
                model_path = self._model_store.save(model, config.outfile)

            logger.success(f"Fitted theta0={model.theta.theta0}, theta1={model.theta.theta1}")

        return TrainingResult(
            model=model,
            config=config,
            iterations=descent.iterations,
            temp_diff=descent.temp_diff,
            accuracy=accuracy,
            extremes=split.extremes,
            train_size=split.train_size,
            test_size=split.test_size,
            dataset=dataset,
            model_path=model_path,
        )
