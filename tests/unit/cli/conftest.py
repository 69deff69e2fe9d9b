"""Shared fixtures for CLI unit tests."""

from pathlib import Path
import sys
from typing import Generator
from unittest.mock import MagicMock, patch

from loguru import logger
import numpy as np
import pytest
from typer.testing import CliRunner

from linreg.core.data.datasets import Dataset
from linreg.core.modeling.model import Model, Theta
from linreg.core.training.config import TrainingConfig
from linreg.core.training.evaluators import AccuracyReport
from linreg.core.training.pipeline import TrainingResult
from linreg.settings import LinregSettings, PathSettings, TrainingSettings


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Re-attaches loguru to the real stderr after the CLI reconfigured it."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def runner() -> CliRunner:
    """Fixture providing a CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_container() -> Generator[MagicMock, None, None]:
    """Fixture providing a mocked DI container.

    Patches the container in the command modules to ensure mock is used.
    """
    mock = MagicMock()

    with (
        patch("linreg.cli.train.container", mock),
        patch("linreg.cli.predict.container", mock),
    ):
        yield mock


@pytest.fixture
def settings(mock_container: MagicMock) -> LinregSettings:
    """Fixture providing settings with built-in defaults from the container."""
    settings = LinregSettings(training=TrainingSettings(), paths=PathSettings())
    mock_container.settings.return_value = settings
    return settings


@pytest.fixture
def training_result(tmp_path: Path) -> TrainingResult:
    """A finished training run as returned by the pipeline."""
    return TrainingResult(
        model=Model(labels=("km", "price"), theta=Theta(120.0, -2.0)),
        config=TrainingConfig(seed=42, stats_dir=tmp_path / "stats"),
        iterations=1234,
        temp_diff=(1e-7, -1e-7),
        accuracy=AccuracyReport(mean_relative_error=None, test_size=0),
        extremes=(10.0, 40.0),
        train_size=4,
        test_size=0,
        dataset=Dataset(
            labels=("km", "price"),
            x=np.array([10.0, 20.0, 30.0, 40.0]),
            y=np.array([100.0, 80.0, 60.0, 40.0]),
        ),
        model_path=tmp_path / "weights",
    )


@pytest.fixture
def mock_pipeline(mock_container: MagicMock, training_result: TrainingResult) -> MagicMock:
    """Fixture providing a mocked TrainingPipeline from the container."""
    pipeline = MagicMock()
    pipeline.run.return_value = training_result
    mock_container.training_pipeline.return_value = pipeline
    return pipeline
