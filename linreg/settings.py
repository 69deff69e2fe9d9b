"""Application settings using Pydantic Settings.

This module defines the LinregSettings class which loads defaults for
training runs from environment variables and .env files using
pydantic-settings. Command-line flags take precedence over these values.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TrainingSettings(BaseSettings):
    """Default training parameters.

    Attributes:
        ratio (float): Fraction of the dataset used for training.
        seed (int | None): Splitting seed; random when unset.
        learning_rate (float): Gradient descent step size.
        iterations (int | None): Fixed iteration count; overrides ``tdlimit``.
        tdlimit (float): Temporal difference limit for convergence.
    """

    model_config = SettingsConfigDict(
        env_prefix="LINREG_TRAINING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ratio: float = Field(default=0.8, gt=0.0, le=1.0, description="Train/test distribution ratio")
    seed: int | None = Field(default=None, ge=0, lt=2**64, description="Randomness seed")
    learning_rate: float = Field(default=0.1, gt=0.0, description="Learning rate (alpha)")
    iterations: int | None = Field(default=None, ge=0, description="Number of iterations to run")
    tdlimit: float = Field(default=0.001, gt=0.0, description="Temporal difference limit")


class PathSettings(BaseSettings):
    """Path-related settings."""

    model_config = SettingsConfigDict(
        env_prefix="LINREG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    outfile: Path = Field(default=Path("data/weights"), description="Model output file")
    stats_dir: Path = Field(default=Path("stats"), description="Directory for plots")


class LinregSettings(BaseSettings):
    """Root settings class that composes all settings groups."""

    model_config = SettingsConfigDict(
        env_prefix="LINREG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(default=False, description="Enable debug logging")
    log_json: bool = Field(default=False, description="Serialize log records as JSON")
    training: TrainingSettings = Field(default_factory=TrainingSettings)
    paths: PathSettings = Field(default_factory=PathSettings)
