"""Training components.

Example usage:
    from linreg.core.training import TrainingConfig, TrainingPipeline

    pipeline = TrainingPipeline(
        loader=DatasetLoader(),
        splitter=SeededDataSplitter(),
        evaluator=AccuracyEvaluator(),
        model_store=ModelStore(),
        seed_generator=generate_seed,
    )
    result = pipeline.run("data/data.csv", TrainingConfig(seed=42))
"""

from linreg.core.training.config import TrainingConfig
from linreg.core.training.descent import (
    ConvergencePolicy,
    DescentResult,
    GradientDescentEngine,
)
from linreg.core.training.evaluators import AccuracyEvaluator, AccuracyReport
from linreg.core.training.pipeline import TrainingPipeline, TrainingResult
from linreg.core.training.scalers import MinMaxScaler
from linreg.core.training.splitters import DataSplitter, SeededDataSplitter, SplitData

__all__ = [
    # Protocols
    "DataSplitter",
    # Data classes
    "TrainingConfig",
    "SplitData",
    "DescentResult",
    "AccuracyReport",
    "TrainingResult",
    # Implementations
    "SeededDataSplitter",
    "MinMaxScaler",
    "ConvergencePolicy",
    "GradientDescentEngine",
    "AccuracyEvaluator",
    # Pipeline
    "TrainingPipeline",
]
