"""Dependency injection container for the linreg application.

This module defines the Container class which manages all application
dependencies using dependency-injector. It provides centralized access
to services through the container instance.
"""

from dependency_injector import containers, providers

from linreg.core.data.loaders import DatasetLoader
from linreg.core.training.evaluators import AccuracyEvaluator
from linreg.core.training.pipeline import TrainingPipeline
from linreg.core.training.splitters import SeededDataSplitter
from linreg.services.model_store import ModelStore
from linreg.services.seed_generator import generate_seed
from linreg.settings import LinregSettings


class Container(containers.DeclarativeContainer):
    """Main dependency injection container for the linreg application."""

    # Root settings - loaded from environment/.env
    settings = providers.Singleton(LinregSettings)

    # --- Data ---

    dataset_loader = providers.Factory(DatasetLoader, delimiter=",")

    # --- Training ---

    data_splitter = providers.Factory(SeededDataSplitter)

    accuracy_evaluator = providers.Factory(AccuracyEvaluator)

    seed_generator = providers.Object(generate_seed)

    # --- Persistence ---

    model_store = providers.Singleton(ModelStore)

    training_pipeline = providers.Factory(
        TrainingPipeline,
        loader=dataset_loader,
        splitter=data_splitter,
        evaluator=accuracy_evaluator,
        model_store=model_store,
        seed_generator=seed_generator,
    )


# Global container instance
container = Container()
