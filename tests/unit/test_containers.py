"""Tests for the dependency injection container."""

from linreg.containers import Container
from linreg.core.data.loaders import DatasetLoader
from linreg.core.training.pipeline import TrainingPipeline
from linreg.services.model_store import ModelStore
from linreg.services.seed_generator import generate_seed
from linreg.settings import LinregSettings


class DescribeContainer:
    def it_provides_singleton_settings(self) -> None:
        container = Container()

        assert isinstance(container.settings(), LinregSettings)
        assert container.settings() is container.settings()

    def it_provides_a_training_pipeline(self) -> None:
        assert isinstance(Container().training_pipeline(), TrainingPipeline)

    def it_provides_fresh_loaders(self) -> None:
        container = Container()

        loader = container.dataset_loader()

        assert isinstance(loader, DatasetLoader)
        assert loader is not container.dataset_loader()

    def it_shares_the_model_store(self) -> None:
        container = Container()

        assert isinstance(container.model_store(), ModelStore)
        assert container.model_store() is container.model_store()

    def it_exposes_the_seed_generator(self) -> None:
        assert Container().seed_generator() is generate_seed

    def it_exposes_a_global_container(self) -> None:
        from linreg import container

        assert isinstance(container, Container)
        assert not hasattr(Container, "log")
