"""Dataset definition and loading."""

from .datasets import Dataset
from .loaders import DatasetLoader

__all__ = ["Dataset", "DatasetLoader"]
