"""Model types shared by training and inference."""

from .model import Model, Theta

__all__ = ["Model", "Theta"]
