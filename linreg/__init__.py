"""Univariate linear regression trained with batch gradient descent."""

from linreg.containers import Container, container
from linreg.settings import LinregSettings

__all__ = [
    "Container",
    "container",
    "LinregSettings",
]
