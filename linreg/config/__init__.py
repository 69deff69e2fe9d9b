"""Runtime configuration helpers."""

from linreg.config.logging import configure_logging

__all__ = ["configure_logging"]
