"""CLI entry point for linreg."""

import typer

from linreg.config.logging import configure_logging
from linreg.containers import container

from .predict import predict
from .train import train

app = typer.Typer(no_args_is_help=True)
app.command("train", help="Train a model from a dataset file.")(train)
app.command("predict", help="Estimate a value with a trained model.")(predict)


@app.callback()
def main() -> None:
    """Linear regression trained with batch gradient descent."""
    configure_logging(container.settings())
