"""CLI for estimating values with a trained model."""

from pathlib import Path
from typing import Optional

from loguru import logger
import typer
from typing_extensions import Annotated

from linreg.containers import container
from linreg.core.errors import RegressionError
from linreg.services.predictor import Predictor


def ask_key(labels: tuple[str, str]) -> float:
    """Prompts until the user enters a value that parses as a float."""
    return typer.prompt(
        f"Please insert a key [{labels[0]}] to estimate [{labels[1]}]",
        type=float,
    )


def predict(
    modelfile: Annotated[
        Path,
        typer.Option(
            "--modelfile", "-f", help="Path to trained linear regression model", dir_okay=False
        ),
    ],
    key: Annotated[
        Optional[float],
        typer.Option(
            "--key",
            "-k",
            help="Key to use in value estimation, using trained linear regression model.",
        ),
    ] = None,
):
    """Estimates a value for a key using a trained model."""
    # Resolve dependencies from container
    store = container.model_store()

    try:
        predictor = Predictor.from_file(modelfile, store=store)
    except RegressionError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    if key is None:
        key = ask_key(predictor.labels)

    typer.echo(predictor.predict(key).describe())
