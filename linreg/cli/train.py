"""CLI for training a model from a dataset file."""

from pathlib import Path
from typing import Optional

from loguru import logger
import typer
from typing_extensions import Annotated

from linreg.containers import container
from linreg.core.errors import RegressionError
from linreg.core.training import TrainingConfig, TrainingResult
from linreg.services.plotting import plot_fit


def _report(result: TrainingResult) -> None:
    typer.echo(f"Training finished after {result.iterations} iterations.")
    typer.echo(f"Temporal difference {result.temp_diff}")
    typer.echo(f"Seed {result.seed}; ratio {result.config.training_distribution}")
    typer.echo(f"theta0 = {result.model.theta.theta0}, theta1 = {result.model.theta.theta1}")
    typer.echo(result.accuracy.describe())
    if result.model_path is not None:
        typer.echo(f"Model has been saved to {result.model_path}")


def train(
    datafile: Annotated[
        Path,
        typer.Option("--file", "-f", help="Input data file", dir_okay=False),
    ],
    seed: Annotated[
        Optional[int],
        typer.Option(
            "--seed", "-s", min=0, help="Randomness seed for data splitting to train & test sets"
        ),
    ] = None,
    ratio: Annotated[
        Optional[float],
        typer.Option("--ratio", "-r", help="Distribution between test and train set ratio"),
    ] = None,
    outfile: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Path to output file (model)", dir_okay=False),
    ] = None,
    alpha: Annotated[
        Optional[float],
        typer.Option("--alpha", "-a", help="α - Learning rate"),
    ] = None,
    stats: Annotated[
        Optional[Path],
        typer.Option(
            "--stats",
            help="Path to a directory where plots and statistics should be saved",
            file_okay=False,
        ),
    ] = None,
    iterations: Annotated[
        Optional[int],
        typer.Option(
            "--iterations",
            "-i",
            min=0,
            help="Number of iterations to run, this will overwrite TD limit",
        ),
    ] = None,
    tdlimit: Annotated[
        Optional[float],
        typer.Option(
            "--tdlimit",
            "-t",
            help="Temporal difference limit (amount of change per iteration).",
        ),
    ] = None,
    no_plot: Annotated[
        bool,
        typer.Option("--no-plot", help="Skip writing the result plot."),
    ] = False,
):
    """Trains a linear regression model on a two-column dataset."""
    # Resolve dependencies from container
    settings = container.settings()
    pipeline = container.training_pipeline()

    defaults = settings.training
    try:
        config = TrainingConfig(
            training_distribution=ratio if ratio is not None else defaults.ratio,
            seed=seed if seed is not None else defaults.seed,
            learning_rate=alpha if alpha is not None else defaults.learning_rate,
            iteration_limit=iterations if iterations is not None else defaults.iterations,
            temp_diff_limit=tdlimit if tdlimit is not None else defaults.tdlimit,
            outfile=outfile if outfile is not None else settings.paths.outfile,
            stats_dir=stats if stats is not None else settings.paths.stats_dir,
        )
        result = pipeline.run(datafile, config)
    except RegressionError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    _report(result)

    if no_plot or result.dataset is None:
        return

    plot_path = result.config.stats_dir / "result.png"
    try:
        plot_fit(
            result.dataset,
            result.model,
            plot_path,
            caption=f"seed: {result.seed}; ratio {result.config.training_distribution}",
        )
    except OSError as e:
        logger.error(
            f"Unable to write result to file. Make sure directory {result.config.stats_dir} "
            f"is writable: {e}"
        )
        raise typer.Exit(code=1)

    typer.echo(f"Result has been saved to {plot_path}")
