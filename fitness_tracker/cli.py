"""CLI for Fitness Tracker.

Prints training reports to stdout. Division-by-zero notices go to the
log stream on stderr.
"""

from datetime import timedelta

import typer

from fitness_tracker.core.config import settings
from fitness_tracker.core.constants import LEN_STEP, SWIMMING_LEN_STEP
from fitness_tracker.core.logging import get_logger, setup_logging
from fitness_tracker.models.training import Training
from fitness_tracker.services.calories import (
    CaloriesCalculator,
    MissingParameterError,
    Running,
    Swimming,
    UnknownActivityError,
    Walking,
    build_calculator,
    read_data,
)

logger = get_logger(__name__)

app = typer.Typer(
    name="fitness-tracker",
    help="Distance, speed and calorie reports for running, walking and swimming",
    add_completion=False,
)

# Activity display names per report locale
ACTIVITY_NAMES = {
    "en": {"running": "Running", "walking": "Walking", "swimming": "Swimming"},
    "ru": {"running": "Бег", "walking": "Ходьба", "swimming": "Плавание"},
}


def reference_trainings(locale: str) -> list[CaloriesCalculator]:
    """The three reference sessions: swimming, walking, running."""
    names = ACTIVITY_NAMES.get(locale, ACTIVITY_NAMES["en"])
    return [
        Swimming(
            training=Training(names["swimming"], 2000, SWIMMING_LEN_STEP, timedelta(minutes=90), 85),
            length_pool=50,
            count_pool=40,
        ),
        Walking(
            training=Training(names["walking"], 20000, LEN_STEP, timedelta(hours=3, minutes=45), 85),
            height=185,
        ),
        Running(
            training=Training(names["running"], 5000, LEN_STEP, timedelta(minutes=30), 85),
        ),
    ]


@app.callback(invoke_without_command=True)
def root(ctx: typer.Context) -> None:
    """Print the reference reports when no command is given."""
    setup_logging()
    if ctx.invoked_subcommand is None:
        demo(locale=settings.REPORT_LOCALE)


@app.command()
def demo(
    locale: str = typer.Option(settings.REPORT_LOCALE, "--locale", "-l", help="Report labels: en or ru"),
) -> None:
    """Print reports for the reference swimming, walking and running sessions."""
    for training in reference_trainings(locale):
        typer.echo(read_data(training, locale))


@app.command()
def report(
    activity_type: str = typer.Argument(..., help="running, walking or swimming"),
    action: int = typer.Option(..., "--action", "-a", help="Steps or strokes"),
    duration_min: float = typer.Option(..., "--duration", "-d", help="Duration in minutes"),
    weight: float = typer.Option(..., "--weight", "-w", help="Body weight in kg"),
    len_step: float | None = typer.Option(None, "--len-step", help="Metres per repetition"),
    height: float | None = typer.Option(None, "--height", help="Height in cm (walking)"),
    length_pool: int | None = typer.Option(None, "--length-pool", help="Pool length in metres (swimming)"),
    count_pool: int | None = typer.Option(None, "--count-pool", help="Pool crossings (swimming)"),
    training_type: str | None = typer.Option(None, "--label", help="Display label"),
    locale: str = typer.Option(settings.REPORT_LOCALE, "--locale", "-l", help="Report labels: en or ru"),
) -> None:
    """Print the report for a single training session."""
    names = ACTIVITY_NAMES.get(locale, ACTIVITY_NAMES["en"])
    try:
        training = build_calculator(
            activity_type=activity_type,
            training_type=training_type or names.get(activity_type.lower(), activity_type),
            action=action,
            duration=timedelta(minutes=duration_min),
            weight=weight,
            len_step=len_step,
            height=height,
            length_pool=length_pool,
            count_pool=count_pool,
        )
    except (UnknownActivityError, MissingParameterError) as e:
        logger.error("Cannot build training", activity_type=activity_type, error=str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    typer.echo(read_data(training, locale))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
