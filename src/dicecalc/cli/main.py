"""Typer CLI application."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from dicecalc import __version__
from dicecalc.errors import DiceError

app = typer.Typer(
    name="dicecalc",
    help="Roll dice from notation like 2d6, 4dF or 1d20+5",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"dicecalc {__version__}")
        raise typer.Exit()


def _configure_logging(config: dict, verbose: bool) -> None:
    level_name = str(config.get("logging", {}).get("level", "WARNING")).upper()
    level = logging.DEBUG if verbose else getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def roll(
    notation: str = typer.Argument(..., metavar="INPUT", help="Dice notation (e.g., 2d6, 4dF, 1d20+5)"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only show the final result"),
    exploding: bool = typer.Option(False, "--exploding", "-e", help="Roll again on max value"),
    repeat: Optional[int] = typer.Option(None, "--repeat", "-r", metavar="N", min=1, help="Repeat the roll N times"),
    average: bool = typer.Option(False, "--average", "-a", help="Show the average instead of rolling"),
    highest: Optional[int] = typer.Option(None, "--highest", metavar="N", min=0, help="Keep only the highest N dice"),
    lowest: Optional[int] = typer.Option(None, "--lowest", metavar="N", min=0, help="Keep only the lowest N dice"),
    drop_highest: Optional[int] = typer.Option(None, "--drop-highest", metavar="N", min=0, help="Drop the highest N dice"),
    drop_lowest: Optional[int] = typer.Option(None, "--drop-lowest", metavar="N", min=0, help="Drop the lowest N dice"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to a config.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parsing and rolling details"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """Roll dice and print the pool, kept dice and total."""
    from dicecalc.app import DiceApp, load_config
    from dicecalc.models.roll import RollOptions

    config = load_config(config_path)
    _configure_logging(config, verbose)

    options = RollOptions(
        quiet=quiet,
        exploding=exploding,
        repeat=repeat,
        average=average,
        highest=highest,
        lowest=lowest,
        drop_highest=drop_highest,
        drop_lowest=drop_lowest,
    )
    dice_app = DiceApp(config)
    try:
        dice_app.run(notation, options)
    except DiceError as exc:
        dice_app.display.show_error(str(exc))
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
