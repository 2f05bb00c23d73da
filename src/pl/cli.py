"""CLI entry point."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import typer
from rich.console import Console
from rich.markup import escape

from pl.errors import PlError

if TYPE_CHECKING:
    from pl.config import Config

app = typer.Typer(
    name="pl",
    help="Project launcher - pick a git project and open it in your editor.",
    no_args_is_help=False,
    add_completion=False,
)
console = Console(stderr=True)

LOG_FILENAME = "pl.log"


def _get_config() -> Config:
    """Lazy import and load config."""
    from pl.config import Config

    return Config.load()


def _setup_logging(config: Config) -> None:
    """Log to <config dir>/pl.log when PL_LOG_LEVEL is set.

    Nothing is written to the terminal since the picker owns the screen.
    """
    level_name = os.environ.get("PL_LOG_LEVEL")
    if not level_name:
        return
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO

    config.config_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(config.config_dir / LOG_FILENAME, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger = logging.getLogger("pl")
    logger.addHandler(handler)
    logger.setLevel(level)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Launch the interactive project picker."""
    if ctx.invoked_subcommand is not None:
        return

    from pl.ui.interactive import launch

    try:
        cfg = _get_config()
        _setup_logging(cfg)
        launch(cfg)
    except PlError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
