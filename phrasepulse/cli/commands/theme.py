"""Theme file commands."""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from phrasepulse.config import load_config
from phrasepulse.core.constants import AnsiCodes, ExitCodes
from phrasepulse.core.theme_store import ThemeStore
from phrasepulse.exceptions import PulseError
from phrasepulse.models.theme import ColorPair, Theme

console = Console()
logger = logging.getLogger(__name__)

theme_app = typer.Typer(
    help="Show or reset the color theme used to highlight matches",
    no_args_is_help=True,
)


def _store() -> ThemeStore:
    return ThemeStore(load_config().theme_file)


def _fail(error: PulseError) -> typer.Exit:
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    return typer.Exit(ExitCodes.ERROR)


def _sample(pair: ColorPair) -> Text:
    return Text.from_ansi(f"{pair.ansi()} Sample {AnsiCodes.RESET}")


def handle_table_output(theme: Theme, store: ThemeStore) -> None:
    """Handle table format output."""
    table = Table(title=f"Theme ({store.path})", show_lines=False)
    table.add_column("Role", style="bold")
    table.add_column("Foreground")
    table.add_column("Background")
    table.add_column("Sample", justify="center")

    for role, pair in (("Text", theme.text), ("Found", theme.found), ("Border", theme.border)):
        table.add_row(
            role,
            f"{pair.foreground.value}: {pair.foreground.label}",
            f"{pair.background.value}: {pair.background.label}",
            _sample(pair),
        )

    console.print(table)


@theme_app.command("show")
def show_theme() -> None:
    """Print the colors currently configured."""
    try:
        store = _store()
        theme = store.load()
    except PulseError as e:
        raise _fail(e) from e

    handle_table_output(theme, store)


@theme_app.command("reset")
def reset_theme(
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Do not ask for confirmation",
        ),
    ] = False,
) -> None:
    """Overwrite the theme file with the default colors."""
    try:
        store = _store()
        if store.exists() and not yes and not typer.confirm(f"Overwrite {store.path}?", default=False):
            console.print("[yellow]Theme left unchanged[/yellow]")
            return
        store.reset()
    except PulseError as e:
        raise _fail(e) from e

    logger.info(f"Theme reset at {store.path}")
    console.print(f"[bold green]✓ Saved to:[/bold green] {store.path}")


@theme_app.command("path")
def theme_path() -> None:
    """Print the location of the theme file."""
    try:
        store = _store()
    except PulseError as e:
        raise _fail(e) from e

    print(store.path)
