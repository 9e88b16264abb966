"""Main CLI entry point for PhrasePulse."""

import typer

from phrasepulse.cli.commands.search import search_text
from phrasepulse.cli.commands.theme import theme_app
from phrasepulse.cli.utils.options import VERBOSE_OPTION
from phrasepulse.cli.utils.terminal import configure_logging

app = typer.Typer(
    name="phrasepulse",
    help="PhrasePulse - Find and highlight patterns in text",
    add_completion=True,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback()
def callback(verbose: VERBOSE_OPTION = False) -> None:
    """
    PhrasePulse text search tool
    """
    configure_logging(verbose)


app.command("search", help="Search a text or file and highlight every match")(search_text)
app.add_typer(theme_app, name="theme")


if __name__ == "__main__":
    app()
