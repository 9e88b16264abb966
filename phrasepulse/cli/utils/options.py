"""Shared CLI options and enums for commands."""

from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from phrasepulse.models.search import RegexFlag


class OutputFormat(StrEnum):
    """Supported output formats for search results."""

    TEXT = "text"
    JSON = "json"


def _reject_blank(value: str) -> str:
    if not value.strip():
        raise typer.BadParameter("Search pattern cannot be empty")
    return value


PATTERN_ARGUMENT = Annotated[
    str,
    typer.Argument(
        help="The search pattern to look for in the input",
        callback=_reject_blank,
        show_default=False,
    ),
]

TEXT_OPTION = Annotated[
    str | None,
    typer.Option(
        "--text",
        "-t",
        help="The input text to search in",
        metavar="STRING",
    ),
]

FILE_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--file",
        "-f",
        help="The input file to search in",
        dir_okay=False,
        metavar="FILE",
    ),
]

IGNORE_CASE_OPTION = Annotated[
    bool,
    typer.Option(
        "--ignore-case",
        "-i",
        help="Match regardless of letter case",
    ),
]

REGEX_OPTION = Annotated[
    bool,
    typer.Option(
        "--regex",
        "-r",
        help="Treat the pattern as a regular expression",
    ),
]

OVERLAPPING_OPTION = Annotated[
    bool,
    typer.Option(
        "--overlapping",
        "-O",
        help="Report overlapping literal matches (ignored with --regex)",
    ),
]

REGEX_FLAG_OPTION = Annotated[
    list[RegexFlag] | None,
    typer.Option(
        "--regex-flag",
        "-x",
        help="Additional regex flag; repeat for several",
        case_sensitive=False,
    ),
]

TIMEOUT_OPTION = Annotated[
    int | None,
    typer.Option(
        "--timeout",
        "-T",
        help="Regex match timeout in seconds (default: PULSE_MATCH_TIMEOUT or 3)",
        min=1,
    ),
]

ENCODING_OPTION = Annotated[
    str | None,
    typer.Option(
        "--encoding",
        "-e",
        help="Text encoding of --file (default: PULSE_ENCODING or utf-8)",
    ),
]

NO_COLOR_OPTION = Annotated[
    bool,
    typer.Option(
        "--no-color",
        help="Disable colors; match markers are still shown",
    ),
]

HIDE_PHRASE_OPTION = Annotated[
    bool,
    typer.Option(
        "--hide-phrase",
        help="Do not print the highlighted text",
    ),
]

HIDE_INDEXES_OPTION = Annotated[
    bool,
    typer.Option(
        "--hide-indexes",
        help="Do not print the list of match positions",
    ),
]

OUTPUT_FORMAT_OPTION = Annotated[
    OutputFormat,
    typer.Option(
        "--format",
        "-F",
        help="Output format",
        case_sensitive=False,
    ),
]

VERBOSE_OPTION = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
]
