"""Search command implementation."""

import logging
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from phrasepulse.cli.utils.data import load_input_text
from phrasepulse.cli.utils.options import (
    ENCODING_OPTION,
    FILE_OPTION,
    HIDE_INDEXES_OPTION,
    HIDE_PHRASE_OPTION,
    IGNORE_CASE_OPTION,
    NO_COLOR_OPTION,
    OUTPUT_FORMAT_OPTION,
    OVERLAPPING_OPTION,
    PATTERN_ARGUMENT,
    REGEX_FLAG_OPTION,
    REGEX_OPTION,
    TEXT_OPTION,
    TIMEOUT_OPTION,
    OutputFormat,
)
from phrasepulse.cli.utils.output import handle_json_output, handle_text_output
from phrasepulse.cli.utils.terminal import terminal_supports_color
from phrasepulse.config import load_config
from phrasepulse.core.constants import ExitCodes
from phrasepulse.core.finder import MatchFinder
from phrasepulse.core.highlighting import render
from phrasepulse.core.theme_store import ThemeStore
from phrasepulse.exceptions import PulseError
from phrasepulse.models.search import MatchRange, SearchPolicy
from phrasepulse.models.theme import Theme

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def transform_matches_for_json(pattern: str, policy: SearchPolicy, ranges: list[MatchRange]) -> dict[str, Any]:
    """Transform a search outcome for JSON output."""
    return {
        "pattern": pattern,
        "options": policy.describe(),
        "count": len(ranges),
        "matches": [{"index": i, "start": r.start, "end": r.end} for i, r in enumerate(ranges, start=1)],
    }


def search_text(
    pattern: PATTERN_ARGUMENT,
    text: TEXT_OPTION = None,
    file: FILE_OPTION = None,
    ignore_case: IGNORE_CASE_OPTION = False,
    regex: REGEX_OPTION = False,
    overlapping: OVERLAPPING_OPTION = False,
    regex_flags: REGEX_FLAG_OPTION = None,
    timeout: TIMEOUT_OPTION = None,
    encoding: ENCODING_OPTION = None,
    no_color: NO_COLOR_OPTION = False,
    hide_phrase: HIDE_PHRASE_OPTION = False,
    hide_indexes: HIDE_INDEXES_OPTION = False,
    output_format: OUTPUT_FORMAT_OPTION = OutputFormat.TEXT,
) -> None:
    """Search a text or file for PATTERN and show every match.

    Matches are surrounded by « » markers and listed by position.
    Exits with 0 when something was found, 1 when nothing was found
    and 2 on errors.
    """
    try:
        config = load_config()
        policy = SearchPolicy(
            case_insensitive=ignore_case,
            use_regex=regex,
            allow_overlapping=overlapping,
            match_timeout_seconds=timeout or config.match_timeout,
            regex_flags=frozenset(regex_flags or []),
        )
        logger.debug(f"Search options: {policy.describe()}")

        content = load_input_text(text, file, encoding or config.encoding)
        ranges = MatchFinder(policy).find(content, pattern).raise_for_error()
        logger.debug(f"Found {len(ranges)} match(es)")

        if output_format == OutputFormat.JSON:
            handle_json_output(ranges, lambda r: transform_matches_for_json(pattern, policy, r))
        else:
            color = not (no_color or config.no_color) and terminal_supports_color(console)
            theme = ThemeStore(config.theme_file).load() if color else Theme.default()
            result = render(content, ranges, theme, no_color=not color)
            handle_text_output(result, color, hide_phrase=hide_phrase, hide_indexes=hide_indexes)
    except PulseError as e:
        logger.debug(f"Search failed: {e.details}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(ExitCodes.ERROR) from e

    raise typer.Exit(ExitCodes.FOUND if ranges else ExitCodes.NOT_FOUND)
