"""Shared output handlers for CLI commands."""

import json
from collections.abc import Callable
from typing import Any

from rich.console import Console
from rich.text import Text

from phrasepulse.core.constants import FormattingConstants
from phrasepulse.core.highlighting import HighlightedText

console = Console()


def handle_json_output(
    data: Any,
    transformer: Callable[[Any], dict[str, Any]] | None = None,
) -> None:
    """Print data as JSON on stdout.

    Args:
        data: Data to output (can be any type)
        transformer: Optional function to transform data before serialization
    """
    output_data = transformer(data) if transformer else data
    print(json.dumps(output_data, indent=FormattingConstants.JSON_INDENT, ensure_ascii=False, default=str))


def handle_text_output(
    result: HighlightedText,
    color: bool,
    hide_phrase: bool = False,
    hide_indexes: bool = False,
) -> None:
    """Print the highlighted text and match listing.

    Args:
        result: Rendered search result
        color: Whether the console should emit the embedded colors
        hide_phrase: Skip the highlighted text
        hide_indexes: Skip the match listing
    """
    if color:
        highlighted, summary = result.as_rich()
    else:
        highlighted, summary = Text(result.highlighted), Text(result.summary)

    if not hide_phrase:
        console.print(highlighted, soft_wrap=True)
    if not hide_indexes:
        console.print(summary, soft_wrap=True)
