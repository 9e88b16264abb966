"""CLI utilities module."""

from phrasepulse.cli.utils.data import load_input_text
from phrasepulse.cli.utils.options import (
    FILE_OPTION,
    OUTPUT_FORMAT_OPTION,
    PATTERN_ARGUMENT,
    TEXT_OPTION,
    VERBOSE_OPTION,
    OutputFormat,
)
from phrasepulse.cli.utils.output import handle_json_output, handle_text_output
from phrasepulse.cli.utils.terminal import configure_logging, terminal_supports_color

__all__ = [
    "FILE_OPTION",
    "OUTPUT_FORMAT_OPTION",
    "PATTERN_ARGUMENT",
    "TEXT_OPTION",
    "VERBOSE_OPTION",
    "OutputFormat",
    "configure_logging",
    "handle_json_output",
    "handle_text_output",
    "load_input_text",
    "terminal_supports_color",
]
