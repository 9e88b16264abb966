"""
Constants and configuration values for PhrasePulse.
"""

from enum import IntEnum, StrEnum

# Version
PACKAGE_VERSION = "0.1.0"

# Theme file
THEME_DIR_NAME = ".phrasepulse"
THEME_FILE_NAME = "config.json"
DEFAULT_ENCODING = "utf-8"


class FormattingConstants(IntEnum):
    """Formatting constants."""

    JSON_INDENT = 2


class Glyphs(StrEnum):
    """Marker glyphs placed around each match."""

    OPEN = "«"
    CLOSE = "»"


class AnsiCodes(StrEnum):
    """Raw SGR sequences used when rendering."""

    RESET = "\x1b[0m"


class SummaryText(StrEnum):
    """Fixed strings of the match summary."""

    NO_MATCHES = "No coincidences found."
    HEADER = "Coincidences:"


class ExitCodes(IntEnum):
    """Process exit status of the search command."""

    FOUND = 0
    NOT_FOUND = 1
    ERROR = 2
