"""Core functionality module."""

from phrasepulse.core.constants import FormattingConstants
from phrasepulse.core.finder import MatchFinder, find
from phrasepulse.core.highlighting import HighlightedText, render, strip_markers
from phrasepulse.core.theme_store import ThemeStore

__all__ = [
    "FormattingConstants",
    "HighlightedText",
    "MatchFinder",
    "ThemeStore",
    "find",
    "render",
    "strip_markers",
]
