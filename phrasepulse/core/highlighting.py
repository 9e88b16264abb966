"""Marker and color overlay for search results."""

from collections.abc import Sequence

from pydantic import BaseModel
from rich.text import Text

from phrasepulse.core.constants import AnsiCodes, Glyphs, SummaryText
from phrasepulse.exceptions import InvalidRangeError
from phrasepulse.models.search import MatchRange
from phrasepulse.models.theme import SGR_PATTERN, Theme


class HighlightedText(BaseModel):
    """Decorated text and the listing of match positions."""

    highlighted: str
    summary: str

    def as_rich(self) -> tuple[Text, Text]:
        """Convert both outputs to Rich Text objects for console printing."""
        return Text.from_ansi(self.highlighted), Text.from_ansi(self.summary)


class Palette:
    """SGR strings for a theme, blanked when color is disabled."""

    def __init__(self, theme: Theme, no_color: bool = False) -> None:
        self.text = "" if no_color else theme.text.ansi()
        self.found = "" if no_color else theme.found.ansi()
        self.border = "" if no_color else theme.border.ansi()
        self.reset = "" if no_color else AnsiCodes.RESET.value

    def opening(self) -> str:
        return f"{self.border}{Glyphs.OPEN}{self.found}"

    def closing(self, inside: bool) -> str:
        return f"{self.border}{Glyphs.CLOSE}{self.found if inside else self.text}"


def _check_bounds(text: str, ranges: Sequence[MatchRange]) -> None:
    length = len(text)
    for r in ranges:
        if not r.within(length):
            raise InvalidRangeError(r.start, r.end, length)


def _closes_inside_next(ordered: Sequence[MatchRange], i: int) -> bool:
    """Check whether a later range starts before range ``i`` ends."""
    # Sorted by start, so the next range has the smallest later start
    return i + 1 < len(ordered) and ordered[i + 1].start < ordered[i].end


def overlay_markers(text: str, ranges: Sequence[MatchRange], palette: Palette) -> str:
    """Insert opening and closing markers around every range.

    Ranges are processed by ascending start, each contributing its closing
    marker and then its opening marker. Markers sharing an original position
    keep that order, so earlier closings come before the current range's
    closing, which comes before openings added later.

    Args:
        text: Original text
        ranges: Match ranges in original text coordinates
        palette: Color strings to embed in the markers

    Returns:
        Text with markers inserted
    """
    ordered = sorted(ranges, key=lambda r: r.start)
    opening = palette.opening()
    # (original position, insertion order, fragment)
    events: list[tuple[int, int, str]] = []
    for i, current in enumerate(ordered):
        events.append((current.end, 2 * i, palette.closing(_closes_inside_next(ordered, i))))
        events.append((current.start, 2 * i + 1, opening))
    events.sort(key=lambda e: (e[0], e[1]))

    pieces = []
    cursor = 0
    for position, _, fragment in events:
        pieces.append(text[cursor:position])
        pieces.append(fragment)
        cursor = position
    pieces.append(text[cursor:])
    return "".join(pieces)


def format_summary(ranges: Sequence[MatchRange], palette: Palette) -> str:
    """List every range, 1-indexed, in the order it was found."""
    if not ranges:
        return f"{palette.text}{SummaryText.NO_MATCHES}{palette.reset}"

    lines = ["", f"{palette.text}{SummaryText.HEADER}"]
    for number, r in enumerate(ranges, start=1):
        lines.append(
            f"{palette.text}[{palette.found}{number}{palette.text}] from "
            f"{palette.found}{r.start}{palette.text} to {palette.found}{r.end}{palette.text}"
        )
    return "\n".join(lines) + palette.reset


def render(
    text: str,
    ranges: Sequence[MatchRange],
    theme: Theme,
    no_color: bool = False,
) -> HighlightedText:
    """Render ``text`` with every range delimited by colored markers.

    Args:
        text: Original text
        ranges: Match ranges, all within the text
        theme: Colors for plain text, matches and marker glyphs
        no_color: Omit every color sequence but keep the marker glyphs

    Returns:
        HighlightedText with the decorated text and position summary

    Raises:
        InvalidRangeError: If a range lies outside the text
    """
    _check_bounds(text, ranges)
    palette = Palette(theme, no_color)

    body = overlay_markers(text, ranges, palette)
    return HighlightedText(
        highlighted=f"{palette.text}{body}{palette.reset}",
        summary=format_summary(ranges, palette),
    )


def strip_markers(highlighted: str) -> str:
    """Remove color sequences and marker glyphs from rendered text."""
    plain = SGR_PATTERN.sub("", highlighted)
    return plain.replace(Glyphs.OPEN, "").replace(Glyphs.CLOSE, "")
