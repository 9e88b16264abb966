"""Color and theme data models."""

import re
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from phrasepulse.exceptions import InvalidRangeError

SGR_PATTERN = re.compile(r"\x1b\[([0-9;]*)m")

DEFAULT_FOREGROUND = "\x1b[39m"
DEFAULT_BACKGROUND = "\x1b[49m"

# Foreground SGR codes in console color order; background codes are these plus 10.
FOREGROUND_CODES: tuple[int, ...] = (30, 34, 32, 36, 31, 35, 33, 37, 90, 94, 92, 96, 91, 95, 93, 97)


class ConsoleColor(IntEnum):
    """The 16 console colors plus a sentinel for the terminal default."""

    BLACK = 0
    DARK_BLUE = 1
    DARK_GREEN = 2
    DARK_CYAN = 3
    DARK_RED = 4
    DARK_MAGENTA = 5
    DARK_YELLOW = 6
    GRAY = 7
    DARK_GRAY = 8
    BLUE = 9
    GREEN = 10
    CYAN = 11
    RED = 12
    MAGENTA = 13
    YELLOW = 14
    WHITE = 15
    DEFAULT = 16

    @classmethod
    def coerce(cls, value: Any) -> "ConsoleColor":
        """Map any integer outside 0-15 to DEFAULT."""
        if isinstance(value, cls):
            return value
        try:
            number = int(value)
        except (TypeError, ValueError):
            return cls.DEFAULT
        return cls(number) if 0 <= number <= 15 else cls.DEFAULT

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'DarkBlue'."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    def foreground_code(self) -> str:
        if self is ConsoleColor.DEFAULT:
            return DEFAULT_FOREGROUND
        return f"\x1b[{FOREGROUND_CODES[self]}m"

    def background_code(self) -> str:
        if self is ConsoleColor.DEFAULT:
            return DEFAULT_BACKGROUND
        return f"\x1b[{FOREGROUND_CODES[self] + 10}m"


_FOREGROUND_LOOKUP = {code: ConsoleColor(index) for index, code in enumerate(FOREGROUND_CODES)}
_BACKGROUND_LOOKUP = {code + 10: ConsoleColor(index) for index, code in enumerate(FOREGROUND_CODES)}


class ColorPair(BaseModel):
    """Foreground/background pair rendered as SGR sequences."""

    model_config = ConfigDict(frozen=True)

    foreground: ConsoleColor = ConsoleColor.DEFAULT
    background: ConsoleColor = ConsoleColor.DEFAULT

    @field_validator("foreground", "background", mode="before")
    @classmethod
    def coerce_color(cls, v: Any) -> ConsoleColor:
        """Treat any number outside the color map as the default color."""
        return ConsoleColor.coerce(v)

    def inverse(self) -> "ColorPair":
        """Return the pair with foreground and background swapped."""
        return ColorPair(foreground=self.background, background=self.foreground)

    def ansi(self) -> str:
        """Get the SGR sequence selecting this pair."""
        return f"{self.foreground.foreground_code()}{self.background.background_code()}"

    def __str__(self) -> str:
        return self.ansi()

    @classmethod
    def last_colors(
        cls,
        text: str,
        index: int,
        initial: "ColorPair | None" = None,
    ) -> "ColorPair":
        """Find the color pair in effect at ``index`` of an SGR-decorated string.

        Args:
            text: String containing SGR color sequences
            index: Position to inspect; negative values count from the end
            initial: Colors assumed before the first sequence (terminal default if omitted)

        Returns:
            The ColorPair selected by the last sequences before ``index``

        Raises:
            InvalidRangeError: If ``index`` is past the end of ``text``
        """
        if index > len(text):
            raise InvalidRangeError(index, index, len(text))
        if index < 0:
            index = len(text) + index

        current = initial or cls()
        foreground, background = current.foreground, current.background

        for match in SGR_PATTERN.finditer(text[:index]):
            for raw in match.group(1).split(";"):
                if not raw.isdigit():
                    continue
                code = int(raw)
                if code == 0:
                    foreground, background = ConsoleColor.GRAY, ConsoleColor.BLACK
                elif code == 39:
                    foreground = ConsoleColor.DEFAULT
                elif code == 49:
                    background = ConsoleColor.DEFAULT
                elif code in _FOREGROUND_LOOKUP:
                    foreground = _FOREGROUND_LOOKUP[code]
                elif code in _BACKGROUND_LOOKUP:
                    background = _BACKGROUND_LOOKUP[code]
                # 38/48 extended colors have no console equivalent

        return cls(foreground=foreground, background=background)


class Theme(BaseModel):
    """The three color pairs used when highlighting."""

    model_config = ConfigDict(frozen=True)

    text: ColorPair
    found: ColorPair
    border: ColorPair

    @classmethod
    def default(cls, current_foreground: ConsoleColor | None = None) -> "Theme":
        """Build the default theme, avoiding the terminal's own foreground color.

        Args:
            current_foreground: Foreground color the terminal currently uses, if known

        Returns:
            Default Theme
        """
        text = ConsoleColor.GRAY if current_foreground == ConsoleColor.WHITE else ConsoleColor.WHITE
        found = ConsoleColor.YELLOW if current_foreground == ConsoleColor.CYAN else ConsoleColor.CYAN
        border = ConsoleColor.GREEN if current_foreground == ConsoleColor.RED else ConsoleColor.RED
        return cls(
            text=ColorPair(foreground=text),
            found=ColorPair(foreground=found),
            border=ColorPair(foreground=border),
        )
