"""Load and save the color theme file."""

import logging
import re
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from phrasepulse.core.constants import THEME_DIR_NAME, THEME_FILE_NAME, FormattingConstants
from phrasepulse.exceptions import ConfigurationError
from phrasepulse.models.theme import ConsoleColor, Theme

logger = logging.getLogger(__name__)

LINE_COMMENT = re.compile(r"^\s*//.*$", re.MULTILINE)
BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)


def color_map_legend(indent: str = "    ") -> str:
    """Build the comment block listing the numeric color map."""
    lines = ["// Color map:"]
    for low in range(8):
        left = f"{low}: {ConsoleColor(low).label}"
        high = low + 8
        lines.append(f"// {left:<15}| {high}: {ConsoleColor(high).label}")
    lines.append("// Any other number is Default")
    return "\n".join(f"{indent}{line}" for line in lines) + "\n\n"


class ThemeFile(BaseModel):
    """On-disk layout of the theme file."""

    colors: Theme = Field(default_factory=Theme.default)


def default_theme_path() -> Path:
    return Path.home() / THEME_DIR_NAME / THEME_FILE_NAME


class ThemeStore:
    """Reads and writes the human-editable theme file."""

    def __init__(self, path: Path | None = None) -> None:
        """Initialize store.

        Args:
            path: Theme file location (defaults to ~/.phrasepulse/config.json)
        """
        self.path = path or default_theme_path()

    def exists(self) -> bool:
        return self.path.is_file()

    def save(self, theme: Theme) -> None:
        """Write the theme, with the color map legend as a comment.

        Args:
            theme: Theme to persist

        Raises:
            ConfigurationError: If the file cannot be written
        """
        content = ThemeFile(colors=theme).model_dump_json(indent=FormattingConstants.JSON_INDENT)
        content = content.replace('"colors": {\n', '"colors": {\n' + color_map_legend(), 1)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content + "\n", encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot write theme file {self.path}: {e}", {"path": str(self.path)}) from e

        logger.debug(f"Saved theme to {self.path}")

    def reset(self) -> Theme:
        """Overwrite the file with the default theme and return it."""
        theme = Theme.default()
        self.save(theme)
        return theme

    def load(self) -> Theme:
        """Read the theme file, creating it with defaults when missing or empty.

        Returns:
            The persisted Theme

        Raises:
            ConfigurationError: If the file exists but is not a valid theme
        """
        if not self.exists():
            logger.info(f"No theme file at {self.path}, writing defaults")
            return self.reset()

        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read theme file {self.path}: {e}", {"path": str(self.path)}) from e

        cleaned = BLOCK_COMMENT.sub("", LINE_COMMENT.sub("", raw))
        if not cleaned.strip():
            logger.info(f"Theme file {self.path} is empty, writing defaults")
            return self.reset()

        try:
            return ThemeFile.model_validate_json(cleaned).colors
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid theme file {self.path}: {e.error_count()} error(s)",
                {"path": str(self.path), "errors": e.errors(include_url=False)},
            ) from e
