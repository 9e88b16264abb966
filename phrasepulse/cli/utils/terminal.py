"""Terminal capability detection and logging setup."""

import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler


def terminal_supports_color(console: Console) -> bool:
    """Check whether ANSI colors can be shown on the console's output."""
    if not console.is_terminal:
        return False
    if os.environ.get("NO_COLOR"):
        return False

    if sys.platform == "win32":
        return sys.getwindowsversion().major >= 10

    term = os.environ.get("TERM", "")
    return bool(term) and term != "dumb"


def configure_logging(verbose: bool = False) -> None:
    """Route log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
