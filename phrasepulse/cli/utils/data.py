"""Input loading utilities for CLI commands."""

import codecs
import logging
from pathlib import Path

from phrasepulse.exceptions import InputError

logger = logging.getLogger(__name__)


def load_input_text(
    text: str | None,
    file: Path | None,
    encoding: str,
) -> str:
    """Get the text to search from --text or from a file.

    Args:
        text: Text given directly on the command line
        file: File to read instead
        encoding: Encoding used to decode the file

    Returns:
        The decoded text

    Raises:
        InputError: If neither or both sources are given, the encoding is
            unknown, or the file cannot be read or decoded
    """
    if text is None and file is None:
        raise InputError("Either input text (--text) or an input file (--file) must be provided")
    if text is not None and file is not None:
        raise InputError("Use either --text or --file, not both")

    if file is None:
        return text or ""

    try:
        codec = codecs.lookup(encoding).name
    except LookupError as e:
        raise InputError(f"Unsupported encoding '{encoding}'", {"encoding": encoding}) from e

    try:
        content = file.read_text(encoding=codec)
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(
            f"An error occurred while trying to read the file: {e}",
            {"path": str(file), "encoding": codec},
        ) from e

    logger.debug(f"Read {len(content)} chars from {file} ({codec})")
    return content
