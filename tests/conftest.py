from pathlib import Path

import pytest

from phrasepulse.models.theme import ColorPair, ConsoleColor, Theme


@pytest.fixture
def theme() -> Theme:
    return Theme(
        text=ColorPair(foreground=ConsoleColor.WHITE, background=ConsoleColor.BLACK),
        found=ColorPair(foreground=ConsoleColor.CYAN),
        border=ColorPair(foreground=ConsoleColor.RED),
    )


@pytest.fixture
def theme_file(tmp_path: Path) -> Path:
    return tmp_path / "pulse" / "config.json"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, theme_file: Path) -> None:
    for name in ("PULSE_NO_COLOR", "PULSE_MATCH_TIMEOUT", "PULSE_ENCODING", "NO_COLOR", "FORCE_COLOR", "TTY_COMPATIBLE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PULSE_THEME_FILE", str(theme_file))
