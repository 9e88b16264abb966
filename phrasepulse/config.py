"""Configuration management for PhrasePulse."""

from pathlib import Path

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from phrasepulse.core.constants import DEFAULT_ENCODING
from phrasepulse.core.theme_store import default_theme_path
from phrasepulse.exceptions import ConfigurationError
from phrasepulse.models.search import DEFAULT_MATCH_TIMEOUT_SECONDS


class Config(BaseSettings):
    """Application configuration."""

    theme_file: Path = Field(
        default_factory=default_theme_path,
        alias="PULSE_THEME_FILE",
        description="Location of the color theme file",
    )
    no_color: bool = Field(
        default=False,
        alias="PULSE_NO_COLOR",
        description="Disable colored output",
    )
    match_timeout: int = Field(
        default=DEFAULT_MATCH_TIMEOUT_SECONDS,
        gt=0,
        alias="PULSE_MATCH_TIMEOUT",
        description="Regex match timeout in seconds",
    )
    encoding: str = Field(
        default=DEFAULT_ENCODING,
        alias="PULSE_ENCODING",
        description="Encoding used to decode input files",
    )

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )


def load_config() -> Config:
    """Load configuration from environment and .env file."""
    try:
        return Config()
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e.errors(include_url=False)[0]['msg']}") from e
