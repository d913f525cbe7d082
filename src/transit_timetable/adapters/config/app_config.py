"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from transit_timetable.domain.models.bilingual_text import SUPPORTED_LANGUAGES


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Timetable source used when no [[line_types]] are configured
    timetable_file: str = Field(
        default="data/timetables.json",
        description="Path or http(s) URL of the timetable JSON file",
    )
    http_timeout_seconds: float = Field(
        default=10, description="Timeout for fetching timetables over HTTP in seconds"
    )

    # Display configuration
    refresh_interval_seconds: float = Field(
        default=60.0, description="Interval between departure highlighting refreshes in seconds"
    )
    display_language: str = Field(default="en", description="Display language: 'en' or 'bhs'")

    log_level: str = Field(default="INFO", description="Logging level name")

    # TOML config file path
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file for line types and display settings",
    )

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a config that does not read a .env file."""
        return cls(_env_file=None, **overrides)

    @field_validator("display_language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Validate language is either 'en' or 'bhs'."""
        if v.lower() not in SUPPORTED_LANGUAGES:
            raise ValueError("display_language must be either 'en' or 'bhs'")
        return v.lower()

    @field_validator("refresh_interval_seconds")
    @classmethod
    def validate_refresh_interval(cls, v: float) -> float:
        """Validate the refresh interval is positive."""
        if v <= 0:
            raise ValueError("refresh_interval_seconds must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level is a known logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse TOML file, updating display settings."""
        if not self.config_file:
            raise ValueError("config_file must be set to load line type configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        # Update display settings from TOML if present
        display = toml_data.get("display", {})
        if "refresh_interval_seconds" in display:
            interval = float(display["refresh_interval_seconds"])
            if interval <= 0:
                raise ValueError("refresh_interval_seconds must be positive")
            self.refresh_interval_seconds = interval
        if "language" in display:
            language = str(display["language"]).lower()
            if language not in SUPPORTED_LANGUAGES:
                raise ValueError("display_language must be either 'en' or 'bhs'")
            self.display_language = language
        if "timetable_file" in display:
            self.timetable_file = str(display["timetable_file"])

        return toml_data

    def get_line_types_config(self) -> list[dict[str, Any]]:
        """Parse and return line type configuration as a list of dicts from TOML file.

        Returns an empty list when no [[line_types]] are defined.

        Raises ValueError if line type names are missing or not unique.
        """
        toml_data = self._load_toml_data()

        line_types = toml_data.get("line_types", [])
        if not isinstance(line_types, list):
            raise ValueError("TOML config 'line_types' must be a list")

        result: list[dict[str, Any]] = []
        for line_type in line_types:
            if not isinstance(line_type, dict):
                continue
            if "line_type" not in line_type:
                raise ValueError("All line types must have a 'line_type' field")
            result.append(line_type)

        names = [line_type["line_type"] for line_type in result]
        if len(names) != len(set(names)):
            duplicates = {name for name in names if names.count(name) > 1}
            raise ValueError(f"Line types must be unique. Duplicates found: {duplicates}")

        return result
