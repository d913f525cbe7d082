"""Tests for configuration adapter."""

from pathlib import Path

import pytest

from transit_timetable.adapters.config import AppConfig, LineTypeConfigurationLoader


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TIMETABLE_FILE", "DISPLAY_LANGUAGE", "REFRESH_INTERVAL_SECONDS", "CONFIG_FILE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def write_toml(tmp_path: Path, content: str) -> str:
    path = tmp_path / "config.toml"
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig.for_testing()

    assert config.timetable_file == "data/timetables.json"
    assert config.refresh_interval_seconds == 60.0
    assert config.display_language == "en"
    assert config.config_file is None


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("DISPLAY_LANGUAGE", "BHS")
    monkeypatch.setenv("REFRESH_INTERVAL_SECONDS", "30")

    config = AppConfig.for_testing()

    assert config.display_language == "bhs"
    assert config.refresh_interval_seconds == 30.0


def test_config_validates_language() -> None:
    """Given an unsupported language, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="display_language must be either"):
        AppConfig.for_testing(display_language="de")


def test_config_validates_refresh_interval() -> None:
    """Given a non-positive interval, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="must be positive"):
        AppConfig.for_testing(refresh_interval_seconds=0)


def test_config_validates_log_level() -> None:
    """Given an unknown log level, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="log_level"):
        AppConfig.for_testing(log_level="LOUD")
    assert AppConfig.for_testing(log_level="debug").log_level == "DEBUG"


def test_loader_defaults_to_single_urban_type() -> None:
    """Given no config file, when loading line types, then one urban type reads timetable_file."""
    config = AppConfig.for_testing(timetable_file="lines.json")

    line_types = LineTypeConfigurationLoader.load(config)

    assert len(line_types) == 1
    assert line_types[0].line_type == "urban"
    assert line_types[0].timetable_file == "lines.json"
    assert line_types[0].display_title("bhs") == "Gradske linije"


def test_loader_parses_line_types_and_display(tmp_path: Path) -> None:
    """Given a TOML file with line types, when loading, then they and display settings apply."""
    config_file = write_toml(
        tmp_path,
        """
[display]
refresh_interval_seconds = 15
language = "bhs"

[[line_types]]
line_type = "urban"
timetable_file = "urban.json"

[[line_types]]
line_type = "suburban"
timetable_file = "https://example.org/suburban.json"
enabled = false

[line_types.title]
en = "Suburban Lines"
bhs = "Prigradske linije"
""",
    )
    config = AppConfig.for_testing(config_file=config_file)

    line_types = LineTypeConfigurationLoader.load(config)

    assert [lt.line_type for lt in line_types] == ["urban", "suburban"]
    assert line_types[0].timetable_file == "urban.json"
    assert line_types[1].enabled is False
    assert line_types[1].display_title("bhs") == "Prigradske linije"
    assert config.refresh_interval_seconds == 15
    assert config.display_language == "bhs"


def test_loader_rejects_duplicate_line_types(tmp_path: Path) -> None:
    """Given the same line type twice, when loading, then ValueError is raised."""
    config_file = write_toml(
        tmp_path,
        """
[[line_types]]
line_type = "urban"

[[line_types]]
line_type = "urban"
""",
    )

    with pytest.raises(ValueError, match="unique"):
        LineTypeConfigurationLoader.load(AppConfig.for_testing(config_file=config_file))


def test_loader_falls_back_when_no_line_types(tmp_path: Path) -> None:
    """Given a TOML file without line types, when loading, then the default type is used."""
    config_file = write_toml(tmp_path, '[display]\ntimetable_file = "other.json"\n')

    line_types = LineTypeConfigurationLoader.load(AppConfig.for_testing(config_file=config_file))

    assert [(lt.line_type, lt.timetable_file) for lt in line_types] == [("urban", "other.json")]


def test_config_raises_error_when_file_not_found() -> None:
    """Given non-existent config file, when loading, then FileNotFoundError is raised."""
    config = AppConfig.for_testing(config_file="nonexistent.toml")

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.get_line_types_config()


def test_display_language_is_validated(tmp_path: Path) -> None:
    """Given an invalid language in TOML, when loading, then ValueError is raised."""
    config_file = write_toml(tmp_path, '[display]\nlanguage = "fr"\n')

    with pytest.raises(ValueError, match="language"):
        AppConfig.for_testing(config_file=config_file).get_line_types_config()
