"""Tests for the JSON timetable repository."""

import json
from pathlib import Path
from typing import Any

import pytest

from tests.conftest import make_station
from transit_timetable.adapters.json_timetable_repository import JsonTimetableRepository
from transit_timetable.domain.errors import TimetableSourceError
from transit_timetable.domain.models import LineTypeConfiguration


def raw_entry(line_id: str) -> dict[str, Any]:
    return {
        "lineId": line_id,
        "lineName": "Centar - Lauš",
        "directions": {"en": ["To Lauš", "To Centar"], "bhs": ["Prema Laušu", "Prema Centru"]},
        "stations": [make_station("Centar", weekday=[["07:00"], ["07:30"]])],
    }


def write_json(path: Path, data: Any) -> str:
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


@pytest.mark.asyncio
async def test_loads_entries_from_line_type_section(tmp_path: Path) -> None:
    """Given a file keyed by line type, when loading, then entries get that line type."""
    source = write_json(tmp_path / "t.json", {"urban": [raw_entry("6"), raw_entry("7")]})
    repository = JsonTimetableRepository()

    entries = await repository.load_line_type(
        LineTypeConfiguration(line_type="urban", timetable_file=source)
    )

    assert [entry.line_id for entry in entries] == ["6", "7"]
    assert all(entry.line_type == "urban" for entry in entries)
    assert entries[0].line_name.get("bhs") == "Centar - Lauš"


@pytest.mark.asyncio
async def test_loads_bare_list(tmp_path: Path) -> None:
    """Given a file holding a bare list, when loading, then all entries are returned."""
    source = write_json(tmp_path / "t.json", [raw_entry("8")])

    entries = await JsonTimetableRepository().load_line_type(
        LineTypeConfiguration(line_type="suburban", timetable_file=source)
    )

    assert entries[0].line_type == "suburban"


@pytest.mark.asyncio
async def test_missing_file_raises_source_error(tmp_path: Path) -> None:
    """Given a missing file, when loading, then TimetableSourceError is raised."""
    with pytest.raises(TimetableSourceError):
        await JsonTimetableRepository().load_line_type(
            LineTypeConfiguration(line_type="urban", timetable_file=str(tmp_path / "none.json"))
        )


@pytest.mark.asyncio
async def test_invalid_json_raises_source_error(tmp_path: Path) -> None:
    """Given a file that is not JSON, when loading, then TimetableSourceError is raised."""
    path = tmp_path / "t.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(TimetableSourceError, match="invalid JSON"):
        await JsonTimetableRepository().load_line_type(
            LineTypeConfiguration(line_type="urban", timetable_file=str(path))
        )


def test_section_that_is_not_a_list_is_ignored() -> None:
    """Given a dict without the line type's list, when parsing, then no entries are returned."""
    assert JsonTimetableRepository.parse({"other": []}, "urban") == []


def test_entry_missing_direction_pair_raises_source_error() -> None:
    """Given a station without both directions, when parsing, then TimetableSourceError names the line."""
    entry = raw_entry("9")
    entry["stations"][0]["times"]["weekday"] = [["07:00"]]

    with pytest.raises(TimetableSourceError, match="line 9"):
        JsonTimetableRepository.parse([entry], "urban")


def test_entry_without_stations_raises_source_error() -> None:
    """Given an entry with no stations, when parsing, then TimetableSourceError is raised."""
    entry = raw_entry("9")
    entry["stations"] = []

    with pytest.raises(TimetableSourceError):
        JsonTimetableRepository.parse([entry], "urban")


def test_malformed_times_are_kept_for_aggregation() -> None:
    """Given a malformed time string, when parsing, then loading succeeds (it fails on aggregation)."""
    entry = raw_entry("9")
    entry["stations"][0]["times"]["weekday"] = [["7x5"], []]

    entries = JsonTimetableRepository.parse([entry], "urban")

    assert entries[0].stations[0].times.weekday[0] == ["7x5"]
