#!/usr/bin/env python3
"""Check that every timetable in the configured line types loads and aggregates."""

import argparse
import asyncio
import sys
from pathlib import Path

# Add src to path
script_dir = Path(__file__).parent
project_dir = script_dir.parent
sys.path.insert(0, str(project_dir / "src"))

from transit_timetable.adapters.config import AppConfig, LineTypeConfigurationLoader
from transit_timetable.adapters.json_timetable_repository import JsonTimetableRepository
from transit_timetable.application.services import DepartureAggregator
from transit_timetable.domain.errors import TimetableDataError, TimetableSourceError
from transit_timetable.domain.models import DayType, Direction


async def check_timetables(config_file: str | None, verbose: bool = False) -> int:
    """Load every line type and aggregate each line/day-type/direction slice."""
    overrides = {}
    if config_file:
        config_path = Path(config_file).resolve()
        if not config_path.exists():
            print(f"ERROR: Config file '{config_file}' not found", file=sys.stderr)
            return 1
        overrides["config_file"] = str(config_path)

    try:
        config = AppConfig(**overrides)
        line_types = LineTypeConfigurationLoader.load(config)
    except (ValueError, FileNotFoundError) as e:
        print(f"ERROR: Failed to load config: {e}", file=sys.stderr)
        return 1

    repository = JsonTimetableRepository(timeout_seconds=config.http_timeout_seconds)
    aggregator = DepartureAggregator()
    failures: list[str] = []
    checked = 0

    for line_type in line_types:
        if not line_type.enabled:
            continue
        print(f"Line type: {line_type.line_type} ({line_type.timetable_file})")
        try:
            entries = await repository.load_line_type(line_type)
        except TimetableSourceError as e:
            print(f"  ✗ FAILED: {e}")
            failures.append(str(e))
            continue

        for entry in entries:
            for day_type in DayType:
                for direction in Direction:
                    checked += 1
                    try:
                        schedule = aggregator.aggregate(entry, day_type, direction)
                    except TimetableDataError as e:
                        print(f"  ✗ {entry.line_id} {day_type}/{direction}: {e}")
                        failures.append(str(e))
                        continue
                    if verbose:
                        print(
                            f"  ✓ {entry.line_id} {day_type}/{direction}: "
                            f"{len(schedule.sorted_departures)} departures"
                        )

    print(f"\nChecked {checked} slice(s), {len(failures)} problem(s)")
    return 1 if failures else 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Check that all configured timetables are well formed"
    )
    parser.add_argument(
        "config_file",
        nargs="?",
        help="Path to the TOML configuration file (defaults to TIMETABLE_FILE)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show departure counts for every slice",
    )

    args = parser.parse_args()

    sys.exit(asyncio.run(check_timetables(args.config_file, verbose=args.verbose)))
