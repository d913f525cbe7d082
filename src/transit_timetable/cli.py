"""Command line interface for browsing bus timetables."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from typing import TYPE_CHECKING, TextIO

from transit_timetable.adapters.config import AppConfig, LineTypeConfigurationLoader
from transit_timetable.adapters.json_timetable_repository import JsonTimetableRepository
from transit_timetable.adapters.scheduling import AsyncioRefreshScheduler
from transit_timetable.adapters.terminal import TextTimetableRenderer
from transit_timetable.application.services import (
    LineCatalog,
    TimetableSession,
    classify_day_type,
)
from transit_timetable.domain.errors import TimetableError
from transit_timetable.domain.models import DayType, Direction, ViewSelection

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from transit_timetable.domain.models import LineTypeConfiguration

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="transit-timetable",
        description="Show bus timetables with the next departure highlighted.",
    )
    parser.add_argument("--config", help="Path to TOML configuration file")
    parser.add_argument("--lang", choices=["en", "bhs"], help="Display language")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("lines", help="List available lines grouped by type")

    show_parser = subparsers.add_parser("show", help="Show the timetable of a line")
    show_parser.add_argument("line_id", help="Line ID, e.g. 13A")
    show_parser.add_argument(
        "--day", choices=[day_type.value for day_type in DayType], help="Day-type to show"
    )
    show_parser.add_argument(
        "--direction", choices=[direction.value for direction in Direction], help="Direction"
    )
    show_parser.add_argument(
        "--watch",
        action="store_true",
        help="Keep running and refresh the highlighting until interrupted",
    )
    return parser


def load_config(args: argparse.Namespace) -> tuple[AppConfig, list[LineTypeConfiguration]]:
    """Create the app config and line types, applying command line overrides."""
    overrides: dict[str, str] = {}
    if args.config:
        overrides["config_file"] = args.config
    config = AppConfig(**overrides)
    line_types = LineTypeConfigurationLoader.load(config)
    # Loading may apply the TOML [display] language; the flag wins
    if args.lang:
        config.display_language = args.lang
    return config, line_types


async def load_catalog(
    config: AppConfig, line_types: list[LineTypeConfiguration]
) -> LineCatalog:
    repository = JsonTimetableRepository(timeout_seconds=config.http_timeout_seconds)
    return await LineCatalog.load(repository, line_types)


async def list_lines(
    config: AppConfig, line_types: list[LineTypeConfiguration], stream: TextIO
) -> None:
    """Print all lines grouped by line type, sorted by line ID."""
    catalog = await load_catalog(config, line_types)
    language = config.display_language
    titles = {line_type.line_type: line_type.display_title(language) for line_type in line_types}
    for line_type, entries in catalog.lines_by_type().items():
        stream.write(f"{titles.get(line_type, line_type.capitalize() + ' Lines')}\n")
        for entry in entries:
            stream.write(f"  {entry.line_id:<6} {entry.line_name.get(language)}\n")


def initial_selection(
    args: argparse.Namespace, clock: Callable[[], datetime]
) -> ViewSelection | None:
    """Selection requested on the command line, or None for today's default."""
    if not args.day and not args.direction:
        return None
    day_type = DayType(args.day) if args.day else classify_day_type(clock().date())
    direction = Direction(args.direction) if args.direction else Direction.A
    return ViewSelection(day_type=day_type, direction=direction)


async def show_line(
    config: AppConfig,
    line_types: list[LineTypeConfiguration],
    args: argparse.Namespace,
    stream: TextIO,
    clock: Callable[[], datetime],
) -> None:
    """Render one line's timetable, optionally keeping it refreshed."""
    catalog = await load_catalog(config, line_types)
    entry = catalog.get(args.line_id)

    renderer = TextTimetableRenderer(language=config.display_language, stream=stream)
    scheduler = AsyncioRefreshScheduler()
    session = TimetableSession(
        scheduler,
        bridge=renderer,
        clock=clock,
        refresh_interval_seconds=config.refresh_interval_seconds,
    )
    session.load(entry, initial_selection(args, clock))
    try:
        if args.watch and scheduler.handle is not None:
            await scheduler.handle.wait()
    finally:
        session.close()


async def run_command(
    args: argparse.Namespace,
    stream: TextIO,
    clock: Callable[[], datetime],
) -> None:
    config, line_types = load_config(args)
    logging.getLogger().setLevel(config.log_level)
    if args.command == "lines":
        await list_lines(config, line_types, stream)
    elif args.command == "show":
        await show_line(config, line_types, args, stream, clock)


def main(
    argv: Sequence[str] | None = None,
    stream: TextIO | None = None,
    clock: Callable[[], datetime] | None = None,
) -> int:
    """Run the command line interface and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    try:
        asyncio.run(run_command(args, stream or sys.stdout, clock or datetime.now))
    except TimetableError as e:
        logger.error(str(e))
        return 1
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    return 0
