"""Catalog of loaded timetables, indexed and ordered by line ID."""

from __future__ import annotations

import logging
import re
from functools import cmp_to_key
from typing import TYPE_CHECKING

from transit_timetable.domain.errors import TimetableNotFoundError, TimetableSourceError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from transit_timetable.domain.models import LineTypeConfiguration, TimetableEntry
    from transit_timetable.domain.ports import TimetableRepository

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"\s*([0-9]+)")


def _leading_number(line_id: str) -> int | None:
    match = _LEADING_NUMBER.match(line_id)
    return int(match.group(1)) if match else None


def compare_line_ids(a: str, b: str) -> int:
    """Order line IDs numerically by their leading number ("3" < "3B" < "10").

    IDs without a leading number, and ties, fall back to text order.
    """
    num_a, num_b = _leading_number(a), _leading_number(b)
    if num_a is not None and num_b is not None and num_a != num_b:
        return -1 if num_a < num_b else 1
    return (a > b) - (a < b)


line_sort_key = cmp_to_key(compare_line_ids)


class LineCatalog:
    """All timetables available for selection."""

    def __init__(self, entries: Iterable[TimetableEntry] = ()) -> None:
        self._entries: dict[str, TimetableEntry] = {}
        self.add(entries)

    @classmethod
    async def load(
        cls, repository: TimetableRepository, line_types: Iterable[LineTypeConfiguration]
    ) -> LineCatalog:
        """Load the timetables of every enabled line type.

        A line type whose source fails is skipped so the others still load;
        if every enabled type fails, the last error is raised.
        """
        catalog = cls()
        last_error: TimetableSourceError | None = None
        loaded_types = 0
        for line_type in line_types:
            if not line_type.enabled:
                logger.debug(f"Skipping disabled line type '{line_type.line_type}'")
                continue
            try:
                entries = await repository.load_line_type(line_type)
            except TimetableSourceError as e:
                logger.warning(f"Failed to load timetables for {line_type.line_type}: {e}")
                last_error = e
                continue
            catalog.add(entries)
            loaded_types += 1
            logger.info(f"Loaded {len(entries)} timetable(s) for line type '{line_type.line_type}'")

        if loaded_types == 0 and last_error is not None:
            raise last_error
        return catalog

    def add(self, entries: Iterable[TimetableEntry]) -> None:
        for entry in entries:
            if entry.line_id in self._entries:
                logger.warning(f"Duplicate timetable for line {entry.line_id}, keeping the last one")
            self._entries[entry.line_id] = entry

    def get(self, line_id: str) -> TimetableEntry:
        """Return the timetable of ``line_id``.

        An exact match wins; otherwise the ID is matched case-insensitively,
        as map clicks may deliver lower-case IDs.

        Raises:
            TimetableNotFoundError: If no such line is loaded.
        """
        entry = self._entries.get(line_id)
        if entry is not None:
            return entry
        wanted = line_id.strip().upper()
        for candidate_id, candidate in self._entries.items():
            if candidate_id.upper() == wanted:
                return candidate
        raise TimetableNotFoundError(line_id)

    def __contains__(self, line_id: object) -> bool:
        if not isinstance(line_id, str):
            return False
        try:
            self.get(line_id)
        except TimetableNotFoundError:
            return False
        return True

    def __len__(self) -> int:
        return len(self._entries)

    def lines(self) -> list[TimetableEntry]:
        """All timetables sorted by line ID."""
        return sorted(self._entries.values(), key=lambda entry: line_sort_key(entry.line_id))

    def lines_by_type(self) -> dict[str, list[TimetableEntry]]:
        """Timetables grouped by line type, each group sorted by line ID."""
        grouped: dict[str, list[TimetableEntry]] = {}
        for entry in self.lines():
            grouped.setdefault(entry.line_type or "urban", []).append(entry)
        return grouped
