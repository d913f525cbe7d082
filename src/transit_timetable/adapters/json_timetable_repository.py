"""Timetable repository reading the site's JSON timetable files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import aiohttp
from pydantic import ValidationError

from transit_timetable.domain.errors import TimetableSourceError
from transit_timetable.domain.models import TimetableEntry
from transit_timetable.domain.ports import TimetableRepository

if TYPE_CHECKING:
    from transit_timetable.domain.models import LineTypeConfiguration

logger = logging.getLogger(__name__)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class JsonTimetableRepository(TimetableRepository):
    """Loads timetables from a local JSON file or an http(s) URL.

    A file holds either ``{"<line_type>": [entry, ...]}`` or a bare list of
    entries.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize the repository.

        Args:
            session: Optional shared aiohttp session for URL sources.
            timeout_seconds: Total timeout for one HTTP request.
        """
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def load_line_type(self, line_type: LineTypeConfiguration) -> list[TimetableEntry]:
        """Load all timetable entries of one line type.

        Raises:
            TimetableSourceError: If the source cannot be read or an entry is invalid.
        """
        source = line_type.timetable_file
        data = await self._read(source)
        return self.parse(data, line_type.line_type, source)

    async def _read(self, source: str) -> Any:
        if _is_url(source):
            return await self._fetch(source)
        try:
            return json.loads(Path(source).read_text(encoding="utf-8"))
        except OSError as e:
            raise TimetableSourceError(source, str(e)) from e
        except json.JSONDecodeError as e:
            raise TimetableSourceError(source, f"invalid JSON: {e}") from e

    async def _fetch(self, url: str) -> Any:
        logger.debug(f"Fetching timetables from {url}")
        try:
            if self._session is not None:
                return await self._get_json(self._session, url)
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                return await self._get_json(session, url)
        except aiohttp.ClientResponseError as e:
            raise TimetableSourceError(url, f"HTTP {e.status}") from e
        except (aiohttp.ClientError, TimeoutError) as e:
            raise TimetableSourceError(url, str(e) or type(e).__name__) from e
        except json.JSONDecodeError as e:
            raise TimetableSourceError(url, f"invalid JSON: {e}") from e

    async def _get_json(self, session: aiohttp.ClientSession, url: str) -> Any:
        async with session.get(
            url, headers={"accept": "application/json"}, timeout=self._timeout
        ) as response:
            response.raise_for_status()
            return await response.json(content_type=None)

    @staticmethod
    def parse(data: Any, line_type: str, source: str = "<memory>") -> list[TimetableEntry]:
        """Build timetable entries of ``line_type`` from decoded JSON."""
        entries_data = data.get(line_type, data) if isinstance(data, dict) else data
        if not isinstance(entries_data, list):
            logger.warning(f"Timetable data for {line_type} in {source} is not a list, ignoring it")
            return []

        entries: list[TimetableEntry] = []
        for index, item in enumerate(entries_data):
            if not isinstance(item, dict):
                raise TimetableSourceError(source, f"entry {index} is not an object")
            try:
                entries.append(TimetableEntry.model_validate({**item, "lineType": line_type}))
            except ValidationError as e:
                line_id = item.get("lineId", f"#{index}")
                raise TimetableSourceError(source, f"invalid timetable for line {line_id}: {e}") from e
        return entries
