"""Line type configuration loader."""

import logging
from typing import Any

from transit_timetable.adapters.config.app_config import AppConfig
from transit_timetable.domain.models import BilingualText, LineTypeConfiguration

logger = logging.getLogger(__name__)

DEFAULT_LINE_TYPE = "urban"
DEFAULT_TITLE = BilingualText(en="Urban Lines", bhs="Gradske linije")


class LineTypeConfigurationLoader:
    """Loads line type configurations from app config."""

    @staticmethod
    def load_line_type_from_data(
        data: dict[str, Any], config: AppConfig
    ) -> LineTypeConfiguration | None:
        """Load a single line type configuration from data dict."""
        if not isinstance(data, dict):
            return None

        line_type = data.get("line_type")
        if not line_type or not isinstance(line_type, str):
            return None

        timetable_file = data.get("timetable_file", config.timetable_file)
        enabled = bool(data.get("enabled", True))

        title_data = data.get("title")
        title = BilingualText.model_validate(title_data) if title_data else None
        if title is None and line_type == DEFAULT_LINE_TYPE:
            title = DEFAULT_TITLE

        return LineTypeConfiguration(
            line_type=line_type,
            timetable_file=str(timetable_file),
            enabled=enabled,
            title=title,
        )

    @staticmethod
    def default(config: AppConfig) -> LineTypeConfiguration:
        """The single urban line type reading ``config.timetable_file``."""
        return LineTypeConfiguration(
            line_type=DEFAULT_LINE_TYPE,
            timetable_file=config.timetable_file,
            title=DEFAULT_TITLE,
        )

    @staticmethod
    def load(config: AppConfig) -> list[LineTypeConfiguration]:
        """Load line type configurations from app config."""
        if not config.config_file:
            return [LineTypeConfigurationLoader.default(config)]

        line_types_data = config.get_line_types_config()
        line_types: list[LineTypeConfiguration] = []
        for data in line_types_data:
            line_type = LineTypeConfigurationLoader.load_line_type_from_data(data, config)
            if line_type is None:
                logger.warning(f"Ignoring invalid line type configuration: {data}")
                continue
            line_types.append(line_type)

        if not line_types:
            return [LineTypeConfigurationLoader.default(config)]
        return line_types
