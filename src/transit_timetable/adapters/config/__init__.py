"""Configuration adapters."""

from transit_timetable.adapters.config.app_config import AppConfig
from transit_timetable.adapters.config.line_type_configuration_loader import (
    LineTypeConfigurationLoader,
)

__all__ = ["AppConfig", "LineTypeConfigurationLoader"]
