"""Bilingual display strings."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from transit_timetable.domain.models.day_type import Direction

DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "bhs")


class BilingualText(BaseModel):
    """A display string in English and Bosnian/Croatian/Serbian.

    Line lists store some names as plain strings; those are used for both
    languages.
    """

    model_config = ConfigDict(frozen=True)

    en: str = ""
    bhs: str = ""

    @model_validator(mode="before")
    @classmethod
    def _accept_plain_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"en": data, "bhs": data}
        return data

    def get(self, language: str) -> str:
        """Return the text in ``language``, falling back to English, then BHS."""
        value = getattr(self, language, "") if language in SUPPORTED_LANGUAGES else ""
        return value or self.en or self.bhs


class DirectionLabels(BaseModel):
    """The two direction labels of a line, per language."""

    model_config = ConfigDict(frozen=True)

    en: tuple[str, str]
    bhs: tuple[str, str]

    def label(self, direction: Direction, language: str) -> str:
        """Return the label for ``direction`` in ``language`` (English fallback)."""
        labels = self.bhs if language == "bhs" else self.en
        return labels[direction.index] or self.en[direction.index]
