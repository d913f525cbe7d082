"""Line type configuration domain model."""

from dataclasses import dataclass

from transit_timetable.domain.models.bilingual_text import BilingualText


@dataclass(frozen=True)
class LineTypeConfiguration:
    """Where the timetables of one line type (e.g. urban) come from."""

    line_type: str
    timetable_file: str  # Local path or http(s) URL
    enabled: bool = True
    title: BilingualText | None = None

    def display_title(self, language: str) -> str:
        """Title for line lists, e.g. 'Urban Lines'."""
        if self.title is not None:
            text = self.title.get(language)
            if text:
                return text
        return f"{self.line_type.capitalize()} Lines"
