"""Fallback UI labels for the terminal renderer, per language."""

LABELS: dict[str, dict[str, str]] = {
    "en": {
        "weekday": "Weekdays",
        "saturday": "Saturday",
        "sunday": "Sunday and Holiday",
        "relation": "Direction",
        "timetable_for": "Schedule",
        "hour": "Hour",
        "minutes": "Minutes",
        "notes": "Notes:",
        "next": "Next departure",
        "tomorrow": "tomorrow",
        "no_departures": "No departures.",
        "line": "Line",
    },
    "bhs": {
        "weekday": "Radni dan",
        "saturday": "Subota",
        "sunday": "Nedjelja i praznik",
        "relation": "Relacija",
        "timetable_for": "Red voznje",
        "hour": "Sat",
        "minutes": "Minute",
        "notes": "Napomene:",
        "next": "Sljedeci polazak",
        "tomorrow": "sutra",
        "no_departures": "Nema polazaka.",
        "line": "Linija",
    },
}


def label(language: str, key: str) -> str:
    return LABELS.get(language, LABELS["en"]).get(key) or LABELS["en"][key]
