"""Display helpers — numbers, dates, escaping and language colours."""

from __future__ import annotations

import html
from datetime import datetime, timezone

DEFAULT_LANGUAGE_COLOR = "#8b949e"

LANGUAGE_COLORS: dict[str, str] = {
    "JavaScript": "#f1e05a",
    "TypeScript": "#3178c6",
    "Python": "#3572a5",
    "Java": "#b07219",
    "HTML": "#e34c26",
    "CSS": "#563d7c",
    "Go": "#00add8",
    "Rust": "#dea584",
    "PHP": "#4f5d95",
    "Ruby": "#701516",
    "C++": "#f34b7d",
    "C#": "#239120",
    "Swift": "#fa7343",
    "Kotlin": "#a97bff",
    "Dart": "#00b4ab",
    "Shell": "#89e051",
}

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_number(num: int) -> str:
    """Abbreviate large counts: 1500 -> '1.5K', 2500000 -> '2.5M'."""
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    return str(num)


def format_date(value: str) -> str:
    """Render an ISO-8601 timestamp as e.g. 'January 5, 2024' (UTC date)."""
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return f"{_MONTHS[dt.month - 1]} {dt.day}, {dt.year}"


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` so *text* is safe inside markup and attributes."""
    return html.escape(text, quote=True)


def language_color(language: str) -> str:
    return LANGUAGE_COLORS.get(language, DEFAULT_LANGUAGE_COLOR)
