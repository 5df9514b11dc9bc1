"""Locale-aware month/year formatting for résumé date ranges."""

from __future__ import annotations

import re

import pendulum
from pendulum.parsing.exceptions import ParserError

from ..schemas import Locale
from .labels import labels_for

# CLDR abbreviated month names for bn.
_BANGLA_MONTHS: tuple[str, ...] = (
    "জানু",
    "ফেব",
    "মার্চ",
    "এপ্রি",
    "মে",
    "জুন",
    "জুলাই",
    "আগ",
    "সেপ",
    "অক্টো",
    "নভে",
    "ডিসে",
)
_BANGLA_DIGITS = str.maketrans("0123456789", "০১২৩৪৫৬৭৮৯")
# Calendar month or day forms; anything else is shown as typed.
_CALENDAR_DATE = re.compile(r"\d{4}-\d{2}(-\d{2}([T ].+)?)?")


def parse_date(value: str | None) -> pendulum.Date | None:
    """Parse ``YYYY-MM``, ``YYYY-MM-DD`` or ISO timestamps; ``None`` if invalid."""
    if not value or not value.strip():
        return None
    value = value.strip()
    if not _CALENDAR_DATE.fullmatch(value):
        return None
    try:
        if len(value) == 7:
            return pendulum.date(int(value[:4]), int(value[5:7]), 1)
        parsed = pendulum.parse(value, exact=True)
    except (ValueError, ParserError):
        return None
    if not isinstance(parsed, pendulum.Date):
        return None
    return parsed


def to_bangla_digits(text: str) -> str:
    return text.translate(_BANGLA_DIGITS)


def format_month_year(value: str | None, locale: Locale) -> str:
    """Render a date as ``"Jan 2020"`` or ``"জানু ২০২০"``.

    Values that cannot be parsed are returned unchanged so that free-text dates
    typed into the editor still show up.
    """
    parsed = parse_date(value)
    if parsed is None:
        return (value or "").strip()
    if locale is Locale.BN:
        return f"{_BANGLA_MONTHS[parsed.month - 1]} {to_bangla_digits(str(parsed.year))}"
    return parsed.format("MMM YYYY", locale="en")


def format_date_range(
    start: str | None,
    end: str | None,
    current: bool,
    locale: Locale,
) -> str:
    """Format a start/end pair; ongoing entries end with the localised present token."""
    start_text = format_month_year(start, locale)
    if not start_text:
        return ""
    if current:
        return f"{start_text} - {labels_for(locale).present}"
    end_text = format_month_year(end, locale)
    if not end_text:
        return start_text
    return f"{start_text} - {end_text}"


__all__ = ["format_date_range", "format_month_year", "parse_date", "to_bangla_digits"]
