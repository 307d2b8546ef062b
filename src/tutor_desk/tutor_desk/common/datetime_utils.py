from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from ..core.constants import ISO_DATE_FORMAT, ISO_MONTH_FORMAT
from ..core.exceptions import ParseError

# English abbreviations regardless of the process locale.
_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_MONTH_LABEL_RE = re.compile(r"^\s*([A-Za-z]{3})\s+(\d{4})\s*$")
_ISO_MONTH_RE = re.compile(r"^\s*(\d{4})-(\d{2})\s*$")


@dataclass(frozen=True)
class MonthRange:
    """Calendar bounds of one month (both ends inclusive)."""

    start: date
    end: date

    @property
    def label(self) -> str:
        return f"{_MONTH_ABBR[self.start.month - 1]} {self.start.year}"

    @property
    def iso_month(self) -> str:
        return self.start.strftime(ISO_MONTH_FORMAT)

    def contains(self, value: date) -> bool:
        return self.start <= value <= self.end

    def days(self) -> list[date]:
        return [self.start + timedelta(days=i) for i in range((self.end - self.start).days + 1)]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(str(value).strip(), ISO_DATE_FORMAT).date()
    except ValueError:
        raise ParseError(f"Invalid date: {value!r}") from None


def to_iso(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def month_range(year: int, month: int) -> MonthRange:
    last_day = calendar.monthrange(year, month)[1]
    return MonthRange(start=date(year, month, 1), end=date(year, month, last_day))


def parse_month_label(label: str) -> MonthRange:
    """Parse "Aug 2025" into the month's first and last day."""

    m = _MONTH_LABEL_RE.match(label or "")
    if not m:
        raise ParseError(f"Invalid month label: {label!r} (expected e.g. 'Aug 2025')")

    abbr = m.group(1).capitalize()
    if abbr not in _MONTH_ABBR:
        raise ParseError(f"Unknown month: {m.group(1)!r}")
    return month_range(int(m.group(2)), _MONTH_ABBR.index(abbr) + 1)


def parse_iso_month(value: str) -> MonthRange:
    """Parse "2025-08" (HTML month input) into a MonthRange."""

    m = _ISO_MONTH_RE.match(value or "")
    if not m or not 1 <= int(m.group(2)) <= 12:
        raise ParseError(f"Invalid month: {value!r} (expected YYYY-MM)")
    return month_range(int(m.group(1)), int(m.group(2)))


def month_label_for(value: date) -> str:
    return month_range(value.year, value.month).label


def days_in_month(label: str) -> list[date]:
    return parse_month_label(label).days()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
