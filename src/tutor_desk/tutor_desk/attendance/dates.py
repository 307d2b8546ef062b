"""Which calendar dates an attendance grid shows for a class and month.

Tiers, first non-empty wins:

1. custom dates picked by the teacher, used verbatim;
2. lesson dates planned in lesson_schedules for that month (sorted, unique);
3. dates cached locally after the last successful save, used when the
   schedule lookup failed or came back empty;
4. every day of the month.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Union

from ..common.datetime_utils import MonthRange, parse_iso_date, parse_month_label, to_iso
from ..core.enums import DateSource

DateLike = Union[date, str]


@dataclass(frozen=True)
class ResolvedDates:
    month: MonthRange
    dates: tuple[date, ...]
    source: DateSource

    @property
    def label(self) -> str:
        return self.month.label

    @property
    def iso_dates(self) -> list[str]:
        return [to_iso(d) for d in self.dates]

    def __len__(self) -> int:
        return len(self.dates)

    def __iter__(self):
        return iter(self.dates)

    def describe(self) -> str:
        if self.source == DateSource.CUSTOM:
            return f"({len(self.dates)} custom lessons)"
        if self.source in (DateSource.SCHEDULE, DateSource.CACHE):
            return f"({len(self.dates)} planned lessons)"
        return "(full month)"


def as_date(value: DateLike) -> date:
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def unique_sorted(values: Iterable[DateLike]) -> list[date]:
    return sorted({as_date(v) for v in values})


def resolve_lesson_dates(
    month_label: str,
    *,
    custom_dates: Optional[Iterable[DateLike]] = None,
    schedule_dates: Optional[Iterable[DateLike]] = None,
    cached_dates: Optional[Iterable[DateLike]] = None,
) -> ResolvedDates:
    month = parse_month_label(month_label)

    custom = [as_date(d) for d in custom_dates or ()]
    if custom:
        return ResolvedDates(month=month, dates=tuple(custom), source=DateSource.CUSTOM)

    planned = [d for d in unique_sorted(schedule_dates or ()) if month.contains(d)]
    if planned:
        return ResolvedDates(month=month, dates=tuple(planned), source=DateSource.SCHEDULE)

    cached = [d for d in unique_sorted(cached_dates or ()) if month.contains(d)]
    if cached:
        return ResolvedDates(month=month, dates=tuple(cached), source=DateSource.CACHE)

    return ResolvedDates(month=month, dates=tuple(month.days()), source=DateSource.FULL_MONTH)
