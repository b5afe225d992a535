"""Monthly windows used for spend aggregation.

Admission checks use month-to-date (first instant of the month through
"now"); analytics use the full calendar month, inclusive through the end of
the last day. Boundaries are computed in the configured timezone and
returned as UTC instants.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo


@dataclass(frozen=True)
class MonthWindow:
    start: datetime
    end: datetime
    year: int
    month: int

    def __contains__(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


def _zone(tz_name: str) -> tzinfo:
    if tz_name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(tz_name)


def _first_instant(year: int, month: int, zone: tzinfo) -> datetime:
    return datetime(year, month, 1, tzinfo=zone)


def _next_month(year: int, month: int) -> tuple[int, int]:
    if month == 12:
        return year + 1, 1
    return year, month + 1


def month_to_date(now: datetime | None = None, tz_name: str = "UTC") -> MonthWindow:
    """Window from the first instant of ``now``'s month through ``now``."""
    zone = _zone(tz_name)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local_now = now.astimezone(zone)
    start = _first_instant(local_now.year, local_now.month, zone)
    return MonthWindow(
        start=start.astimezone(timezone.utc),
        end=now.astimezone(timezone.utc),
        year=local_now.year,
        month=local_now.month,
    )


def calendar_month(year: int, month: int, tz_name: str = "UTC") -> MonthWindow:
    """Full calendar month, ending at the last microsecond of its last day."""
    if not 1 <= month <= 12:
        raise ValueError("Month must be between 1 and 12")
    if not 1970 <= year <= 3000:
        raise ValueError("Year must be between 1970 and 3000")
    zone = _zone(tz_name)
    start = _first_instant(year, month, zone)
    end = _first_instant(*_next_month(year, month), zone) - timedelta(microseconds=1)
    return MonthWindow(
        start=start.astimezone(timezone.utc),
        end=end.astimezone(timezone.utc),
        year=year,
        month=month,
    )


def resolve_month(
    month: int | None = None,
    year: int | None = None,
    *,
    now: datetime | None = None,
    tz_name: str = "UTC",
) -> MonthWindow:
    """Calendar month for ``month``/``year``.

    Each omitted value defaults on its own to the one of ``now``'s month, so
    ``year`` alone gives that calendar month in ``year``.
    """
    current = month_to_date(now, tz_name)
    return calendar_month(year or current.year, month or current.month, tz_name)
