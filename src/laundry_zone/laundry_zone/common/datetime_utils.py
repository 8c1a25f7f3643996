from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_iso(value: Any) -> Optional[str]:
    """Render DATE/DATETIME column values as ISO strings, keep strings as-is."""
    if value is None:
        return None
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def month_key(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def recent_month_keys(now: datetime, count: int) -> list[str]:
    """Return `count` YYYY-MM keys ending at the month of `now`, oldest first."""
    keys = []
    for i in range(count):
        # Calendar arithmetic on a month index avoids day-of-month overflow.
        index = now.year * 12 + (now.month - 1) - i
        keys.append(month_key(index // 12, index % 12 + 1))
    keys.reverse()
    return keys
