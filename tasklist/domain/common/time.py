from __future__ import annotations

from datetime import date, timedelta


def parse_iso_date(s: str) -> date:
    # Raises ValueError on anything that is not YYYY-MM-DD
    return date.fromisoformat(s.strip())


def shift_days(base: date, days: int) -> str:
    return (base + timedelta(days=days)).isoformat()
