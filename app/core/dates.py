# File: app/core/dates.py

from datetime import date, datetime, timezone


def utc_today() -> date:
    """Calendar date in UTC; expense defaults and summaries use this, not local time."""
    return datetime.now(timezone.utc).date()
