"""Build "add to Google Calendar" links for a chosen trip window."""

from datetime import date, timedelta
from typing import Optional
from urllib.parse import urlencode

GOOGLE_CALENDAR_URL = "https://www.google.com/calendar/render"


def _compact(day: date) -> str:
    return day.strftime("%Y%m%d")


def build_google_calendar_url(start: date, end: date, title: str, details: str = "") -> Optional[str]:
    """
    All-day event covering start..end inclusive.
    Google treats the end of an all-day range as exclusive, so it is pushed one day out.
    Returns None when end is date.max and the exclusive end cannot be written.
    """
    if end == date.max:
        return None
    params = {
        "action": "TEMPLATE",
        "text": title,
        "dates": f"{_compact(start)}/{_compact(end + timedelta(days=1))}",
        "details": details,
    }
    return f"{GOOGLE_CALENDAR_URL}?{urlencode(params)}"
