"""
strongpass.clock
Text for the live clock shown in the GUI, e.g. "8:44:42 PM" / "January 16, 2026".
Month names are spelled out here so the output does not depend on the locale.
"""

from datetime import datetime
from typing import Optional, Tuple

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

TICK_MS = 1000


def format_time(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d}:{dt.second:02d} {suffix}"


def format_date(dt: datetime) -> str:
    return f"{MONTHS[dt.month - 1]} {dt.day}, {dt.year}"


def now_strings(now: Optional[datetime] = None) -> Tuple[str, str]:
    """Return (time, date) for now in the local timezone."""
    now = now or datetime.now()
    return format_time(now), format_date(now)
