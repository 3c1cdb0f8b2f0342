"""Rental length in whole days."""

import math
from datetime import date, datetime, time

SECONDS_PER_DAY = 24 * 60 * 60


def _as_datetime(x, tzinfo=None) -> datetime:
    """Promote a plain date to midnight; give naive values the other side's zone."""
    if not isinstance(x, datetime):
        x = datetime.combine(x, time.min)
    if x.tzinfo is None and tzinfo is not None:
        # pytz zones must localize, replace() would pick the LMT offset
        localize = getattr(tzinfo, "localize", None)
        x = localize(x) if callable(localize) else x.replace(tzinfo=tzinfo)
    return x


def compute_duration(start: date, end: date) -> int:
    """
    Whole days between two dates, order-insensitive, rounded up.
    - same day (or same instant) -> 0
    - any positive sub-day span -> 1
    - 36 hours -> 2
    """
    if type(start) is date and type(end) is date:
        return abs((end - start).days)

    tz = getattr(start, "tzinfo", None) or getattr(end, "tzinfo", None)
    a = _as_datetime(start, tz)
    b = _as_datetime(end, tz)
    elapsed = abs((b - a).total_seconds())
    return int(math.ceil(elapsed / SECONDS_PER_DAY))
