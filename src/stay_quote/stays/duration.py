"""Night counts and package end dates derived from dates or duration labels."""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from stay_quote.errors import UnparseableDurationWarning

logger = logging.getLogger(__name__)

DEFAULT_DURATION_DAYS = 1

_DURATION_DAYS_RE = re.compile(r"(\d+)\s*days?", re.IGNORECASE)
_SECONDS_PER_DAY = 24 * 60 * 60


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def _days_between(start: date, end: date) -> int:
    """Whole days from ``start`` to ``end``, rounding partial days up."""
    if isinstance(start, datetime) or isinstance(end, datetime):
        delta = _as_datetime(end) - _as_datetime(start)
        return math.ceil(delta.total_seconds() / _SECONDS_PER_DAY)
    return (end - start).days


def nights_for_stay(check_in: Optional[date], check_out: Optional[date]) -> int:
    """Nights between check-in and check-out; 0 when the range is missing or inverted."""
    if check_in is None or check_out is None:
        return 0
    nights = _days_between(check_in, check_out)
    return nights if nights > 0 else 0


def parse_duration_label(label: Optional[str]) -> Tuple[int, Optional[UnparseableDurationWarning]]:
    """Read the day count from labels such as ``"5 Days / 4 Nights"``.

    Falls back to one day and returns a warning when no positive count is found.
    """
    match = _DURATION_DAYS_RE.search(label or "")
    if match:
        days = int(match.group(1))
        if days > 0:
            return days, None
    logger.warning("Unparseable package duration %r; assuming %s day(s)", label, DEFAULT_DURATION_DAYS)
    return DEFAULT_DURATION_DAYS, UnparseableDurationWarning(label or "", DEFAULT_DURATION_DAYS)


def extract_duration_days(label: Optional[str]) -> int:
    days, _ = parse_duration_label(label)
    return days


def package_end_date(start_date: date, duration_days: int) -> date:
    """Last day of a package; a one-day package starts and ends on the same day."""
    if duration_days < 1:
        raise ValueError("duration_days must be at least 1")
    return start_date + timedelta(days=duration_days - 1)


def package_nights(
    start_date: Optional[date],
    end_date: Optional[date],
    duration_label: Optional[str] = None,
) -> int:
    """Days covered by a package, counting both endpoints."""
    if start_date is not None and end_date is not None:
        return _days_between(start_date, end_date) + 1
    if duration_label is None:
        return 0
    return extract_duration_days(duration_label)


@dataclass(frozen=True, slots=True)
class StayWindow:
    """Either an explicit check-in/check-out range or a package start plus duration."""

    start: date
    end: date
    inclusive: bool = False

    def __post_init__(self) -> None:
        if self.inclusive:
            if self.end < self.start:
                raise ValueError("package end date precedes start date")
        elif self.end <= self.start:
            raise ValueError("check-out must be after check-in")

    @classmethod
    def for_stay(cls, check_in: date, check_out: date) -> "StayWindow":
        return cls(start=check_in, end=check_out)

    @classmethod
    def for_package(cls, start_date: date, duration_days: int) -> "StayWindow":
        return cls(start=start_date, end=package_end_date(start_date, duration_days), inclusive=True)

    @property
    def nights(self) -> int:
        if self.inclusive:
            return package_nights(self.start, self.end)
        return nights_for_stay(self.start, self.end)
