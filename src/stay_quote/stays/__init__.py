"""Stay window and duration helpers."""

from .duration import (
    StayWindow,
    extract_duration_days,
    nights_for_stay,
    package_end_date,
    package_nights,
    parse_duration_label,
)

__all__ = [
    "StayWindow",
    "extract_duration_days",
    "nights_for_stay",
    "package_end_date",
    "package_nights",
    "parse_duration_label",
]
