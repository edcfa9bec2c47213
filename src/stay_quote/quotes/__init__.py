"""Quote orchestration for stays and packages."""

from .builder import booking_payload, estimate_guest_mix, quote_package, quote_stay
from .models import (
    PACKAGE_BOOKING,
    STAY_BOOKING,
    PackageSelection,
    Quote,
    RoomRequest,
    StaySelection,
)

__all__ = [
    "PACKAGE_BOOKING",
    "PackageSelection",
    "Quote",
    "RoomRequest",
    "STAY_BOOKING",
    "StaySelection",
    "booking_payload",
    "estimate_guest_mix",
    "quote_package",
    "quote_stay",
]
