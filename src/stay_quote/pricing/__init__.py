"""Cost calculation for stays and packages."""

from .amenities import total_for
from .calculator import compute_package_costs, compute_stay_costs, room_line_cost
from .models import (
    DEFAULT_PRICING,
    PACKAGE_TAX_RATE,
    SERVICE_FEE_RATE,
    STAY_TAX_RATE,
    AmenitySelection,
    PackageCostBreakdown,
    PricingPolicy,
    RoomLineCost,
    RoomLineItem,
    StayCostBreakdown,
)

__all__ = [
    "AmenitySelection",
    "DEFAULT_PRICING",
    "PACKAGE_TAX_RATE",
    "PackageCostBreakdown",
    "PricingPolicy",
    "RoomLineCost",
    "RoomLineItem",
    "SERVICE_FEE_RATE",
    "STAY_TAX_RATE",
    "StayCostBreakdown",
    "compute_package_costs",
    "compute_stay_costs",
    "room_line_cost",
    "total_for",
]
