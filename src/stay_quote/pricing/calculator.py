"""Stay and package cost calculators.

Stays use per-person-per-night pricing: every guest in a room pays the room's
nightly rate, so there is never a separate extra-guest surcharge. Service fee
and taxes are charged on the subtotal, which includes amenities.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from stay_quote.catalog.models import Package
from stay_quote.inventory.models import RoomSelection, RoomType

from .models import (
    DEFAULT_PRICING,
    PackageCostBreakdown,
    PricingPolicy,
    RoomLineCost,
    RoomLineItem,
    StayCostBreakdown,
)

logger = logging.getLogger(__name__)


def room_line_cost(selection: RoomSelection, room_type: RoomType, nights: int) -> RoomLineCost:
    total = selection.guests * room_type.price_per_night * nights
    return RoomLineCost(base_rate=total, extra_guest_fee=0.0, total=total)


def _amenities_only(amenities_total: float, nights: int) -> StayCostBreakdown:
    return StayCostBreakdown(
        base_rate=0.0,
        extra_guest_fees=0.0,
        amenities_total=amenities_total,
        subtotal=amenities_total,
        service_fee=0.0,
        taxes=0.0,
        total=amenities_total,
        nights=nights,
        room_breakdown=[],
    )


def compute_stay_costs(
    selections: Iterable[RoomSelection],
    nights: int,
    amenities_total: float,
    *,
    policy: PricingPolicy = DEFAULT_PRICING,
) -> StayCostBreakdown:
    active = [selection for selection in selections if selection.is_active]
    if nights <= 0 or not active:
        logger.debug("No billable rooms (nights=%s, active=%s); amenities only", nights, len(active))
        return _amenities_only(amenities_total, max(nights, 0))

    base_rate = 0.0
    extra_guest_fees = 0.0
    room_breakdown: list[RoomLineItem] = []
    for selection in active:
        room_type = selection.room_type
        cost = room_line_cost(selection, room_type, nights)
        base_rate += cost.base_rate
        extra_guest_fees += cost.extra_guest_fee
        room_breakdown.append(
            RoomLineItem(
                room_name=room_type.name,
                quantity=selection.quantity,
                guests=selection.guests,
                max_guests=room_type.max_guests * selection.quantity,
                base_rate=cost.base_rate,
                extra_guest_fee=cost.extra_guest_fee,
            )
        )

    subtotal = base_rate + extra_guest_fees + amenities_total
    service_fee = subtotal * policy.service_fee_rate
    taxes = subtotal * policy.stay_tax_rate
    total = subtotal + service_fee + taxes
    logger.debug("Stay quote: %s night(s), subtotal %.2f, total %.2f", nights, subtotal, total)
    return StayCostBreakdown(
        base_rate=base_rate,
        extra_guest_fees=extra_guest_fees,
        amenities_total=amenities_total,
        subtotal=subtotal,
        service_fee=service_fee,
        taxes=taxes,
        total=total,
        nights=nights,
        room_breakdown=room_breakdown,
    )


def compute_package_costs(
    package: Optional[Package],
    guests: int,
    amenities_total: float,
    *,
    policy: PricingPolicy = DEFAULT_PRICING,
) -> PackageCostBreakdown:
    if package is None:
        return PackageCostBreakdown(
            base_price=0.0,
            amenities_total=amenities_total,
            subtotal=amenities_total,
            service_fee=0.0,
            taxes=0.0,
            total=amenities_total,
        )
    if guests < 0:
        raise ValueError("guests must not be negative")

    base_price = package.price * guests
    subtotal = base_price + amenities_total
    service_fee = subtotal * policy.service_fee_rate
    taxes = subtotal * policy.package_tax_rate
    total = subtotal + service_fee + taxes
    logger.debug("Package quote for %s: %s guest(s), total %.2f", package.id, guests, total)
    return PackageCostBreakdown(
        base_price=base_price,
        amenities_total=amenities_total,
        subtotal=subtotal,
        service_fee=service_fee,
        taxes=taxes,
        total=total,
    )
