"""Refund amounts for cancelled bookings."""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Sequence

FREE_CANCELLATION_WINDOW = timedelta(hours=24)


@dataclass(frozen=True, slots=True)
class CancellationPolicy:
    id: str
    name: str
    description: str
    days_before_check_in: int
    refund_rate: float
    processing_fee: float


DEFAULT_CANCELLATION_POLICIES: tuple[CancellationPolicy, ...] = (
    CancellationPolicy(
        id="free-24h",
        name="Free Cancellation (24 hours)",
        description="Cancel within 24 hours of booking for full refund",
        days_before_check_in=999,
        refund_rate=1.0,
        processing_fee=0.0,
    ),
    CancellationPolicy(
        id="standard-7d",
        name="Standard Cancellation (7+ days)",
        description="Cancel 7 or more days before check-in for 75% refund",
        days_before_check_in=7,
        refund_rate=0.75,
        processing_fee=25.0,
    ),
    CancellationPolicy(
        id="late-2d",
        name="Late Cancellation (2-7 days)",
        description="Cancel 2-7 days before check-in for 50% refund",
        days_before_check_in=2,
        refund_rate=0.50,
        processing_fee=50.0,
    ),
    CancellationPolicy(
        id="no-refund-48h",
        name="No Refund (Less than 48 hours)",
        description="Cancel less than 48 hours before check-in - no refund",
        days_before_check_in=0,
        refund_rate=0.0,
        processing_fee=100.0,
    ),
)


@dataclass(frozen=True, slots=True)
class RefundQuote:
    policy: CancellationPolicy
    days_until_check_in: int
    refund_amount: float
    processing_fee: float
    total_refund: float

    def to_dict(self) -> dict[str, object]:
        return {
            "policy_id": self.policy.id,
            "policy_name": self.policy.name,
            "days_until_check_in": self.days_until_check_in,
            "refund_amount": round(self.refund_amount, 2),
            "processing_fee": round(self.processing_fee, 2),
            "total_refund": round(self.total_refund, 2),
        }


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def calculate_refund(
    total_amount: float,
    check_in: date,
    booked_at: datetime,
    cancelled_at: datetime,
    policies: Sequence[CancellationPolicy] = DEFAULT_CANCELLATION_POLICIES,
) -> RefundQuote:
    """Pick the applicable cancellation tier and compute the refund.

    The first policy is the grace tier for cancellations soon after booking;
    the rest are checked in order against the days left before check-in.
    """
    if not policies:
        raise ValueError("at least one cancellation policy is required")

    remaining = _as_datetime(check_in) - cancelled_at
    days_until_check_in = math.ceil(remaining.total_seconds() / 86400)

    if cancelled_at - booked_at <= FREE_CANCELLATION_WINDOW:
        policy = policies[0]
    else:
        tiers = policies[1:] or policies
        # Once check-in has passed no threshold matches and the last (strictest) tier applies, not the grace tier.
        policy = next(
            (tier for tier in tiers if days_until_check_in >= tier.days_before_check_in),
            tiers[-1],
        )

    refund_amount = total_amount * policy.refund_rate
    return RefundQuote(
        policy=policy,
        days_until_check_in=days_until_check_in,
        refund_amount=refund_amount,
        processing_fee=policy.processing_fee,
        total_refund=max(0.0, refund_amount - policy.processing_fee),
    )


def can_cancel(status: str, check_in: date, check_out: date, now: datetime) -> bool:
    if status == "cancelled":
        return False
    if now >= _as_datetime(check_in) or now >= _as_datetime(check_out):
        return False
    return True
