"""Payment plans and refunds."""

from .refunds import (
    DEFAULT_CANCELLATION_POLICIES,
    CancellationPolicy,
    RefundQuote,
    calculate_refund,
    can_cancel,
)
from .schedule import (
    BALANCE_LEAD_DAYS,
    DEFAULT_PAYMENTS,
    DEPOSIT_DUE_DAYS,
    DEPOSIT_RATE,
    PaymentPolicy,
    PaymentSchedule,
    PaymentTerm,
    amount_due_now,
    compute_schedule,
)

__all__ = [
    "BALANCE_LEAD_DAYS",
    "CancellationPolicy",
    "DEFAULT_CANCELLATION_POLICIES",
    "DEFAULT_PAYMENTS",
    "DEPOSIT_DUE_DAYS",
    "DEPOSIT_RATE",
    "PaymentPolicy",
    "PaymentSchedule",
    "PaymentTerm",
    "RefundQuote",
    "amount_due_now",
    "calculate_refund",
    "can_cancel",
    "compute_schedule",
]
