"""Two-installment payment plans.

A deposit is due shortly after booking and the balance is due ahead of
arrival. When arrival is already inside the balance window the balance is
due immediately.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

DEPOSIT_RATE = 0.30
DEPOSIT_DUE_DAYS = 7
BALANCE_LEAD_DAYS = 30


class PaymentTerm(str, Enum):
    DEPOSIT = "deposit"
    FULL = "full"


@dataclass(frozen=True, slots=True)
class PaymentPolicy:
    deposit_rate: float = DEPOSIT_RATE
    deposit_due_days: int = DEPOSIT_DUE_DAYS
    balance_lead_days: int = BALANCE_LEAD_DAYS


DEFAULT_PAYMENTS = PaymentPolicy()


@dataclass(frozen=True, slots=True)
class PaymentSchedule:
    deposit_amount: float
    balance_amount: float
    deposit_due_date: date
    balance_due_date: date

    def balance_due_immediately(self, today: date) -> bool:
        return self.balance_due_date <= today

    def to_dict(self) -> dict[str, object]:
        return {
            "deposit_amount": round(self.deposit_amount, 2),
            "balance_amount": round(self.balance_amount, 2),
            "deposit_due_date": self.deposit_due_date.isoformat(),
            "balance_due_date": self.balance_due_date.isoformat(),
        }


def compute_schedule(
    total: float,
    check_in: Optional[date],
    today: date,
    *,
    policy: PaymentPolicy = DEFAULT_PAYMENTS,
) -> Optional[PaymentSchedule]:
    """Split ``total`` into deposit and balance installments with due dates."""
    if total <= 0 or check_in is None:
        return None
    # Due dates are calendar days; drop any time of day before comparing.
    if isinstance(check_in, datetime):
        check_in = check_in.date()
    if isinstance(today, datetime):
        today = today.date()

    deposit_amount = total * policy.deposit_rate
    # Balance is derived by subtraction so the installments always sum to the total.
    balance_amount = total - deposit_amount
    deposit_due_date = today + timedelta(days=policy.deposit_due_days)
    balance_due_date = check_in - timedelta(days=policy.balance_lead_days)
    if balance_due_date <= today:
        balance_due_date = today

    schedule = PaymentSchedule(
        deposit_amount=deposit_amount,
        balance_amount=balance_amount,
        deposit_due_date=deposit_due_date,
        balance_due_date=balance_due_date,
    )
    logger.debug("Payment schedule for %.2f: %s", total, schedule)
    return schedule


def amount_due_now(
    schedule: Optional[PaymentSchedule],
    term: PaymentTerm | str,
    total: float,
) -> float:
    term = PaymentTerm(term)
    if term is PaymentTerm.FULL or schedule is None:
        return total
    return schedule.deposit_amount
