"""Runtime configuration for quoting.

Relies on pydantic-settings so that environment variables (prefixed with ``STAY_QUOTE_``)
can override defaults. Business rates default to the engine's named constants.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stay_quote.payments.schedule import (
    BALANCE_LEAD_DAYS,
    DEPOSIT_DUE_DAYS,
    DEPOSIT_RATE,
    PaymentPolicy,
)
from stay_quote.pricing.models import (
    PACKAGE_TAX_RATE,
    SERVICE_FEE_RATE,
    STAY_TAX_RATE,
    PricingPolicy,
)

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Captures runtime configuration for the quote engine and CLI."""

    log_level: str = Field(default="INFO")
    log_dir: Optional[Path] = Field(default=None, description="Write quotes.log here when set")
    catalog_path: Path = Field(
        default=Path("data/catalog.json"), description="Path to the property/package snapshot"
    )

    service_fee_rate: float = Field(default=SERVICE_FEE_RATE, description="Service fee on the subtotal")
    stay_tax_rate: float = Field(default=STAY_TAX_RATE, description="Tax on property stay subtotals")
    package_tax_rate: float = Field(default=PACKAGE_TAX_RATE, description="Tax on package subtotals")
    deposit_rate: float = Field(default=DEPOSIT_RATE, description="Share of the total due as deposit")
    deposit_due_days: int = Field(
        default=DEPOSIT_DUE_DAYS, description="Days after booking before the deposit is due"
    )
    balance_lead_days: int = Field(
        default=BALANCE_LEAD_DAYS, description="Days before arrival that the balance is due"
    )

    model_config = SettingsConfigDict(
        env_prefix="STAY_QUOTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_dir", mode="before")
    def _expand_log_dir(cls, value: str | Path | None) -> Optional[Path]:
        if value in (None, ""):
            return None
        return Path(value).expanduser()

    @field_validator("catalog_path", mode="before")
    def _expand_catalog_path(cls, value: str | Path) -> Path:
        if isinstance(value, Path):
            return value
        return Path(value).expanduser()

    @field_validator("service_fee_rate", "stay_tax_rate", "package_tax_rate", "deposit_rate")
    def _validate_rate(cls, value: float) -> float:
        if not 0 <= value <= 1:
            raise ValueError("rates must be between 0 and 1")
        return value

    @field_validator("deposit_due_days", "balance_lead_days")
    def _validate_window(cls, value: int) -> int:
        if value < 0:
            raise ValueError("day windows must not be negative")
        return value

    def pricing_policy(self) -> PricingPolicy:
        return PricingPolicy(
            service_fee_rate=self.service_fee_rate,
            stay_tax_rate=self.stay_tax_rate,
            package_tax_rate=self.package_tax_rate,
        )

    def payment_policy(self) -> PaymentPolicy:
        return PaymentPolicy(
            deposit_rate=self.deposit_rate,
            deposit_due_days=self.deposit_due_days,
            balance_lead_days=self.balance_lead_days,
        )

    def ensure_directories(self) -> None:
        """Create directories that must exist at runtime."""
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
