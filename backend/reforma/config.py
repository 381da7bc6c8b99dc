"""Pricing configuration for the reforma estimation engine."""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, Field, model_validator

from reforma.data.multipliers import (
    BASE_RATE_PER_M2,
    DEFAULT_CURRENCY,
    MIN_ROOM_FEE,
    PRICING_VERSION,
)

logger = logging.getLogger(__name__)

ENV_PREFIX = "REFORMA_"


class PricingConfig(BaseModel):
    """Rates, fees and percentages applied on top of the multiplier tables.

    Defaults reproduce pricing version ``v1.1``: 450 EUR/m², a 600 EUR
    minimum per room, 21% VAT, 15% overhead and 8% contingency.
    ``materials_share`` is the fraction of direct cost attributed to
    materials; the rest is labor.
    """

    model_config = ConfigDict(frozen=True)

    base_rate_per_m2: float = Field(default=BASE_RATE_PER_M2, gt=0)
    min_room_fee: float = Field(default=MIN_ROOM_FEE, ge=0)
    currency: str = DEFAULT_CURRENCY
    pricing_version: str = PRICING_VERSION
    tax_rate: float = Field(default=0.21, ge=0)
    overhead_pct: float = Field(default=0.15, ge=0)
    contingency_pct: float = Field(default=0.08, ge=0)
    materials_share: float = Field(default=0.45, ge=0, le=1)
    default_ceiling_height_m: float = Field(default=2.6, gt=0)
    wall_openings_pct: float = Field(default=0.10, ge=0, lt=1)

    @model_validator(mode="after")
    def currency_is_iso_code(self) -> PricingConfig:
        if len(self.currency) != 3 or not self.currency.isalpha():
            msg = f"currency must be a 3-letter ISO code, got {self.currency!r}"
            raise ValueError(msg)
        return self

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> PricingConfig:
        """Build a config from ``REFORMA_*`` environment variables.

        Each field maps to ``REFORMA_<FIELD_NAME>`` (e.g.
        ``REFORMA_BASE_RATE_PER_M2``).  Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, str] = {}
        for name in cls.model_fields:
            value = env.get(f"{ENV_PREFIX}{name.upper()}")
            if value is not None and value != "":
                overrides[name] = value
        if overrides:
            logger.info("Pricing config overrides from environment: %s", sorted(overrides))
        return cls.model_validate(overrides)
