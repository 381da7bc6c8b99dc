"""Estimate output models for the reforma estimation engine."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, Field

from reforma.models.enums import CostType


class AppliedMultiplier(BaseModel):
    """A selected option label and the multiplier it resolved to."""

    label: str
    value: float


class ProjectMultipliers(BaseModel):
    """Project-level multipliers resolved once per estimate.

    Optional axes are ``None`` when the caller did not supply them; they are
    then not applied to any room.
    """

    location: AppliedMultiplier
    property_age: AppliedMultiplier
    property_type: AppliedMultiplier | None = None
    property_condition: AppliedMultiplier | None = None
    access_difficulty: AppliedMultiplier | None = None
    urgency: AppliedMultiplier | None = None

    def applied(self) -> list[AppliedMultiplier]:
        """Return the multipliers that take part in pricing, in a fixed order."""
        candidates = [
            self.location,
            self.property_age,
            self.property_type,
            self.property_condition,
            self.access_difficulty,
            self.urgency,
        ]
        return [m for m in candidates if m is not None]

    @property
    def combined(self) -> float:
        return math.prod(m.value for m in self.applied())


class RoomBreakdown(BaseModel):
    """Pricing derivation for a single room.

    Every multiplier that took part is preserved so the price can be
    audited: ``adjusted_cost == base_cost * combined_multiplier`` and
    ``final_cost == max(adjusted_cost, min_room_fee)``.  Values are not
    rounded.
    """

    room_index: int
    room_type: AppliedMultiplier
    width_m: float
    length_m: float
    area_m2: float
    derived_footprint: bool = False

    # Geometry (informational)
    perimeter_m: float
    ceiling_height_m: float
    wall_area_m2: float

    floor_finish: AppliedMultiplier
    wall_finish: AppliedMultiplier
    built_in_furniture: AppliedMultiplier
    ceiling_height: AppliedMultiplier | None = None
    electrical_scope: AppliedMultiplier | None = None
    plumbing_scope: AppliedMultiplier | None = None

    combined_multiplier: float
    base_cost: float
    adjusted_cost: float
    final_cost: float
    min_fee_applied: bool


class LineItem(BaseModel):
    """One row of the bill of quantities.

    ``room_index`` is ``None`` for project-level items such as site setup.
    ``unit_cost`` is the priced cost per unit including waste, so
    ``quantity * unit_cost == amount``.
    """

    code: str
    name: str
    cost_type: CostType
    room_index: int | None = None
    assembly_code: str | None = None
    unit: str = "m2"
    quantity: float
    unit_cost: float
    waste_pct: float = 0.0
    amount: float


class EstimateSummary(BaseModel):
    """Category rollup of the estimate total, rounded to cents.

    ``materials + labor + overhead + contingency + tax_total == total``.
    """

    materials: float
    labor: float
    overhead: float
    contingency: float
    tax_total: float
    subtotal_before_tax: float
    total: float


class PricingAssumptions(BaseModel):
    """Rates and percentages that shaped the itemized breakdown."""

    tax_rate: float
    overhead_pct: float
    contingency_pct: float
    materials_share: float
    default_ceiling_height_m: float
    wall_openings_pct: float


class EstimateResult(BaseModel):
    """Complete estimate output.

    ``subtotal`` is the sum of adjusted room costs before the minimum fee;
    ``total`` is the sum of fee-floored room costs actually charged, so
    ``total >= subtotal``.  Both are rounded to 2 decimal places.
    """

    rooms: list[RoomBreakdown]
    multipliers: ProjectMultipliers
    base_rate_per_m2: float
    min_room_fee: float
    pricing_version: str
    currency: str
    subtotal: float
    total: float
    summary: EstimateSummary
    line_items: list[LineItem] = Field(default_factory=list)
    assumptions: PricingAssumptions
    city: str = ""
    total_area_m2: float
    room_count: int

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with display strings for a client UI."""
        from reforma.formatting import format_currency, format_quantity

        return {
            "pricing_version": self.pricing_version,
            "currency": self.currency,
            "location": self.multipliers.location.label,
            "city": self.city,
            "room_count": self.room_count,
            "total_area_formatted": format_quantity(self.total_area_m2, "m²"),
            "subtotal_formatted": format_currency(self.subtotal, self.currency),
            "total_formatted": format_currency(self.total, self.currency),
            "tax_formatted": format_currency(self.summary.tax_total, self.currency),
            "rooms": [
                {
                    "room_type": r.room_type.label,
                    "area_formatted": format_quantity(r.area_m2, "m²"),
                    "cost_formatted": format_currency(r.final_cost, self.currency),
                    "min_fee_applied": r.min_fee_applied,
                }
                for r in self.rooms
            ],
        }
