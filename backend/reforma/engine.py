"""Core cost estimation engine for the reforma renovation estimator.

The CostEngine prices a renovation project room by room:

1. **Validation** — reject projects without rooms or with missing /
   non-positive dimensions.
2. **Project multipliers** — resolve location and property age, plus any
   supplied property type, condition, access difficulty and urgency, once
   per project.
3. **Room pricing** — base cost (area x base rate per m²) times the product
   of every applicable project and room multiplier, floored at the minimum
   room fee.
4. **Aggregation** — subtotal (sum of adjusted costs) and total (sum of
   fee-floored costs), rounded to cents only at this step.
5. **Itemization** — spread each room's cost over a bill of quantities
   built from its finish assemblies, plus overhead, contingency and tax
   lines, reconciling to the total.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from reforma.config import PricingConfig
from reforma.footprint import room_geometry, square_footprint, uses_derived_footprint
from reforma.exceptions import InvalidInputError
from reforma.itemization import itemize, summarize
from reforma.models.enums import MultiplierAxis
from reforma.models.estimate import (
    AppliedMultiplier,
    EstimateResult,
    PricingAssumptions,
    ProjectMultipliers,
    RoomBreakdown,
)
from reforma.rounding import round_money
from reforma.validation import validate_footprint, validate_project

if TYPE_CHECKING:
    from reforma.data.repository import MultiplierRepository
    from reforma.footprint import FootprintStrategy
    from reforma.models.project import ProjectInput, RoomInput

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"


class CostEngine:
    """Converts a ProjectInput into an EstimateResult.

    Args:
        repository: Multiplier tables used to resolve every option label.
        config: Base rate, minimum fee, currency and itemization percentages.
        footprint: Transformation applied to each room before pricing;
            defaults to the synthetic square for whole-property rooms.

    Example::

        from reforma.data.repository import MultiplierRepository

        engine = CostEngine(MultiplierRepository())
        result = engine.estimate(project)
    """

    def __init__(
        self,
        repository: MultiplierRepository,
        config: PricingConfig | None = None,
        footprint: FootprintStrategy = square_footprint,
    ) -> None:
        self._repository = repository
        self._config = config or PricingConfig()
        self._footprint = footprint

    @property
    def repository(self) -> MultiplierRepository:
        return self._repository

    @property
    def config(self) -> PricingConfig:
        return self._config

    def estimate(self, project: ProjectInput) -> EstimateResult:
        """Produce an itemized estimate for *project*.

        Raises:
            InvalidInputError: If the project has no rooms or a room has an
                unusable footprint.
            ConfigurationError: If any option label is not in its table.
        """
        validate_project(project)

        multipliers = self.resolve_project_multipliers(project)
        rooms = [
            self.calculate_room(room, multipliers, room_index=i)
            for i, room in enumerate(project.rooms)
        ]

        try:
            subtotal = math.fsum(r.adjusted_cost for r in rooms)
            total = math.fsum(r.final_cost for r in rooms)
            total_area = math.fsum(r.area_m2 for r in rooms)
        except OverflowError:
            raise InvalidInputError("rooms", "project is too large to price") from None

        line_items = itemize(rooms, self._repository, self._config)
        summary = summarize(line_items, total)

        cfg = self._config
        logger.debug(
            "Estimated %d room(s) in %s: subtotal=%.2f total=%.2f (%s)",
            len(rooms),
            project.location,
            subtotal,
            total,
            cfg.pricing_version,
        )

        return EstimateResult(
            rooms=rooms,
            multipliers=multipliers,
            base_rate_per_m2=cfg.base_rate_per_m2,
            min_room_fee=cfg.min_room_fee,
            pricing_version=cfg.pricing_version,
            currency=cfg.currency,
            subtotal=round_money(subtotal),
            total=round_money(total),
            summary=summary,
            line_items=line_items,
            assumptions=PricingAssumptions(
                tax_rate=cfg.tax_rate,
                overhead_pct=cfg.overhead_pct,
                contingency_pct=cfg.contingency_pct,
                materials_share=cfg.materials_share,
                default_ceiling_height_m=cfg.default_ceiling_height_m,
                wall_openings_pct=cfg.wall_openings_pct,
            ),
            city=project.city,
            total_area_m2=total_area,
            room_count=len(rooms),
        )

    def resolve_project_multipliers(self, project: ProjectInput) -> ProjectMultipliers:
        """Resolve the project-level multipliers once for all rooms."""
        return ProjectMultipliers(
            location=self._apply(MultiplierAxis.LOCATION, project.location),
            property_age=self._apply(MultiplierAxis.PROPERTY_AGE, project.property_age),
            property_type=self._apply_optional(
                MultiplierAxis.PROPERTY_TYPE, project.property_type,
            ),
            property_condition=self._apply_optional(
                MultiplierAxis.PROPERTY_CONDITION, project.property_condition,
            ),
            access_difficulty=self._apply_optional(
                MultiplierAxis.ACCESS_DIFFICULTY, project.access_difficulty,
            ),
            urgency=self._apply_optional(MultiplierAxis.URGENCY, project.urgency),
        )

    def calculate_room(
        self,
        room: RoomInput,
        project_multipliers: ProjectMultipliers,
        room_index: int = 0,
    ) -> RoomBreakdown:
        """Price a single room against already-resolved project multipliers.

        Values are left unrounded; rounding happens once in ``estimate``.

        Raises:
            InvalidInputError: If the room has no usable footprint.
            ConfigurationError: If a room option label is not in its table.
        """
        priced = self._footprint(room)
        validate_footprint(priced, room_index)
        # validate_footprint guarantees both dimensions are set
        width = float(priced.width)  # type: ignore[arg-type]
        length = float(priced.length)  # type: ignore[arg-type]

        room_type = self._apply(MultiplierAxis.ROOM_TYPE, room.room_type)
        floor = self._apply(MultiplierAxis.FLOOR_FINISH, room.floor_finish)
        wall = self._apply(MultiplierAxis.WALL_FINISH, room.wall_finish)
        furniture = self._apply(MultiplierAxis.BUILT_IN_FURNITURE, room.built_in_furniture)
        ceiling = self._apply_optional(MultiplierAxis.CEILING_HEIGHT, room.ceiling_height)
        electrical = self._apply_optional(
            MultiplierAxis.ELECTRICAL_SCOPE, room.electrical_scope,
        )
        plumbing = self._apply_optional(MultiplierAxis.PLUMBING_SCOPE, room.plumbing_scope)

        geometry = room_geometry(
            width,
            length,
            ceiling_height_m=self._ceiling_height_m(room.ceiling_height),
            wall_openings_pct=self._config.wall_openings_pct,
        )

        room_factors = [room_type, floor, wall, furniture, ceiling, electrical, plumbing]
        combined = project_multipliers.combined * math.prod(
            m.value for m in room_factors if m is not None
        )

        base_cost = geometry.area_m2 * self._config.base_rate_per_m2
        adjusted_cost = base_cost * combined
        if not all(
            math.isfinite(v)
            for v in (geometry.perimeter_m, geometry.wall_area_m2, adjusted_cost)
        ):
            raise InvalidInputError(
                f"rooms[{room_index}]", "dimensions are outside the range that can be priced",
            )
        final_cost = max(adjusted_cost, self._config.min_room_fee)

        return RoomBreakdown(
            room_index=room_index,
            room_type=room_type,
            width_m=geometry.width_m,
            length_m=geometry.length_m,
            area_m2=geometry.area_m2,
            derived_footprint=uses_derived_footprint(room),
            perimeter_m=geometry.perimeter_m,
            ceiling_height_m=geometry.ceiling_height_m,
            wall_area_m2=geometry.wall_area_m2,
            floor_finish=floor,
            wall_finish=wall,
            built_in_furniture=furniture,
            ceiling_height=ceiling,
            electrical_scope=electrical,
            plumbing_scope=plumbing,
            combined_multiplier=combined,
            base_cost=base_cost,
            adjusted_cost=adjusted_cost,
            final_cost=final_cost,
            min_fee_applied=adjusted_cost < self._config.min_room_fee,
        )

    def _apply(self, axis: MultiplierAxis, label: str) -> AppliedMultiplier:
        return AppliedMultiplier(label=label, value=self._repository.resolve(axis, label))

    def _apply_optional(
        self, axis: MultiplierAxis, label: str | None,
    ) -> AppliedMultiplier | None:
        if label is None:
            return None
        return self._apply(axis, label)

    def _ceiling_height_m(self, label: str | None) -> float:
        if label is None:
            return self._config.default_ceiling_height_m
        return self._repository.ceiling_height_m(label)
