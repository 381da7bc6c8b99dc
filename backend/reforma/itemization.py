"""Itemized bill of quantities for an estimate.

The breakdown is a presentational decomposition of the same fee-floored
room costs that make up the estimate total; it is never priced
independently.  Each room's final cost is treated as tax-inclusive:

    net         = final / (1 + tax_rate)
    tax         = final - net
    direct      = net / (1 + overhead_pct + contingency_pct)
    overhead    = direct * overhead_pct
    contingency = direct * contingency_pct

The direct cost is then spread over a bill of quantities.  The room's
floor, wall and built-in selections pull in catalog assemblies, and each
assembly item gets a quantity from the room's area, perimeter or net wall
area.  The project-level items (site setup, protection, cleanup) are
charged against the rooms in proportion to floor area.  Every item is
weighted by its catalog cost (quantity x unit cost x waste), and the
weights are scaled so that a room's items, plus its share of the project
items, add up to the room's direct cost.

A room none of whose selections has an assembly falls back to a plain
materials / labor split of its direct cost by ``materials_share``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import localcontext
from typing import TYPE_CHECKING

from reforma.data.catalog import ASSEMBLY_AXES, PROJECT_ITEMS
from reforma.exceptions import InvalidInputError
from reforma.models.enums import CostType, QuantityBasis
from reforma.models.estimate import EstimateSummary, LineItem
from reforma.rounding import MONEY_CONTEXT, allocate_cents

if TYPE_CHECKING:
    from reforma.config import PricingConfig
    from reforma.data.catalog import AssemblyItem, CatalogItem
    from reforma.data.repository import MultiplierRepository
    from reforma.models.estimate import RoomBreakdown

_ROOM_SHARE_CODES: dict[CostType, str] = {
    CostType.OVERHEAD: "OVERHEAD",
    CostType.CONTINGENCY: "CONTINGENCY",
    CostType.TAX: "TAX",
}


@dataclass(frozen=True)
class _Draft:
    """A bill-of-quantities line before it is scaled to the priced cost."""

    item: CatalogItem
    assembly_code: str | None
    quantity: float
    waste_pct: float

    @property
    def weight(self) -> float:
        return self.quantity * self.item.base_unit_cost * (1 + self.waste_pct)


def split_room_cost(final_cost: float, config: PricingConfig) -> dict[CostType, float]:
    """Split a tax-inclusive room cost into direct, overhead, contingency and tax.

    Materials and labor are returned as the ``materials_share`` split of
    the direct cost; the bill of quantities replaces that split where the
    room has assemblies.
    """
    net = final_cost / (1 + config.tax_rate)
    direct = net / (1 + config.overhead_pct + config.contingency_pct)
    materials = direct * config.materials_share
    return {
        CostType.MATERIAL: materials,
        CostType.LABOR: direct - materials,
        CostType.OVERHEAD: direct * config.overhead_pct,
        CostType.CONTINGENCY: direct * config.contingency_pct,
        CostType.TAX: final_cost - net,
    }


def room_quantities(room: RoomBreakdown) -> dict[QuantityBasis, float]:
    """The measurements assembly quantities are taken from."""
    return {
        QuantityBasis.AREA: room.area_m2,
        QuantityBasis.PERIMETER: room.perimeter_m,
        QuantityBasis.WALL_AREA: room.wall_area_m2,
        QuantityBasis.CEILING_AREA: room.area_m2,
        QuantityBasis.FIXED: 1.0,
    }


def _draft(
    use: AssemblyItem,
    quantities: dict[QuantityBasis, float],
    repository: MultiplierRepository,
    assembly_code: str | None,
) -> _Draft:
    item = repository.catalog_item(use.catalog_code)
    return _Draft(
        item=item,
        assembly_code=assembly_code,
        quantity=quantities[use.basis] * use.qty_multiplier,
        waste_pct=item.waste_pct if use.include_waste else 0.0,
    )


def _room_drafts(room: RoomBreakdown, repository: MultiplierRepository) -> list[_Draft]:
    """Unscaled bill-of-quantities lines for the room's selections."""
    selections = {
        axis: getattr(room, axis.value).label for axis in ASSEMBLY_AXES
    }
    quantities = room_quantities(room)
    drafts: list[_Draft] = []
    for axis, label in selections.items():
        assembly = repository.assembly_for(axis, label)
        if assembly is None:
            continue
        drafts.extend(
            _draft(use, quantities, repository, assembly.code) for use in assembly.items
        )
    return drafts


def _line(
    draft: _Draft, amount: float, room_index: int | None,
) -> LineItem:
    return LineItem(
        code=draft.item.code,
        name=draft.item.name,
        cost_type=draft.item.cost_type,
        room_index=room_index,
        assembly_code=draft.assembly_code,
        unit=draft.item.unit,
        quantity=draft.quantity,
        unit_cost=amount / draft.quantity if draft.quantity > 0 else 0.0,
        waste_pct=draft.waste_pct,
        amount=amount,
    )


def _lump(
    code: str, name: str, cost_type: CostType, room_index: int, amount: float,
) -> LineItem:
    return LineItem(
        code=code,
        name=name,
        cost_type=cost_type,
        room_index=room_index,
        unit="fixed",
        quantity=1.0,
        unit_cost=amount,
        amount=amount,
    )


def itemize(
    rooms: list[RoomBreakdown],
    repository: MultiplierRepository,
    config: PricingConfig,
) -> list[LineItem]:
    """Build the flat line item list: room items in room order, then project items.

    Raises:
        InvalidInputError: If a room's quantities cannot be weighted.
    """
    drafts = {room.room_index: _room_drafts(room, repository) for room in rooms}
    assembled = [room for room in rooms if drafts[room.room_index]]

    project_area = math.fsum(room.area_m2 for room in assembled)
    project_quantities = {
        QuantityBasis.AREA: project_area,
        QuantityBasis.CEILING_AREA: project_area,
        QuantityBasis.FIXED: 1.0,
    }
    project_drafts = (
        [_draft(use, project_quantities, repository, None) for use in PROJECT_ITEMS]
        if assembled else []
    )
    project_weight = math.fsum(d.weight for d in project_drafts)

    line_items: list[LineItem] = []
    # sum over rooms of (area share x room scale), applied to the project items
    project_scale = 0.0
    for room in rooms:
        parts = split_room_cost(room.final_cost, config)
        direct = parts[CostType.MATERIAL] + parts[CostType.LABOR]
        label = room.room_type.label
        bill = drafts[room.room_index]

        if bill:
            share = room.area_m2 / project_area
            weight = math.fsum(d.weight for d in bill) + project_weight * share
            scale = direct / weight if weight > 0 else math.inf
            if not (math.isfinite(weight) and math.isfinite(scale)):
                raise InvalidInputError(
                    f"rooms[{room.room_index}]",
                    "dimensions are outside the range that can be priced",
                )
            project_scale += share * scale
            line_items.extend(
                _line(d, d.weight * scale, room.room_index) for d in bill
            )
        else:
            line_items.append(LineItem(
                code="ROOM_MATERIALS",
                name=f"{label} materials",
                cost_type=CostType.MATERIAL,
                room_index=room.room_index,
                quantity=room.area_m2,
                unit_cost=parts[CostType.MATERIAL] / room.area_m2,
                amount=parts[CostType.MATERIAL],
            ))
            line_items.append(LineItem(
                code="ROOM_LABOR",
                name=f"{label} labor",
                cost_type=CostType.LABOR,
                room_index=room.room_index,
                quantity=room.area_m2,
                unit_cost=parts[CostType.LABOR] / room.area_m2,
                amount=parts[CostType.LABOR],
            ))

        for cost_type, code in _ROOM_SHARE_CODES.items():
            line_items.append(_lump(
                code, f"{label} {cost_type.value}", cost_type, room.room_index,
                parts[cost_type],
            ))

    line_items.extend(_line(d, d.weight * project_scale, None) for d in project_drafts)
    return line_items


def summarize(line_items: list[LineItem], total: float) -> EstimateSummary:
    """Roll line items up into a cent-rounded category summary.

    *total* is the unrounded sum of final room costs.  Categories are
    rounded by largest remainder, so they add up to the rounded total to
    the cent and none moves more than a cent from its exact sum.
    """
    sums: dict[CostType, float] = {
        cost_type: math.fsum(li.amount for li in line_items if li.cost_type == cost_type)
        for cost_type in CostType
    }
    cents = allocate_cents(sums, total)
    with localcontext(MONEY_CONTEXT):
        total_c = sum(cents.values())
        before_tax = total_c - cents[CostType.TAX]

    return EstimateSummary(
        materials=float(cents[CostType.MATERIAL]),
        labor=float(cents[CostType.LABOR]),
        overhead=float(cents[CostType.OVERHEAD]),
        contingency=float(cents[CostType.CONTINGENCY]),
        tax_total=float(cents[CostType.TAX]),
        subtotal_before_tax=float(before_tax),
        total=float(total_c),
    )
