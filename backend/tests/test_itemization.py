"""Tests for the bill of quantities and the category summary."""

from __future__ import annotations

import math

import pytest

from reforma.config import PricingConfig
from reforma.data.repository import MultiplierRepository
from reforma.exceptions import InvalidInputError
from reforma.itemization import itemize, room_quantities, split_room_cost, summarize
from reforma.models.enums import CostType, QuantityBasis
from reforma.models.estimate import AppliedMultiplier, RoomBreakdown

PROJECT_CODES = ["PROJ_SITE_SETUP", "PROJ_PROTECTION", "PROJ_CLEANUP"]
DIRECT = (CostType.MATERIAL, CostType.LABOR)


def _breakdown(
    final_cost: float,
    room_index: int = 0,
    area: float = 10.0,
    floor: str = "x",
    wall: str = "x",
    furniture: str = "x",
) -> RoomBreakdown:
    width, length = 2.0, area / 2.0
    perimeter = 2 * (width + length)
    return RoomBreakdown(
        room_index=room_index,
        room_type=AppliedMultiplier(label="Bathroom", value=1.55),
        width_m=width,
        length_m=length,
        area_m2=area,
        perimeter_m=perimeter,
        ceiling_height_m=2.6,
        wall_area_m2=perimeter * 2.6 * 0.9,
        floor_finish=AppliedMultiplier(label=floor, value=1.0),
        wall_finish=AppliedMultiplier(label=wall, value=1.0),
        built_in_furniture=AppliedMultiplier(label=furniture, value=1.0),
        combined_multiplier=1.0,
        base_cost=final_cost,
        adjusted_cost=final_cost,
        final_cost=final_cost,
        min_fee_applied=False,
    )


def _finished(final_cost: float, room_index: int = 0, area: float = 10.0) -> RoomBreakdown:
    return _breakdown(
        final_cost,
        room_index=room_index,
        area=area,
        floor="Hardwood",
        wall="Paint (Standard)",
        furniture="Bathroom Vanity",
    )


@pytest.fixture(scope="module")
def repo() -> MultiplierRepository:
    return MultiplierRepository()


def _direct(final_cost: float, config: PricingConfig) -> float:
    parts = split_room_cost(final_cost, config)
    return parts[CostType.MATERIAL] + parts[CostType.LABOR]


class TestSplitRoomCost:
    def test_reference_split(self) -> None:
        parts = split_room_cost(1210.0, PricingConfig())
        assert parts[CostType.TAX] == pytest.approx(210.0)
        assert parts[CostType.OVERHEAD] == pytest.approx(121.95, abs=0.01)
        assert parts[CostType.CONTINGENCY] == pytest.approx(65.04, abs=0.01)
        assert parts[CostType.MATERIAL] == pytest.approx(365.85, abs=0.01)
        assert parts[CostType.LABOR] == pytest.approx(447.15, abs=0.01)

    def test_parts_add_to_final(self) -> None:
        parts = split_room_cost(987.65, PricingConfig())
        assert math.fsum(parts.values()) == pytest.approx(987.65)

    def test_zero_rates(self) -> None:
        config = PricingConfig(
            tax_rate=0.0, overhead_pct=0.0, contingency_pct=0.0, materials_share=1.0,
        )
        parts = split_room_cost(500.0, config)
        assert parts[CostType.MATERIAL] == pytest.approx(500.0)
        assert parts[CostType.LABOR] == pytest.approx(0.0)
        assert parts[CostType.TAX] == pytest.approx(0.0)

    def test_zero_contingency_is_exactly_zero(self) -> None:
        parts = split_room_cost(1234.567, PricingConfig(contingency_pct=0.0))
        assert parts[CostType.CONTINGENCY] == 0.0


class TestRoomQuantities:
    def test_bases(self) -> None:
        room = _breakdown(500.0, area=12.0)
        quantities = room_quantities(room)
        assert quantities[QuantityBasis.AREA] == 12.0
        assert quantities[QuantityBasis.PERIMETER] == pytest.approx(16.0)
        assert quantities[QuantityBasis.WALL_AREA] == pytest.approx(16.0 * 2.6 * 0.9)
        assert quantities[QuantityBasis.FIXED] == 1.0


# ---------------------------------------------------------------------------
# Rooms without assemblies
# ---------------------------------------------------------------------------


class TestPlainRooms:
    def test_materials_labor_split(self, repo: MultiplierRepository) -> None:
        items = itemize([_breakdown(1210.0, room_index=2)], repo, PricingConfig())
        assert [li.code for li in items] == [
            "ROOM_MATERIALS", "ROOM_LABOR", "OVERHEAD", "CONTINGENCY", "TAX",
        ]
        assert [li.cost_type for li in items] == list(CostType)
        assert items[0].name == "Bathroom materials"
        assert all(li.room_index == 2 for li in items)

    def test_no_project_items(self, repo: MultiplierRepository) -> None:
        items = itemize([_breakdown(1210.0)], repo, PricingConfig())
        assert not any(li.code in PROJECT_CODES for li in items)

    def test_unit_cost_times_quantity(self, repo: MultiplierRepository) -> None:
        for li in itemize([_breakdown(1210.0, area=8.0)], repo, PricingConfig()):
            assert li.unit_cost * li.quantity == pytest.approx(li.amount)


# ---------------------------------------------------------------------------
# Bill of quantities
# ---------------------------------------------------------------------------


class TestBillOfQuantities:
    def test_assembly_lines(self, repo: MultiplierRepository) -> None:
        items = itemize([_finished(1210.0)], repo, PricingConfig())
        assemblies = {li.assembly_code for li in items if li.assembly_code}
        assert assemblies == {"FLOOR_HARDWOOD", "WALL_PAINT_STANDARD", "BUILTIN_VANITY"}
        codes = [li.code for li in items]
        assert "FLOOR_HARDWOOD_SUPPLY" in codes
        assert "BUILTIN_VANITY_SUPPLY" in codes

    def test_units(self, repo: MultiplierRepository) -> None:
        items = itemize([_finished(1210.0)], repo, PricingConfig())
        units = {li.unit for li in items}
        assert {"m2", "lm", "item", "fixed"} <= units

    def test_quantities_follow_room(self, repo: MultiplierRepository) -> None:
        room = _finished(1210.0, area=12.0)
        items = {li.code: li for li in itemize([room], repo, PricingConfig())}
        assert items["FLOOR_HARDWOOD_SUPPLY"].quantity == 12.0
        assert items["FLOOR_HARDWOOD_SUPPLY"].waste_pct == pytest.approx(0.10)
        assert items["FLOOR_HARDWOOD_LABOR"].waste_pct == 0.0
        assert items["FLOOR_SKIRTING_SUPPLY"].quantity == pytest.approx(room.perimeter_m)
        assert items["WALL_PREP"].quantity == pytest.approx(room.wall_area_m2)
        assert items["BUILTIN_VANITY_SUPPLY"].quantity == 1.0

    def test_lines_keep_catalog_proportions(self, repo: MultiplierRepository) -> None:
        items = {li.code: li for li in itemize([_finished(1210.0)], repo, PricingConfig())}
        supply = items["BUILTIN_VANITY_SUPPLY"]
        install = items["BUILTIN_VANITY_INSTALL"]
        assert supply.amount / install.amount == pytest.approx(450.0 / 180.0)

    def test_unit_cost_times_quantity(self, repo: MultiplierRepository) -> None:
        for li in itemize([_finished(1210.0)], repo, PricingConfig()):
            assert li.unit_cost * li.quantity == pytest.approx(li.amount)

    def test_share_lines_are_fixed(self, repo: MultiplierRepository) -> None:
        items = itemize([_finished(1210.0)], repo, PricingConfig())
        shares = [li for li in items if li.code in ("OVERHEAD", "CONTINGENCY", "TAX")]
        assert len(shares) == 3
        for li in shares:
            assert li.unit == "fixed"
            assert li.quantity == 1.0
            assert li.room_index == 0

    def test_project_items_last(self, repo: MultiplierRepository) -> None:
        rooms = [_finished(1210.0, room_index=0), _finished(800.0, room_index=1)]
        items = itemize(rooms, repo, PricingConfig())
        assert [li.code for li in items[-3:]] == PROJECT_CODES
        assert all(li.room_index is None for li in items[-3:])
        assert all(li.room_index is not None for li in items[:-3])
        assert items[-3].unit == "fixed"
        assert items[-2].quantity == pytest.approx(20.0)

    def test_single_room_reconciles(self, repo: MultiplierRepository) -> None:
        config = PricingConfig()
        items = itemize([_finished(1210.0)], repo, config)
        direct = math.fsum(li.amount for li in items if li.cost_type in DIRECT)
        assert direct == pytest.approx(_direct(1210.0, config))
        assert math.fsum(li.amount for li in items) == pytest.approx(1210.0)

    def test_rooms_reconcile_with_project_share(self, repo: MultiplierRepository) -> None:
        config = PricingConfig()
        rooms = [
            _finished(1210.0, room_index=0, area=10.0),
            _finished(3000.0, room_index=1, area=30.0),
            _breakdown(500.0, room_index=2, area=5.0),
        ]
        items = itemize(rooms, repo, config)
        project = math.fsum(li.amount for li in items if li.room_index is None)

        shares = []
        for room in rooms:
            own = math.fsum(
                li.amount for li in items
                if li.room_index == room.room_index and li.cost_type in DIRECT
            )
            shares.append(_direct(room.final_cost, config) - own)
        # the plain room funds no project items
        assert shares[2] == pytest.approx(0.0, abs=1e-9)
        assert shares[0] > 0
        assert shares[1] > 0
        assert math.fsum(shares) == pytest.approx(project)
        assert math.fsum(li.amount for li in items) == pytest.approx(4710.0)

    def test_unpriceable_room(self, repo: MultiplierRepository) -> None:
        room = _finished(1210.0, area=math.inf)
        with pytest.raises(InvalidInputError) as exc_info:
            itemize([room], repo, PricingConfig())
        assert exc_info.value.field == "rooms[0]"


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


def _parts(summary) -> tuple[float, ...]:
    return (
        summary.materials,
        summary.labor,
        summary.overhead,
        summary.contingency,
        summary.tax_total,
    )


class TestSummarize:
    def test_categories_reconcile_to_total(self, repo: MultiplierRepository) -> None:
        finals = [1210.0, 600.0, 333.33, 1234.567]
        rooms = [_breakdown(final, room_index=i) for i, final in enumerate(finals)]
        items = itemize(rooms, repo, PricingConfig())
        summary = summarize(items, math.fsum(finals))

        assert summary.total == 3377.9
        assert round(sum(_parts(summary)), 2) == summary.total
        assert summary.subtotal_before_tax == round(summary.total - summary.tax_total, 2)

    def test_categories_within_a_cent(self, repo: MultiplierRepository) -> None:
        finals = [1210.0, 777.77, 1234.567]
        rooms = [_finished(final, room_index=i) for i, final in enumerate(finals)]
        items = itemize(rooms, repo, PricingConfig())
        summary = summarize(items, math.fsum(finals))

        exact = {
            cost_type: math.fsum(li.amount for li in items if li.cost_type == cost_type)
            for cost_type in CostType
        }
        rounded = dict(zip(CostType, _parts(summary)))
        for cost_type in CostType:
            assert rounded[cost_type] == pytest.approx(exact[cost_type], abs=0.01)
            assert rounded[cost_type] >= 0
        assert round(sum(rounded.values()), 2) == summary.total

    def test_reference_summary(self, repo: MultiplierRepository) -> None:
        items = itemize([_breakdown(1210.0)], repo, PricingConfig())
        summary = summarize(items, 1210.0)
        assert summary.tax_total == 210.0
        assert summary.subtotal_before_tax == 1000.0
        assert summary.total == 1210.0
        assert summary.materials == pytest.approx(365.85, abs=0.01)
        assert summary.labor == pytest.approx(447.15, abs=0.01)
        assert summary.overhead == pytest.approx(121.95, abs=0.01)
        assert summary.contingency == pytest.approx(65.04, abs=0.01)

    def test_zero_contingency(self, repo: MultiplierRepository) -> None:
        config = PricingConfig(contingency_pct=0.0)
        finals = [1234.567, 987.65, 333.33]
        rooms = [_finished(final, room_index=i) for i, final in enumerate(finals)]
        items = itemize(rooms, repo, config)
        summary = summarize(items, math.fsum(finals))

        assert summary.contingency == 0.0
        assert all(part >= 0 for part in _parts(summary))
        assert round(sum(_parts(summary)), 2) == summary.total
