"""Tests for footprint derivation and room geometry."""

from __future__ import annotations

import pytest

from reforma.footprint import room_geometry, square_footprint, uses_derived_footprint
from reforma.models.project import ENTIRE_PROPERTY, RoomInput


def _entire_property(total_area: float | None = 100.0, **kwargs: object) -> RoomInput:
    return RoomInput(
        room_type=ENTIRE_PROPERTY,
        total_area=total_area,
        floor_finish="Laminate",
        wall_finish="Paint (Standard)",
        **kwargs,  # type: ignore[arg-type]
    )


class TestSquareFootprint:
    def test_total_area_gives_square(self) -> None:
        room = square_footprint(_entire_property(100.0))
        assert room.width == pytest.approx(10.0)
        assert room.length == pytest.approx(10.0)

    def test_area_preserved(self) -> None:
        room = square_footprint(_entire_property(73.5))
        assert room.width * room.length == pytest.approx(73.5)  # type: ignore[operator]

    def test_input_not_mutated(self) -> None:
        original = _entire_property(64.0)
        square_footprint(original)
        assert original.width is None
        assert original.length is None

    def test_other_rooms_unchanged(self) -> None:
        room = RoomInput(
            room_type="Kitchen",
            width=3.0,
            length=4.0,
            total_area=50.0,
            floor_finish="Hardwood",
            wall_finish="Tile",
        )
        assert square_footprint(room) is room

    def test_entire_property_with_dimensions_unchanged(self) -> None:
        room = _entire_property(None, width=8.0, length=12.0)
        result = square_footprint(room)
        assert result.width == 8.0
        assert result.length == 12.0

    def test_uses_derived_footprint(self) -> None:
        assert uses_derived_footprint(_entire_property(100.0))
        assert not uses_derived_footprint(_entire_property(None, width=8.0, length=12.0))

    def test_explicit_dimensions_preferred_over_total_area(self) -> None:
        room = _entire_property(100.0, width=8.0, length=12.0)
        assert not uses_derived_footprint(room)
        result = square_footprint(room)
        assert result.width == 8.0
        assert result.length == 12.0

    def test_partial_dimensions_not_squared(self) -> None:
        room = _entire_property(100.0, width=8.0)
        assert not uses_derived_footprint(room)
        assert square_footprint(room) is room


class TestRoomGeometry:
    def test_rectangle(self) -> None:
        geo = room_geometry(3.0, 4.0, ceiling_height_m=2.5, wall_openings_pct=0.0)
        assert geo.area_m2 == pytest.approx(12.0)
        assert geo.perimeter_m == pytest.approx(14.0)
        assert geo.wall_area_m2 == pytest.approx(35.0)

    def test_openings_deducted(self) -> None:
        geo = room_geometry(3.0, 4.0, ceiling_height_m=2.5)
        assert geo.wall_area_m2 == pytest.approx(31.5)

    def test_frozen(self) -> None:
        geo = room_geometry(1.0, 1.0, ceiling_height_m=2.6)
        with pytest.raises(AttributeError):
            geo.area_m2 = 5.0  # type: ignore[misc]
