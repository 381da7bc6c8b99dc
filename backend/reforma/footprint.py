"""Room footprint transformation and derived room geometry.

A room reaches the pricing core as width x length.  Whole-property entries
are surveyed as a single total floor area, so before pricing they are
turned into a synthetic square footprint (side = sqrt(area)).  Explicit
width and length, when a whole-property room gives them, take precedence
over the total area.  The square
is a modeling approximation, not a measurement; the transformation is a
plain callable so the engine can be given a different heuristic.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from reforma.models.project import RoomInput

FootprintStrategy = Callable[[RoomInput], RoomInput]


def square_footprint(room: RoomInput) -> RoomInput:
    """Give an ``"Entire Property"`` room a square footprint of equal area.

    Rooms that are not whole-property entries, that carry no ``total_area``
    or that already have a width or length are returned unchanged.
    """
    if not uses_derived_footprint(room):
        return room
    side = math.sqrt(room.total_area)
    return room.model_copy(update={"width": side, "length": side})


def uses_derived_footprint(room: RoomInput) -> bool:
    """True when *room*'s dimensions come from its total area."""
    return (
        room.is_entire_property
        and room.total_area is not None
        and room.width is None
        and room.length is None
    )


@dataclass(frozen=True)
class RoomGeometry:
    """Floor and wall quantities for a rectangular room."""

    width_m: float
    length_m: float
    area_m2: float
    perimeter_m: float
    ceiling_height_m: float
    wall_area_m2: float


def room_geometry(
    width: float,
    length: float,
    ceiling_height_m: float,
    wall_openings_pct: float = 0.10,
) -> RoomGeometry:
    """Compute area, perimeter and net wall area for a *width* x *length* room.

    Net wall area deducts *wall_openings_pct* of the gross wall area for
    doors and windows.
    """
    area = width * length
    perimeter = 2 * (width + length)
    wall_area = perimeter * ceiling_height_m * (1 - wall_openings_pct)
    return RoomGeometry(
        width_m=width,
        length_m=length,
        area_m2=area,
        perimeter_m=perimeter,
        ceiling_height_m=ceiling_height_m,
        wall_area_m2=wall_area,
    )
