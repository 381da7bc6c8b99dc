"""Input validation for renovation projects."""

from __future__ import annotations

import math

from reforma.exceptions import InvalidInputError
from reforma.footprint import uses_derived_footprint
from reforma.models.project import ProjectInput, RoomInput


def _check_positive(value: float | None, field: str) -> None:
    if value is None:
        raise InvalidInputError(field, "is required")
    if not math.isfinite(value):
        raise InvalidInputError(field, f"must be a finite number, got {value!r}")
    if value <= 0:
        raise InvalidInputError(field, f"must be positive, got {value!r}")


def validate_room(room: RoomInput, index: int) -> None:
    """Check that *room* has a usable footprint.

    Whole-property rooms may give ``total_area`` instead of width and
    length.  When both are given the explicit width and length are priced,
    so they are the ones validated.
    """
    prefix = f"rooms[{index}]"
    if uses_derived_footprint(room):
        _check_positive(room.total_area, f"{prefix}.total_area")
        return
    validate_footprint(room, index)


def validate_footprint(room: RoomInput, index: int) -> None:
    """Check the width and length a room will actually be priced with."""
    prefix = f"rooms[{index}]"
    _check_positive(room.width, f"{prefix}.width")
    _check_positive(room.length, f"{prefix}.length")
    area = room.width * room.length  # type: ignore[operator]
    if not math.isfinite(area) or area <= 0:
        raise InvalidInputError(
            prefix, f"floor area must be a finite positive number, got {area!r}",
        )


def validate_project(project: ProjectInput) -> None:
    """Raise InvalidInputError if *project* cannot be priced.

    Label recognition is not checked here; unknown labels surface as
    ConfigurationError when the multipliers are resolved.
    """
    if not project.rooms:
        raise InvalidInputError("rooms", "at least one room required")
    for index, room in enumerate(project.rooms):
        validate_room(room, index)
