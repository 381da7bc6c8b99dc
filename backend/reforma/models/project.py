"""Project input models for the reforma estimation engine."""

from __future__ import annotations

from pydantic import BaseModel, Field

# Room type whose size is given as a total floor area instead of width x length.
ENTIRE_PROPERTY = "Entire Property"

# Built-in furniture label used when a room has none.
NO_FURNITURE = "None"


class RoomInput(BaseModel):
    """One room from the renovation survey.

    Dimensions are in meters.  ``width``/``length`` are optional at the type
    level so that the engine can report missing or non-positive dimensions
    as ``InvalidInputError`` with a field path; an ``"Entire Property"`` room
    may give ``total_area`` (m²) instead.
    """

    room_type: str
    width: float | None = None
    length: float | None = None
    total_area: float | None = None
    ceiling_height: str | None = None
    floor_finish: str
    wall_finish: str
    built_in_furniture: str = NO_FURNITURE
    electrical_scope: str | None = None
    plumbing_scope: str | None = None

    @property
    def is_entire_property(self) -> bool:
        return self.room_type == ENTIRE_PROPERTY


class ProjectInput(BaseModel):
    """A full renovation project: property attributes plus its rooms.

    ``location`` is the country and drives the location multiplier; ``city``
    is recorded for display only.  The four optional property attributes are
    only priced when supplied.
    """

    location: str
    city: str = ""
    property_age: str
    property_type: str | None = None
    property_condition: str | None = None
    access_difficulty: str | None = None
    urgency: str | None = None
    rooms: list[RoomInput] = Field(default_factory=list)
