"""Enums for the reforma domain models."""

from enum import StrEnum


class MultiplierAxis(StrEnum):
    """Every categorical input that resolves to a price multiplier."""

    # Project level
    LOCATION = "location"
    PROPERTY_AGE = "property_age"
    PROPERTY_TYPE = "property_type"
    PROPERTY_CONDITION = "property_condition"
    ACCESS_DIFFICULTY = "access_difficulty"
    URGENCY = "urgency"

    # Room level
    ROOM_TYPE = "room_type"
    FLOOR_FINISH = "floor_finish"
    WALL_FINISH = "wall_finish"
    BUILT_IN_FURNITURE = "built_in_furniture"
    CEILING_HEIGHT = "ceiling_height"
    ELECTRICAL_SCOPE = "electrical_scope"
    PLUMBING_SCOPE = "plumbing_scope"


class CostType(StrEnum):
    """Cost categories used by the itemized breakdown."""

    MATERIAL = "material"
    LABOR = "labor"
    OVERHEAD = "overhead"
    CONTINGENCY = "contingency"
    TAX = "tax"


class QuantityBasis(StrEnum):
    """Room measurement an assembly item's quantity is taken from."""

    AREA = "area_m2"
    PERIMETER = "perimeter_lm"
    WALL_AREA = "wall_area_m2"
    CEILING_AREA = "ceiling_area_m2"
    FIXED = "fixed"
