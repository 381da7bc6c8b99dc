"""Multiplier tables, rates and option lists for renovation pricing.

Every table maps a case-sensitive option label (exactly as presented in the
survey form) to a unitless multiplier.  Tables are read-only mappings; the
values reflect pricing version ``v1.1``.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from reforma.models.enums import MultiplierAxis
from reforma.models.project import ENTIRE_PROPERTY, NO_FURNITURE

PRICING_VERSION = "v1.1"
BASE_RATE_PER_M2 = 450.0  # EUR per m²
MIN_ROOM_FEE = 600.0  # EUR minimum per room
DEFAULT_CURRENCY = "EUR"

# ---------------------------------------------------------------------------
# Property characteristics
# ---------------------------------------------------------------------------

# Country-level location factor. Spain = 1.00.
LOCATION_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "Spain": 1.00,
    "Brazil": 0.75,
    "Portugal": 0.92,
    "Mexico": 0.70,
    "USA": 1.45,
    "UK": 1.35,
    "France": 1.20,
    "Germany": 1.25,
    "Italy": 1.15,
    "Other": 1.10,
})

PROPERTY_AGE_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "1 - 5 Years": 0.95,
    "6 - 10 Years": 1.00,
    "11 - 15 Years": 1.06,
    "16 - 20 Years": 1.12,
    "21 - 25 Years": 1.20,
    "More than 25 Years": 1.32,
})

PROPERTY_TYPE_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "Apartment": 1.00,
    "Penthouse": 1.15,
    "Townhouse": 1.05,
    "Detached House": 1.08,
    "Villa": 1.20,
    "Loft / Industrial": 1.12,
    "Studio": 0.95,
    "Duplex": 1.10,
})

# Current state of the property before renovation.
PROPERTY_CONDITION_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "Newly built (minor customization)": 0.75,
    "Good condition (cosmetic refresh)": 0.90,
    "Average (needs updating)": 1.00,
    "Below average (significant work)": 1.15,
    "Poor (major renovation)": 1.35,
    "Gut renovation required": 1.55,
})

# Access for workers and materials.
ACCESS_DIFFICULTY_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "Easy (ground floor / elevator)": 1.00,
    "Moderate (stairs up to 3rd floor)": 1.05,
    "Difficult (4th+ floor, no elevator)": 1.12,
    "Very difficult (restricted access)": 1.20,
    "Historic building restrictions": 1.25,
})

URGENCY_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "Flexible timeline (3+ months)": 0.95,
    "Standard (1-3 months)": 1.00,
    "Urgent (2-4 weeks)": 1.15,
    "Very urgent (under 2 weeks)": 1.35,
})

# ---------------------------------------------------------------------------
# Rooms and finishes
# ---------------------------------------------------------------------------

ROOM_TYPE_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    ENTIRE_PROPERTY: 0.92,  # economy of scale
    "Living Room": 1.00,
    "Dining Room": 0.98,
    "Kitchen": 1.45,  # wet area
    "Bathroom": 1.55,  # wet area
    "Bedroom": 0.95,
    "Master Bedroom": 1.02,
    "Balcony / Terrace": 1.10,
    "Home Office": 0.97,
    "Walk-in Closet": 0.90,
    "Laundry Room": 1.25,
    "Hallway / Corridor": 0.85,
    "Entrance Hall": 0.88,
    "Garage": 0.75,
    "Basement": 0.80,
})

FLOOR_FINISH_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "Hardwood": 1.25,
    "Laminate": 0.95,
    "Tile (Ceramic)": 1.10,
    "Tile (Porcelain)": 1.20,
    "Vinyl / LVT": 0.85,
    "Carpet": 0.90,
    "Polished Concrete": 0.92,
    "Marble": 1.55,
    "Engineered Wood": 1.10,
    "Natural Stone": 1.45,
    "Microcement": 1.30,
    "Terrazzo": 1.40,
})

WALL_FINISH_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "Paint (Standard)": 0.90,
    "Paint (Premium)": 1.00,
    "Wallpaper": 1.10,
    "Tile": 1.30,
    "Wood Paneling": 1.25,
    "Exposed Brick": 1.15,
    "Textured Plaster": 1.12,
    "Stone Veneer": 1.35,
    "Microcement": 1.28,
    "Acoustic Panels": 1.20,
})

BUILT_IN_FURNITURE_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    NO_FURNITURE: 1.00,
    "Basic Cabinets": 1.08,
    "Custom Closets": 1.12,
    "Built-in Shelving": 1.07,
    "Kitchen Cabinets (Standard)": 1.18,
    "Kitchen Cabinets (Premium)": 1.35,
    "Bathroom Vanity": 1.10,
    "Entertainment Center": 1.10,
    "Home Office Desk & Storage": 1.15,
    "Full Custom Joinery": 1.30,
})

# Taller rooms mean more wall area and scaffolding.
CEILING_HEIGHT_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "Standard (2.4 - 2.7m)": 1.00,
    "High (2.8 - 3.2m)": 1.08,
    "Very high (3.3 - 4m)": 1.18,
    "Double height (4m+)": 1.35,
})

ELECTRICAL_SCOPE_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "No changes": 0.95,
    "Minor updates (outlets, switches)": 1.00,
    "Moderate (new circuits, lighting)": 1.10,
    "Major rewiring": 1.25,
    "Full electrical overhaul": 1.40,
})

PLUMBING_SCOPE_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "No changes": 1.00,
    "Fixture replacement only": 1.05,
    "Minor relocations": 1.15,
    "Major changes": 1.30,
    "Full replumb": 1.50,
})

# Representative height in meters for each ceiling option, used for wall area.
CEILING_HEIGHT_METERS: Mapping[str, float] = MappingProxyType({
    "Standard (2.4 - 2.7m)": 2.55,
    "High (2.8 - 3.2m)": 3.0,
    "Very high (3.3 - 4m)": 3.65,
    "Double height (4m+)": 4.5,
})

# ---------------------------------------------------------------------------
# Master lookup: axis -> table
# ---------------------------------------------------------------------------

MULTIPLIER_TABLES: Mapping[MultiplierAxis, Mapping[str, float]] = MappingProxyType({
    MultiplierAxis.LOCATION: LOCATION_MULTIPLIERS,
    MultiplierAxis.PROPERTY_AGE: PROPERTY_AGE_MULTIPLIERS,
    MultiplierAxis.PROPERTY_TYPE: PROPERTY_TYPE_MULTIPLIERS,
    MultiplierAxis.PROPERTY_CONDITION: PROPERTY_CONDITION_MULTIPLIERS,
    MultiplierAxis.ACCESS_DIFFICULTY: ACCESS_DIFFICULTY_MULTIPLIERS,
    MultiplierAxis.URGENCY: URGENCY_MULTIPLIERS,
    MultiplierAxis.ROOM_TYPE: ROOM_TYPE_MULTIPLIERS,
    MultiplierAxis.FLOOR_FINISH: FLOOR_FINISH_MULTIPLIERS,
    MultiplierAxis.WALL_FINISH: WALL_FINISH_MULTIPLIERS,
    MultiplierAxis.BUILT_IN_FURNITURE: BUILT_IN_FURNITURE_MULTIPLIERS,
    MultiplierAxis.CEILING_HEIGHT: CEILING_HEIGHT_MULTIPLIERS,
    MultiplierAxis.ELECTRICAL_SCOPE: ELECTRICAL_SCOPE_MULTIPLIERS,
    MultiplierAxis.PLUMBING_SCOPE: PLUMBING_SCOPE_MULTIPLIERS,
})
