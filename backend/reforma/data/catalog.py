"""Bill-of-quantities catalog and finish assemblies.

The catalog lists the unit-priced work items a renovation is made of; an
assembly is the set of catalog items a single finish selection (a floor
finish, a wall finish, a built-in furniture option) pulls into a room, with
each item's quantity taken from one of the room's measurements.

Catalog unit costs are reference prices in EUR.  They are used as relative
weights when a room's priced direct cost is broken down into line items,
so the line items always add up to the estimate rather than to a second,
independent price.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from reforma.models.enums import CostType, MultiplierAxis, QuantityBasis


class CatalogItem(BaseModel):
    """A unit-priced work item."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    unit: str
    cost_type: CostType
    base_unit_cost: float = Field(gt=0)
    waste_pct: float = Field(default=0.0, ge=0)


class AssemblyItem(BaseModel):
    """One catalog item within an assembly."""

    model_config = ConfigDict(frozen=True)

    catalog_code: str
    basis: QuantityBasis
    qty_multiplier: float = Field(default=1.0, gt=0)
    include_waste: bool = False


class Assembly(BaseModel):
    """The catalog items pulled in by one option label on one axis."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    axis: MultiplierAxis
    label: str
    items: tuple[AssemblyItem, ...]


def _item(
    code: str,
    name: str,
    unit: str,
    cost_type: CostType,
    base_unit_cost: float,
    waste_pct: float = 0.0,
) -> CatalogItem:
    return CatalogItem(
        code=code,
        name=name,
        unit=unit,
        cost_type=cost_type,
        base_unit_cost=base_unit_cost,
        waste_pct=waste_pct,
    )


def _use(
    catalog_code: str,
    basis: QuantityBasis,
    qty_multiplier: float = 1.0,
    *,
    waste: bool = False,
) -> AssemblyItem:
    return AssemblyItem(
        catalog_code=catalog_code,
        basis=basis,
        qty_multiplier=qty_multiplier,
        include_waste=waste,
    )


_MAT = CostType.MATERIAL
_LAB = CostType.LABOR
_AREA = QuantityBasis.AREA
_PERIM = QuantityBasis.PERIMETER
_WALL = QuantityBasis.WALL_AREA
_FIXED = QuantityBasis.FIXED

# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

_CATALOG_ITEMS: list[CatalogItem] = [
    # Flooring
    _item("FLOOR_DEMO", "Floor demolition & disposal", "m2", _LAB, 12.00),
    _item("FLOOR_PREP", "Floor surface preparation", "m2", _LAB, 8.00),
    _item("FLOOR_UNDERLAY", "Floor underlay material", "m2", _MAT, 4.50, 0.05),
    _item("FLOOR_HARDWOOD_SUPPLY", "Hardwood flooring supply", "m2", _MAT, 55.00, 0.10),
    _item("FLOOR_HARDWOOD_LABOR", "Hardwood installation labor", "m2", _LAB, 28.00),
    _item("FLOOR_LAMINATE_SUPPLY", "Laminate flooring supply", "m2", _MAT, 22.00, 0.08),
    _item("FLOOR_LAMINATE_LABOR", "Laminate installation labor", "m2", _LAB, 18.00),
    _item("FLOOR_TILE_SUPPLY", "Floor tile supply", "m2", _MAT, 35.00, 0.12),
    _item("FLOOR_TILE_ADHESIVE", "Tile adhesive & grout", "m2", _MAT, 8.00, 0.05),
    _item("FLOOR_TILE_LABOR", "Floor tile installation labor", "m2", _LAB, 35.00),
    _item("FLOOR_VINYL_SUPPLY", "Vinyl flooring supply", "m2", _MAT, 18.00, 0.08),
    _item("FLOOR_VINYL_LABOR", "Vinyl installation labor", "m2", _LAB, 15.00),
    _item("FLOOR_CARPET_SUPPLY", "Carpet supply", "m2", _MAT, 25.00, 0.10),
    _item("FLOOR_CARPET_UNDERPAD", "Carpet underpad", "m2", _MAT, 6.00, 0.05),
    _item("FLOOR_CARPET_LABOR", "Carpet installation labor", "m2", _LAB, 12.00),
    _item("FLOOR_CONCRETE_POLISH", "Concrete polishing", "m2", _LAB, 45.00),
    _item("FLOOR_CONCRETE_SEALER", "Concrete sealer", "m2", _MAT, 8.00, 0.05),
    _item("FLOOR_MARBLE_SUPPLY", "Marble flooring supply", "m2", _MAT, 120.00, 0.12),
    _item("FLOOR_MARBLE_LABOR", "Marble installation labor", "m2", _LAB, 55.00),
    _item("FLOOR_ENGWOOD_SUPPLY", "Engineered wood flooring supply", "m2", _MAT, 42.00, 0.10),
    _item("FLOOR_ENGWOOD_LABOR", "Engineered wood installation labor", "m2", _LAB, 24.00),
    _item("FLOOR_SKIRTING_SUPPLY", "Skirting/baseboard supply", "lm", _MAT, 8.00, 0.08),
    _item("FLOOR_SKIRTING_LABOR", "Skirting installation labor", "lm", _LAB, 6.00),
    # Walls
    _item("WALL_PREP", "Wall surface preparation", "m2", _LAB, 6.00),
    _item("WALL_PRIMER", "Wall primer", "m2", _MAT, 3.50, 0.07),
    _item("WALL_PAINT_SUPPLY", "Wall paint supply", "m2", _MAT, 4.00, 0.07),
    _item("WALL_PAINT_LABOR", "Wall painting labor (2 coats)", "m2", _LAB, 8.00),
    _item("WALL_PAPER_SUPPLY", "Wallpaper supply", "m2", _MAT, 18.00, 0.10),
    _item("WALL_PAPER_ADHESIVE", "Wallpaper adhesive", "m2", _MAT, 2.00, 0.05),
    _item("WALL_PAPER_LABOR", "Wallpaper installation labor", "m2", _LAB, 15.00),
    _item("WALL_TILE_SUPPLY", "Wall tile supply", "m2", _MAT, 32.00, 0.12),
    _item("WALL_TILE_ADHESIVE", "Wall tile adhesive & grout", "m2", _MAT, 7.00, 0.05),
    _item("WALL_TILE_LABOR", "Wall tile installation labor", "m2", _LAB, 38.00),
    _item("WALL_PANEL_SUPPLY", "Wood paneling supply", "m2", _MAT, 45.00, 0.10),
    _item("WALL_PANEL_LABOR", "Wood paneling installation labor", "m2", _LAB, 28.00),
    _item("WALL_BRICK_EXPOSE", "Brick exposure work", "m2", _LAB, 35.00),
    _item("WALL_BRICK_SEAL", "Brick sealer", "m2", _MAT, 6.00, 0.05),
    _item("WALL_PLASTER_SUPPLY", "Textured plaster supply", "m2", _MAT, 12.00, 0.08),
    _item("WALL_PLASTER_LABOR", "Textured plaster application", "m2", _LAB, 22.00),
    _item("WALL_STONE_SUPPLY", "Stone veneer supply", "m2", _MAT, 65.00, 0.10),
    _item("WALL_STONE_LABOR", "Stone veneer installation", "m2", _LAB, 45.00),
    # Built-ins
    _item("BUILTIN_BASIC_CABINET", "Basic cabinet supply", "lm", _MAT, 180.00),
    _item("BUILTIN_BASIC_INSTALL", "Basic cabinet installation", "lm", _LAB, 85.00),
    _item("BUILTIN_CLOSET_SYSTEM", "Custom closet system", "m2", _MAT, 220.00),
    _item("BUILTIN_CLOSET_INSTALL", "Custom closet installation", "m2", _LAB, 95.00),
    _item("BUILTIN_SHELF_SUPPLY", "Built-in shelving supply", "lm", _MAT, 65.00),
    _item("BUILTIN_SHELF_INSTALL", "Built-in shelving installation", "lm", _LAB, 45.00),
    _item("BUILTIN_KITCHEN_CAB", "Kitchen cabinet supply", "lm", _MAT, 350.00),
    _item("BUILTIN_KITCHEN_INSTALL", "Kitchen cabinet installation", "lm", _LAB, 120.00),
    _item("BUILTIN_VANITY_SUPPLY", "Bathroom vanity supply", "item", _MAT, 450.00),
    _item("BUILTIN_VANITY_INSTALL", "Bathroom vanity installation", "item", _LAB, 180.00),
    _item("BUILTIN_ENTERTAIN_UNIT", "Entertainment center", "lm", _MAT, 280.00),
    _item("BUILTIN_ENTERTAIN_INSTALL", "Entertainment center installation", "lm", _LAB, 110.00),
    _item("BUILTIN_CUSTOM_JOINERY", "Full custom joinery", "m2", _MAT, 450.00),
    _item("BUILTIN_CUSTOM_INSTALL", "Full custom installation", "m2", _LAB, 180.00),
    # Project-level
    _item("PROJ_SITE_SETUP", "Site setup & protection", "fixed", _LAB, 250.00),
    _item("PROJ_PROTECTION", "Surface protection materials", "m2", _MAT, 2.50),
    _item("PROJ_CLEANUP", "Final cleanup & disposal", "m2", _LAB, 4.00),
]

CATALOG: Mapping[str, CatalogItem] = MappingProxyType(
    {item.code: item for item in _CATALOG_ITEMS}
)

# Charged once per project; quantities come from the project's total floor
# area rather than from a single room.
PROJECT_ITEMS: tuple[AssemblyItem, ...] = (
    _use("PROJ_SITE_SETUP", _FIXED),
    _use("PROJ_PROTECTION", _AREA),
    _use("PROJ_CLEANUP", _AREA),
)

# ---------------------------------------------------------------------------
# Assemblies
# ---------------------------------------------------------------------------

_FLOOR = MultiplierAxis.FLOOR_FINISH
_WALLS = MultiplierAxis.WALL_FINISH
_BUILTIN = MultiplierAxis.BUILT_IN_FURNITURE

_SKIRTING = (
    _use("FLOOR_SKIRTING_SUPPLY", _PERIM, waste=True),
    _use("FLOOR_SKIRTING_LABOR", _PERIM),
)

_ASSEMBLIES: list[Assembly] = [
    # Flooring
    Assembly(code="FLOOR_HARDWOOD", name="Hardwood Floor Installation",
             axis=_FLOOR, label="Hardwood", items=(
                 _use("FLOOR_DEMO", _AREA),
                 _use("FLOOR_PREP", _AREA),
                 _use("FLOOR_UNDERLAY", _AREA, waste=True),
                 _use("FLOOR_HARDWOOD_SUPPLY", _AREA, waste=True),
                 _use("FLOOR_HARDWOOD_LABOR", _AREA),
                 *_SKIRTING,
             )),
    Assembly(code="FLOOR_LAMINATE", name="Laminate Floor Installation",
             axis=_FLOOR, label="Laminate", items=(
                 _use("FLOOR_DEMO", _AREA),
                 _use("FLOOR_UNDERLAY", _AREA, waste=True),
                 _use("FLOOR_LAMINATE_SUPPLY", _AREA, waste=True),
                 _use("FLOOR_LAMINATE_LABOR", _AREA),
                 *_SKIRTING,
             )),
    Assembly(code="FLOOR_TILE_CERAMIC", name="Ceramic Tile Floor Installation",
             axis=_FLOOR, label="Tile (Ceramic)", items=(
                 _use("FLOOR_DEMO", _AREA),
                 _use("FLOOR_PREP", _AREA),
                 _use("FLOOR_TILE_SUPPLY", _AREA, waste=True),
                 _use("FLOOR_TILE_ADHESIVE", _AREA, waste=True),
                 _use("FLOOR_TILE_LABOR", _AREA),
             )),
    Assembly(code="FLOOR_TILE_PORCELAIN", name="Porcelain Tile Floor Installation",
             axis=_FLOOR, label="Tile (Porcelain)", items=(
                 _use("FLOOR_DEMO", _AREA),
                 _use("FLOOR_PREP", _AREA),
                 _use("FLOOR_TILE_SUPPLY", _AREA, 1.15, waste=True),
                 _use("FLOOR_TILE_ADHESIVE", _AREA, waste=True),
                 _use("FLOOR_TILE_LABOR", _AREA, 1.1),
             )),
    Assembly(code="FLOOR_VINYL", name="Vinyl / LVT Floor Installation",
             axis=_FLOOR, label="Vinyl / LVT", items=(
                 _use("FLOOR_DEMO", _AREA),
                 _use("FLOOR_VINYL_SUPPLY", _AREA, waste=True),
                 _use("FLOOR_VINYL_LABOR", _AREA),
             )),
    Assembly(code="FLOOR_CARPET", name="Carpet Installation",
             axis=_FLOOR, label="Carpet", items=(
                 _use("FLOOR_DEMO", _AREA),
                 _use("FLOOR_CARPET_SUPPLY", _AREA, waste=True),
                 _use("FLOOR_CARPET_UNDERPAD", _AREA, waste=True),
                 _use("FLOOR_CARPET_LABOR", _AREA),
             )),
    Assembly(code="FLOOR_CONCRETE", name="Polished Concrete Floor",
             axis=_FLOOR, label="Polished Concrete", items=(
                 _use("FLOOR_CONCRETE_POLISH", _AREA),
                 _use("FLOOR_CONCRETE_SEALER", _AREA, waste=True),
             )),
    Assembly(code="FLOOR_MARBLE", name="Marble Floor Installation",
             axis=_FLOOR, label="Marble", items=(
                 _use("FLOOR_DEMO", _AREA),
                 _use("FLOOR_PREP", _AREA),
                 _use("FLOOR_MARBLE_SUPPLY", _AREA, waste=True),
                 _use("FLOOR_MARBLE_LABOR", _AREA),
             )),
    Assembly(code="FLOOR_ENGWOOD", name="Engineered Wood Installation",
             axis=_FLOOR, label="Engineered Wood", items=(
                 _use("FLOOR_DEMO", _AREA),
                 _use("FLOOR_UNDERLAY", _AREA, waste=True),
                 _use("FLOOR_ENGWOOD_SUPPLY", _AREA, waste=True),
                 _use("FLOOR_ENGWOOD_LABOR", _AREA),
                 *_SKIRTING,
             )),
    Assembly(code="FLOOR_NATURAL_STONE", name="Natural Stone Floor Installation",
             axis=_FLOOR, label="Natural Stone", items=(
                 _use("FLOOR_DEMO", _AREA),
                 _use("FLOOR_PREP", _AREA),
                 _use("FLOOR_MARBLE_SUPPLY", _AREA, 0.9, waste=True),
                 _use("FLOOR_MARBLE_LABOR", _AREA),
             )),
    Assembly(code="FLOOR_MICROCEMENT", name="Microcement Floor Installation",
             axis=_FLOOR, label="Microcement", items=(
                 _use("FLOOR_PREP", _AREA, 1.5),
                 _use("WALL_PLASTER_SUPPLY", _AREA, 1.3, waste=True),
                 _use("WALL_PLASTER_LABOR", _AREA, 1.5),
                 _use("FLOOR_CONCRETE_SEALER", _AREA, 2.0, waste=True),
             )),
    Assembly(code="FLOOR_TERRAZZO", name="Terrazzo Floor Installation",
             axis=_FLOOR, label="Terrazzo", items=(
                 _use("FLOOR_DEMO", _AREA),
                 _use("FLOOR_PREP", _AREA),
                 _use("FLOOR_MARBLE_SUPPLY", _AREA, 1.1, waste=True),
                 _use("FLOOR_MARBLE_LABOR", _AREA, 1.2),
                 _use("FLOOR_CONCRETE_POLISH", _AREA, 0.8),
             )),
    # Walls
    Assembly(code="WALL_PAINT_STANDARD", name="Wall Painting (Standard)",
             axis=_WALLS, label="Paint (Standard)", items=(
                 _use("WALL_PREP", _WALL),
                 _use("WALL_PRIMER", _WALL, waste=True),
                 _use("WALL_PAINT_SUPPLY", _WALL, 2.0, waste=True),
                 _use("WALL_PAINT_LABOR", _WALL),
             )),
    Assembly(code="WALL_PAINT_PREMIUM", name="Wall Painting (Premium)",
             axis=_WALLS, label="Paint (Premium)", items=(
                 _use("WALL_PREP", _WALL),
                 _use("WALL_PRIMER", _WALL, waste=True),
                 _use("WALL_PAINT_SUPPLY", _WALL, 2.5, waste=True),
                 _use("WALL_PAINT_LABOR", _WALL, 1.2),
             )),
    Assembly(code="WALL_WALLPAPER", name="Wallpaper Installation",
             axis=_WALLS, label="Wallpaper", items=(
                 _use("WALL_PREP", _WALL),
                 _use("WALL_PAPER_SUPPLY", _WALL, waste=True),
                 _use("WALL_PAPER_ADHESIVE", _WALL, waste=True),
                 _use("WALL_PAPER_LABOR", _WALL),
             )),
    Assembly(code="WALL_TILE", name="Wall Tiling",
             axis=_WALLS, label="Tile", items=(
                 _use("WALL_PREP", _WALL),
                 _use("WALL_TILE_SUPPLY", _WALL, waste=True),
                 _use("WALL_TILE_ADHESIVE", _WALL, waste=True),
                 _use("WALL_TILE_LABOR", _WALL),
             )),
    Assembly(code="WALL_WOOD_PANEL", name="Wood Paneling",
             axis=_WALLS, label="Wood Paneling", items=(
                 _use("WALL_PREP", _WALL),
                 _use("WALL_PANEL_SUPPLY", _WALL, waste=True),
                 _use("WALL_PANEL_LABOR", _WALL),
             )),
    Assembly(code="WALL_EXPOSED_BRICK", name="Exposed Brick",
             axis=_WALLS, label="Exposed Brick", items=(
                 _use("WALL_BRICK_EXPOSE", _WALL),
                 _use("WALL_BRICK_SEAL", _WALL, waste=True),
             )),
    Assembly(code="WALL_TEXTURED_PLASTER", name="Textured Plaster",
             axis=_WALLS, label="Textured Plaster", items=(
                 _use("WALL_PREP", _WALL),
                 _use("WALL_PLASTER_SUPPLY", _WALL, waste=True),
                 _use("WALL_PLASTER_LABOR", _WALL),
             )),
    Assembly(code="WALL_STONE_VENEER", name="Stone Veneer",
             axis=_WALLS, label="Stone Veneer", items=(
                 _use("WALL_PREP", _WALL),
                 _use("WALL_STONE_SUPPLY", _WALL, waste=True),
                 _use("WALL_STONE_LABOR", _WALL),
             )),
    Assembly(code="WALL_MICROCEMENT", name="Microcement Wall Finish",
             axis=_WALLS, label="Microcement", items=(
                 _use("WALL_PREP", _WALL, 1.2),
                 _use("WALL_PLASTER_SUPPLY", _WALL, 1.3, waste=True),
                 _use("WALL_PLASTER_LABOR", _WALL, 1.4),
                 _use("WALL_BRICK_SEAL", _WALL, 2.0, waste=True),
             )),
    Assembly(code="WALL_ACOUSTIC", name="Acoustic Panels",
             axis=_WALLS, label="Acoustic Panels", items=(
                 _use("WALL_PREP", _WALL, 0.5),
                 _use("WALL_PANEL_SUPPLY", _WALL, 1.1, waste=True),
                 _use("WALL_PANEL_LABOR", _WALL, 0.9),
             )),
    # Built-ins
    Assembly(code="BUILTIN_BASIC", name="Basic Cabinets",
             axis=_BUILTIN, label="Basic Cabinets", items=(
                 _use("BUILTIN_BASIC_CABINET", _PERIM, 0.3),
                 _use("BUILTIN_BASIC_INSTALL", _PERIM, 0.3),
             )),
    Assembly(code="BUILTIN_CLOSET", name="Custom Closets",
             axis=_BUILTIN, label="Custom Closets", items=(
                 _use("BUILTIN_CLOSET_SYSTEM", _AREA, 0.15),
                 _use("BUILTIN_CLOSET_INSTALL", _AREA, 0.15),
             )),
    Assembly(code="BUILTIN_SHELVING", name="Built-in Shelving",
             axis=_BUILTIN, label="Built-in Shelving", items=(
                 _use("BUILTIN_SHELF_SUPPLY", _PERIM, 0.25),
                 _use("BUILTIN_SHELF_INSTALL", _PERIM, 0.25),
             )),
    Assembly(code="BUILTIN_KITCHEN_STD", name="Kitchen Cabinets (Standard)",
             axis=_BUILTIN, label="Kitchen Cabinets (Standard)", items=(
                 _use("BUILTIN_KITCHEN_CAB", _PERIM, 0.5),
                 _use("BUILTIN_KITCHEN_INSTALL", _PERIM, 0.5),
             )),
    Assembly(code="BUILTIN_KITCHEN_PREM", name="Kitchen Cabinets (Premium)",
             axis=_BUILTIN, label="Kitchen Cabinets (Premium)", items=(
                 _use("BUILTIN_KITCHEN_CAB", _PERIM, 0.7),
                 _use("BUILTIN_KITCHEN_INSTALL", _PERIM, 0.7),
             )),
    Assembly(code="BUILTIN_VANITY", name="Bathroom Vanity",
             axis=_BUILTIN, label="Bathroom Vanity", items=(
                 _use("BUILTIN_VANITY_SUPPLY", _FIXED),
                 _use("BUILTIN_VANITY_INSTALL", _FIXED),
             )),
    Assembly(code="BUILTIN_ENTERTAINMENT", name="Entertainment Center",
             axis=_BUILTIN, label="Entertainment Center", items=(
                 _use("BUILTIN_ENTERTAIN_UNIT", _PERIM, 0.2),
                 _use("BUILTIN_ENTERTAIN_INSTALL", _PERIM, 0.2),
             )),
    Assembly(code="BUILTIN_HOME_OFFICE", name="Home Office Desk & Storage",
             axis=_BUILTIN, label="Home Office Desk & Storage", items=(
                 _use("BUILTIN_SHELF_SUPPLY", _PERIM, 0.35),
                 _use("BUILTIN_SHELF_INSTALL", _PERIM, 0.35),
                 _use("BUILTIN_BASIC_CABINET", _PERIM, 0.2),
                 _use("BUILTIN_BASIC_INSTALL", _PERIM, 0.2),
             )),
    Assembly(code="BUILTIN_FULL_CUSTOM", name="Full Custom Joinery",
             axis=_BUILTIN, label="Full Custom Joinery", items=(
                 _use("BUILTIN_CUSTOM_JOINERY", _AREA, 0.25),
                 _use("BUILTIN_CUSTOM_INSTALL", _AREA, 0.25),
             )),
]

ASSEMBLIES: Mapping[tuple[MultiplierAxis, str], Assembly] = MappingProxyType(
    {(a.axis, a.label): a for a in _ASSEMBLIES}
)

# Axes whose selection pulls an assembly into a room, in line item order.
ASSEMBLY_AXES: tuple[MultiplierAxis, ...] = (_FLOOR, _WALLS, _BUILTIN)
