"""Tests for the public API surface of the reforma package.

Verifies that consumers can import everything they need from the top-level
``reforma`` package, use ``create_default_engine`` for quick setup, and
round-trip estimates through JSON serialization.
"""

from __future__ import annotations

import json

import reforma
from reforma import (
    ENTIRE_PROPERTY,
    ConfigurationError,
    CostEngine,
    EstimateResult,
    InvalidInputError,
    MultiplierRepository,
    PricingConfig,
    ProjectInput,
    ReformaError,
    RoomInput,
    calculate_estimate,
    create_default_engine,
    format_currency,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _sample_project() -> ProjectInput:
    return ProjectInput(
        location="Portugal",
        city="Porto",
        property_age="11 - 15 Years",
        rooms=[
            RoomInput(room_type="Bedroom", width=3.2, length=3.8,
                      floor_finish="Engineered Wood", wall_finish="Paint (Standard)"),
            RoomInput(room_type="Bathroom", width=1.8, length=2.2,
                      floor_finish="Tile (Ceramic)", wall_finish="Tile",
                      built_in_furniture="Bathroom Vanity"),
        ],
    )


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


def test_all_exports_resolve() -> None:
    for name in reforma.__all__:
        assert hasattr(reforma, name), name


def test_error_hierarchy() -> None:
    assert issubclass(ConfigurationError, ReformaError)
    assert issubclass(InvalidInputError, ReformaError)


def test_create_default_engine() -> None:
    engine = create_default_engine()
    assert isinstance(engine, CostEngine)
    assert isinstance(engine.repository, MultiplierRepository)
    assert engine.config == PricingConfig()


def test_calculate_estimate_matches_engine() -> None:
    project = _sample_project()
    assert calculate_estimate(project) == create_default_engine().estimate(project)


def test_json_round_trip() -> None:
    result = calculate_estimate(_sample_project())
    data = json.loads(result.model_dump_json())
    assert data["city"] == "Porto"
    assert data["room_count"] == 2
    assert EstimateResult.model_validate(data) == result


def test_entire_property_constant() -> None:
    project = ProjectInput(
        location="Italy",
        property_age="More than 25 Years",
        rooms=[RoomInput(room_type=ENTIRE_PROPERTY, total_area=120.0,
                         floor_finish="Terrazzo", wall_finish="Textured Plaster")],
    )
    result = calculate_estimate(project)
    assert result.rooms[0].derived_footprint is True
    assert format_currency(result.total).startswith("€")
