"""Shared fixtures: a small, hand-checkable pricing setup."""

from __future__ import annotations

import pytest

from reforma.config import PricingConfig
from reforma.data.repository import MultiplierRepository
from reforma.engine import CostEngine
from reforma.models.enums import MultiplierAxis
from reforma.models.project import ENTIRE_PROPERTY, NO_FURNITURE

# Base rate 50/m², minimum fee 200.
SIMPLE_TABLES = {
    MultiplierAxis.LOCATION: {"Testland": 1.2, "Neutral": 1.0},
    MultiplierAxis.PROPERTY_AGE: {"New": 1.0, "Old": 1.3},
    MultiplierAxis.PROPERTY_TYPE: {"Flat": 1.0, "Villa": 1.2},
    MultiplierAxis.PROPERTY_CONDITION: {"Average": 1.0, "Poor": 1.5},
    MultiplierAxis.ACCESS_DIFFICULTY: {"Easy": 1.0, "Hard": 1.1},
    MultiplierAxis.URGENCY: {"Standard": 1.0, "Rush": 1.25},
    MultiplierAxis.ROOM_TYPE: {"Kitchen": 1.5, "Plain": 1.0, ENTIRE_PROPERTY: 1.0},
    MultiplierAxis.FLOOR_FINISH: {"Tile": 1.1, "Plain": 1.0},
    MultiplierAxis.WALL_FINISH: {"Paint": 1.0, "Stone": 1.3},
    MultiplierAxis.BUILT_IN_FURNITURE: {NO_FURNITURE: 1.0, "Cabinets": 1.2},
}


@pytest.fixture()
def simple_config() -> PricingConfig:
    return PricingConfig(base_rate_per_m2=50.0, min_room_fee=200.0)


@pytest.fixture()
def simple_repo() -> MultiplierRepository:
    return MultiplierRepository(SIMPLE_TABLES)


@pytest.fixture()
def simple_engine(
    simple_repo: MultiplierRepository, simple_config: PricingConfig,
) -> CostEngine:
    """CostEngine over the hand-checkable tables."""
    return CostEngine(simple_repo, simple_config)
