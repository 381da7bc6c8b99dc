"""reforma renovation cost estimation engine.

Usage::

    from reforma import ProjectInput, RoomInput, create_default_engine

    engine = create_default_engine()
    result = engine.estimate(project)
"""

from reforma.config import PricingConfig
from reforma.data.repository import MultiplierRepository
from reforma.engine import CostEngine
from reforma.exceptions import ConfigurationError, InvalidInputError, ReformaError
from reforma.factory import calculate_estimate, create_default_engine
from reforma.formatting import format_currency
from reforma.models.enums import CostType, MultiplierAxis
from reforma.models.estimate import (
    AppliedMultiplier,
    EstimateResult,
    EstimateSummary,
    LineItem,
    ProjectMultipliers,
    RoomBreakdown,
)
from reforma.models.project import ENTIRE_PROPERTY, ProjectInput, RoomInput

__all__ = [
    "ENTIRE_PROPERTY",
    "AppliedMultiplier",
    "ConfigurationError",
    "CostEngine",
    "CostType",
    "EstimateResult",
    "EstimateSummary",
    "InvalidInputError",
    "LineItem",
    "MultiplierAxis",
    "MultiplierRepository",
    "PricingConfig",
    "ProjectInput",
    "ProjectMultipliers",
    "ReformaError",
    "RoomBreakdown",
    "RoomInput",
    "calculate_estimate",
    "create_default_engine",
    "format_currency",
]
