"""Domain models for the reforma estimation engine."""

from reforma.models.enums import CostType, MultiplierAxis, QuantityBasis
from reforma.models.estimate import (
    AppliedMultiplier,
    EstimateResult,
    EstimateSummary,
    LineItem,
    PricingAssumptions,
    ProjectMultipliers,
    RoomBreakdown,
)
from reforma.models.project import ENTIRE_PROPERTY, NO_FURNITURE, ProjectInput, RoomInput

__all__ = [
    "ENTIRE_PROPERTY",
    "NO_FURNITURE",
    "AppliedMultiplier",
    "CostType",
    "EstimateResult",
    "EstimateSummary",
    "LineItem",
    "MultiplierAxis",
    "PricingAssumptions",
    "QuantityBasis",
    "ProjectInput",
    "ProjectMultipliers",
    "RoomBreakdown",
    "RoomInput",
]
