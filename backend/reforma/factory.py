"""Factory functions for creating pre-configured CostEngine instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from reforma.config import PricingConfig
from reforma.data.repository import MultiplierRepository
from reforma.engine import CostEngine

if TYPE_CHECKING:
    from reforma.models.estimate import EstimateResult
    from reforma.models.project import ProjectInput


def create_default_engine(config: PricingConfig | None = None) -> CostEngine:
    """Create a CostEngine wired up with the built-in multiplier tables.

    This is the recommended way to create a CostEngine for typical usage.

    Args:
        config: Optional pricing configuration; defaults to pricing
            version v1.1 rates.

    Example::

        from reforma import create_default_engine

        engine = create_default_engine()
        result = engine.estimate(project)
    """
    return CostEngine(MultiplierRepository(), config or PricingConfig())


def calculate_estimate(project: ProjectInput) -> EstimateResult:
    """Estimate *project* with the default tables and rates."""
    return create_default_engine().estimate(project)
