"""Pricing data layer for the reforma estimation engine."""

from reforma.data.catalog import ASSEMBLIES, CATALOG, Assembly, CatalogItem
from reforma.data.multipliers import MULTIPLIER_TABLES, PRICING_VERSION
from reforma.data.repository import MultiplierRepository, resolve

__all__ = [
    "ASSEMBLIES",
    "CATALOG",
    "MULTIPLIER_TABLES",
    "PRICING_VERSION",
    "Assembly",
    "CatalogItem",
    "MultiplierRepository",
    "resolve",
]
