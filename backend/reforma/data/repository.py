"""Multiplier repository for resolving option labels to price multipliers."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from reforma.data.catalog import ASSEMBLIES, CATALOG, PROJECT_ITEMS, Assembly, CatalogItem
from reforma.data.cities import CITIES_BY_COUNTRY, OTHER_COUNTRY
from reforma.data.multipliers import CEILING_HEIGHT_METERS, MULTIPLIER_TABLES
from reforma.exceptions import ConfigurationError
from reforma.models.enums import MultiplierAxis


def resolve(table: Mapping[str, float], label: str, *, category: str) -> float:
    """Return the multiplier for an exact, case-sensitive *label* match.

    Raises:
        ConfigurationError: If *label* is not in *table*.  There is no
            default multiplier; an unknown option must never be priced as 1.0.
    """
    try:
        return table[label]
    except KeyError:
        raise ConfigurationError(category, label) from None


def _check_positive(values: Mapping[str, float], category: str, what: str) -> None:
    for label, value in values.items():
        if not math.isfinite(value) or value <= 0:
            msg = f"{what} for {category} label {label!r} must be a positive number, got {value!r}"
            raise ConfigurationError(category, label, msg)


class MultiplierRepository:
    """Read-only lookup over the pricing data.

    Holds one multiplier table per axis, the height in meters of each
    ceiling option, the bill-of-quantities catalog and the finish
    assemblies.  Everything is wrapped in immutable mappings and checked
    at construction:

    - every multiplier and ceiling height is a positive, finite number
    - every ceiling option has a height
    - every assembly item refers to a catalog entry

    Axes missing from *tables* fall back to the built-in defaults, so tests
    and callers can override only the tables they care about.
    """

    def __init__(
        self,
        tables: Mapping[MultiplierAxis, Mapping[str, float]] | None = None,
        cities_by_country: Mapping[str, tuple[str, ...]] | None = None,
        ceiling_heights_m: Mapping[str, float] | None = None,
        catalog: Mapping[str, CatalogItem] | None = None,
        assemblies: Iterable[Assembly] | None = None,
    ) -> None:
        merged: dict[MultiplierAxis, Mapping[str, float]] = dict(MULTIPLIER_TABLES)
        if tables:
            merged.update({MultiplierAxis(axis): table for axis, table in tables.items()})

        frozen: dict[MultiplierAxis, Mapping[str, float]] = {}
        for axis, table in merged.items():
            _check_positive(table, axis.value, "Multiplier")
            frozen[axis] = MappingProxyType(dict(table))
        self._tables: Mapping[MultiplierAxis, Mapping[str, float]] = MappingProxyType(frozen)
        self._cities = MappingProxyType(dict(cities_by_country or CITIES_BY_COUNTRY))

        heights = dict(CEILING_HEIGHT_METERS if ceiling_heights_m is None else ceiling_heights_m)
        ceiling_axis = MultiplierAxis.CEILING_HEIGHT.value
        _check_positive(heights, ceiling_axis, "Ceiling height")
        for label in frozen[MultiplierAxis.CEILING_HEIGHT]:
            if label not in heights:
                msg = f"Ceiling height option {label!r} has no height in meters"
                raise ConfigurationError(ceiling_axis, label, msg)
        self._ceiling_heights = MappingProxyType(heights)

        self._catalog = MappingProxyType(dict(CATALOG if catalog is None else catalog))
        if assemblies is None:
            by_selection = dict(ASSEMBLIES)
        else:
            by_selection = {(a.axis, a.label): a for a in assemblies}
        for assembly in by_selection.values():
            for item in assembly.items:
                if item.catalog_code not in self._catalog:
                    msg = (
                        f"Assembly {assembly.code!r} uses unknown catalog item "
                        f"{item.catalog_code!r}"
                    )
                    raise ConfigurationError("catalog", item.catalog_code, msg)
        for item in PROJECT_ITEMS:
            if item.catalog_code not in self._catalog:
                raise ConfigurationError("catalog", item.catalog_code)
        self._assemblies = MappingProxyType(by_selection)

    def table(self, axis: MultiplierAxis) -> Mapping[str, float]:
        """Return the read-only table for *axis*."""
        return self._tables[axis]

    def resolve(self, axis: MultiplierAxis, label: str) -> float:
        """Resolve *label* on *axis*, raising ConfigurationError on a miss."""
        return resolve(self._tables[axis], label, category=axis.value)

    def resolve_optional(self, axis: MultiplierAxis, label: str | None) -> float | None:
        """Resolve an optional selection; ``None`` means the axis is not applied."""
        if label is None:
            return None
        return self.resolve(axis, label)

    def ceiling_height_m(self, label: str) -> float:
        """Height in meters of a ceiling option."""
        return resolve(
            self._ceiling_heights, label, category=MultiplierAxis.CEILING_HEIGHT.value,
        )

    def catalog_item(self, code: str) -> CatalogItem:
        try:
            return self._catalog[code]
        except KeyError:
            raise ConfigurationError("catalog", code) from None

    def assembly_for(self, axis: MultiplierAxis, label: str) -> Assembly | None:
        """The assembly a selection pulls into a room, if it has one."""
        return self._assemblies.get((axis, label))

    def labels(self, axis: MultiplierAxis) -> list[str]:
        """List the option labels for *axis* in table order."""
        return list(self._tables[axis])

    def cities_for_country(self, country: str) -> list[str]:
        """List city options for *country*.

        Unknown countries get the generic ``"Other"`` list.
        """
        cities = self._cities.get(country)
        if cities is None:
            cities = self._cities.get(OTHER_COUNTRY, ())
        return list(cities)

    def options(self) -> dict[str, list[str]]:
        """Return every axis's labels keyed by axis name."""
        return {axis.value: list(table) for axis, table in self._tables.items()}
