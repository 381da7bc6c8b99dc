"""City options by country.

Cities are informational only: they are recorded on the estimate but never
priced.  The ``"Other"`` list doubles as the fallback for countries without
a dedicated list.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

OTHER_COUNTRY = "Other"

CITIES_BY_COUNTRY: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Spain": (
        "Madrid", "Barcelona", "Valencia", "Sevilla", "Bilbao", "Málaga",
        "Alicante", "Other city",
    ),
    "Brazil": (
        "São Paulo", "Rio de Janeiro", "Brasília", "Salvador",
        "Belo Horizonte", "Curitiba", "Other city",
    ),
    "Portugal": ("Lisboa", "Porto", "Faro", "Braga", "Other city"),
    "Mexico": (
        "Ciudad de México", "Monterrey", "Guadalajara", "Cancún", "Other city",
    ),
    "USA": (
        "New York", "Los Angeles", "Miami", "San Francisco", "Chicago",
        "Houston", "Other city",
    ),
    "UK": ("London", "Manchester", "Birmingham", "Edinburgh", "Other city"),
    "France": ("Paris", "Lyon", "Marseille", "Nice", "Other city"),
    "Germany": ("Berlin", "Munich", "Frankfurt", "Hamburg", "Other city"),
    "Italy": ("Milan", "Rome", "Florence", "Venice", "Other city"),
    OTHER_COUNTRY: ("Major city", "Medium city", "Small town"),
})
