"""
Static emission factor table.

Factors are kg CO2e per activity unit and are loaded once at import time.
The car factor has a single canonical value (0.17067 kg/km) shared by the
dataset pipeline and the footprint calculator.
"""
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from carbon_cue.utils.constants import EmissionCategory, TransportModeEnum


@dataclass(frozen=True)
class EmissionFactor:
    """One row of the factor table."""

    category: EmissionCategory
    co2e_factor: Decimal
    unit: str


EMISSION_FACTORS: Mapping[EmissionCategory, EmissionFactor] = MappingProxyType(
    {
        EmissionCategory.ELECTRICITY: EmissionFactor(
            EmissionCategory.ELECTRICITY, Decimal("0.82"), "kWh"
        ),
        EmissionCategory.TRANSPORT_CAR: EmissionFactor(
            EmissionCategory.TRANSPORT_CAR, Decimal("0.17067"), "km"
        ),
        EmissionCategory.TRANSPORT_BUS: EmissionFactor(
            EmissionCategory.TRANSPORT_BUS, Decimal("0.11"), "km"
        ),
        EmissionCategory.TRANSPORT_TRAIN: EmissionFactor(
            EmissionCategory.TRANSPORT_TRAIN, Decimal("0.04"), "km"
        ),
        EmissionCategory.TRANSPORT_FLIGHT: EmissionFactor(
            EmissionCategory.TRANSPORT_FLIGHT, Decimal("0.46"), "km"
        ),
        EmissionCategory.WASTE: EmissionFactor(
            EmissionCategory.WASTE, Decimal("1.0"), "kg"
        ),
        EmissionCategory.MEAT: EmissionFactor(
            EmissionCategory.MEAT, Decimal("15"), "meal"
        ),
        EmissionCategory.UNKNOWN: EmissionFactor(
            EmissionCategory.UNKNOWN, Decimal("0"), ""
        ),
    }
)

TRANSPORT_MODE_CATEGORIES: Mapping[TransportModeEnum, EmissionCategory] = MappingProxyType(
    {
        TransportModeEnum.CAR: EmissionCategory.TRANSPORT_CAR,
        TransportModeEnum.BUS: EmissionCategory.TRANSPORT_BUS,
        TransportModeEnum.TRAIN: EmissionCategory.TRANSPORT_TRAIN,
        TransportModeEnum.FLIGHT: EmissionCategory.TRANSPORT_FLIGHT,
    }
)


def factor_for(category: EmissionCategory) -> Decimal:
    """Return kg CO2e per unit for a category (0 for UNKNOWN)."""
    return EMISSION_FACTORS[category].co2e_factor


def known_categories() -> list[EmissionCategory]:
    """All categories with a real factor, in table order."""
    return [c for c in EMISSION_FACTORS if c is not EmissionCategory.UNKNOWN]
