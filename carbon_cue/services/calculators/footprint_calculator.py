"""
Single-session footprint calculator.

Calculates CO2e emissions from one person's transport, electricity and diet.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable

from carbon_cue.pydantic_models.calculation import (
    CalculationDetails,
    CalculationEntryPydModel,
    FootprintCalculationRequest,
)
from carbon_cue.pydantic_models.emission_factor import EquivalencesPydModel
from carbon_cue.services.calculators.emission_factors import (
    TRANSPORT_MODE_CATEGORIES,
    factor_for,
)
from carbon_cue.services.calculators.unit_converter import UnitConverter
from carbon_cue.utils.constants import (
    KG_CO2E_PER_SMARTPHONE_CHARGE,
    KG_CO2E_PER_TREE_YEAR,
    EmissionCategory,
)

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp() * UnitConverter.MILLISECONDS_PER_SECOND)


class FootprintCalculator:
    """
    Service for calculating a single-session footprint.

    Formula:
        transport   = km * factor(mode)
        electricity = kWh * 0.82
        meat        = meals * 15
        total       = transport + electricity + meat
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self.clock = clock

    def calculate(self, request: FootprintCalculationRequest) -> CalculationEntryPydModel:
        """
        Calculate a footprint entry.

        Args:
            request: Validated calculation inputs (all non-negative)

        Returns:
            New CalculationEntryPydModel stamped with the current time

        Example:
            >>> entry = FootprintCalculator().calculate(
            ...     FootprintCalculationRequest(transport_km=50, electricity_kwh=100)
            ... )
            >>> entry.total
            Decimal('90.53350')
        """
        transport_category = TRANSPORT_MODE_CATEGORIES[request.transport_mode]

        details = CalculationDetails(
            transport=request.transport_km * factor_for(transport_category),
            electricity=request.electricity_kwh * factor_for(EmissionCategory.ELECTRICITY),
            meat=request.meat_meals * factor_for(EmissionCategory.MEAT),
        )
        total = details.transport + details.electricity + details.meat

        entry = CalculationEntryPydModel(
            date=epoch_millis(self.clock()),
            total=total,
            details=details,
        )

        logger.info(
            f"Calculated footprint {total} kg CO2e "
            f"(transport={details.transport}, electricity={details.electricity}, "
            f"meat={details.meat})"
        )
        return entry


def equivalences_for(kg_co2e: Decimal) -> EquivalencesPydModel:
    """
    Express an emission total in trees and smartphone charges.

    Example:
        >>> equivalences_for(Decimal("21")).trees_per_year
        Decimal('1')
    """
    return EquivalencesPydModel(
        kg_co2e=kg_co2e,
        trees_per_year=kg_co2e / KG_CO2E_PER_TREE_YEAR,
        smartphone_charges=kg_co2e / KG_CO2E_PER_SMARTPHONE_CHARGE,
    )
