"""
Emission Factors API router.

Read-only access to the static factor table.
"""
import logging
from decimal import Decimal

from fastapi import APIRouter, Query

from carbon_cue.pydantic_models.emission_factor import (
    EmissionFactorPydModel,
    EquivalencesPydModel,
)
from carbon_cue.services.calculators.emission_factors import EMISSION_FACTORS
from carbon_cue.services.calculators.footprint_calculator import equivalences_for
from carbon_cue.services.presentation.formatters import human_readable_category
from carbon_cue.utils.constants import EmissionCategory

router = APIRouter(
    prefix="/api/v1/factors",
    tags=["Emission Factors"],
)

logger = logging.getLogger(__name__)


@router.get("/", response_model=list[EmissionFactorPydModel])
async def list_emission_factors():
    """
    List the emission factors (kg CO2e per unit) used for every known category.
    """
    return [
        EmissionFactorPydModel(
            category=factor.category,
            label=human_readable_category(factor.category.value),
            co2e_factor=factor.co2e_factor,
            unit=factor.unit,
        )
        for factor in EMISSION_FACTORS.values()
        if factor.category is not EmissionCategory.UNKNOWN
    ]


@router.get("/equivalences", response_model=EquivalencesPydModel)
async def get_equivalences(
    kg_co2e: Decimal = Query(Decimal("0"), ge=0, description="Emissions in kg CO2e"),
):
    """
    Express an emission amount as trees needed for a year and smartphone charges.

    Example:
        ```
        GET /api/v1/factors/equivalences?kg_co2e=210
        ```
    """
    return equivalences_for(kg_co2e)
