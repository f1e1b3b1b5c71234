"""
Footprint Calculations API router.

Single-session footprint calculation.
"""

import logging

from fastapi import APIRouter, Depends

from carbon_cue.core.dependencies import get_pipeline_state
from carbon_cue.pydantic_models.calculation import (
    FootprintCalculationRequest,
    FootprintCalculationResponse,
)
from carbon_cue.services.calculators.footprint_calculator import (
    FootprintCalculator,
    equivalences_for,
)
from carbon_cue.services.pipeline_state import PipelineState
from carbon_cue.services.presentation.formatters import format_emission

router = APIRouter(
    prefix="/api/v1/calculations",
    tags=["Calculations"],
)

logger = logging.getLogger(__name__)


@router.post("/calculate", response_model=FootprintCalculationResponse)
async def calculate_footprint(
    request: FootprintCalculationRequest,
    state: PipelineState = Depends(get_pipeline_state),
):
    """
    Calculate a footprint from transport distance, electricity use and meat meals.

    The result becomes the pending calculation that ``POST /api/v1/history``
    saves.

    Example:
        ```
        POST /api/v1/calculations/calculate
        {
            "transport_km": 50,
            "transport_mode": "car",
            "electricity_kwh": 100,
            "meat_meals": 3
        }
        ```
    """
    entry = FootprintCalculator().calculate(request)
    state.record_calculation(entry)

    return FootprintCalculationResponse(
        entry=entry,
        total_display=format_emission(entry.total),
        equivalences=equivalences_for(entry.total),
    )
