"""
Pydantic models for single-session footprint calculations following kkb_fastapi pattern.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from carbon_cue.pydantic_models.emission_factor import EquivalencesPydModel
from carbon_cue.utils.constants import MAX_ACTIVITY_AMOUNT, TransportModeEnum


class CalculationDetails(BaseModel):
    """Breakdown of a calculation by fixed categories (kg CO2e)."""

    model_config = ConfigDict(frozen=True)

    transport: Decimal = Field(..., ge=0, examples=[Decimal("8.5335")])
    electricity: Decimal = Field(..., ge=0, examples=[Decimal("82.00")])
    meat: Decimal = Field(..., ge=0, examples=[Decimal("45")])


class CalculationEntryPydModel(BaseModel):
    """
    One calculation, as kept in history.

    Entries are immutable once created.
    """

    model_config = ConfigDict(frozen=True)

    date: int = Field(
        ...,
        ge=0,
        description="Creation time in epoch milliseconds",
        examples=[1704412800000],
    )
    total: Decimal = Field(
        ...,
        ge=0,
        description="Total emissions in kg CO2e",
        examples=[Decimal("135.5335")],
    )
    details: CalculationDetails

    def to_storage(self) -> dict[str, Any]:
        """Plain JSON-compatible form used by the history blob."""
        return {
            "date": self.date,
            "total": float(self.total),
            "details": {
                "transport": float(self.details.transport),
                "electricity": float(self.details.electricity),
                "meat": float(self.details.meat),
            },
        }


class FootprintCalculationRequest(BaseModel):
    """Request model for a single-session footprint calculation."""

    transport_km: Decimal = Field(
        Decimal("0"),
        ge=0,
        le=MAX_ACTIVITY_AMOUNT,
        description="Distance travelled in km",
        examples=[Decimal("50")],
    )
    transport_mode: TransportModeEnum = Field(
        TransportModeEnum.CAR, description="Mode of transport", examples=["car"]
    )
    electricity_kwh: Decimal = Field(
        Decimal("0"),
        ge=0,
        le=MAX_ACTIVITY_AMOUNT,
        description="Electricity used in kWh",
        examples=[Decimal("100")],
    )
    meat_meals: Decimal = Field(
        Decimal("0"),
        ge=0,
        le=MAX_ACTIVITY_AMOUNT,
        description="Number of meat-based meals",
        examples=[Decimal("3")],
    )


class FootprintCalculationResponse(BaseModel):
    """Calculation result with user-facing comparisons."""

    entry: CalculationEntryPydModel
    total_display: str = Field(..., examples=["135.53 kg"])
    equivalences: EquivalencesPydModel
