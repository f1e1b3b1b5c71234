"""
Pydantic models for Emission Factors following kkb_fastapi pattern.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from carbon_cue.utils.constants import EmissionCategory


class EmissionFactorPydModel(BaseModel):
    """Model for emission factor response."""

    category: EmissionCategory = Field(..., examples=["electricity"])
    label: str = Field(..., description="Human-readable category", examples=["Electricity"])
    co2e_factor: Decimal = Field(
        ...,
        ge=0,
        description="kg CO2e per unit",
        examples=[Decimal("0.82")]
    )
    unit: str = Field(..., description="Activity unit", examples=["kWh"])


class EquivalencesPydModel(BaseModel):
    """What an emission total corresponds to in everyday terms."""

    kg_co2e: Decimal = Field(..., ge=0, examples=[Decimal("210")])
    trees_per_year: Decimal = Field(
        ...,
        ge=0,
        description="Trees needed to absorb the emissions in one year",
        examples=[Decimal("10")]
    )
    smartphone_charges: Decimal = Field(
        ...,
        ge=0,
        description="Smartphone charges with the same emissions",
        examples=[Decimal("42000")]
    )
