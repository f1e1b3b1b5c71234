"""
Pydantic models for activity records and parser output.
"""

from datetime import date as DateType
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from carbon_cue.services.calculators.emission_factors import factor_for
from carbon_cue.utils.constants import EmissionCategory, MalformedRowReason


class ActivityRecordPydModel(BaseModel):
    """
    One logged activity.

    ``emission`` is always derived from ``amount`` and the factor table.
    """

    model_config = ConfigDict(frozen=True)

    date: DateType = Field(..., description="Date of activity", examples=["2024-01-05"])
    department: str = Field(..., description="Department the activity belongs to", examples=["Ops"])
    category: str = Field(
        ...,
        description="Lower-cased category key as written in the dataset",
        examples=["electricity"],
    )
    kind: EmissionCategory = Field(
        EmissionCategory.UNKNOWN,
        description="Resolved emission category",
    )
    unit: str = Field("", description="Unit as written in the dataset (informational)", examples=["kWh"])
    amount: Decimal = Field(..., ge=0, description="Activity amount", examples=[Decimal("100")])

    @computed_field
    @property
    def emission(self) -> Decimal:
        """Emissions in kg CO2e."""
        return self.amount * factor_for(self.kind)


class MalformedRowPydModel(BaseModel):
    """A dataset line that was dropped by the parser."""

    line_number: int = Field(..., ge=1, description="1-based line number in the uploaded text")
    reason: MalformedRowReason
    raw: str = Field(..., description="The line as uploaded")


class UnknownCategoryPydModel(BaseModel):
    """A category key with no emission factor."""

    category: str
    record_count: int = Field(..., ge=1)
    suggestion: EmissionCategory | None = Field(
        None, description="Closest known category, if any"
    )


class ParseResult(BaseModel):
    """Parser output: usable records plus dropped rows."""

    records: list[ActivityRecordPydModel] = Field(default_factory=list)
    malformed_rows: list[MalformedRowPydModel] = Field(default_factory=list)
