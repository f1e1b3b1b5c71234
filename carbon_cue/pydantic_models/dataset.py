"""
Pydantic models for uploaded datasets, their aggregates and analytics.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from carbon_cue.pydantic_models.activity import (
    ActivityRecordPydModel,
    MalformedRowPydModel,
    UnknownCategoryPydModel,
)
from carbon_cue.utils.constants import EmissionCategory


class RankedTotal(BaseModel):
    """A key with its summed emissions."""

    key: str = Field(..., examples=["Ops"])
    co2e_kg: Decimal = Field(..., examples=[Decimal("90.5335")])


class DatasetAggregate(BaseModel):
    """Emission totals of one dataset grouped by category, department and month."""

    records: list[ActivityRecordPydModel] = Field(
        default_factory=list, description="Records sorted by date, ascending"
    )
    by_category: dict[str, Decimal] = Field(default_factory=dict)
    by_department: dict[str, Decimal] = Field(default_factory=dict)
    by_month: dict[str, Decimal] = Field(
        default_factory=dict, description="YYYY-MM keys in ascending order"
    )
    total: Decimal = Field(Decimal("0"), description="Total emissions in kg CO2e")
    top_category: RankedTotal | None = None
    top_department: RankedTotal | None = None
    record_count: int = 0


class CategoryCue(BaseModel):
    """Share of total emissions for one category, with a reduction suggestion."""

    category: str = Field(..., examples=["electricity"])
    kind: EmissionCategory
    co2e_kg: Decimal
    share_percent: Decimal = Field(..., description="Share of total, 0-100", examples=[Decimal("90.57")])
    advisory: str


class DatasetReportPydModel(BaseModel):
    """Everything derived from one dataset load."""

    generation: int = Field(..., description="Load generation that produced this report")
    source: str = Field(..., examples=["upload:sample_data.csv"])
    aggregate: DatasetAggregate
    cues: list[CategoryCue] = Field(default_factory=list)
    malformed_rows: list[MalformedRowPydModel] = Field(default_factory=list)
    unknown_categories: list[UnknownCategoryPydModel] = Field(default_factory=list)


class DatasetTextRequest(BaseModel):
    """Raw dataset text submitted as JSON."""

    text: str = Field(
        ...,
        description="CSV text with a date,department,category,unit,amount header",
        examples=["date,department,category,unit,amount\n2024-01-05,Ops,electricity,kWh,100"],
    )
