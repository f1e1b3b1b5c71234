"""
Pydantic models for presentation-ready dashboard data.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from carbon_cue.pydantic_models.emission_factor import EquivalencesPydModel


class SummaryCard(BaseModel):
    title: str = Field(..., examples=["Total Emissions"])
    value: str = Field(..., examples=["90.53 kg"])


class BarPydModel(BaseModel):
    """One bar of a bar chart."""

    key: str
    label: str
    value: Decimal
    value_label: str = Field(..., examples=["1.50k"])
    height_percent: Decimal = Field(..., ge=0, le=100)


class TrendSeries(BaseModel):
    """Monthly emissions line chart."""

    labels: list[str] = Field(default_factory=list, examples=[["2024-01", "2024-02"]])
    values: list[Decimal] = Field(default_factory=list)
    value_labels: list[str] = Field(default_factory=list)


class AnalysisItem(BaseModel):
    title: str = Field(..., examples=["Electricity - 90.6%"])
    description: str


class DashboardPydModel(BaseModel):
    """Cards, charts and reduction cues for the current dataset."""

    cards: list[SummaryCard]
    department_bars: list[BarPydModel]
    category_bars: list[BarPydModel]
    trend: TrendSeries
    analysis: list[AnalysisItem]
    equivalences: EquivalencesPydModel
