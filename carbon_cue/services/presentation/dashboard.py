"""
Dashboard builder.

Turns a dataset report into summary cards, bar and trend series, and
analysis items ready for display.
"""

from decimal import Decimal
from typing import Mapping

from carbon_cue.pydantic_models.dashboard import (
    AnalysisItem,
    BarPydModel,
    DashboardPydModel,
    SummaryCard,
    TrendSeries,
)
from carbon_cue.pydantic_models.dataset import (
    CategoryCue,
    DatasetAggregate,
    DatasetReportPydModel,
    RankedTotal,
)
from carbon_cue.services.aggregators.emission_aggregator import rank_totals
from carbon_cue.services.calculators.footprint_calculator import equivalences_for
from carbon_cue.services.presentation.formatters import (
    format_emission,
    format_number,
    format_share,
    human_readable_category,
)

NOT_AVAILABLE = "N/A"


def _ranked_label(entry: RankedTotal | None, humanize: bool = False) -> str:
    if entry is None:
        return NOT_AVAILABLE
    name = human_readable_category(entry.key) if humanize else entry.key
    return f"{name} ({format_emission(entry.co2e_kg)})"


def build_summary_cards(aggregate: DatasetAggregate) -> list[SummaryCard]:
    return [
        SummaryCard(title="Total Emissions", value=format_emission(aggregate.total)),
        SummaryCard(title="Top Department", value=_ranked_label(aggregate.top_department)),
        SummaryCard(
            title="Top Category",
            value=_ranked_label(aggregate.top_category, humanize=True),
        ),
    ]


def build_bars(totals: Mapping[str, Decimal], humanize: bool = False) -> list[BarPydModel]:
    """
    Bars sorted by value, descending; heights relative to the largest bar.
    """
    ranked = rank_totals(totals)
    if not ranked:
        return []

    max_value = ranked[0][1]
    bars = []
    for key, value in ranked:
        height = value / max_value * Decimal("100") if max_value > 0 else Decimal("0")
        bars.append(
            BarPydModel(
                key=key,
                label=human_readable_category(key) if humanize else key,
                value=value,
                value_label=format_number(value),
                height_percent=height,
            )
        )
    return bars


def build_trend(by_month: Mapping[str, Decimal]) -> TrendSeries:
    labels = sorted(by_month)
    values = [by_month[label] for label in labels]
    return TrendSeries(
        labels=labels,
        values=values,
        value_labels=[format_number(value) for value in values],
    )


def build_analysis(cues: list[CategoryCue]) -> list[AnalysisItem]:
    return [
        AnalysisItem(
            title=f"{human_readable_category(cue.category)} - {format_share(cue.share_percent)}",
            description=cue.advisory,
        )
        for cue in cues
    ]


def build_dashboard(report: DatasetReportPydModel) -> DashboardPydModel:
    """Assemble the full dashboard for a dataset report."""
    aggregate = report.aggregate
    return DashboardPydModel(
        cards=build_summary_cards(aggregate),
        department_bars=build_bars(aggregate.by_department),
        category_bars=build_bars(aggregate.by_category, humanize=True),
        trend=build_trend(aggregate.by_month),
        analysis=build_analysis(report.cues),
        equivalences=equivalences_for(aggregate.total),
    )
