"""
Emission Aggregation Service.

Reduces activity records into per-category, per-department and per-month
totals for one dataset.
"""

import logging
from collections import defaultdict
from decimal import Decimal
from operator import attrgetter
from typing import Iterable, Mapping, Optional

from carbon_cue.pydantic_models.activity import ActivityRecordPydModel
from carbon_cue.pydantic_models.dataset import DatasetAggregate, RankedTotal

logger = logging.getLogger(__name__)


def month_key(record: ActivityRecordPydModel) -> str:
    """Bucket key for a record, e.g. '2024-01'."""
    return f"{record.date.year:04d}-{record.date.month:02d}"


def rank_totals(totals: Mapping[str, Decimal]) -> list[tuple[str, Decimal]]:
    """
    Order totals by emissions, descending.

    Ties are broken by ascending key so rankings are reproducible.
    """
    return sorted(totals.items(), key=lambda item: (-item[1], item[0]))


class EmissionAggregator:
    """
    Service for aggregating activity records.

    Aggregates emissions by:
    - Category (lower-cased dataset key)
    - Department
    - Month (YYYY-MM, chronological)

    Records with an unknown category add 0 kg but still create their
    department and month buckets.
    """

    def aggregate(self, records: Iterable[ActivityRecordPydModel]) -> DatasetAggregate:
        """
        Aggregate a dataset.

        Args:
            records: Parsed activity records, in any order

        Returns:
            DatasetAggregate with records sorted by date (stable for ties)
        """
        ordered = sorted(records, key=attrgetter("date"))

        by_category: dict[str, Decimal] = defaultdict(Decimal)
        by_department: dict[str, Decimal] = defaultdict(Decimal)
        by_month: dict[str, Decimal] = defaultdict(Decimal)
        total = Decimal("0")

        for record in ordered:
            emission = record.emission
            by_category[record.category] += emission
            by_department[record.department] += emission
            by_month[month_key(record)] += emission
            total += emission

        aggregate = DatasetAggregate(
            records=ordered,
            by_category=dict(rank_totals(by_category)),
            by_department=dict(rank_totals(by_department)),
            by_month=dict(sorted(by_month.items())),
            total=total,
            top_category=self.top_entry(by_category),
            top_department=self.top_entry(by_department),
            record_count=len(ordered),
        )

        logger.info(
            f"Aggregated {aggregate.record_count} records: total={total} kg CO2e, "
            f"{len(by_category)} categories, {len(by_department)} departments, "
            f"{len(by_month)} months"
        )
        return aggregate

    @staticmethod
    def top_entry(totals: Mapping[str, Decimal]) -> Optional[RankedTotal]:
        """Highest-emitting key, or None when there are no totals."""
        ranked = rank_totals(totals)
        if not ranked:
            return None
        key, value = ranked[0]
        return RankedTotal(key=key, co2e_kg=value)
