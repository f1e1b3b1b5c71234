"""
Dataset pipeline: raw text -> parser -> aggregator -> analytics.

Pure functions; installing the result as the current dataset is left to
the caller (see PipelineState).
"""

import logging
from collections import Counter

from carbon_cue.pydantic_models.activity import (
    ActivityRecordPydModel,
    UnknownCategoryPydModel,
)
from carbon_cue.pydantic_models.dataset import DatasetReportPydModel
from carbon_cue.services.aggregators.emission_aggregator import EmissionAggregator
from carbon_cue.services.analytics.cue_generator import generate_cues
from carbon_cue.services.calculators.factor_matcher import FactorMatcher
from carbon_cue.services.parsers.csv_parser import ActivityCSVParser
from carbon_cue.utils.constants import EmissionCategory

logger = logging.getLogger(__name__)


def find_unknown_categories(
    records: list[ActivityRecordPydModel],
    factor_matcher: FactorMatcher,
) -> list[UnknownCategoryPydModel]:
    """Categories without a factor, with record counts and a likely match."""
    counts = Counter(
        record.category for record in records if record.kind is EmissionCategory.UNKNOWN
    )
    return [
        UnknownCategoryPydModel(
            category=category,
            record_count=count,
            suggestion=factor_matcher.suggest(category),
        )
        for category, count in sorted(counts.items())
    ]


def build_dataset_report(
    text: str,
    parser: ActivityCSVParser,
    generation: int,
    source: str,
) -> DatasetReportPydModel:
    """
    Run the whole pipeline on dataset text.

    Args:
        text: Raw CSV text
        parser: Configured parser
        generation: Load generation from PipelineState.begin_load()
        source: Where the text came from, for display and logs

    Returns:
        DatasetReportPydModel

    Raises:
        InvalidDatasetError: If the header lacks required columns
    """
    logger.info(f"Running pipeline for load {generation} ({source})")

    parsed = parser.parse(text)
    aggregate = EmissionAggregator().aggregate(parsed.records)
    cues = generate_cues(aggregate.by_category, aggregate.total)

    return DatasetReportPydModel(
        generation=generation,
        source=source,
        aggregate=aggregate,
        cues=cues,
        malformed_rows=parsed.malformed_rows,
        unknown_categories=find_unknown_categories(parsed.records, parser.factor_matcher),
    )
