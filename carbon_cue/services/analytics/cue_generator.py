"""
Reduction cue generator.

Ranks categories by emissions and attaches a static reduction suggestion
to each one.
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from carbon_cue.pydantic_models.dataset import CategoryCue
from carbon_cue.services.aggregators.emission_aggregator import rank_totals
from carbon_cue.services.calculators.factor_matcher import FactorMatcher
from carbon_cue.utils.constants import EmissionCategory

GENERIC_ADVISORY = (
    "Explore opportunities to reduce emissions in this category by analysing "
    "operations and engaging stakeholders."
)

ADVISORIES: Mapping[EmissionCategory, str] = MappingProxyType(
    {
        EmissionCategory.ELECTRICITY: (
            "High electricity emissions indicate opportunities for energy efficiency. "
            "Consider upgrading to LED lighting, optimising HVAC systems, and sourcing "
            "renewable electricity where possible."
        ),
        EmissionCategory.TRANSPORT_CAR: (
            "Car travel is a significant emitter. Encourage carpooling, promote public "
            "transport or EV options, and optimise routes to reduce distance travelled."
        ),
        EmissionCategory.TRANSPORT_BUS: (
            "Bus travel emits less per kilometre than cars but emissions can still be "
            "lowered by switching to electric or hybrid buses and optimising schedules."
        ),
        EmissionCategory.TRANSPORT_TRAIN: (
            "Train travel is relatively low-carbon. Promote its use over flights or cars "
            "for inter-city trips to cut emissions further."
        ),
        EmissionCategory.TRANSPORT_FLIGHT: (
            "Flights have very high emissions. Evaluate if trips can be replaced by "
            "virtual meetings or train travel, and offset necessary flights through "
            "verified programmes."
        ),
        EmissionCategory.WASTE: (
            "Waste-related emissions suggest opportunities in waste reduction, recycling "
            "and composting. Audit waste streams and engage suppliers to reduce packaging."
        ),
        EmissionCategory.MEAT: (
            "Meat-based meals carry a large footprint. Offer more plant-based options "
            "in canteens and catering to lower diet-related emissions."
        ),
    }
)

_matcher = FactorMatcher()


def advisory_for(kind: EmissionCategory) -> str:
    """Static suggestion for a category, or the generic fallback."""
    return ADVISORIES.get(kind, GENERIC_ADVISORY)


def share_of(value: Decimal, total: Decimal) -> Decimal:
    """Percentage of total; 0 when the total is 0."""
    if total == 0:
        return Decimal("0")
    return value / total * Decimal("100")


def generate_cues(by_category: Mapping[str, Decimal], total: Decimal) -> list[CategoryCue]:
    """
    Build the ordered list of category cues.

    Args:
        by_category: Emissions per category key
        total: Total emissions of the dataset

    Returns:
        Cues sorted by emissions descending, ties alphabetical
    """
    cues = []
    for category, value in rank_totals(by_category):
        kind = _matcher.exact_match(category)
        cues.append(
            CategoryCue(
                category=category,
                kind=kind,
                co2e_kg=value,
                share_percent=share_of(value, total),
                advisory=advisory_for(kind),
            )
        )
    return cues
