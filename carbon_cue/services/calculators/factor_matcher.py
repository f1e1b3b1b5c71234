"""
Category matching for activity records.

Resolves raw category keys to EmissionCategory values. Only exact matches
(after lower-casing) count; fuzzy matching is used solely to suggest the
category a user probably meant.
"""

import logging
from typing import Optional

from rapidfuzz import fuzz, process

from carbon_cue.services.calculators.emission_factors import known_categories
from carbon_cue.utils.constants import EmissionCategory

logger = logging.getLogger(__name__)


class FactorMatcher:
    """
    Service for matching raw category keys to the factor table.

    Unrecognized keys resolve to EmissionCategory.UNKNOWN (zero factor).
    """

    # Default fuzzy matching threshold (80%)
    DEFAULT_THRESHOLD = 80

    def __init__(self, threshold: int = DEFAULT_THRESHOLD):
        self.threshold = threshold
        self._choices = {category.value: category for category in known_categories()}

    @staticmethod
    def normalize(category: str) -> str:
        """Canonical form of a category key: trimmed and lower-cased."""
        return category.strip().lower()

    def exact_match(self, category: str) -> EmissionCategory:
        """
        Resolve a category key.

        Args:
            category: Raw or normalized category key

        Returns:
            Matching EmissionCategory, or EmissionCategory.UNKNOWN
        """
        resolved = self._choices.get(self.normalize(category))
        if resolved is None:
            logger.debug(f"No emission factor for category '{category}', using zero factor")
            return EmissionCategory.UNKNOWN
        return resolved

    def suggest(self, category: str) -> Optional[EmissionCategory]:
        """
        Find the known category closest to an unrecognized key.

        Uses rapidfuzz token_sort_ratio; returns None below the threshold.
        """
        normalized = self.normalize(category)
        if not normalized:
            return None

        result = process.extractOne(
            normalized,
            self._choices.keys(),
            scorer=fuzz.token_sort_ratio,
            score_cutoff=self.threshold,
        )
        if result is None:
            return None

        matched_key, score, _ = result
        logger.info(
            f"Unknown category '{category}' looks like '{matched_key}' ({score:.0f}%)"
        )
        return self._choices[matched_key]
