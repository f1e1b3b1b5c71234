"""
Per-process pipeline state.

Holds the current dataset report, the latest unsaved calculation and a
load-generation counter. Every dataset load takes a generation number
first; only the load holding the latest number may install its report,
so a slow superseded load cannot overwrite a newer dataset.
"""

import logging
from typing import Optional

from carbon_cue.pydantic_models.calculation import CalculationEntryPydModel
from carbon_cue.pydantic_models.dataset import DatasetReportPydModel
from carbon_cue.utils.exceptions import MissingSavedResultError, StaleDatasetError

logger = logging.getLogger(__name__)

ALREADY_SAVED_MESSAGE = (
    "This calculation is already saved. Calculate again to save a new entry."
)


class PipelineState:
    """Mutable state of one running application."""

    def __init__(self):
        self._generation = 0
        self.current_report: Optional[DatasetReportPydModel] = None
        self.last_calculation: Optional[CalculationEntryPydModel] = None
        self.last_saved: Optional[CalculationEntryPydModel] = None

    @property
    def generation(self) -> int:
        """Generation of the most recently started load."""
        return self._generation

    def begin_load(self) -> int:
        """Start a dataset load and return its generation."""
        self._generation += 1
        logger.debug(f"Started dataset load {self._generation}")
        return self._generation

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    def commit_dataset(self, report: DatasetReportPydModel) -> None:
        """
        Install a report as the current dataset.

        Raises:
            StaleDatasetError: If a newer load started after this one
        """
        if not self.is_current(report.generation):
            logger.info(
                f"Discarding stale dataset load {report.generation} "
                f"(latest is {self._generation})"
            )
            raise StaleDatasetError(report.generation, self._generation)

        self.current_report = report
        logger.info(
            f"Dataset load {report.generation} from {report.source} is now current "
            f"({report.aggregate.record_count} records)"
        )

    def record_calculation(self, entry: CalculationEntryPydModel) -> None:
        self.last_calculation = entry
        self.last_saved = None

    def pending_calculation(self) -> CalculationEntryPydModel:
        """
        The calculation waiting to be saved.

        Raises:
            MissingSavedResultError: If nothing has been calculated yet, or
                the latest calculation was already saved
        """
        if self.last_calculation is not None:
            return self.last_calculation
        if self.last_saved is not None:
            raise MissingSavedResultError(ALREADY_SAVED_MESSAGE)
        raise MissingSavedResultError()

    def clear_calculation(self) -> None:
        """Mark the pending calculation as saved."""
        self.last_saved = self.last_calculation
        self.last_calculation = None
