"""
Pydantic models for the calculation history.
"""

from pydantic import BaseModel, Field

from carbon_cue.pydantic_models.calculation import CalculationEntryPydModel

NO_HISTORY_MESSAGE = "No history yet."


class HistoryResponse(BaseModel):
    """Saved calculations in insertion order."""

    entries: list[CalculationEntryPydModel] = Field(default_factory=list)
    is_empty: bool = True
    message: str | None = Field(None, examples=[NO_HISTORY_MESSAGE])

    @classmethod
    def from_entries(cls, entries: list[CalculationEntryPydModel]) -> "HistoryResponse":
        if not entries:
            return cls(entries=[], is_empty=True, message=NO_HISTORY_MESSAGE)
        return cls(entries=entries, is_empty=False, message=None)
