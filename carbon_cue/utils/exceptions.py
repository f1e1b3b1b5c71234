"""
Domain exceptions raised by the CarbonCue services.

Routers translate these into HTTP errors.
"""


class InvalidDatasetError(Exception):
    """
    Raised when an uploaded dataset cannot be read as a whole.

    Row-level problems never raise; they are reported as malformed rows.
    """

    def __init__(self, message: str, missing_columns: list[str] | None = None):
        self.message = message
        self.missing_columns = missing_columns or []
        super().__init__(message)


class MissingSavedResultError(Exception):
    """Raised when saving to history without a pending calculation."""

    def __init__(self, message: str = "Please calculate your footprint before saving."):
        self.message = message
        super().__init__(message)


class SampleDataUnavailableError(Exception):
    """
    Raised when the sample dataset cannot be fetched.

    Preserves the original exception for logging.
    """

    def __init__(self, source: str, original_exception: Exception | None = None):
        self.source = source
        self.original_exception = original_exception

        error_msg = f"Sample data could not be loaded from {source}"
        if original_exception:
            error_msg += (
                f"\nCaused by: {type(original_exception).__name__}: "
                f"{original_exception}"
            )

        super().__init__(error_msg)


class StaleDatasetError(Exception):
    """Raised when a dataset load finishes after a newer load has started."""

    def __init__(self, generation: int, latest_generation: int):
        self.generation = generation
        self.latest_generation = latest_generation
        super().__init__(
            f"Dataset load {generation} was superseded by load {latest_generation}"
        )
