"""
Datasets API router.

Upload activity datasets and read the aggregates, cues and dashboard
derived from the current one.
"""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from carbon_cue.core.config import Config
from carbon_cue.core.dependencies import (
    get_app_config,
    get_csv_parser,
    get_pipeline_state,
)
from carbon_cue.pydantic_models.dashboard import DashboardPydModel
from carbon_cue.pydantic_models.dataset import DatasetReportPydModel, DatasetTextRequest
from carbon_cue.services.parsers.csv_parser import ActivityCSVParser
from carbon_cue.services.pipeline import build_dataset_report
from carbon_cue.services.pipeline_state import PipelineState
from carbon_cue.services.presentation.dashboard import build_dashboard
from carbon_cue.services.sample_data import SampleDataLoader
from carbon_cue.utils.exceptions import (
    InvalidDatasetError,
    SampleDataUnavailableError,
    StaleDatasetError,
)

router = APIRouter(
    prefix="/api/v1/datasets",
    tags=["Datasets"],
)

logger = logging.getLogger(__name__)


def _run_pipeline(
    text: str,
    parser: ActivityCSVParser,
    state: PipelineState,
    generation: int,
    source: str,
) -> DatasetReportPydModel:
    """Build the report for a finished load and make it current."""
    try:
        report = build_dataset_report(text, parser, generation, source)
        state.commit_dataset(report)
    except InvalidDatasetError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message
        ) from e
    except StaleDatasetError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return report


def _current_report(state: PipelineState) -> DatasetReportPydModel:
    if state.current_report is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No dataset loaded. Upload a CSV file or load the sample data.",
        )
    return state.current_report


@router.post("/upload", response_model=DatasetReportPydModel)
async def upload_dataset(
    file: UploadFile = File(..., description="CSV file with date,department,category,unit,amount"),
    parser: ActivityCSVParser = Depends(get_csv_parser),
    state: PipelineState = Depends(get_pipeline_state),
):
    """
    Upload a CSV dataset; it replaces the current dataset.

    Rows with an unparsable date or amount are dropped and listed in
    ``malformed_rows``. Categories without a factor count as 0 kg and are
    listed in ``unknown_categories``.

    Example:
        ```
        curl -F "file=@sample_data.csv" http://localhost:8000/api/v1/datasets/upload
        ```
    """
    generation = state.begin_load()
    contents = await file.read()

    try:
        text = contents.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Dataset must be UTF-8 encoded text",
        ) from e

    source = f"upload:{file.filename or 'dataset.csv'}"
    return _run_pipeline(text, parser, state, generation, source)


@router.post("/text", response_model=DatasetReportPydModel)
async def submit_dataset_text(
    request: DatasetTextRequest,
    parser: ActivityCSVParser = Depends(get_csv_parser),
    state: PipelineState = Depends(get_pipeline_state),
):
    """
    Submit dataset text as JSON; it replaces the current dataset.
    """
    generation = state.begin_load()
    return _run_pipeline(request.text, parser, state, generation, "text")


@router.post("/sample", response_model=DatasetReportPydModel)
async def load_sample_dataset(
    parser: ActivityCSVParser = Depends(get_csv_parser),
    state: PipelineState = Depends(get_pipeline_state),
    config: Config = Depends(get_app_config),
):
    """
    Load the configured sample dataset.

    If the sample cannot be read the current dataset is left untouched.
    """
    generation = state.begin_load()
    loader = SampleDataLoader(config.section("sample_data").get("source", "data/sample_data.csv"))

    try:
        text = await loader.load()
    except SampleDataUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Sample data is currently unavailable",
        ) from e

    return _run_pipeline(text, parser, state, generation, f"sample:{loader.source}")


@router.get("/current", response_model=DatasetReportPydModel)
async def get_current_dataset(state: PipelineState = Depends(get_pipeline_state)):
    """
    Get the report for the current dataset.
    """
    return _current_report(state)


@router.get("/current/dashboard", response_model=DashboardPydModel)
async def get_current_dashboard(state: PipelineState = Depends(get_pipeline_state)):
    """
    Get summary cards, bar and trend series and reduction cues for the current dataset.
    """
    return build_dashboard(_current_report(state))
