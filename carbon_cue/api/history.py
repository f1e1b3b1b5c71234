"""
Calculation History API router.

Save, list and clear past footprint calculations.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_cue.core.dependencies import (
    get_db_session,
    get_history_storage_key,
    get_pipeline_state,
)
from carbon_cue.database.repositories import HistoryRepository
from carbon_cue.pydantic_models.calculation import CalculationEntryPydModel
from carbon_cue.pydantic_models.history import HistoryResponse
from carbon_cue.services.pipeline_state import PipelineState
from carbon_cue.utils.exceptions import MissingSavedResultError

router = APIRouter(
    prefix="/api/v1/history",
    tags=["History"],
)

logger = logging.getLogger(__name__)


@router.get("/", response_model=HistoryResponse)
async def list_history(
    session: AsyncSession = Depends(get_db_session),
    storage_key: str = Depends(get_history_storage_key),
):
    """
    List saved calculations in the order they were saved.
    """
    entries = await HistoryRepository(session, storage_key).load_all()
    return HistoryResponse.from_entries(entries)


@router.post("/", response_model=CalculationEntryPydModel, status_code=status.HTTP_201_CREATED)
async def save_calculation(
    session: AsyncSession = Depends(get_db_session),
    storage_key: str = Depends(get_history_storage_key),
    state: PipelineState = Depends(get_pipeline_state),
):
    """
    Save the pending calculation to history.

    Returns 409 when nothing has been calculated yet.
    """
    try:
        entry = state.pending_calculation()
    except MissingSavedResultError as e:
        logger.info(f"Save rejected: {e.message}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e

    await HistoryRepository(session, storage_key).append(entry)
    await session.commit()
    state.clear_calculation()
    return entry


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
async def clear_history(
    session: AsyncSession = Depends(get_db_session),
    storage_key: str = Depends(get_history_storage_key),
):
    """
    Remove all saved calculations.
    """
    await HistoryRepository(session, storage_key).clear_all()
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
