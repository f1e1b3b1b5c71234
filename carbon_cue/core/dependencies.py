"""
FastAPI dependencies.
"""
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_cue.core.config import Config
from carbon_cue.database.session_manager.db_session import Database
from carbon_cue.services.parsers.csv_parser import ActivityCSVParser
from carbon_cue.services.pipeline_state import PipelineState
from carbon_cue.utils.constants import DEFAULT_HISTORY_STORAGE_KEY


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session that commits when the request handler returns."""
    async with Database() as session:
        yield session


def get_app_config(request: Request) -> Config:
    return request.app.state.config


def get_pipeline_state(request: Request) -> PipelineState:
    return request.app.state.pipeline


def get_csv_parser(request: Request) -> ActivityCSVParser:
    parser_config = request.app.state.config.section("parser")
    return ActivityCSVParser(dayfirst=parser_config.get("dayfirst", False))


def get_history_storage_key(request: Request) -> str:
    analytics_config = request.app.state.config.section("analytics")
    return analytics_config.get("history_storage_key", DEFAULT_HISTORY_STORAGE_KEY)
