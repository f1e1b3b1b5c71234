"""
Shared pytest fixtures following kkb_fastapi pattern.

Every test runs against a freshly created sqlite schema (see test.toml)
and an app with its own PipelineState.
"""
import logging

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from carbon_cue.core.config import ConfigFile, get_config
from carbon_cue.create_app import get_app
from carbon_cue.database import Base
from carbon_cue.database import schemas  # noqa: F401  registers tables on Base
from carbon_cue.database.base import get_async_engine, get_db_url, get_engine_kw
from carbon_cue.database.session_manager.db_session import Database

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

SAMPLE_CSV = (
    "date,department,category,unit,amount\n"
    "2024-01-05,Ops,electricity,kWh,100\n"
    "2024-01-06,Ops,transport_car,km,50\n"
)


@pytest.fixture(scope="session")
def test_config():
    return get_config(ConfigFile.TEST)


@pytest_asyncio.fixture(scope="function")
async def test_async_engine(test_config):
    """Engine used only for schema setup and teardown."""
    engine = get_async_engine(get_db_url(test_config))

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function", autouse=True)
async def db_cleanup(test_async_engine):
    """
    Recreate every table before a test and drop them afterwards.
    """
    async with test_async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with test_async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture(scope="function", autouse=True)
async def initialize_db_session(test_config, db_cleanup):
    """
    Point the Database singleton at the test database.

    ASGITransport does not run the app lifespan, so this stands in for it.
    """
    async_db_url = get_db_url(test_config)
    Database.init(async_db_url, engine_kw=get_engine_kw(async_db_url))

    yield

    await Database.close()


@pytest_asyncio.fixture(scope="function")
async def test_app(test_config):
    app = get_app(ConfigFile.TEST)
    app.state.config = test_config

    yield app


@pytest_asyncio.fixture(scope="function")
async def test_async_client(test_app):
    """HTTP client bound to ``test_app`` through ASGITransport."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(
        transport=transport, base_url="http://localhost:8000", follow_redirects=True
    ) as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def test_db_session():
    """Session that commits when the test finishes cleanly."""
    async with Database() as session:
        yield session


@pytest.fixture
def sample_csv():
    """Two-row dataset: 100 kWh electricity and 50 km by car."""
    return SAMPLE_CSV
