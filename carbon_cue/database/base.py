"""
Engine and migration helpers following kkb_fastapi pattern.

The ``[db]`` config section is passed straight to ``URL.create``; its
``drivername`` selects the backend (asyncpg in production, aiosqlite in
development and tests).
"""
import asyncio
import functools
import logging
from pathlib import Path

from alembic import command
from alembic.config import Config as alembic_config
from sqlalchemy.engine.url import URL
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from carbon_cue.core.config import Config

POSTGRES_DRIVER = "postgresql+asyncpg"

# Async driver -> sync driver used by Alembic
SYNC_DRIVERS = {
    POSTGRES_DRIVER: "postgresql",
    "sqlite+aiosqlite": "sqlite",
}

# Small pool; asyncpg statement caches off for pgbouncer compatibility
postgres_engine_kw = {
    "pool_pre_ping": True,
    "pool_size": 2,
    "max_overflow": 4,
    "connect_args": {
        "prepared_statement_cache_size": 0,
        "statement_cache_size": 0,
    },
}

APP_ONLY_DB_KEYS = ("migrate_on_startup",)


def get_db_url(config: Config) -> URL:
    """
    Async database URL for the ``[db]`` section.

    Keys that only steer the application (e.g. ``migrate_on_startup``) are
    left out.
    """
    params = {
        key: value
        for key, value in config.section("db").items()
        if key not in APP_ONLY_DB_KEYS
    }
    drivername = params.pop("drivername", POSTGRES_DRIVER)
    return URL.create(drivername=drivername, **params)


def get_engine_kw(async_db_url: URL) -> dict:
    """Engine options for the URL's backend."""
    if async_db_url.drivername == POSTGRES_DRIVER:
        return dict(postgres_engine_kw)
    return {"pool_pre_ping": True}


def get_async_engine(async_db_url: URL) -> AsyncEngine:
    return create_async_engine(async_db_url, **get_engine_kw(async_db_url))


def get_sync_db_url(config: Config) -> str:
    """Render the synchronous URL Alembic connects with."""
    async_url = get_db_url(config)
    sync_driver = SYNC_DRIVERS.get(async_url.drivername, async_url.drivername)
    return async_url.set(drivername=sync_driver).render_as_string(hide_password=False)


def _alembic_config(config: Config) -> alembic_config:
    project_root = Path.cwd()
    alembic_cfg = alembic_config(str(project_root / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(project_root / "alembic_migrations"))
    # configparser interpolation: a literal % must be doubled
    alembic_cfg.set_main_option("sqlalchemy.url", get_sync_db_url(config).replace("%", "%%"))
    return alembic_cfg


async def apply_db_migration(config: Config):
    """
    Upgrade the configured database to the latest Alembic revision.

    The database itself must already exist. Alembic is synchronous, so the
    upgrade runs in the default executor.
    """
    alembic_cfg = _alembic_config(config)

    logging.info("Starting database migrations...")
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(
        None, functools.partial(command.upgrade, alembic_cfg, "head")
    )
    logging.info("Database migration completed successfully")
