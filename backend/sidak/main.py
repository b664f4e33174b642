"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sidak.config import get_settings
from sidak.infrastructure.database import Base, engine
from sidak.infrastructure.database.session import async_session_factory
from sidak.infrastructure.database.repositories import (
    SQLAlchemyMasterDataRepository,
    SQLAlchemyUserRepository,
)
from sidak.application.services import DataSeeder
from sidak.infrastructure.logging.log_config import setup_logging
from sidak.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _ensure_database_exists() -> None:
    """Create the PostgreSQL database if it does not yet exist.

    Connects to the default ``postgres`` maintenance database, checks for the
    target database name, and issues ``CREATE DATABASE`` when missing. SQLite
    URLs are skipped; the file is created on first connect.
    """
    from urllib.parse import urlparse

    settings = get_settings()
    if not settings.database_url.startswith("postgresql://"):
        return

    import asyncpg

    parsed = urlparse(settings.database_url)
    db_name = parsed.path.lstrip("/")
    if not db_name:
        return

    maintenance_url = settings.database_url.rsplit("/", 1)[0] + "/postgres"

    try:
        conn = await asyncpg.connect(maintenance_url)
        try:
            exists = await conn.fetchval(
                "SELECT 1 FROM pg_database WHERE datname = $1", db_name
            )
            if not exists:
                # CREATE DATABASE cannot run inside a transaction block
                await conn.execute(f'CREATE DATABASE "{db_name}"')
                logger.info("Created database '%s'", db_name)
            else:
                logger.debug("Database '%s' already exists", db_name)
        finally:
            await conn.close()
    except Exception as exc:
        logger.warning("Could not auto-create database '%s': %s", db_name, exc)


async def _seed_data() -> None:
    """Seed master data lists and default users (idempotent)."""
    settings = get_settings()
    try:
        async with async_session_factory() as session:
            seeder = DataSeeder(
                master_data_repository=SQLAlchemyMasterDataRepository(session),
                user_repository=SQLAlchemyUserRepository(session),
                seed_file=settings.master_data_seed_file,
                seed_default_users=settings.seed_default_users,
            )
            await seeder.seed()
            await session.commit()
    except Exception:
        logger.exception("Failed to seed initial data; continuing without it")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: create tables and seed reference data."""
    setup_logging()

    # 0. Ensure the PostgreSQL database exists (auto-create if missing)
    await _ensure_database_exists()

    # 1. Create all database tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 2. Master data + default accounts
    await _seed_data()

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "sidak.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
