"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from host_manager.config import get_settings
from host_manager.application.services import AuthService
from host_manager.application.services.demo_data import seed_demo_data
from host_manager.domain.exceptions import RecordParseError
from host_manager.infrastructure.database import create_tables, engine
from host_manager.infrastructure.database.session import async_session_factory
from host_manager.infrastructure.database.repositories import (
    SQLAlchemyAdminCredentialRepository,
    SQLAlchemyClientRepository,
    SQLAlchemyPlatformRepository,
    SQLAlchemyRecordRepository,
)
from host_manager.infrastructure.dependencies import (
    get_change_notifier,
    get_json_store,
    get_password_hasher,
    get_token_issuer,
)
from host_manager.infrastructure.logging.log_config import setup_logging
from host_manager.infrastructure.storage.json_entity_store import (
    JsonClientRepository,
    JsonPlatformRepository,
    JsonRecordRepository,
)
from host_manager.presentation.api.v1.router import router as api_router

logger = logging.getLogger(__name__)


async def _bootstrap_admin() -> None:
    """Create the hashed admin credential from settings if none exists yet."""
    settings = get_settings()
    try:
        async with async_session_factory() as session:
            service = AuthService(
                repository=SQLAlchemyAdminCredentialRepository(session),
                hasher=get_password_hasher(),
                tokens=get_token_issuer(),
            )
            if await service.ensure_admin(settings.admin_username, settings.admin_password):
                logger.warning(
                    "Created admin '%s' from settings; change the password via "
                    "PUT /api/v1/auth/credentials",
                    settings.admin_username,
                )
            await session.commit()
    except Exception:
        logger.exception("Could not bootstrap admin credential")


async def _seed_demo_data() -> None:
    """Insert sample platforms, clients and records into an empty store.

    Idempotent — safe to call on every startup.
    """
    settings = get_settings()
    try:
        if settings.storage_backend == "json":
            store = get_json_store()
            await seed_demo_data(
                JsonPlatformRepository(store),
                JsonClientRepository(store),
                JsonRecordRepository(store),
            )
            return

        async with async_session_factory() as session:
            await seed_demo_data(
                SQLAlchemyPlatformRepository(session),
                SQLAlchemyClientRepository(session),
                SQLAlchemyRecordRepository(session),
            )
            await session.commit()
    except Exception as exc:
        logger.warning("Could not seed demo data: %s", exc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create tables, bootstrap admin, optional demo data."""
    settings = get_settings()
    setup_logging()

    # 1. Tables (credentials always live in the database)
    await create_tables()

    # 2. Hashed admin credential
    await _bootstrap_admin()

    # 3. Sample data for a fresh install
    if settings.seed_demo_data:
        await _seed_demo_data()

    logger.info("Host Manager started (storage=%s)", settings.storage_backend)

    yield

    # Shutdown
    await get_change_notifier().shutdown()
    await engine.dispose()


async def _record_parse_error_handler(request: Request, exc: RecordParseError) -> JSONResponse:
    logger.warning("Unreadable stored value on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc)},
    )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RecordParseError, _record_parse_error_handler)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "host_manager.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
