"""FastAPI application factory / entrypoint.

This service exposes HTTP endpoints for:
- listing, creating and cascade-deleting players
- listing, recording and deleting poker sessions
- per-player and overall profit analytics
- health checks

The API is consumed by the web dashboard and by local tooling.

Operational notes:
- CORS origins come from settings (`CORS_ORIGINS`).
- The database engine is owned by the app: created lazily on first use,
  tables created at startup when `CREATE_TABLES` is on, disposed at shutdown.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from ledger_common.db import Database
from ledger_common.logging import setup_logging

from .errors import LedgerError
from .models import create_schema
from .routes import router
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    """Render `InvalidArgument` / `NotFound` / `StorageError` as `{"message": ...}`."""
    if exc.status_code >= 500:
        # detail was already logged where the error was raised
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API application.

    Args:
        settings: Explicit settings (tests); defaults to `get_settings()`.

    Returns:
        FastAPI: Configured application with `app.state.db` and `app.state.settings`.
    """
    settings = settings or get_settings()
    database = Database(settings.database_url, pool_pre_ping=settings.pool_pre_ping)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_dir)
        if settings.create_tables:
            create_schema(database.engine)
        logger.info("Poker ledger API started")
        yield
        database.close()

    app = FastAPI(title="Poker Ledger API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.db = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(LedgerError, ledger_error_handler)
    app.include_router(router)
    return app


app = create_app()


def run() -> None:
    """Console entrypoint (`ledger-api`): serve `app` with uvicorn."""
    settings = get_settings()
    uvicorn.run("ledger_api.main:app", host=settings.host, port=settings.port)
