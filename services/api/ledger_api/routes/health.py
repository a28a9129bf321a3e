"""Health check routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ledger_common.db import Database

from ..db import get_db

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Liveness check used by containers and local tooling.

    Returns:
        dict: `{"status": "ok", "service": "api"}`.
    """
    return {"status": "ok", "service": "api"}


@router.get("/health/db")
def health_db(db: Database = Depends(get_db)):
    """Readiness check: 200 if `SELECT 1` succeeds, otherwise 503.

    A failed check also recreates the engine (see `Database.ping`).
    """
    if db.ping():
        return {"status": "ok"}
    return JSONResponse(status_code=503, content={"status": "unavailable"})
