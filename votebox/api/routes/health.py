"""Health endpoint."""
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.pool import QueuePool

from votebox.api.deps import get_db, get_registry, get_settings
from votebox.bootstrap.registry import PollRegistry
from votebox.core.config import Settings
from votebox.core.logging_config import get_logger
from votebox.schemas import DatabaseHealth, HealthResponse

logger = get_logger(__name__)
router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(
    request: Request,
    db: Session = Depends(get_db),
    registry: PollRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
):
    """
    Report database reachability and connection pool usage.

    Returns 503 if the database is unreachable.
    """
    database = DatabaseHealth(status="connected", polls=len(registry))

    pool = request.app.state.engine.pool
    if isinstance(pool, QueuePool):
        database.pool = {
            "size": pool.size(),
            "checked_in": pool.checkedin(),
            "checked_out": pool.checkedout(),
            "overflow": pool.overflow(),
        }

    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("health_check_failed", error=str(e))
        raise HTTPException(
            status_code=503,
            detail={"status": "unhealthy", "database": f"error: {e}"},
        )

    return HealthResponse(
        status="healthy",
        environment=settings.ENVIRONMENT,
        version=settings.APP_VERSION,
        database=database,
    )
