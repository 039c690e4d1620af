"""
Health check endpoints.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from vacation_manager import __version__
from vacation_manager.database import get_db_readonly

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    backend: str
    timestamp: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check(db: AsyncSession = Depends(get_db_readonly)):
    """
    Health check endpoint.
    Returns server status and database connectivity.
    """
    # Test database connectivity
    db_status = "connected"
    try:
        await db.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Health check database probe failed: %s", e)
        db_status = f"error: {str(e)}"

    return HealthResponse(
        status="ok",
        version=__version__,
        backend="python-fastapi",
        timestamp=datetime.now(timezone.utc).isoformat(),
        database=db_status,
    )


@router.get("/api/health", response_model=HealthResponse)
async def api_health_check(db: AsyncSession = Depends(get_db_readonly)):
    """
    API prefixed health check (for consistency with /api/* routes).
    """
    return await health_check(db)
