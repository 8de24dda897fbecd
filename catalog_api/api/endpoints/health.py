"""
Health check - for load balancers, Kubernetes, and monitoring.
Challenge: Report database reachability without failing the probe itself.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from catalog_api.db.session import DbSession

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health(session: DbSession):
    """Always 200; status is "error" when the database does not answer SELECT 1."""
    database = "disconnected"
    try:
        await session.execute(text("SELECT 1"))
        database = "connected"
    except (SQLAlchemyError, OSError):
        logger.warning("Health check: database unreachable", exc_info=True)
        await session.rollback()
        database = "error"
    return {
        "status": "ok" if database == "connected" else "error",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": database,
    }
