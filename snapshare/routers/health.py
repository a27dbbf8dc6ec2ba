"""
Health check router.
"""
import asyncio
import logging
import time
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from snapshare.database import Database, get_database

logger = logging.getLogger("snapshare.health")
router = APIRouter(prefix="/health", tags=["Health"])

DB_CHECK_TIMEOUT = 1.0


@router.get(
    "",
    summary="Health check",
)
async def health_check(
    database: Database = Depends(get_database),
) -> Dict[str, Any]:
    """
    Check that the process is up and the database answers within 1 second.
    """
    start_time = time.perf_counter()
    try:
        await asyncio.wait_for(database.ping(), timeout=DB_CHECK_TIMEOUT)
    except asyncio.TimeoutError:
        logger.warning("DB health check timeout", extra={"event": "health"})
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database connection timeout",
        )
    except Exception as e:
        logger.warning(
            "DB health check failed",
            extra={"event": "health", "error": str(e)},
        )
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database connection failed",
        )

    return {
        "status": "healthy",
        "duration_ms": round((time.perf_counter() - start_time) * 1000, 2),
    }
