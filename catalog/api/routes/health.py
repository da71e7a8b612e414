import logging
import time

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.dependencies.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

VERSION = "1.0.0"


async def _check_database(db: AsyncSession) -> dict:
    try:
        start = time.monotonic()
        await db.execute(text("SELECT 1"))
        latency_ms = round((time.monotonic() - start) * 1000)
        return {"status": "up", "latency_ms": latency_ms}
    except Exception as e:
        logger.warning("Database health check failed: %s", e)
        return {"status": "down", "error": str(e)}


@router.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    checks = {"database": await _check_database(db)}
    overall = "healthy" if checks["database"]["status"] == "up" else "unhealthy"
    return {
        "status": overall,
        "version": VERSION,
        "checks": checks,
    }
