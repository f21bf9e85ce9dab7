"""Health check endpoints for load balancers and monitoring."""

from datetime import datetime, timezone

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text

from shoreagents.config import settings
from shoreagents.database import bpoc_engine, engine
from shoreagents.utils.cache import get_redis

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Liveness only: no database or Redis round-trips."""
    return {
        "status": "ok",
        "service": "ShoreAgents",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
    }


async def _ping_database(db_engine) -> str:
    try:
        async with db_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return "ok"
    except Exception as e:
        return f"error: {str(e)[:100]}"


@router.get("/health/ready")
async def readiness_check():
    """Readiness: both databases and Redis must answer.

    Redis is reported but does not fail readiness, since caching and
    rate limiting both run without it.
    """
    checks = {
        "service": "ok",
        "database": await _ping_database(engine),
        "bpoc_database": await _ping_database(bpoc_engine),
        "redis": "unknown",
    }

    try:
        redis_client = await get_redis()
        await redis_client.ping()
        checks["redis"] = "ok"
    except Exception as e:
        checks["redis"] = f"error: {str(e)[:100]}"

    healthy = checks["database"] == "ok" and checks["bpoc_database"] == "ok"
    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "service": "ShoreAgents",
            "checks": checks,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )
