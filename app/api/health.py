"""
Health API endpoints
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.core.config import config
from app.core.logger import logger
from app.db.mongodb import ping_database

router = APIRouter()


@router.get("/health")
async def health_check():
    """Check if the service is running"""
    return {"status": "Service is running"}


@router.get("/health/ready")
async def readiness_check(request: Request):
    """Readiness probe - check that the database and message broker are reachable"""
    checks = {"database": "healthy" if await ping_database() else "unhealthy"}

    broker = getattr(request.app.state, "broker", None)
    if broker is None:
        checks["message_broker"] = "not_configured"
    else:
        checks["message_broker"] = "healthy" if broker.is_healthy() else "unhealthy"

    failed = [name for name, state in checks.items() if state == "unhealthy"]
    body = {
        "status": "ready" if not failed else "not ready",
        "service": config.service_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": checks,
    }

    if failed:
        logger.warning(
            f"Readiness check failed - {len(failed)} checks failed",
            metadata={"event": "readiness_check_failed", "failed_checks": failed}
        )
        return JSONResponse(status_code=503, content=body)
    return body
