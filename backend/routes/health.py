"""Health and readiness check routes."""

import logging

from fastapi import APIRouter, Request

from config import settings

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "feed-proxy"


@router.get("/ready")
async def ready() -> dict:
    """Lightweight readiness check — no external calls."""
    return {"status": "ok", "service": SERVICE_NAME, "commit": settings.git_sha}


@router.get("/health")
async def health(request: Request) -> dict:
    """Deep health check that verifies upstream provider connectivity."""
    result = {"status": "ok", "service": SERVICE_NAME, "commit": settings.git_sha, "upstream": "not_tested"}

    try:
        users = await request.app.state.views.client.fetch_users()
        result["upstream"] = "connected"
        result["upstream_users"] = len(users)
    except Exception as e:
        logger.exception("Upstream health check failed")
        result["upstream"] = "error"
        result["upstream_error"] = str(e)

    return result
