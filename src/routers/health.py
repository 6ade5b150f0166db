"""Health check endpoint — public, no auth required."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from src.analytics.config_loader import get_analytics_config
from src.config import get_settings

router = APIRouter(tags=["system"])
logger = logging.getLogger("journal.health")


@router.get("/health")
async def health_check() -> dict:
    """Liveness probe. Returns 200 if the API process is up.

    Also reports which analytics config version is loaded.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.environment,
        "analytics_config": get_analytics_config().version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
