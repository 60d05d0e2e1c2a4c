from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Request

from app.core.config import settings

router = APIRouter(tags=["system"])


@router.get("/health", summary="Liveness check")
def health(request: Request) -> dict:
    started_at = getattr(request.app.state, "started_at", None)
    uptime = (datetime.now(UTC) - started_at).total_seconds() if started_at else 0.0
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "uptime_s": round(uptime, 1),
    }
