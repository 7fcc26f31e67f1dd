# backend/routers/health.py
from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health_check():
    return {"status": "ok", "message": "Server is running"}


@router.get("/health/env")
def env_preview(request: Request):
    settings = request.app.state.settings
    registry = request.app.state.registry
    return {
        "status": "ok",
        # server
        "PORT": settings.PORT,
        "ALLOWED_ORIGINS": settings.ALLOWED_ORIGINS,
        # Frammer (no secrets)
        "FRAMMER": {
            "api_url": settings.FRAMMER_API_URL,
            "api_key_configured": bool(settings.FRAMMER_API_KEY),
            "timeout_s": settings.FRAMMER_TIMEOUT_S,
            "webhook_url": settings.WEBHOOK_URL,
        },
        "tracked_jobs": len(registry),
    }
