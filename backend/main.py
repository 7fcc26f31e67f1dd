from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.config import Settings, get_settings
from backend.core.registry import JobRegistry
from backend.services.frammer import FrammerClient, ProcessingClient
from backend.services.submission import SubmissionGateway

from .middleware_logging import register_request_logging
from .error_handlers import register_error_handlers

logger = logging.getLogger("frammer.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("Local webhook path: /api/webhook")
    logger.info("Configured external webhook URL: %s", settings.WEBHOOK_URL or "Not set")
    if not settings.FRAMMER_API_KEY:
        logger.warning("FRAMMER_API_KEY is not set; /api/process-video will fail until it is configured")
    yield


# =========================
# ---- App Init ----
# =========================
def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[JobRegistry] = None,
    client: Optional[ProcessingClient] = None,
) -> FastAPI:
    settings = settings or get_settings()
    registry = registry if registry is not None else JobRegistry()
    client = client or FrammerClient(settings.FRAMMER_API_URL, timeout_s=settings.FRAMMER_TIMEOUT_S)

    app = FastAPI(title="Frammer Relay Backend", version="0.1.0", lifespan=lifespan)
    # one registry per process, shared by the gateway and the read routes
    app.state.settings = settings
    app.state.registry = registry
    app.state.gateway = SubmissionGateway(registry, client, settings)

    register_request_logging(app)
    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials="*" not in settings.ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from backend.routers.health import router as health_router
    app.include_router(health_router)

    from backend.routers.jobs import router as jobs_router
    app.include_router(jobs_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("backend.main:app", host="0.0.0.0", port=get_settings().PORT)
