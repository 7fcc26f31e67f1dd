import logging
import time
import uuid
from typing import Callable
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

# Configure root logger once (simple, readable format)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)

logger = logging.getLogger("frammer.request")

# polled constantly by the UI and uptime checks
QUIET_PATHS = {"/health", "/api/results"}


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable):
        start = time.perf_counter()
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
        client = request.client.host if request.client else "-"
        method = request.method
        path = request.url.path
        level = logging.DEBUG if path in QUIET_PATHS else logging.INFO

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000.0
            logger.exception(
                "rid=%s client=%s method=%s path=%s status=%s duration_ms=%.2f UNHANDLED",
                request_id, client, method, path, 500, duration_ms
            )
            raise

        duration_ms = (time.perf_counter() - start) * 1000.0
        logger.log(
            level,
            "rid=%s client=%s method=%s path=%s status=%s duration_ms=%.2f",
            request_id, client, method, path, response.status_code, duration_ms
        )
        response.headers["X-Request-ID"] = request_id
        return response


def register_request_logging(app):
    app.add_middleware(RequestLogMiddleware)
