import logging
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder

from backend.core.errors import RelayError

logger = logging.getLogger("frammer.errors")

def register_error_handlers(app: FastAPI):
    @app.exception_handler(RelayError)
    async def relay_exc_handler(request: Request, exc: RelayError):
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "%s path=%s status=%s message=%r",
            type(exc).__name__, request.url.path, exc.status_code, exc.message
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": "error", "message": exc.message, "details": exc.details},
        )

    @app.exception_handler(HTTPException)
    async def http_exc_handler(request: Request, exc: HTTPException):
        logger.warning(
            "HTTPException path=%s status=%s detail=%r",
            request.url.path, exc.status_code, exc.detail
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": "error", "message": str(exc.detail) if exc.detail else "HTTP error"},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exc_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            "RequestValidationError path=%s errors=%s",
            request.url.path, exc.errors()
        )
        return JSONResponse(
            status_code=422,
            content={"status": "error", "message": "Validation error", "details": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_exc_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error at path=%s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": "Internal server error"},
        )
