# backend/core/errors.py
from typing import Any, Optional


class RelayError(Exception):
    """Base for errors that map onto an HTTP error response."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details


class ValidationError(RelayError):
    status_code = 400


class ConfigurationError(RelayError):
    status_code = 500


class UpstreamError(RelayError):
    status_code = 500


class NotFoundError(RelayError):
    status_code = 404
