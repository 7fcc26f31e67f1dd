# backend/services/frammer.py
from __future__ import annotations
from typing import Protocol, Dict, Any
import logging
import requests

from backend.core.errors import UpstreamError

logger = logging.getLogger("frammer.upstream")


class ProcessingClient(Protocol):
    def process_video(self, payload: Dict[str, str], api_key: str) -> Dict[str, Any]: ...


class FrammerClient:
    """POSTs jobs to the Frammer processing endpoint. One attempt, no retries."""

    def __init__(self, url: str, timeout_s: float = 30.0, session: requests.Session | None = None):
        self.url = url
        self.timeout_s = timeout_s
        self.session = session or requests.Session()

    def process_video(self, payload: Dict[str, str], api_key: str) -> Dict[str, Any]:
        headers = {
            "Authorization": api_key,
            "Content-Type": "application/json",
        }
        try:
            r = self.session.post(self.url, json=payload, headers=headers, timeout=self.timeout_s)
        except requests.Timeout as e:
            logger.error("Frammer timed out after %.1fs url=%s", self.timeout_s, self.url)
            raise UpstreamError(f"Frammer API timed out: {e}", status_code=504) from e
        except requests.RequestException as e:
            logger.error("Frammer unreachable url=%s err=%s", self.url, e)
            raise UpstreamError(f"Frammer API request failed: {e}", status_code=502) from e

        body = _json_or_none(r)
        if not r.ok:
            message = None
            if isinstance(body, dict):
                message = body.get("message")
            if not message:
                # mask the key if the server echoed it back
                message = (r.text or "")[:200].replace(api_key, "***") or f"Frammer API error {r.status_code}"
            logger.error("Frammer %s: %s", r.status_code, message)
            raise UpstreamError(str(message), status_code=r.status_code, details=body)

        if not isinstance(body, dict):
            raise UpstreamError("Frammer API returned a non-JSON response", status_code=502)
        return body


def _json_or_none(r: requests.Response) -> Any:
    try:
        return r.json()
    except ValueError:
        return None
