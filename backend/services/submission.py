# backend/services/submission.py
from __future__ import annotations
from typing import Any, Dict, Iterable, Mapping
import logging

from backend.config import Settings
from backend.core.errors import ConfigurationError, ValidationError
from backend.core.models import JobRecord, JobStatus, normalize_job_id, utc_now
from backend.core.registry import JobRegistry
from backend.services.frammer import ProcessingClient

logger = logging.getLogger("frammer.submission")

REQUIRED_FIELDS = ("videoUrl", "language", "contentType", "outputType")


def _clean(value: Any) -> str:
    # outputType arrives as a list of checkboxes or an already comma-joined string
    if isinstance(value, (list, tuple)):
        parts = [str(v).strip() for v in value if v is not None and str(v).strip()]
        return ",".join(parts)
    if value is None:
        return ""
    return str(value).strip()


def validate_submission(fields: Mapping[str, Any], required: Iterable[str] = REQUIRED_FIELDS) -> Dict[str, str]:
    cleaned = {name: _clean(fields.get(name)) for name in required}
    missing = [name for name, v in cleaned.items() if not v]
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(REQUIRED_FIELDS)}",
            details={"missing": missing},
        )
    return cleaned


class SubmissionGateway:
    def __init__(self, registry: JobRegistry, client: ProcessingClient, settings: Settings):
        self.registry = registry
        self.client = client
        self.settings = settings

    def submit(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        payload = validate_submission(fields)

        api_key = self.settings.FRAMMER_API_KEY
        if not api_key:
            raise ConfigurationError("FRAMMER_API_KEY not configured")

        response = self.client.process_video(payload, api_key)

        data = response.get("data")
        job_id = normalize_job_id(data.get("id")) if isinstance(data, dict) else None
        if job_id is None:
            logger.warning("Frammer accepted the request but returned no data.id; not tracking it")
            return response

        self.registry.create(JobRecord(
            id=job_id,
            status=JobStatus.pending,
            submitted_at=utc_now(),
            request=dict(payload),
            initial_response=response,
        ))
        logger.info("Submitted job id=%s url=%s outputType=%s", job_id, payload["videoUrl"], payload["outputType"])
        return response
