# backend/core/lifecycle.py
from typing import Any, Dict, Mapping, Optional

from .models import JobRecord, JobStatus, WebhookSnapshot, normalize_job_id, utc_now

# Frammer event name -> status. Anything not listed leaves the status as is.
EVENT_TRANSITIONS: Dict[str, JobStatus] = {
    "video_processed.inqueue": JobStatus.in_queue,
    "video_processed.partial-success": JobStatus.processing,
    "video_processed.success": JobStatus.completed,
}


def resolve_status(event: Optional[str], current: JobStatus) -> JobStatus:
    if not isinstance(event, str):
        return current
    return EVENT_TRANSITIONS.get(event, current)


def extract_job_id(envelope: Any) -> Optional[str]:
    """Return the canonical id from ``envelope["data"]["id"]``, or None if the envelope is malformed."""
    if not isinstance(envelope, Mapping):
        return None
    data = envelope.get("data")
    if not isinstance(data, Mapping):
        return None
    return normalize_job_id(data.get("id"))


def apply_webhook(
    record: Optional[JobRecord],
    job_id: str,
    event: Optional[str],
    data: Dict[str, Any],
    now: Optional[str] = None,
) -> JobRecord:
    now = now or utc_now()
    if record is None:
        # first sighting of this id came from a webhook, not a submission
        record = JobRecord(id=job_id, status=JobStatus.received, submitted_at=now)

    record.last_webhook = WebhookSnapshot(event=event, data=data, received_at=now)
    record.status = resolve_status(event, record.status)
    return record
