# backend/services/webhooks.py
import json
import logging
from typing import Any, Optional

from backend.core.lifecycle import apply_webhook, extract_job_id
from backend.core.models import JobRecord, utc_now
from backend.core.registry import JobRegistry

logger = logging.getLogger("frammer.webhook")


def receive_webhook(registry: JobRegistry, envelope: Any) -> Optional[JobRecord]:
    """
    Merge one Frammer callback into the registry.
    Returns the updated record, or None when the envelope carried no data.id and was dropped.
    """
    logger.info("Webhook received: %s", json.dumps(envelope, default=str)[:2000])

    job_id = extract_job_id(envelope)
    if job_id is None:
        logger.info("Webhook without data.id dropped")
        return None

    event = envelope.get("event")
    data = dict(envelope["data"])
    now = utc_now()
    record = registry.upsert(job_id, lambda current: apply_webhook(current, job_id, event, data, now))
    logger.info("Job id=%s event=%s status=%s", job_id, event, record.status.value)
    return record
