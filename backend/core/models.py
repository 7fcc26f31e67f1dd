from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def normalize_job_id(value: Any) -> Optional[str]:
    """
    Canonical registry key for an external job id.
    101, "101" and " 101 " all map to "101"; empty values map to None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, str)):
        key = str(value).strip()
        return key or None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return None


class JobStatus(str, Enum):
    pending = "pending"
    received = "received"
    in_queue = "in_queue"
    processing = "processing"
    completed = "completed"


@dataclass
class WebhookSnapshot:
    event: Optional[str]
    data: Dict[str, Any]
    received_at: str = field(default_factory=utc_now)

    def to_api(self) -> dict:
        return {"event": self.event, "data": self.data, "receivedAt": self.received_at}


@dataclass
class JobRecord:
    id: str
    status: JobStatus = JobStatus.pending
    submitted_at: str = field(default_factory=utc_now)
    # only set for records created through a submission
    request: Optional[Dict[str, str]] = None
    initial_response: Optional[Dict[str, Any]] = None
    last_webhook: Optional[WebhookSnapshot] = None

    def to_api(self) -> dict:
        d = asdict(self)
        return {
            "id": self.id,
            "status": self.status.value,
            "submittedAt": self.submitted_at,
            "request": d["request"],
            "initialResponse": d["initial_response"],
            "lastWebhook": self.last_webhook.to_api() if self.last_webhook else None,
        }
