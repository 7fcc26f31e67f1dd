# backend/services/query.py
from typing import Any, Dict

from backend.core.errors import NotFoundError
from backend.core.models import JobRecord, normalize_job_id
from backend.core.registry import JobRegistry


def get_one(registry: JobRegistry, job_id: Any) -> JobRecord:
    key = normalize_job_id(job_id)
    record = registry.get(key) if key is not None else None
    if record is None:
        raise NotFoundError("No results found for this ID")
    return record


def get_all(registry: JobRegistry) -> Dict[str, Any]:
    # newest first; ISO-8601 UTC strings sort chronologically
    records = sorted(registry.all(), key=lambda r: r.submitted_at, reverse=True)
    return {"count": len(records), "records": records}
