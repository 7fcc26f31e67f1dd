# backend/routers/jobs.py
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from typing import List, Optional, Union
import logging

from backend.core.registry import JobRegistry
from backend.services.query import get_all, get_one
from backend.services.submission import SubmissionGateway
from backend.services.webhooks import receive_webhook

router = APIRouter(prefix="/api", tags=["jobs"])
logger = logging.getLogger("frammer.webhook")


class ProcessVideoRequest(BaseModel):
    # all optional here so missing fields surface as a 400 from the gateway, not a 422
    videoUrl: Optional[str] = None
    language: Optional[str] = None
    contentType: Optional[str] = None
    outputType: Optional[Union[List[str], str]] = None


def get_registry(request: Request) -> JobRegistry:
    return request.app.state.registry


def get_gateway(request: Request) -> SubmissionGateway:
    return request.app.state.gateway


@router.post("/process-video")
def process_video(req: Optional[ProcessVideoRequest] = None, gateway: SubmissionGateway = Depends(get_gateway)):
    fields = req.model_dump() if req else {}
    data = gateway.submit(fields)
    return {"status": "success", "data": data}


@router.post("/webhook")
async def webhook(request: Request, registry: JobRegistry = Depends(get_registry)):
    # Always 200 so Frammer never retries, whatever happened on our side.
    try:
        envelope = await request.json()
    except ValueError:
        logger.warning("Webhook body is not JSON; acknowledged and dropped")
        return {"status": "received"}

    try:
        receive_webhook(registry, envelope)
    except Exception:
        logger.exception("Webhook handling failed; acknowledged anyway")
    return {"status": "received"}


@router.get("/results/{job_id}")
def result_one(job_id: str, registry: JobRegistry = Depends(get_registry)):
    record = get_one(registry, job_id)
    return {"status": "success", "data": record.to_api()}


@router.get("/results")
def result_all(registry: JobRegistry = Depends(get_registry)):
    out = get_all(registry)
    return {
        "status": "success",
        "count": out["count"],
        "data": [r.to_api() for r in out["records"]],
    }
