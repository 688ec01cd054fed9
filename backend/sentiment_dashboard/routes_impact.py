"""
Impact tracker routes: before/after impact metrics, usage metrics and
integrated channels.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from sentiment_dashboard.helpers import (
    channel_to_dict,
    get_repository,
    impact_metric_to_dict,
    usage_metric_to_dict,
)
from sentiment_dashboard.repository import Repository, StorageError
from sentiment_dashboard.validators import ValidationError, validate_channel

logger = logging.getLogger(__name__)
router = APIRouter()


# ── Pydantic models ────────────────────────────────────────────────────

class ChannelCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    status: str
    message_count: str = Field(alias="messageCount")


# ── Metrics ────────────────────────────────────────────────────────────

@router.get("/impact-metrics")
def list_impact_metrics(repo: Repository = Depends(get_repository)):
    try:
        return [impact_metric_to_dict(m) for m in repo.list("impact_metrics")]
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/usage-metrics")
def list_usage_metrics(repo: Repository = Depends(get_repository)):
    try:
        return [usage_metric_to_dict(m) for m in repo.list("usage_metrics")]
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


# ── Channels ───────────────────────────────────────────────────────────

@router.get("/channels")
def list_channels(repo: Repository = Depends(get_repository)):
    try:
        return [channel_to_dict(c) for c in repo.list("channels")]
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/channels", status_code=201)
def create_channel(req: ChannelCreateRequest, repo: Repository = Depends(get_repository)):
    try:
        payload = validate_channel(req.model_dump())
    except ValidationError as e:
        logger.info(f"Rejected channel: {e.reason}")
        raise HTTPException(status_code=400, detail=e.reason)
    try:
        return channel_to_dict(repo.create("channels", payload))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
