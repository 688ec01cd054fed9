"""
Dashboard routes: regional sentiment, feedback, sentiment trends and the
KPI summary.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from sentiment_dashboard.config import FEEDBACK_DEFAULT_LIMIT, FEEDBACK_MAX_LIMIT
from sentiment_dashboard.dashboard import build_dashboard_summary
from sentiment_dashboard.helpers import (
    get_repository,
    feedback_to_dict,
    regional_sentiment_to_dict,
    sentiment_trend_to_dict,
)
from sentiment_dashboard.repository import Repository, StorageError
from sentiment_dashboard.validators import ValidationError, validate_feedback

logger = logging.getLogger(__name__)
router = APIRouter()


# ── Pydantic models ────────────────────────────────────────────────────

class FeedbackCreateRequest(BaseModel):
    text: str
    sentiment: str
    source: str
    region: str


# ── Regional sentiment ─────────────────────────────────────────────────

@router.get("/regional-sentiment")
def list_regional_sentiment(repo: Repository = Depends(get_repository)):
    try:
        return [regional_sentiment_to_dict(r) for r in repo.list("regional_sentiment")]
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


# ── Feedback ───────────────────────────────────────────────────────────

@router.get("/feedback")
def list_feedback(
    limit: Optional[int] = Query(None, ge=1, le=FEEDBACK_MAX_LIMIT),
    repo: Repository = Depends(get_repository),
):
    try:
        rows = repo.list_recent("feedback", limit or FEEDBACK_DEFAULT_LIMIT)
        return [feedback_to_dict(r) for r in rows]
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/feedback", status_code=201)
def create_feedback(req: FeedbackCreateRequest, repo: Repository = Depends(get_repository)):
    try:
        payload = validate_feedback(req.model_dump())
    except ValidationError as e:
        logger.info(f"Rejected feedback: {e.reason}")
        raise HTTPException(status_code=400, detail=e.reason)
    try:
        return feedback_to_dict(repo.create("feedback", payload))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


# ── Sentiment trends ───────────────────────────────────────────────────

@router.get("/sentiment-trends")
def list_sentiment_trends(repo: Repository = Depends(get_repository)):
    try:
        return [sentiment_trend_to_dict(t) for t in repo.list("sentiment_trends")]
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


# ── Dashboard stats ────────────────────────────────────────────────────

@router.get("/dashboard-stats")
def get_dashboard_stats(repo: Repository = Depends(get_repository)):
    try:
        return build_dashboard_summary(repo).to_dict()
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
