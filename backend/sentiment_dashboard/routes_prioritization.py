"""
Prioritization routes: priority items, the impact vs effort matrix, and
AI insights (entered manually until a generator exists).
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from sentiment_dashboard.analytics import SortMode, matrix_points, sort_priority_items
from sentiment_dashboard.config import MATRIX_LIMIT_MAX, MATRIX_MAX_ITEMS
from sentiment_dashboard.helpers import ai_insight_to_dict, get_repository, priority_item_to_dict
from sentiment_dashboard.repository import Repository, StorageError
from sentiment_dashboard.validators import ValidationError, validate_ai_insight, validate_priority_item

logger = logging.getLogger(__name__)
router = APIRouter()


# ── Pydantic models ────────────────────────────────────────────────────

class PriorityItemCreateRequest(BaseModel):
    title: str
    description: str
    impact: int
    effort: int
    category: str
    rank: int


class AIInsightCreateRequest(BaseModel):
    title: str
    description: str
    priority: str
    impact: str


# ── Priority items ─────────────────────────────────────────────────────

@router.get("/priority-items")
def list_priority_items(
    sort: Optional[SortMode] = Query(None),
    repo: Repository = Depends(get_repository),
):
    try:
        items = repo.list("priority_items")
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if sort is not None:
        items = sort_priority_items(items, sort)
    return [priority_item_to_dict(i) for i in items]


@router.get("/priority-items/matrix")
def get_priority_matrix(
    limit: int = Query(MATRIX_MAX_ITEMS, ge=1, le=MATRIX_LIMIT_MAX),
    repo: Repository = Depends(get_repository),
):
    try:
        items = repo.list("priority_items")
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return matrix_points(items, limit)


@router.post("/priority-items", status_code=201)
def create_priority_item(req: PriorityItemCreateRequest, repo: Repository = Depends(get_repository)):
    try:
        payload = validate_priority_item(req.model_dump())
    except ValidationError as e:
        logger.info(f"Rejected priority item: {e.reason}")
        raise HTTPException(status_code=400, detail=e.reason)
    try:
        return priority_item_to_dict(repo.create("priority_items", payload))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


# ── AI insights ────────────────────────────────────────────────────────

@router.get("/ai-insights")
def list_ai_insights(repo: Repository = Depends(get_repository)):
    try:
        return [ai_insight_to_dict(i) for i in repo.list_recent("ai_insights")]
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/ai-insights", status_code=201)
def create_ai_insight(req: AIInsightCreateRequest, repo: Repository = Depends(get_repository)):
    try:
        payload = validate_ai_insight(req.model_dump())
    except ValidationError as e:
        logger.info(f"Rejected AI insight: {e.reason}")
        raise HTTPException(status_code=400, detail=e.reason)
    try:
        return ai_insight_to_dict(repo.create("ai_insights", payload))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
