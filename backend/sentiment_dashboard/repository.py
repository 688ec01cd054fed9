"""
Uniform data access over the eight dashboard record kinds.

Every create commits before returning, so a following list() on any session
sees it. SQLAlchemy failures are rolled back, logged, and re-raised as
StorageError; nothing is retried here.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sentiment_dashboard.models import (
    AIInsight,
    Channel,
    Feedback,
    ImpactMetric,
    PriorityItem,
    RegionalSentiment,
    SentimentTrend,
    UsageMetric,
)

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the database rejects or fails an operation."""
    pass


ENTITIES = {
    "regional_sentiment": RegionalSentiment,
    "feedback": Feedback,
    "sentiment_trends": SentimentTrend,
    "priority_items": PriorityItem,
    "ai_insights": AIInsight,
    "impact_metrics": ImpactMetric,
    "usage_metrics": UsageMetric,
    "channels": Channel,
}

# Entities that can be read newest first, keyed to their timestamp column
RECENT_ORDER = {
    "feedback": Feedback.timestamp,
    "ai_insights": AIInsight.created_at,
}


def model_for(entity: str):
    try:
        return ENTITIES[entity]
    except KeyError:
        raise KeyError(f"Unknown entity '{entity}'")


class Repository:
    def __init__(self, db: Session):
        self.db = db

    def list(self, entity: str) -> List[Any]:
        model = model_for(entity)
        try:
            return self.db.query(model).all()
        except SQLAlchemyError as e:
            self._fail(f"Failed to list {entity}", e)

    def list_recent(self, entity: str, limit: Optional[int] = None) -> List[Any]:
        if entity not in RECENT_ORDER:
            raise KeyError(f"Entity '{entity}' has no timestamp ordering")
        model = model_for(entity)
        try:
            # id breaks timestamp ties so equal-instant rows keep a fixed order
            q = self.db.query(model).order_by(RECENT_ORDER[entity].desc(), model.id.desc())
            if limit is not None:
                q = q.limit(limit)
            return q.all()
        except SQLAlchemyError as e:
            self._fail(f"Failed to list recent {entity}", e)

    def create(self, entity: str, payload: Dict[str, Any]) -> Any:
        model = model_for(entity)
        try:
            row = model(**payload)
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            self._fail(f"Failed to create {entity}", e)
        logger.info(f"Created {entity} record {row.id}")
        return row

    def count(self, entity: str) -> int:
        model = model_for(entity)
        try:
            return self.db.query(func.count(model.id)).scalar() or 0
        except SQLAlchemyError as e:
            self._fail(f"Failed to count {entity}", e)

    def _fail(self, message: str, error: SQLAlchemyError):
        self.db.rollback()
        logger.error(f"{message}: {error}")
        raise StorageError(message) from error
