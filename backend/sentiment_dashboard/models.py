"""
All SQLAlchemy models in a single module.
Rows are flat; records relate only through matching strings (e.g. region names).
"""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import Column
from sqlalchemy.types import Integer, String, TIMESTAMP, NUMERIC, Text

from sentiment_dashboard.database import Base


def _new_id() -> str:
    return str(uuid4())


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching the TIMESTAMP columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


# ── Dashboard ───────────────────────────────────────────────────────────

class RegionalSentiment(Base):
    __tablename__ = "regional_sentiment"
    id = Column(String, primary_key=True, default=_new_id)
    region = Column(Text, nullable=False)
    sentiment_score = Column(NUMERIC(3, 1, asdecimal=False), nullable=False)
    updated_at = Column(TIMESTAMP, nullable=False, default=utcnow)


class Feedback(Base):
    __tablename__ = "feedback"
    id = Column(String, primary_key=True, default=_new_id)
    text = Column(Text, nullable=False)
    sentiment = Column(String, nullable=False)  # positive, negative, neutral
    source = Column(String, nullable=False)
    region = Column(String, nullable=False)
    timestamp = Column(TIMESTAMP, nullable=False, default=utcnow, index=True)


class SentimentTrend(Base):
    __tablename__ = "sentiment_trends"
    id = Column(String, primary_key=True, default=_new_id)
    month = Column(String, nullable=False)
    score = Column(NUMERIC(3, 1, asdecimal=False), nullable=False)
    year = Column(Integer, nullable=False)


# ── Prioritization ──────────────────────────────────────────────────────

class PriorityItem(Base):
    __tablename__ = "priority_items"
    id = Column(String, primary_key=True, default=_new_id)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    impact = Column(Integer, nullable=False)  # 1-10
    effort = Column(Integer, nullable=False)  # 1-10
    category = Column(String, nullable=False)
    rank = Column(Integer, nullable=False)


class AIInsight(Base):
    __tablename__ = "ai_insights"
    id = Column(String, primary_key=True, default=_new_id)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    priority = Column(String, nullable=False)  # high, medium, low
    impact = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP, nullable=False, default=utcnow, index=True)


# ── Impact tracking ─────────────────────────────────────────────────────

class ImpactMetric(Base):
    __tablename__ = "impact_metrics"
    id = Column(String, primary_key=True, default=_new_id)
    metric_name = Column(Text, nullable=False)
    before_value = Column(String, nullable=False)
    after_value = Column(String, nullable=False)
    improvement = Column(Integer, nullable=False)  # percentage
    unit = Column(String, nullable=True)


class UsageMetric(Base):
    __tablename__ = "usage_metrics"
    id = Column(String, primary_key=True, default=_new_id)
    week = Column(String, nullable=False)
    daily_active_users = Column(Integer, nullable=False)
    satisfaction_score = Column(NUMERIC(3, 1, asdecimal=False), nullable=False)


class Channel(Base):
    __tablename__ = "channels"
    id = Column(String, primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    status = Column(String, nullable=False)  # active, inactive
    message_count = Column(String, nullable=False)
