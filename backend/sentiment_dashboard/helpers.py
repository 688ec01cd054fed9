"""
Shared helper functions used by multiple route modules.
Row-to-JSON mapping lives here so route files stay focused on HTTP handling.
"""

from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from sentiment_dashboard.analytics import classify_quadrant, format_percent, format_score
from sentiment_dashboard.database import get_db
from sentiment_dashboard.models import (
    AIInsight, Channel, Feedback, ImpactMetric, PriorityItem,
    RegionalSentiment, SentimentTrend, UsageMetric,
)
from sentiment_dashboard.repository import Repository

# Presentation icon per known channel name; anything else gets DEFAULT_CHANNEL_ICON.
CHANNEL_ICONS = {
    "Twitter": "x",
    "Facebook": "facebook",
    "Instagram": "instagram",
    "Email": "mail",
    "Live Chat": "message-circle",
}
DEFAULT_CHANNEL_ICON = "message-circle"


# ── Dependencies ────────────────────────────────────────────────────────

def get_repository(db: Session = Depends(get_db)) -> Repository:
    return Repository(db)


def _iso(value) -> Optional[str]:
    return value.isoformat() if value else None


# ── Row mapping ─────────────────────────────────────────────────────────

def channel_icon(name: str) -> str:
    return CHANNEL_ICONS.get(name, DEFAULT_CHANNEL_ICON)


def regional_sentiment_to_dict(row: RegionalSentiment) -> dict:
    return {
        "id": row.id,
        "region": row.region,
        "sentimentScore": format_score(row.sentiment_score),
        "updatedAt": _iso(row.updated_at),
    }


def feedback_to_dict(row: Feedback) -> dict:
    return {
        "id": row.id,
        "text": row.text,
        "sentiment": row.sentiment,
        "source": row.source,
        "region": row.region,
        "timestamp": _iso(row.timestamp),
    }


def sentiment_trend_to_dict(row: SentimentTrend) -> dict:
    return {"id": row.id, "month": row.month, "score": format_score(row.score), "year": row.year}


def priority_item_to_dict(row: PriorityItem) -> dict:
    return {
        "id": row.id,
        "title": row.title,
        "description": row.description,
        "impact": row.impact,
        "effort": row.effort,
        "category": row.category,
        "rank": row.rank,
        "quadrant": classify_quadrant(row.impact, row.effort).value,
    }


def ai_insight_to_dict(row: AIInsight) -> dict:
    return {
        "id": row.id,
        "title": row.title,
        "description": row.description,
        "priority": row.priority,
        "impact": row.impact,
        "createdAt": _iso(row.created_at),
    }


def impact_metric_to_dict(row: ImpactMetric) -> dict:
    # before/after stay display strings; they are never parsed back to numbers
    return {
        "id": row.id,
        "metricName": row.metric_name,
        "beforeValue": row.before_value,
        "afterValue": row.after_value,
        "improvement": row.improvement,
        "improvementLabel": f"{format_percent(row.improvement)} improvement",
        "unit": row.unit,
    }


def usage_metric_to_dict(row: UsageMetric) -> dict:
    return {
        "id": row.id,
        "week": row.week,
        "dailyActiveUsers": row.daily_active_users,
        "satisfactionScore": format_score(row.satisfaction_score),
    }


def channel_to_dict(row: Channel) -> dict:
    return {
        "id": row.id,
        "name": row.name,
        "status": row.status,
        "messageCount": row.message_count,
        "icon": channel_icon(row.name),
    }
