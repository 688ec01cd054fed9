"""
Dashboard KPI summary.

Average sentiment and total feedback are derived from stored rows. The
remaining KPIs have no data source yet: their values come from
PLACEHOLDER_KPIS and every such field is listed under "placeholders" in the
response so clients can tell them apart from computed numbers.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from sentiment_dashboard.analytics import average_sentiment, format_count, format_percent, format_score
from sentiment_dashboard.repository import Repository

logger = logging.getLogger(__name__)

# Not computed from data. Replace with time-series derivations once defined.
PLACEHOLDER_KPIS: Dict[str, int] = {
    "responseRate": 94,
    "activeUsers": 2820,
    "sentimentChange": 12,
    "feedbackChange": 8,
    "responseRateChange": 5,
    "activeUsersChange": 15,
}


@dataclass
class DashboardSummary:
    avg_sentiment: str
    total_feedback: str
    response_rate: str
    active_users: str
    sentiment_change: int
    feedback_change: int
    response_rate_change: int
    active_users_change: int
    placeholders: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "avgSentiment": self.avg_sentiment,
            "totalFeedback": self.total_feedback,
            "responseRate": self.response_rate,
            "activeUsers": self.active_users,
            "sentimentChange": self.sentiment_change,
            "feedbackChange": self.feedback_change,
            "responseRateChange": self.response_rate_change,
            "activeUsersChange": self.active_users_change,
            "placeholders": list(self.placeholders),
        }


def build_dashboard_summary(repo: Repository) -> DashboardSummary:
    regions = repo.list("regional_sentiment")
    total_feedback = repo.count("feedback")
    avg = average_sentiment(regions)
    logger.debug(f"Dashboard summary: {len(regions)} regions, {total_feedback} feedback rows")

    return DashboardSummary(
        avg_sentiment=format_score(avg),
        total_feedback=format_count(total_feedback),
        response_rate=format_percent(PLACEHOLDER_KPIS["responseRate"]),
        active_users=format_count(PLACEHOLDER_KPIS["activeUsers"]),
        sentiment_change=PLACEHOLDER_KPIS["sentimentChange"],
        feedback_change=PLACEHOLDER_KPIS["feedbackChange"],
        response_rate_change=PLACEHOLDER_KPIS["responseRateChange"],
        active_users_change=PLACEHOLDER_KPIS["activeUsersChange"],
        placeholders=list(PLACEHOLDER_KPIS.keys()),
    )
