import importlib

import pytest

from sentiment_dashboard.helpers import get_repository
from sentiment_dashboard.repository import StorageError
from sentiment_dashboard.seed import seed_database


@pytest.fixture
def seeded_client(engine, client):
    seed_database(engine)
    return client


def _feedback(**overrides):
    body = {"text": "Checkout was quick", "sentiment": "positive", "source": "Email", "region": "West"}
    body.update(overrides)
    return body


def test_health_reports_database_connection(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_regional_sentiment_serialises_scores_as_strings(seeded_client):
    data = seeded_client.get("/api/regional-sentiment").json()
    assert len(data) == 5
    west = next(r for r in data if r["region"] == "West")
    assert west["sentimentScore"] == "8.5"
    assert west["updatedAt"]


def test_feedback_defaults_to_ten_newest(client):
    for i in range(12):
        assert client.post("/api/feedback", json=_feedback(text=f"note {i}")).status_code == 201
    data = client.get("/api/feedback").json()
    assert len(data) == 10
    assert data[0]["text"] == "note 11"
    assert len(client.get("/api/feedback", params={"limit": 3}).json()) == 3


def test_create_feedback_returns_created_record(client):
    resp = client.post("/api/feedback", json=_feedback())
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"]
    assert body["sentiment"] == "positive"
    assert body["timestamp"]


def test_invalid_sentiment_is_rejected_before_storage(client):
    before = client.get("/api/feedback").json()
    resp = client.post("/api/feedback", json=_feedback(sentiment="maybe"))
    assert resp.status_code == 400
    assert "sentiment" in resp.json()["detail"]
    assert client.get("/api/feedback").json() == before


def test_missing_fields_are_rejected_by_request_model(client):
    resp = client.post("/api/feedback", json={"text": "no sentiment"})
    assert resp.status_code == 422


def test_priority_items_sorting_and_quadrants(seeded_client):
    by_rank = seeded_client.get("/api/priority-items", params={"sort": "rank"}).json()
    assert [i["rank"] for i in by_rank] == [1, 2, 3, 4, 5]
    assert by_rank[0]["quadrant"] == "Quick Wins"

    by_effort = seeded_client.get("/api/priority-items", params={"sort": "effort"}).json()
    assert [i["effort"] for i in by_effort] == [2, 3, 4, 6, 8]

    by_impact = seeded_client.get("/api/priority-items", params={"sort": "impact"}).json()
    assert [i["impact"] for i in by_impact] == [9, 9, 9, 7, 4]
    assert [i["rank"] for i in by_impact[:3]] == [1, 2, 3]

    assert seeded_client.get("/api/priority-items", params={"sort": "bogus"}).status_code == 422


def test_priority_matrix_points(seeded_client):
    points = seeded_client.get("/api/priority-items/matrix").json()
    assert len(points) == 5
    first = points[0]
    assert first["label"] == 1
    assert first["x"] == pytest.approx(30)
    assert first["y"] == pytest.approx(10)


def test_create_priority_item_rejects_out_of_range_impact(client):
    body = {"title": "T", "description": "D", "impact": 12, "effort": 3, "category": "Product", "rank": 1}
    resp = client.post("/api/priority-items", json=body)
    assert resp.status_code == 400
    assert client.get("/api/priority-items").json() == []


def test_ai_insights_newest_first(client):
    for title in ("older", "newer"):
        body = {"title": title, "description": "d", "priority": "high", "impact": "some"}
        assert client.post("/api/ai-insights", json=body).status_code == 201
    titles = [i["title"] for i in client.get("/api/ai-insights").json()]
    assert titles == ["newer", "older"]


def test_ai_insight_priority_must_be_known(client):
    body = {"title": "t", "description": "d", "priority": "urgent", "impact": "some"}
    assert client.post("/api/ai-insights", json=body).status_code == 400


def test_channels_validate_message_count(client):
    ok = client.post("/api/channels", json={"name": "Twitter", "status": "active", "messageCount": "12.5K"})
    assert ok.status_code == 201
    assert ok.json()["icon"] == "x"

    bad = client.post("/api/channels", json={"name": "Fax", "status": "active", "messageCount": "10KM"})
    assert bad.status_code == 400
    assert "suffix" in bad.json()["detail"]

    names = [c["name"] for c in client.get("/api/channels").json()]
    assert names == ["Twitter"]


def test_unknown_channel_gets_default_icon(client):
    resp = client.post("/api/channels", json={"name": "Fax", "status": "inactive", "messageCount": "3"})
    assert resp.json()["icon"] == "message-circle"


def test_impact_and_usage_metrics(seeded_client):
    impact = seeded_client.get("/api/impact-metrics").json()
    retention = next(m for m in impact if m["metricName"] == "Retention Rate")
    assert retention["beforeValue"] == "78%"
    assert retention["improvementLabel"] == "17% improvement"

    usage = seeded_client.get("/api/usage-metrics").json()
    assert usage[-1]["dailyActiveUsers"] == 2820
    assert usage[-1]["satisfactionScore"] == "8.5"


def test_sentiment_trends(seeded_client):
    trends = seeded_client.get("/api/sentiment-trends").json()
    assert [t["month"] for t in trends][:3] == ["Jan", "Feb", "Mar"]
    assert trends[0]["score"] == "7.2"


def test_dashboard_stats_on_empty_database(client):
    stats = client.get("/api/dashboard-stats").json()
    assert stats["avgSentiment"] == "0.0"
    assert stats["totalFeedback"] == "0"


def test_dashboard_stats_derives_and_flags_placeholders(seeded_client):
    stats = seeded_client.get("/api/dashboard-stats").json()
    assert stats["avgSentiment"] == "7.8"
    assert stats["totalFeedback"] == "5"
    assert stats["responseRate"] == "94%"
    assert stats["activeUsers"] == "2.8K"
    assert "avgSentiment" not in stats["placeholders"]
    assert set(stats["placeholders"]) == {
        "responseRate", "activeUsers", "sentimentChange",
        "feedbackChange", "responseRateChange", "activeUsersChange",
    }


class _BrokenRepository:
    def list(self, entity):
        raise StorageError(f"Failed to list {entity}")

    def list_recent(self, entity, limit=None):
        raise StorageError(f"Failed to list recent {entity}")

    def create(self, entity, payload):
        raise StorageError(f"Failed to create {entity}")

    def count(self, entity):
        raise StorageError(f"Failed to count {entity}")


@pytest.fixture
def broken_client(client):
    from sentiment_dashboard.main import app

    app.dependency_overrides[get_repository] = _BrokenRepository
    return client


def test_storage_failure_on_read_returns_500(broken_client):
    resp = broken_client.get("/api/channels")
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to list channels"

    resp = broken_client.get("/api/feedback")
    assert resp.status_code == 500
    assert resp.json()["detail"].startswith("Failed to")


def test_storage_failure_on_create_returns_500(broken_client):
    resp = broken_client.post("/api/feedback", json=_feedback())
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to create feedback"


def test_matrix_limit_max_never_below_default(monkeypatch):
    from sentiment_dashboard import config

    monkeypatch.setenv("MATRIX_MAX_ITEMS", "80")
    monkeypatch.setenv("MATRIX_LIMIT_MAX", "50")
    try:
        importlib.reload(config)
        assert config.MATRIX_LIMIT_MAX == 80
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_matrix_limit_above_bound_is_rejected(seeded_client):
    from sentiment_dashboard.config import MATRIX_LIMIT_MAX

    assert seeded_client.get("/api/priority-items/matrix", params={"limit": 2}).json()[-1]["label"] == 2
    resp = seeded_client.get("/api/priority-items/matrix", params={"limit": MATRIX_LIMIT_MAX + 1})
    assert resp.status_code == 422
