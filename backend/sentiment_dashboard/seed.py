"""
Seed loader: replaces the dashboard tables with the rows in seed_data.yaml.

Fixture rows go through the same validators as API writes, then are loaded
table by table with pandas (see data_loader.load_dataframe).
"""

import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd
import yaml
from sqlalchemy import func, select
from sqlalchemy.engine import Connection, Engine

from sentiment_dashboard.data_loader import load_dataframe
from sentiment_dashboard.models import utcnow
from sentiment_dashboard.repository import ENTITIES
from sentiment_dashboard.validators import (
    validate_ai_insight,
    validate_channel,
    validate_feedback,
    validate_priority_item,
    validate_regional_sentiment,
    validate_sentiment_trend,
)

logger = logging.getLogger(__name__)

SEED_FILE = Path(__file__).with_name("seed_data.yaml")

VALIDATORS = {
    "regional_sentiment": validate_regional_sentiment,
    "feedback": validate_feedback,
    "sentiment_trends": validate_sentiment_trend,
    "priority_items": validate_priority_item,
    "ai_insights": validate_ai_insight,
    "channels": validate_channel,
}

# Generated timestamp column per table
TIMESTAMP_COLUMNS = {
    "regional_sentiment": "updated_at",
    "feedback": "timestamp",
    "ai_insights": "created_at",
}


def load_fixtures(path: Path = SEED_FILE) -> Dict[str, List[dict]]:
    with open(path, "r", encoding="utf-8") as f:
        fixtures = yaml.safe_load(f) or {}
    unknown = set(fixtures) - set(ENTITIES)
    if unknown:
        raise ValueError(f"Unknown tables in {path.name}: {sorted(unknown)}")
    return fixtures


def build_frames(fixtures: Dict[str, List[dict]], now: Optional[datetime] = None) -> Dict[str, pd.DataFrame]:
    """
    Validate fixture rows and turn each table into a DataFrame.
    Timestamps step back one minute per row, so the first fixture row is the newest.
    """
    now = now or utcnow()
    frames = {}
    for table, rows in fixtures.items():
        validate = VALIDATORS.get(table)
        cleaned = [validate(row) if validate else dict(row) for row in rows or []]
        ts_col = TIMESTAMP_COLUMNS.get(table)
        if ts_col:
            for i, row in enumerate(cleaned):
                row[ts_col] = now - timedelta(minutes=i)
        frames[table] = pd.DataFrame(cleaned)
    return frames


def clear_tables(conn: Connection):
    for model in ENTITIES.values():
        conn.execute(model.__table__.delete())


def is_empty(engine: Engine) -> bool:
    with engine.connect() as conn:
        for model in ENTITIES.values():
            if conn.execute(select(func.count()).select_from(model.__table__)).scalar():
                return False
    return True


def seed_database(engine: Engine, path: Path = SEED_FILE) -> Dict[str, int]:
    """
    Clear every dashboard table and load the fixtures. Returns rows loaded per table.
    Runs as one transaction: a failing table leaves the previous contents in place.
    """
    frames = build_frames(load_fixtures(path))
    logger.info(f"Seeding {len(frames)} tables from {path.name}...")
    counts = {}
    with engine.begin() as conn:
        clear_tables(conn)
        for table, df in frames.items():
            counts[table] = load_dataframe(conn, table, df) if not df.empty else 0
    logger.info(f"Database seeded: {counts}")
    return counts
