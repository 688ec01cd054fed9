"""
Seed the dashboard database with demo fixtures.

Usage:
  python scripts/seed_db.py
  python scripts/seed_db.py --fixtures path/to/seed_data.yaml --if-empty
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from sentiment_dashboard.database import Base, engine
from sentiment_dashboard import models  # noqa: F401  registers tables on Base
from sentiment_dashboard.seed import SEED_FILE, is_empty, seed_database


def main() -> int:
    parser = argparse.ArgumentParser(description="Load demo fixtures into the dashboard tables")
    parser.add_argument("--fixtures", default=str(SEED_FILE), help="YAML fixture file")
    parser.add_argument("--if-empty", action="store_true", help="Skip seeding when any table has rows")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    Base.metadata.create_all(bind=engine)
    if args.if_empty and not is_empty(engine):
        print("Database already has data; nothing to do.")
        return 0

    counts = seed_database(engine, Path(args.fixtures))
    print(json.dumps(counts, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
