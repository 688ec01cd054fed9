"""
Environment-driven settings for the dashboard API.
Values are read once at import time; `.env` is loaded first when present.
"""

import os

from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable not set")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

FEEDBACK_DEFAULT_LIMIT = int(os.getenv("FEEDBACK_DEFAULT_LIMIT", "10"))
FEEDBACK_MAX_LIMIT = int(os.getenv("FEEDBACK_MAX_LIMIT", "1000"))
MATRIX_MAX_ITEMS = int(os.getenv("MATRIX_MAX_ITEMS", "6"))
# Upper bound for ?limit= on the matrix; never below the default
MATRIX_LIMIT_MAX = max(int(os.getenv("MATRIX_LIMIT_MAX", "50")), MATRIX_MAX_ITEMS)

SEED_ON_STARTUP = os.getenv("SEED_ON_STARTUP", "false").lower() == "true"
