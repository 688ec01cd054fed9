"""
Write-side validation for dashboard records.

Every create operation passes its payload through one of the validate_*
functions before anything reaches the repository. A rejected payload raises
ValidationError with a reason that can be shown to the user as-is.
"""

import re
from typing import Optional, Tuple


SENTIMENTS = ("positive", "negative", "neutral")
INSIGHT_PRIORITIES = ("high", "medium", "low")
CHANNEL_STATUSES = ("active", "inactive")

SCORE_RANGE = (0, 10)
IMPACT_EFFORT_RANGE = (1, 10)

_MESSAGE_COUNT = re.compile(r"[0-9]+(?:\.[0-9]+)?[KkMmBb]?")
_SCIENTIFIC = re.compile(r"[0-9]+(?:\.[0-9]+)?[eE][+-]?[0-9]+")
_MULTI_SUFFIX = re.compile(r"[0-9]+(?:\.[0-9]+)?[KkMmBb]{2,}")


class ValidationError(Exception):
    """Raised when a record payload is rejected before persistence."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


def validate_message_count(value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """
    Check a free-text message count such as "100", "2.5K" or "3B".

    Returns (True, None) when acceptable, otherwise (False, reason).
    Never raises.
    """
    if value is not None and not isinstance(value, str):
        return False, "Message count must be text such as 2.5K"
    candidate = (value or "").strip()
    if not candidate:
        return False, "Message count is required"
    if candidate[0] in "+-":
        return False, "Message count must not carry a sign"
    if _SCIENTIFIC.fullmatch(candidate):
        return False, "Message count must not use scientific notation"
    if _MULTI_SUFFIX.fullmatch(candidate):
        return False, "Message count may carry only one K, M or B suffix"
    if not _MESSAGE_COUNT.fullmatch(candidate):
        return False, "Message count must be a number with an optional K, M or B suffix (e.g. 2.5K)"
    return True, None


# ── Field helpers ───────────────────────────────────────────────────────

def _require_text(payload: dict, field: str) -> str:
    value = payload.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required")
    return value.strip()


def _require_choice(payload: dict, field: str, choices: Tuple[str, ...]) -> str:
    value = payload.get(field)
    if value not in choices:
        raise ValidationError(f"{field} must be one of: {', '.join(choices)} (got {value!r})")
    return value


def _require_int(payload: dict, field: str, low: Optional[int] = None, high: Optional[int] = None) -> int:
    value = payload.get(field)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer")
    if low is not None and value < low:
        raise ValidationError(f"{field} must be at least {low}")
    if high is not None and value > high:
        raise ValidationError(f"{field} must be at most {high}")
    return value


def _require_score(payload: dict, field: str) -> float:
    try:
        value = float(payload.get(field))
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a number")
    low, high = SCORE_RANGE
    if not low <= value <= high:
        raise ValidationError(f"{field} must be between {low} and {high}")
    return value


# ── Record validators ───────────────────────────────────────────────────

def validate_feedback(payload: dict) -> dict:
    return {
        "text": _require_text(payload, "text"),
        "sentiment": _require_choice(payload, "sentiment", SENTIMENTS),
        "source": _require_text(payload, "source"),
        "region": _require_text(payload, "region"),
    }


def validate_priority_item(payload: dict) -> dict:
    low, high = IMPACT_EFFORT_RANGE
    return {
        "title": _require_text(payload, "title"),
        "description": _require_text(payload, "description"),
        "impact": _require_int(payload, "impact", low, high),
        "effort": _require_int(payload, "effort", low, high),
        "category": _require_text(payload, "category"),
        "rank": _require_int(payload, "rank", 1),
    }


def validate_ai_insight(payload: dict) -> dict:
    return {
        "title": _require_text(payload, "title"),
        "description": _require_text(payload, "description"),
        "priority": _require_choice(payload, "priority", INSIGHT_PRIORITIES),
        "impact": _require_text(payload, "impact"),
    }


def validate_channel(payload: dict) -> dict:
    ok, reason = validate_message_count(payload.get("message_count"))
    if not ok:
        raise ValidationError(reason)
    return {
        "name": _require_text(payload, "name"),
        "status": _require_choice(payload, "status", CHANNEL_STATUSES),
        "message_count": payload["message_count"].strip(),
    }


def validate_regional_sentiment(payload: dict) -> dict:
    return {
        "region": _require_text(payload, "region"),
        "sentiment_score": _require_score(payload, "sentiment_score"),
    }


def validate_sentiment_trend(payload: dict) -> dict:
    return {
        "month": _require_text(payload, "month"),
        "score": _require_score(payload, "score"),
        "year": _require_int(payload, "year"),
    }
