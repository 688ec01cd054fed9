"""
Summary values derived from collections of dashboard records:
regional sentiment averages and impact/effort matrix placement.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List

from sentiment_dashboard.analytics.records import get_field

# Scores at or below the midpoint fall on the low side of each axis.
MATRIX_MIDPOINT = 5


class Quadrant(str, Enum):
    QUICK_WINS = "Quick Wins"
    MAJOR_PROJECTS = "Major Projects"
    FILL_INS = "Fill Ins"
    HARD_SLOGS = "Hard Slogs"


@dataclass(frozen=True)
class PlotPosition:
    """Percentage coordinates inside the matrix; y grows downwards."""
    x: float
    y: float


def average_sentiment(regions: Iterable[Any]) -> float:
    """Mean sentiment_score across regions, 0 when there are none."""
    scores = [float(get_field(r, "sentiment_score")) for r in regions]
    if not scores:
        return 0
    return sum(scores) / len(scores)


def classify_quadrant(impact: int, effort: int) -> Quadrant:
    high_impact = impact > MATRIX_MIDPOINT
    high_effort = effort > MATRIX_MIDPOINT
    if high_impact:
        return Quadrant.MAJOR_PROJECTS if high_effort else Quadrant.QUICK_WINS
    return Quadrant.HARD_SLOGS if high_effort else Quadrant.FILL_INS


def plot_position(impact: int, effort: int) -> PlotPosition:
    return PlotPosition(x=effort * 100 / 10, y=100 - impact * 100 / 10)


def matrix_points(items: Iterable[Any], limit: int = 6) -> List[Dict[str, Any]]:
    """
    Place the first `limit` priority items on the impact vs effort matrix.
    Labels are 1-based and follow the order of `items`.
    """
    points = []
    for index, item in enumerate(items):
        if index >= limit:
            break
        impact = get_field(item, "impact")
        effort = get_field(item, "effort")
        pos = plot_position(impact, effort)
        points.append({
            "label": index + 1,
            "id": get_field(item, "id"),
            "title": get_field(item, "title"),
            "impact": impact,
            "effort": effort,
            "quadrant": classify_quadrant(impact, effort).value,
            "x": pos.x,
            "y": pos.y,
        })
    return points
