from sentiment_dashboard.analytics.aggregator import (
    MATRIX_MIDPOINT,
    PlotPosition,
    Quadrant,
    average_sentiment,
    classify_quadrant,
    matrix_points,
    plot_position,
)
from sentiment_dashboard.analytics.formatter import format_count, format_percent, format_score
from sentiment_dashboard.analytics.sorter import (
    SortMode,
    sort_by_effort,
    sort_by_impact,
    sort_by_rank,
    sort_priority_items,
)

__all__ = [
    "MATRIX_MIDPOINT",
    "PlotPosition",
    "Quadrant",
    "SortMode",
    "average_sentiment",
    "classify_quadrant",
    "format_count",
    "format_percent",
    "format_score",
    "matrix_points",
    "plot_position",
    "sort_by_effort",
    "sort_by_impact",
    "sort_by_rank",
    "sort_priority_items",
]
