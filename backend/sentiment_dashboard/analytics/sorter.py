"""
Ordered views over priority items. Every function returns a new list and
leaves its input untouched; ties keep their input order.
"""

from enum import Enum
from typing import Any, Iterable, List

from sentiment_dashboard.analytics.records import get_field


class SortMode(str, Enum):
    RANK = "rank"
    IMPACT = "impact"
    EFFORT = "effort"


def sort_by_rank(items: Iterable[Any]) -> List[Any]:
    return sorted(items, key=lambda i: get_field(i, "rank"))


def sort_by_impact(items: Iterable[Any]) -> List[Any]:
    # reverse=True keeps equal elements in their original order
    return sorted(items, key=lambda i: get_field(i, "impact"), reverse=True)


def sort_by_effort(items: Iterable[Any]) -> List[Any]:
    return sorted(items, key=lambda i: get_field(i, "effort"))


_SORTERS = {
    SortMode.RANK: sort_by_rank,
    SortMode.IMPACT: sort_by_impact,
    SortMode.EFFORT: sort_by_effort,
}


def sort_priority_items(items: Iterable[Any], mode: SortMode = SortMode.RANK) -> List[Any]:
    return _SORTERS[SortMode(mode)](items)
