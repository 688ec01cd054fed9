"""
Presentation formatting for dashboard values.
"""

from typing import Union


def format_count(n: int) -> str:
    """Abbreviate counts above 1000 with a K suffix (1001 -> "1.0K", 1000 -> "1000")."""
    if n > 1000:
        return f"{n / 1000:.1f}K"
    return str(int(n))


def format_score(score: Union[str, float]) -> str:
    return f"{float(score):.1f}"


def format_percent(n: Union[int, float]) -> str:
    return f"{n}%"
