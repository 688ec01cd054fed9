from collections.abc import Mapping
from typing import Any


def get_field(record: Any, name: str) -> Any:
    """Read a field from an ORM row or a plain dict."""
    if isinstance(record, Mapping):
        return record[name]
    return getattr(record, name)
