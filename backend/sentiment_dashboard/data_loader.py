"""
Data loader: inserts a pandas DataFrame into an existing dashboard table.
Fills generated columns the ORM would normally supply and inserts in chunks.
"""

import logging
from typing import Union
from uuid import uuid4

import pandas as pd
from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger(__name__)


def _coerce_types(df: pd.DataFrame) -> pd.DataFrame:
    """
    Coerce columns to types SQLAlchemy handles on every backend.
    - Datetime columns become proper Timestamps
    - Missing values in text columns become None rather than NaN
    """
    for col in df.columns:
        dtype = str(df[col].dtype)
        if dtype.startswith("datetime"):
            df[col] = pd.to_datetime(df[col], errors="coerce")
        elif dtype == "object":
            df[col] = df[col].astype(object).where(df[col].notna(), None)
    return df


def load_dataframe(
    con: Union[Engine, Connection],
    table_name: str,
    df: pd.DataFrame,
    *,
    batch_size: int = 500,
) -> int:
    """
    Append a DataFrame to `table_name` and return the number of rows loaded.

    Rows without an id get a fresh UUID string. Insert errors are logged and
    re-raised. Given an Engine, each chunk commits on its own; given a
    Connection inside a transaction, nothing commits until that transaction does.
    """
    df = _coerce_types(df.copy())
    if "id" not in df.columns:
        df.insert(0, "id", [str(uuid4()) for _ in range(len(df))])

    total_rows = len(df)
    loaded = 0
    for start in range(0, total_rows, batch_size):
        chunk = df.iloc[start : start + batch_size]
        try:
            chunk.to_sql(table_name, con, if_exists="append", index=False, method="multi")
        except Exception as e:
            logger.error(f"Error inserting rows {start}–{start + len(chunk)} into {table_name}: {e}")
            raise
        loaded += len(chunk)

    logger.info(f"Loaded {loaded}/{total_rows} rows into {table_name}")
    return loaded
