from __future__ import annotations

from typing import Iterable

import pandas as pd
from dateutil.relativedelta import relativedelta


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def month_start(ts) -> pd.Timestamp:
    """First day (midnight) of the month containing ``ts``."""
    ts = pd.Timestamp(ts)
    return pd.Timestamp(year=ts.year, month=ts.month, day=1)


def month_grid(start, end) -> pd.DatetimeIndex:
    """
    Month-start dates from the month containing ``start`` through the month
    containing ``end``, inclusive. Empty when ``start`` is missing or after ``end``.
    """
    if start is None or pd.isna(start) or end is None or pd.isna(end):
        return pd.DatetimeIndex([], name="date")
    first = month_start(start)
    last = month_start(end)
    if first > last:
        return pd.DatetimeIndex([], name="date")
    span = relativedelta(last.to_pydatetime(), first.to_pydatetime())
    n_months = span.years * 12 + span.months + 1
    return pd.date_range(first, periods=n_months, freq="MS", name="date")


def row_labels(df: pd.DataFrame, id_column: str) -> pd.Series:
    """Identifier used in error messages: the id column when present, else the index."""
    if id_column in df.columns:
        return df[id_column]
    return pd.Series(df.index, index=df.index)
