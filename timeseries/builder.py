"""
Monthly series of established, closed and net active institutions.

For each month start t on the grid (month of the earliest establishment date
through the month containing the as-of date):
    established_count(t) = #institutions with ESTYMD < t
    closed_count(t)      = #institutions with INACTIVE and ENDEFYMD < t
    net_active(t)        = established_count(t) - closed_count(t)   (float)

Both counts are cumulative as-of-date counts, not monthly deltas.

Two counting strategies give identical results:
  "scan":  rescan every record for every month, O(months x records). Fine for
            the FDIC file (~30k rows, about a thousand months) but it is the
            scaling limit of this module.
  "sweep": sort the dates once and read each count off with searchsorted.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pandas as pd

from core.config import SeriesConfig
from core.utils import month_grid, require_columns

logger = logging.getLogger(__name__)

SERIES_COLUMNS = ("net_active", "established_count", "closed_count")


def _as_datetime64(values: pd.Series) -> np.ndarray:
    """Non-missing dates as a datetime64[ns] array."""
    dates = pd.to_datetime(values, errors="coerce").dropna()
    return dates.to_numpy(dtype="datetime64[ns]")


def _count_before_scan(dates: np.ndarray, grid: pd.DatetimeIndex) -> np.ndarray:
    return np.array([int((dates < t).sum()) for t in grid.to_numpy()], dtype=np.int64)


def _count_before_sweep(dates: np.ndarray, grid: pd.DatetimeIndex) -> np.ndarray:
    ordered = np.sort(dates)
    # side="left": number of dates strictly before each month start
    return np.searchsorted(ordered, grid.to_numpy(), side="left").astype(np.int64)


_COUNTERS = {
    "scan": _count_before_scan,
    "sweep": _count_before_sweep,
}


def empty_activity_series() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "net_active": pd.Series(dtype="float64"),
            "established_count": pd.Series(dtype="int64"),
            "closed_count": pd.Series(dtype="int64"),
        },
        index=pd.DatetimeIndex([], name="date"),
    )


def add_net_active(series: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with net_active = established_count - closed_count as float."""
    out = series.copy()
    out["net_active"] = out["established_count"].astype("float64") - out["closed_count"]
    return out.loc[:, list(SERIES_COLUMNS)]


def build_activity_series(
    institutions: pd.DataFrame,
    *,
    config: Optional[SeriesConfig] = None,
) -> pd.DataFrame:
    """
    Build the monthly activity series from a cleaned institutions table.

    Parameters
    ----------
    institutions : pd.DataFrame
        Cleaned table with establishment date, closure date and inactive flag columns
    config : SeriesConfig
        Column names, as-of date (default: now) and counting strategy

    Returns
    -------
    DataFrame indexed by month start ("date") with columns
        net_active (float), established_count (int), closed_count (int)
    Empty (same columns) when there is nothing to count.
    """
    config = config or SeriesConfig()
    if config.method not in _COUNTERS:
        raise ValueError(f"Unknown counting method {config.method!r}; use one of {sorted(_COUNTERS)}.")
    if len(institutions) == 0:
        logger.info("No institutions; activity series is empty.")
        return empty_activity_series()
    require_columns(institutions, [config.established_col, config.closed_col, config.inactive_col])

    as_of = pd.Timestamp.now() if config.as_of_date is None else pd.Timestamp(config.as_of_date)
    established = _as_datetime64(institutions[config.established_col])
    if established.size == 0:
        logger.info("No establishment dates; activity series is empty.")
        return empty_activity_series()

    grid = month_grid(pd.Timestamp(established.min()), as_of)
    if len(grid) == 0:
        logger.info("Earliest establishment date is after %s; activity series is empty.", as_of.date())
        return empty_activity_series()

    inactive = institutions[config.inactive_col].astype("boolean").fillna(False).astype(bool)
    closed = _as_datetime64(institutions.loc[inactive, config.closed_col])

    count_before = _COUNTERS[config.method]
    series = pd.DataFrame(
        {
            "established_count": count_before(established, grid),
            "closed_count": count_before(closed, grid),
        },
        index=grid,
    )
    series = add_net_active(series)
    logger.info(
        "Built %d-month activity series %s..%s (%s)",
        len(series), grid[0].date(), grid[-1].date(), config.method,
    )
    return series
