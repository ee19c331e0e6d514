"""
Run configuration for cleaning and for the activity series.
Label maps are not configuration; they live in core/data/category_labels.csv.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

import pandas as pd

from .schema import ID_COLUMN, REDUNDANT_COLUMNS


@dataclass(frozen=True)
class CleaningConfig:
    date_format: str = "%m/%d/%Y"
    id_column: str = ID_COLUMN

    # (kept, dropped) once verified identical after recoding
    redundant_columns: Tuple[str, str] = REDUNDANT_COLUMNS

    # inactive rows without ENDEFYMD: warning by default, MissingClosureDate when True
    require_closure_dates: bool = False


@dataclass(frozen=True)
class SeriesConfig:
    # grid ends at the month containing this date; None means "now" at run time
    as_of_date: Optional[pd.Timestamp] = None

    established_col: str = "ESTYMD"
    closed_col: str = "ENDEFYMD"
    inactive_col: str = "INACTIVE"

    # "scan" rescans every record per month (O(months x records));
    # "sweep" sorts once and counts with searchsorted. Same result.
    method: Literal["sweep", "scan"] = "sweep"
