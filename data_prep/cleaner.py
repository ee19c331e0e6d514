"""
Clean the raw institutions table into typed columns.

Order of work on a private copy of the input:
  1. Parse dates with the fixed format; count sentinels and unparseable values apart
  2. Keep sentinel-date and change-code columns as plain text
  3. Coerce 0/1 flags to nullable booleans (anything else aborts)
  4. Tag open-vocabulary columns as categories
  5. Recode closed-vocabulary columns through their label maps (unmapped codes abort)
  6. Verify FDICREGN and the recoded FDICDBS agree row for row, then drop FDICDBS
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pandas as pd

from core.config import CleaningConfig
from core.errors import MissingClosureDate, RedundancyMismatch
from core.schema import KNOWN_COLUMNS
from core.utils import row_labels

from .transforms import ParseDates, build_transforms
from .validators import find_missing_closure_dates

logger = logging.getLogger(__name__)


@dataclass
class CleaningReport:
    """Non-fatal data-quality signals collected while cleaning."""
    missing_dates: Dict[str, int] = field(default_factory=dict)
    sentinel_dates: Dict[str, int] = field(default_factory=dict)
    dropped_columns: List[str] = field(default_factory=list)
    unrecognized_columns: List[str] = field(default_factory=list)

    @property
    def total_missing_dates(self) -> int:
        return sum(self.missing_dates.values())

    def summary(self) -> str:
        lines = []
        if self.missing_dates:
            lines.append(f"Dates repaired to missing ({self.total_missing_dates}):")
            for col, n in self.missing_dates.items():
                lines.append(f"  {col}: {n}")
        if self.sentinel_dates:
            lines.append(f"Not-applicable sentinel dates set to NaT ({sum(self.sentinel_dates.values())}):")
            for col, n in self.sentinel_dates.items():
                lines.append(f"  {col}: {n}")
        if self.dropped_columns:
            lines.append(f"Dropped columns: {self.dropped_columns}")
        if self.unrecognized_columns:
            lines.append(f"Passed through untyped: {self.unrecognized_columns}")
        if not lines:
            lines.append("No repairs needed.")
        return "\n".join(lines)


@dataclass
class CleaningResult:
    frame: pd.DataFrame
    report: CleaningReport


def check_redundant_columns(
    df: pd.DataFrame,
    keep: str,
    drop: str,
    *,
    row_ids: pd.Series,
) -> None:
    """Raise RedundancyMismatch on the first row where the two columns disagree."""
    a = df[keep].astype("string")
    b = df[drop].astype("string")
    same = (a == b).fillna(False).astype(bool) | (a.isna() & b.isna())
    if same.all():
        return
    idx = same[~same].index[0]
    kept_value = None if pd.isna(a.loc[idx]) else a.loc[idx]
    dropped_value = None if pd.isna(b.loc[idx]) else b.loc[idx]
    raise RedundancyMismatch(row_ids.loc[idx], kept_value, dropped_value, (keep, drop))


def clean_institutions(
    raw: pd.DataFrame,
    *,
    config: Optional[CleaningConfig] = None,
) -> CleaningResult:
    """
    Return a typed copy of the raw institutions table plus a report of repairs.

    Raises SchemaViolation, TypeCoercionFailure or RedundancyMismatch on data that
    cannot be cleaned without guessing; the input frame is never modified.
    """
    config = config or CleaningConfig()
    df = raw.copy()
    report = CleaningReport()
    row_ids = row_labels(df, config.id_column)

    report.unrecognized_columns = [c for c in df.columns if c not in KNOWN_COLUMNS]
    if report.unrecognized_columns:
        logger.warning("Columns outside the institutions schema: %s", report.unrecognized_columns)

    for transform in build_transforms(df.columns, config=config):
        before = df[transform.column]
        after = transform.apply(before, row_ids=row_ids)
        if isinstance(transform, ParseDates):
            n_repaired = transform.repairs(before, after)
            if n_repaired:
                report.missing_dates[transform.column] = n_repaired
            n_sentinel = transform.sentinels(before)
            if n_sentinel:
                report.sentinel_dates[transform.column] = n_sentinel
        df[transform.column] = after
        logger.debug("%r -> %s", transform, after.dtype)

    if report.missing_dates:
        logger.warning(
            "%d date values could not be parsed with %r and were set to NaT: %s",
            report.total_missing_dates, config.date_format, report.missing_dates,
        )
    if report.sentinel_dates:
        logger.info("Not-applicable sentinel dates set to NaT: %s", report.sentinel_dates)

    keep, drop = config.redundant_columns
    if keep in df.columns and drop in df.columns:
        check_redundant_columns(df, keep, drop, row_ids=row_ids)
        df = df.drop(columns=[drop])
        report.dropped_columns.append(drop)
        logger.info("%s matches %s on all %d rows; dropped %s", drop, keep, len(df), drop)

    if config.require_closure_dates:
        offenders = find_missing_closure_dates(df)
        if not offenders.empty:
            raise MissingClosureDate(row_labels(offenders, config.id_column).tolist())

    logger.info("Cleaned %d institutions (%d columns)", len(df), df.shape[1])
    return CleaningResult(frame=df, report=report)
