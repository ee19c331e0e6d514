"""
Data quality validation for the cleaned institutions table.

Catches problems after cleaning:
- Flags that are still raw 0/1 strings
- Coded columns holding values outside their label set
- Null or duplicate certificate numbers
- Inactive institutions with no closure date
- Closure dates before establishment dates
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

import pandas as pd

from core.labels import load_label_maps
from core.schema import BOOLEAN_COLUMNS, CODED_COLUMNS, ID_COLUMN

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """
    Findings for a cleaned institutions table.

    ``counts`` holds the number of offending rows (or columns, for the dtype
    and label checks) per check name, so callers can act on a single check
    without parsing the messages.
    """
    n_rows: int = 0
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    counts: Dict[str, int] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def flag(self, check: str, n: int, message: str, *, blocking: bool) -> None:
        self.counts[check] = self.counts.get(check, 0) + n
        (self.errors if blocking else self.warnings).append(message)

    def summary(self) -> str:
        lines = [f"Institutions checked: {self.n_rows:,}"]
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if self.counts:
            lines.append("Offending counts by check:")
            for check, n in self.counts.items():
                lines.append(f"  {check}: {n:,}")
        if not self.errors and not self.warnings:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def find_missing_closure_dates(
    df: pd.DataFrame,
    *,
    inactive_col: str = "INACTIVE",
    closed_col: str = "ENDEFYMD",
) -> pd.DataFrame:
    """Rows flagged inactive that carry no closure date."""
    if inactive_col not in df.columns or closed_col not in df.columns:
        return df.iloc[0:0]
    if not pd.api.types.is_bool_dtype(df[inactive_col]):
        # raw 0/1 text; the dtype check in validate_institutions reports it
        return df.iloc[0:0]
    inactive = df[inactive_col].fillna(False).astype(bool)
    return df[inactive & df[closed_col].isna()]


def validate_institutions(df: pd.DataFrame) -> ValidationResult:
    """
    Run all validation checks on a cleaned institutions table.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult(n_rows=len(df))

    if len(df) == 0:
        result.warnings.append("Table is empty (0 rows).")
        return result

    # --- Flags ---
    for col in BOOLEAN_COLUMNS:
        if col in df.columns and not pd.api.types.is_bool_dtype(df[col]):
            result.flag("flag_dtype", 1, f"{col} is {df[col].dtype}, expected boolean.", blocking=True)

    # --- Coded columns ---
    maps = load_label_maps()
    for col in CODED_COLUMNS:
        if col not in df.columns:
            continue
        labels = set(maps[col].values())
        vals = df[col].dropna()
        bad = sorted(set(vals.astype(str)) - labels)
        if bad:
            result.flag(
                "unlabeled_code", 1,
                f"{col} has values outside its label set: {bad[:10]}",
                blocking=True,
            )

    # --- Certificate number ---
    if ID_COLUMN in df.columns:
        n_null = int(df[ID_COLUMN].isna().sum())
        if n_null > 0:
            result.flag("null_cert", n_null, f"{n_null} rows have null {ID_COLUMN}.", blocking=True)
        n_dup = int(df[ID_COLUMN].dropna().duplicated().sum())
        if n_dup > 0:
            result.flag(
                "duplicate_cert", n_dup, f"{n_dup} duplicate {ID_COLUMN} values found.", blocking=False
            )

    # --- Lifecycle dates ---
    missing_close = find_missing_closure_dates(df)
    if not missing_close.empty:
        result.flag(
            "missing_closure_date", len(missing_close),
            f"{len(missing_close)} inactive rows have no closure date (ENDEFYMD).",
            blocking=False,
        )

    if "ESTYMD" in df.columns:
        n_no_est = int(df["ESTYMD"].isna().sum())
        if n_no_est > 0:
            result.flag(
                "missing_establishment_date", n_no_est,
                f"{n_no_est} rows have no establishment date (ESTYMD).",
                blocking=False,
            )
        if "ENDEFYMD" in df.columns and all(
            pd.api.types.is_datetime64_any_dtype(df[c]) for c in ("ESTYMD", "ENDEFYMD")
        ):
            n_backwards = int((df["ENDEFYMD"] < df["ESTYMD"]).sum())
            if n_backwards > 0:
                result.flag(
                    "closed_before_established", n_backwards,
                    f"{n_backwards} rows close (ENDEFYMD) before they were established (ESTYMD).",
                    blocking=False,
                )

    for w in result.warnings:
        logger.warning(w)
    for e in result.errors:
        logger.error(e)
    return result
