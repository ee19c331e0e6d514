"""
Typed single-column transforms.

Each transform owns one column and turns the raw values into their cleaned
type. The cleaner builds one per present column from the schema tuples and
applies them in order, so each step can be tested on its own.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import numpy as np
import pandas as pd

from core.config import CleaningConfig
from core.errors import SchemaViolation, TypeCoercionFailure
from core.labels import label_map, normalize_code
from core.schema import (
    BOOLEAN_COLUMNS,
    CHANGE_CODE_COLUMNS,
    CODED_COLUMNS,
    DATE_COLUMNS,
    DATE_SENTINEL,
    OPEN_CATEGORY_COLUMNS,
    SENTINEL_TEXT_COLUMNS,
)

_TRUE_TOKENS = {"1", "1.0", "true"}
_FALSE_TOKENS = {"0", "0.0", "false"}


class ColumnTransform:
    """Interface for a typed cleaning step on one column."""

    def __init__(self, column: str):
        self.column = column

    def apply(self, values: pd.Series, *, row_ids: pd.Series) -> pd.Series:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.column!r})"


class ParseDates(ColumnTransform):
    """
    Parse with a fixed format. The "still open" sentinel and unparseable values
    both become NaT, but are counted apart by ``sentinels`` and ``repairs``.
    """

    def __init__(
        self,
        column: str,
        date_format: str = "%m/%d/%Y",
        sentinel: Optional[str] = DATE_SENTINEL,
    ):
        super().__init__(column)
        self.date_format = date_format
        self.sentinel = sentinel

    @staticmethod
    def _text(values: pd.Series) -> pd.Series:
        return values.astype("string").str.strip()

    def _is_sentinel(self, text: pd.Series) -> pd.Series:
        if self.sentinel is None:
            return pd.Series(False, index=text.index)
        return text.eq(self.sentinel).fillna(False).astype(bool)

    def apply(self, values: pd.Series, *, row_ids: pd.Series) -> pd.Series:
        if pd.api.types.is_datetime64_any_dtype(values):
            return values
        text = self._text(values)
        text = text.mask(self._is_sentinel(text))
        parsed = pd.to_datetime(text, format=self.date_format, errors="coerce")
        # nanosecond range only
        parsed = parsed.where(parsed <= pd.Timestamp.max)
        return parsed.astype("datetime64[ns]")

    def sentinels(self, before: pd.Series) -> int:
        """Number of sentinel values in the raw column."""
        if pd.api.types.is_datetime64_any_dtype(before):
            return 0
        return int(self._is_sentinel(self._text(before)).sum())

    def repairs(self, before: pd.Series, after: pd.Series) -> int:
        """Number of non-sentinel values present before parsing and missing after."""
        text = self._text(before)
        present = (text.notna() & (text != "")).fillna(False).astype(bool)
        if not pd.api.types.is_datetime64_any_dtype(before):
            present &= ~self._is_sentinel(text)
        return int((present & after.isna()).sum())


class KeepText(ColumnTransform):
    """Store as pandas string without interpreting the content."""

    def apply(self, values: pd.Series, *, row_ids: pd.Series) -> pd.Series:
        return values.astype("string")


class CoerceBoolean(ColumnTransform):
    """0/1 indicator to nullable boolean. Any other value is a TypeCoercionFailure."""

    @staticmethod
    def _convert(value):
        if value is None or pd.isna(value):
            return pd.NA
        if isinstance(value, (bool, np.bool_)):
            return bool(value)
        token = str(value).strip().lower()
        if token == "":
            return pd.NA
        if token in _TRUE_TOKENS:
            return True
        if token in _FALSE_TOKENS:
            return False
        raise ValueError(token)

    def apply(self, values: pd.Series, *, row_ids: pd.Series) -> pd.Series:
        if pd.api.types.is_bool_dtype(values):
            return values.astype("boolean")
        out = []
        for idx, value in values.items():
            try:
                out.append(self._convert(value))
            except ValueError:
                raise TypeCoercionFailure(self.column, row_ids.get(idx, idx), value) from None
        return pd.Series(out, index=values.index, dtype="boolean", name=values.name)


class TagCategory(ColumnTransform):
    """Open vocabulary: category dtype, values untouched."""

    def apply(self, values: pd.Series, *, row_ids: pd.Series) -> pd.Series:
        return values.astype("category")


class RecodeLabels(ColumnTransform):
    """Closed vocabulary: map every code to its label; unmapped codes abort."""

    def __init__(self, column: str, labels: Optional[Dict[str, str]] = None):
        super().__init__(column)
        self.labels = label_map(column) if labels is None else labels

    def apply(self, values: pd.Series, *, row_ids: pd.Series) -> pd.Series:
        codes = values.astype(object).map(normalize_code)
        present = codes.dropna()
        unmapped = sorted(set(present) - set(self.labels))
        if unmapped:
            raise SchemaViolation(self.column, unmapped)
        categories = list(dict.fromkeys(self.labels.values()))
        mapped = codes.map(self.labels, na_action="ignore")
        return pd.Series(
            pd.Categorical(mapped, categories=categories),
            index=values.index,
            name=values.name,
        )


def build_transforms(
    columns: Iterable[str],
    *,
    config: Optional[CleaningConfig] = None,
) -> List[ColumnTransform]:
    """Transforms for the columns present, in schema order (dates, text, flags, categories, codes)."""
    config = config or CleaningConfig()
    present = set(columns)
    transforms: List[ColumnTransform] = []
    transforms += [ParseDates(c, config.date_format) for c in DATE_COLUMNS if c in present]
    transforms += [KeepText(c) for c in SENTINEL_TEXT_COLUMNS + CHANGE_CODE_COLUMNS if c in present]
    transforms += [CoerceBoolean(c) for c in BOOLEAN_COLUMNS if c in present]
    transforms += [TagCategory(c) for c in OPEN_CATEGORY_COLUMNS if c in present]
    transforms += [RecodeLabels(c) for c in CODED_COLUMNS if c in present]
    return transforms
