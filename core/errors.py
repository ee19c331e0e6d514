"""
Fatal data-quality errors raised while cleaning the institutions table.

A run that hits any of these stops; nothing partially cleaned is handed on.
"""

from __future__ import annotations

from typing import Any, Sequence, Tuple


class DataQualityError(ValueError):
    """Base class for data problems that abort the load."""


class SchemaViolation(DataQualityError):
    """A coded column holds values that have no entry in its label map."""

    def __init__(self, column: str, values: Sequence[str]):
        self.column = column
        self.values = list(values)
        super().__init__(f"Column {column!r} has unmapped codes: {self.values}")


class TypeCoercionFailure(DataQualityError):
    """A boolean column holds something other than a 0/1 indicator."""

    def __init__(self, column: str, row_id: Any, value: Any):
        self.column = column
        self.row_id = row_id
        self.value = value
        super().__init__(
            f"Column {column!r} row {row_id!r}: {value!r} is not a binary indicator (0/1)."
        )


class RedundancyMismatch(DataQualityError):
    """Two columns expected to be duplicates after recoding disagree."""

    def __init__(self, row_id: Any, kept_value: Any, dropped_value: Any, columns: Tuple[str, str]):
        self.row_id = row_id
        self.kept_value = kept_value
        self.dropped_value = dropped_value
        self.columns = columns
        super().__init__(
            f"Row {row_id!r}: {columns[0]}={kept_value!r} but {columns[1]}={dropped_value!r}; "
            f"refusing to drop {columns[1]!r}."
        )


class MissingClosureDate(DataQualityError):
    """Inactive institutions without a closure date (strict mode only)."""

    def __init__(self, row_ids: Sequence[Any]):
        self.row_ids = list(row_ids)
        shown = self.row_ids[:10]
        more = f" (+{len(self.row_ids) - 10} more)" if len(self.row_ids) > 10 else ""
        super().__init__(f"{len(self.row_ids)} inactive rows have no closure date: {shown}{more}")
