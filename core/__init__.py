"""
Core package — schema definitions, label maps, configuration, errors, and shared utilities.
No business logic lives here.
"""

from .schema import (
    BOOLEAN_COLUMNS,
    CODED_COLUMNS,
    DATE_COLUMNS,
    DTYPE_OVERRIDES,
    OPEN_CATEGORY_COLUMNS,
    REDUNDANT_COLUMNS,
    SENTINEL_TEXT_COLUMNS,
)
from .config import CleaningConfig, SeriesConfig
from .errors import (
    DataQualityError,
    MissingClosureDate,
    RedundancyMismatch,
    SchemaViolation,
    TypeCoercionFailure,
)
from .labels import label_map, load_label_maps, normalize_code
from .utils import require_columns, month_grid, month_start

__all__ = [
    "BOOLEAN_COLUMNS",
    "CODED_COLUMNS",
    "DATE_COLUMNS",
    "DTYPE_OVERRIDES",
    "OPEN_CATEGORY_COLUMNS",
    "REDUNDANT_COLUMNS",
    "SENTINEL_TEXT_COLUMNS",
    "CleaningConfig",
    "SeriesConfig",
    "DataQualityError",
    "MissingClosureDate",
    "RedundancyMismatch",
    "SchemaViolation",
    "TypeCoercionFailure",
    "label_map",
    "load_label_maps",
    "normalize_code",
    "require_columns",
    "month_grid",
    "month_start",
]
