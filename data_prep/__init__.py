"""
Data preparation — loading the raw institutions CSV, typed cleaning, validation.
"""

from .loader import load_institutions_csv
from .transforms import (
    ColumnTransform,
    ParseDates,
    KeepText,
    CoerceBoolean,
    TagCategory,
    RecodeLabels,
    build_transforms,
)
from .cleaner import CleaningReport, CleaningResult, check_redundant_columns, clean_institutions
from .validators import ValidationResult, find_missing_closure_dates, validate_institutions

__all__ = [
    "load_institutions_csv",
    "ColumnTransform",
    "ParseDates",
    "KeepText",
    "CoerceBoolean",
    "TagCategory",
    "RecodeLabels",
    "build_transforms",
    "CleaningReport",
    "CleaningResult",
    "check_redundant_columns",
    "clean_institutions",
    "ValidationResult",
    "find_missing_closure_dates",
    "validate_institutions",
]
