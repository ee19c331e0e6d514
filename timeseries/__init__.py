"""
Monthly activity series — established vs. closed institution counts over time.
"""

from .builder import SERIES_COLUMNS, add_net_active, build_activity_series, empty_activity_series

__all__ = [
    "SERIES_COLUMNS",
    "add_net_active",
    "build_activity_series",
    "empty_activity_series",
]
