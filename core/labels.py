"""
Category label maps for the closed-vocabulary columns.

The maps are data, not code: they live in ``core/data/category_labels.csv``
(``column,code,label``) and are read once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

import pandas as pd

logger = logging.getLogger(__name__)

LABELS_PATH = Path(__file__).parent / "data" / "category_labels.csv"


def normalize_code(value) -> Optional[str]:
    """
    Canonical string form of a raw code.

    ``2``, ``2.0``, ``"2"`` and ``" 02 "`` all become ``"2"``; blanks and NaN become None.
    """
    if value is None or pd.isna(value):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    code = str(value).strip()
    if code == "":
        return None
    if code.isdigit():
        code = code.lstrip("0") or "0"
    return code


@lru_cache(maxsize=None)
def load_label_maps(path: Optional[str] = None) -> Dict[str, Dict[str, str]]:
    """Read the label table into ``{column: {normalized code: label}}``."""
    src = Path(path) if path is not None else LABELS_PATH
    table = pd.read_csv(src, dtype=str, keep_default_na=False)
    maps: Dict[str, Dict[str, str]] = {}
    for row in table.itertuples(index=False):
        code = normalize_code(row.code)
        if code is None:
            raise ValueError(f"Blank code in label table {src} for column {row.column!r}.")
        maps.setdefault(row.column, {})[code] = row.label
    logger.debug("Loaded label maps for %d columns from %s", len(maps), src)
    return maps


def label_map(column: str) -> Dict[str, str]:
    maps = load_label_maps()
    if column not in maps:
        raise KeyError(f"No label map for column {column!r}. Known: {sorted(maps)}")
    return maps[column]
