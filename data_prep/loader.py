from __future__ import annotations

import logging
from typing import Dict, Optional

import pandas as pd

from core.schema import DTYPE_OVERRIDES

logger = logging.getLogger(__name__)


def load_institutions_csv(
    path_or_buffer,
    *,
    dtype_overrides: Optional[Dict[str, str]] = None,
    low_memory: bool = False,
) -> pd.DataFrame:
    """
    Load the raw FDIC institutions CSV.

    Default inference is kept for every column except the enumerated overrides,
    which pin codes, ZIP/FIPS numbers and sentinel strings to the right dtype.
    Dates are left as text here; the cleaner parses them with the fixed format.
    """
    overrides = DTYPE_OVERRIDES if dtype_overrides is None else dtype_overrides
    header = pd.read_csv(path_or_buffer, nrows=0).columns
    if hasattr(path_or_buffer, "seek"):
        path_or_buffer.seek(0)
    dtype = {c: t for c, t in overrides.items() if c in header}
    df = pd.read_csv(path_or_buffer, dtype=dtype, low_memory=low_memory)
    logger.info("Loaded %d institutions x %d columns (%d dtype overrides)", len(df), df.shape[1], len(dtype))
    return df
