"""
Snapshot writers — the storage side of a run.
The format is the writer's business; the pipeline only hands over typed frames.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)


class SnapshotWriter:
    """Interface for persisting the cleaned table and the activity series."""

    def write_institutions(self, institutions: pd.DataFrame) -> None:
        raise NotImplementedError

    def write_series(self, series: pd.DataFrame) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class PickleSnapshotWriter(SnapshotWriter):
    """
    Pandas pickles in one directory. Keeps category, boolean and datetime dtypes
    exactly, so a reload needs no schema.
    """

    out_dir: Path
    institutions_name: str = "institutions.pkl"
    series_name: str = "activity_series.pkl"

    def _target(self, name: str) -> Path:
        out = Path(self.out_dir)
        out.mkdir(parents=True, exist_ok=True)
        return out / name

    def write_institutions(self, institutions: pd.DataFrame) -> None:
        path = self._target(self.institutions_name)
        institutions.to_pickle(path)
        logger.info("Wrote %d institutions to %s", len(institutions), path)

    def write_series(self, series: pd.DataFrame) -> None:
        path = self._target(self.series_name)
        series.to_pickle(path)
        logger.info("Wrote %d-month activity series to %s", len(series), path)
