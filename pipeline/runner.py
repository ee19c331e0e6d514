"""
Pipeline runner — load, clean, validate, build the activity series, hand off.

Stages run once, in order, each on the previous stage's output. Any fatal
data-quality error stops the run before anything is written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

import pandas as pd

from core.config import CleaningConfig, SeriesConfig
from data_prep.cleaner import CleaningReport, clean_institutions
from data_prep.loader import load_institutions_csv
from data_prep.validators import ValidationResult, validate_institutions
from timeseries.builder import build_activity_series

from .outputs import SnapshotWriter

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    institutions: pd.DataFrame
    series: pd.DataFrame
    cleaning: CleaningReport
    validation: ValidationResult


def run_pipeline(
    raw: Union[pd.DataFrame, str, object],
    *,
    cleaning: Optional[CleaningConfig] = None,
    series: Optional[SeriesConfig] = None,
    writer: Optional[SnapshotWriter] = None,
) -> PipelineResult:
    """
    Run the full institutions pipeline.

    Parameters
    ----------
    raw : pd.DataFrame or path / file-like
        The raw institutions table, or the CSV to load it from
    cleaning : CleaningConfig, optional
    series : SeriesConfig, optional
    writer : SnapshotWriter, optional
        Receives the cleaned table and the series once both exist

    Returns
    -------
    PipelineResult with the cleaned table, the monthly series and both reports.
    """
    table = raw if isinstance(raw, pd.DataFrame) else load_institutions_csv(raw)

    cleaned = clean_institutions(table, config=cleaning)
    validation = validate_institutions(cleaned.frame)
    if not validation.is_valid:
        raise ValueError(f"Cleaned institutions failed validation:\n{validation.summary()}")

    activity = build_activity_series(cleaned.frame, config=series)

    if writer is not None:
        writer.write_institutions(cleaned.frame)
        writer.write_series(activity)

    logger.info(
        "Pipeline done: %d institutions, %d months, %d dates repaired",
        len(cleaned.frame), len(activity), cleaned.report.total_missing_dates,
    )
    return PipelineResult(
        institutions=cleaned.frame,
        series=activity,
        cleaning=cleaned.report,
        validation=validation,
    )
