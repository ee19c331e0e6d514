"""
Pipeline — sequential runner and snapshot writers.
"""

from .outputs import PickleSnapshotWriter, SnapshotWriter
from .runner import PipelineResult, run_pipeline

__all__ = ["PickleSnapshotWriter", "SnapshotWriter", "PipelineResult", "run_pipeline"]
