"""Batch export: job planning, sequential execution and the single-page map."""

from .batch import (
    BatchExportOrchestrator,
    BatchReport,
    ExportJob,
    ExportOutcome,
    JobBatch,
    build_output_path,
    export_destinations,
    resolve_output_folder,
)
from .map_aggregator import MapAggregator

__all__ = [
    "BatchExportOrchestrator",
    "BatchReport",
    "ExportJob",
    "ExportOutcome",
    "JobBatch",
    "MapAggregator",
    "build_output_path",
    "export_destinations",
    "resolve_output_folder",
]
