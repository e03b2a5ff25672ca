"""
Analysis timing and process snapshot for the ``/performance`` endpoint.

The analyze route records one :class:`AnalysisRun` per call; only the
most recent run is kept.
"""

from __future__ import annotations

import threading
from typing import Optional

import psutil

from upi_analyzer.models.schemas import AnalysisRun, PerformanceSnapshot

_BYTES_PER_MB = 1024 * 1024
_process = psutil.Process()

_last_run_lock = threading.Lock()
_last_run: Optional[AnalysisRun] = None


def record_analysis(run: AnalysisRun) -> None:
    global _last_run
    with _last_run_lock:
        _last_run = run


def last_analysis() -> Optional[AnalysisRun]:
    with _last_run_lock:
        return _last_run


def rss_megabytes() -> float:
    """Resident set size of this process, in MB."""
    return _process.memory_info().rss / _BYTES_PER_MB


def collect_performance_snapshot() -> dict:
    """``{"lastAnalysis": {...} | None, "memory": "...", "threads": int}``."""
    snapshot = PerformanceSnapshot(
        last_analysis=last_analysis(),
        memory_mb=rss_megabytes(),
        threads=threading.active_count(),
    )
    return snapshot.to_dict()
