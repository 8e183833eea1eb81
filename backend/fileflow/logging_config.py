# backend/fileflow/logging_config.py

import logging
import os
import time
from contextlib import contextmanager
from typing import Dict, Iterator, Union

logging.basicConfig(
    level=os.getenv("FILEFLOW_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)

log = logging.getLogger("fileflow")

# Counter names served by GET /metrics
ANALYSES_REJECTED = "analyses_rejected"
ANALYSES_STARTED = "analyses_started"
ANALYSES_FAILED = "analyses_failed"
ANALYSES_SUCCEEDED = "analyses_succeeded"
GEMINI_CALLS = "gemini_calls"
ANALYSES_TIMED = "analyses_timed"
ANALYSIS_LAST_MS = "analysis_last_ms"
ANALYSIS_TOTAL_MS = "analysis_total_ms"

Number = Union[int, float]
_counters: Dict[str, Number] = {}


def count(name: str, amount: int = 1) -> None:
    _counters[name] = int(_counters.get(name, 0)) + amount


def metrics_snapshot() -> Dict[str, Number]:
    """Counters plus the mean time of the timed capability calls."""
    snapshot = dict(_counters)
    timed = snapshot.get(ANALYSES_TIMED, 0)
    if timed:
        snapshot["analysis_mean_ms"] = round(snapshot[ANALYSIS_TOTAL_MS] / timed, 1)
    return snapshot


def reset_metrics() -> None:
    _counters.clear()


@contextmanager
def timed_analysis(file_name: str) -> Iterator[None]:
    """Time one capability call, successful or not."""
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        count(ANALYSES_TIMED)
        _counters[ANALYSIS_LAST_MS] = round(elapsed_ms, 1)
        _counters[ANALYSIS_TOTAL_MS] = round(_counters.get(ANALYSIS_TOTAL_MS, 0) + elapsed_ms, 1)
        log.info(f"⏱️ Analysis of {file_name!r} took {elapsed_ms:.1f}ms")
