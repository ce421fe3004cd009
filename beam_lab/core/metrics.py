# beam_lab/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional
import time, tracemalloc


@dataclass
class SearchStats:
    """Counters a caller can hand to a search to see how much work it did.
    Owned by the caller, filled in by exactly one call."""
    expanded: int = 0
    relaxed: int = 0
    stale: int = 0
    forward_expanded: int = 0
    backward_expanded: int = 0
    meeting_updates: int = 0


@dataclass
class SearchResult:
    algo: str
    success: bool
    path: List[Any]
    cost: float
    nodes_expanded: int
    time_s: Optional[float]
    peak_kb: Optional[int]
    beam_width: Optional[int] = None
    error: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def as_row(self) -> Dict[str, Any]:
        row = asdict(self)
        row["path_len"] = len(self.path)
        return row


class MeasuredRun:
    """
    Context manager for wall time and (approximate) peak traced memory.
    .elapsed and .peak_kb are filled in when the with-block exits.
    """
    def __init__(self, trace_memory: bool = True) -> None:
        self.trace_memory = trace_memory
        self.elapsed: float = 0.0
        self.peak_kb: int = 0
        self._start: float = 0.0

    def __enter__(self) -> "MeasuredRun":
        if self.trace_memory:
            tracemalloc.start()
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        if self.trace_memory:
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self.peak_kb = peak // 1024
        return False  # the search's exception propagates
