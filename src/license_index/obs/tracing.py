"""Indexing traces and session-level summary metrics."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(slots=True)
class IndexingTrace:
    key: str
    timestamp_utc: str
    token_count: int
    new_words: int
    dictionary_size: int
    latency_ms: float


class IndexingTraceStore:
    """In-memory record of corpus ingestion, one trace per corpus key.

    Re-adding a key replaces its trace, mirroring the corpus registry.
    """

    def __init__(self) -> None:
        self._records: dict[str, IndexingTrace] = {}

    def record(
        self,
        *,
        key: str,
        token_count: int,
        new_words: int,
        dictionary_size: int,
        latency_ms: float,
    ) -> IndexingTrace:
        trace = IndexingTrace(
            key=key,
            timestamp_utc=datetime.now(timezone.utc).isoformat(),
            token_count=token_count,
            new_words=new_words,
            dictionary_size=dictionary_size,
            latency_ms=latency_ms,
        )
        self._records.pop(key, None)
        self._records[key] = trace
        return trace

    def get(self, key: str) -> IndexingTrace:
        trace = self._records.get(key)
        if trace is None:
            raise KeyError(f"Trace not found: {key}")
        return trace

    def list_recent(self, limit: int = 20) -> list[IndexingTrace]:
        return list(self._records.values())[-limit:]

    def summary(self) -> dict[str, float | int]:
        """Aggregate ingestion metrics for the session."""
        records = list(self._records.values())
        total = len(records)
        if total == 0:
            return {
                "documents": 0,
                "total_tokens": 0,
                "dictionary_size": 0,
                "avg_latency_ms": 0.0,
                "max_latency_ms": 0.0,
            }

        latencies = [record.latency_ms for record in records]
        return {
            "documents": total,
            "total_tokens": sum(record.token_count for record in records),
            "dictionary_size": max(record.dictionary_size for record in records),
            "avg_latency_ms": sum(latencies) / total,
            "max_latency_ms": max(latencies),
        }


class Timer:
    """Context timer reporting elapsed milliseconds of an indexing step."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = 0.0
        self.elapsed_ms = 0.0

    def __enter__(self) -> Timer:
        self._start = self._clock()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.elapsed_ms = max(0.0, self._clock() - self._start) * 1000.0
