"""Lightweight per-query tracing with timed spans."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from uuid import uuid4


@dataclass
class Span:
    name: str
    start_ms: float
    end_ms: float = 0.0
    metadata: dict = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        return self.end_ms - self.start_ms


class TraceContext:
    def __init__(self, trace_id: str | None = None) -> None:
        self.trace_id = trace_id or str(uuid4())
        self.spans: list[Span] = []
        self.start_time = time.monotonic()

    @contextmanager
    def span(self, name: str, **metadata):
        s = Span(name=name, start_ms=self._now_ms(), metadata=metadata)
        try:
            yield s
        finally:
            s.end_ms = self._now_ms()
            self.spans.append(s)

    @property
    def elapsed_ms(self) -> float:
        return self._now_ms()

    def timings(self) -> dict[str, float]:
        """Span name -> duration in milliseconds, rounded for logging."""
        return {s.name: round(s.duration_ms, 2) for s in self.spans}

    def _now_ms(self) -> float:
        return (time.monotonic() - self.start_time) * 1000
