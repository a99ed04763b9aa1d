"""Metric recording helpers for search traces."""

from __future__ import annotations

from lost_london.observability.logger import get_logger
from lost_london.observability.tracing import TraceContext

logger = get_logger("metrics")


def log_retrieval_metrics(
    trace_id: str,
    corpus: str,
    top_scores: list[float],
    num_results: int,
) -> None:
    logger.info(
        "retrieval_metrics",
        trace_id=trace_id,
        corpus=corpus,
        top_scores=[round(s, 4) for s in top_scores[:5]],
        num_results=num_results,
    )


def log_enrichment_metrics(
    trace_id: str,
    entities: int,
    facts: int,
    connections: int,
) -> None:
    logger.info(
        "enrichment_metrics",
        trace_id=trace_id,
        entities=entities,
        facts=facts,
        connections=connections,
    )


def log_search_metrics(trace: TraceContext, count: int, source_counts: dict[str, int]) -> None:
    logger.info(
        "search_completed",
        trace_id=trace.trace_id,
        count=count,
        source_counts=source_counts,
        latency_ms=round(trace.elapsed_ms, 2),
        spans=trace.timings(),
    )
