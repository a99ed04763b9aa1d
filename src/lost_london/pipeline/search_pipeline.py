"""Hybrid search orchestrator: fusion per corpus and graph enrichment, joined once."""

from __future__ import annotations

from lost_london.assembly.assembler import ResultAssembler
from lost_london.concurrency import gather_or_cancel
from lost_london.enrichment.graph_matcher import GraphEnrichmentMatcher
from lost_london.exceptions import EmptyQueryError
from lost_london.models.domain import PRIMARY_CORPUS, SECONDARY_CORPUS, Corpus
from lost_london.models.schemas import SearchRequest, SearchResponse
from lost_london.observability.logger import get_logger
from lost_london.observability.metrics import (
    log_enrichment_metrics,
    log_retrieval_metrics,
    log_search_metrics,
)
from lost_london.observability.tracing import TraceContext
from lost_london.retrieval.fusion import FusionEngine
from lost_london.retrieval.merger import CrossCorpusMerger

logger = get_logger("search_pipeline")


class HybridSearchPipeline:
    def __init__(
        self,
        fusion_engine: FusionEngine,
        merger: CrossCorpusMerger,
        graph_matcher: GraphEnrichmentMatcher,
        assembler: ResultAssembler,
    ) -> None:
        self._fusion = fusion_engine
        self._merger = merger
        self._graph = graph_matcher
        self._assembler = assembler

    async def execute(self, request: SearchRequest) -> SearchResponse:
        query = request.query or ""
        if not query.strip():
            raise EmptyQueryError("Query is required")

        trace = TraceContext()
        corpora = self._corpora(request.corpora)

        # STEP 1: Fusion retrieval (per corpus) and graph enrichment, concurrently
        with trace.span("retrieval_and_enrichment", corpora=[c.value for c in corpora]):
            (normalized, ranked), enrichment = await gather_or_cancel(
                self._fusion.search_corpora(query, request.limit, corpora),
                self._graph.fetch(query),
            )

        for corpus, results in ranked.items():
            log_retrieval_metrics(
                trace.trace_id,
                corpus.value,
                [r.final_score for r in results],
                len(results),
            )
        log_enrichment_metrics(
            trace.trace_id,
            len(enrichment.entities),
            len(enrichment.facts),
            len(enrichment.connections),
        )

        # STEP 2: Cross-corpus merge
        with trace.span("merge"):
            merged = self._merger.merge(
                ranked.get(PRIMARY_CORPUS, []),
                ranked.get(SECONDARY_CORPUS, []),
                request.limit,
            )

        # STEP 3: Attach graph entities/facts to each passage
        with trace.span("attach_enrichment"):
            enriched = self._graph.attach(merged, enrichment)

        # STEP 4: Assemble response
        with trace.span("assemble"):
            response = self._assembler.assemble(query, normalized, enriched, enrichment)

        log_search_metrics(trace, response.count, response.source_counts.model_dump())
        return response

    @staticmethod
    def _corpora(selection: str) -> list[Corpus]:
        if selection == "primary_only":
            return [PRIMARY_CORPUS]
        return [PRIMARY_CORPUS, SECONDARY_CORPUS]
