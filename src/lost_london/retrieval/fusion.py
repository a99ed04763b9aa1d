"""Hybrid retriever fusing vector similarity, tiered keyword match and type boosts."""

from __future__ import annotations

from lost_london.concurrency import gather_or_cancel
from lost_london.config.settings import Settings
from lost_london.models.domain import PRIMARY_CORPUS, Corpus, ScoredPassage
from lost_london.observability.logger import get_logger
from lost_london.protocols.embedder import Embedder
from lost_london.protocols.passage_store import PassageStore
from lost_london.query.expansion import TopicExpander
from lost_london.query.normalizer import QueryNormalizer
from lost_london.retrieval.fallback import ExpansionFallback
from lost_london.retrieval.keyword import first_token
from lost_london.retrieval.scoring import FusionScorer, rank, vector_score_from_distance

logger = get_logger("fusion")


class FusionEngine:
    def __init__(
        self,
        store: PassageStore,
        embedder: Embedder,
        settings: Settings,
        normalizer: QueryNormalizer | None = None,
        expander: TopicExpander | None = None,
    ) -> None:
        self._store = store
        self._embedder = embedder
        self._normalizer = normalizer or QueryNormalizer()
        self._scorer = FusionScorer.from_settings(settings)
        self._fallback = ExpansionFallback(store, expander or TopicExpander(), self._scorer)
        self._vector_top_k = settings.vector_top_k

    def normalize(self, raw_query: str) -> str:
        return self._normalizer.normalize(raw_query)

    async def search(
        self,
        raw_query: str,
        limit: int,
        corpus: Corpus = PRIMARY_CORPUS,
    ) -> list[ScoredPassage]:
        _, results = await self.search_corpora(raw_query, limit, [corpus])
        return results[corpus]

    async def search_corpora(
        self,
        raw_query: str,
        limit: int,
        corpora: list[Corpus],
    ) -> tuple[str, dict[Corpus, list[ScoredPassage]]]:
        """Normalize and embed once, then rank every corpus concurrently.

        EmbeddingUnavailable and PassageStoreError propagate unchanged.
        """
        if limit < 1:
            raise ValueError("limit must be positive")

        normalized = self.normalize(raw_query)
        vector = await self._embedder.embed(normalized)

        ranked = await gather_or_cancel(
            *(self.rank(normalized, vector, limit, corpus) for corpus in corpora)
        )
        return normalized, dict(zip(corpora, ranked))

    async def rank(
        self,
        normalized: str,
        vector: list[float],
        limit: int,
        corpus: Corpus,
    ) -> list[ScoredPassage]:
        # 1. Vector hits and keyword candidates from the store
        hits, keyword_candidates = await gather_or_cancel(
            self._store.vector_search(vector, self._vector_top_k, corpus),
            self._store.keyword_passages(corpus, first_token(normalized)),
        )
        distances = dict(hits)

        # 2. Load vector hits the keyword prefilter did not return
        passages = {p.id: p for p in keyword_candidates}
        missing = [pid for pid in distances if pid not in passages]
        if missing:
            passages.update(await self._store.get_passages(corpus, missing))

        # 3. Score every eligible passage
        scored: list[ScoredPassage] = []
        for pid, passage in passages.items():
            is_hit = pid in distances
            vector_score = vector_score_from_distance(distances[pid]) if is_hit else 0.0
            candidate = self._scorer.score(passage, normalized, vector_score)
            if is_hit or candidate.keyword_score > 0:
                scored.append(candidate)

        results = rank(scored, limit)
        logger.info(
            "fusion_ranked",
            corpus=corpus.value,
            vector_hits=len(hits),
            keyword_candidates=len(keyword_candidates),
            eligible=len(scored),
            returned=len(results),
        )

        # 4. Keyword-only fallback over topic expansions
        if not results:
            results = await self._fallback.retrieve(normalized, limit, corpus)
        return results
