"""Keyword-only retry over topic expansion terms when fusion finds nothing."""

from __future__ import annotations

from lost_london.models.domain import Corpus, ScoredPassage
from lost_london.observability.logger import get_logger
from lost_london.protocols.passage_store import PassageStore
from lost_london.query.expansion import TopicExpander
from lost_london.retrieval.keyword import first_token
from lost_london.retrieval.scoring import FusionScorer, rank

logger = get_logger("fallback")


class ExpansionFallback:
    def __init__(
        self,
        store: PassageStore,
        expander: TopicExpander,
        scorer: FusionScorer,
    ) -> None:
        self._store = store
        self._expander = expander
        self._scorer = scorer

    async def keyword_only(self, term: str, limit: int, corpus: Corpus) -> list[ScoredPassage]:
        token = first_token(term.lower())
        if not token:
            return []
        candidates = await self._store.keyword_passages(corpus, token)
        scored = [self._scorer.score(p, term) for p in candidates]
        return rank([s for s in scored if s.keyword_score > 0], limit)

    async def retrieve(self, normalized: str, limit: int, corpus: Corpus) -> list[ScoredPassage]:
        """Try each expansion term in order; the first non-empty result wins.

        Terms equal to the normalized query were already covered by the
        primary search and are skipped. No embedding is requested here.
        """
        for term in self._expander.expand(normalized):
            if term == normalized:
                continue
            results = await self.keyword_only(term, limit, corpus)
            if results:
                logger.info(
                    "fallback_hit",
                    corpus=corpus.value,
                    term=term,
                    count=len(results),
                )
                return results

        logger.info("fallback_exhausted", corpus=corpus.value, query=normalized)
        return []
