"""Weighted composite score: vector*w_v + keyword*w_k + type boost."""

from __future__ import annotations

from lost_london.config.settings import Settings
from lost_london.models.domain import Passage, ScoredPassage
from lost_london.retrieval.keyword import KeywordTiers, TypeBooster


def vector_score_from_distance(distance: float) -> float:
    return max(0.0, min(1.0, 1.0 - distance))


class FusionScorer:
    def __init__(
        self,
        tiers: KeywordTiers,
        booster: TypeBooster,
        vector_weight: float = 0.6,
        keyword_weight: float = 0.4,
    ) -> None:
        self.tiers = tiers
        self.booster = booster
        self.vector_weight = vector_weight
        self.keyword_weight = keyword_weight

    @classmethod
    def from_settings(cls, settings: Settings) -> FusionScorer:
        return cls(
            tiers=KeywordTiers.from_settings(settings),
            booster=TypeBooster.from_settings(settings),
            vector_weight=settings.vector_weight,
            keyword_weight=settings.keyword_weight,
        )

    def score(self, passage: Passage, term: str, vector_score: float = 0.0) -> ScoredPassage:
        keyword_score = self.tiers.score(passage, term)
        type_boost = self.booster.boost(passage)
        final = (
            vector_score * self.vector_weight
            + keyword_score * self.keyword_weight
            + type_boost
        )
        return ScoredPassage(
            passage=passage,
            vector_score=vector_score,
            keyword_score=keyword_score,
            type_boost=type_boost,
            final_score=final,
        )


def rank(scored: list[ScoredPassage], limit: int) -> list[ScoredPassage]:
    """Descending final score, ties broken by ascending passage id."""
    return sorted(scored, key=lambda s: s.sort_key)[:limit]
