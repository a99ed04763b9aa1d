"""Tiered keyword scoring and metadata type boosts."""

from __future__ import annotations

import re
from dataclasses import dataclass

from lost_london.config.settings import Settings
from lost_london.models.domain import PRIMARY_CORPUS, Passage


def first_token(term: str) -> str:
    parts = term.split()
    return parts[0] if parts else ""


@dataclass(frozen=True)
class KeywordTiers:
    content_phrase: float = 0.30
    title_phrase: float = 0.25
    title_token: float = 0.10
    content_token: float = 0.05

    @classmethod
    def from_settings(cls, settings: Settings) -> KeywordTiers:
        return cls(
            content_phrase=settings.tier_content_phrase,
            title_phrase=settings.tier_title_phrase,
            title_token=settings.tier_title_token,
            content_token=settings.tier_content_token,
        )

    def score(self, passage: Passage, term: str) -> float:
        """Score against the full, un-split term first, then its first token."""
        phrase = term.lower()
        if not phrase:
            return 0.0
        title = passage.title.lower()
        content = passage.content.lower()
        token = first_token(phrase)

        if phrase in content:
            return self.content_phrase
        if phrase in title:
            return self.title_phrase
        if token in title:
            return self.title_token
        if token in content:
            return self.content_token
        return 0.0


class TypeBooster:
    def __init__(
        self,
        series_pattern: str = r"^vic keegan.*lost london",
        series_boost: float = 0.10,
        primary_boost: float = 0.05,
    ) -> None:
        self._series = re.compile(series_pattern, re.IGNORECASE)
        self._series_boost = series_boost
        self._primary_boost = primary_boost

    @classmethod
    def from_settings(cls, settings: Settings) -> TypeBooster:
        return cls(
            series_pattern=settings.series_title_pattern,
            series_boost=settings.series_boost,
            primary_boost=settings.primary_corpus_boost,
        )

    def boost(self, passage: Passage) -> float:
        if self._series.search(passage.title):
            return self._series_boost
        if passage.corpus is PRIMARY_CORPUS:
            return self._primary_boost
        return 0.0
