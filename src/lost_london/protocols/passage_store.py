"""Protocol for the passage store consumed by the fusion engine."""

from __future__ import annotations

from typing import Protocol

from lost_london.models.domain import Corpus, Passage


class PassageStore(Protocol):
    async def vector_search(
        self, vector: list[float], top_k: int, corpus: Corpus
    ) -> list[tuple[int, float]]:
        """Return (passage_id, cosine distance) pairs, nearest first."""
        ...

    async def keyword_passages(self, corpus: Corpus, contains: str) -> list[Passage]:
        """Return every passage whose title or content contains ``contains``
        (case-insensitive). Callers apply the tiered scoring themselves."""
        ...

    async def get_passages(self, corpus: Corpus, ids: list[int]) -> dict[int, Passage]: ...
