"""Passage store combining the SQLite tables with the FAISS indexes."""

from __future__ import annotations

import asyncio

import numpy as np

from lost_london.exceptions import PassageStoreError
from lost_london.models.domain import Corpus, Passage
from lost_london.storage.sqlite_passage_store import SQLitePassageStore
from lost_london.vectorstore.faiss_store import FAISSVectorStore


class LocalPassageStore:
    """Implements the PassageStore protocol over local SQLite + FAISS."""

    def __init__(self, sqlite_store: SQLitePassageStore, vector_store: FAISSVectorStore) -> None:
        self._sqlite = sqlite_store
        self._vectors = vector_store

    async def vector_search(
        self, vector: list[float], top_k: int, corpus: Corpus
    ) -> list[tuple[int, float]]:
        query = np.array(vector, dtype=np.float32)
        try:
            return await asyncio.to_thread(self._vectors.search, corpus, query, top_k)
        except (RuntimeError, ValueError, AssertionError) as e:
            raise PassageStoreError(f"Vector search failed for {corpus.value}: {e}") from e

    async def keyword_passages(self, corpus: Corpus, contains: str) -> list[Passage]:
        return await self._sqlite.keyword_passages(corpus, contains)

    async def get_passages(self, corpus: Corpus, ids: list[int]) -> dict[int, Passage]:
        return await self._sqlite.get_passages(corpus, ids)

    async def add_passages(self, passages: list[Passage], embeddings: list[list[float]]) -> None:
        """Write helper for seeding; searches never call it."""
        await self._sqlite.save_passages(passages)
        for corpus in Corpus:
            rows = [(p.id, e) for p, e in zip(passages, embeddings) if p.corpus is corpus]
            if rows:
                await self._vectors.add_safe(
                    corpus,
                    [pid for pid, _ in rows],
                    np.array([e for _, e in rows], dtype=np.float32),
                )

    async def counts(self) -> dict[str, int]:
        return {corpus.value: await self._sqlite.count(corpus) for corpus in Corpus}

    @property
    def index_sizes(self) -> dict[str, int]:
        return self._vectors.sizes
