"""Per-corpus FAISS cosine indexes keyed directly by passage id."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

import faiss
import numpy as np

from lost_london.models.domain import Corpus
from lost_london.observability.logger import get_logger

logger = get_logger("faiss_store")


class FAISSVectorStore:
    def __init__(self, dimensions: int, index_path: str | None = None) -> None:
        self._dimensions = dimensions
        self._index_path = index_path
        self._indexes: dict[Corpus, faiss.IndexIDMap] = {
            corpus: self._new_index() for corpus in Corpus
        }
        self._write_lock = asyncio.Lock()

        if index_path:
            self._try_load(index_path)

    def _new_index(self) -> faiss.IndexIDMap:
        return faiss.IndexIDMap(faiss.IndexFlatIP(self._dimensions))

    def _try_load(self, path: str) -> None:
        for corpus in Corpus:
            index_file = os.path.join(path, f"{corpus.value}.faiss")
            if os.path.exists(index_file):
                self._indexes[corpus] = faiss.read_index(index_file)
                logger.info(
                    "faiss_loaded",
                    corpus=corpus.value,
                    size=self._indexes[corpus].ntotal,
                    path=path,
                )

    def add(self, corpus: Corpus, passage_ids: list[int], embeddings: np.ndarray) -> None:
        if len(passage_ids) == 0:
            return
        index = self._indexes[corpus]
        ids = np.array(passage_ids, dtype=np.int64)
        index.remove_ids(ids)
        embeddings = np.ascontiguousarray(embeddings, dtype=np.float32)
        faiss.normalize_L2(embeddings)
        index.add_with_ids(embeddings, ids)
        logger.info("faiss_added", corpus=corpus.value, count=len(passage_ids), total=index.ntotal)

    async def add_safe(self, corpus: Corpus, passage_ids: list[int], embeddings: np.ndarray) -> None:
        async with self._write_lock:
            await asyncio.to_thread(self.add, corpus, passage_ids, embeddings)

    def search(self, corpus: Corpus, query_embedding: np.ndarray, top_k: int) -> list[tuple[int, float]]:
        """Return (passage_id, cosine distance) pairs, nearest first."""
        index = self._indexes[corpus]
        if index.ntotal == 0 or top_k <= 0:
            return []
        query = np.ascontiguousarray(query_embedding, dtype=np.float32).reshape(1, -1)
        faiss.normalize_L2(query)
        similarities, ids = index.search(query, min(top_k, index.ntotal))
        return [
            (int(pid), 1.0 - float(sim))
            for pid, sim in zip(ids[0], similarities[0])
            if pid != -1
        ]

    def save(self, path: str | None = None) -> None:
        path = path or self._index_path
        if not path:
            return
        Path(path).mkdir(parents=True, exist_ok=True)
        for corpus, index in self._indexes.items():
            faiss.write_index(index, os.path.join(path, f"{corpus.value}.faiss"))
        logger.info("faiss_saved", path=path, sizes=self.sizes)

    def size(self, corpus: Corpus) -> int:
        return self._indexes[corpus].ntotal

    @property
    def sizes(self) -> dict[str, int]:
        return {corpus.value: index.ntotal for corpus, index in self._indexes.items()}
