"""Shared test fixtures."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from lost_london.config.settings import Settings
from lost_london.exceptions import EmbeddingUnavailable, GraphServiceError
from lost_london.models.domain import Corpus, GraphEntity, GraphFact, Passage


class FakeEmbedder:
    """Fake embedder that tracks call counts."""

    def __init__(self, fail: bool = False) -> None:
        self.calls: list[str] = []
        self.fail = fail

    @property
    def dimensions(self) -> int:
        return 3

    @property
    def configured(self) -> bool:
        return not self.fail

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        if self.fail:
            raise EmbeddingUnavailable("embedding provider down")
        return [1.0, 0.0, 0.0]


class FakePassageStore:
    """In-memory passage store.

    ``distances`` maps corpus -> {passage_id: cosine distance} and is returned
    by vector_search regardless of the query vector.
    """

    def __init__(
        self,
        passages: list[Passage],
        distances: dict[Corpus, dict[int, float]] | None = None,
    ) -> None:
        self.passages = passages
        self.distances = distances or {}
        self.keyword_calls: list[tuple[Corpus, str]] = []
        self.vector_calls: list[Corpus] = []

    async def vector_search(self, vector, top_k, corpus):
        self.vector_calls.append(corpus)
        hits = sorted(self.distances.get(corpus, {}).items(), key=lambda kv: kv[1])
        return hits[:top_k]

    async def keyword_passages(self, corpus, contains):
        self.keyword_calls.append((corpus, contains))
        needle = contains.lower()
        return [
            p
            for p in self.passages
            if p.corpus is corpus
            and (needle in p.title.lower() or needle in p.content.lower())
        ]

    async def get_passages(self, corpus, ids):
        return {p.id: p for p in self.passages if p.corpus is corpus and p.id in ids}


class FakeGraphClient:
    def __init__(
        self,
        nodes: list[GraphEntity] | None = None,
        edges: list[GraphFact] | None = None,
        fail: bool = False,
        configured: bool = True,
    ) -> None:
        self.nodes = nodes or []
        self.edges = edges or []
        self.fail = fail
        self._configured = configured
        self.queries: list[tuple[str, str]] = []

    @property
    def configured(self) -> bool:
        return self._configured

    async def search_nodes(self, query, limit):
        self.queries.append(("nodes", query))
        if self.fail:
            raise GraphServiceError("graph down")
        return self.nodes[:limit]

    async def search_edges(self, query, limit):
        self.queries.append(("edges", query))
        if self.fail:
            raise GraphServiceError("graph down")
        return self.edges[:limit]


def make_article(pid: int, title: str, content: str, **metadata) -> Passage:
    return Passage(id=pid, corpus=Corpus.ARTICLE, title=title, content=content, metadata=metadata)


def make_chunk(pid: int, content: str, chunk_number: int | None = None) -> Passage:
    number = chunk_number if chunk_number is not None else pid
    return Passage(
        id=pid,
        corpus=Corpus.BOOK_CHUNK,
        title=f"Chapter {number}",
        content=content,
        metadata={"chunk_number": number},
    )


@pytest.fixture
def settings():
    """Test settings with temp paths."""
    tmp = tempfile.mkdtemp()
    return Settings(
        openai_api_key="test-key",
        zep_api_key="test-key",
        embedding_dimensions=3,
        sqlite_db_path=str(Path(tmp) / "test_passages.db"),
        faiss_index_path=str(Path(tmp) / "faiss_index"),
    )


@pytest.fixture
def sample_passages():
    return [
        make_article(
            1,
            "Vic Keegan's Lost London 12: Thorney Island",
            "Westminster Abbey stands on Thorney Island between two arms of the Tyburn.",
            slug="thorney-island",
            categories=["Westminster"],
        ),
        make_article(
            2,
            "The Devil's Acre",
            "A Victorian rookery near the Abbey that Dickens described.",
            slug="devils-acre",
        ),
        make_article(
            3,
            "Henry VIII and Whitehall",
            "Henry VIII seized York Place and rebuilt it as the Palace of Whitehall.",
        ),
        make_chunk(1, "Thorney Island was formed where the Tyburn divided."),
        make_chunk(2, "King Cnut had a palace on Thorney Island."),
    ]


@pytest.fixture
def embedder():
    return FakeEmbedder()


@pytest.fixture
def tmp_dir():
    """Create a temporary directory."""
    return tempfile.mkdtemp()
