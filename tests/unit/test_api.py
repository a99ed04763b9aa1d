"""Tests for the HTTP surface with the pipeline wired to fakes."""

from __future__ import annotations

import asyncio

import pytest
from fastapi.testclient import TestClient

from conftest import FakeEmbedder, FakeGraphClient, FakePassageStore
from lost_london.api.app import build_pipeline, create_app
from lost_london.exceptions import PassageStoreError
from lost_london.models.domain import Corpus, GraphFact

EDGES = [
    GraphFact(
        text="Cnut had a palace on Thorney Island",
        source_entity="Cnut",
        relation="HAD_PALACE_ON",
        target_entity="Thorney Island",
    )
]


class StubHealthStore(FakePassageStore):
    async def counts(self):
        return {"article": 3, "book_chunk": 2}

    @property
    def index_sizes(self):
        return {"article": 3, "book_chunk": 2}


def _client(settings, passages, embedder=None, graph=None, pipeline=None) -> TestClient:
    store = StubHealthStore(passages, {Corpus.ARTICLE: {1: 0.2, 2: 0.5}})
    embedder = embedder or FakeEmbedder()
    graph = graph or FakeGraphClient([], EDGES)

    app = create_app()
    app.state.search_pipeline = pipeline or build_pipeline(settings, store, embedder, graph)
    app.state.passage_store = store
    app.state.embedder = embedder
    app.state.graph_client = graph
    app.state.settings = settings
    return TestClient(app)


@pytest.fixture
def client(settings, sample_passages):
    return _client(settings, sample_passages)


def test_post_search(client):
    response = client.post("/search", json={"query": "Fauny Island", "limit": 4})

    assert response.status_code == 200
    body = response.json()
    assert body["normalized_query"] == "thorney island"
    assert body["count"] == 4
    assert body["source_counts"] == {"primary": 2, "secondary": 2}
    assert [(r["corpus"], r["id"]) for r in body["results"]] == [
        ("article", 1),
        ("article", 2),
        ("book_chunk", 1),
        ("book_chunk", 2),
    ]
    assert body["enrichment"]["connections"] == [
        {"from": "Cnut", "relation": "HAD_PALACE_ON", "to": "Thorney Island"}
    ]
    assert "X-Request-ID" in response.headers


def test_get_search_accepts_q_and_query(client):
    by_q = client.get("/search", params={"q": "thorney island", "limit": 2})
    by_query = client.get("/search", params={"query": "thorney island", "limit": 2})

    assert by_q.status_code == 200
    assert by_q.json()["results"] == by_query.json()["results"]
    assert by_q.json()["count"] == 2


def test_primary_only(client):
    response = client.post("/search", json={"query": "thorney island", "corpora": "primary_only"})
    assert response.status_code == 200
    assert response.json()["source_counts"]["secondary"] == 0


@pytest.mark.parametrize("payload", [{}, {"query": ""}, {"query": "   "}])
def test_missing_query_is_400(client, payload):
    assert client.post("/search", json=payload).status_code == 400


def test_get_without_query_is_400(client):
    assert client.get("/search").status_code == 400


def test_invalid_limit_is_422(client):
    assert client.post("/search", json={"query": "abbey", "limit": 0}).status_code == 422


def test_embedding_unavailable_is_503(settings, sample_passages):
    client = _client(settings, sample_passages, embedder=FakeEmbedder(fail=True))
    response = client.post("/search", json={"query": "thorney island"})
    assert response.status_code == 503


def test_graph_failure_still_200(settings, sample_passages):
    client = _client(settings, sample_passages, graph=FakeGraphClient(fail=True))
    response = client.post("/search", json={"query": "thorney island"})
    assert response.status_code == 200
    assert response.json()["enrichment"]["entities"] == []


def test_store_failure_is_500(settings, sample_passages):
    class BrokenPipeline:
        async def execute(self, request):
            raise PassageStoreError("database is locked")

    client = _client(settings, sample_passages, pipeline=BrokenPipeline())
    assert client.post("/search", json={"query": "abbey"}).status_code == 500


def test_timeout_is_504(settings, sample_passages):
    class SlowPipeline:
        async def execute(self, request):
            await asyncio.sleep(1)

    settings.search_timeout_seconds = 0.01
    client = _client(settings, sample_passages, pipeline=SlowPipeline())
    assert client.post("/search", json={"query": "abbey"}).status_code == 504


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["passage_counts"] == {"article": 3, "book_chunk": 2}
    assert body["embedding_configured"] is True
    assert body["graph_configured"] is True

