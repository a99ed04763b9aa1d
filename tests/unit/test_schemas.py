"""Tests for Pydantic schemas."""

import pytest
from pydantic import ValidationError

from lost_london.models.schemas import (
    ConnectionItem,
    EnrichmentSummary,
    HealthResponse,
    SearchRequest,
    SearchResponse,
    SourceCounts,
)


def test_search_request_defaults():
    req = SearchRequest(query="thorney island")
    assert req.limit == 10
    assert req.corpora == "both"


def test_search_request_query_optional():
    assert SearchRequest().query is None


@pytest.mark.parametrize("limit", [0, -1, 51])
def test_search_request_limit_bounds(limit):
    with pytest.raises(ValidationError):
        SearchRequest(query="q", limit=limit)


def test_search_request_invalid_corpora():
    with pytest.raises(ValidationError):
        SearchRequest(query="q", corpora="secondary_only")


def test_connection_serializes_from_to():
    item = ConnectionItem(source="Cnut", relation="HAD_PALACE_ON", target="Thorney Island")
    assert item.model_dump(by_alias=True) == {
        "from": "Cnut",
        "relation": "HAD_PALACE_ON",
        "to": "Thorney Island",
    }
    assert item.model_dump()["source"] == "Cnut"


def test_search_response_serialization():
    resp = SearchResponse(
        query="Fauny Island",
        normalized_query="thorney island",
        count=0,
        source_counts=SourceCounts(),
        enrichment=EnrichmentSummary(),
        results=[],
    )
    data = resp.model_dump()
    assert data["normalized_query"] == "thorney island"
    assert data["source_counts"] == {"primary": 0, "secondary": 0}
    assert data["enrichment"] == {
        "entities": [],
        "facts": [],
        "connections": [],
        "suggested_topics": [],
    }


def test_health_response():
    resp = HealthResponse(
        status="ok",
        passage_counts={"article": 3, "book_chunk": 2},
        index_sizes={"article": 3, "book_chunk": 2},
        embedding_configured=True,
        graph_configured=False,
    )
    assert resp.passage_counts["article"] == 3
