"""Tests for knowledge-graph enrichment matching."""

from __future__ import annotations

import pytest

from conftest import FakeGraphClient, make_article
from lost_london.enrichment.graph_matcher import GraphEnrichmentMatcher, build_enrichment
from lost_london.models.domain import Connection, Corpus, GraphEntity, GraphFact, ScoredPassage

NODES = [
    GraphEntity(name="Thorney Island", kind="Place"),
    GraphEntity(name="Edward the Confessor", kind="Person"),
    GraphEntity(name="Thorney Island", kind="Entity"),
]

EDGES = [
    GraphFact(
        text="Edward the Confessor built Westminster Abbey on Thorney Island",
        source_entity="Edward the Confessor",
        relation="BUILT",
        target_entity="Westminster Abbey",
    ),
    GraphFact(text="The Tyburn flowed around Thorney Island"),
    GraphFact(text="The Tyburn flowed around Thorney Island"),
]


@pytest.fixture
def abbey():
    return make_article(
        1,
        "Vic Keegan's Lost London 12: Thorney Island",
        "Westminster Abbey stands on Thorney Island between two arms of the Tyburn.",
    )


@pytest.fixture
def rookery():
    return make_article(2, "The Devil's Acre", "A Victorian rookery that Dickens described.")


def test_build_enrichment_dedupes_and_folds_endpoints():
    enrichment = build_enrichment(NODES, EDGES)

    assert [e.name for e in enrichment.entities] == [
        "Thorney Island",
        "Edward the Confessor",
        "Westminster Abbey",
    ]
    assert enrichment.entities[0].kind == "Place"
    assert enrichment.entities[2].kind == "Entity"
    assert enrichment.facts == [
        "Edward the Confessor built Westminster Abbey on Thorney Island",
        "The Tyburn flowed around Thorney Island",
    ]
    assert enrichment.connections == [
        Connection(source="Edward the Confessor", relation="BUILT", target="Westminster Abbey")
    ]


def test_edges_without_relation_make_no_connection():
    enrichment = build_enrichment([], [GraphFact(text="x", source_entity="A", target_entity="B")])
    assert enrichment.connections == []
    assert enrichment.entities == []


async def test_attach_relevant_entities_facts_connections(abbey, rookery):
    matcher = GraphEnrichmentMatcher(FakeGraphClient(NODES, EDGES))
    enrichment = await matcher.fetch("thorney island")

    enriched = matcher.attach([ScoredPassage(abbey), ScoredPassage(rookery)], enrichment)

    first, second = enriched
    assert first.related_entities == ["Thorney Island", "Westminster Abbey"]
    assert first.related_facts == [
        "Edward the Confessor built Westminster Abbey on Thorney Island",
        "The Tyburn flowed around Thorney Island",
    ]
    assert first.connections == enrichment.connections
    assert second.related_entities == []
    assert second.related_facts == []
    assert second.connections == []


async def test_related_facts_capped_at_three(abbey):
    edges = [GraphFact(text=f"Thorney Island fact {i}") for i in range(5)]
    matcher = GraphEnrichmentMatcher(FakeGraphClient([GraphEntity("Thorney Island")], edges))
    enrichment = await matcher.fetch("thorney")

    [enriched] = matcher.attach([ScoredPassage(abbey)], enrichment)

    assert enriched.related_facts == [f"Thorney Island fact {i}" for i in range(3)]


async def test_fetch_uses_raw_query():
    client = FakeGraphClient(NODES, EDGES)
    await GraphEnrichmentMatcher(client).fetch("Fauny Island")
    assert sorted(client.queries) == [("edges", "Fauny Island"), ("nodes", "Fauny Island")]


async def test_fetch_respects_limits():
    nodes = [GraphEntity(name=f"Entity {i}") for i in range(10)]
    matcher = GraphEnrichmentMatcher(FakeGraphClient(nodes, []), node_limit=5, edge_limit=10)
    enrichment = await matcher.fetch("q")
    assert len(enrichment.entities) == 5


async def test_graph_failure_degrades_to_empty():
    matcher = GraphEnrichmentMatcher(FakeGraphClient(NODES, EDGES, fail=True))
    enrichment = await matcher.fetch("thorney island")
    assert enrichment.is_empty


async def test_unconfigured_graph_is_skipped():
    client = FakeGraphClient(NODES, EDGES, configured=False)
    enrichment = await GraphEnrichmentMatcher(client).fetch("thorney island")
    assert enrichment.is_empty
    assert client.queries == []


async def test_enrich_keys_by_corpus_and_id(abbey, rookery):
    matcher = GraphEnrichmentMatcher(FakeGraphClient(NODES, EDGES))

    by_key, enrichment = await matcher.enrich([abbey, rookery], "thorney island")

    assert set(by_key) == {(Corpus.ARTICLE, 1), (Corpus.ARTICLE, 2)}
    assert by_key[(Corpus.ARTICLE, 1)].related_entities == ["Thorney Island", "Westminster Abbey"]
    assert len(enrichment.facts) == 2
