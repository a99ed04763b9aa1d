"""Knowledge-graph enrichment: fetch entities/facts, attach the relevant ones per passage.

Graph results only annotate passages; they never change ranking and a graph
failure never fails the search.
"""

from __future__ import annotations

import asyncio

from lost_london.config.constants import GENERIC_ENTITY_KIND, MAX_FACTS_PER_PASSAGE
from lost_london.models.domain import (
    Connection,
    Corpus,
    EnrichedPassage,
    GraphEnrichment,
    GraphEntity,
    GraphFact,
    Passage,
    ScoredPassage,
)
from lost_london.observability.logger import get_logger
from lost_london.protocols.graph import GraphClient

logger = get_logger("graph_matcher")


def build_enrichment(nodes: list[GraphEntity], edges: list[GraphFact]) -> GraphEnrichment:
    """Deduplicate entities and facts and derive connections from edges."""
    entities: dict[str, GraphEntity] = {}
    for node in nodes:
        entities.setdefault(node.name, node)

    facts: list[str] = []
    connections: list[Connection] = []
    for edge in edges:
        if edge.text and edge.text not in facts:
            facts.append(edge.text)
        if edge.source_entity and edge.target_entity and edge.relation:
            connections.append(
                Connection(
                    source=edge.source_entity,
                    relation=edge.relation,
                    target=edge.target_entity,
                )
            )
            for endpoint in (edge.source_entity, edge.target_entity):
                entities.setdefault(endpoint, GraphEntity(name=endpoint, kind=GENERIC_ENTITY_KIND))

    return GraphEnrichment(
        entities=list(entities.values()),
        facts=facts,
        connections=connections,
    )


def attach_to_passage(scored: ScoredPassage, enrichment: GraphEnrichment) -> EnrichedPassage:
    title = scored.passage.title.lower()
    content = scored.passage.content.lower()

    def mentioned(name: str) -> bool:
        needle = name.lower()
        return needle in title or needle in content

    related_entities = [e.name for e in enrichment.entities if mentioned(e.name)]
    lowered = [name.lower() for name in related_entities]
    related_facts = [
        fact
        for fact in enrichment.facts
        if any(name in fact.lower() for name in lowered)
    ][:MAX_FACTS_PER_PASSAGE]
    connections = [
        c for c in enrichment.connections if mentioned(c.source) or mentioned(c.target)
    ]

    return EnrichedPassage(
        scored=scored,
        related_entities=related_entities,
        related_facts=related_facts,
        connections=connections,
    )


class GraphEnrichmentMatcher:
    def __init__(
        self,
        client: GraphClient,
        node_limit: int = 5,
        edge_limit: int = 10,
    ) -> None:
        self._client = client
        self._node_limit = node_limit
        self._edge_limit = edge_limit

    async def fetch(self, raw_query: str) -> GraphEnrichment:
        """Search nodes and edges concurrently with the raw query.

        Any failure degrades to an empty enrichment.
        """
        if not self._client.configured:
            logger.warning("graph_not_configured")
            return GraphEnrichment.empty()

        try:
            nodes, edges = await asyncio.gather(
                self._client.search_nodes(raw_query, self._node_limit),
                self._client.search_edges(raw_query, self._edge_limit),
            )
        except Exception as e:
            logger.warning("graph_enrichment_failed", error=str(e), error_type=type(e).__name__)
            return GraphEnrichment.empty()

        enrichment = build_enrichment(nodes, edges)
        logger.info(
            "graph_enrichment",
            entities=len(enrichment.entities),
            facts=len(enrichment.facts),
            connections=len(enrichment.connections),
        )
        return enrichment

    def attach(
        self, scored: list[ScoredPassage], enrichment: GraphEnrichment
    ) -> list[EnrichedPassage]:
        return [attach_to_passage(s, enrichment) for s in scored]

    async def enrich(
        self, passages: list[Passage], raw_query: str
    ) -> tuple[dict[tuple[Corpus, int], EnrichedPassage], GraphEnrichment]:
        enrichment = await self.fetch(raw_query)
        enriched = self.attach([ScoredPassage(passage=p) for p in passages], enrichment)
        return {e.passage.key: e for e in enriched}, enrichment
