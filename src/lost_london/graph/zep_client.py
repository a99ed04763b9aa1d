"""Zep Cloud knowledge-graph search over its REST API."""

from __future__ import annotations

import httpx

from lost_london.config.constants import ENTITY_SUMMARY_MAX_CHARS, GENERIC_ENTITY_KIND
from lost_london.exceptions import GraphServiceError
from lost_london.models.domain import GraphEntity, GraphFact
from lost_london.observability.logger import get_logger

logger = get_logger("zep_client")

SEARCH_ENDPOINT = "/graph/search"


def parse_node(node: dict) -> GraphEntity | None:
    name = node.get("name")
    if not name:
        return None
    labels = node.get("labels") or []
    kind = next((label for label in labels if label != GENERIC_ENTITY_KIND), GENERIC_ENTITY_KIND)
    summary = node.get("summary")
    if summary:
        summary = summary[:ENTITY_SUMMARY_MAX_CHARS]
    return GraphEntity(name=name, kind=kind, summary=summary or None)


def parse_edge(edge: dict) -> GraphFact | None:
    """An edge is kept if it has fact text or a complete (source, relation, target)."""
    fact = GraphFact(
        text=edge.get("fact") or None,
        source_entity=edge.get("source_node_name") or None,
        relation=edge.get("relation") or edge.get("name") or None,
        target_entity=edge.get("target_node_name") or None,
    )
    if fact.text or (fact.source_entity and fact.relation and fact.target_entity):
        return fact
    return None


class ZepGraphClient:
    def __init__(
        self,
        api_key: str,
        graph_id: str = "lost-london",
        base_url: str = "https://api.getzep.com/api/v2",
        timeout: float = 8.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._graph_id = graph_id
        self._url = base_url.rstrip("/") + SEARCH_ENDPOINT
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    async def search_nodes(self, query: str, limit: int) -> list[GraphEntity]:
        payload = await self._search(query, limit, scope="nodes")
        nodes = payload.get("nodes") or []
        return [e for e in (parse_node(n) for n in nodes if isinstance(n, dict)) if e]

    async def search_edges(self, query: str, limit: int) -> list[GraphFact]:
        payload = await self._search(query, limit, scope="edges")
        edges = payload.get("edges") or []
        return [f for f in (parse_edge(e) for e in edges if isinstance(e, dict)) if f]

    async def _search(self, query: str, limit: int, scope: str) -> dict:
        if not self._api_key:
            raise GraphServiceError("ZEP_API_KEY not configured")

        try:
            response = await self._client.post(
                self._url,
                headers={"Authorization": f"Api-Key {self._api_key}"},
                json={
                    "graph_id": self._graph_id,
                    "query": query,
                    "limit": limit,
                    "scope": scope,
                    "reranker": "rrf",
                },
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise GraphServiceError(f"Zep {scope} search failed: {e}") from e
        except ValueError as e:
            raise GraphServiceError(f"Zep {scope} search returned invalid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise GraphServiceError(f"Zep {scope} search returned unexpected payload")
        logger.debug("graph_search", scope=scope, limit=limit)
        return payload

    async def aclose(self) -> None:
        await self._client.aclose()
