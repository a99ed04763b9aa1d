"""Protocol for knowledge-graph search providers."""

from __future__ import annotations

from typing import Protocol

from lost_london.models.domain import GraphEntity, GraphFact


class GraphClient(Protocol):
    async def search_nodes(self, query: str, limit: int) -> list[GraphEntity]: ...

    async def search_edges(self, query: str, limit: int) -> list[GraphFact]: ...

    @property
    def configured(self) -> bool: ...
