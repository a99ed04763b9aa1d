"""Pydantic models for API request/response serialization."""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, Field


class SearchRequest(BaseModel):
    query: str | None = None
    limit: int = Field(default=10, gt=0, le=50)
    corpora: Literal["primary_only", "both"] = "both"


class ConnectionItem(BaseModel):
    source: str = Field(
        serialization_alias="from", validation_alias=AliasChoices("source", "from")
    )
    relation: str
    target: str = Field(serialization_alias="to", validation_alias=AliasChoices("target", "to"))


class EntityItem(BaseModel):
    name: str
    kind: str = "Entity"
    summary: str | None = None


class EnrichmentSummary(BaseModel):
    entities: list[EntityItem] = Field(default_factory=list)
    facts: list[str] = Field(default_factory=list)
    connections: list[ConnectionItem] = Field(default_factory=list)
    suggested_topics: list[str] = Field(default_factory=list)


class SourceCounts(BaseModel):
    primary: int = 0
    secondary: int = 0


class ResultItem(BaseModel):
    id: int
    corpus: Literal["article", "book_chunk"]
    title: str
    content: str
    excerpt: str
    score: float
    vector_score: float
    keyword_score: float
    type_boost: float
    metadata: dict = Field(default_factory=dict)
    related_entities: list[str] = Field(default_factory=list)
    related_facts: list[str] = Field(default_factory=list)
    connections: list[ConnectionItem] = Field(default_factory=list)
    author: str | None = None
    slug: str | None = None
    categories: list[str] | None = None
    url: str | None = None
    chunk_number: int | None = None


class SearchResponse(BaseModel):
    query: str
    normalized_query: str
    count: int
    source_counts: SourceCounts
    enrichment: EnrichmentSummary
    results: list[ResultItem]


class HealthResponse(BaseModel):
    status: str
    passage_counts: dict[str, int]
    index_sizes: dict[str, int]
    embedding_configured: bool
    graph_configured: bool
