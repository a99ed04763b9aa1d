"""Shape enriched passages into the external search response."""

from __future__ import annotations

from lost_london.config.constants import GENERIC_ENTITY_KIND, MAX_SUGGESTED_TOPICS
from lost_london.config.settings import Settings
from lost_london.models.domain import (
    PRIMARY_CORPUS,
    SECONDARY_CORPUS,
    Connection,
    EnrichedPassage,
    GraphEnrichment,
    Passage,
)
from lost_london.models.schemas import (
    ConnectionItem,
    EnrichmentSummary,
    EntityItem,
    ResultItem,
    SearchResponse,
    SourceCounts,
)


def truncate(text: str, window: int, marker: str = "...") -> str:
    """First ``window`` characters, with ``marker`` only if something was cut."""
    if len(text) <= window:
        return text
    return text[:window] + marker


def suggested_topics(enrichment: GraphEnrichment) -> list[str]:
    """Names of the first few entities with a specific (non-generic) kind."""
    return [
        e.name for e in enrichment.entities if e.kind != GENERIC_ENTITY_KIND
    ][:MAX_SUGGESTED_TOPICS]


def _connection_item(connection: Connection) -> ConnectionItem:
    return ConnectionItem(
        source=connection.source,
        relation=connection.relation,
        target=connection.target,
    )


class PassageMetadata:
    """Typed accessors over a passage's open metadata mapping."""

    def __init__(self, passage: Passage, default_author: str) -> None:
        self._meta = passage.metadata or {}
        self._default_author = default_author

    @property
    def author(self) -> str:
        author = self._meta.get("author")
        return author if isinstance(author, str) and author else self._default_author

    @property
    def slug(self) -> str | None:
        slug = self._meta.get("slug")
        return slug if isinstance(slug, str) and slug else None

    @property
    def categories(self) -> list[str] | None:
        categories = self._meta.get("categories")
        if isinstance(categories, str):
            return [categories]
        if isinstance(categories, list):
            return [str(c) for c in categories]
        return None

    @property
    def url(self) -> str | None:
        return f"/article/{self.slug}" if self.slug else None

    @property
    def chunk_number(self) -> int | None:
        value = self._meta.get("chunk_number")
        try:
            return int(value) if value is not None else None
        except (TypeError, ValueError):
            return None


class ResultAssembler:
    def __init__(
        self,
        content_window: int = 1500,
        excerpt_window: int = 400,
        ellipsis: str = "...",
        default_author: str = "Vic Keegan",
    ) -> None:
        self._content_window = content_window
        self._excerpt_window = excerpt_window
        self._ellipsis = ellipsis
        self._default_author = default_author

    @classmethod
    def from_settings(cls, settings: Settings) -> ResultAssembler:
        return cls(
            content_window=settings.content_window,
            excerpt_window=settings.excerpt_window,
            ellipsis=settings.ellipsis,
            default_author=settings.default_author,
        )

    def assemble(
        self,
        query: str,
        normalized_query: str,
        enriched: list[EnrichedPassage],
        enrichment: GraphEnrichment,
    ) -> SearchResponse:
        results = [self._result_item(e) for e in enriched]
        source_counts = SourceCounts(
            primary=sum(1 for e in enriched if e.passage.corpus is PRIMARY_CORPUS),
            secondary=sum(1 for e in enriched if e.passage.corpus is SECONDARY_CORPUS),
        )
        return SearchResponse(
            query=query,
            normalized_query=normalized_query,
            count=len(results),
            source_counts=source_counts,
            enrichment=self.summary(enrichment),
            results=results,
        )

    @staticmethod
    def summary(enrichment: GraphEnrichment) -> EnrichmentSummary:
        return EnrichmentSummary(
            entities=[
                EntityItem(name=e.name, kind=e.kind, summary=e.summary)
                for e in enrichment.entities
            ],
            facts=list(enrichment.facts),
            connections=[_connection_item(c) for c in enrichment.connections],
            suggested_topics=suggested_topics(enrichment),
        )

    def _result_item(self, enriched: EnrichedPassage) -> ResultItem:
        scored = enriched.scored
        passage = scored.passage
        meta = PassageMetadata(passage, self._default_author)
        return ResultItem(
            id=passage.id,
            corpus=passage.corpus.value,
            title=passage.title,
            content=truncate(passage.content, self._content_window, self._ellipsis),
            excerpt=truncate(passage.content, self._excerpt_window, self._ellipsis),
            score=round(scored.final_score, 2),
            vector_score=round(scored.vector_score, 2),
            keyword_score=scored.keyword_score,
            type_boost=scored.type_boost,
            metadata=dict(passage.metadata),
            related_entities=list(enriched.related_entities),
            related_facts=list(enriched.related_facts),
            connections=[_connection_item(c) for c in enriched.connections],
            author=meta.author,
            slug=meta.slug,
            categories=meta.categories,
            url=meta.url,
            chunk_number=meta.chunk_number,
        )
