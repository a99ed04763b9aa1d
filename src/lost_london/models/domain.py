"""Core domain objects used throughout the system."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Corpus(str, Enum):
    ARTICLE = "article"  # primary corpus
    BOOK_CHUNK = "book_chunk"  # secondary corpus (Thorney Island chapters)


PRIMARY_CORPUS = Corpus.ARTICLE
SECONDARY_CORPUS = Corpus.BOOK_CHUNK


@dataclass(frozen=True)
class Passage:
    id: int
    corpus: Corpus
    title: str
    content: str
    metadata: dict = field(default_factory=dict, compare=False, hash=False)

    @property
    def key(self) -> tuple[Corpus, int]:
        """Identity across corpora; ids are only unique within one corpus."""
        return (self.corpus, self.id)


@dataclass
class ScoredPassage:
    passage: Passage
    vector_score: float = 0.0
    keyword_score: float = 0.0
    type_boost: float = 0.0
    final_score: float = 0.0

    @property
    def sort_key(self) -> tuple[float, int]:
        return (-self.final_score, self.passage.id)


@dataclass(frozen=True)
class GraphEntity:
    name: str
    kind: str = "Entity"
    summary: str | None = None


@dataclass(frozen=True)
class GraphFact:
    text: str | None = None
    source_entity: str | None = None
    relation: str | None = None
    target_entity: str | None = None


@dataclass(frozen=True)
class Connection:
    source: str
    relation: str
    target: str


@dataclass
class GraphEnrichment:
    entities: list[GraphEntity] = field(default_factory=list)
    facts: list[str] = field(default_factory=list)
    connections: list[Connection] = field(default_factory=list)

    @classmethod
    def empty(cls) -> GraphEnrichment:
        return cls()

    @property
    def is_empty(self) -> bool:
        return not (self.entities or self.facts or self.connections)


@dataclass
class EnrichedPassage:
    scored: ScoredPassage
    related_entities: list[str] = field(default_factory=list)
    related_facts: list[str] = field(default_factory=list)
    connections: list[Connection] = field(default_factory=list)

    @property
    def passage(self) -> Passage:
        return self.scored.passage
