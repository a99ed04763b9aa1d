"""Seed the local passage store with sample articles and book chunks for development."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lost_london.config.settings import Settings
from lost_london.embeddings.factory import create_embedder
from lost_london.models.domain import Corpus, Passage
from lost_london.storage.passage_store import LocalPassageStore
from lost_london.storage.sqlite_passage_store import SQLitePassageStore
from lost_london.vectorstore.faiss_store import FAISSVectorStore

SAMPLE_ARTICLES = [
    {
        "id": 1,
        "title": "Vic Keegan's Lost London 12: Thorney Island",
        "content": (
            "Westminster Abbey and the Palace of Westminster both stand on what was once "
            "Thorney Island, a patch of dry land between two channels of the River Tyburn. "
            "Edward the Confessor built his abbey here and the island gave the monks a "
            "defensible home at the edge of the Thames marshes."
        ),
        "metadata": {
            "author": "Vic Keegan",
            "slug": "thorney-island",
            "categories": ["Westminster", "Rivers"],
        },
    },
    {
        "id": 2,
        "title": "The Devil's Acre",
        "content": (
            "Within sight of the Abbey lay the Devil's Acre, a Victorian rookery so notorious "
            "that Dickens wrote about its lodging houses. Victoria Street was driven through "
            "the slum in the 1850s."
        ),
        "metadata": {"slug": "devils-acre", "categories": ["Victorian", "Westminster"]},
    },
    {
        "id": 3,
        "title": "Caxton's printing press",
        "content": (
            "William Caxton set up England's first printing press in the precincts of "
            "Westminster Abbey in 1476, printing Chaucer's Canterbury Tales."
        ),
        "metadata": {"slug": "caxton-printing-press", "categories": ["Tudor", "Westminster"]},
    },
]

SAMPLE_BOOK_CHUNKS = [
    {
        "id": 1,
        "chunk_number": 1,
        "content": (
            "Thorney Island was formed where the Tyburn divided before reaching the Thames. "
            "Its name comes from the thorn bushes that covered it."
        ),
    },
    {
        "id": 2,
        "chunk_number": 2,
        "content": (
            "King Cnut is said to have had a palace on Thorney Island, and later kings "
            "held court in Westminster Hall."
        ),
    },
]


def sample_passages() -> list[Passage]:
    passages = [
        Passage(
            id=a["id"],
            corpus=Corpus.ARTICLE,
            title=a["title"],
            content=a["content"],
            metadata=a["metadata"],
        )
        for a in SAMPLE_ARTICLES
    ]
    passages.extend(
        Passage(
            id=c["id"],
            corpus=Corpus.BOOK_CHUNK,
            title=f"Chapter {c['chunk_number']}",
            content=c["content"],
            metadata={"chunk_number": c["chunk_number"], "author": "Vic Keegan"},
        )
        for c in SAMPLE_BOOK_CHUNKS
    )
    return passages


async def main() -> None:
    settings = Settings()
    Path(settings.sqlite_db_path).parent.mkdir(parents=True, exist_ok=True)

    sqlite_store = SQLitePassageStore(settings.sqlite_db_path)
    await sqlite_store.initialize()
    vector_store = FAISSVectorStore(settings.embedding_dimensions, settings.faiss_index_path)
    store = LocalPassageStore(sqlite_store, vector_store)

    embedder = create_embedder(settings)
    passages = sample_passages()
    embeddings = [await embedder.embed(f"{p.title}\n\n{p.content}") for p in passages]

    await store.add_passages(passages, embeddings)
    vector_store.save()

    print(f"Seeded {len(passages)} passages: {await store.counts()}")


if __name__ == "__main__":
    asyncio.run(main())
