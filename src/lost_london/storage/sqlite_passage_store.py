"""SQLite-backed passage tables for the article and book-chunk corpora."""

from __future__ import annotations

import json

import aiosqlite

from lost_london.exceptions import PassageStoreError
from lost_london.models.domain import Corpus, Passage
from lost_london.storage.migrations import initialize_passage_db

# Book chunks carry no stored title; it is synthesized from the chunk number.
_SELECT = {
    Corpus.ARTICLE: "SELECT id, title, content, metadata FROM articles",
    Corpus.BOOK_CHUNK: (
        "SELECT id, 'Chapter ' || chunk_number AS title, content, metadata, chunk_number "
        "FROM book_chunks"
    ),
}

_TITLE_EXPR = {
    Corpus.ARTICLE: "title",
    Corpus.BOOK_CHUNK: "('Chapter ' || chunk_number)",
}


def _py_lower(value):
    # Unicode-aware; SQLite LOWER() folds ASCII only.
    return value.lower() if isinstance(value, str) else value


class SQLitePassageStore:
    def __init__(self, db_path: str) -> None:
        self._db_path = db_path

    async def initialize(self) -> None:
        await initialize_passage_db(self._db_path)

    async def save_passages(self, passages: list[Passage]) -> None:
        articles = [p for p in passages if p.corpus is Corpus.ARTICLE]
        chunks = [p for p in passages if p.corpus is Corpus.BOOK_CHUNK]
        try:
            async with aiosqlite.connect(self._db_path) as db:
                await db.executemany(
                    "INSERT OR REPLACE INTO articles (id, title, content, metadata) "
                    "VALUES (?, ?, ?, ?)",
                    [(p.id, p.title, p.content, json.dumps(p.metadata)) for p in articles],
                )
                await db.executemany(
                    "INSERT OR REPLACE INTO book_chunks (id, chunk_number, content, metadata) "
                    "VALUES (?, ?, ?, ?)",
                    [
                        (
                            p.id,
                            int(p.metadata.get("chunk_number", p.id)),
                            p.content,
                            json.dumps(p.metadata),
                        )
                        for p in chunks
                    ],
                )
                await db.commit()
        except aiosqlite.Error as e:
            raise PassageStoreError(f"Failed to save passages: {e}") from e

    async def keyword_passages(self, corpus: Corpus, contains: str) -> list[Passage]:
        needle = contains.lower()
        title = _TITLE_EXPR[corpus]
        sql = (
            f"{_SELECT[corpus]} "
            f"WHERE instr(py_lower({title}), ?) > 0 OR instr(py_lower(content), ?) > 0 "
            "ORDER BY id"
        )
        return await self._fetch(corpus, sql, (needle, needle))

    async def get_passages(self, corpus: Corpus, ids: list[int]) -> dict[int, Passage]:
        if not ids:
            return {}
        placeholders = ",".join("?" for _ in ids)
        sql = f"{_SELECT[corpus]} WHERE id IN ({placeholders})"
        passages = await self._fetch(corpus, sql, tuple(ids))
        return {p.id: p for p in passages}

    async def get_all(self, corpus: Corpus) -> list[Passage]:
        return await self._fetch(corpus, f"{_SELECT[corpus]} ORDER BY id", ())

    async def count(self, corpus: Corpus) -> int:
        table = "articles" if corpus is Corpus.ARTICLE else "book_chunks"
        try:
            async with aiosqlite.connect(self._db_path) as db:
                async with db.execute(f"SELECT COUNT(*) FROM {table}") as cursor:
                    row = await cursor.fetchone()
                    return row[0] if row else 0
        except aiosqlite.Error as e:
            raise PassageStoreError(f"Failed to count {corpus.value} passages: {e}") from e

    async def _fetch(self, corpus: Corpus, sql: str, params: tuple) -> list[Passage]:
        try:
            async with aiosqlite.connect(self._db_path) as db:
                db.row_factory = aiosqlite.Row
                await db.create_function("py_lower", 1, _py_lower, deterministic=True)
                async with db.execute(sql, params) as cursor:
                    rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise PassageStoreError(f"Failed to query {corpus.value} passages: {e}") from e
        return [self._row_to_passage(corpus, row) for row in rows]

    @staticmethod
    def _row_to_passage(corpus: Corpus, row: aiosqlite.Row) -> Passage:
        metadata = json.loads(row["metadata"]) if row["metadata"] else {}
        if corpus is Corpus.BOOK_CHUNK:
            metadata.setdefault("chunk_number", row["chunk_number"])
        return Passage(
            id=row["id"],
            corpus=corpus,
            title=row["title"],
            content=row["content"],
            metadata=metadata,
        )
