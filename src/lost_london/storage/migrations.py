"""Idempotent database schema creation."""

from __future__ import annotations

import aiosqlite

ARTICLES_TABLE = """
CREATE TABLE IF NOT EXISTS articles (
    id INTEGER PRIMARY KEY,
    title TEXT NOT NULL,
    content TEXT NOT NULL,
    metadata TEXT NOT NULL DEFAULT '{}'
)
"""

BOOK_CHUNKS_TABLE = """
CREATE TABLE IF NOT EXISTS book_chunks (
    id INTEGER PRIMARY KEY,
    chunk_number INTEGER NOT NULL,
    content TEXT NOT NULL,
    metadata TEXT NOT NULL DEFAULT '{}'
)
"""

BOOK_CHUNKS_NUMBER_INDEX = """
CREATE INDEX IF NOT EXISTS idx_book_chunks_number ON book_chunks(chunk_number)
"""


async def initialize_passage_db(db_path: str) -> None:
    async with aiosqlite.connect(db_path) as db:
        await db.execute(ARTICLES_TABLE)
        await db.execute(BOOK_CHUNKS_TABLE)
        await db.execute(BOOK_CHUNKS_NUMBER_INDEX)
        await db.commit()
