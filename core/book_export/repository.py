# ═══════════════════════════════════════════════════════════════════
# FILE: core/book_export/repository.py
# PURPOSE: Book lookup for exports (protocol, in-memory and SQLite stores)
# ═══════════════════════════════════════════════════════════════════

from __future__ import annotations

import json
import logging
import os
import sqlite3
from datetime import datetime
from typing import Dict, List, Optional, Protocol, Union, runtime_checkable

from .records import BookRecord

logger = logging.getLogger(__name__)


@runtime_checkable
class BookRepository(Protocol):
    """
    Read side of the book store used by the export engine.

    get_book() returns None when the identifier does not resolve.
    """

    def get_book(self, book_id: str) -> Optional[BookRecord]: ...


def _to_record(data: Union[BookRecord, dict]) -> BookRecord:
    if isinstance(data, BookRecord):
        return data
    return BookRecord.model_validate(data)


class InMemoryBookRepository:
    """Dict-backed store, used by tests and by the CLI's --json mode."""

    def __init__(self, books: Optional[Dict[str, Union[BookRecord, dict]]] = None):
        self._books: Dict[str, BookRecord] = {}
        for book_id, data in (books or {}).items():
            self.save_book(book_id, data)

    def save_book(self, book_id: str, data: Union[BookRecord, dict]) -> None:
        self._books[book_id] = _to_record(data)

    def get_book(self, book_id: str) -> Optional[BookRecord]:
        record = self._books.get(book_id)
        if record is None:
            return None
        # Hand out a copy so callers can never mutate the stored book
        return record.model_copy(deep=True)

    def list_ids(self) -> List[str]:
        return sorted(self._books)


class SQLiteBookRepository:
    """SQLite-based book store. Each book is one JSON document."""

    def __init__(self, db_path: str = "data/books.db"):
        db_path = str(db_path)
        os.makedirs(os.path.dirname(db_path) or ".", exist_ok=True)
        self.db_path = db_path
        self._init_db()

    def _init_db(self):
        """Create tables if not exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute("""
                CREATE TABLE IF NOT EXISTS books (
                    id TEXT PRIMARY KEY,
                    data JSON NOT NULL,
                    title TEXT,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.commit()

    def save_book(self, book_id: str, data: Union[BookRecord, dict]) -> None:
        """Insert or update a book."""
        record = _to_record(data)
        payload = record.model_dump_json(by_alias=True)
        now = datetime.now().isoformat()

        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                INSERT INTO books (id, data, title, updated_at)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    data = excluded.data,
                    title = excluded.title,
                    updated_at = excluded.updated_at
            """, (book_id, payload, record.title, now))
            conn.commit()

        logger.debug(f"Saved book {book_id} ({record.title!r})")

    def get_book(self, book_id: str) -> Optional[BookRecord]:
        with sqlite3.connect(self.db_path) as conn:
            row = conn.execute(
                "SELECT data FROM books WHERE id = ?", (book_id,)
            ).fetchone()

        if row is None:
            return None
        return BookRecord.model_validate(json.loads(row[0]))

    def list_ids(self) -> List[str]:
        with sqlite3.connect(self.db_path) as conn:
            rows = conn.execute("SELECT id FROM books ORDER BY id").fetchall()
        return [row[0] for row in rows]
