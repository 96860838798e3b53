"""Tests for the book stores (in-memory and SQLite)."""

import pytest

from core.book_export.records import BookRecord
from core.book_export.repository import (
    BookRepository, InMemoryBookRepository, SQLiteBookRepository,
)


@pytest.fixture
def sqlite_repo(tmp_path):
    return SQLiteBookRepository(db_path=str(tmp_path / "data" / "books.db"))


class TestInMemoryBookRepository:

    def test_get_book(self, repository):
        record = repository.get_book("book-3")
        assert isinstance(record, BookRecord)
        assert record.title == "The Lighthouse Keeper"
        assert record.cover_design.cover_color == "#1a1a2e"

    def test_missing_book_is_none(self, repository):
        assert repository.get_book("nope") is None

    def test_returned_record_is_a_copy(self, repository):
        record = repository.get_book("book-3")
        record.chapters.clear()
        assert len(repository.get_book("book-3").chapters) == 3

    def test_list_ids(self, repository):
        assert repository.list_ids() == ["book-1", "book-3"]

    def test_satisfies_protocol(self, repository):
        assert isinstance(repository, BookRepository)


class TestSQLiteBookRepository:

    def test_creates_parent_directory(self, tmp_path):
        SQLiteBookRepository(db_path=str(tmp_path / "nested" / "dir" / "books.db"))
        assert (tmp_path / "nested" / "dir" / "books.db").exists()

    def test_save_and_get(self, sqlite_repo, three_chapter_book):
        sqlite_repo.save_book("b1", three_chapter_book)
        record = sqlite_repo.get_book("b1")

        assert record.title == "The Lighthouse Keeper"
        assert record.author.name == "Miriam Cohen"
        assert [c.title for c in record.chapters] == ["Alpha", "Beta", "Gamma"]
        assert record.statistics.word_count == 12500

    def test_missing_book_is_none(self, sqlite_repo):
        assert sqlite_repo.get_book("missing") is None

    def test_upsert(self, sqlite_repo, three_chapter_book):
        sqlite_repo.save_book("b1", three_chapter_book)
        sqlite_repo.save_book("b1", {**three_chapter_book, "title": "Renamed"})

        assert sqlite_repo.get_book("b1").title == "Renamed"
        assert sqlite_repo.list_ids() == ["b1"]

    def test_save_record_instance(self, sqlite_repo):
        sqlite_repo.save_book("b2", BookRecord(title="From model"))
        assert sqlite_repo.get_book("b2").title == "From model"

    def test_persists_across_instances(self, tmp_path, three_chapter_book):
        path = str(tmp_path / "books.db")
        SQLiteBookRepository(db_path=path).save_book("b1", three_chapter_book)
        assert SQLiteBookRepository(db_path=path).get_book("b1") is not None

    def test_satisfies_protocol(self, sqlite_repo):
        assert isinstance(sqlite_repo, BookRepository)
