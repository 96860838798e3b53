"""
Shared test fixtures for the book export engine.
"""

import pytest

from config.settings import Settings
from core.book_export.repository import InMemoryBookRepository


# ============================================================
# Book documents (as stored, camelCase)
# ============================================================

def make_book(chapters, **overrides) -> dict:
    book = {
        "title": "The Lighthouse Keeper",
        "author": {"name": "Miriam Cohen"},
        "genre": "Literary Fiction",
        "description": "A keeper, a storm and a lamp that never goes out.",
        "chapters": chapters,
        "coverDesign": {
            "coverColor": "#1a1a2e",
            "textColor": "#ffffff",
            "fontFamily": "Helvetica",
        },
        "statistics": {"wordCount": 12500, "chapterCount": len(chapters)},
    }
    book.update(overrides)
    return book


@pytest.fixture
def three_chapter_book() -> dict:
    return make_book([
        {"title": "Alpha", "content": "<p>First light.</p><p>The tide turns.</p>", "wordCount": 4},
        {"title": "Beta", "content": "<p>Second night.</p>", "wordCount": 2},
        {"title": "Gamma", "content": "<p>Third &amp; last.</p>", "wordCount": 3},
    ])


@pytest.fixture
def single_chapter_book() -> dict:
    return make_book(
        [{"title": "Only Chapter", "content": "<p>Just one.</p>", "wordCount": 2}],
        description="",
    )


@pytest.fixture
def repository(three_chapter_book, single_chapter_book) -> InMemoryBookRepository:
    return InMemoryBookRepository({
        "book-3": three_chapter_book,
        "book-1": single_chapter_book,
    })


@pytest.fixture
def fonts_dir(tmp_path):
    path = tmp_path / "fonts"
    path.mkdir()
    return path


@pytest.fixture
def test_settings(fonts_dir) -> Settings:
    """Settings with an empty fonts directory, so the built-in family is used."""
    return Settings(fonts_dir=fonts_dir)
