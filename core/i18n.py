"""
Internationalization (i18n) for export labels.

Simple dict-based localization for the fixed strings printed into exported
books (Chapter, Table of Contents, About This Book, ...). Supports en, he, vi
and fr with English fallback.

Usage:
    from core.i18n import get_string, format_chapter_label
    label = get_string("table_of_contents", "he")  # "תוכן העניינים"
    heading = format_chapter_label(3, "en")  # "Chapter 3"
"""

from typing import Optional

# String tables keyed by (string_id, language_code)
STRINGS = {
    "chapter": {
        "en": "Chapter",
        "he": "פרק",
        "vi": "Chương",
        "fr": "Chapitre",
    },
    "table_of_contents": {
        "en": "Table of Contents",
        "he": "תוכן העניינים",
        "vi": "Mục lục",
        "fr": "Table des matières",
    },
    "by": {
        "en": "by",
        "he": "מאת",
        "vi": "của",
        "fr": "par",
    },
    "about_this_book": {
        "en": "About This Book",
        "he": "על הספר",
        "vi": "Về cuốn sách này",
        "fr": "À propos de ce livre",
    },
    "words": {
        "en": "words",
        "he": "מילים",
        "vi": "từ",
        "fr": "mots",
    },
    "chapters": {
        "en": "chapters",
        "he": "פרקים",
        "vi": "chương",
        "fr": "chapitres",
    },
}


def get_string(string_id: str, lang: str = "en") -> str:
    """
    Get a localized string by ID and language code.

    Falls back to English if the language is not found,
    then to the string_id itself if no translation exists.
    """
    table = STRINGS.get(string_id)
    if not table:
        return string_id
    return table.get(lang, table.get("en", string_id))


def format_chapter_label(number: Optional[int], lang: str = "en") -> str:
    """
    Format the numbered chapter label printed above a chapter title.

    Examples:
        format_chapter_label(3, "en") -> "Chapter 3"
        format_chapter_label(3, "he") -> "פרק 3"
        format_chapter_label(None, "en") -> "Chapter"
    """
    chapter_word = get_string("chapter", lang)
    if number is None:
        return chapter_word
    return f"{chapter_word} {number}"


def format_byline(author: str, lang: str = "en") -> str:
    """"by {author}" in the book's language."""
    return f"{get_string('by', lang)} {author}"


def format_statistics(word_count: int, chapter_count: int, lang: str = "en") -> str:
    """
    Format the aggregate statistics line.

    Examples:
        format_statistics(12500, 3) -> "12,500 words • 3 chapters"
    """
    words = get_string("words", lang)
    chapters = get_string("chapters", lang)
    return f"{word_count:,} {words} • {chapter_count} {chapters}"
