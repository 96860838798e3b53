"""
Book Normalizer - Convert a stored BookRecord into a BookExportModel,
and a BookExportModel into the content blocks both renderers consume.

Record -> model:
    - missing author / genre / description / chapter fields get defaults
    - chapter markup is sanitized to plain text
    - cover colours that are missing or not 6-digit hex are defaulted
    - statistics are copied, never recomputed

Model -> blocks (BlockBuilder):
    cover_block()     COVER block with the lines printed on a cover
    title_blocks()    book title, byline, genre
    toc_blocks()      heading + one entry per chapter, in reading order
    chapter_blocks()  "Chapter N" label, chapter title, one TEXT per paragraph
    back_matter_blocks()
"""

import re
import logging
from typing import List, Optional

from .colors import is_hex_color
from .models import (
    BookExportModel, ChapterExport, CoverDesign, BookStatistics,
    ContentBlock, BlockType, CoverSide,
    DEFAULT_COVER_COLOR, DEFAULT_TEXT_COLOR, DEFAULT_FONT_FAMILY,
)
from .records import BookRecord, ChapterRecord, CoverDesignRecord, StatisticsRecord
from .sanitizer import sanitize
from core.i18n import (
    get_string, format_chapter_label, format_byline, format_statistics,
)

logger = logging.getLogger(__name__)

# Paragraphs are separated by runs of two or more newlines
_PARAGRAPH_BREAK = re.compile(r"\n\n+")


def split_paragraphs(content: str) -> List[str]:
    """Split sanitized text on blank lines, dropping empty segments."""
    if not content:
        return []
    return [part.strip() for part in _PARAGRAPH_BREAK.split(content) if part.strip()]


class BookNormalizer:
    """
    Converts a stored BookRecord to a BookExportModel.

    Usage:
        normalizer = BookNormalizer()
        model = normalizer.from_record(record)
    """

    DEFAULT_AUTHOR = "Unknown Author"
    DEFAULT_GENRE = "Fiction"
    DEFAULT_CHAPTER_TITLE = "Untitled Chapter"
    DEFAULT_LANGUAGE = "en"

    def from_record(self, record: BookRecord) -> BookExportModel:
        """
        Build a fresh export model. The record itself is never modified.
        """
        author_name = (record.author.name if record.author else None) or self.DEFAULT_AUTHOR

        return BookExportModel(
            title=record.title or "",
            author_name=author_name,
            genre=record.genre or self.DEFAULT_GENRE,
            description=record.description or "",
            chapters=[self._normalize_chapter(ch) for ch in record.chapters],
            cover_design=self._normalize_cover(record.cover_design),
            statistics=self._normalize_statistics(record.statistics),
            language=self._normalize_language(record.language),
        )

    def _normalize_chapter(self, chapter: ChapterRecord) -> ChapterExport:
        return ChapterExport(
            title=chapter.title or self.DEFAULT_CHAPTER_TITLE,
            content=sanitize(chapter.content or ""),
            word_count=chapter.word_count or 0,
        )

    def _normalize_cover(self, cover: Optional[CoverDesignRecord]) -> CoverDesign:
        if cover is None:
            return CoverDesign()

        return CoverDesign(
            cover_color=self._valid_color(cover.cover_color, DEFAULT_COVER_COLOR, "coverColor"),
            text_color=self._valid_color(cover.text_color, DEFAULT_TEXT_COLOR, "textColor"),
            font_family=cover.font_family or DEFAULT_FONT_FAMILY,
            image_url=cover.image_url or None,
        )

    def _valid_color(self, value: Optional[str], default: str, field_name: str) -> str:
        if not value:
            return default
        if not is_hex_color(value):
            logger.warning(f"Invalid {field_name} {value!r}, using {default}")
            return default
        return value if value.startswith("#") else f"#{value}"

    def _normalize_statistics(self, stats: Optional[StatisticsRecord]) -> BookStatistics:
        if stats is None:
            return BookStatistics()
        return BookStatistics(
            word_count=stats.word_count or 0,
            chapter_count=stats.chapter_count or 0,
        )

    def _normalize_language(self, language: Optional[str]) -> str:
        if not language:
            return self.DEFAULT_LANGUAGE
        return language.strip().lower().replace("_", "-").split("-")[0] or self.DEFAULT_LANGUAGE


class BlockBuilder:
    """
    Turns a BookExportModel into content blocks.

    Every block carries a 'role' style hint naming what it is
    (book_title, byline, genre, toc_heading, toc_entry, chapter_label,
    chapter_title, body, about_heading, description, statistics) so each
    renderer can map it to its own typography.
    """

    def __init__(self, model: BookExportModel):
        self.model = model
        self.lang = model.language

    def cover_block(self, side: CoverSide) -> ContentBlock:
        """COVER block listing the (role, text) lines printed on that cover."""
        model = self.model
        if side == CoverSide.FRONT:
            lines = [
                ("book_title", model.title),
                ("author", model.author_name),
                ("genre", model.genre),
            ]
        else:
            lines = []
            if model.has_description:
                lines.append(("description", model.description.strip()))
            lines.append(("statistics", self.statistics_line()))
            lines.append(("author", model.author_name))

        return ContentBlock(
            type=BlockType.COVER,
            content=side,
            style_hints={
                "lines": lines,
                "background": model.cover_design.cover_color,
                "text_color": model.cover_design.text_color,
            },
        )

    def title_blocks(self, include_genre: bool = True) -> List[ContentBlock]:
        blocks = [
            _heading(self.model.title, 1, "book_title"),
            _text(format_byline(self.model.author_name, self.lang), "byline"),
        ]
        if include_genre:
            blocks.append(_text(self.model.genre, "genre"))
        return blocks

    def toc_blocks(self) -> List[ContentBlock]:
        blocks = [_heading(get_string("table_of_contents", self.lang), 1, "toc_heading")]
        for index, chapter in enumerate(self.model.chapters):
            blocks.append(_text(f"{index + 1}. {chapter.title}", "toc_entry"))
        return blocks

    def chapter_blocks(self, index: int) -> List[ContentBlock]:
        chapter = self.model.chapters[index]
        blocks = [
            _heading(format_chapter_label(index + 1, self.lang), 1, "chapter_label"),
            _heading(chapter.title, 2, "chapter_title"),
        ]
        for paragraph in split_paragraphs(chapter.content):
            blocks.append(_text(paragraph, "body"))
        return blocks

    def back_matter_blocks(self) -> List[ContentBlock]:
        blocks = [_heading(get_string("about_this_book", self.lang), 1, "about_heading")]
        if self.model.has_description:
            blocks.append(_text(self.model.description.strip(), "description"))
        blocks.append(_text(self.statistics_line(), "statistics"))
        return blocks

    def statistics_line(self) -> str:
        stats = self.model.statistics
        return format_statistics(stats.word_count, stats.chapter_count, self.lang)


def page_break() -> ContentBlock:
    return ContentBlock(type=BlockType.PAGE_BREAK)


def _heading(text: str, level: int, role: str) -> ContentBlock:
    return ContentBlock(type=BlockType.HEADING, level=level, content=text, style_hints={"role": role})


def _text(text: str, role: str) -> ContentBlock:
    return ContentBlock(type=BlockType.TEXT, content=text, style_hints={"role": role})
