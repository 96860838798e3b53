"""
Data models for the book export engine.
All models use dataclasses for simplicity.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any
from enum import Enum


DEFAULT_COVER_COLOR = "#1a1a2e"
DEFAULT_TEXT_COLOR = "#ffffff"
DEFAULT_FONT_FAMILY = "Helvetica"


class BlockType(Enum):
    """Content block types shared by both renderers"""
    TEXT = "text"
    HEADING = "heading"
    PAGE_BREAK = "page_break"
    COVER = "cover"


class CoverSide(Enum):
    """Which cover a COVER block describes"""
    FRONT = "front"
    BACK = "back"


@dataclass
class ContentBlock:
    """Universal content block"""
    type: BlockType
    level: int = 1  # For headings: 1 = chapter label / section heading, 2 = chapter title
    content: Any = None  # str for TEXT/HEADING, CoverSide for COVER
    style_hints: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ChapterExport:
    """A chapter ready for rendering (content is sanitized plain text)"""
    title: str
    content: str
    word_count: int = 0


@dataclass(frozen=True)
class CoverDesign:
    """Cover colours and typeface. Colours are valid 6-digit hex by the time a renderer sees them."""
    cover_color: str = DEFAULT_COVER_COLOR
    text_color: str = DEFAULT_TEXT_COLOR
    font_family: str = DEFAULT_FONT_FAMILY
    image_url: Optional[str] = None


@dataclass(frozen=True)
class BookStatistics:
    """Aggregates stored with the book. Displayed, never recomputed."""
    word_count: int = 0
    chapter_count: int = 0


@dataclass(frozen=True)
class BookExportModel:
    """
    Normalized, read-only snapshot of a book.
    This is the contract between the normalizer and both renderers.
    """
    title: str
    author_name: str
    genre: str
    description: str = ""
    chapters: List[ChapterExport] = field(default_factory=list)
    cover_design: CoverDesign = field(default_factory=CoverDesign)
    statistics: BookStatistics = field(default_factory=BookStatistics)
    language: str = "en"

    @property
    def has_description(self) -> bool:
        return bool(self.description and self.description.strip())

    def total_chapters(self) -> int:
        return len(self.chapters)
