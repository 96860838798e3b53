"""
Book Export - Shared model, normalization and book store for the export engine.

The renderers live in core.pdf_engine (paginated) and core.docx_engine
(flowing); core.book_export.dispatcher ties them together:

    from core.book_export.dispatcher import ExportDispatcher
    pdf_bytes = ExportDispatcher(repository).export("book-123", "pdf")
"""

from .models import (
    BookExportModel,
    ChapterExport,
    CoverDesign,
    BookStatistics,
    ContentBlock,
    BlockType,
    CoverSide,
)
from .records import BookRecord, ChapterRecord, CoverDesignRecord, StatisticsRecord, AuthorRef
from .sanitizer import sanitize, strip_control_chars
from .colors import resolve_rgb, is_hex_color, FALLBACK_RGB
from .normalizer import BookNormalizer, BlockBuilder, split_paragraphs
from .repository import BookRepository, InMemoryBookRepository, SQLiteBookRepository
from .filenames import safe_filename, download_name, CONTENT_TYPES
from .exceptions import (
    BookExportError,
    BookNotFoundError,
    UnsupportedFormatError,
    RenderError,
)

__all__ = [
    # Models
    'BookExportModel',
    'ChapterExport',
    'CoverDesign',
    'BookStatistics',
    'ContentBlock',
    'BlockType',
    'CoverSide',

    # Stored records
    'BookRecord',
    'ChapterRecord',
    'CoverDesignRecord',
    'StatisticsRecord',
    'AuthorRef',

    # Normalization
    'sanitize',
    'strip_control_chars',
    'resolve_rgb',
    'is_hex_color',
    'FALLBACK_RGB',
    'BookNormalizer',
    'BlockBuilder',
    'split_paragraphs',

    # Book store
    'BookRepository',
    'InMemoryBookRepository',
    'SQLiteBookRepository',

    # Delivery
    'safe_filename',
    'download_name',
    'CONTENT_TYPES',

    # Exceptions
    'BookExportError',
    'BookNotFoundError',
    'UnsupportedFormatError',
    'RenderError',
]
