"""
Export Dispatcher - Entry point of the book export engine.

    export(book_id, fmt)
        1. parse the format          (UnsupportedFormatError, nothing loaded)
        2. load the book record      (BookNotFoundError, nothing rendered)
        3. normalize record -> model
        4. render with the paginated or flowing renderer

Each call builds its own model, fonts and document, so concurrent exports
share no mutable state.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from config.settings import Settings, get_settings
from core.pdf_engine import PageDocumentRenderer, TypographyRegistry, TypographyConfig
from core.docx_engine import FlowDocumentRenderer

from .exceptions import BookNotFoundError, UnsupportedFormatError
from .filenames import CONTENT_TYPES, download_name
from .models import BookExportModel
from .normalizer import BookNormalizer
from .repository import BookRepository

logger = logging.getLogger(__name__)


class ExportFormat(str, Enum):
    """Output layouts. 'pdf' and 'docx' are accepted as aliases."""
    PAGE = "page"
    FLOW = "flow"

    @property
    def extension(self) -> str:
        return "pdf" if self is ExportFormat.PAGE else "docx"

    @property
    def content_type(self) -> str:
        return CONTENT_TYPES[self.extension]

    @classmethod
    def parse(cls, value: Union[str, "ExportFormat"]) -> "ExportFormat":
        if isinstance(value, cls):
            return value

        key = value.strip().lower() if isinstance(value, str) else None
        fmt = _FORMAT_ALIASES.get(key)
        if fmt is None:
            raise UnsupportedFormatError(value, sorted(_FORMAT_ALIASES))
        return fmt


_FORMAT_ALIASES = {
    "page": ExportFormat.PAGE,
    "pdf": ExportFormat.PAGE,
    "flow": ExportFormat.FLOW,
    "docx": ExportFormat.FLOW,
}


@dataclass(frozen=True)
class ExportArtifact:
    """Rendered book plus what a caller needs to deliver it."""
    content: bytes
    format: ExportFormat
    content_type: str
    extension: str
    filename: str

    @property
    def size(self) -> int:
        return len(self.content)


class ExportDispatcher:
    """
    Loads a book and renders it in the requested layout.

    Usage:
        dispatcher = ExportDispatcher(SQLiteBookRepository("data/books.db"))
        pdf_bytes = dispatcher.export("book-123", "pdf")
        artifact = dispatcher.export_artifact("book-123", "docx")
    """

    def __init__(
        self,
        repository: BookRepository,
        settings: Optional[Settings] = None,
        normalizer: Optional[BookNormalizer] = None,
    ):
        self.repository = repository
        self.settings = settings or get_settings()
        self.normalizer = normalizer or BookNormalizer()
        self.typography = TypographyRegistry(TypographyConfig.from_settings(self.settings))

    # ═══════════════════════════════════════════════════════════════
    # PUBLIC API
    # ═══════════════════════════════════════════════════════════════

    def export(self, book_id: str, fmt: Union[str, ExportFormat]) -> bytes:
        """
        Render a stored book.

        Raises:
            UnsupportedFormatError: fmt is not page/flow/pdf/docx
            BookNotFoundError: book_id does not resolve
            RenderError: the document library failed
        """
        export_format = ExportFormat.parse(fmt)
        if export_format is ExportFormat.PAGE:
            return self.render_paginated(book_id)
        return self.render_flowing(book_id)

    def export_artifact(self, book_id: str, fmt: Union[str, ExportFormat]) -> ExportArtifact:
        """Like export(), with content type and a safe download filename."""
        export_format = ExportFormat.parse(fmt)
        model = self._load_model(book_id)
        content = self._render(model, export_format, book_id)

        return ExportArtifact(
            content=content,
            format=export_format,
            content_type=export_format.content_type,
            extension=export_format.extension,
            filename=download_name(model.title, export_format.extension),
        )

    def render_paginated(self, book_id: str) -> bytes:
        model = self._load_model(book_id)
        return self._render(model, ExportFormat.PAGE, book_id)

    def render_flowing(self, book_id: str) -> bytes:
        model = self._load_model(book_id)
        return self._render(model, ExportFormat.FLOW, book_id)

    # ═══════════════════════════════════════════════════════════════
    # INTERNALS
    # ═══════════════════════════════════════════════════════════════

    def _load_model(self, book_id: str) -> BookExportModel:
        record = self.repository.get_book(book_id)
        if record is None:
            logger.warning(f"Export requested for unknown book {book_id}")
            raise BookNotFoundError(book_id)
        return self.normalizer.from_record(record)

    def _render(self, model: BookExportModel, export_format: ExportFormat, book_id: str) -> bytes:
        logger.info(
            f"Exporting book {book_id} as {export_format.value} "
            f"({len(model.chapters)} chapters)"
        )

        if export_format is ExportFormat.PAGE:
            renderer = PageDocumentRenderer(
                self.typography,
                creator=self.settings.pdf_creator,
                invariant=self.settings.pdf_invariant,
            )
            content = renderer.render(model)
        else:
            content = FlowDocumentRenderer(font_name=self.settings.docx_font).render(model)

        logger.info(f"Exported book {book_id} as {export_format.value}: {len(content)} bytes")
        return content
