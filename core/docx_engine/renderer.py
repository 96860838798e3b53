"""
Main DOCX Renderer - Orchestrates all components to produce final document.

The flowing layout is one linear stream of blocks. Page breaks are explicit
blocks at section boundaries:

    title section | TOC | chapter 1 | chapter 2 | ... | chapter n | back matter

There is no break after the last chapter other than the one that opens the
back matter. Unlike the paginated renderer, the table of contents is always
present, even for a single chapter.
"""

import io
import logging
from typing import List, Optional

from docx import Document

from core.book_export.exceptions import RenderError
from core.book_export.models import BookExportModel, ContentBlock
from core.book_export.normalizer import BlockBuilder, page_break
from .style_mapper import StyleMapper
from .layout_engine import LayoutEngine
from .templates import DocxTemplate, BookDocxTemplate

logger = logging.getLogger(__name__)


def build_blocks(model: BookExportModel) -> List[ContentBlock]:
    """Linear block stream for the flowing layout."""
    builder = BlockBuilder(model)

    blocks = builder.title_blocks(include_genre=True)
    blocks.append(page_break())

    blocks.extend(builder.toc_blocks())
    blocks.append(page_break())

    last = len(model.chapters) - 1
    for i in range(len(model.chapters)):
        blocks.extend(builder.chapter_blocks(i))
        if i < last:
            blocks.append(page_break())

    blocks.append(page_break())
    blocks.extend(builder.back_matter_blocks())
    return blocks


class FlowDocumentRenderer:
    """
    DOCX renderer for exported books.

    Usage:
        renderer = FlowDocumentRenderer(font_name="Calibri")
        docx_bytes = renderer.render(model)
    """

    def __init__(
        self,
        template: Optional[DocxTemplate] = None,
        font_name: str = "Calibri"
    ):
        """
        Initialize renderer.

        Args:
            template: DocxTemplate instance (default: BookDocxTemplate)
            font_name: Font family for the default template
        """
        self.template = template or BookDocxTemplate(font_name=font_name)

    def render(self, model: BookExportModel) -> bytes:
        """
        Render a book to DOCX bytes.

        Args:
            model: Normalized book

        Returns:
            The complete .docx package
        """
        blocks = build_blocks(model)

        try:
            docx = Document()

            layout_engine = LayoutEngine(docx, self.template)
            layout_engine.setup_document(model)

            style_mapper = StyleMapper(docx, self.template)
            for block in blocks:
                style_mapper.render_block(block)

            buffer = io.BytesIO()
            docx.save(buffer)
        except Exception as e:
            raise RenderError("docx", f"Failed to build DOCX for {model.title!r}: {e}") from e

        logger.debug(f"DOCX rendered: {len(model.chapters)} chapters, {len(blocks)} blocks")
        return buffer.getvalue()
