"""
Paginated book renderer using ReportLab.

Lays a BookExportModel out on fixed A5 pages. The document is walked as a
fixed sequence of page states with no way back:

    FRONT_COVER -> TITLE_PAGE -> [TABLE_OF_CONTENTS] -> CHAPTER(0..n-1) -> BACK_COVER

The table of contents is only emitted for books with more than one chapter.
Each state starts on a fresh page; text that overflows a chapter page flows
onto continuation pages through the platypus frame.
"""

import io
import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from reportlab.lib.colors import Color
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import (
    BaseDocTemplate, PageTemplate, Frame, Paragraph, Spacer, PageBreak,
    NextPageTemplate, KeepInFrame,
)

from core.book_export.colors import resolve_rgb, rgb_to_unit
from core.book_export.exceptions import RenderError
from core.book_export.models import BookExportModel, ContentBlock, BlockType, CoverSide
from core.book_export.normalizer import BlockBuilder

from .templates import PdfTemplate, BookPdfTemplate
from .style_builder import TypographyRegistry, StyleBuilder, script_for_language


logger = logging.getLogger(__name__)


class PageState(Enum):
    """Page states of the paginated layout, in document order"""
    FRONT_COVER = "front_cover"
    TITLE_PAGE = "title_page"
    TABLE_OF_CONTENTS = "table_of_contents"
    CHAPTER = "chapter"
    BACK_COVER = "back_cover"


def page_sequence(model: BookExportModel) -> List[Tuple[PageState, Optional[int]]]:
    """
    The ordered page states for a book. Chapter states carry their index.

    A single-chapter book gets no table of contents.
    """
    sequence = [(PageState.FRONT_COVER, None), (PageState.TITLE_PAGE, None)]
    if len(model.chapters) > 1:
        sequence.append((PageState.TABLE_OF_CONTENTS, None))
    sequence.extend((PageState.CHAPTER, i) for i in range(len(model.chapters)))
    sequence.append((PageState.BACK_COVER, None))
    return sequence


class PageDocumentRenderer:
    """
    PDF renderer for exported books.

    Usage:
        renderer = PageDocumentRenderer(TypographyRegistry(config))
        pdf_bytes = renderer.render(model)
    """

    FRONT_TEMPLATE = 'front_cover'
    BODY_TEMPLATE = 'body'
    BACK_TEMPLATE = 'back_cover'

    def __init__(
        self,
        typography: TypographyRegistry,
        template: Optional[PdfTemplate] = None,
        creator: str = "Book Export Engine",
        invariant: bool = True
    ):
        """
        Initialize PDF renderer.

        Args:
            typography: Resolves fonts once per export
            template: Page geometry and styles (default: BookPdfTemplate)
            creator: Value of the PDF Creator field
            invariant: Produce timestamp-free output
        """
        self.typography = typography
        self.template = template or BookPdfTemplate()
        self.creator = creator
        self.invariant = invariant

    def render(
        self,
        model: BookExportModel,
        progress_callback: Optional[Callable[[int, int, str], None]] = None
    ) -> bytes:
        """
        Render a book to PDF bytes.

        Args:
            model: Normalized book
            progress_callback: Optional callback(current, total, message)

        Returns:
            The complete PDF document
        """
        fonts = self.typography.resolve_fonts(script_for_language(model.language))
        text_color = Color(*rgb_to_unit(resolve_rgb(model.cover_design.text_color)))
        styles = StyleBuilder(self.template, fonts, cover_text_color=text_color).build_all_styles()
        builder = BlockBuilder(model)

        buffer = io.BytesIO()
        doc = self._create_document(buffer, model, builder, styles)

        story = []
        sequence = page_sequence(model)
        for current, (state, index) in enumerate(sequence):
            if progress_callback:
                progress_callback(current, len(sequence), f"Rendering {state.value}...")
            story.extend(self._state_flowables(state, index, builder, styles))

        try:
            doc.build(story)
        except Exception as e:
            raise RenderError("pdf", f"Failed to build PDF for {model.title!r}: {e}") from e

        if progress_callback:
            progress_callback(len(sequence), len(sequence), "PDF complete")

        logger.debug(f"PDF rendered: {len(model.chapters)} chapters, {doc.page} pages")
        return buffer.getvalue()

    def _create_document(
        self,
        buffer: io.BytesIO,
        model: BookExportModel,
        builder: BlockBuilder,
        styles: Dict[str, ParagraphStyle]
    ) -> BaseDocTemplate:
        page_spec = self.template.get_page_spec()

        doc = BaseDocTemplate(
            buffer,
            pagesize=page_spec.size,
            topMargin=page_spec.top_margin,
            rightMargin=page_spec.right_margin,
            bottomMargin=page_spec.bottom_margin,
            leftMargin=page_spec.left_margin,
            title=model.title,
            author=model.author_name,
            subject=model.genre,
            creator=self.creator,
            invariant=1 if self.invariant else 0,
        )

        def frame(frame_id: str) -> Frame:
            return Frame(doc.leftMargin, doc.bottomMargin, doc.width, doc.height, id=frame_id)

        # The first template is used for page 1
        doc.addPageTemplates([
            PageTemplate(
                id=self.FRONT_TEMPLATE,
                frames=[frame('front')],
                onPage=self._make_cover_callback(builder.cover_block(CoverSide.FRONT), styles),
            ),
            PageTemplate(id=self.BODY_TEMPLATE, frames=[frame('body')]),
            PageTemplate(
                id=self.BACK_TEMPLATE,
                frames=[frame('back')],
                onPage=self._make_cover_callback(builder.cover_block(CoverSide.BACK), styles),
            ),
        ])
        return doc

    def _state_flowables(
        self,
        state: PageState,
        index: Optional[int],
        builder: BlockBuilder,
        styles: Dict[str, ParagraphStyle]
    ) -> List:
        """Flowables for one page state, including the transition into it."""
        if state == PageState.FRONT_COVER:
            # Cover artwork is drawn by the page template
            return [NextPageTemplate(self.BODY_TEMPLATE)]

        if state == PageState.TITLE_PAGE:
            flowables = [PageBreak(), Spacer(1, self.template.get_title_page_offset())]
            blocks = builder.title_blocks(include_genre=False)
        elif state == PageState.TABLE_OF_CONTENTS:
            flowables = [PageBreak()]
            blocks = builder.toc_blocks()
        elif state == PageState.CHAPTER:
            flowables = [PageBreak()]
            blocks = builder.chapter_blocks(index)
        else:
            # Spacer opens the back cover page so it is not dropped as trailing
            return [NextPageTemplate(self.BACK_TEMPLATE), PageBreak(), Spacer(1, 0)]

        for block in blocks:
            flowables.extend(self._render_block(block, styles))
        return flowables

    def _render_block(self, block: ContentBlock, styles: Dict[str, ParagraphStyle]) -> List:
        """Render a content block to flowables."""
        if block.type == BlockType.PAGE_BREAK:
            return [PageBreak()]
        if block.type not in (BlockType.TEXT, BlockType.HEADING):
            return []

        style = styles.get(block.style_hints.get('role'), styles['body'])
        return [Paragraph(self._markup(block.content), style)]

    def _make_cover_callback(self, block: ContentBlock, styles: Dict[str, ParagraphStyle]):
        """Create page callback that paints a cover."""
        layout = self.template.get_cover_layout()[block.content.value]
        background = Color(*rgb_to_unit(resolve_rgb(block.style_hints['background'])))
        lines = block.style_hints['lines']

        def callback(canvas, doc):
            canvas.saveState()
            page_width, page_height = doc.pagesize

            canvas.setFillColor(background)
            canvas.rect(0, 0, page_width, page_height, stroke=0, fill=1)

            for role, text in lines:
                spec = layout.get(role)
                if spec is None or not text:
                    continue
                y_bottom, y_top = spec.box(page_height)
                self._draw_boxed_text(
                    canvas, text, styles[spec.style],
                    doc.leftMargin, y_bottom, doc.width, y_top - y_bottom
                )

            canvas.restoreState()

        return callback

    def _draw_boxed_text(self, canvas, text: str, style: ParagraphStyle,
                         x: float, y: float, width: float, height: float):
        box = Frame(
            x, y, width, height,
            leftPadding=0, rightPadding=0, topPadding=0, bottomPadding=0,
            showBoundary=0,
        )
        content = KeepInFrame(width, height, [Paragraph(self._markup(text), style)], mode='shrink')
        box.addFromList([content], canvas)

    def _markup(self, text: str) -> str:
        """Escape text for Paragraph markup, keeping line breaks."""
        return self._escape_html(text).replace('\n', '<br/>')

    def _escape_html(self, text: str) -> str:
        """Escape HTML special characters."""
        if not text:
            return ""
        return (text
            .replace('&', '&amp;')
            .replace('<', '&lt;')
            .replace('>', '&gt;'))
