"""
Style Mapper - Maps content blocks to styled DOCX paragraphs.
Handles the translation between block roles and actual DOCX formatting.
"""

from typing import Dict, Optional
import logging

from docx.document import Document
from docx.text.paragraph import Paragraph
from docx.oxml.ns import qn

from core.book_export.models import ContentBlock, BlockType
from core.book_export.sanitizer import strip_control_chars
from .templates.base import DocxTemplate, ParagraphSpec, FontSpec

logger = logging.getLogger(__name__)


class StyleMapper:
    """
    Maps ContentBlocks to styled DOCX elements.

    Usage:
        mapper = StyleMapper(document, template)
        for block in blocks:
            mapper.render_block(block)
    """

    def __init__(self, document: Document, template: DocxTemplate):
        self.doc = document
        self.template = template
        self.styles: Dict[str, ParagraphSpec] = template.get_styles()

    def render_block(self, block: ContentBlock) -> Optional[Paragraph]:
        """
        Render a single content block.

        Returns:
            The paragraph written, or None for blocks that produce no paragraph
        """
        if block.type == BlockType.PAGE_BREAK:
            return self.doc.add_page_break()

        if block.type in (BlockType.TEXT, BlockType.HEADING):
            role = block.style_hints.get('role', 'body')
            spec = self.styles.get(role)
            if spec is None:
                logger.debug(f"No style for role {role!r}, using body")
                spec = self.styles['body']
            return self._render_text(block.content or "", spec)

        # Covers belong to the paginated layout
        return None

    def _render_text(self, text: str, spec: ParagraphSpec) -> Paragraph:
        para = self.doc.add_paragraph(style=spec.style_name) if spec.style_name else self.doc.add_paragraph()
        self._apply_paragraph_spec(para, spec)

        # Single newlines inside the text become line breaks in the run
        run = para.add_run(strip_control_chars(text))
        self._apply_font_spec(run, spec.font)
        return para

    def _apply_paragraph_spec(self, para: Paragraph, spec: ParagraphSpec):
        """Apply ParagraphSpec to a paragraph"""
        pf = para.paragraph_format

        # Alignment
        pf.alignment = spec.alignment

        # Spacing
        pf.space_before = spec.space_before
        pf.space_after = spec.space_after

        # Line spacing
        if spec.line_spacing:
            pf.line_spacing = spec.line_spacing

        pf.keep_with_next = spec.keep_with_next
        pf.widow_control = spec.widow_control

    def _apply_font_spec(self, run, spec: FontSpec):
        """Apply FontSpec to a run"""
        run.font.name = spec.name
        run.font.size = spec.size
        run.bold = spec.bold
        run.italic = spec.italic

        if spec.color:
            run.font.color.rgb = spec.color

        # Same family for East Asian and complex-script (Hebrew, Arabic) text
        r = run._element
        rPr = r.get_or_add_rPr()
        rFonts = rPr.get_or_add_rFonts()
        rFonts.set(qn('w:eastAsia'), spec.name)
        rFonts.set(qn('w:cs'), spec.name)
