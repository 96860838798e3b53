"""
Book Template - Reflowable manuscript for word processors.

Features:
- A5 page, 1 inch margins
- Single font family throughout (configurable, Calibri by default)
- Chapter and section headings on the built-in 'Heading 1' style,
  so Word's navigation pane and TOC field pick them up
- Justified body text at 1.5 line spacing
"""

from typing import Dict
from docx.shared import Pt, RGBColor
from docx.enum.text import WD_ALIGN_PARAGRAPH

from .base import DocxTemplate, PageSetup, ParagraphSpec, FontSpec


class BookDocxTemplate(DocxTemplate):
    """
    Book manuscript template.

    Typography: one family, sized per role
    Page size: A5
    """

    HEADING_STYLE = "Heading 1"
    # Heading 1 carries a theme colour; headings here print black like the body
    HEADING_COLOR = RGBColor(0, 0, 0)

    def __init__(self, font_name: str = "Calibri"):
        self.font_name = font_name

    @property
    def name(self) -> str:
        return "Book"

    def get_page_setup(self) -> PageSetup:
        return PageSetup.a5()

    def _font(self, size: float, **kwargs) -> FontSpec:
        return FontSpec(name=self.font_name, size=Pt(size), **kwargs)

    def _heading_font(self, size: float) -> FontSpec:
        return self._font(size, bold=True, color=self.HEADING_COLOR)

    def get_styles(self) -> Dict[str, ParagraphSpec]:
        return {
            # Title section
            "book_title": ParagraphSpec(
                font=self._font(36, bold=True),
                alignment=WD_ALIGN_PARAGRAPH.CENTER,
                space_before=Pt(150),
            ),
            "byline": ParagraphSpec(
                font=self._font(16),
                alignment=WD_ALIGN_PARAGRAPH.CENTER,
                space_before=Pt(20),
            ),
            "genre": ParagraphSpec(
                font=self._font(12, italic=True),
                alignment=WD_ALIGN_PARAGRAPH.CENTER,
                space_before=Pt(10),
            ),

            # Table of contents
            "toc_heading": ParagraphSpec(
                font=self._heading_font(20),
                alignment=WD_ALIGN_PARAGRAPH.CENTER,
                space_after=Pt(20),
                keep_with_next=True,
                style_name=self.HEADING_STYLE,
            ),
            "toc_entry": ParagraphSpec(
                font=self._font(12),
                alignment=WD_ALIGN_PARAGRAPH.LEFT,
                space_before=Pt(5),
                space_after=Pt(5),
            ),

            # Chapters
            "chapter_label": ParagraphSpec(
                font=self._heading_font(16),
                alignment=WD_ALIGN_PARAGRAPH.CENTER,
                keep_with_next=True,
                style_name=self.HEADING_STYLE,
            ),
            "chapter_title": ParagraphSpec(
                font=self._font(14, bold=True),
                alignment=WD_ALIGN_PARAGRAPH.CENTER,
                space_after=Pt(20),
                keep_with_next=True,
            ),
            "body": ParagraphSpec(
                font=self._font(12),
                alignment=WD_ALIGN_PARAGRAPH.JUSTIFY,
                line_spacing=1.5,
                space_after=Pt(10),
            ),

            # Back matter
            "about_heading": ParagraphSpec(
                font=self._heading_font(16),
                alignment=WD_ALIGN_PARAGRAPH.CENTER,
                space_after=Pt(20),
                keep_with_next=True,
                style_name=self.HEADING_STYLE,
            ),
            "description": ParagraphSpec(
                font=self._font(12),
                alignment=WD_ALIGN_PARAGRAPH.JUSTIFY,
                space_after=Pt(20),
            ),
            "statistics": ParagraphSpec(
                font=self._font(10, italic=True),
                alignment=WD_ALIGN_PARAGRAPH.CENTER,
                space_before=Pt(20),
            ),
        }
