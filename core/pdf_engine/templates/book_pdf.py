"""
Book PDF Template - Print-style paginated book.

Features:
- A5 pages with 1 inch margins
- Full-bleed coloured front and back covers
- Centered chapter openings ("Chapter N" + title)
- Justified body text, 4pt line gap, 12pt between paragraphs
"""

from typing import Dict
from reportlab.lib.enums import TA_LEFT, TA_CENTER, TA_JUSTIFY

from .base import PdfTemplate, PageSpec, FontSpec, ParagraphSpec, CoverLineSpec


class BookPdfTemplate(PdfTemplate):
    """
    Paginated book template.

    Page size: A5
    Cover text colour: taken from the book's cover design at render time
    """

    MARGIN = 72

    @property
    def name(self) -> str:
        return "Book PDF"

    def get_page_spec(self) -> PageSpec:
        return PageSpec.a5(margin=self.MARGIN)

    def get_title_page_offset(self) -> float:
        # Title sits 200pt below the top edge of the page
        return 200 - self.MARGIN

    def get_styles(self) -> Dict[str, ParagraphSpec]:
        return {
            # ═══════════════════════════════════════════════════════════
            # TITLE PAGE
            # ═══════════════════════════════════════════════════════════

            'book_title': ParagraphSpec(
                font=FontSpec(size=28, leading=34, weight="bold"),
                alignment=TA_CENTER,
                space_after=0
            ),

            'byline': ParagraphSpec(
                font=FontSpec(size=16, leading=20),
                alignment=TA_CENTER,
                space_before=26
            ),

            # ═══════════════════════════════════════════════════════════
            # TABLE OF CONTENTS
            # ═══════════════════════════════════════════════════════════

            'toc_heading': ParagraphSpec(
                font=FontSpec(size=20, leading=24, weight="bold"),
                alignment=TA_CENTER,
                space_after=28,
                keep_with_next=True
            ),

            'toc_entry': ParagraphSpec(
                font=FontSpec(size=12, leading=15),
                alignment=TA_LEFT,
                space_after=6
            ),

            # ═══════════════════════════════════════════════════════════
            # CHAPTERS
            # ═══════════════════════════════════════════════════════════

            'chapter_label': ParagraphSpec(
                font=FontSpec(size=22, leading=27, weight="bold"),
                alignment=TA_CENTER,
                space_after=0,
                keep_with_next=True
            ),

            'chapter_title': ParagraphSpec(
                font=FontSpec(size=18, leading=22, weight="bold"),
                alignment=TA_CENTER,
                space_after=36
            ),

            'body': ParagraphSpec(
                font=FontSpec(size=11, leading=15),
                alignment=TA_JUSTIFY,
                space_after=12
            ),

            # ═══════════════════════════════════════════════════════════
            # COVERS (colour filled in from the cover design)
            # ═══════════════════════════════════════════════════════════

            'cover_title': ParagraphSpec(
                font=FontSpec(size=36, leading=43, weight="bold", color=None),
                alignment=TA_CENTER,
                space_after=0
            ),

            'cover_author': ParagraphSpec(
                font=FontSpec(size=18, leading=22, color=None),
                alignment=TA_CENTER,
                space_after=0
            ),

            'cover_genre': ParagraphSpec(
                font=FontSpec(size=12, leading=15, color=None),
                alignment=TA_CENTER,
                space_after=0
            ),

            'cover_description': ParagraphSpec(
                font=FontSpec(size=12, leading=16, color=None),
                alignment=TA_JUSTIFY,
                space_after=0
            ),

            'cover_statistics': ParagraphSpec(
                font=FontSpec(size=10, leading=12, color=None),
                alignment=TA_CENTER,
                space_after=0
            ),

            'cover_back_author': ParagraphSpec(
                font=FontSpec(size=14, leading=17, weight="bold", color=None),
                alignment=TA_CENTER,
                space_after=0
            ),
        }

    def get_cover_layout(self) -> Dict[str, Dict[str, CoverLineSpec]]:
        return {
            'front': {
                'book_title': CoverLineSpec(style='cover_title', top=200, bottom=295),
                'author': CoverLineSpec(style='cover_author', top=300, bottom=395),
                'genre': CoverLineSpec(style='cover_genre', top=400, bottom=-72),
            },
            'back': {
                'description': CoverLineSpec(style='cover_description', top=100, bottom=-110),
                'statistics': CoverLineSpec(style='cover_statistics', top=-100, bottom=-75),
                'author': CoverLineSpec(style='cover_back_author', top=-70, bottom=-40),
            },
        }
