"""
Base template class for DOCX rendering.
All templates must inherit from DocxTemplate.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Optional

from docx.shared import Pt, Twips, Length, RGBColor
from docx.enum.text import WD_ALIGN_PARAGRAPH


@dataclass
class FontSpec:
    """Font specification"""
    name: str
    size: Pt
    bold: bool = False
    italic: bool = False
    color: Optional[RGBColor] = None


@dataclass
class ParagraphSpec:
    """Paragraph style specification"""
    font: FontSpec
    alignment: WD_ALIGN_PARAGRAPH = WD_ALIGN_PARAGRAPH.JUSTIFY
    line_spacing: Optional[float] = None  # Multiple; None keeps the style default
    space_before: Length = field(default_factory=lambda: Pt(0))
    space_after: Length = field(default_factory=lambda: Pt(0))
    keep_with_next: bool = False
    widow_control: bool = True
    style_name: Optional[str] = None  # Built-in paragraph style, e.g. 'Heading 1'


@dataclass
class PageSetup:
    """Page layout specification"""
    width: Length
    height: Length
    top_margin: Length
    bottom_margin: Length
    left_margin: Length
    right_margin: Length

    @classmethod
    def a5(cls, margin: Length = Twips(1440)) -> 'PageSetup':
        """A5 portrait, 1 inch margins"""
        return cls(
            width=Twips(8391), height=Twips(11906),
            top_margin=margin, bottom_margin=margin,
            left_margin=margin, right_margin=margin
        )


class DocxTemplate(ABC):
    """
    Abstract base class for DOCX templates.

    Subclasses define page geometry and the paragraph spec used for each
    block role produced by the normalizer.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Template name"""
        pass

    @abstractmethod
    def get_page_setup(self) -> PageSetup:
        """Return page layout configuration"""
        pass

    @abstractmethod
    def get_styles(self) -> Dict[str, ParagraphSpec]:
        """
        Return mapping of block roles to specifications.

        Required keys:
        - book_title, byline, genre: Title section
        - toc_heading, toc_entry: Table of contents
        - chapter_label, chapter_title, body: Chapters
        - about_heading, description, statistics: Back matter
        """
        pass
