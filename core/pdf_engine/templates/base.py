"""
Base template classes for PDF rendering with ReportLab.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Tuple, Optional

from reportlab.lib.pagesizes import A5
from reportlab.lib.colors import Color, black
from reportlab.lib.enums import TA_JUSTIFY


@dataclass
class PageSpec:
    """Page layout specification"""
    width: float       # in points
    height: float      # in points
    top_margin: float
    right_margin: float
    bottom_margin: float
    left_margin: float

    @property
    def size(self) -> Tuple[float, float]:
        return (self.width, self.height)

    @property
    def frame_width(self) -> float:
        return self.width - self.left_margin - self.right_margin

    @classmethod
    def a5(cls, margin: float = 72) -> 'PageSpec':
        """A5 (148 x 210 mm), standard book size"""
        return cls(
            width=A5[0], height=A5[1],
            top_margin=margin, right_margin=margin,
            bottom_margin=margin, left_margin=margin
        )


@dataclass
class FontSpec:
    """
    Font specification for PDF.

    The face is chosen by weight ('regular' or 'bold'); the actual
    family is resolved per export by the TypographyRegistry.
    """
    size: float          # Font size in points
    leading: float       # Line height in points
    weight: str = "regular"
    color: Optional[Color] = field(default_factory=lambda: black)


@dataclass
class ParagraphSpec:
    """Paragraph style specification for PDF"""
    font: FontSpec
    alignment: int = TA_JUSTIFY  # TA_LEFT, TA_CENTER, TA_RIGHT, TA_JUSTIFY
    space_before: float = 0      # points
    space_after: float = 6       # points
    keep_with_next: bool = False


@dataclass
class CoverLineSpec:
    """
    Box for absolutely positioned text on a cover page.

    top / bottom: distance from the top edge of the page. Negative values
    are measured from the bottom edge instead. Text that does not fit the
    box is shrunk to fit.
    """
    style: str
    top: float
    bottom: float

    def box(self, page_height: float) -> Tuple[float, float]:
        """(y_bottom, y_top) in ReportLab coordinates."""
        def to_y(distance: float) -> float:
            return page_height - distance if distance >= 0 else -distance
        return to_y(self.bottom), to_y(self.top)


class PdfTemplate(ABC):
    """
    Abstract base class for PDF templates.

    A template fixes page geometry, the paragraph styles used on body
    pages and the positions of text drawn on the covers.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Template display name"""
        pass

    @abstractmethod
    def get_page_spec(self) -> PageSpec:
        """Return page size and margins"""
        pass

    @abstractmethod
    def get_styles(self) -> Dict[str, ParagraphSpec]:
        """
        Return style mapping keyed by block role.

        Required keys:
        - book_title, byline: Title page
        - toc_heading, toc_entry: Table of contents
        - chapter_label, chapter_title, body: Chapters
        - cover_title, cover_author, cover_genre: Front cover
        - cover_description, cover_statistics, cover_back_author: Back cover
        """
        pass

    @abstractmethod
    def get_cover_layout(self) -> Dict[str, Dict[str, CoverLineSpec]]:
        """
        Return cover line placement: {'front'|'back': {line_role: CoverLineSpec}}.
        """
        pass

    def get_title_page_offset(self) -> float:
        """Space above the book title on the title page (points below the top margin)."""
        return 0
