"""
PDF Template module exports.
"""

from .base import (
    PdfTemplate,
    PageSpec,
    FontSpec,
    ParagraphSpec,
    CoverLineSpec,
)

from .book_pdf import BookPdfTemplate


__all__ = [
    # Base classes
    'PdfTemplate',
    'PageSpec',
    'FontSpec',
    'ParagraphSpec',
    'CoverLineSpec',

    # Template implementations
    'BookPdfTemplate',
]
