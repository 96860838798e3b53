"""
DOCX Template module exports.
"""

from .base import (
    DocxTemplate,
    PageSetup,
    ParagraphSpec,
    FontSpec,
)

from .book import BookDocxTemplate


__all__ = [
    # Base classes
    'DocxTemplate',
    'PageSetup',
    'ParagraphSpec',
    'FontSpec',

    # Template implementations
    'BookDocxTemplate',
]
