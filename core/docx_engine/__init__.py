"""
DOCX Engine - Reflowable book export using python-docx.

Renders a BookExportModel as a linear stream of styled paragraphs
separated by explicit page breaks.
"""

from .renderer import FlowDocumentRenderer, build_blocks
from .style_mapper import StyleMapper
from .layout_engine import LayoutEngine
from .templates import (
    DocxTemplate,
    PageSetup,
    ParagraphSpec,
    FontSpec,
    BookDocxTemplate,
)

__all__ = [
    # Main classes
    'FlowDocumentRenderer',
    'build_blocks',
    'StyleMapper',
    'LayoutEngine',

    # Templates
    'DocxTemplate',
    'PageSetup',
    'ParagraphSpec',
    'FontSpec',
    'BookDocxTemplate',
]
