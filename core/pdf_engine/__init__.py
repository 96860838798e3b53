"""
PDF Engine - Paginated book export using ReportLab.

This module provides:
- The book PDF template (A5 pages, coloured covers)
- Script font resolution with per-weight fallback
- Style building from templates
- PDF rendering from a BookExportModel

Usage:
    from core.pdf_engine import PageDocumentRenderer, TypographyRegistry, TypographyConfig

    registry = TypographyRegistry(TypographyConfig.from_settings(settings))
    renderer = PageDocumentRenderer(registry)
    pdf_bytes = renderer.render(model)

Key components:
- PageDocumentRenderer: Main renderer class
- TypographyRegistry: Font resolution, once per export
- StyleBuilder: Style conversion
- PdfTemplate: Abstract base for templates
"""

from .renderer import PageDocumentRenderer, PageState, page_sequence
from .style_builder import (
    TypographyRegistry,
    TypographyConfig,
    FontHandle,
    FontPair,
    StyleBuilder,
    script_for_language,
)
from .templates import (
    PdfTemplate,
    PageSpec,
    FontSpec,
    ParagraphSpec,
    CoverLineSpec,
    BookPdfTemplate,
)


__all__ = [
    # Main renderer
    'PageDocumentRenderer',
    'PageState',
    'page_sequence',

    # Fonts and styles
    'TypographyRegistry',
    'TypographyConfig',
    'FontHandle',
    'FontPair',
    'StyleBuilder',
    'script_for_language',

    # Templates
    'PdfTemplate',
    'PageSpec',
    'FontSpec',
    'ParagraphSpec',
    'CoverLineSpec',
    'BookPdfTemplate',
]
