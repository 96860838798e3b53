"""
Layout Engine - Handles document-level layout: page geometry and document properties.
"""

import logging

from docx.document import Document

from core.book_export.models import BookExportModel
from core.book_export.sanitizer import strip_control_chars
from .templates.base import DocxTemplate

logger = logging.getLogger(__name__)


class LayoutEngine:
    """
    Handles document-level layout concerns:
    - Page setup (size, margins)
    - Core document properties (title, author, subject, keywords)
    """

    def __init__(self, document: Document, template: DocxTemplate):
        self.doc = document
        self.template = template

    def setup_document(self, model: BookExportModel):
        """Configure page setup and document properties"""
        page_setup = self.template.get_page_setup()

        for section in self.doc.sections:
            # Page size
            section.page_width = page_setup.width
            section.page_height = page_setup.height

            # Margins
            section.top_margin = page_setup.top_margin
            section.bottom_margin = page_setup.bottom_margin
            section.left_margin = page_setup.left_margin
            section.right_margin = page_setup.right_margin

        self.set_core_properties(model)

    def set_core_properties(self, model: BookExportModel):
        props = self.doc.core_properties
        props.title = strip_control_chars(model.title)
        props.author = strip_control_chars(model.author_name)
        props.subject = strip_control_chars(model.genre)
        props.keywords = strip_control_chars(model.genre)
        props.language = model.language
