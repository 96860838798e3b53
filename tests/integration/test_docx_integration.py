"""
Integration tests for the flowing (DOCX) renderer.

Renders real documents with python-docx and reads them back.
"""

import io

import pytest

# Skip if dependencies not available
docx = pytest.importorskip("docx")

from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Twips

from core.book_export.models import BookExportModel, ChapterExport, BlockType
from core.book_export.normalizer import BookNormalizer
from core.book_export.records import BookRecord
from core.docx_engine import FlowDocumentRenderer, build_blocks


@pytest.fixture
def renderer():
    return FlowDocumentRenderer(font_name="Calibri")


@pytest.fixture
def three_chapter_model(three_chapter_book):
    return BookNormalizer().from_record(BookRecord.model_validate(three_chapter_book))


@pytest.fixture
def single_chapter_model(single_chapter_book):
    return BookNormalizer().from_record(BookRecord.model_validate(single_chapter_book))


def load(content: bytes):
    return docx.Document(io.BytesIO(content))


def is_page_break(para) -> bool:
    return bool(para._p.xpath('.//w:br[@w:type="page"]'))


def texts(document):
    return [p.text for p in document.paragraphs if p.text]


# ==================== Block stream ====================


class TestBuildBlocks:
    """Linear block stream with explicit page breaks."""

    def test_section_order(self, three_chapter_model):
        blocks = build_blocks(three_chapter_model)
        breaks = [i for i, b in enumerate(blocks) if b.type == BlockType.PAGE_BREAK]

        # title | toc | ch1 | ch2 | ch3 | back matter
        assert len(breaks) == 5
        sections = []
        start = 0
        for i in breaks + [len(blocks)]:
            sections.append([b.style_hints.get("role") for b in blocks[start:i]])
            start = i + 1

        assert sections[0] == ["book_title", "byline", "genre"]
        assert sections[1] == ["toc_heading", "toc_entry", "toc_entry", "toc_entry"]
        assert sections[2][:2] == ["chapter_label", "chapter_title"]
        assert sections[5][0] == "about_heading"

    def test_single_chapter_still_has_toc(self, single_chapter_model):
        roles = [b.style_hints.get("role") for b in build_blocks(single_chapter_model)]
        assert "toc_heading" in roles
        assert roles.count("toc_entry") == 1

    def test_no_break_after_last_chapter_besides_back_matter(self, single_chapter_model):
        blocks = build_blocks(single_chapter_model)
        breaks = [b for b in blocks if b.type == BlockType.PAGE_BREAK]
        # after title, after toc, before back matter
        assert len(breaks) == 3


# ==================== Rendered document ====================


class TestDocxRender:

    def test_returns_docx_bytes(self, renderer, three_chapter_model):
        content = renderer.render(three_chapter_model)
        assert content.startswith(b"PK")
        assert load(content).paragraphs

    def test_title_section(self, renderer, three_chapter_model):
        lines = texts(load(renderer.render(three_chapter_model)))
        assert lines[:3] == ["The Lighthouse Keeper", "by Miriam Cohen", "Literary Fiction"]

    def test_title_formatting(self, renderer, three_chapter_model):
        doc = load(renderer.render(three_chapter_model))
        title = next(p for p in doc.paragraphs if p.text == "The Lighthouse Keeper")
        run = title.runs[0]

        assert title.alignment == WD_ALIGN_PARAGRAPH.CENTER
        assert run.bold
        assert run.font.size.pt == 36
        assert run.font.name == "Calibri"

        genre = next(p for p in doc.paragraphs if p.text == "Literary Fiction")
        assert genre.runs[0].italic

    def test_table_of_contents(self, renderer, three_chapter_model):
        lines = texts(load(renderer.render(three_chapter_model)))
        start = lines.index("Table of Contents")
        assert lines[start + 1:start + 4] == ["1. Alpha", "2. Beta", "3. Gamma"]

    def test_single_chapter_has_toc(self, renderer, single_chapter_model):
        lines = texts(load(renderer.render(single_chapter_model)))
        assert "Table of Contents" in lines
        assert "1. Only Chapter" in lines

    def test_chapters_in_order(self, renderer, three_chapter_model):
        lines = texts(load(renderer.render(three_chapter_model)))
        labels = [line for line in lines if line.startswith("Chapter ")]
        assert labels == ["Chapter 1", "Chapter 2", "Chapter 3"]

        positions = [lines.index(f"Chapter {n}") for n in (1, 2, 3)]
        for position, title in zip(positions, ["Alpha", "Beta", "Gamma"]):
            assert lines[position + 1] == title

    def test_headings_use_heading_style(self, renderer, three_chapter_model):
        doc = load(renderer.render(three_chapter_model))
        headings = [p.text for p in doc.paragraphs if p.style.name == "Heading 1"]
        assert headings == [
            "Table of Contents", "Chapter 1", "Chapter 2", "Chapter 3", "About This Book",
        ]

    def test_body_paragraphs(self, renderer, three_chapter_model):
        doc = load(renderer.render(three_chapter_model))
        body = next(p for p in doc.paragraphs if p.text == "First light.")
        second = next(p for p in doc.paragraphs if p.text == "The tide turns.")

        assert body.alignment == WD_ALIGN_PARAGRAPH.JUSTIFY
        assert body.paragraph_format.line_spacing == 1.5
        assert body.runs[0].font.size.pt == 12
        assert second is not body

    def test_page_breaks(self, renderer, three_chapter_model, single_chapter_model):
        doc = load(renderer.render(three_chapter_model))
        assert sum(is_page_break(p) for p in doc.paragraphs) == 5

        doc = load(renderer.render(single_chapter_model))
        assert sum(is_page_break(p) for p in doc.paragraphs) == 3

    def test_back_matter(self, renderer, three_chapter_model):
        lines = texts(load(renderer.render(three_chapter_model)))
        assert lines[-3:] == [
            "About This Book",
            "A keeper, a storm and a lamp that never goes out.",
            "12,500 words • 3 chapters",
        ]

    def test_back_matter_without_description(self, renderer, single_chapter_model):
        doc = load(renderer.render(single_chapter_model))
        lines = texts(doc)
        assert lines[-2:] == ["About This Book", "12,500 words • 1 chapters"]
        assert doc.paragraphs[-1].runs[0].italic

    def test_page_geometry(self, renderer, three_chapter_model):
        section = load(renderer.render(three_chapter_model)).sections[0]
        assert section.page_width == Twips(8391)
        assert section.page_height == Twips(11906)
        assert section.left_margin == Twips(1440)
        assert section.top_margin == Twips(1440)

    def test_core_properties(self, renderer, three_chapter_model):
        props = load(renderer.render(three_chapter_model)).core_properties
        assert props.title == "The Lighthouse Keeper"
        assert props.author == "Miriam Cohen"
        assert props.subject == "Literary Fiction"

    def test_deterministic_length(self, renderer, three_chapter_model):
        first = renderer.render(three_chapter_model)
        second = renderer.render(three_chapter_model)
        assert abs(len(first) - len(second)) <= 16


# ==================== Edge cases ====================


class TestDocxEdgeCases:

    def test_no_chapters(self, renderer):
        model = BookExportModel(title="Empty", author_name="A", genre="G")
        lines = texts(load(renderer.render(model)))
        assert "Table of Contents" in lines
        assert "About This Book" in lines

    def test_line_breaks_inside_paragraph(self, renderer):
        model = BookExportModel(
            title="T", author_name="A", genre="G",
            chapters=[ChapterExport(title="Poem", content="Roses are red\nviolets are blue")],
        )
        doc = load(renderer.render(model))
        poem = next(p for p in doc.paragraphs if "Roses" in p.text)
        assert poem.text == "Roses are red\nviolets are blue"

    def test_localized_labels(self, renderer):
        model = BookExportModel(
            title="T", author_name="A", genre="G", language="fr",
            chapters=[ChapterExport(title="Un", content="Texte.")],
        )
        lines = texts(load(renderer.render(model)))
        assert "Table des matières" in lines
        assert "Chapitre 1" in lines
        assert "par A" in lines

    def test_control_characters_in_content(self, renderer, three_chapter_book):
        three_chapter_book["chapters"][0]["content"] = (
            "<p>Page\x0cbreak and bell\x07 and nul\x00</p>"
        )
        model = BookNormalizer().from_record(BookRecord.model_validate(three_chapter_book))

        lines = texts(load(renderer.render(model)))
        assert "Pagebreak and bell and nul" in lines

    def test_control_characters_in_title_and_author(self, renderer):
        model = BookExportModel(
            title="T\x01itle", author_name="Ann\x07 Lee", genre="G\x1b",
            chapters=[ChapterExport(title="One\x0b", content="Text\x0c.")],
        )
        doc = load(renderer.render(model))
        lines = texts(doc)

        assert "Title" in lines
        assert "by Ann Lee" in lines
        assert "One" in lines
        assert "Text." in lines
        assert doc.core_properties.title == "Title"
        assert doc.core_properties.author == "Ann Lee"
