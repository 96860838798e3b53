"""Tests for TypographyRegistry and StyleBuilder (core/pdf_engine/style_builder.py)."""

import logging
import shutil
import time
from pathlib import Path

import pytest

reportlab = pytest.importorskip("reportlab")

from reportlab.lib.colors import Color
from reportlab.pdfbase import pdfmetrics

from core.pdf_engine.style_builder import (
    TypographyRegistry, TypographyConfig, FontHandle, FontPair, StyleBuilder,
    script_for_language,
)
from core.pdf_engine.templates import BookPdfTemplate


VERA = Path(reportlab.__file__).parent / "fonts" / "Vera.ttf"


@pytest.fixture
def registry(fonts_dir):
    return TypographyRegistry(TypographyConfig(fonts_dir=fonts_dir))


def install_font(fonts_dir: Path, filename: str):
    if not VERA.exists():
        pytest.skip("Bundled Vera.ttf not available")
    shutil.copy(VERA, fonts_dir / filename)


# ==================== Script hints ====================


class TestScriptForLanguage:

    @pytest.mark.parametrize("lang,script", [
        ("he", "Hebrew"),
        ("HE", "Hebrew"),
        ("ar", "Arabic"),
        ("hi", "Devanagari"),
        ("en", None),
        (None, None),
    ])
    def test_mapping(self, lang, script):
        assert script_for_language(lang) == script


# ==================== Font resolution ====================


class TestResolveFonts:
    """Per-weight resolution with independent fallback."""

    def test_missing_files_fall_back(self, registry, caplog):
        with caplog.at_level(logging.WARNING):
            fonts = registry.resolve_fonts("Hebrew")

        assert fonts.body == FontHandle("Helvetica")
        assert fonts.bold == FontHandle("Helvetica-Bold")
        assert fonts.body.is_builtin
        assert "Font file not found" in caplog.text

    def test_custom_regular_without_bold(self, registry, fonts_dir):
        install_font(fonts_dir, "NotoSansHebrew-Regular.ttf")

        fonts = registry.resolve_fonts("Hebrew")

        assert fonts.body.name == "NotoSansHebrew"
        assert not fonts.body.is_builtin
        assert fonts.bold.name == "Helvetica-Bold"
        assert "NotoSansHebrew" in pdfmetrics.getRegisteredFontNames()

    def test_custom_bold_without_regular(self, registry, fonts_dir):
        install_font(fonts_dir, "NotoSansTestbold-Bold.ttf")

        fonts = registry.resolve_fonts("Testbold")

        assert fonts.body.name == "Helvetica"
        assert fonts.bold.name == "NotoSansTestbold-Bold"

    def test_default_script_when_no_hint(self, fonts_dir):
        install_font(fonts_dir, "NotoSansDefaulted-Regular.ttf")
        registry = TypographyRegistry(TypographyConfig(fonts_dir=fonts_dir, default_script="Defaulted"))

        assert registry.resolve_fonts(None).body.name == "NotoSansDefaulted"

    def test_already_registered_font_reused(self, registry, fonts_dir):
        install_font(fonts_dir, "NotoSansHebrew-Regular.ttf")
        first = registry.resolve_fonts("Hebrew")
        second = registry.resolve_fonts("Hebrew")
        assert first == second

    def test_unreadable_font_falls_back(self, registry, fonts_dir, caplog):
        (fonts_dir / "NotoSansBroken-Regular.ttf").write_bytes(b"not a font")

        with caplog.at_level(logging.WARNING):
            fonts = registry.resolve_fonts("Broken")

        assert fonts.body.name == "Helvetica"
        assert "Failed to load font" in caplog.text

    def test_slow_font_load_times_out(self, fonts_dir, monkeypatch):
        (fonts_dir / "NotoSansSlow-Regular.ttf").write_bytes(b"whatever")

        def slow_font(name, path):
            time.sleep(0.5)
            raise AssertionError("should have timed out")

        monkeypatch.setattr("core.pdf_engine.style_builder.TTFont", slow_font)
        registry = TypographyRegistry(TypographyConfig(fonts_dir=fonts_dir, load_timeout=0.05))

        assert registry.resolve_fonts("Slow").body.name == "Helvetica"

    def test_font_paths(self, registry, fonts_dir):
        assert registry.font_path("Hebrew", "bold") == fonts_dir / "NotoSansHebrew-Bold.ttf"
        assert registry.font_name("Hebrew", "regular") == "NotoSansHebrew"

    def test_config_from_settings(self, test_settings, fonts_dir):
        config = TypographyConfig.from_settings(test_settings)
        assert config.fonts_dir == fonts_dir
        assert config.fallback_bold == "Helvetica-Bold"


# ==================== StyleBuilder ====================


class TestStyleBuilder:

    @pytest.fixture
    def styles(self):
        fonts = FontPair(body=FontHandle("Helvetica"), bold=FontHandle("Helvetica-Bold"))
        white = Color(1, 1, 1)
        return StyleBuilder(BookPdfTemplate(), fonts, cover_text_color=white).build_all_styles()

    def test_weights_map_to_fonts(self, styles):
        assert styles["body"].fontName == "Helvetica"
        assert styles["chapter_label"].fontName == "Helvetica-Bold"

    def test_sizes(self, styles):
        assert styles["body"].fontSize == 11
        assert styles["chapter_label"].fontSize == 22
        assert styles["cover_title"].fontSize == 36

    def test_cover_styles_use_cover_text_color(self, styles):
        assert styles["cover_title"].textColor.rgb() == (1, 1, 1)
        assert styles["body"].textColor.rgb() == (0, 0, 0)

    def test_every_cover_layout_style_exists(self, styles):
        for side in BookPdfTemplate().get_cover_layout().values():
            for spec in side.values():
                assert spec.style in styles
