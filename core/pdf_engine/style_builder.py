"""
Font management and style building utilities for PDF rendering.

This module handles:
- Script-specific font discovery and registration (TypographyRegistry)
- Independent per-weight fallback to the built-in family
- ReportLab ParagraphStyle creation from template specs
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from reportlab.lib.colors import Color, black
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from .templates.base import PdfTemplate, ParagraphSpec


logger = logging.getLogger(__name__)


# Language code -> Noto Sans script family suffix
SCRIPT_BY_LANGUAGE = {
    'he': 'Hebrew',
    'yi': 'Hebrew',
    'ar': 'Arabic',
    'fa': 'Arabic',
    'ur': 'Arabic',
    'hi': 'Devanagari',
    'mr': 'Devanagari',
    'th': 'Thai',
}


def script_for_language(language: Optional[str]) -> Optional[str]:
    """Map a language code to a script hint, or None if it has no dedicated font."""
    if not language:
        return None
    return SCRIPT_BY_LANGUAGE.get(language.lower())


@dataclass(frozen=True)
class TypographyConfig:
    """Where script fonts live and what to use when they are missing."""
    fonts_dir: Path
    default_script: str = "Hebrew"
    fallback_regular: str = "Helvetica"
    fallback_bold: str = "Helvetica-Bold"
    load_timeout: float = 2.0

    @classmethod
    def from_settings(cls, settings) -> 'TypographyConfig':
        return cls(
            fonts_dir=Path(settings.fonts_dir),
            default_script=settings.default_script,
            fallback_regular=settings.fallback_font,
            fallback_bold=settings.fallback_bold_font,
            load_timeout=settings.font_load_timeout,
        )


@dataclass(frozen=True)
class FontHandle:
    """A font name usable in ParagraphStyle.fontName."""
    name: str
    path: Optional[str] = None  # None for ReportLab's built-in faces

    @property
    def is_builtin(self) -> bool:
        return self.path is None


@dataclass(frozen=True)
class FontPair:
    """Fonts resolved for one export."""
    body: FontHandle
    bold: FontHandle

    def for_weight(self, weight: str) -> FontHandle:
        return self.bold if weight == "bold" else self.body


class TypographyRegistry:
    """
    Resolves the body and bold fonts for an export.

    For a script hint such as 'Hebrew' it looks for
    NotoSansHebrew-Regular.ttf and NotoSansHebrew-Bold.ttf in the
    configured fonts directory. Each weight falls back to the built-in
    family on its own, so a missing bold file never disables the
    regular custom font.

    Usage:
        registry = TypographyRegistry(TypographyConfig.from_settings(settings))
        fonts = registry.resolve_fonts("Hebrew")
        fonts.body.name   # 'NotoSansHebrew' or 'Helvetica'
    """

    FACES = {
        'regular': 'Regular',
        'bold': 'Bold',
    }

    def __init__(self, config: TypographyConfig):
        self.config = config
        # pdfmetrics is process-wide; concurrent exports share it
        self._lock = threading.Lock()

    def font_path(self, script: str, weight: str) -> Path:
        return self.config.fonts_dir / f"NotoSans{script}-{self.FACES[weight]}.ttf"

    def font_name(self, script: str, weight: str) -> str:
        base = f"NotoSans{script}"
        return f"{base}-Bold" if weight == 'bold' else base

    def resolve_fonts(self, script_hint: Optional[str] = None) -> FontPair:
        """
        Resolve regular and bold fonts for a script.

        Args:
            script_hint: Script family suffix (e.g. 'Hebrew'); None uses the default script

        Returns:
            FontPair with a usable font for each weight
        """
        script = script_hint or self.config.default_script
        fonts = FontPair(
            body=self._resolve(script, 'regular', self.config.fallback_regular),
            bold=self._resolve(script, 'bold', self.config.fallback_bold),
        )
        logger.debug(f"Resolved fonts for {script}: {fonts.body.name} / {fonts.bold.name}")
        return fonts

    def _resolve(self, script: str, weight: str, fallback: str) -> FontHandle:
        path = self.font_path(script, weight)
        if not path.is_file():
            logger.warning(f"Font file not found: {path}, using {fallback}")
            return FontHandle(fallback)

        name = self.font_name(script, weight)
        with self._lock:
            if name in pdfmetrics.getRegisteredFontNames():
                return FontHandle(name, str(path))

            font = self._load_font(name, path)
            if font is None:
                return FontHandle(fallback)

            pdfmetrics.registerFont(font)
        logger.debug(f"Registered font: {name} from {path}")
        return FontHandle(name, str(path))

    def _load_font(self, name: str, path: Path) -> Optional[TTFont]:
        """Parse a TTF file, giving up after the configured timeout."""
        executor = ThreadPoolExecutor(max_workers=1)
        try:
            future = executor.submit(TTFont, name, str(path))
            return future.result(timeout=self.config.load_timeout)
        except FutureTimeoutError:
            logger.warning(f"Loading font {path} took longer than {self.config.load_timeout}s")
            return None
        except Exception as e:
            logger.warning(f"Failed to load font {name} from {path}: {e}")
            return None
        finally:
            executor.shutdown(wait=False)


class StyleBuilder:
    """
    Builds ReportLab ParagraphStyles from template specifications.

    Converts ParagraphSpec dataclasses to ReportLab-compatible styles,
    using the fonts resolved for the current export. Specs without a
    colour take the cover text colour.
    """

    def __init__(
        self,
        template: PdfTemplate,
        fonts: FontPair,
        cover_text_color: Color = black
    ):
        self.template = template
        self.fonts = fonts
        self.cover_text_color = cover_text_color
        self._styles: Dict[str, ParagraphStyle] = {}

    def build_paragraph_style(self, name: str, spec: ParagraphSpec) -> ParagraphStyle:
        font = spec.font
        return ParagraphStyle(
            name=name,
            fontName=self.fonts.for_weight(font.weight).name,
            fontSize=font.size,
            leading=font.leading,
            textColor=font.color if font.color is not None else self.cover_text_color,
            alignment=spec.alignment,
            spaceBefore=spec.space_before,
            spaceAfter=spec.space_after,
            keepWithNext=spec.keep_with_next,
        )

    def build_all_styles(self) -> Dict[str, ParagraphStyle]:
        """
        Build all styles defined in the template.

        Returns:
            Dict mapping style names to ParagraphStyles
        """
        if self._styles:
            return self._styles

        for name, spec in self.template.get_styles().items():
            self._styles[name] = self.build_paragraph_style(name, spec)

        return self._styles
