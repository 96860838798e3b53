#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== Typography ==========
    # Script fonts are looked up as NotoSans{Script}-Regular.ttf / -Bold.ttf
    fonts_dir: Path = BASE_DIR / "assets" / "fonts"
    default_script: str = "Hebrew"
    fallback_font: str = "Helvetica"
    fallback_bold_font: str = "Helvetica-Bold"
    font_load_timeout: float = 2.0  # seconds per font file

    # ========== Flowing (DOCX) output ==========
    docx_font: str = "Calibri"

    # ========== Paginated (PDF) output ==========
    pdf_creator: str = "Book Export Engine"
    pdf_invariant: bool = True  # strip timestamps / random ids from the PDF

    # ========== Book store ==========
    books_db_path: Path = BASE_DIR / "data" / "books.db"

    # ========== Logging ==========
    log_level: str = "INFO"

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model


@lru_cache()
def get_settings() -> Settings:
    return Settings()


# Global settings instance
settings = get_settings()
