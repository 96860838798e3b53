"""
Download names and content types for exported books.
"""

import re

_UNSAFE_CHARS = re.compile("[^a-zA-Z0-9\u0590-\u05FF]")

CONTENT_TYPES = {
    "pdf": "application/pdf",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


def safe_filename(title: str, default: str = "book") -> str:
    """
    Make a title safe for file systems and Content-Disposition headers.

    Every character outside ASCII letters, digits and the Hebrew block
    becomes '_'.

    Examples:
        safe_filename("My Book: Part 1") -> "My_Book__Part_1"
        safe_filename("") -> "book"
    """
    if not title:
        return default
    return _UNSAFE_CHARS.sub("_", title)


def download_name(title: str, extension: str) -> str:
    return f"{safe_filename(title)}.{extension}"
