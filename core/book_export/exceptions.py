"""
Book Export Custom Exceptions
"""


class BookExportError(Exception):
    """Base exception for book export"""
    pass


class BookNotFoundError(BookExportError):
    """Book identifier does not resolve to a stored book"""
    def __init__(self, book_id: str):
        self.book_id = book_id
        super().__init__(f"Book not found: {book_id}")


class UnsupportedFormatError(BookExportError, ValueError):
    """Requested export format is not one of the known formats"""
    def __init__(self, value, supported: list):
        self.value = value
        self.supported = supported
        super().__init__(
            f"Invalid format: {value!r}. Supported formats: {', '.join(supported)}"
        )


class RenderError(BookExportError):
    """Document assembly failed inside the rendering library"""
    def __init__(self, fmt: str, message: str):
        self.format = fmt
        super().__init__(f"[{fmt}] {message}")
