#!/usr/bin/env python3
"""
Book Export CLI - Render a stored book to PDF or DOCX.

Usage:
    python -m scripts.export_book BOOK_ID --format pdf              # from the SQLite store
    python -m scripts.export_book BOOK_ID --format docx --json b.json
    python -m scripts.export_book --list                            # list stored book ids

The output file is named after the book title: <safe title>.<pdf|docx>.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import get_settings
from core.book_export.dispatcher import ExportDispatcher
from core.book_export.exceptions import BookNotFoundError, UnsupportedFormatError
from core.book_export.repository import InMemoryBookRepository, SQLiteBookRepository

logger = logging.getLogger(__name__)


def load_json_repository(path: Path, book_id: str) -> InMemoryBookRepository:
    """
    Build a one-off store from a JSON file.

    The file holds either a single book (stored under book_id) or an
    object mapping book ids to books.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} must hold a JSON object, got {type(data).__name__}")
    if "chapters" in data or "title" in data:
        return InMemoryBookRepository({book_id: data})
    return InMemoryBookRepository(data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Book Export Engine - export a book to PDF or DOCX")
    parser.add_argument("book_id", nargs="?", help="Identifier of the book to export")
    parser.add_argument("--format", "-f", default="pdf", help="pdf, docx, page or flow (default: pdf)")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--db", type=str, help="SQLite book store (default: settings.books_db_path)")
    source.add_argument("--json", type=str, help="Read the book from a JSON file instead of the store")
    parser.add_argument("--output", "-o", type=str, default=".", help="Output directory")
    parser.add_argument("--list", action="store_true", help="List book ids in the store")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format="%(message)s")

    if args.json:
        if not args.book_id:
            parser.error("book_id is required with --json")
        try:
            repository = load_json_repository(Path(args.json), args.book_id)
        except ValueError as e:
            parser.error(str(e))
    else:
        repository = SQLiteBookRepository(args.db or settings.books_db_path)

    if args.list:
        ids = repository.list_ids()
        if not ids:
            print("No books found.")
        else:
            print(f"Found {len(ids)} book(s):")
            for book_id in ids:
                print(f"  {book_id}")
        return 0

    if not args.book_id:
        parser.error("book_id is required")

    dispatcher = ExportDispatcher(repository, settings=settings)
    try:
        artifact = dispatcher.export_artifact(args.book_id, args.format)
    except (BookNotFoundError, UnsupportedFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / artifact.filename
    output_path.write_bytes(artifact.content)

    print(f"Exported: {output_path} ({artifact.size} bytes)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
