"""Structural validation of document elements."""
from __future__ import annotations

from typing import List

from document_visitors.model.elements import Image, Paragraph, Table
from document_visitors.utils.logger import get_logger
from document_visitors.visitors.base import DocumentVisitor

LOGGER = get_logger(__name__)

MAX_PARAGRAPH_LENGTH = 1000


class ValidationVisitor(DocumentVisitor):
    """Flag a document as invalid when any element breaks a basic rule.

    Rules:

    * a paragraph needs non-empty text shorter than ``MAX_PARAGRAPH_LENGTH``;
    * an image needs a url and positive width and height;
    * a table needs positive row and column counts. Cell contents are not
      inspected.

    The flag starts out ``True`` and, once cleared, stays cleared. Every
    element is still visited so that :attr:`errors` lists all failures.
    """

    def __init__(self) -> None:
        self._is_valid = True
        self._errors: List[str] = []

    @property
    def is_valid(self) -> bool:
        return self._is_valid

    @property
    def errors(self) -> List[str]:
        """Reasons recorded for each failing element, in visit order."""
        return list(self._errors)

    def visit_paragraph(self, paragraph: Paragraph) -> None:
        if not paragraph.text:
            self._fail("paragraph has no text")
        elif len(paragraph.text) >= MAX_PARAGRAPH_LENGTH:
            self._fail(f"paragraph text has {len(paragraph.text)} characters (limit {MAX_PARAGRAPH_LENGTH - 1})")

    def visit_image(self, image: Image) -> None:
        if not image.url:
            self._fail("image has no url")
        elif image.width <= 0 or image.height <= 0:
            self._fail(f"image {image.url!r} has non-positive size {image.width}x{image.height}")

    def visit_table(self, table: Table) -> None:
        if table.rows <= 0 or table.columns <= 0:
            self._fail(f"table has non-positive dimensions {table.rows}x{table.columns}")

    def _fail(self, reason: str) -> None:
        LOGGER.debug("Validation failed: %s", reason)
        self._errors.append(reason)
        self._is_valid = False
