"""Count words across the text-bearing elements of a document."""
from __future__ import annotations

from document_visitors.model.elements import Image, Paragraph, Table
from document_visitors.visitors.base import DocumentVisitor

WORD_SEPARATOR = " "


def count_words(text: str) -> int:
    """Count tokens separated by plain spaces, ignoring empty ones.

    Only the space character separates words: ``"a\\tb"`` is a single word.
    ``text`` must be a string; ``None`` raises ``AttributeError``.
    """
    return sum(1 for token in text.split(WORD_SEPARATOR) if token)


class WordCountVisitor(DocumentVisitor):
    """Running word total over paragraphs and table cells."""

    def __init__(self) -> None:
        self._total_words = 0

    @property
    def total_words(self) -> int:
        return self._total_words

    def visit_paragraph(self, paragraph: Paragraph) -> None:
        self._total_words += count_words(paragraph.text)

    def visit_image(self, image: Image) -> None:
        # images carry no words
        pass

    def visit_table(self, table: Table) -> None:
        for row in table.cells:
            for cell in row:
                self._total_words += count_words(cell)
