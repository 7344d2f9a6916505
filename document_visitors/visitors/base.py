"""Visitor contract shared by every document operation."""
from __future__ import annotations

from abc import ABC, abstractmethod

from document_visitors.model.elements import Image, Paragraph, Table


class DocumentVisitor(ABC):
    """One handler per element type.

    Handlers return nothing; each operation keeps its result in its own
    accumulator and exposes it once the traversal is over. A new element type
    needs a new handler here and in every concrete visitor.
    """

    @abstractmethod
    def visit_paragraph(self, paragraph: Paragraph) -> None:
        """Handle a paragraph element."""

    @abstractmethod
    def visit_image(self, image: Image) -> None:
        """Handle an image element."""

    @abstractmethod
    def visit_table(self, table: Table) -> None:
        """Handle a table element."""
