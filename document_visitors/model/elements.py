"""In-memory representation of document content elements."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from document_visitors.visitors.base import DocumentVisitor

DEFAULT_FONT_FAMILY = "Arial"
DEFAULT_FONT_SIZE = 12


class DocumentElement(ABC):
    """Block element that can dispatch itself to a visitor."""

    __slots__ = ()

    @abstractmethod
    def accept(self, visitor: "DocumentVisitor") -> None:
        """Route this element to the visitor handler for its own type."""


@dataclass(slots=True)
class Paragraph(DocumentElement):
    """Run of text rendered with a single font."""

    text: str
    font_family: str = DEFAULT_FONT_FAMILY
    font_size: int = DEFAULT_FONT_SIZE

    def accept(self, visitor: "DocumentVisitor") -> None:
        visitor.visit_paragraph(self)


@dataclass(slots=True)
class Image(DocumentElement):
    """An image reference with pixel dimensions."""

    url: str
    width: int
    height: int
    alt: str = ""

    def accept(self, visitor: "DocumentVisitor") -> None:
        visitor.visit_image(self)


@dataclass(slots=True)
class Table(DocumentElement):
    """Fixed-size grid whose cells start out as ``C{row},{col}`` labels.

    The grid is built once from ``rows`` and ``columns`` and is never resized.
    Non-positive dimensions simply yield an empty grid; judging them is left
    to :class:`~document_visitors.visitors.validation.ValidationVisitor`.
    """

    rows: int
    columns: int
    cells: List[List[str]] = field(init=False)

    def __post_init__(self) -> None:
        self.cells = [[f"C{row},{col}" for col in range(self.columns)] for row in range(self.rows)]

    def accept(self, visitor: "DocumentVisitor") -> None:
        visitor.visit_table(self)
