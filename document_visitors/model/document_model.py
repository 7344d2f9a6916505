"""Document container that drives visitor traversal."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, List

from document_visitors.model.elements import DocumentElement
from document_visitors.utils.logger import get_logger

if TYPE_CHECKING:
    from document_visitors.visitors.base import DocumentVisitor

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class Document:
    """Ordered, append-only collection of block elements."""

    title: str = ""
    elements: List[DocumentElement] = field(default_factory=list, init=False)

    def add_element(self, element: DocumentElement) -> None:
        """Append an element; insertion order is traversal order."""
        self.elements.append(element)

    def accept(self, visitor: "DocumentVisitor") -> None:
        """Dispatch every element, in order, to ``visitor``.

        Each element is visited exactly once per call and the loop never stops
        early, whatever state the visitor has reached. Visitors accumulate
        across calls, so pass a fresh instance unless a running total over
        several traversals is wanted.
        """
        LOGGER.debug(
            "Applying %s to %d elements of %r",
            type(visitor).__name__,
            len(self.elements),
            self.title,
        )
        for element in self.elements:
            element.accept(visitor)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[DocumentElement]:
        return iter(self.elements)
