"""Export document elements as HTML fragments."""
from __future__ import annotations

from typing import List, Optional

from document_visitors.model.elements import Image, Paragraph, Table
from document_visitors.visitors.base import DocumentVisitor


def _value(value: Optional[object]) -> str:
    """Format an attribute for interpolation; a missing value renders as nothing."""
    return "" if value is None else str(value)


class HtmlExportVisitor(DocumentVisitor):
    """Collect one HTML fragment per visited element.

    Attribute values and text are inserted verbatim; nothing is escaped.
    """

    def __init__(self) -> None:
        self._parts: List[str] = []

    def get_result(self) -> str:
        """Return the fragments gathered so far as a single string."""
        return "".join(self._parts)

    def visit_paragraph(self, paragraph: Paragraph) -> None:
        self._parts.append(
            f"<p style='font-family:{_value(paragraph.font_family)};font-size:{_value(paragraph.font_size)}px'>"
            f"{_value(paragraph.text)}</p>"
        )

    def visit_image(self, image: Image) -> None:
        self._parts.append(
            f"<img src='{_value(image.url)}' width='{image.width}' height='{image.height}' "
            f"alt='{_value(image.alt)}' />"
        )

    def visit_table(self, table: Table) -> None:
        rows = ["<tr>" + "".join(f"<td>{_value(cell)}</td>" for cell in row) + "</tr>" for row in table.cells]
        self._parts.append("<table>" + "".join(rows) + "</table>")
