"""Tests for the HTML export visitor."""
import unittest

from document_visitors.model.document_model import Document
from document_visitors.model.elements import Image, Paragraph, Table
from document_visitors.visitors.html_export import HtmlExportVisitor


class HtmlExportVisitorTest(unittest.TestCase):
    """Check the exact markup emitted for each element type."""

    def setUp(self) -> None:
        self.visitor = HtmlExportVisitor()

    def test_empty_result_before_traversal(self) -> None:
        self.assertEqual(self.visitor.get_result(), "")

    def test_paragraph_uses_font_settings(self) -> None:
        Paragraph("Hi there", font_family="Verdana", font_size=9).accept(self.visitor)
        self.assertEqual(
            self.visitor.get_result(),
            "<p style='font-family:Verdana;font-size:9px'>Hi there</p>",
        )

    def test_paragraph_text_is_not_escaped(self) -> None:
        Paragraph("<b>a & b</b>").accept(self.visitor)
        self.assertEqual(
            self.visitor.get_result(),
            "<p style='font-family:Arial;font-size:12px'><b>a & b</b></p>",
        )

    def test_missing_text_and_url_render_empty(self) -> None:
        Paragraph(None).accept(self.visitor)  # type: ignore[arg-type]
        image = Image(None, 1, 1)  # type: ignore[arg-type]
        image.alt = None  # type: ignore[assignment]
        image.accept(self.visitor)
        self.assertEqual(
            self.visitor.get_result(),
            "<p style='font-family:Arial;font-size:12px'></p>"
            "<img src='' width='1' height='1' alt='' />",
        )

    def test_none_cell_renders_empty(self) -> None:
        table = Table(1, 1)
        table.cells[0][0] = None  # type: ignore[index]
        table.accept(self.visitor)
        self.assertEqual(self.visitor.get_result(), "<table><tr><td></td></tr></table>")

    def test_image_attributes_rendered_as_is(self) -> None:
        image = Image("pic.png", -1, 30)
        image.alt = "chart"
        image.accept(self.visitor)
        self.assertEqual(
            self.visitor.get_result(),
            "<img src='pic.png' width='-1' height='30' alt='chart' />",
        )

    def test_table_rows_and_cells_in_row_major_order(self) -> None:
        Table(2, 2).accept(self.visitor)
        self.assertEqual(
            self.visitor.get_result(),
            "<table>"
            "<tr><td>C0,0</td><td>C0,1</td></tr>"
            "<tr><td>C1,0</td><td>C1,1</td></tr>"
            "</table>",
        )

    def test_empty_table(self) -> None:
        Table(0, 3).accept(self.visitor)
        self.assertEqual(self.visitor.get_result(), "<table></table>")

    def test_document_fragments_concatenated_in_order(self) -> None:
        document = Document()
        document.add_element(Image("a.png", 1, 2))
        document.add_element(Paragraph("x"))
        document.accept(self.visitor)
        self.assertEqual(
            self.visitor.get_result(),
            "<img src='a.png' width='1' height='2' alt='' />"
            "<p style='font-family:Arial;font-size:12px'>x</p>",
        )

    def test_reused_visitor_keeps_appending(self) -> None:
        document = Document()
        document.add_element(Paragraph("x"))
        document.accept(self.visitor)
        document.accept(self.visitor)
        fragment = "<p style='font-family:Arial;font-size:12px'>x</p>"
        self.assertEqual(self.visitor.get_result(), fragment * 2)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
