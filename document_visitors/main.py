"""Command-line demo: build a sample report and run every visitor over it."""
from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from document_visitors.model.document_model import Document
from document_visitors.model.elements import Image, Paragraph, Table
from document_visitors.utils.logger import get_logger, set_level
from document_visitors.visitors.html_export import HtmlExportVisitor
from document_visitors.visitors.validation import ValidationVisitor
from document_visitors.visitors.word_count import WordCountVisitor

LOGGER = get_logger(__name__)

DEFAULT_PREVIEW_LENGTH = 80


@dataclass(slots=True)
class DocumentSummary:
    """Results of one pass of each visitor over a document."""

    html: str
    word_count: int
    is_valid: bool
    errors: List[str]


def build_sample_document() -> Document:
    """Assemble the sample report: one paragraph, one image, one 3x4 table."""
    document = Document(title="Relatório")
    document.add_element(Paragraph("Texto do relatório."))
    document.add_element(Image("grafico.png", 800, 600))
    document.add_element(Table(3, 4))
    return document


def summarize(document: Document) -> DocumentSummary:
    """Run each visitor over ``document`` with a fresh instance per traversal."""
    html_visitor = HtmlExportVisitor()
    document.accept(html_visitor)

    word_visitor = WordCountVisitor()
    document.accept(word_visitor)

    validation_visitor = ValidationVisitor()
    document.accept(validation_visitor)

    return DocumentSummary(
        html=html_visitor.get_result(),
        word_count=word_visitor.total_words,
        is_valid=validation_visitor.is_valid,
        errors=validation_visitor.errors,
    )


def format_summary(summary: DocumentSummary, preview_length: int = DEFAULT_PREVIEW_LENGTH) -> List[str]:
    """Render the summary as the lines printed by the demo."""
    return [
        f"HTML: {summary.html[:preview_length]}...",
        f"Words: {summary.word_count}",
        f"Valid: {summary.is_valid}",
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the HTML, word count and validation visitors on a sample document")
    parser.add_argument(
        "--preview-length",
        type=int,
        default=DEFAULT_PREVIEW_LENGTH,
        help="Number of HTML characters to print",
    )
    parser.add_argument("--verbose", action="store_true", help="Log traversal details")
    args = parser.parse_args(argv)

    if args.preview_length < 0:
        parser.error("--preview-length must not be negative")
    if args.verbose:
        set_level(logging.DEBUG)

    document = build_sample_document()
    LOGGER.info("Summarizing %r with %d elements", document.title, len(document))
    summary = summarize(document)
    for error in summary.errors:
        LOGGER.warning("Invalid element: %s", error)

    for line in format_summary(summary, args.preview_length):
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
