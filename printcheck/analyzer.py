"""Print optimization analyzer.

Opens a PDF, samples its first page and reports whether printing it would
benefit from optimization (color content, large backgrounds, large images).
"""

from __future__ import annotations

import asyncio
import logging
import mimetypes
from pathlib import Path

from printcheck.classifier import classify
from printcheck.engine import (
    PasswordRequired,
    PrintDocument,
    open_document,
)
from printcheck.errors import (
    AnalysisError,
    DocumentProcessingError,
    InvalidInputKind,
    UnsupportedDocumentKind,
)
from printcheck.models import (
    DEFAULT_THRESHOLDS,
    Operator,
    OptimizationIssues,
    PageGeometry,
    ThresholdModel,
)

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"

# Only the first page is inspected.
SAMPLED_PAGE = 1


def is_supported_media_type(media_type: str | None) -> bool:
    """Return True for ``application/pdf``, ignoring case and parameters."""
    if not media_type:
        return False
    return media_type.split(";", 1)[0].strip().lower() == PDF_MEDIA_TYPE


class PrintAnalyzer:
    """Analyzes a PDF for content that is expensive to print.

    Usage::

        analyzer = PrintAnalyzer()
        issues = await analyzer.analyze(data, "application/pdf")
    """

    def __init__(self, thresholds: ThresholdModel | None = None) -> None:
        self.thresholds = thresholds or DEFAULT_THRESHOLDS

    async def analyze(self, document_bytes: bytes, media_type: str | None) -> OptimizationIssues:
        """Analyze *document_bytes* and return the issues found on its first page.

        Raises InvalidInputKind, UnsupportedDocumentKind or
        DocumentProcessingError.
        """
        try:
            return await self._analyze(document_bytes, media_type)
        except AnalysisError as exc:
            logger.error("Error analyzing PDF: %s", exc)
            raise

    def analyze_file(self, pdf_path: Path) -> OptimizationIssues:
        """Synchronously analyze the file at *pdf_path*.

        The media type is guessed from the file name.
        """
        media_type, _ = mimetypes.guess_type(pdf_path.name)
        return asyncio.run(self.analyze(pdf_path.read_bytes(), media_type))

    async def _analyze(self, document_bytes: bytes, media_type: str | None) -> OptimizationIssues:
        if not is_supported_media_type(media_type):
            raise InvalidInputKind(f"Invalid file type {media_type!r}. Expected PDF.")
        if not document_bytes:
            raise InvalidInputKind("Empty or invalid file")

        try:
            document = await asyncio.to_thread(open_document, document_bytes)
        except PasswordRequired as exc:
            raise UnsupportedDocumentKind(
                "Password protected PDFs are not supported"
            ) from exc
        except Exception as exc:
            raise DocumentProcessingError(f"Failed to open PDF: {exc}", exc) from exc

        try:
            with document:
                page_count = document.page_count
                operators, geometry = await asyncio.to_thread(
                    _read_sampled_page, document
                )
        except Exception as exc:
            raise DocumentProcessingError(
                f"Failed to read page {SAMPLED_PAGE}: {exc}", exc
            ) from exc

        accumulator = classify(operators, geometry, self.thresholds)
        return OptimizationIssues.from_accumulator(accumulator, page_count)


def _read_sampled_page(document: PrintDocument) -> tuple[tuple[Operator, ...], PageGeometry]:
    page = document.get_page(SAMPLED_PAGE)
    return page.operator_stream(), page.geometry()


async def analyze(
    document_bytes: bytes,
    media_type: str | None,
    thresholds: ThresholdModel | None = None,
) -> OptimizationIssues:
    """Analyze a PDF with *thresholds* (defaults when omitted)."""
    return await PrintAnalyzer(thresholds).analyze(document_bytes, media_type)
