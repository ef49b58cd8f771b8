"""Exceptions raised by the document analysis entry points."""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for every failure reported by :func:`printcheck.analyze`."""


class InvalidInputKind(AnalysisError):
    """The input is empty or is not a PDF."""


class UnsupportedDocumentKind(AnalysisError):
    """The document is valid but cannot be analyzed (e.g. password protected)."""


class DocumentProcessingError(AnalysisError):
    """The document engine failed to decode the document or its first page."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
