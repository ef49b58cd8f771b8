"""FastAPI application exposing the print analysis over HTTP."""

from __future__ import annotations

from fastapi import FastAPI, File, HTTPException, UploadFile

from printcheck.analyzer import PrintAnalyzer
from printcheck.errors import (
    DocumentProcessingError,
    InvalidInputKind,
    UnsupportedDocumentKind,
)
from printcheck.models import ThresholdModel
from printcheck.reporter import report_data


def create_app(thresholds: ThresholdModel | None = None) -> FastAPI:
    """Create and return the FastAPI application."""
    app = FastAPI(title="printcheck", docs_url=None, redoc_url=None)
    analyzer = PrintAnalyzer(thresholds)

    @app.get("/api/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.post("/api/analyze")
    async def analyze(file: UploadFile = File(...)) -> dict:
        """Analyze an uploaded PDF and return its print issues."""
        contents = await file.read()
        try:
            issues = await analyzer.analyze(contents, file.content_type)
        except InvalidInputKind as exc:
            raise HTTPException(status_code=400, detail=str(exc))
        except (UnsupportedDocumentKind, DocumentProcessingError) as exc:
            raise HTTPException(status_code=422, detail=str(exc))

        data = report_data(issues)
        data["filename"] = file.filename or ""
        return data

    return app
