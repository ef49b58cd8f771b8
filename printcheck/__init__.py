"""printcheck: detect PDF content that is expensive to print."""

from __future__ import annotations

__version__ = "0.1.0"

from printcheck.analyzer import PrintAnalyzer, analyze  # noqa: E402
from printcheck.models import OptimizationIssues, ThresholdModel  # noqa: E402

__all__ = ["OptimizationIssues", "PrintAnalyzer", "ThresholdModel", "analyze", "__version__"]
