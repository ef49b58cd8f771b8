"""Shared data models used across printcheck."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Union


@dataclass(frozen=True)
class ThresholdModel:
    """Sensitivity settings for the three print checks.

    ``color_delta_threshold`` is a channel difference on the 0-255 scale,
    ``background_area_percent_threshold`` a percentage of the page area and
    ``large_image_pixel_threshold`` a pixel count in millions.
    """

    color_delta_threshold: int = 30
    background_area_percent_threshold: float = 50.0
    large_image_pixel_threshold: float = 1.0

    @property
    def normalized_color_delta(self) -> float:
        """Color threshold on the 0-1 scale used by content stream operands."""
        return self.color_delta_threshold / 255

    @property
    def large_image_pixel_count(self) -> float:
        return self.large_image_pixel_threshold * 1_000_000


DEFAULT_THRESHOLDS = ThresholdModel()


# ------------------------------------------------------------------
# Content stream operators
# ------------------------------------------------------------------


@dataclass(frozen=True)
class SetFillColor:
    """Non-stroking color, components normalized to [0, 1]."""

    r: float
    g: float
    b: float


@dataclass(frozen=True)
class SetStrokeColor:
    """Stroking color, components normalized to [0, 1]."""

    r: float
    g: float
    b: float


@dataclass(frozen=True)
class Rectangle:
    """A ``re`` path in page-space units."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class PaintImage:
    """A raster image painted on the page."""

    pixel_width: int
    pixel_height: int


@dataclass(frozen=True)
class OtherOperator:
    """Any operator the classifier does not inspect."""

    name: str


Operator = Union[SetFillColor, SetStrokeColor, Rectangle, PaintImage, OtherOperator]


@dataclass(frozen=True)
class PageGeometry:
    """Page size in the same units as Rectangle operands."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass
class AnalysisAccumulator:
    """Scan state for one classification pass. Flags only go False -> True."""

    has_color_content: bool = False
    has_background_elements: bool = False
    has_large_images: bool = False


@dataclass(frozen=True)
class OptimizationIssues:
    """Result of analyzing a document for print optimization.

    The three flags describe the sampled (first) page only; ``page_count``
    covers the whole document.
    """

    has_color_content: bool
    has_background_elements: bool
    has_large_images: bool
    page_count: int

    @classmethod
    def from_accumulator(
        cls, accumulator: AnalysisAccumulator, page_count: int
    ) -> OptimizationIssues:
        return cls(
            has_color_content=accumulator.has_color_content,
            has_background_elements=accumulator.has_background_elements,
            has_large_images=accumulator.has_large_images,
            page_count=page_count,
        )

    @property
    def needs_optimization(self) -> bool:
        return (
            self.has_color_content
            or self.has_background_elements
            or self.has_large_images
        )

    def to_dict(self) -> dict:
        data = asdict(self)
        data["needs_optimization"] = self.needs_optimization
        return data
