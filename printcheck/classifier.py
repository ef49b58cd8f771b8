"""Single-pass classification of a page's operator stream."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from printcheck.models import (
    AnalysisAccumulator,
    Operator,
    PageGeometry,
    PaintImage,
    Rectangle,
    SetFillColor,
    SetStrokeColor,
    ThresholdModel,
)
from printcheck.utils.color import max_channel_delta

logger = logging.getLogger(__name__)


def is_colored(op: SetFillColor | SetStrokeColor, thresholds: ThresholdModel) -> bool:
    """Return True if any two channels differ by more than the color threshold.

    Grays (r == g == b, within tolerance) never count as color.
    """
    return max_channel_delta(op.r, op.g, op.b) > thresholds.normalized_color_delta


def covers_background(
    rect: Rectangle, page: PageGeometry, thresholds: ThresholdModel
) -> bool:
    """Return True if *rect* covers more than the background share of the page.

    The area is the signed ``width * height``, so a rectangle with one negative
    extent never counts as a background.
    """
    page_area = page.area
    if page_area == 0:
        return False
    area_percent = (rect.width * rect.height) / page_area * 100
    return area_percent > thresholds.background_area_percent_threshold


def is_large_image(image: PaintImage, thresholds: ThresholdModel) -> bool:
    if image.pixel_width <= 0 or image.pixel_height <= 0:
        return False
    return image.pixel_width * image.pixel_height > thresholds.large_image_pixel_count


def classify(
    operators: Iterable[Operator],
    page_geometry: PageGeometry,
    thresholds: ThresholdModel,
) -> AnalysisAccumulator:
    """Scan *operators* once and report which print issues they contain.

    Every operator is visited; a flag that has been set stays set.
    """
    acc = AnalysisAccumulator()

    for op in operators:
        if isinstance(op, (SetFillColor, SetStrokeColor)):
            if not acc.has_color_content and is_colored(op, thresholds):
                logger.debug("Color content found: %r", op)
                acc.has_color_content = True
        elif isinstance(op, Rectangle):
            if not acc.has_background_elements and covers_background(
                op, page_geometry, thresholds
            ):
                logger.debug("Background element found: %r", op)
                acc.has_background_elements = True
        elif isinstance(op, PaintImage):
            if not acc.has_large_images and is_large_image(op, thresholds):
                logger.debug("Large image found: %r", op)
                acc.has_large_images = True

    return acc
