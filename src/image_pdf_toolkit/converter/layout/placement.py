"""
Module: converter.layout.placement

Purpose:
    Layout engine: compute where an image goes on a page.
    Maps an image's pixel size and a page size to a Placement in
    millimetres under one of the three scaling policies.

Key Functions:
    - compute_placement(): Main entry point
    - px_to_mm(): Pixel to millimetre conversion at 96 DPI

Dependencies:
    - core.models: Placement, ScalingPolicy
    - converter.config: MM_PER_PX

Used By:
    - converter.controller: One placement per page
"""

from __future__ import annotations

from typing import Tuple

from image_pdf_toolkit.core.models import Placement, ScalingPolicy

from ..config import MM_PER_PX


def compute_placement(
    image_width_px: float,
    image_height_px: float,
    page_width: float,
    page_height: float,
    scaling: ScalingPolicy,
) -> Placement:
    """
    Compute the placement of one image on one page.

    Policies:
    - fit: keep aspect ratio, grow until one page edge is reached, centre
    - fill: stretch to the full page at the origin
    - original: 96 DPI physical size, shrunk to the page width then to the
      page height if it overflows, centre

    Args:
        image_width_px: Image width in pixels
        image_height_px: Image height in pixels
        page_width: Page width in millimetres
        page_height: Page height in millimetres
        scaling: Scaling policy

    Returns:
        Placement in millimetres relative to the page's top-left corner

    Raises:
        ValueError: If any dimension is not positive or the policy is unknown

    Example:
        >>> compute_placement(800, 600, 210, 297, ScalingPolicy.FIT)
        Placement(width=210.0, height=157.5, x=0.0, y=69.75)
    """
    _require_positive("image_width_px", image_width_px)
    _require_positive("image_height_px", image_height_px)
    _require_positive("page_width", page_width)
    _require_positive("page_height", page_height)

    policy = ScalingPolicy(scaling)

    if policy is ScalingPolicy.FILL:
        return Placement(width=float(page_width), height=float(page_height), x=0.0, y=0.0)

    if policy is ScalingPolicy.FIT:
        width, height = _fit_size(image_width_px, image_height_px, page_width, page_height)
    else:
        width, height = _original_size(image_width_px, image_height_px, page_width, page_height)

    return _centred(width, height, page_width, page_height)


def px_to_mm(px: float) -> float:
    """Convert pixels to millimetres at 96 DPI."""
    return px * MM_PER_PX


def _fit_size(
    image_width_px: float,
    image_height_px: float,
    page_width: float,
    page_height: float,
) -> Tuple[float, float]:
    image_ratio = image_width_px / image_height_px
    page_ratio = page_width / page_height

    if image_ratio > page_ratio:
        # Relatively wider than the page: width is the binding edge
        return float(page_width), page_width / image_ratio
    return page_height * image_ratio, float(page_height)


def _original_size(
    image_width_px: float,
    image_height_px: float,
    page_width: float,
    page_height: float,
) -> Tuple[float, float]:
    width = px_to_mm(image_width_px)
    height = px_to_mm(image_height_px)

    # Width first, then height against the already corrected size
    if width > page_width:
        ratio = page_width / width
        width = float(page_width)
        height = height * ratio
    if height > page_height:
        ratio = page_height / height
        height = float(page_height)
        width = width * ratio

    return width, height


def _centred(
    width: float,
    height: float,
    page_width: float,
    page_height: float,
) -> Placement:
    return Placement(
        width=width,
        height=height,
        x=(page_width - width) / 2,
        y=(page_height - height) / 2,
    )


def _require_positive(name: str, value: float) -> None:
    if not value > 0:
        raise ValueError(f"{name} must be positive: {value}")
