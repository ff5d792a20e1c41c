"""
Module: converter.layout.pages

Purpose:
    Resolve concrete page dimensions from a PageSize and Orientation.

Key Functions:
    - resolve_page_dimensions(): (width, height) in millimetres

Dependencies:
    - converter.config: PAGE_SIZES_MM

Used By:
    - converter.controller: Page setup for a run
"""

from __future__ import annotations

from typing import Tuple

from image_pdf_toolkit.core.models import Orientation, PageSize

from ..config import PAGE_SIZES_MM


def resolve_page_dimensions(
    page_size: PageSize,
    orientation: Orientation,
) -> Tuple[float, float]:
    """
    Look up page dimensions in millimetres.

    Portrait keeps the canonical pair, landscape swaps it.

    Example:
        >>> resolve_page_dimensions(PageSize.A4, Orientation.LANDSCAPE)
        (297.0, 210.0)
    """
    width, height = PAGE_SIZES_MM[PageSize(page_size)]
    if Orientation(orientation) is Orientation.LANDSCAPE:
        return height, width
    return width, height
