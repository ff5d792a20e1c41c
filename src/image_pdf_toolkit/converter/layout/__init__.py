"""
Module: converter.layout

Purpose:
    Page layout for image conversion.
    Resolves page dimensions and computes where each image is placed.

Key Functions:
    - compute_placement(): Image size + page size + policy -> Placement
    - resolve_page_dimensions(): PageSize + Orientation -> (width, height) mm
    - px_to_mm(): Pixel to millimetre conversion at 96 DPI

Dependencies:
    - image_pdf_toolkit.core.models: Placement, PageSize, Orientation, ScalingPolicy

Used By:
    - converter.controller: Main conversion pipeline
"""

from .pages import resolve_page_dimensions
from .placement import compute_placement, px_to_mm

__all__ = [
    "compute_placement",
    "px_to_mm",
    "resolve_page_dimensions",
]
