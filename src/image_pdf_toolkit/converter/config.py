"""
Module: converter.config

Purpose:
    Constants and lookup tables for the conversion pipeline: page sizes,
    pixel-to-millimetre factor, progress budget and JPEG quality levels.

Key Constants:
    - PAGE_SIZES_MM: Canonical (portrait) page dimensions in millimetres
    - MM_PER_PX: Physical size of one pixel at 96 DPI
    - JPEG_QUALITY: Pillow JPEG quality per Quality level

Dependencies:
    - core.models: PageSize, Quality

Used By:
    - converter.layout: Placement and page dimension lookup
    - converter.output.renderer: JPEG encoding
    - converter.controller: Progress reporting
"""

from __future__ import annotations

from typing import Dict, Tuple

from image_pdf_toolkit.core.models import (
    PageSize,
    Quality,
)


# Canonical portrait dimensions (width, height) in mm; width < height
PAGE_SIZES_MM: Dict[PageSize, Tuple[float, float]] = {
    PageSize.A4: (210.0, 297.0),
    PageSize.A3: (297.0, 420.0),
    PageSize.A5: (148.0, 210.0),
    PageSize.LETTER: (215.9, 279.4),
    PageSize.LEGAL: (215.9, 355.6),
}

# 25.4 mm / 96 px
MM_PER_PX = 0.264583

# Progress budget: images share the first 90%, serialization the rest
IMAGE_PROGRESS_SHARE = 90.0
COMPLETE_PROGRESS = 100.0

# Pillow JPEG quality (1-95)
JPEG_QUALITY: Dict[Quality, int] = {
    Quality.HIGH: 95,
    Quality.MEDIUM: 80,
    Quality.LOW: 60,
}

# Background used when flattening transparent images for JPEG
FLATTEN_BACKGROUND = (255, 255, 255)

# Placements may exceed the page by this much (mm) before embedding fails
PLACEMENT_TOLERANCE_MM = 0.01

OUTPUT_FILENAME_PREFIX = "converted-images"
OUTPUT_CONTENT_TYPE = "application/pdf"

__all__ = [
    "PAGE_SIZES_MM",
    "MM_PER_PX",
    "IMAGE_PROGRESS_SHARE",
    "COMPLETE_PROGRESS",
    "JPEG_QUALITY",
    "FLATTEN_BACKGROUND",
    "PLACEMENT_TOLERANCE_MM",
    "OUTPUT_FILENAME_PREFIX",
    "OUTPUT_CONTENT_TYPE",
]
