"""
Image to PDF Core Package

Shared data models (images, settings, placements) and the ordered image
collection that feeds a conversion.
"""

from .collection import ImageCollection
from .models import (
    ConversionSettings,
    DecodedImage,
    Orientation,
    PageSize,
    Placement,
    Quality,
    ScalingPolicy,
    SourceImage,
)

__all__ = [
    "ImageCollection",
    "ConversionSettings",
    "DecodedImage",
    "Orientation",
    "PageSize",
    "Placement",
    "Quality",
    "ScalingPolicy",
    "SourceImage",
]
