"""
Core Models Package

Immutable, validated data models shared by the converter and the GUI.

All models in this package are frozen dataclasses or enums, so a settings
snapshot or an image can be handed to a worker thread without copying.
"""

from .images import (
    ACCEPTED_EXTENSIONS,
    ACCEPTED_MIME_TYPES,
    DecodedImage,
    SourceImage,
    is_accepted_file,
)
from .placement import Placement
from .settings import ConversionSettings, Orientation, PageSize, Quality, ScalingPolicy

__all__ = [
    "ACCEPTED_EXTENSIONS",
    "ACCEPTED_MIME_TYPES",
    "DecodedImage",
    "SourceImage",
    "is_accepted_file",
    "Placement",
    "ConversionSettings",
    "Orientation",
    "PageSize",
    "Quality",
    "ScalingPolicy",
]
