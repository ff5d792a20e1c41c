"""
Module: converter

Purpose:
    Image to PDF conversion pipeline.
    Decodes images, lays each one out on its own page and assembles the
    pages into a single PDF held in memory.

Key Functions:
    - convert(): Main entry point for converting images to a PDF
    - compute_placement(): Layout engine for one image on one page
    - resolve_page_dimensions(): Page size table lookup

Key Classes:
    - ConversionRun: Explicit run state with progress and cancellation
    - ConversionResult: PDF bytes plus metadata
    - ConversionError: Base class of all pipeline failures

Dependencies:
    - PIL: Image decoding and JPEG encoding
    - reportlab: PDF generation

Used By:
    - image_pdf_toolkit.gui: Desktop interface
    - scripts/convert_images.py: Command line
"""

from .controller import (
    ConversionResult,
    ConversionRun,
    ConversionState,
    convert,
)
from .errors import (
    ConversionCancelledError,
    ConversionError,
    ConversionInProgressError,
    DecodeError,
    EmbedError,
    SerializationError,
)
from .layout import compute_placement, px_to_mm, resolve_page_dimensions
from .output import suggested_filename, write_pdf

__all__ = [
    # Controller
    "convert",
    "ConversionResult",
    "ConversionRun",
    "ConversionState",
    # Errors
    "ConversionError",
    "DecodeError",
    "EmbedError",
    "SerializationError",
    "ConversionCancelledError",
    "ConversionInProgressError",
    # Layout
    "compute_placement",
    "px_to_mm",
    "resolve_page_dimensions",
    # Output
    "suggested_filename",
    "write_pdf",
]
