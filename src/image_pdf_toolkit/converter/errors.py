"""
Module: converter.errors

Purpose:
    Exception hierarchy for the conversion pipeline. Every failure that
    aborts a run is a ConversionError subclass.

Key Classes:
    - ConversionError: Base class
    - DecodeError: Image bytes cannot be decoded
    - EmbedError: Image cannot be drawn onto its page
    - SerializationError: Final PDF cannot be produced
    - ConversionCancelledError: Run cancelled between images
    - ConversionInProgressError: Run started twice

Used By:
    - converter.images.decoder
    - converter.output.renderer
    - converter.controller
    - gui.widgets.conversion_panel
"""

from __future__ import annotations

from typing import Optional


class ConversionError(Exception):
    """Error that aborts a conversion run."""
    pass


class _ImageError(ConversionError):
    """Error tied to one input image."""

    def __init__(
        self,
        message: str,
        *,
        image_id: Optional[str] = None,
        image_name: Optional[str] = None,
        index: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.image_id = image_id
        self.image_name = image_name
        self.index = index


class DecodeError(_ImageError):
    """Image bytes could not be decoded (corrupt file or unsupported type)."""
    pass


class EmbedError(_ImageError):
    """Image could not be placed on its page."""
    pass


class SerializationError(ConversionError):
    """The assembled document could not be written out."""
    pass


class ConversionCancelledError(ConversionError):
    """The run was cancelled before it completed."""
    pass


class ConversionInProgressError(ConversionError):
    """A run was started while it was already running."""
    pass
