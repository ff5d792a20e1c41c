"""
Module: converter.images.decoder

Purpose:
    Decode encoded image bytes into Pillow images with known pixel size.
    This is the only step of a run that waits on the input data.

Key Functions:
    - decode_image(): SourceImage -> DecodedImage

Dependencies:
    - PIL: Image decoding
    - core.models: SourceImage, DecodedImage

Used By:
    - converter.controller: Per-image decode before layout
"""

from __future__ import annotations

import io
import logging
from typing import Optional

from PIL import Image, ImageOps

from image_pdf_toolkit.core.models import ACCEPTED_MIME_TYPES, DecodedImage, SourceImage

from ..errors import DecodeError

logger = logging.getLogger(__name__)

# Pillow format identifiers for the accepted MIME types
PILLOW_FORMATS = ("JPEG", "PNG", "GIF", "BMP", "WEBP")


def decode_image(source: SourceImage, index: Optional[int] = None) -> DecodedImage:
    """
    Decode a source image.

    The pixel data is fully loaded so truncated files fail here rather than
    while the page is being drawn. EXIF orientation is applied so the
    reported size matches how the image is displayed. Animated images
    contribute their first frame.

    Args:
        source: Encoded image
        index: Position of the image in the run (for error reporting)

    Returns:
        DecodedImage with pixel size

    Raises:
        DecodeError: If the MIME type is not accepted or the bytes are not
            a decodable image
    """
    label = source.name or source.id

    if source.mime_type is not None and source.mime_type not in ACCEPTED_MIME_TYPES:
        raise DecodeError(
            f"Unsupported image type for {label}: {source.mime_type}",
            image_id=source.id,
            image_name=source.name,
            index=index,
        )

    if not source.data:
        raise DecodeError(
            f"Image {label} is empty",
            image_id=source.id,
            image_name=source.name,
            index=index,
        )

    try:
        image = Image.open(io.BytesIO(source.data), formats=PILLOW_FORMATS)
        image.load()
        image = ImageOps.exif_transpose(image)
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise DecodeError(
            f"Could not decode {label}: {e}",
            image_id=source.id,
            image_name=source.name,
            index=index,
        ) from e

    width, height = image.size
    if width <= 0 or height <= 0:
        raise DecodeError(
            f"Image {label} has no pixels ({width}x{height})",
            image_id=source.id,
            image_name=source.name,
            index=index,
        )

    logger.debug(f"Decoded {label}: {width}x{height} {image.mode}")
    return DecodedImage(source=source, image=image, width=width, height=height)
