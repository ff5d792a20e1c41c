"""
Module: converter.images.encoder

Purpose:
    Prepare decoded images for embedding: flatten transparency onto white
    and JPEG-encode at the quality implied by the settings.

Key Functions:
    - flatten(): Pillow image -> RGB or L image without alpha
    - encode_jpeg(): Pillow image -> JPEG bytes

Dependencies:
    - PIL: Image conversion and JPEG encoding
    - converter.config: JPEG_QUALITY, FLATTEN_BACKGROUND

Used By:
    - converter.output.renderer: Embedding images on pages
"""

from __future__ import annotations

import io

from PIL import Image

from image_pdf_toolkit.core.models import Quality

from ..config import FLATTEN_BACKGROUND, JPEG_QUALITY


def flatten(image: Image.Image) -> Image.Image:
    """
    Return an image JPEG can store.

    Transparent pixels are composited onto a white background. Grayscale
    images stay grayscale; everything else becomes RGB.
    """
    if image.mode == "P":
        # Palette images may carry transparency in their info dict
        image = image.convert("RGBA" if "transparency" in image.info else "RGB")

    if image.mode in ("RGBA", "LA", "PA") or image.mode.endswith("a"):
        rgba = image.convert("RGBA")
        background = Image.new("RGB", rgba.size, FLATTEN_BACKGROUND)
        background.paste(rgba, mask=rgba.getchannel("A"))
        return background

    if image.mode in ("RGB", "L"):
        return image
    return image.convert("RGB")


def encode_jpeg(image: Image.Image, quality: Quality) -> bytes:
    """
    JPEG-encode an image at the given quality level.

    Args:
        image: Decoded image (any mode)
        quality: Output quality level

    Returns:
        JPEG bytes
    """
    buf = io.BytesIO()
    flatten(image).save(
        buf,
        format="JPEG",
        quality=JPEG_QUALITY[Quality(quality)],
        optimize=True,
    )
    return buf.getvalue()
