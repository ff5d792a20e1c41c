"""
Module: converter.images

Purpose:
    Image decoding and encoding for the conversion pipeline.

Key Functions:
    - decode_image(): Encoded bytes -> DecodedImage with pixel size
    - encode_jpeg(): Pillow image -> JPEG bytes at a quality level
    - flatten(): Remove transparency for JPEG embedding

Dependencies:
    - PIL: Image decoding and encoding

Used By:
    - converter.controller: Decode step
    - converter.output.renderer: Embed step
"""

from .decoder import decode_image
from .encoder import encode_jpeg, flatten

__all__ = [
    "decode_image",
    "encode_jpeg",
    "flatten",
]
