"""
Module: images

Purpose:
    Provides the SourceImage and DecodedImage dataclasses. A SourceImage is
    the encoded file handed over by the caller; a DecodedImage pairs it with
    the pixel data and intrinsic size produced by decoding.

Key Functions:
    - SourceImage.from_path(path): Read an image file from disk
    - new_image_id(): Short random identifier

Dependencies:
    - dataclasses (std)
    - PIL.Image (TYPE_CHECKING only)

Used By:
    - core.collection.ImageCollection
    - converter.images.decoder
    - converter.controller
"""

from __future__ import annotations

import mimetypes
import secrets
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from PIL import Image


def new_image_id() -> str:
    """Return a short random identifier for an image."""
    return secrets.token_hex(5)


# Platform mimetypes tables disagree on bmp and may lack webp
_IMAGE_MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".webp": "image/webp",
}

ACCEPTED_EXTENSIONS: tuple[str, ...] = tuple(_IMAGE_MIME_TYPES)
ACCEPTED_MIME_TYPES: frozenset[str] = frozenset(_IMAGE_MIME_TYPES.values())


def is_accepted_file(name: str) -> bool:
    """Check whether a filename has an accepted image extension."""
    return Path(name).suffix.lower() in _IMAGE_MIME_TYPES


def guess_mime_type(name: str) -> Optional[str]:
    """Guess a MIME type from a filename, or None if unknown."""
    suffix = Path(name).suffix.lower()
    if suffix in _IMAGE_MIME_TYPES:
        return _IMAGE_MIME_TYPES[suffix]
    mime, _ = mimetypes.guess_type(name)
    return mime


@dataclass(frozen=True)
class SourceImage:
    """
    Encoded image supplied by the caller (immutable).

    Attributes:
        data: Encoded image bytes (JPEG, PNG, ...)
        name: Display name, usually the original filename
        mime_type: Declared MIME type; guessed from ``name`` when omitted
        id: Opaque identifier, unique within an ImageCollection

    Example:
        >>> img = SourceImage(data=b"...", name="holiday.png")
        >>> img.mime_type
        'image/png'
    """

    data: bytes = field(repr=False)
    name: str = ""
    mime_type: Optional[str] = None
    id: str = field(default_factory=new_image_id)

    def __post_init__(self) -> None:
        if self.mime_type is None and self.name:
            object.__setattr__(self, "mime_type", guess_mime_type(self.name))

    @property
    def size_bytes(self) -> int:
        """Encoded size in bytes."""
        return len(self.data)

    @classmethod
    def from_path(cls, path: Path) -> SourceImage:
        """
        Read an image file.

        Raises:
            OSError: If the file cannot be read
        """
        path = Path(path)
        return cls(data=path.read_bytes(), name=path.name)


@dataclass(frozen=True)
class DecodedImage:
    """
    Source image plus decoded pixel data (immutable).

    Attributes:
        source: The SourceImage that was decoded
        image: Decoded Pillow image
        width: Intrinsic width in pixels
        height: Intrinsic height in pixels
    """

    source: SourceImage
    image: Image.Image = field(repr=False)
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"image dimensions must be positive: {self.width}x{self.height}")

    @property
    def id(self) -> str:
        return self.source.id
