import io
import os
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add src to sys.path so we can import image_pdf_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from image_pdf_toolkit.core.models import SourceImage


def encode_image(size, fmt="PNG", mode="RGB", color="white") -> bytes:
    """Encode a solid-colour Pillow image."""
    buf = io.BytesIO()
    Image.new(mode, size, color=color).save(buf, format=fmt)
    return buf.getvalue()


# Common test fixtures
@pytest.fixture
def png_bytes() -> bytes:
    return encode_image((200, 100))


@pytest.fixture
def jpeg_bytes() -> bytes:
    return encode_image((120, 80), fmt="JPEG", color="navy")


@pytest.fixture
def rgba_png_bytes() -> bytes:
    return encode_image((40, 40), mode="RGBA", color=(255, 0, 0, 0))


@pytest.fixture
def source_image_factory():
    """Factory for SourceImages of a given pixel size."""
    def _create(width: int, height: int, name: str = None, fmt: str = "PNG") -> SourceImage:
        ext = "jpg" if fmt == "JPEG" else fmt.lower()
        return SourceImage(
            data=encode_image((width, height), fmt=fmt),
            name=name or f"{width}x{height}.{ext}",
        )
    return _create


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image file."""
    img = Image.new("RGB", (200, 100), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path
