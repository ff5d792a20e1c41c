"""
Unit tests for SourceImage and the accepted file types.
"""
from pathlib import Path

import pytest

from image_pdf_toolkit.core.models import ACCEPTED_MIME_TYPES, SourceImage, is_accepted_file
from image_pdf_toolkit.core.models.images import guess_mime_type


@pytest.mark.parametrize("name,mime", [
    ("photo.jpg", "image/jpeg"),
    ("photo.JPEG", "image/jpeg"),
    ("scan.png", "image/png"),
    ("anim.gif", "image/gif"),
    ("old.bmp", "image/bmp"),
    ("modern.webp", "image/webp"),
])
def test_accepted_extensions(name, mime):
    assert is_accepted_file(name)
    assert guess_mime_type(name) == mime
    assert mime in ACCEPTED_MIME_TYPES


@pytest.mark.parametrize("name", ["notes.txt", "doc.pdf", "image.tiff", "noext"])
def test_other_files_rejected(name):
    assert not is_accepted_file(name)


def test_mime_type_guessed_from_name(png_bytes):
    image = SourceImage(data=png_bytes, name="a.png")
    assert image.mime_type == "image/png"
    assert image.size_bytes == len(png_bytes)


def test_explicit_mime_type_kept(png_bytes):
    image = SourceImage(data=png_bytes, name="a.png", mime_type="image/jpeg")
    assert image.mime_type == "image/jpeg"


def test_ids_are_unique(png_bytes):
    ids = {SourceImage(data=png_bytes).id for _ in range(50)}
    assert len(ids) == 50


def test_from_path_reads_file(sample_image: Path):
    image = SourceImage.from_path(sample_image)
    assert image.name == "sample.png"
    assert image.data == sample_image.read_bytes()


def test_from_path_missing_file(tmp_path: Path):
    with pytest.raises(OSError):
        SourceImage.from_path(tmp_path / "missing.png")
