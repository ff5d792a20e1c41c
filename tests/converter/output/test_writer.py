"""
Unit tests for output filenames and writing.
"""
import re
from pathlib import Path

import pytest

from image_pdf_toolkit.converter import suggested_filename, write_pdf


def test_suggested_filename_with_timestamp():
    assert suggested_filename(1700000000000) == "converted-images-1700000000000.pdf"


def test_suggested_filename_defaults_to_now():
    assert re.fullmatch(r"converted-images-\d{13}\.pdf", suggested_filename())


def test_write_pdf_creates_parent_dirs(tmp_path: Path):
    target = tmp_path / "nested" / "out.pdf"
    written = write_pdf(b"%PDF-1.4 test", target)
    assert written == target
    assert target.read_bytes() == b"%PDF-1.4 test"


def test_write_pdf_into_file_path_fails(tmp_path: Path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    with pytest.raises(OSError):
        write_pdf(b"data", blocker / "out.pdf")
