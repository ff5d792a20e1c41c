"""Tests for the command line converter script."""

import importlib.util
import io
from pathlib import Path

import pytest
from PIL import Image
from pypdf import PdfReader

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "convert_images.py"


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("convert_images", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def images(tmp_path: Path):
    paths = []
    for name, size in (("a.png", (300, 200)), ("b.jpg", (200, 300))):
        path = tmp_path / name
        Image.new("RGB", size, color="purple").save(path)
        paths.append(path)
    return paths


def test_converts_to_requested_output(cli, images, tmp_path: Path):
    out = tmp_path / "album.pdf"

    code = cli.main([*map(str, images), "--page-size", "A5", "--orientation", "landscape", "-o", str(out)])

    assert code == 0
    reader = PdfReader(io.BytesIO(out.read_bytes()))
    assert len(reader.pages) == 2
    assert float(reader.pages[0].mediabox.width) > float(reader.pages[0].mediabox.height)


def test_default_output_name(cli, images, tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert cli.main([str(p) for p in images]) == 0
    assert len(list(tmp_path.glob("converted-images-*.pdf"))) == 1


def test_corrupt_image_fails(cli, tmp_path: Path):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"nope")
    out = tmp_path / "out.pdf"
    assert cli.main([str(bad), "-o", str(out)]) == 1
    assert not out.exists()


def test_no_supported_images(cli, tmp_path: Path):
    notes = tmp_path / "notes.txt"
    notes.write_text("hi")
    assert cli.main([str(notes)]) == 1


def test_missing_file(cli, tmp_path: Path):
    assert cli.main([str(tmp_path / "missing.png")]) == 1


def test_invalid_choice_rejected(cli, images):
    with pytest.raises(SystemExit):
        cli.main([str(images[0]), "--scaling", "stretch"])
