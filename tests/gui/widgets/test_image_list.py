"""Unit tests for the image list widget."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from PIL import Image

from image_pdf_toolkit.gui.widgets import image_list as image_list_module
from image_pdf_toolkit.gui.widgets.image_list import ID_ROLE, ImageListWidget, file_dialog_filter


@pytest.fixture
def image_files(tmp_path: Path):
    paths = []
    for name, size in (("one.png", (30, 20)), ("two.jpg", (20, 30)), ("three.bmp", (10, 10))):
        path = tmp_path / name
        Image.new("RGB", size, color="teal").save(path)
        paths.append(path)
    return paths


@pytest.fixture
def image_list(qtbot):
    widget = ImageListWidget()
    qtbot.addWidget(widget)
    return widget


def names(widget):
    return [image.name for image in widget.images()]


def test_file_dialog_filter_lists_extensions():
    text = file_dialog_filter()
    assert text.startswith("Images (")
    for ext in ("*.jpg", "*.png", "*.webp"):
        assert ext in text


def test_starts_empty(image_list):
    assert image_list.images() == []
    assert image_list.count_label.text() == "0 images"
    assert not image_list.clear_btn.isEnabled()


def test_add_files(image_list, image_files, qtbot):
    with qtbot.waitSignal(image_list.imagesChanged) as blocker:
        added = image_list.add_files(image_files)

    assert added == 3
    assert blocker.args == [3]
    assert names(image_list) == ["one.png", "two.jpg", "three.bmp"]
    assert image_list.list_widget.count() == 3
    assert image_list.count_label.text() == "3 images"
    assert not image_list.list_widget.item(0).icon().isNull()


def test_unsupported_files_skipped(image_list, image_files, tmp_path: Path):
    notes = tmp_path / "notes.txt"
    notes.write_text("not an image")
    assert image_list.add_files([notes, image_files[0]]) == 1
    assert names(image_list) == ["one.png"]
    assert image_list.count_label.text() == "1 image"


def test_remove_selected(image_list, image_files):
    image_list.add_files(image_files)
    image_list.list_widget.item(1).setSelected(True)

    image_list.remove_selected()

    assert names(image_list) == ["one.png", "three.bmp"]
    assert image_list.list_widget.count() == 2


def test_clear(image_list, image_files, qtbot):
    image_list.add_files(image_files)
    with qtbot.waitSignal(image_list.imagesChanged) as blocker:
        image_list.clear()
    assert blocker.args == [0]
    assert image_list.images() == []
    assert image_list.list_widget.count() == 0


def test_list_order_synced_to_collection(image_list, image_files):
    image_list.add_files(image_files)
    widget = image_list.list_widget

    # Same outcome as dragging the first row to the end
    item = widget.takeItem(0)
    widget.addItem(item)
    image_list._sync_order()

    assert names(image_list) == ["two.jpg", "three.bmp", "one.png"]
    assert [widget.item(r).data(ID_ROLE) for r in range(3)] == image_list.collection.ids()


def test_locking(image_list, image_files):
    image_list.add_files(image_files)
    image_list.set_locked(True)
    assert not image_list.add_btn.isEnabled()
    assert not image_list.clear_btn.isEnabled()
    assert not image_list.drop_zone.acceptDrops()

    image_list.set_locked(False)
    assert image_list.add_btn.isEnabled()
    assert image_list.clear_btn.isEnabled()
    assert image_list.drop_zone.acceptDrops()


def test_unreadable_file_leaves_list_in_step(image_list, image_files, tmp_path: Path, monkeypatch):
    warning = MagicMock()
    monkeypatch.setattr(image_list_module.QMessageBox, "warning", warning)

    added = image_list.add_files([image_files[0], tmp_path / "missing.png"])

    assert added == 0
    warning.assert_called_once()
    assert len(image_list.collection) == image_list.list_widget.count() == 0
    assert image_list.count_label.text() == "0 images"


def test_selection_does_not_unlock_buttons(image_list, image_files):
    image_list.add_files(image_files)
    image_list.set_locked(True)

    image_list.list_widget.item(0).setSelected(True)

    assert not image_list.remove_btn.isEnabled()
    assert not image_list.clear_btn.isEnabled()

    image_list.set_locked(False)
    assert image_list.remove_btn.isEnabled()
    assert image_list.clear_btn.isEnabled()
