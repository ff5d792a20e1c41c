"""Unit tests for the conversion panel and its worker thread."""

import queue
import threading
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from image_pdf_toolkit.converter import ConversionState
from image_pdf_toolkit.core.models import ConversionSettings, SourceImage
from image_pdf_toolkit.gui.models.settings import SettingsStore
from image_pdf_toolkit.gui.widgets import conversion_panel as panel_module
from image_pdf_toolkit.gui.widgets.conversion_panel import (
    PAGE_COMPLETE,
    PAGE_CONVERTING,
    PAGE_EMPTY,
    PAGE_READY,
    WORKER_THREAD_NAME,
    ConversionPanel,
    processing_text,
)

WAIT_MS = 15000


@pytest.fixture
def images(source_image_factory):
    return [source_image_factory(800, 600), source_image_factory(600, 800), source_image_factory(50, 50)]


@pytest.fixture
def store(tmp_path: Path):
    return SettingsStore(tmp_path / "test_settings.json")


@pytest.fixture
def make_panel(qtbot, store):
    def _create(images):
        panel = ConversionPanel(lambda: list(images), settings_store=store, log_queue=queue.Queue())
        qtbot.addWidget(panel)
        panel._show_error = MagicMock()
        panel.set_image_count(len(images))
        return panel
    return _create


def run_to_completion(qtbot, panel):
    with qtbot.waitSignal(panel.conversion_finished, timeout=WAIT_MS) as blocker:
        panel.start_conversion()
    return blocker.args


@pytest.mark.parametrize("progress,total,expected", [
    (0, 3, "Processing 0 of 3 images"),
    (30, 3, "Processing 1 of 3 images"),
    (45, 3, "Processing 2 of 3 images"),
    (90, 3, "Processing 3 of 3 images"),
    (100, 3, "Processing 3 of 3 images"),
    (90, 1, "Processing 1 of 1 images"),
])
def test_processing_text(progress, total, expected):
    assert processing_text(progress, total) == expected


def test_empty_and_ready_pages(make_panel, images):
    panel = make_panel([])
    assert panel.stack.currentIndex() == PAGE_EMPTY

    panel.set_image_count(3)
    assert panel.stack.currentIndex() == PAGE_READY
    assert "3 images" in panel.summary_label.text()


def test_summary_follows_settings(make_panel, images):
    panel = make_panel(images)
    panel.set_settings(ConversionSettings(page_size="Letter", quality="low"))
    text = panel.summary_label.text()
    assert "Letter portrait" in text
    assert "low quality" in text


def test_successful_conversion(make_panel, images, qtbot):
    panel = make_panel(images)
    locks = []
    panel.ui_locked.connect(locks.append)

    state, error = run_to_completion(qtbot, panel)

    assert state == ConversionState.COMPLETE.value
    assert error is None
    assert locks == [True, False]
    assert panel.stack.currentIndex() == PAGE_COMPLETE
    assert panel.run.result.page_count == 3
    assert panel.progress_bar.value() == 100
    assert "3 images" in panel.complete_label.text()
    panel._show_error.assert_not_called()


def test_conversion_uses_current_settings(make_panel, images, qtbot):
    panel = make_panel(images)
    panel.set_settings(ConversionSettings(page_size="A5", orientation="landscape"))
    run_to_completion(qtbot, panel)
    assert panel.run.result.page_size_mm == (210.0, 148.0)


def test_converting_page_shown_while_running(make_panel, images, qtbot):
    panel = make_panel(images)
    with qtbot.waitSignal(panel.conversion_finished, timeout=WAIT_MS):
        panel.start_conversion()
        assert panel.stack.currentIndex() == PAGE_CONVERTING
        assert panel.processing_label.text() == "Processing 0 of 3 images"


def test_failed_conversion_reports_error(make_panel, source_image_factory, qtbot):
    bad = SourceImage(data=b"not an image", name="bad.png")
    panel = make_panel([source_image_factory(10, 10), bad])

    state, error = run_to_completion(qtbot, panel)

    assert state == ConversionState.FAILED.value
    assert "bad.png" in error
    assert panel.stack.currentIndex() == PAGE_READY
    assert panel.run.result is None
    panel._show_error.assert_called_once()


def test_cancel_returns_to_ready(make_panel, images, qtbot):
    panel = make_panel(images)
    # Cancel as soon as the first image is done
    panel.progress_changed.connect(lambda _value: panel.run.cancel())

    state, _error = run_to_completion(qtbot, panel)

    # The worker may finish before the queued cancel is delivered
    assert state in (ConversionState.CANCELLED.value, ConversionState.COMPLETE.value)
    if state == ConversionState.CANCELLED.value:
        assert panel.stack.currentIndex() == PAGE_READY
        panel._show_error.assert_not_called()


def test_start_without_images_does_nothing(make_panel):
    panel = make_panel([])
    panel.start_conversion()
    assert panel.run.state is ConversionState.IDLE
    assert panel.stack.currentIndex() == PAGE_EMPTY


def test_save_to_writes_pdf_and_remembers_folder(make_panel, images, store, qtbot, tmp_path: Path):
    panel = make_panel(images)
    run_to_completion(qtbot, panel)

    written = panel.save_to(tmp_path / "out" / "album")

    assert written == tmp_path / "out" / "album.pdf"
    assert written.read_bytes().startswith(b"%PDF")
    assert store.get_output_dir() == str(tmp_path / "out")


def test_save_pdf_offers_suggested_filename(make_panel, images, store, qtbot, tmp_path: Path, monkeypatch):
    store.set_output_dir(str(tmp_path))
    panel = make_panel(images)
    run_to_completion(qtbot, panel)

    target = tmp_path / "chosen.pdf"
    dialog = MagicMock(return_value=(str(target), "PDF Files (*.pdf)"))
    monkeypatch.setattr(panel_module.QFileDialog, "getSaveFileName", dialog)

    assert panel.save_pdf() == target
    offered = dialog.call_args[0][2]
    assert offered == str(tmp_path / panel.run.result.filename)
    assert target.exists()


def test_save_pdf_cancelled_dialog(make_panel, images, qtbot, monkeypatch):
    panel = make_panel(images)
    run_to_completion(qtbot, panel)
    monkeypatch.setattr(panel_module.QFileDialog, "getSaveFileName", MagicMock(return_value=("", "")))
    assert panel.save_pdf() is None


def test_save_without_result(make_panel, images, tmp_path: Path):
    panel = make_panel(images)
    assert panel.save_to(tmp_path / "x.pdf") is None
    assert not (tmp_path / "x.pdf").exists()


def test_convert_another_resets(make_panel, images, qtbot):
    panel = make_panel(images)
    run_to_completion(qtbot, panel)

    with qtbot.waitSignal(panel.reset_requested):
        panel.convert_another()

    assert panel.run.state is ConversionState.IDLE
    assert panel.run.result is None


def test_changing_images_discards_finished_result(make_panel, images, qtbot):
    panel = make_panel(images)
    run_to_completion(qtbot, panel)

    panel.set_image_count(2)

    assert panel.run.state is ConversionState.IDLE
    assert panel.stack.currentIndex() == PAGE_READY


def worker_alive() -> bool:
    return any(t.name == WORKER_THREAD_NAME and t.is_alive() for t in threading.enumerate())


def test_worker_joined_when_conversion_finishes(make_panel, images, qtbot):
    panel = make_panel(images)
    run_to_completion(qtbot, panel)

    assert panel._thread is None
    assert not worker_alive()
    assert panel.wait_for_worker()

    panel.close()
    assert not worker_alive()


def test_wait_for_worker_without_run(make_panel, images):
    panel = make_panel(images)
    assert panel.wait_for_worker(timeout=0)
