"""Integration tests for the main window wiring."""

from pathlib import Path

import pytest
from PIL import Image

from image_pdf_toolkit.core.models import ConversionSettings, PageSize, Quality
from image_pdf_toolkit.gui.main_window import MainWindow
from image_pdf_toolkit.gui.models.settings import SettingsStore
from image_pdf_toolkit.gui.widgets.conversion_panel import PAGE_EMPTY, PAGE_READY


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "gui_settings.json"


@pytest.fixture
def window(qtbot, settings_path):
    win = MainWindow(SettingsStore(settings_path))
    qtbot.addWidget(win)
    return win


def test_restores_saved_settings(qtbot, settings_path):
    SettingsStore(settings_path).set_conversion_settings(ConversionSettings(page_size="Legal", quality="low"))

    win = MainWindow(SettingsStore(settings_path))
    qtbot.addWidget(win)

    assert win.settings_panel.settings().page_size is PageSize.LEGAL
    assert "Legal" in win.conversion_panel.summary_label.text()


def test_settings_changes_are_persisted(window, settings_path):
    combo = window.settings_panel.quality_combo
    combo.setCurrentIndex(combo.findData(Quality.MEDIUM.value))

    assert SettingsStore(settings_path).get_conversion_settings().quality is Quality.MEDIUM
    assert "medium quality" in window.conversion_panel.summary_label.text()


def test_adding_images_enables_conversion(window, sample_image):
    assert window.conversion_panel.stack.currentIndex() == PAGE_EMPTY
    window.image_list.add_files([sample_image])
    assert window.conversion_panel.stack.currentIndex() == PAGE_READY


def test_ui_locked_during_conversion(window):
    window.conversion_panel.ui_locked.emit(True)
    assert not window.image_list.add_btn.isEnabled()
    assert not window.settings_panel.page_size_combo.isEnabled()
    assert not window.add_images_action.isEnabled()

    window.conversion_panel.ui_locked.emit(False)
    assert window.image_list.add_btn.isEnabled()
    assert window.settings_panel.page_size_combo.isEnabled()


def test_convert_another_clears_images(window, qtbot, tmp_path: Path):
    path = tmp_path / "photo.jpg"
    Image.new("RGB", (40, 30), color="orange").save(path)
    window.image_list.add_files([path])

    with qtbot.waitSignal(window.conversion_panel.conversion_finished, timeout=15000):
        window.conversion_panel.start_conversion()
    window.conversion_panel.convert_another()

    assert window.image_list.images() == []
    assert window.conversion_panel.stack.currentIndex() == PAGE_EMPTY


def test_close_saves_geometry(window, settings_path):
    window.show()
    window.close()
    assert SettingsStore(settings_path).get_window_geometry()
