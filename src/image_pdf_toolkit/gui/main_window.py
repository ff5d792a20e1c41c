"""
Main Window for the Image PDF Toolkit GUI.
"""
import queue
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QApplication, QHBoxLayout, QMainWindow, QMessageBox, QSplitter, QVBoxLayout, QWidget
)

from image_pdf_toolkit import __version__
from image_pdf_toolkit.core.models import ConversionSettings
from image_pdf_toolkit.gui.models.settings import SettingsStore
from image_pdf_toolkit.gui.utils.paths import get_settings_path
from image_pdf_toolkit.gui.widgets.console_widget import ConsoleWidget
from image_pdf_toolkit.gui.widgets.conversion_panel import ConversionPanel
from image_pdf_toolkit.gui.widgets.image_list import ImageListWidget
from image_pdf_toolkit.gui.widgets.settings_panel import SettingsPanel


class MainWindow(QMainWindow):
    def __init__(self, settings: Optional[SettingsStore] = None):
        super().__init__()

        self.setWindowTitle("Image PDF Toolkit")
        self.setMinimumSize(900, 600)

        # --- Menu Bar ---
        file_menu = self.menuBar().addMenu("File")
        self.add_images_action = QAction("Add Images...", self)
        self.add_images_action.setShortcut(QKeySequence.StandardKey.Open)
        file_menu.addAction(self.add_images_action)
        file_menu.addSeparator()
        exit_action = QAction("Quit", self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        settings_menu = self.menuBar().addMenu("Settings")
        self.reset_settings_action = QAction("Reset Settings...", self)
        self.reset_settings_action.triggered.connect(self._reset_settings)
        settings_menu.addAction(self.reset_settings_action)

        help_menu = self.menuBar().addMenu("Help")
        about_action = QAction("About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

        # Settings
        self.settings = settings if settings is not None else SettingsStore(get_settings_path())
        initial = self.settings.get_conversion_settings()

        # Logging from worker threads goes through this queue to the console
        self.log_queue = queue.Queue()

        # --- Panels ---
        self.image_list = ImageListWidget()
        self.settings_panel = SettingsPanel(initial)
        self.conversion_panel = ConversionPanel(
            images_provider=self.image_list.images,
            settings_store=self.settings,
            log_queue=self.log_queue,
        )
        self.console = ConsoleWidget(self.log_queue)

        self.add_images_action.triggered.connect(self.image_list.add_btn.click)

        # --- Layout ---
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(12, 12, 12, 12)

        top = QWidget()
        top_layout = QHBoxLayout(top)
        top_layout.setContentsMargins(0, 0, 0, 0)
        top_layout.addWidget(self.image_list, 3)

        right = QWidget()
        right_layout = QVBoxLayout(right)
        right_layout.setContentsMargins(0, 0, 0, 0)
        right_layout.addWidget(self.settings_panel)
        right_layout.addWidget(self.conversion_panel, 1)
        top_layout.addWidget(right, 2)

        self.splitter = QSplitter(Qt.Orientation.Vertical)
        self.splitter.addWidget(top)
        self.splitter.addWidget(self.console)
        self.splitter.setStretchFactor(0, 4)
        self.splitter.setStretchFactor(1, 1)
        main_layout.addWidget(self.splitter)

        # --- Wiring ---
        self.image_list.imagesChanged.connect(self.conversion_panel.set_image_count)
        self.settings_panel.settingsChanged.connect(self._on_settings_changed)
        self.settings.conversionSettingsChanged.connect(self.settings_panel.set_settings)
        self.settings.conversionSettingsChanged.connect(self.conversion_panel.set_settings)
        self.conversion_panel.ui_locked.connect(self._on_ui_locked)
        self.conversion_panel.reset_requested.connect(self.image_list.clear)

        self.conversion_panel.set_settings(initial)
        self.conversion_panel.set_image_count(len(self.image_list.collection))

        # Restore UI state with fallback for invalid settings
        geometry = self.settings.get_window_geometry()
        if not geometry or not self.restoreGeometry(bytes.fromhex(geometry)):
            self._apply_default_geometry()

        self.console.append_log("INFO", f"Image PDF Toolkit v{__version__} ready")

    def _apply_default_geometry(self):
        """Apply sensible default window geometry when saved state is invalid."""
        self.resize(1100, 760)
        # Center on primary screen
        if QApplication.primaryScreen():
            screen_geo = QApplication.primaryScreen().availableGeometry()
            x = (screen_geo.width() - self.width()) // 2
            y = (screen_geo.height() - self.height()) // 2
            self.move(max(0, x), max(0, y))

    def _on_settings_changed(self, settings: ConversionSettings):
        # Persisting emits conversionSettingsChanged, which updates the panels
        self.settings.set_conversion_settings(settings)

    def _on_ui_locked(self, locked: bool):
        """Disable editing while a conversion runs."""
        self.image_list.set_locked(locked)
        self.settings_panel.set_locked(locked)
        self.add_images_action.setEnabled(not locked)
        self.reset_settings_action.setEnabled(not locked)

    def _reset_settings(self):
        """Reset saved settings to defaults with confirmation."""
        answer = QMessageBox.question(
            self,
            "Reset Settings",
            "Reset page size, orientation, scaling, quality and the output folder to defaults?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        if answer == QMessageBox.StandardButton.Yes:
            self.settings.reset()
            self.console.append_log("INFO", "Settings reset to defaults")

    def _show_about(self):
        QMessageBox.about(
            self,
            "About Image PDF Toolkit",
            "<h3>Image PDF Toolkit</h3>"
            f"<p>Version: {__version__}</p>"
            "<p>Combine images into a single PDF, one image per page.</p>"
        )

    def closeEvent(self, event):
        """Save UI state on close."""
        if self.conversion_panel.run.is_running:
            self.conversion_panel.cancel_conversion()
        self.conversion_panel.wait_for_worker()
        self.settings.set_window_geometry(self.saveGeometry().toHex().data().decode())
        super().closeEvent(event)
