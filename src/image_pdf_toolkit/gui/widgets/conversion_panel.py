"""
Conversion panel: start a conversion, follow its progress, save the PDF.

Screens:
    empty      - no images yet
    ready      - image count and settings summary, Convert button
    converting - progress bar, "Processing k of N images", Cancel button
    complete   - Save PDF and Convert Another buttons
"""
import logging
import math
import queue
import threading
from pathlib import Path
from typing import Callable, List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFileDialog, QGroupBox, QHBoxLayout, QLabel, QMessageBox, QProgressBar,
    QPushButton, QStackedWidget, QVBoxLayout, QWidget
)

from image_pdf_toolkit.converter import (
    ConversionCancelledError, ConversionError, ConversionResult, ConversionRun,
    ConversionState, write_pdf
)
from image_pdf_toolkit.core.models import ConversionSettings, SourceImage
from image_pdf_toolkit.gui.models.settings import SettingsStore
from image_pdf_toolkit.gui.styles.theme import Styles
from image_pdf_toolkit.gui.utils.logging_utils import attach_queue_handler, detach_queue_handler
from image_pdf_toolkit.gui.utils.paths import get_default_output_dir

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "image_pdf_toolkit"

PAGE_EMPTY = 0
PAGE_READY = 1
PAGE_CONVERTING = 2
PAGE_COMPLETE = 3

WORKER_THREAD_NAME = "conversion-worker"
WORKER_JOIN_TIMEOUT_S = 5.0


def processing_text(progress: float, total: int) -> str:
    """'Processing k of N images' where k tracks the progress percentage."""
    current = min(total, math.ceil((progress / 100) * total))
    return f"Processing {current} of {total} images"


def plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


class ConversionPanel(QGroupBox):
    # Signals to communicate from worker thread to main thread
    progress_changed = Signal(float)
    # final ConversionState value, error message or None
    conversion_finished = Signal(str, object)
    ui_locked = Signal(bool)
    # "Convert Another" was clicked; the image list should be cleared
    reset_requested = Signal()

    def __init__(
        self,
        images_provider: Callable[[], List[SourceImage]],
        settings_store: Optional[SettingsStore] = None,
        log_queue: Optional[queue.Queue] = None,
        parent=None,
    ):
        super().__init__("Convert & Save", parent)
        self.images_provider = images_provider
        self.settings_store = settings_store
        self.log_queue = log_queue or queue.Queue()

        self._settings = (
            settings_store.get_conversion_settings() if settings_store else ConversionSettings()
        )
        self._image_count = 0
        self._thread: Optional[threading.Thread] = None
        self.run = ConversionRun(self._settings, progress_callback=self.progress_changed.emit)

        self.stack = QStackedWidget()
        self.stack.addWidget(self._build_empty_page())
        self.stack.addWidget(self._build_ready_page())
        self.stack.addWidget(self._build_converting_page())
        self.stack.addWidget(self._build_complete_page())

        layout = QVBoxLayout(self)
        layout.addWidget(self.stack)

        self.progress_changed.connect(self._on_progress)
        self.conversion_finished.connect(self._finish_conversion)

        self._show_idle_page()

    # ─────────────────────────────────────────────────────────────────────────
    # Page construction
    # ─────────────────────────────────────────────────────────────────────────

    def _build_empty_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        title = QLabel("Ready to Convert")
        title.setStyleSheet(Styles.HEADING)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        hint = QLabel("Add some images to get started with the conversion process.")
        hint.setStyleSheet(Styles.SUBTLE)
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        hint.setWordWrap(True)
        layout.addStretch()
        layout.addWidget(title)
        layout.addWidget(hint)
        layout.addStretch()
        return page

    def _build_ready_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        title = QLabel("Ready to Convert")
        title.setStyleSheet(Styles.HEADING)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.summary_label = QLabel()
        self.summary_label.setStyleSheet(Styles.SUBTLE)
        self.summary_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.convert_btn = QPushButton("Convert to PDF")
        self.convert_btn.setStyleSheet(Styles.PRIMARY_BUTTON)
        self.convert_btn.clicked.connect(self.start_conversion)
        layout.addStretch()
        layout.addWidget(title)
        layout.addWidget(self.summary_label)
        layout.addWidget(self.convert_btn, alignment=Qt.AlignmentFlag.AlignCenter)
        layout.addStretch()
        return page

    def _build_converting_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        title = QLabel("Converting Images...")
        title.setStyleSheet(Styles.HEADING)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 100)
        self.processing_label = QLabel()
        self.processing_label.setStyleSheet(Styles.SUBTLE)
        self.processing_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.cancel_btn = QPushButton("Cancel")
        self.cancel_btn.setStyleSheet(Styles.SECONDARY_BUTTON)
        self.cancel_btn.clicked.connect(self.cancel_conversion)
        layout.addStretch()
        layout.addWidget(title)
        layout.addWidget(self.progress_bar)
        layout.addWidget(self.processing_label)
        layout.addWidget(self.cancel_btn, alignment=Qt.AlignmentFlag.AlignCenter)
        layout.addStretch()
        return page

    def _build_complete_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        title = QLabel("Conversion Complete!")
        title.setStyleSheet(Styles.SUCCESS_HEADING)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.complete_label = QLabel()
        self.complete_label.setStyleSheet(Styles.SUBTLE)
        self.complete_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.complete_label.setWordWrap(True)

        buttons = QHBoxLayout()
        self.save_btn = QPushButton("Save PDF...")
        self.save_btn.setStyleSheet(Styles.PRIMARY_BUTTON)
        self.save_btn.clicked.connect(self.save_pdf)
        self.another_btn = QPushButton("Convert Another")
        self.another_btn.setStyleSheet(Styles.SECONDARY_BUTTON)
        self.another_btn.clicked.connect(self.convert_another)
        buttons.addStretch()
        buttons.addWidget(self.save_btn)
        buttons.addWidget(self.another_btn)
        buttons.addStretch()

        layout.addStretch()
        layout.addWidget(title)
        layout.addWidget(self.complete_label)
        layout.addLayout(buttons)
        layout.addStretch()
        return page

    # ─────────────────────────────────────────────────────────────────────────
    # Inputs from the other panels
    # ─────────────────────────────────────────────────────────────────────────

    def set_image_count(self, count: int) -> None:
        self._image_count = count
        if self.run.state is ConversionState.COMPLETE:
            # Images changed after a finished run; the old result no longer matches
            self.run.reset()
        if not self.run.is_running:
            self._show_idle_page()

    def set_settings(self, settings: ConversionSettings) -> None:
        self._settings = settings
        self._update_summary()

    # ─────────────────────────────────────────────────────────────────────────
    # Actions
    # ─────────────────────────────────────────────────────────────────────────

    def start_conversion(self) -> None:
        """Handle Convert button click."""
        if self.run.is_running:
            logger.warning("A conversion is already running")
            return

        images = self.images_provider()
        if not images:
            return

        self.run.settings = self._settings
        self.progress_bar.setValue(0)
        self.processing_label.setText(processing_text(0, len(images)))
        self.cancel_btn.setEnabled(True)
        self.stack.setCurrentIndex(PAGE_CONVERTING)
        self.ui_locked.emit(True)

        self._thread = threading.Thread(
            target=self._run_conversion, args=(images,), name=WORKER_THREAD_NAME, daemon=True
        )
        self._thread.start()

    def cancel_conversion(self) -> None:
        self.cancel_btn.setEnabled(False)
        self.run.cancel()

    def wait_for_worker(self, timeout: Optional[float] = WORKER_JOIN_TIMEOUT_S) -> bool:
        """Join the worker thread, if any. Returns True once no worker is alive."""
        thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        if thread.is_alive():
            logger.warning(f"Conversion worker still running after {timeout}s")
            return False
        self._thread = None
        return True

    def save_pdf(self) -> Optional[Path]:
        """Ask where to save the finished PDF and write it."""
        result = self.run.result
        if result is None:
            return None

        start_dir = Path(
            (self.settings_store.get_output_dir() if self.settings_store else None)
            or get_default_output_dir()
        )
        filename, _ = QFileDialog.getSaveFileName(
            self, "Save PDF", str(start_dir / result.filename), "PDF Files (*.pdf)"
        )
        if not filename:
            return None
        return self.save_to(Path(filename))

    def save_to(self, path: Path) -> Optional[Path]:
        """Write the finished PDF to ``path``."""
        result = self.run.result
        if result is None:
            return None
        if path.suffix.lower() != ".pdf":
            path = path.with_suffix(".pdf")
        try:
            written = write_pdf(result.pdf_bytes, path)
        except OSError as e:
            logger.error(f"Failed to save PDF: {e}")
            self._show_error("Save Failed", f"Could not save the PDF:\n\n{e}")
            return None
        if self.settings_store:
            self.settings_store.set_output_dir(str(written.parent))
        self.log_queue.put((f"Saved {written}", "SUCCESS"))
        return written

    def convert_another(self) -> None:
        """Drop the finished result and start over with no images."""
        self.run.reset()
        self.reset_requested.emit()
        self._show_idle_page()

    # ─────────────────────────────────────────────────────────────────────────
    # Worker thread
    # ─────────────────────────────────────────────────────────────────────────

    def _run_conversion(self, images: List[SourceImage]) -> None:
        error: Optional[str] = None
        handler = None
        try:
            # Attach log handler to capture converter logs
            handler = attach_queue_handler(self.log_queue, PACKAGE_LOGGER)
            self.run.start(images)
        except ConversionCancelledError:
            error = None
        except ConversionError as e:
            error = str(e)
        except Exception as e:
            logger.exception("Unexpected error during conversion")
            error = f"Unexpected error: {e}"
        finally:
            if handler:
                detach_queue_handler(handler, PACKAGE_LOGGER)
            # Always emit signal to finish on main thread
            self.conversion_finished.emit(self.run.state.value, error)

    # ─────────────────────────────────────────────────────────────────────────
    # Main thread updates
    # ─────────────────────────────────────────────────────────────────────────

    def _on_progress(self, value: float) -> None:
        self.progress_bar.setValue(int(round(value)))
        self.processing_label.setText(processing_text(value, self._image_count or 1))

    def _finish_conversion(self, state: str, error: Optional[str]) -> None:
        # Last signal from the worker; it must not outlive the panel
        self.wait_for_worker()
        self.ui_locked.emit(False)

        if state == ConversionState.COMPLETE.value:
            result: ConversionResult = self.run.result
            self.complete_label.setText(
                f"Your PDF has been generated successfully from "
                f"{plural(result.page_count, 'image')} "
                f"({result.size_bytes / 1024:.1f} KB)."
            )
            self.stack.setCurrentIndex(PAGE_COMPLETE)
            self.log_queue.put((f"Conversion complete: {result.page_count} page(s)", "SUCCESS"))
            return

        self._show_idle_page()
        if state == ConversionState.CANCELLED.value:
            self.log_queue.put(("Conversion cancelled", "WARNING"))
            return

        msg = error or "Unknown error during conversion."
        self.log_queue.put((f"Conversion failed: {msg}", "ERROR"))
        self._show_error("Conversion Failed", f"Failed to convert images:\n\n{msg}")

    def _show_idle_page(self) -> None:
        self._update_summary()
        self.stack.setCurrentIndex(PAGE_READY if self._image_count > 0 else PAGE_EMPTY)

    def _update_summary(self) -> None:
        s = self._settings
        self.summary_label.setText(
            f"{plural(self._image_count, 'image')} • {s.page_size} {s.orientation}\n"
            f"{s.scaling} scaling • {s.quality} quality"
        )

    def _show_error(self, title: str, message: str) -> None:
        QMessageBox.critical(self, title, message)
