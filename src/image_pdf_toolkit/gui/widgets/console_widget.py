"""
Console widget for displaying logs.
"""
import queue
from datetime import datetime
from typing import Optional, Set

from PySide6.QtCore import QTimer, Slot
from PySide6.QtGui import QColor, QFont, QTextCharFormat, QTextCursor
from PySide6.QtWidgets import (
    QApplication, QFileDialog, QGroupBox, QMenu, QPlainTextEdit, QSizePolicy, QVBoxLayout
)

from image_pdf_toolkit.gui.styles.theme import Colors, Fonts

# Log levels hidden from the console, e.g. {"info"}
CONSOLE_SUPPRESSED_LEVELS: Set[str] = set()

MAX_LINES = 1000
POLL_INTERVAL_MS = 100


class ConsoleWidget(QGroupBox):
    def __init__(self, log_queue: Optional[queue.Queue] = None, parent=None):
        super().__init__("Console Log", parent)

        # Can be overridden per instance: console.suppressed_levels = {"warning"}
        self.suppressed_levels: Set[str] = CONSOLE_SUPPRESSED_LEVELS.copy()
        self.log_queue = log_queue or queue.Queue()

        self.setMinimumHeight(40)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.text_edit = QPlainTextEdit()
        self.text_edit.setReadOnly(True)
        self.text_edit.setLineWrapMode(QPlainTextEdit.LineWrapMode.WidgetWidth)
        font = QFont(Fonts.MONO_FONT.split(',')[0])
        font.setPointSize(Fonts.CONSOLE_PT)
        self.text_edit.setFont(font)
        layout.addWidget(self.text_edit)

        self.format_info = QTextCharFormat()
        self.format_info.setForeground(QColor(Colors.TEXT_PRIMARY))

        self.format_error = QTextCharFormat()
        self.format_error.setForeground(QColor(Colors.ERROR))

        self.format_warning = QTextCharFormat()
        self.format_warning.setForeground(QColor(Colors.WARNING))

        self.format_success = QTextCharFormat()
        self.format_success.setForeground(QColor(Colors.SUCCESS))

        # Drain log records produced on worker threads
        self._poll_timer = QTimer(self)
        self._poll_timer.setInterval(POLL_INTERVAL_MS)
        self._poll_timer.timeout.connect(self.drain_queue)
        self._poll_timer.start()

    @Slot()
    def drain_queue(self) -> None:
        """Append every (message, level) pair waiting in the log queue."""
        while True:
            try:
                message, level = self.log_queue.get_nowait()
            except queue.Empty:
                break
            self.append_log(level, message)

    @Slot(str, str)
    def append_log(self, level: str, message: str):
        """Appends a log message with color coding based on level."""
        if level.lower() in self.suppressed_levels:
            return

        cursor = self.text_edit.textCursor()
        cursor.movePosition(QTextCursor.MoveOperation.End)

        fmt = self.format_info
        if level.lower() in ("error", "critical"):
            fmt = self.format_error
        elif level.lower() in ("warning", "warn"):
            fmt = self.format_warning
        elif level.lower() == "success":
            fmt = self.format_success

        timestamp = datetime.now().strftime("%H:%M:%S")
        cursor.insertText(f"[{timestamp}] [{level.upper()}] {message}\n", fmt)

        self.text_edit.setTextCursor(cursor)
        self.text_edit.ensureCursorVisible()

        doc = self.text_edit.document()
        if doc.blockCount() > MAX_LINES:
            cursor = self.text_edit.textCursor()
            cursor.movePosition(QTextCursor.MoveOperation.Start)
            cursor.movePosition(
                QTextCursor.MoveOperation.NextBlock,
                QTextCursor.MoveMode.KeepAnchor,
                doc.blockCount() - MAX_LINES,
            )
            cursor.removeSelectedText()

    def contextMenuEvent(self, event):
        menu = QMenu(self)

        copy_all_action = menu.addAction("Copy All")
        save_action = menu.addAction("Save to File...")
        menu.addSeparator()
        clear_action = menu.addAction("Clear")

        action = menu.exec(event.globalPos())

        if action == copy_all_action:
            QApplication.clipboard().setText(self.text_edit.toPlainText())
        elif action == save_action:
            self._save_to_file()
        elif action == clear_action:
            self.clear()

    def _save_to_file(self):
        filename, _ = QFileDialog.getSaveFileName(
            self, "Save Log", "console_log.txt", "Text Files (*.txt);;All Files (*)"
        )
        if filename:
            try:
                with open(filename, 'w', encoding='utf-8') as f:
                    f.write(self.text_edit.toPlainText())
            except OSError as e:
                self.append_log("ERROR", f"Failed to save log: {e}")

    def clear(self):
        self.text_edit.clear()

    def plain_text(self) -> str:
        return self.text_edit.toPlainText()
