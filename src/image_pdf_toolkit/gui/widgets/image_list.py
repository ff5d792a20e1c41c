"""
Image list with drop zone.

Collects the images to convert: files dropped from the desktop or picked
in a file dialog, shown as thumbnails that can be reordered by dragging.
"""
import logging
from pathlib import Path
from typing import Iterable, List

from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtGui import QIcon, QPixmap
from PySide6.QtWidgets import (
    QAbstractItemView, QFileDialog, QGroupBox, QHBoxLayout, QLabel, QListWidget,
    QListWidgetItem, QMessageBox, QPushButton, QVBoxLayout
)

from image_pdf_toolkit.core import ImageCollection, SourceImage
from image_pdf_toolkit.core.models import ACCEPTED_EXTENSIONS
from image_pdf_toolkit.gui.styles.theme import Styles

logger = logging.getLogger(__name__)

THUMBNAIL_SIZE = 64
ID_ROLE = Qt.ItemDataRole.UserRole


def file_dialog_filter() -> str:
    """Name filter for QFileDialog, e.g. 'Images (*.jpg *.png ...)'."""
    patterns = " ".join(f"*{ext}" for ext in ACCEPTED_EXTENSIONS)
    return f"Images ({patterns})"


class DropZone(QLabel):
    """Label that accepts image files dragged from the desktop."""

    filesDropped = Signal(list)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAcceptDrops(True)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setWordWrap(True)
        self.setText(
            "Drop images here\n"
            f"Supports {', '.join(ext.lstrip('.').upper() for ext in ACCEPTED_EXTENSIONS)}"
        )
        self.setStyleSheet(Styles.DROP_ZONE)

    def dragEnterEvent(self, event):
        if event.mimeData().hasUrls():
            self.setStyleSheet(Styles.DROP_ZONE_ACTIVE)
            event.acceptProposedAction()
        else:
            event.ignore()

    def dragLeaveEvent(self, event):
        self.setStyleSheet(Styles.DROP_ZONE)
        super().dragLeaveEvent(event)

    def dropEvent(self, event):
        self.setStyleSheet(Styles.DROP_ZONE)
        paths = [
            Path(url.toLocalFile())
            for url in event.mimeData().urls()
            if url.isLocalFile()
        ]
        files = [p for p in paths if p.is_file()]
        if files:
            self.filesDropped.emit(files)
            event.acceptProposedAction()
        else:
            event.ignore()


class ImageListWidget(QGroupBox):
    """Ordered image list backed by an ImageCollection."""

    # Emits the new image count
    imagesChanged = Signal(int)

    def __init__(self, collection: ImageCollection = None, parent=None):
        super().__init__("Images", parent)
        self.collection = collection if collection is not None else ImageCollection()
        self._locked = False

        layout = QVBoxLayout(self)

        self.drop_zone = DropZone()
        self.drop_zone.filesDropped.connect(self.add_files)
        layout.addWidget(self.drop_zone)

        self.list_widget = QListWidget()
        self.list_widget.setIconSize(QSize(THUMBNAIL_SIZE, THUMBNAIL_SIZE))
        self.list_widget.setDragDropMode(QAbstractItemView.DragDropMode.InternalMove)
        self.list_widget.setDefaultDropAction(Qt.DropAction.MoveAction)
        self.list_widget.setSelectionMode(QAbstractItemView.SelectionMode.ExtendedSelection)
        self.list_widget.model().rowsMoved.connect(self._sync_order)
        self.list_widget.itemSelectionChanged.connect(self._update_buttons)
        layout.addWidget(self.list_widget, 1)

        buttons = QHBoxLayout()
        self.add_btn = QPushButton("Add Images...")
        self.add_btn.setStyleSheet(Styles.PRIMARY_BUTTON)
        self.add_btn.clicked.connect(self._browse_files)
        buttons.addWidget(self.add_btn)

        self.remove_btn = QPushButton("Remove")
        self.remove_btn.setStyleSheet(Styles.SECONDARY_BUTTON)
        self.remove_btn.clicked.connect(self.remove_selected)
        buttons.addWidget(self.remove_btn)

        self.clear_btn = QPushButton("Clear All")
        self.clear_btn.setStyleSheet(Styles.SECONDARY_BUTTON)
        self.clear_btn.clicked.connect(self.clear)
        buttons.addWidget(self.clear_btn)

        buttons.addStretch()
        self.count_label = QLabel()
        self.count_label.setStyleSheet(Styles.SUBTLE)
        buttons.addWidget(self.count_label)
        layout.addLayout(buttons)

        self._refresh()

    # ─────────────────────────────────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────────────────────────────────

    def images(self) -> List[SourceImage]:
        """Images in their current order."""
        return list(self.collection)

    def add_files(self, paths: Iterable[Path]) -> int:
        """Add image files; returns how many were added."""
        paths = [Path(p) for p in paths]
        try:
            added = self.collection.add_paths(paths)
        except OSError as e:
            logger.error(f"Could not read image: {e}")
            QMessageBox.warning(self, "Could Not Add Image", str(e))
            return 0

        skipped = len(paths) - len(added)
        if skipped:
            logger.warning(f"Skipped {skipped} unsupported file(s)")

        for image in added:
            self.list_widget.addItem(self._make_item(image))
        self._refresh()
        return len(added)

    def remove_selected(self) -> None:
        for item in self.list_widget.selectedItems():
            self.collection.remove(item.data(ID_ROLE))
            self.list_widget.takeItem(self.list_widget.row(item))
        self._refresh()

    def clear(self) -> None:
        self.collection.clear()
        self.list_widget.clear()
        self._refresh()

    def set_locked(self, locked: bool) -> None:
        """Disable editing while a conversion runs."""
        self._locked = locked
        self.drop_zone.setAcceptDrops(not locked)
        self.list_widget.setDragEnabled(not locked)
        self.add_btn.setEnabled(not locked)
        self._update_buttons()

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _browse_files(self) -> None:
        filenames, _ = QFileDialog.getOpenFileNames(
            self, "Add Images", "", f"{file_dialog_filter()};;All Files (*)"
        )
        if filenames:
            self.add_files(Path(f) for f in filenames)

    def _make_item(self, image: SourceImage) -> QListWidgetItem:
        item = QListWidgetItem(image.name or image.id)
        item.setData(ID_ROLE, image.id)
        item.setToolTip(f"{image.name} ({image.size_bytes / 1024:.1f} KB)")
        pixmap = QPixmap()
        if pixmap.loadFromData(image.data):
            item.setIcon(QIcon(pixmap.scaled(
                THUMBNAIL_SIZE, THUMBNAIL_SIZE,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )))
        return item

    def _sync_order(self, *args) -> None:
        """Mirror the list widget's order into the collection after a drag."""
        ids = [self.list_widget.item(row).data(ID_ROLE) for row in range(self.list_widget.count())]
        self.collection.reorder(ids)
        self.imagesChanged.emit(len(self.collection))

    def _update_buttons(self) -> None:
        self.remove_btn.setEnabled(not self._locked and bool(self.list_widget.selectedItems()))
        self.clear_btn.setEnabled(not self._locked and bool(self.collection))

    def _refresh(self) -> None:
        count = len(self.collection)
        self.count_label.setText(f"{count} image{'s' if count != 1 else ''}")
        self._update_buttons()
        self.imagesChanged.emit(count)
