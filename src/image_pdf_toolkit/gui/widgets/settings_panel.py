"""
PDF settings panel: page size, orientation, scaling and quality.
"""
from PySide6.QtCore import Signal
from PySide6.QtWidgets import QComboBox, QFormLayout, QGroupBox, QLabel, QVBoxLayout

from image_pdf_toolkit.converter.config import PAGE_SIZES_MM
from image_pdf_toolkit.core.models import (
    ConversionSettings, Orientation, PageSize, Quality, ScalingPolicy
)
from image_pdf_toolkit.gui.styles.theme import Styles

# Imperial sizes are labelled in inches
_INCH_LABELS = {
    PageSize.LETTER: '8.5 × 11"',
    PageSize.LEGAL: '8.5 × 14"',
}

SCALING_LABELS = {
    ScalingPolicy.FIT: "Fit to page",
    ScalingPolicy.FILL: "Fill page",
    ScalingPolicy.ORIGINAL: "Original size",
}

QUALITY_LABELS = {
    Quality.HIGH: "High Quality",
    Quality.MEDIUM: "Medium Quality",
    Quality.LOW: "Low Quality (smaller file)",
}


def page_size_label(page_size: PageSize) -> str:
    """Combo box label, e.g. 'A4 (210 × 297 mm)'."""
    if page_size in _INCH_LABELS:
        return f"{page_size} ({_INCH_LABELS[page_size]})"
    width, height = PAGE_SIZES_MM[page_size]
    return f"{page_size} ({width:g} × {height:g} mm)"


class SettingsPanel(QGroupBox):
    """Form for the four conversion settings."""

    settingsChanged = Signal(object)

    def __init__(self, settings: ConversionSettings = None, parent=None):
        super().__init__("PDF Settings", parent)

        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.page_size_combo = QComboBox()
        for size in PageSize:
            self.page_size_combo.addItem(page_size_label(size), size.value)
        form.addRow("Page Size", self.page_size_combo)

        self.orientation_combo = QComboBox()
        for orientation in Orientation:
            self.orientation_combo.addItem(orientation.value.capitalize(), orientation.value)
        form.addRow("Orientation", self.orientation_combo)

        self.scaling_combo = QComboBox()
        for policy in ScalingPolicy:
            self.scaling_combo.addItem(SCALING_LABELS[policy], policy.value)
        form.addRow("Image Scaling", self.scaling_combo)

        self.quality_combo = QComboBox()
        for quality in Quality:
            self.quality_combo.addItem(QUALITY_LABELS[quality], quality.value)
        form.addRow("Output Quality", self.quality_combo)

        layout.addLayout(form)

        self.preview_label = QLabel()
        self.preview_label.setStyleSheet(Styles.SUBTLE)
        layout.addWidget(self.preview_label)

        self.set_settings(settings or ConversionSettings())

        for combo in self._combos():
            combo.currentIndexChanged.connect(self._on_changed)

    def settings(self) -> ConversionSettings:
        """Snapshot of the current selection."""
        return ConversionSettings(
            page_size=self.page_size_combo.currentData(),
            orientation=self.orientation_combo.currentData(),
            scaling=self.scaling_combo.currentData(),
            quality=self.quality_combo.currentData(),
        )

    def set_settings(self, settings: ConversionSettings) -> None:
        """Select the given values without emitting settingsChanged."""
        for combo in self._combos():
            combo.blockSignals(True)
        try:
            self._select(self.page_size_combo, settings.page_size.value)
            self._select(self.orientation_combo, settings.orientation.value)
            self._select(self.scaling_combo, settings.scaling.value)
            self._select(self.quality_combo, settings.quality.value)
        finally:
            for combo in self._combos():
                combo.blockSignals(False)
        self.preview_label.setText(settings.summary())

    def set_locked(self, locked: bool) -> None:
        for combo in self._combos():
            combo.setEnabled(not locked)

    def _combos(self):
        return (
            self.page_size_combo,
            self.orientation_combo,
            self.scaling_combo,
            self.quality_combo,
        )

    @staticmethod
    def _select(combo: QComboBox, value: str) -> None:
        index = combo.findData(value)
        if index >= 0:
            combo.setCurrentIndex(index)

    def _on_changed(self, _index: int) -> None:
        settings = self.settings()
        self.preview_label.setText(settings.summary())
        self.settingsChanged.emit(settings)
