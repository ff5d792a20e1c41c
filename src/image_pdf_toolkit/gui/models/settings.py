"""
Settings persistence model for the GUI.

This module handles all persistent GUI state with robust error handling.
Any malformed data should result in graceful fallback to defaults, never CTD.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Optional

from PySide6.QtCore import QObject, Signal

from image_pdf_toolkit.core.models import ConversionSettings

logger = logging.getLogger(__name__)


class SettingsStore(QObject):
    """Lightweight JSON-backed store for persisting GUI preferences."""

    conversionSettingsChanged = Signal(object)
    CURRENT_VERSION = 1

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        self.data: Dict[str, object] = {}
        self._load_error: Optional[str] = None

        if self.path.exists():
            try:
                self.data = json.loads(self.path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as e:
                self._load_error = f"Settings file is corrupted:\n{e}"
                self.data = {}
            except OSError as e:
                self._load_error = f"Failed to read settings:\n{e}"
                self.data = {}

        # Ensure version is set for new files
        if "version" not in self._get_dict():
            self.data["version"] = self.CURRENT_VERSION

    @property
    def load_error(self) -> Optional[str]:
        return self._load_error

    def check_load_error(self) -> bool:
        """
        Check if there was an error loading settings and prompt user to reset.

        Returns True if app should continue, False if app should exit.
        Call this after QApplication is created.
        """
        if not self._load_error:
            return True

        from PySide6.QtWidgets import QMessageBox

        msg = QMessageBox()
        msg.setIcon(QMessageBox.Icon.Warning)
        msg.setWindowTitle("Settings Error")
        msg.setText("Your settings file could not be loaded.")
        msg.setInformativeText(
            f"{self._load_error}\n\n"
            "Would you like to reset settings to defaults and continue?"
        )
        msg.setStandardButtons(
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        msg.setDefaultButton(QMessageBox.StandardButton.Yes)

        if msg.exec() == QMessageBox.StandardButton.Yes:
            # Reset was already done by setting self.data = {}
            self._save()
            self._load_error = None
            return True
        return False

    def get_conversion_settings(self) -> ConversionSettings:
        """Get the last used conversion settings.

        Falls back to defaults if settings are missing or malformed.
        Never raises.
        """
        raw = self._get_dict().get("conversion")
        if not isinstance(raw, dict):
            return ConversionSettings()
        try:
            return ConversionSettings.from_dict(raw)
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid conversion settings, using defaults: {e}")
            return ConversionSettings()

    def set_conversion_settings(self, settings: ConversionSettings) -> None:
        state = self._get_dict()
        state["conversion"] = settings.to_dict()
        self._save()
        self.conversionSettingsChanged.emit(settings)

    def get_output_dir(self) -> Optional[str]:
        value = self._get_dict().get("output_dir")
        return value if isinstance(value, str) and value else None

    def set_output_dir(self, value: str) -> None:
        state = self._get_dict()
        state["output_dir"] = value
        self._save()

    def get_window_geometry(self) -> Optional[str]:
        """Get saved window geometry with hex validation.

        Returns None if geometry is missing or invalid hex.
        """
        geo = self._get_dict().get("window_geometry")
        if not isinstance(geo, str):
            return None
        try:
            bytes.fromhex(geo)
            return geo
        except ValueError:
            logger.warning("Invalid geometry string in settings, ignoring")
            return None

    def set_window_geometry(self, geometry: str) -> None:
        state = self._get_dict()
        state["window_geometry"] = geometry
        self._save()

    def reset(self) -> None:
        """Discard all stored preferences."""
        self.data = {"version": self.CURRENT_VERSION}
        self._save()
        self.conversionSettingsChanged.emit(ConversionSettings())

    def _get_dict(self) -> Dict[str, object]:
        if not isinstance(self.data, dict):
            self.data = {}
        return self.data

    def _save(self) -> None:
        """Safely write settings with atomic replacement.

        Uses a temp file to prevent corruption if write is interrupted.
        """
        temp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)

            # Write to temp file first
            temp_path = self.path.with_suffix('.tmp')
            temp_path.write_text(json.dumps(self.data, indent=2), encoding="utf-8")

            # Atomic rename (overwrites existing)
            temp_path.replace(self.path)
        except OSError as e:
            logger.warning(f"Failed to save settings: {e}")
            if temp_path:
                try:
                    if temp_path.exists():
                        temp_path.unlink()
                except OSError:
                    pass
