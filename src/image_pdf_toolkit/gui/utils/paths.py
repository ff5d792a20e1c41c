"""
Path utilities for handling dev vs production (frozen) file locations.

Dev mode: Uses local workspace/ directory
Frozen mode: Uses system-standard paths (Documents, AppData)
"""
from __future__ import annotations

import sys
from pathlib import Path

# Try to import Qt paths, but don't fail if not available (e.g., in CLI context)
try:
    from PySide6.QtCore import QStandardPaths
    _HAS_QT = True
except ImportError:
    _HAS_QT = False

APP_NAME = "Image PDF Toolkit"


def is_frozen() -> bool:
    """Check if running as a frozen (PyInstaller) application."""
    return getattr(sys, 'frozen', False) or hasattr(sys, '_MEIPASS')


def get_app_data_dir() -> Path:
    """
    Get the application data directory for internal state files.

    Frozen: ~/Library/Application Support/Image PDF Toolkit (macOS)
            or %LOCALAPPDATA%/Image PDF Toolkit (Windows)
    Dev: workspace/
    """
    if is_frozen():
        if _HAS_QT:
            app_data = Path(QStandardPaths.writableLocation(
                QStandardPaths.StandardLocation.AppLocalDataLocation
            ))
            app_data.mkdir(parents=True, exist_ok=True)
            return app_data
        import os
        import platform
        if platform.system() == "Windows":
            base = os.environ.get("LOCALAPPDATA", os.environ.get("APPDATA"))
            return Path(base) / APP_NAME if base else Path.home() / ".image_pdf_toolkit"
        elif platform.system() == "Darwin":
            return Path.home() / "Library/Application Support" / APP_NAME
        return Path.home() / ".local/share" / APP_NAME
    # Dev mode: use local workspace
    return Path.cwd() / "workspace"


def get_default_output_dir() -> Path:
    """
    Default folder offered when saving a converted PDF.

    Frozen: the user's Documents folder
    Dev: workspace/output
    """
    if is_frozen():
        if _HAS_QT:
            return Path(QStandardPaths.writableLocation(
                QStandardPaths.StandardLocation.DocumentsLocation
            ))
        return Path.home() / "Documents"
    return Path.cwd() / "workspace" / "output"


def get_settings_path() -> Path:
    """Get the path for storing GUI settings."""
    return get_app_data_dir() / "gui_settings.json"
