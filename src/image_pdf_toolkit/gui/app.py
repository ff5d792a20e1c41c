"""
Entry point for the PySide6 GUI.
"""
import logging
import sys


def run():
    """
    Main entry point for the GUI application.
    """
    from PySide6.QtWidgets import QApplication

    from image_pdf_toolkit.gui.main_window import MainWindow
    from image_pdf_toolkit.gui.models.settings import SettingsStore
    from image_pdf_toolkit.gui.styles.theme import GLOBAL_STYLESHEET
    from image_pdf_toolkit.gui.utils.paths import APP_NAME, get_settings_path

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationDisplayName(APP_NAME)
    app.setOrganizationName(APP_NAME)

    settings = SettingsStore(get_settings_path())

    # Check for malformed settings and prompt user to reset if needed
    if not settings.check_load_error():
        sys.exit(1)  # User chose not to reset, exit app

    app.setStyleSheet(GLOBAL_STYLESHEET)

    window = MainWindow(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
