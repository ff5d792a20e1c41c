"""
Theme definitions for the Image PDF Toolkit GUI.
"""


class Colors:
    # Primary Colors
    PRIMARY = "#0364B8"
    PRIMARY_HOVER = "#0A2767"

    # Backgrounds
    BACKGROUND = "#f5f5f5"
    SURFACE = "#ffffff"
    HOVER = "#f0f0f0"
    DROP_ACTIVE = "#e6f2fb"

    # Text
    TEXT_PRIMARY = "#1f1f1f"
    TEXT_SECONDARY = "#666666"
    TEXT_ON_PRIMARY = "#ffffff"

    # Borders
    BORDER = "#e0e0e0"
    BORDER_FOCUS = "#28A8EA"

    # Status
    ERROR = "#d32f2f"
    SUCCESS = "#388e3c"
    WARNING = "#f57c00"


class Fonts:
    MONO_FONT = "Menlo, Consolas, monospace"
    CONSOLE_PT = 10
    HEADING_PT = 14


class Styles:
    PRIMARY_BUTTON = f"""
        QPushButton {{
            background-color: {Colors.PRIMARY};
            color: {Colors.TEXT_ON_PRIMARY};
            border: none;
            border-radius: 6px;
            padding: 8px 20px;
            font-weight: bold;
        }}
        QPushButton:hover {{ background-color: {Colors.PRIMARY_HOVER}; }}
        QPushButton:disabled {{ background-color: {Colors.BORDER}; color: {Colors.TEXT_SECONDARY}; }}
    """

    SECONDARY_BUTTON = f"""
        QPushButton {{
            background-color: {Colors.SURFACE};
            color: {Colors.TEXT_PRIMARY};
            border: 1px solid {Colors.BORDER};
            border-radius: 6px;
            padding: 8px 20px;
        }}
        QPushButton:hover {{ background-color: {Colors.HOVER}; }}
    """

    DROP_ZONE = f"""
        QLabel {{
            border: 2px dashed {Colors.BORDER};
            border-radius: 8px;
            padding: 24px;
            color: {Colors.TEXT_SECONDARY};
            background-color: {Colors.SURFACE};
        }}
    """

    DROP_ZONE_ACTIVE = f"""
        QLabel {{
            border: 2px dashed {Colors.PRIMARY};
            border-radius: 8px;
            padding: 24px;
            color: {Colors.PRIMARY};
            background-color: {Colors.DROP_ACTIVE};
        }}
    """

    HEADING = f"font-size: {Fonts.HEADING_PT}pt; font-weight: bold; color: {Colors.TEXT_PRIMARY};"
    SUBTLE = f"color: {Colors.TEXT_SECONDARY};"
    SUCCESS_HEADING = f"font-size: {Fonts.HEADING_PT}pt; font-weight: bold; color: {Colors.SUCCESS};"


GLOBAL_STYLESHEET = f"""
    QMainWindow, QWidget {{
        background-color: {Colors.BACKGROUND};
        color: {Colors.TEXT_PRIMARY};
    }}
    QGroupBox {{
        background-color: {Colors.SURFACE};
        border: 1px solid {Colors.BORDER};
        border-radius: 8px;
        margin-top: 24px;
        padding: 12px;
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 8px;
        padding: 0 4px;
    }}
"""
