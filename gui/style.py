"""
Viewer Theme Stylesheet

Dark Qt stylesheet so the black volume background blends with the window.
"""

# Dark viewer color palette
COLORS = {
    "background": "#1E1E1E",
    "surface": "#252526",
    "border": "#3C3C3C",
    "text": "#E0E0E0",
    "text_secondary": "#A0A0A0",
    "accent": "#4FC3F7",
}

# Font settings
FONTS = {
    "family": "Segoe UI, Roboto, Helvetica Neue, Arial, sans-serif",
    "size": "10pt",
}


def get_stylesheet() -> str:
    """Get the complete Qt stylesheet for the viewer theme."""
    return f"""
    QWidget {{
        background-color: {COLORS["background"]};
        color: {COLORS["text"]};
        font-family: {FONTS["family"]};
        font-size: {FONTS["size"]};
    }}

    QGroupBox {{
        background-color: {COLORS["surface"]};
        border: 1px solid {COLORS["border"]};
        border-radius: 4px;
        margin-top: 12px;
        padding: 8px;
    }}

    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 8px;
        padding: 0 4px;
        color: {COLORS["text_secondary"]};
    }}

    QCheckBox::indicator:checked {{
        background-color: {COLORS["accent"]};
        border: 1px solid {COLORS["accent"]};
    }}

    QSlider::handle:horizontal {{
        background-color: {COLORS["accent"]};
        width: 12px;
        border-radius: 6px;
    }}
    """


class ViewerStyle:
    """Helper class for applying the viewer theme."""

    @staticmethod
    def apply(app) -> None:
        """
        Apply the viewer theme to a QApplication.

        Args:
            app: QApplication instance
        """
        app.setStyleSheet(get_stylesheet())

