"""
Aliasing 3D Viewer Demo

Main entry point for the application.
"""

import sys
from PySide6.QtWidgets import QApplication
import logging

from config import DEFAULT_DEMO, DEFAULT_VOLUME, DEFAULT_VIEWER
from core.errors import InvalidDimensionError, PresentationFailure
from demo import run_demo
from gui.stack_window import StackWindow
from gui.style import ViewerStyle
from gui.viewer_window import Viewer3DWindow
from visualization.volume_viewer import PyVistaViewer3D


def setup_logging():
    """Configure logging to stdout."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def main():
    """Application entry point."""
    setup_logging()

    app = QApplication(sys.argv)
    app.setApplicationName("Aliasing 3D Viewer")
    app.setApplicationVersion("1.0")

    ViewerStyle.apply(app)

    viewer = PyVistaViewer3D(window_factory=Viewer3DWindow)

    # Keep references so the windows are not garbage collected
    stack_windows = []

    def show_stack(volume):
        stack_window = StackWindow(volume)
        stack_window.show()
        stack_windows.append(stack_window)

    try:
        run_demo(
            viewer, DEFAULT_VOLUME, DEFAULT_VIEWER,
            on_built=show_stack if DEFAULT_DEMO.show_stack else None
        )
    except (InvalidDimensionError, PresentationFailure) as e:
        logging.error(f"Demo failed: {e}")
        sys.exit(1)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
