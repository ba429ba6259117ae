"""GUI package for the aliasing demo."""

from .viewer_window import Viewer3DWindow
from .stack_window import StackWindow
from .style import ViewerStyle

__all__ = [
    "Viewer3DWindow",
    "StackWindow",
    "ViewerStyle",
]
