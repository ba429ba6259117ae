"""
Core Base Classes

Provides the abstract 3D viewer interface that the demo drives.
Backends (PyVista, test doubles) implement it; callers receive
an instance explicitly instead of reaching for a global viewer.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Sequence, Tuple


class RenderMode(Enum):
    """How a volume object is displayed."""
    NONE = "none"  # Direct volume rendering, no surface extraction
    SURFACE = "surface"
    ISO = "iso"


# Red, green and blue channels all enabled
DEFAULT_CHANNELS: Tuple[bool, bool, bool] = (True, True, True)


class Viewer3D(ABC):
    """Abstract base class for 3D viewers."""

    @abstractmethod
    def reset_all(self) -> None:
        """Close every open display and forget all sessions."""
        pass

    @abstractmethod
    def open_viewer(self, config: Any) -> Any:
        """
        Ensure a viewing session is open.

        Args:
            config: ViewerConfig for a newly created session

        Returns:
            Session handle passed to every other call
        """
        pass

    @abstractmethod
    def set_axis_overlay(self, session: Any, enabled: bool) -> None:
        """Show or hide the coordinate-axis overlay."""
        pass

    @abstractmethod
    def add_volume_object(
        self,
        session: Any,
        volume: Any,
        render_mode: RenderMode,
        label: str,
        channels: Tuple[bool, bool, bool] = DEFAULT_CHANNELS,
        visible: bool = True,
        threshold: float = 0,
        resampling_factor: int = 1
    ) -> None:
        """
        Import a volume as a renderable object registered under its name.

        Args:
            session: Session handle from open_viewer
            volume: Volume to display
            render_mode: Rendering mode
            label: On-screen label
            channels: Enabled (red, green, blue) color channels
            visible: Initial visibility
            threshold: Intensity threshold for surface extraction
            resampling_factor: Integer downsampling factor
        """
        pass

    @abstractmethod
    def select_object(self, session: Any, name: str) -> None:
        """Mark a registered object as the active selection."""
        pass

    @abstractmethod
    def set_transform(self, session: Any, matrix16: Sequence[float]) -> None:
        """
        Apply a model-to-view matrix to the active selection.

        Args:
            session: Session handle
            matrix16: 16 values of a 4x4 matrix in row-major order
        """
        pass

    @abstractmethod
    def start_animation(self, session: Any) -> None:
        """Start continuous rotation. Returns immediately."""
        pass
