"""
Viewer Window

Qt window hosting a PyVista interactor, with a timer-driven rotation.
"""

from typing import Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QCheckBox, QLabel
)
from PySide6.QtCore import QTimer

from pyvistaqt import QtInteractor

from config import ViewerConfig, DEFAULT_VIEWER


class Viewer3DWindow(QWidget):
    """3D view window for volumes."""

    def __init__(self, config: ViewerConfig = DEFAULT_VIEWER,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)

        self._config = config
        self._step_deg = config.rotation_step_deg
        self._interval_ms = config.rotation_interval_ms
        self._timer = QTimer(self)
        self._timer.timeout.connect(self._on_tick)

        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the window UI."""
        self.setWindowTitle(self._config.window_title)
        self.resize(*self._config.window_size)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        # 3D View
        view_group = QGroupBox("3D View")
        view_layout = QVBoxLayout(view_group)

        self._plotter = QtInteractor(self)
        self._plotter.set_background(self._config.background_color)
        view_layout.addWidget(self._plotter.interactor)

        layout.addWidget(view_group, stretch=1)

        # Animation controls
        controls_group = QGroupBox("Animation")
        controls_layout = QHBoxLayout(controls_group)

        self._rotate_check = QCheckBox("Rotate")
        self._rotate_check.setChecked(False)
        self._rotate_check.toggled.connect(self._on_rotate_toggled)
        controls_layout.addWidget(self._rotate_check)

        controls_layout.addStretch()

        self._angle_label = QLabel("Azimuth: 0.0°")
        controls_layout.addWidget(self._angle_label)

        layout.addWidget(controls_group)

    @property
    def plotter(self) -> QtInteractor:
        """PyVista plotter of this window."""
        return self._plotter

    @property
    def is_rotating(self) -> bool:
        return self._timer.isActive()

    @property
    def rotation_interval_ms(self) -> int:
        return self._interval_ms

    def set_axes_visible(self, visible: bool) -> None:
        """Show or hide the orientation axes."""
        if visible:
            self._plotter.show_axes()
        else:
            self._plotter.hide_axes()

    def start_rotation(self, step_deg: float, interval_ms: int) -> None:
        """
        Rotate the camera around the scene until stopped.

        Args:
            step_deg: Azimuth increment per tick in degrees
            interval_ms: Timer interval in milliseconds
        """
        self._step_deg = step_deg
        self._interval_ms = interval_ms
        self._timer.start(interval_ms)
        self._rotate_check.blockSignals(True)
        self._rotate_check.setChecked(True)
        self._rotate_check.blockSignals(False)

    def stop_rotation(self) -> None:
        """Stop the rotation timer."""
        self._timer.stop()
        self._rotate_check.blockSignals(True)
        self._rotate_check.setChecked(False)
        self._rotate_check.blockSignals(False)

    def _on_rotate_toggled(self, checked: bool) -> None:
        """Handle rotate checkbox toggle."""
        if checked:
            self._timer.start(self._interval_ms)
        else:
            self._timer.stop()

    def _on_tick(self) -> None:
        """Advance the rotation by one step."""
        camera = self._plotter.camera
        camera.azimuth = (camera.azimuth + self._step_deg) % 360.0
        self._angle_label.setText(f"Azimuth: {camera.azimuth:.1f}°")
        self._plotter.render()

    def closeEvent(self, event) -> None:
        self._timer.stop()
        self._plotter.close()
        super().closeEvent(event)
