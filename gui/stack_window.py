"""
Stack Window

Shows a volume one Z slice at a time.
"""

from typing import Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox,
    QLabel, QSlider, QSpinBox
)
from PySide6.QtCore import Qt

import pyqtgraph as pg

from simulation.volume import Volume, MAX_INTENSITY


class StackWindow(QWidget):
    """Window for browsing the slices of a volume."""

    def __init__(self, volume: Volume, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self._volume = volume
        self._current_slice = 0

        self._setup_ui()
        self._update_display()

    def _setup_ui(self) -> None:
        """Set up the window UI."""
        self.setWindowTitle(self._volume.name)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        view_group = QGroupBox("Stack")
        view_layout = QVBoxLayout(view_group)

        self._image_view = pg.ImageView()
        self._image_view.ui.roiBtn.hide()
        self._image_view.ui.menuBtn.hide()
        self._image_view.setColorMap(pg.colormap.getFromMatplotlib('gray'))
        view_layout.addWidget(self._image_view)

        layout.addWidget(view_group, stretch=1)

        # Slice navigation
        nav_group = QGroupBox("Navigation")
        nav_layout = QHBoxLayout(nav_group)

        nav_layout.addWidget(QLabel("Slice:"))

        last = self._volume.num_slices - 1

        self._slice_slider = QSlider(Qt.Horizontal)
        self._slice_slider.setRange(0, last)
        self._slice_slider.setValue(0)
        self._slice_slider.valueChanged.connect(self._on_slice_changed)
        nav_layout.addWidget(self._slice_slider, stretch=1)

        self._slice_spin = QSpinBox()
        self._slice_spin.setRange(0, last)
        self._slice_spin.setValue(0)
        self._slice_spin.valueChanged.connect(self._on_slice_spin_changed)
        nav_layout.addWidget(self._slice_spin)

        nav_layout.addWidget(QLabel(f"/ {self._volume.num_slices}"))

        layout.addWidget(nav_group)

    def _on_slice_changed(self, value: int) -> None:
        """Handle slice slider change."""
        self._current_slice = value
        self._slice_spin.blockSignals(True)
        self._slice_spin.setValue(value)
        self._slice_spin.blockSignals(False)
        self._update_display()

    def _on_slice_spin_changed(self, value: int) -> None:
        """Handle slice spin box change."""
        self._current_slice = value
        self._slice_slider.blockSignals(True)
        self._slice_slider.setValue(value)
        self._slice_slider.blockSignals(False)
        self._update_display()

    def _update_display(self) -> None:
        """Update the image display."""
        slice_data = self._volume.get_slice(self._current_slice)
        # ImageView expects (x, y)
        self._image_view.setImage(slice_data.T, autoLevels=False,
                                  levels=(0, MAX_INTENSITY))

    @property
    def current_slice(self) -> int:
        return self._current_slice
