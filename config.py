"""
Aliasing Demo Configuration

Contains constants and default settings for the double-sheet demonstration.
"""

from dataclasses import dataclass
from typing import Tuple


# Model-to-view matrix (row-major, 4x4) calibrated for the 200^3 double sheet.
# Opaque calibration data: keep the values verbatim.
ALIASING_TRANSFORM: Tuple[float, ...] = (
    0.3957328, 0.8860198, 0.24158749, -52.036102,
    -0.7248819, 0.4628736, -0.51019055, 176.21109,
    -0.5638634, 0.026776686, 0.82543397, 70.760185,
    0.0, 0.0, 0.0, 1.0,
)


@dataclass
class VolumeConfig:
    """Configuration for the synthetic double-sheet volume."""
    name: str = "Double_Sheet"
    nx: int = 200
    ny: int = 200
    nz: int = 200


@dataclass
class ViewerConfig:
    """Configuration for the 3D viewer window."""
    window_title: str = "3D Viewer"
    window_size: Tuple[int, int] = (800, 800)
    background_color: str = "#000000"
    label_color: str = "#FFFFFF"
    spacing: Tuple[float, float, float] = (1.0, 1.0, 1.0)  # voxel size (x, y, z)
    rotation_step_deg: float = 1.0  # Camera azimuth increment per tick
    rotation_interval_ms: int = 30


@dataclass
class DemoConfig:
    """Configuration for the demo run."""
    show_stack: bool = True  # Show the 2D slice stack next to the 3D view


# Default configurations
DEFAULT_VOLUME = VolumeConfig()
DEFAULT_VIEWER = ViewerConfig()
DEFAULT_DEMO = DemoConfig()
