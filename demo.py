"""
Aliasing Demo

Builds the double-sheet volume and hands it to a 3D viewer with the
calibrated transform. Rotating the sheets exposes the artifacts of
rendering surfaces nearly parallel to the direction of view.
"""

from typing import Callable, Optional

from config import (
    ALIASING_TRANSFORM, VolumeConfig, ViewerConfig,
    DEFAULT_VOLUME, DEFAULT_VIEWER
)
from core.base import Viewer3D
from simulation.double_sheet import VolumeBuilder
from simulation.volume import Volume
from visualization.camera_transform import CameraTransform
from visualization.director import ViewerDirector


def run_demo(
    viewer: Viewer3D,
    volume_config: VolumeConfig = DEFAULT_VOLUME,
    viewer_config: ViewerConfig = DEFAULT_VIEWER,
    transform: Optional[CameraTransform] = None,
    on_built: Optional[Callable[[Volume], None]] = None
) -> Volume:
    """
    Build the double sheet and present it on a viewer.

    Args:
        viewer: Viewer to drive
        volume_config: Volume name and size
        viewer_config: Configuration for the viewer session
        transform: Model-to-view transform (defaults to the calibrated one)
        on_built: Called with the volume before the viewer is touched

    Returns:
        The presented Volume

    Raises:
        InvalidDimensionError: If the configured size is invalid
        PresentationFailure: If the viewer sequence fails
    """
    if transform is None:
        transform = CameraTransform.from_sequence(ALIASING_TRANSFORM)

    volume = VolumeBuilder().build(
        volume_config.name,
        volume_config.nx,
        volume_config.ny,
        volume_config.nz
    )
    if on_built is not None:
        on_built(volume)
    ViewerDirector(viewer_config).present(volume, transform, viewer)
    return volume
