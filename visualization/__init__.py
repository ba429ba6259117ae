"""
Visualization Package

Contains the camera transform, the presentation sequence and
the PyVista viewer backend.
"""

from .camera_transform import CameraTransform
from .director import ViewerDirector, SessionState, PRESENTATION_STEPS
from .volume_viewer import PyVistaViewer3D, ViewerSession, volume_to_image_data

__all__ = [
    'CameraTransform',
    'ViewerDirector',
    'SessionState',
    'PRESENTATION_STEPS',
    'PyVistaViewer3D',
    'ViewerSession',
    'volume_to_image_data',
]
