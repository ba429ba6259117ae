"""
Core Package

Contains the viewer interface and error types shared by the demo.
"""

from .base import Viewer3D, RenderMode, DEFAULT_CHANNELS
from .errors import InvalidDimensionError, PresentationFailure, ViewerError

__all__ = [
    'Viewer3D',
    'RenderMode',
    'DEFAULT_CHANNELS',
    'InvalidDimensionError',
    'PresentationFailure',
    'ViewerError',
]
