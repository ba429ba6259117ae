"""
Simulation package for synthetic test volumes.
"""

from .volume import Volume, MAX_INTENSITY
from .double_sheet import VolumeBuilder

__all__ = [
    "Volume",
    "MAX_INTENSITY",
    "VolumeBuilder",
]
