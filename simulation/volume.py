"""
Volume Data Structure

Defines the 8-bit grayscale volume handed to the 3D viewer.
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np


MAX_INTENSITY = 255


@dataclass(frozen=True, eq=False)
class Volume:
    """
    Named 8-bit grayscale volume.

    Attributes:
        name: Display name, also used as the viewer object name
        data: Read-only 3D uint8 array (Z, Y, X)
    """
    name: str
    data: np.ndarray  # Shape: (slices, height, width), dtype: uint8

    @property
    def shape(self) -> Tuple[int, int, int]:
        return self.data.shape

    @property
    def dimensions(self) -> Tuple[int, int, int]:
        """Size as (nx, ny, nz)."""
        nz, ny, nx = self.data.shape
        return (nx, ny, nz)

    @property
    def num_slices(self) -> int:
        return self.data.shape[0]

    def get_slice(self, index: int, axis: int = 0) -> np.ndarray:
        """Get a 2D slice along specified axis (0=Z, 1=Y, 2=X)."""
        if axis == 0:
            return self.data[index, :, :]
        elif axis == 1:
            return self.data[:, index, :]
        else:
            return self.data[:, :, index]
