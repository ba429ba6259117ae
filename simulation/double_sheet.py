"""
Double Sheet Builder

Generates the synthetic test volume: a black cube whose first and
last Z slices are fully white. Viewed almost edge-on, the two sheets
are undersampled by the renderer and show aliasing artifacts.
"""

import logging
import numbers
import numpy as np

from core.errors import InvalidDimensionError
from .volume import Volume, MAX_INTENSITY


class VolumeBuilder:
    """Builds double-sheet volumes."""

    def build(self, name: str, nx: int, ny: int, nz: int) -> Volume:
        """
        Build a volume with white first and last Z slices.

        With nz == 1 both sheets are the same slice, which ends up white.

        Args:
            name: Display name of the volume
            nx: Width in voxels
            ny: Height in voxels
            nz: Number of slices

        Returns:
            Read-only Volume

        Raises:
            InvalidDimensionError: If any dimension is not a positive integer
        """
        if not isinstance(name, str) or not name:
            raise ValueError("name must be a non-empty string")

        for dim_name, value in (("nx", nx), ("ny", ny), ("nz", nz)):
            if (isinstance(value, bool)
                    or not isinstance(value, numbers.Integral)
                    or value <= 0):
                raise InvalidDimensionError(dim_name, value)

        data = np.zeros((nz, ny, nx), dtype=np.uint8)
        data[0, :, :] = MAX_INTENSITY
        data[nz - 1, :, :] = MAX_INTENSITY
        data.setflags(write=False)

        logging.info(f"Built volume '{name}': {nx}x{ny}x{nz}")
        return Volume(name=name, data=data)
