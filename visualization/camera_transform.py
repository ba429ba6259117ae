"""
Camera Transform

Immutable 4x4 affine model-to-view matrix.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple
import math
import numpy as np


@dataclass(frozen=True)
class CameraTransform:
    """
    Affine transform stored as 16 floats in row-major order.

    The last row must be [0, 0, 0, 1].
    """
    values: Tuple[float, ...]

    def __post_init__(self):
        values = tuple(float(v) for v in self.values)
        if len(values) != 16:
            raise ValueError(f"Expected 16 values, got {len(values)}")
        if not all(math.isfinite(v) for v in values):
            raise ValueError("Transform values must be finite")
        if values[12:] != (0.0, 0.0, 0.0, 1.0):
            raise ValueError(f"Last row must be [0, 0, 0, 1], got {list(values[12:])}")
        object.__setattr__(self, "values", values)

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "CameraTransform":
        return cls(tuple(values))

    @classmethod
    def from_string(cls, text: str) -> "CameraTransform":
        """Parse 16 whitespace-separated numbers."""
        return cls(tuple(float(token) for token in text.split()))

    @classmethod
    def identity(cls) -> "CameraTransform":
        return cls(tuple(np.eye(4).ravel()))

    @property
    def matrix(self) -> np.ndarray:
        """4x4 float64 matrix."""
        return np.array(self.values, dtype=np.float64).reshape(4, 4)

    def as_list(self) -> List[float]:
        return list(self.values)

    def __str__(self) -> str:
        return " ".join(repr(v) for v in self.values)
