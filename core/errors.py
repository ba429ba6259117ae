"""
Error Types

Exceptions raised while building the demo volume and driving the viewer.
"""

from typing import Any


class InvalidDimensionError(ValueError):
    """Raised when a requested volume dimension is not a positive integer."""

    def __init__(self, name: str, value: Any):
        super().__init__(f"{name} must be a positive integer, got {value!r}")
        self.name = name
        self.value = value


class PresentationFailure(RuntimeError):
    """
    Raised when a step of the scripted viewer sequence could not complete.

    Attributes:
        step_index: 1-based position of the failing step
        step_name: Name of the failing step
    """

    def __init__(self, step_index: int, step_name: str, message: str = ""):
        text = f"Step {step_index} ({step_name}) failed"
        if message:
            text = f"{text}: {message}"
        super().__init__(text)
        self.step_index = step_index
        self.step_name = step_name


class ViewerError(RuntimeError):
    """Raised by a viewer backend when a command cannot be carried out."""
