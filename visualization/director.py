"""
Viewer Director

Drives a 3D viewer through the fixed aliasing demonstration:
reset, open, hide axes, add volume, select, transform, animate.
"""

import logging
from enum import Enum
from typing import Callable, List, Tuple

from config import ViewerConfig, DEFAULT_VIEWER
from core.base import Viewer3D, RenderMode, DEFAULT_CHANNELS
from core.errors import PresentationFailure
from simulation.volume import Volume
from .camera_transform import CameraTransform


class SessionState(Enum):
    """Progress of the scripted sequence."""
    CLOSED = "closed"
    OPEN = "open"
    OBJECT_LOADED = "object_loaded"
    OBJECT_SELECTED = "object_selected"
    TRANSFORM_APPLIED = "transform_applied"
    ANIMATING = "animating"


PRESENTATION_STEPS: Tuple[str, ...] = (
    "reset_all",
    "open_viewer",
    "set_axis_overlay",
    "add_volume_object",
    "select_object",
    "set_transform",
    "start_animation",
)


class ViewerDirector:
    """
    Runs the presentation sequence against an injected viewer.

    Every step blocks until the viewer returns, except the final
    start_animation which hands the rotation over to the viewer.
    A failing step aborts the sequence; nothing is retried because
    the first step discards all viewer state.
    """

    def __init__(self, viewer_config: ViewerConfig = DEFAULT_VIEWER):
        self._viewer_config = viewer_config
        self._state = SessionState.CLOSED

    @property
    def state(self) -> SessionState:
        """Last state reached by the sequence."""
        return self._state

    def present(
        self,
        volume: Volume,
        transform: CameraTransform,
        viewer: Viewer3D
    ) -> None:
        """
        Display a volume with a fixed transform and start rotating it.

        Args:
            volume: Volume to display
            transform: Model-to-view transform for the volume
            viewer: Viewer to drive

        Raises:
            PresentationFailure: If any step fails
        """
        session = None

        def open_session() -> None:
            nonlocal session
            session = viewer.open_viewer(self._viewer_config)

        steps: List[Tuple[Callable[[], None], SessionState]] = [
            (lambda: viewer.reset_all(), SessionState.CLOSED),
            (open_session, SessionState.OPEN),
            (lambda: viewer.set_axis_overlay(session, False), SessionState.OPEN),
            (lambda: viewer.add_volume_object(
                session,
                volume,
                RenderMode.NONE,
                label=volume.name,
                channels=DEFAULT_CHANNELS,
                visible=True,
                threshold=0,
                resampling_factor=1
            ), SessionState.OBJECT_LOADED),
            (lambda: viewer.select_object(session, volume.name),
             SessionState.OBJECT_SELECTED),
            (lambda: viewer.set_transform(session, transform.as_list()),
             SessionState.TRANSFORM_APPLIED),
            (lambda: viewer.start_animation(session), SessionState.ANIMATING),
        ]

        for index, (name, (action, next_state)) in enumerate(
                zip(PRESENTATION_STEPS, steps), start=1):
            logging.info(f"Presentation step {index}/{len(steps)}: {name}")
            try:
                action()
            except Exception as e:
                logging.error(f"Presentation step {index} ({name}) failed: {e}")
                raise PresentationFailure(index, name, str(e)) from e
            self._state = next_state

        logging.info(f"Presenting '{volume.name}'")
