"""
Volume Viewer

PyVista implementation of the Viewer3D interface.
Each session wraps one window holding a PyVista plotter; the window
itself comes from an injected factory so the viewer logic stays
independent of the GUI toolkit.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple
import itertools
import logging
import numbers
import numpy as np

import pyvista as pv
from matplotlib.colors import LinearSegmentedColormap

from config import ViewerConfig
from core.base import Viewer3D, RenderMode, DEFAULT_CHANNELS
from core.errors import ViewerError
from simulation.volume import Volume


@dataclass
class ViewerSession:
    """
    One open viewer window and the objects displayed in it.

    Attributes:
        session_id: Sequential id, unique per viewer
        window: Window exposing `plotter`, `show`, `close`,
            `set_axes_visible`, `start_rotation` and `stop_rotation`
        config: Configuration the window was opened with
        actors: Object name -> PyVista actor
        selected: Name of the active selection
    """
    session_id: int
    window: Any
    config: ViewerConfig
    actors: Dict[str, Any] = field(default_factory=dict)
    selected: Optional[str] = None
    is_open: bool = True
    is_animating: bool = False

    @property
    def plotter(self) -> Any:
        return self.window.plotter


def volume_to_image_data(
    volume: Volume,
    spacing: Tuple[float, float, float] = (1.0, 1.0, 1.0),
    resampling_factor: int = 1
) -> "pv.ImageData":
    """
    Convert a volume to a PyVista uniform grid with point scalars "values".

    Args:
        volume: Volume with (Z, Y, X) data
        spacing: Voxel size along (x, y, z)
        resampling_factor: Keep every n-th voxel along each axis

    Returns:
        pyvista.ImageData
    """
    if (isinstance(resampling_factor, bool)
            or not isinstance(resampling_factor, numbers.Integral)
            or resampling_factor < 1):
        raise ViewerError(f"resampling_factor must be an integer >= 1, got {resampling_factor!r}")

    step = int(resampling_factor)
    data = volume.data[::step, ::step, ::step]
    nz, ny, nx = data.shape

    grid = pv.ImageData()
    grid.dimensions = (nx, ny, nz)
    grid.spacing = tuple(s * step for s in spacing)
    # C-order ravel of (Z, Y, X) runs X fastest, matching VTK point order
    grid.point_data["values"] = np.ascontiguousarray(data).ravel()
    return grid


def channel_colormap(channels: Tuple[bool, bool, bool]) -> Any:
    """
    Colormap from black to the color of the enabled channels.

    All channels enabled gives plain grayscale.
    """
    if tuple(channels) == DEFAULT_CHANNELS:
        return "gray"
    color = tuple(1.0 if enabled else 0.0 for enabled in channels)
    return LinearSegmentedColormap.from_list("channels", [(0.0, 0.0, 0.0), color])


class PyVistaViewer3D(Viewer3D):
    """
    3D viewer backed by PyVista plotters.

    Keeps a registry of open sessions. `reset_all` closes all of them;
    `open_viewer` reuses the open session when there is one.
    """

    def __init__(self, window_factory: Callable[[ViewerConfig], Any]):
        """
        Args:
            window_factory: Creates a window for a ViewerConfig
        """
        self._window_factory = window_factory
        self._sessions: List[ViewerSession] = []
        self._ids = itertools.count(1)

    @property
    def sessions(self) -> List[ViewerSession]:
        """Currently open sessions."""
        return list(self._sessions)

    def reset_all(self) -> None:
        for session in self._sessions:
            self._close_session(session)
        if self._sessions:
            logging.info(f"Closed {len(self._sessions)} viewer session(s)")
        self._sessions = []

    def open_viewer(self, config: ViewerConfig) -> ViewerSession:
        for session in self._sessions:
            if session.is_open:
                return session

        window = self._window_factory(config)
        plotter = window.plotter
        plotter.set_background(config.background_color)
        window.show()

        session = ViewerSession(session_id=next(self._ids), window=window, config=config)
        self._sessions.append(session)
        logging.info(f"Opened viewer session {session.session_id}")
        return session

    def set_axis_overlay(self, session: ViewerSession, enabled: bool) -> None:
        self._check_open(session)
        session.window.set_axes_visible(enabled)

    def add_volume_object(
        self,
        session: ViewerSession,
        volume: Volume,
        render_mode: RenderMode,
        label: str,
        channels: Tuple[bool, bool, bool] = DEFAULT_CHANNELS,
        visible: bool = True,
        threshold: float = 0,
        resampling_factor: int = 1
    ) -> None:
        self._check_open(session)
        render_mode = RenderMode(render_mode)
        plotter = session.plotter
        name = volume.name

        old_actor = session.actors.pop(name, None)
        if old_actor is not None:
            plotter.remove_actor(old_actor)
            logging.info(f"Replacing object '{name}'")

        grid = volume_to_image_data(volume, session.config.spacing, resampling_factor)

        actor = None
        if render_mode in (RenderMode.SURFACE, RenderMode.ISO):
            contour = grid.contour([threshold], scalars="values")
            if contour.n_points > 0:
                if render_mode is RenderMode.SURFACE:
                    contour.compute_normals(inplace=True)
                    actor = plotter.add_mesh(
                        contour,
                        color=self._channel_color(channels),
                        lighting=True,
                        smooth_shading=True,
                        specular=0.5,
                        specular_power=15,
                        ambient=0.2,
                        diffuse=0.8,
                        name=name
                    )
                else:
                    actor = plotter.add_mesh(
                        contour,
                        color=self._channel_color(channels),
                        style="wireframe",
                        name=name
                    )
            else:
                logging.warning(
                    f"No surface at threshold {threshold} for '{name}', "
                    f"using volume rendering"
                )

        if actor is None:
            actor = plotter.add_volume(
                grid,
                scalars="values",
                cmap=channel_colormap(channels),
                opacity="linear",
                clim=(0, 255),
                show_scalar_bar=False,
                name=name
            )

        actor.SetVisibility(bool(visible))
        plotter.add_text(
            label,
            position="upper_left",
            font_size=10,
            color=session.config.label_color,
            name=f"{name}_label"
        )
        plotter.reset_camera()

        session.actors[name] = actor
        logging.info(
            f"Added '{name}' ({render_mode.value}) with grid {grid.dimensions}"
        )

    def select_object(self, session: ViewerSession, name: str) -> None:
        self._check_open(session)
        if name not in session.actors:
            raise ViewerError(f"No object named '{name}'")
        session.selected = name
        logging.info(f"Selected '{name}'")

    def set_transform(self, session: ViewerSession, matrix16: Sequence[float]) -> None:
        self._check_open(session)
        if session.selected is None:
            raise ViewerError("No object selected")

        values = np.asarray(matrix16, dtype=np.float64)
        if values.size != 16:
            raise ViewerError(f"Expected 16 matrix values, got {values.size}")

        actor = session.actors[session.selected]
        actor.user_matrix = values.reshape(4, 4)
        session.plotter.reset_camera()
        session.plotter.render()
        logging.info(f"Transform set on '{session.selected}'")

    def start_animation(self, session: ViewerSession) -> None:
        self._check_open(session)
        session.window.start_rotation(
            session.config.rotation_step_deg,
            session.config.rotation_interval_ms
        )
        session.is_animating = True
        logging.info(f"Animation started in session {session.session_id}")

    @staticmethod
    def _channel_color(channels: Tuple[bool, bool, bool]) -> Tuple[float, float, float]:
        return tuple(1.0 if enabled else 0.0 for enabled in channels)

    @staticmethod
    def _check_open(session: ViewerSession) -> None:
        if session is None or not session.is_open:
            raise ViewerError("Viewer session is not open")

    @staticmethod
    def _close_session(session: ViewerSession) -> None:
        if not session.is_open:
            return
        session.window.stop_rotation()
        session.window.close()
        session.is_open = False
        session.is_animating = False
        session.actors.clear()
        session.selected = None
