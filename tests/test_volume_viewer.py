import unittest
from unittest import mock
import numpy as np

from config import ALIASING_TRANSFORM, ViewerConfig
from core.base import RenderMode
from core.errors import ViewerError
from simulation import VolumeBuilder
from visualization.volume_viewer import (
    PyVistaViewer3D, volume_to_image_data, channel_colormap
)


class TestVolumeToImageData(unittest.TestCase):
    def test_grid_matches_volume(self):
        vol = VolumeBuilder().build("Grid", 4, 3, 5)
        grid = volume_to_image_data(vol, spacing=(1.0, 2.0, 0.5))
        self.assertEqual(tuple(grid.dimensions), (4, 3, 5))
        self.assertEqual(tuple(grid.spacing), (1.0, 2.0, 0.5))
        values = np.asarray(grid.point_data["values"])
        self.assertEqual(values.size, 60)
        # First 12 points are slice z=0, then the interior slices are black
        self.assertTrue(np.all(values[:12] == 255))
        self.assertTrue(np.all(values[12:48] == 0))
        self.assertTrue(np.all(values[48:] == 255))

    def test_resampling(self):
        vol = VolumeBuilder().build("Grid", 8, 8, 8)
        grid = volume_to_image_data(vol, resampling_factor=2)
        self.assertEqual(tuple(grid.dimensions), (4, 4, 4))
        self.assertEqual(tuple(grid.spacing), (2.0, 2.0, 2.0))

    def test_bad_resampling(self):
        vol = VolumeBuilder().build("Grid", 2, 2, 2)
        for factor in (0, -1, 1.5):
            with self.assertRaises(ViewerError):
                volume_to_image_data(vol, resampling_factor=factor)

    def test_numpy_integer_resampling(self):
        vol = VolumeBuilder().build("Grid", 8, 8, 8)
        grid = volume_to_image_data(vol, resampling_factor=np.int64(2))
        self.assertEqual(tuple(grid.dimensions), (4, 4, 4))
        with self.assertRaises(ViewerError):
            volume_to_image_data(vol, resampling_factor=True)

    def test_channel_colormap(self):
        self.assertEqual(channel_colormap((True, True, True)), "gray")
        cmap = channel_colormap((True, False, False))
        self.assertEqual(tuple(cmap(1.0)[:3]), (1.0, 0.0, 0.0))


class TestPyVistaViewer3D(unittest.TestCase):
    def setUp(self):
        self.windows = []

        def factory(config):
            window = mock.MagicMock()
            self.windows.append(window)
            return window

        self.viewer = PyVistaViewer3D(window_factory=factory)
        self.config = ViewerConfig(rotation_step_deg=2.0, rotation_interval_ms=40)
        self.volume = VolumeBuilder().build("Double_Sheet", 6, 6, 6)

    def test_open_reuses_session(self):
        first = self.viewer.open_viewer(self.config)
        second = self.viewer.open_viewer(self.config)
        self.assertIs(first, second)
        self.assertEqual(len(self.windows), 1)
        self.windows[0].show.assert_called_once()
        first.plotter.set_background.assert_called_once_with("#000000")

    def test_reset_all_closes_sessions(self):
        session = self.viewer.open_viewer(self.config)
        self.viewer.reset_all()
        self.assertFalse(session.is_open)
        self.assertEqual(self.viewer.sessions, [])
        self.windows[0].stop_rotation.assert_called_once()
        self.windows[0].close.assert_called_once()

        new_session = self.viewer.open_viewer(self.config)
        self.assertIsNot(new_session, session)
        self.assertEqual(len(self.windows), 2)

    def test_commands_on_closed_session_fail(self):
        session = self.viewer.open_viewer(self.config)
        self.viewer.reset_all()
        with self.assertRaises(ViewerError):
            self.viewer.set_axis_overlay(session, False)
        with self.assertRaises(ViewerError):
            self.viewer.start_animation(session)

    def test_axis_overlay(self):
        session = self.viewer.open_viewer(self.config)
        self.viewer.set_axis_overlay(session, False)
        self.windows[0].set_axes_visible.assert_called_once_with(False)

    def test_add_volume_object_direct_rendering(self):
        session = self.viewer.open_viewer(self.config)
        self.viewer.add_volume_object(session, self.volume, RenderMode.NONE, "Double_Sheet")

        plotter = session.plotter
        plotter.add_volume.assert_called_once()
        plotter.add_mesh.assert_not_called()
        kwargs = plotter.add_volume.call_args.kwargs
        self.assertEqual(kwargs["cmap"], "gray")
        self.assertEqual(kwargs["name"], "Double_Sheet")
        actor = plotter.add_volume.return_value
        actor.SetVisibility.assert_called_once_with(True)
        self.assertIs(session.actors["Double_Sheet"], actor)
        plotter.add_text.assert_called_once()
        self.assertEqual(plotter.add_text.call_args.args[0], "Double_Sheet")

    def test_add_volume_object_accepts_mode_value(self):
        session = self.viewer.open_viewer(self.config)
        self.viewer.add_volume_object(session, self.volume, "none", "Label")
        session.plotter.add_volume.assert_called_once()

    def test_add_replaces_existing_object(self):
        session = self.viewer.open_viewer(self.config)
        self.viewer.add_volume_object(session, self.volume, RenderMode.NONE, "A")
        first = session.actors["Double_Sheet"]
        self.viewer.add_volume_object(session, self.volume, RenderMode.NONE, "B")
        session.plotter.remove_actor.assert_called_once_with(first)
        self.assertEqual(len(session.actors), 1)

    def test_surface_mode_uses_contour(self):
        session = self.viewer.open_viewer(self.config)
        self.viewer.add_volume_object(
            session, self.volume, RenderMode.SURFACE, "Surface", threshold=128
        )
        session.plotter.add_mesh.assert_called_once()
        session.plotter.add_volume.assert_not_called()

    def test_iso_mode_uses_wireframe(self):
        session = self.viewer.open_viewer(self.config)
        self.viewer.add_volume_object(
            session, self.volume, RenderMode.ISO, "Iso", threshold=128
        )
        self.assertEqual(session.plotter.add_mesh.call_args.kwargs["style"], "wireframe")

    def test_empty_surface_falls_back_to_volume(self):
        session = self.viewer.open_viewer(self.config)
        with self.assertLogs(level="WARNING"):
            self.viewer.add_volume_object(
                session, self.volume, RenderMode.SURFACE, "Surface", threshold=1000
            )
        session.plotter.add_volume.assert_called_once()

    def test_select_unknown_object(self):
        session = self.viewer.open_viewer(self.config)
        with self.assertRaises(ViewerError):
            self.viewer.select_object(session, "Missing")

    def test_set_transform_requires_selection(self):
        session = self.viewer.open_viewer(self.config)
        self.viewer.add_volume_object(session, self.volume, RenderMode.NONE, "Double_Sheet")
        with self.assertRaises(ViewerError):
            self.viewer.set_transform(session, ALIASING_TRANSFORM)

    def test_set_transform_on_selection(self):
        session = self.viewer.open_viewer(self.config)
        self.viewer.add_volume_object(session, self.volume, RenderMode.NONE, "Double_Sheet")
        self.viewer.select_object(session, "Double_Sheet")
        self.viewer.set_transform(session, ALIASING_TRANSFORM)

        actor = session.actors["Double_Sheet"]
        expected = np.array(ALIASING_TRANSFORM).reshape(4, 4)
        self.assertTrue(np.array_equal(actor.user_matrix, expected))
        session.plotter.render.assert_called()

    def test_set_transform_wrong_length(self):
        session = self.viewer.open_viewer(self.config)
        self.viewer.add_volume_object(session, self.volume, RenderMode.NONE, "Double_Sheet")
        self.viewer.select_object(session, "Double_Sheet")
        with self.assertRaises(ViewerError):
            self.viewer.set_transform(session, [1.0] * 12)

    def test_start_animation(self):
        session = self.viewer.open_viewer(self.config)
        self.viewer.start_animation(session)
        self.windows[0].start_rotation.assert_called_once_with(2.0, 40)
        self.assertTrue(session.is_animating)


if __name__ == '__main__':
    unittest.main()
