"""Tests for Renderer - draws the active view with header and footer."""
import os
import unittest
from unittest.mock import MagicMock, patch
import pygame

# Set SDL to use dummy video driver before importing pygame
os.environ['SDL_VIDEODRIVER'] = 'dummy'

from embedlab_sim import Controls, Simulation
from embedlab_ui.core.ApplicationModel import ApplicationModel, VIEWS
from embedlab_ui.core.Renderer import Renderer


class TestRenderer(unittest.TestCase):
    """Test Renderer initialization and rendering of every view."""

    def setUp(self):
        pygame.init()
        self.size = (1024, 640)
        self.screen = pygame.Surface(self.size)

        self.simulation = Simulation(seed=1)
        self.controls = Controls(self.simulation)
        self.model = ApplicationModel()

    def test_initialization(self):
        renderer = Renderer(self.size)

        assert renderer.width == 1024
        assert renderer.height == 640
        assert set(renderer.views.keys()) == set(VIEWS)

    @patch("pygame.display.flip")
    def test_render_every_view_fresh_state(self, mock_flip):
        renderer = Renderer(self.size)

        for view in VIEWS:
            self.model.view = view
            renderer.render_all(self.screen, self.simulation.state, self.model)

        assert mock_flip.call_count == len(VIEWS)

    @patch("pygame.display.flip")
    def test_render_every_view_busy_state(self, mock_flip):
        renderer = Renderer(self.size)

        self.controls.set_temperature(60)
        self.controls.toggle_noise()
        self.controls.set_command(-80)
        self.controls.select_mode("interrupt")
        self.controls.trigger_event()
        self.controls.select_preset("overload")
        self.controls.set_stack(9)
        self.controls.allocate_heap()
        for _ in range(150):
            self.simulation.advance()

        for view in VIEWS:
            self.model.view = view
            renderer.render_all(self.screen, self.simulation.state, self.model)

        assert self.simulation.state.memory.crashed is True
        assert mock_flip.call_count == len(VIEWS)

    @patch("pygame.display.flip")
    def test_render_paused(self, mock_flip):
        renderer = Renderer(self.size)
        self.controls.toggle_running()

        renderer.render_all(self.screen, self.simulation.state, self.model)

        mock_flip.assert_called_once()

    def test_unknown_view_raises(self):
        renderer = Renderer(self.size)
        self.model.view = "missing"

        with self.assertRaises(KeyError):
            renderer.render_all(MagicMock(), self.simulation.state, self.model)


if __name__ == "__main__":
    unittest.main()
