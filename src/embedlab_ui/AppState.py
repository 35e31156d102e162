import logging
import signal
import time
from typing import Any, Optional

import pygame

from embedlab_sim import Controls, Simulation, DeadlineStatus, DeadlineState
from embedlab_ui.Init import Init
from embedlab_ui.controllers.EventController import EventController
from embedlab_ui.controllers.TimingController import TimingController
from embedlab_ui.core.ApplicationModel import ApplicationModel
from embedlab_ui.core.Renderer import Renderer
from embedlab_ui.utils.Settings import Settings


class AppState:
    """
    Frame driver: one pass of handle_events/update/render/tick per frame. The
    simulation only ever advances from `update()`, input is applied strictly
    before it.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

        video = settings.get("video", {})
        self.size = (video.get("width", 1024), video.get("height", 640))
        self.title = settings.get("settings", {}).get("title", "EmbedLab")

        self.model = ApplicationModel(fullscreen=video.get("fullscreen", False))

        seed = settings.get("simulation", {}).get("seed")
        self.simulation = Simulation(seed=seed)
        self.controls = Controls(self.simulation)
        self.simulation.deadline.on(DeadlineStatus.CRASH, self._on_deadline_missed)

        self.screen, self.clock = Init.ui(self.size, self.title, self.model.fullscreen)
        self.renderer = Renderer(self.size)

        self.timing_controller = TimingController(self.settings, self.model)

        self.event_controller = EventController(
            on_quit=self._on_quit,
            on_toggle_fullscreen=self._on_toggle_fullscreen,
            controls=self.controls,
            model=self.model,
            settings=settings
        )

        self._setup_signal_handling()

        self.model.last_simulation_update = time.monotonic()

    @property
    def running(self) -> bool:
        return self.model.running

    def handle_events(self) -> bool:
        """
        Handle pygame events. Returns False if application should quit.
        """
        return self.event_controller.handle_events()

    def update(self) -> None:
        now = time.monotonic()
        self.model.loop_history.append(now)

        if self.timing_controller.should_advance(now):
            self.simulation.tick()
            self.timing_controller.mark_advanced(now)

        self.simulation.refresh()

    def render(self) -> None:
        with self.simulation.lock:
            self.renderer.render_all(self.screen, self.simulation.state, self.model)

    def tick(self) -> None:
        self.clock.tick(self.timing_controller.main_loop_fps)

    def shutdown(self) -> None:
        logging.info("Shutting down...")
        pygame.quit()

    def _on_quit(self) -> None:
        self.model.running = False

    def _on_toggle_fullscreen(self) -> None:
        pygame.display.toggle_fullscreen()
        self.model.fullscreen = not self.model.fullscreen

        video_settings = self.settings.get("video", {})
        video_settings["fullscreen"] = self.model.fullscreen
        self.settings.set("video", video_settings)
        self.settings.save()

    def _on_deadline_missed(self, state: DeadlineState) -> None:
        logging.warning(f"Task with {state.load}ms load missed its {state.max}ms deadline")

    def _setup_signal_handling(self) -> None:
        signal.signal(signal.SIGINT, self._signal_handler)

    def _signal_handler(
        self,
        sig: Optional[int] = None,
        frame: Optional[Any] = None
    ) -> None:
        """Handle shutdown signals gracefully."""
        if self.model.running:
            self.model.running = False
