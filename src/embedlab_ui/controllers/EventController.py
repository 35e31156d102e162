"""Event handling controller for pygame events."""
import logging
from typing import Callable, Dict, Any

import pygame

from embedlab_sim import Controls
from embedlab_ui.core.ApplicationModel import ApplicationModel, VIEWS

VIEW_KEYS = {
    pygame.K_0: "home",
    pygame.K_1: "temperature",
    pygame.K_2: "control",
    pygame.K_3: "interrupt",
    pygame.K_4: "deadline",
    pygame.K_5: "memory",
}


class EventController:
    def __init__(
        self,
        on_quit: Callable[[], None],
        on_toggle_fullscreen: Callable[[], None],
        controls: Controls,
        model: ApplicationModel,
        settings: Dict[str, Any]
    ):
        self.on_quit = on_quit
        self.on_toggle_fullscreen = on_toggle_fullscreen
        self.controls = controls
        self.model = model
        self.settings = settings

        self._load_keyboard_controls()

    def handle_events(self) -> bool:
        """Returns False if application should quit."""
        events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                self.on_quit()
                return False

            elif event.type == pygame.KEYDOWN:
                try:
                    self.handle_key(event.key)
                except (KeyError, ValueError) as e:
                    logging.warning(f"Input error: {e}")

        return True

    def handle_key(self, key: int) -> None:
        match key:
            case pygame.K_ESCAPE:
                # [ESC] - Back to overview
                self.select_view("home")

            case pygame.K_F11:
                # [F11] - Toggle Fullscreen
                self.on_toggle_fullscreen()

            case _ if key in VIEW_KEYS:
                self.select_view(VIEW_KEYS[key])

            case self.pause_key:
                self.controls.toggle_running()

            case self.reset_key:
                self.controls.reset()

            case self.increase_key:
                self._adjust(1)

            case self.decrease_key:
                self._adjust(-1)

            case self.noise_toggle_key:
                self.controls.toggle_noise()

            case self.mode_toggle_key:
                self.controls.toggle_mode()

            case self.isr_length_key:
                self.controls.cycle_isr_length()

            case self.trigger_key:
                self.controls.trigger_event()

            case self.preset_light_key:
                self.controls.select_preset("light")

            case self.preset_heavy_key:
                self.controls.select_preset("heavy")

            case self.preset_overload_key:
                self.controls.select_preset("overload")

            case self.malloc_key:
                self.controls.allocate_heap()

    def select_view(self, view: str) -> None:
        if view not in VIEWS:
            raise ValueError(f"Unknown view: {view}")

        self.model.view = view

    def _adjust(self, direction: int) -> None:
        """Up/Down change whatever value the active view is about."""
        match self.model.view:
            case "temperature":
                self.controls.step_temperature(direction * self.temperature_step)
            case "control":
                self.controls.step_command(direction * self.command_step)
            case "memory":
                self.controls.step_stack(direction)
            case _:
                pass

    def _load_keyboard_controls(self) -> None:
        keyboard_controls = self.settings.get("controls", {}).get("keyboard", {})

        self.pause_key = keyboard_controls.get("pause")
        self.reset_key = keyboard_controls.get("reset")
        self.increase_key = keyboard_controls.get("increase")
        self.decrease_key = keyboard_controls.get("decrease")
        self.noise_toggle_key = keyboard_controls.get("noise_toggle")
        self.mode_toggle_key = keyboard_controls.get("mode_toggle")
        self.isr_length_key = keyboard_controls.get("isr_length")
        self.trigger_key = keyboard_controls.get("trigger")
        self.preset_light_key = keyboard_controls.get("preset_light")
        self.preset_heavy_key = keyboard_controls.get("preset_heavy")
        self.preset_overload_key = keyboard_controls.get("preset_overload")
        self.malloc_key = keyboard_controls.get("malloc")

        steps = self.settings.get("settings", {})
        self.temperature_step = steps.get("temperature_step", 1.0)
        self.command_step = steps.get("command_step", 5)
