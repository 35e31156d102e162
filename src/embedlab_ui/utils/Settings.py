from typing import Any, Callable, Dict
from pathlib import Path
import copy

import tomllib
import tomli_w

import pygame


class Settings:
    DEFAULTS: Dict[str, Any] = {
        "controls": {
            "keyboard": {
                "pause": pygame.K_SPACE,
                "reset": pygame.K_r,
                "increase": pygame.K_UP,
                "decrease": pygame.K_DOWN,
                "noise_toggle": pygame.K_n,
                "mode_toggle": pygame.K_m,
                "isr_length": pygame.K_l,
                "trigger": pygame.K_t,
                "preset_light": pygame.K_q,
                "preset_heavy": pygame.K_w,
                "preset_overload": pygame.K_e,
                "malloc": pygame.K_a,
            }
        },
        "video": {
            "width": 1024,
            "height": 640,
            "fullscreen": False,
        },
        "timing": {
            "main_loop_fps": 60,
            "simulation_hz": 60,
        },
        "simulation": {
            "seed": None,
        },
        "settings": {
            "title": "EmbedLab",
            "temperature_step": 1.0,
            "command_step": 5,
        },
    }

    def __init__(self, path: str) -> None:
        self.path = Path(path)
        self.settings: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        """Read the file if present, values missing from it fall back to DEFAULTS."""
        self.settings = copy.deepcopy(self.DEFAULTS)
        if not self.path.exists():
            return

        with self.path.open("rb") as file:
            stored = tomllib.load(file)

        self._apply_bindings(stored, self._string_to_key)
        self._merge(self.settings, stored)

    def save(self) -> None:
        stored = self._strip_unset(copy.deepcopy(self.settings))
        self._apply_bindings(stored, self._key_to_string)

        with self.path.open("wb") as file:
            tomli_w.dump(stored, file)

    def get(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.settings[key] = value

    @classmethod
    def _merge(cls, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                cls._merge(base[key], value)
            else:
                base[key] = value

    @classmethod
    def _strip_unset(cls, section: Dict[str, Any]) -> Dict[str, Any]:
        # TOML has no null, an unset value is restored from DEFAULTS on load
        return {
            key: cls._strip_unset(value) if isinstance(value, dict) else value
            for key, value in section.items()
            if value is not None
        }

    @staticmethod
    def _apply_bindings(settings: Dict[str, Any], convert: Callable[[Any], Any]) -> None:
        """Convert every key binding in place, bindings are stored per input device."""
        for bindings in settings.get("controls", {}).values():
            for action, key in bindings.items():
                bindings[action] = convert(key)

    @staticmethod
    def _key_to_string(keycode: int) -> str:
        for attribute in dir(pygame):
            if attribute.startswith("K_") and getattr(pygame, attribute) == keycode:
                return attribute

        raise ValueError(f"Unknown key code: {keycode}")

    @staticmethod
    def _string_to_key(name: str) -> int:
        if not name.startswith("K_") or not hasattr(pygame, name):
            raise ValueError(f"Invalid key name in config: {name}")

        return getattr(pygame, name)
