"""Timing controller for managing frame rate and simulation tick rate."""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from embedlab_ui.utils.Settings import Settings
    from embedlab_ui.core.ApplicationModel import ApplicationModel


class TimingController:
    """Manages the simulation tick interval and frame rate limit."""

    def __init__(self, settings: 'Settings', model: 'ApplicationModel'):
        """Initialize timing controller with settings.

        Args:
            settings: Application settings containing timing configuration
            model: Application model to update with timing intervals
        """
        self.settings = settings
        self.model = model
        self.main_loop_fps: int = 60
        self.update_from_settings()

    def update_from_settings(self) -> None:
        """Update timing intervals from current settings."""
        timing = self.settings.get("timing", {})
        simulation_frequency = timing.get("simulation_hz", 60)

        self.model.simulation_interval = 1.0 / simulation_frequency
        self.main_loop_fps = timing.get("main_loop_fps", 60)

    def should_advance(self, now: float) -> bool:
        """Check if enough time has passed for the next simulation tick.

        At most one tick is due per frame, a slow frame never triggers a
        catch-up burst.

        Args:
            now: Current monotonic time

        Returns:
            True if the simulation should advance
        """
        return now - self.model.last_simulation_update >= self.model.simulation_interval

    def mark_advanced(self, now: float) -> None:
        """Mark that a simulation tick has occurred.

        Args:
            now: Current monotonic time
        """
        self.model.last_simulation_update = now
