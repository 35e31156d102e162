from abc import ABC, abstractmethod
from typing import List, Tuple

from pygame import Rect, Surface

from embedlab_sim import SimulationState


class View(ABC):
    """One screen of the simulator, drawn inside `area` every frame."""
    title: str = ""
    help: List[Tuple[str, str]] = []

    def __init__(self, area: Rect) -> None:
        self.area = area

    @abstractmethod
    def draw(self, screen: Surface, state: SimulationState) -> None:
        pass
