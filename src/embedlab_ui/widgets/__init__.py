from .GraphWidget import GraphWidget
from .HorizontalIndicatorWidget import HorizontalIndicatorWidget
from .KeyHintWidget import KeyHintWidget
from .VerticalIndicatorWidget import VerticalIndicatorWidget
from .Widget import Widget

__all__ = [
  "GraphWidget",
  "HorizontalIndicatorWidget",
  "KeyHintWidget",
  "VerticalIndicatorWidget",
  "Widget",
]
