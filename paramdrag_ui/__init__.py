"""Interactive parameter controls for paramdrag."""

from .component_schema import BoundingBox, parse_bounds_notation
from .controls.drag_gesture import ChangeCallback, DragGestureController, GestureState
from .controls.interaction import parse_hdi_input_event

__all__ = [
    "BoundingBox",
    "ChangeCallback",
    "DragGestureController",
    "GestureState",
    "parse_bounds_notation",
    "parse_hdi_input_event",
]
