"""Drag controls and host input adapters for paramdrag UI."""

from .drag_gesture import ChangeCallback, DragGestureController, GestureState
from .interaction import parse_hdi_input_event

__all__ = [
    "ChangeCallback",
    "DragGestureController",
    "GestureState",
    "parse_hdi_input_event",
]
