from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
from typing import Callable

import numpy as np

from paramdrag_core.click import ClickRecord, ClickTracker, is_multi_click, kind_from_click_count
from paramdrag_core.config import (
    DEFAULT_MODIFIER_SCALAR,
    DEFAULT_SCALAR,
    DEFAULT_SIZE,
    DragConfig,
    ModifierMatch,
)
from paramdrag_core.events import NO_CURSOR_Y, PRIMARY_BUTTON, InputEvent, ModifierSet
from paramdrag_core.normal import NormalizedValue, NormalParam, clamp

from ..component_schema import BoundingBox

LOGGER = logging.getLogger(__name__)

ChangeCallback = Callable[[NormalizedValue], None]


@dataclass
class GestureState:
    """Local state of one drag control.

    `accumulated_normal` is the unclamped running position of the current drag;
    `committed_value` is its clamped projection and the last value reported to the host.
    """

    committed_value: NormalizedValue
    default_value: NormalizedValue
    is_dragging: bool = False
    drag_start_y: np.float32 = np.float32(0.0)
    accumulated_normal: np.float32 = np.float32(0.0)
    active_modifiers: ModifierSet = field(default_factory=ModifierSet)
    last_click: ClickRecord | None = None

    @classmethod
    def new(cls, normal_param: NormalParam) -> "GestureState":
        return cls(
            committed_value=normal_param.value,
            default_value=normal_param.default,
            accumulated_normal=normal_param.value.as_f32(),
        )


class DragGestureController:
    """Turns vertical pointer drags into a NormalizedValue.

    Moving the pointer up raises the value. Holding the modifier keys scales the
    per-pixel rate by `modifier_scalar` for fine adjustment, and a double (or triple)
    click restores the default. `on_change` runs synchronously, once per committed
    change, and must not call back into the controller.
    """

    def __init__(
        self,
        normal_param: NormalParam,
        on_change: ChangeCallback,
        *,
        bounds: BoundingBox | None = None,
        size: float = DEFAULT_SIZE,
        base_scalar: float = DEFAULT_SCALAR,
        modifier_scalar: float = DEFAULT_MODIFIER_SCALAR,
        modifier_keys: ModifierSet | None = None,
        modifier_match: ModifierMatch = "superset",
        click_tracker: ClickTracker | None = None,
    ) -> None:
        if modifier_match not in ("superset", "exact"):
            raise ValueError("modifier_match must be `superset` or `exact`")
        self._state = GestureState.new(normal_param)
        self._on_change = on_change
        self._bounds = bounds
        self._size = float(size)
        self._base_scalar = np.float32(base_scalar)
        self._modifier_scalar = np.float32(modifier_scalar)
        self._modifier_keys = modifier_keys if modifier_keys is not None else ModifierSet.of("control")
        self._modifier_match = modifier_match
        self._click_tracker = click_tracker or ClickTracker()

    @classmethod
    def from_config(
        cls,
        config: DragConfig,
        normal_param: NormalParam,
        on_change: ChangeCallback,
        *,
        bounds: BoundingBox | None = None,
    ) -> "DragGestureController":
        return cls(
            normal_param,
            on_change,
            bounds=bounds,
            size=config.size,
            base_scalar=config.base_scalar,
            modifier_scalar=config.modifier_scalar,
            modifier_keys=ModifierSet.from_key_names(config.modifier_keys),
            modifier_match=config.modifier_match,
            click_tracker=ClickTracker(
                double_click_threshold_s=config.double_click_threshold_s,
                max_distance_px=config.max_click_distance_px,
            ),
        )

    def with_size(self, size: float) -> "DragGestureController":
        self._size = float(size)
        return self

    def with_scalar(self, scalar: float) -> "DragGestureController":
        self._base_scalar = np.float32(scalar)
        return self

    def with_modifier_scalar(self, scalar: float) -> "DragGestureController":
        self._modifier_scalar = np.float32(scalar)
        return self

    def with_modifier_keys(self, modifier_keys: ModifierSet) -> "DragGestureController":
        self._modifier_keys = modifier_keys
        return self

    def set_bounds(self, bounds: BoundingBox | None) -> None:
        self._bounds = bounds

    @property
    def bounds(self) -> BoundingBox | None:
        return self._bounds

    @property
    def size(self) -> float:
        return self._size

    @property
    def base_scalar(self) -> float:
        return float(self._base_scalar)

    @property
    def modifier_scalar(self) -> float:
        return float(self._modifier_scalar)

    @property
    def modifier_keys(self) -> ModifierSet:
        return self._modifier_keys

    @property
    def value(self) -> NormalizedValue:
        return self._state.committed_value

    @property
    def default_value(self) -> NormalizedValue:
        return self._state.default_value

    @property
    def is_dragging(self) -> bool:
        return self._state.is_dragging

    @property
    def active_modifiers(self) -> ModifierSet:
        return self._state.active_modifiers

    @property
    def state(self) -> GestureState:
        return replace(self._state)

    def set_value(self, normal: NormalizedValue | float) -> None:
        """Sync the control to an externally changed value without emitting."""

        value = normal if isinstance(normal, NormalizedValue) else clamp(normal)
        self._state.committed_value = value
        self._state.accumulated_normal = value.as_f32()

    def handle_event(self, event: InputEvent) -> bool:
        """Apply one host event. Returns True when the event was consumed."""

        if event.event_type == "pointer_move":
            return self._on_pointer_move(event)
        if event.event_type == "pointer_down":
            if event.button not in (None, PRIMARY_BUTTON):
                return False
            return self._on_primary_press(event)
        if event.event_type == "pointer_up":
            if event.button not in (None, PRIMARY_BUTTON):
                return False
            return self._on_primary_release()
        if event.event_type in ("key_down", "key_up"):
            self._state.active_modifiers = event.modifier_set
            return True
        return False

    def modifiers_engaged(self) -> bool:
        held = self._state.active_modifiers
        if self._modifier_match == "exact":
            return held == self._modifier_keys
        return held.contains_all(self._modifier_keys)

    def _on_pointer_move(self, event: InputEvent) -> bool:
        state = self._state
        if not state.is_dragging or event.y is None or event.y == NO_CURSOR_Y:
            return False
        y = np.float32(event.y)
        if y == state.drag_start_y:
            return False
        delta = np.float32((y - state.drag_start_y) * self._base_scalar)
        if self.modifiers_engaged():
            delta = np.float32(delta * self._modifier_scalar)
        state.accumulated_normal = np.float32(state.accumulated_normal - delta)
        state.committed_value = clamp(float(state.accumulated_normal))
        state.drag_start_y = y
        self._emit()
        return True

    def _on_primary_press(self, event: InputEvent) -> bool:
        if event.x is None or event.y is None:
            return False
        if self._bounds is not None and not self._bounds.contains(event.x, event.y):
            return False
        state = self._state
        click = self._classify(event)
        state.last_click = click
        if is_multi_click(click.kind):
            state.is_dragging = False
            state.committed_value = state.default_value
            state.accumulated_normal = state.default_value.as_f32()
            LOGGER.debug("%s click reset value to default %.6f", click.kind, state.default_value.value)
            self._emit()
            return True
        state.is_dragging = True
        state.drag_start_y = np.float32(event.y)
        LOGGER.debug("drag started at y=%.2f value=%.6f", event.y, state.committed_value.value)
        return True

    def _on_primary_release(self) -> bool:
        state = self._state
        if not state.is_dragging:
            return False
        state.is_dragging = False
        state.accumulated_normal = state.committed_value.as_f32()
        LOGGER.debug("drag ended value=%.6f", state.committed_value.value)
        return True

    def _classify(self, event: InputEvent) -> ClickRecord:
        x = float(event.x)  # type: ignore[arg-type]
        y = float(event.y)  # type: ignore[arg-type]
        if event.click_count is not None:
            return ClickRecord(x=x, y=y, ts_s=event.timestamp, kind=kind_from_click_count(event.click_count))
        return self._click_tracker.classify(x, y, event.timestamp, self._state.last_click)

    def _emit(self) -> None:
        self._on_change(self._state.committed_value)
