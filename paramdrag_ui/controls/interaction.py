from __future__ import annotations

from typing import Mapping

from paramdrag_core.events import (
    MIDDLE_BUTTON,
    PRIMARY_BUTTON,
    SECONDARY_BUTTON,
    InputEvent,
    ModifierSet,
)


_MOVE_TYPES = ("pointer_move", "mouse_move", "trackpad_move")
_DOWN_TYPES = ("pointer_down", "mouse_down", "click")
_UP_TYPES = ("pointer_up", "mouse_up")
_PRESS_DOWN_PHASES = ("down", "repeat", "hold_start", "hold_tick")
_PRESS_UP_PHASES = ("up", "hold_end", "single", "double", "cancel")
_BUTTON_NAMES = {
    "left": PRIMARY_BUTTON,
    "primary": PRIMARY_BUTTON,
    "middle": MIDDLE_BUTTON,
    "right": SECONDARY_BUTTON,
    "secondary": SECONDARY_BUTTON,
}


def parse_hdi_input_event(event_type: str, payload: object, ts_s: float = 0.0) -> InputEvent | None:
    """Parse a normalized HDI event (type + payload mapping) into an InputEvent.

    Pointer payloads carry `x`/`y` and optionally `button` and `click_count`; keyboard
    payloads carry either a `modifiers` flag mapping or an `active_keys` list. Returns
    None for anything the drag controls cannot use.
    """

    if not isinstance(payload, Mapping):
        return None
    if event_type in _MOVE_TYPES:
        position = _position(payload)
        if position is None:
            return None
        return InputEvent("pointer_move", ts_s, x=position[0], y=position[1])
    if event_type in _DOWN_TYPES or event_type in _UP_TYPES:
        button = _button(payload.get("button", PRIMARY_BUTTON))
        if button is None:
            return None
        position = _position(payload)
        kind = "pointer_down" if event_type in _DOWN_TYPES else "pointer_up"
        if kind == "pointer_down" and position is None:
            return None
        x, y = position if position is not None else (None, None)
        return InputEvent(
            kind,
            ts_s,
            x=x,
            y=y,
            button=button,
            click_count=_click_count(payload.get("click_count")),
        )
    if event_type in ("key_down", "key_up"):
        return InputEvent(
            event_type,
            ts_s,
            key=_optional_str(payload.get("key")),
            code=_optional_str(payload.get("code")),
            modifiers=_modifier_flags(payload),
        )
    if event_type == "press":
        phase = payload.get("phase")
        if phase in _PRESS_DOWN_PHASES:
            kind = "key_down"
        elif phase in _PRESS_UP_PHASES:
            kind = "key_up"
        else:
            return None
        return InputEvent(
            kind,
            ts_s,
            key=_optional_str(payload.get("key")),
            code=_optional_str(payload.get("code")),
            modifiers=_modifier_flags(payload),
        )
    return None


def _position(payload: Mapping[str, object]) -> tuple[float, float] | None:
    if "x" not in payload or "y" not in payload:
        return None
    try:
        return (float(payload["x"]), float(payload["y"]))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def _button(raw: object) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        return _BUTTON_NAMES.get(raw.strip().lower())
    return None


def _click_count(raw: object) -> int | None:
    if isinstance(raw, bool) or not isinstance(raw, int) or raw <= 0:
        return None
    return raw


def _modifier_flags(payload: Mapping[str, object]) -> dict[str, bool]:
    raw_modifiers = payload.get("modifiers")
    if isinstance(raw_modifiers, Mapping):
        return ModifierSet.from_flags({str(k): bool(v) for k, v in raw_modifiers.items()}).as_flags()
    raw_active_keys = payload.get("active_keys", ())
    if not isinstance(raw_active_keys, (list, tuple)):
        raw_active_keys = ()
    return ModifierSet.from_key_names(str(k) for k in raw_active_keys).as_flags()


def _optional_str(raw: object) -> str | None:
    if raw is None:
        return None
    return str(raw)
