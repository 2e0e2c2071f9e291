from .click import ClickKind, ClickRecord, ClickTracker, is_multi_click, kind_from_click_count
from .config import (
    DEFAULT_DRAG_CONFIG,
    DragConfig,
    DragConfigError,
    ModifierMatch,
    drag_config_from_mapping,
    load_drag_config,
)
from .events import (
    MODIFIER_NAMES,
    NO_CURSOR_Y,
    PRIMARY_BUTTON,
    EventType,
    InputEvent,
    ModifierSet,
    canonical_modifier_name,
)
from .normal import NormalizedValue, NormalParam, clamp
from .params import FloatParam, IntParam, LogDBParam, OctaveParam
from .unit_math import (
    amplitude_to_db,
    amplitude_to_db_f32,
    amplitude_to_db_f64,
    db_to_amplitude,
    db_to_amplitude_f32,
    db_to_amplitude_f64,
)

__all__ = [
    "ClickKind",
    "ClickRecord",
    "ClickTracker",
    "DEFAULT_DRAG_CONFIG",
    "DragConfig",
    "DragConfigError",
    "EventType",
    "FloatParam",
    "InputEvent",
    "IntParam",
    "LogDBParam",
    "MODIFIER_NAMES",
    "ModifierMatch",
    "ModifierSet",
    "NO_CURSOR_Y",
    "NormalParam",
    "NormalizedValue",
    "OctaveParam",
    "PRIMARY_BUTTON",
    "amplitude_to_db",
    "amplitude_to_db_f32",
    "amplitude_to_db_f64",
    "canonical_modifier_name",
    "clamp",
    "db_to_amplitude",
    "db_to_amplitude_f32",
    "db_to_amplitude_f64",
    "drag_config_from_mapping",
    "is_multi_click",
    "kind_from_click_count",
    "load_drag_config",
]
