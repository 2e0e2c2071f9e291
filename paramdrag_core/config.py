from __future__ import annotations

from dataclasses import asdict, dataclass
import logging
import math
from pathlib import Path
import tomllib
from typing import Any, Literal, Mapping

from .events import MODIFIER_NAMES, canonical_modifier_name

LOGGER = logging.getLogger(__name__)

ModifierMatch = Literal["superset", "exact"]

DEFAULT_SIZE = 10.0
DEFAULT_SCALAR = 0.00385 / 2.0
DEFAULT_MODIFIER_SCALAR = 0.02


class DragConfigError(ValueError):
    pass


@dataclass(frozen=True)
class DragConfig:
    """Tunables for one drag-gesture controller."""

    base_scalar: float = DEFAULT_SCALAR
    modifier_scalar: float = DEFAULT_MODIFIER_SCALAR
    modifier_keys: tuple[str, ...] = ("control",)
    modifier_match: ModifierMatch = "superset"
    size: float = DEFAULT_SIZE
    double_click_threshold_s: float = 0.25
    max_click_distance_px: float = 4.0

    def __post_init__(self) -> None:
        for key in ("base_scalar", "modifier_scalar", "size", "double_click_threshold_s", "max_click_distance_px"):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise DragConfigError(f"`{key}` must be a number")
            if not math.isfinite(value):
                raise DragConfigError(f"`{key}` must be finite")
            object.__setattr__(self, key, float(value))
        if self.size <= 0:
            raise DragConfigError("`size` must be > 0")
        if self.double_click_threshold_s <= 0:
            raise DragConfigError("`double_click_threshold_s` must be > 0")
        if self.max_click_distance_px < 0:
            raise DragConfigError("`max_click_distance_px` must be >= 0")
        if self.modifier_match not in ("superset", "exact"):
            raise DragConfigError("`modifier_match` must be `superset` or `exact`")
        if isinstance(self.modifier_keys, str) or not isinstance(self.modifier_keys, (list, tuple)):
            raise DragConfigError("`modifier_keys` must be a list of modifier names")
        keys: list[str] = []
        for name in self.modifier_keys:
            canonical = canonical_modifier_name(name)
            if canonical is None:
                raise DragConfigError(f"unknown modifier key `{name}`; expected one of {list(MODIFIER_NAMES)}")
            if canonical not in keys:
                keys.append(canonical)
        object.__setattr__(self, "modifier_keys", tuple(keys))


DEFAULT_DRAG_CONFIG = DragConfig()


def drag_config_from_mapping(overrides: Mapping[str, Any] | None = None) -> DragConfig:
    """Merge user overrides against defaults, rejecting unknown keys."""

    raw: dict[str, Any] = asdict(DEFAULT_DRAG_CONFIG)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise DragConfigError(f"unknown drag config key: {key}")
            raw[key] = value
    return DragConfig(**raw)


def load_drag_config(path: str | Path) -> DragConfig:
    """Load the `[drag]` table of a TOML file. A file without the table yields defaults."""

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"drag config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise DragConfigError(f"invalid TOML in {config_path}: {exc}") from exc
    table = raw.get("drag", {})
    if not isinstance(table, dict):
        raise DragConfigError("`drag` must be a TOML table")
    config = drag_config_from_mapping(table)
    LOGGER.debug("loaded drag config from %s: %s", config_path, config)
    return config
