from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Mapping, Optional


EventType = Literal[
    "pointer_move",
    "pointer_down",
    "pointer_up",
    "wheel",
    "key_down",
    "key_up",
]

ModifierName = Literal["shift", "control", "alt", "logo"]

MODIFIER_NAMES: tuple[ModifierName, ...] = ("shift", "control", "alt", "logo")

PRIMARY_BUTTON = 0
SECONDARY_BUTTON = 2
MIDDLE_BUTTON = 1

# Cursor y reported by hosts when no cursor position is available.
NO_CURSOR_Y = -1.0

_KEY_ALIASES: dict[str, ModifierName] = {
    "shift": "shift",
    "lshift": "shift",
    "rshift": "shift",
    "shift_l": "shift",
    "shift_r": "shift",
    "control": "control",
    "ctrl": "control",
    "lctrl": "control",
    "rctrl": "control",
    "control_l": "control",
    "control_r": "control",
    "alt": "alt",
    "lalt": "alt",
    "ralt": "alt",
    "alt_l": "alt",
    "alt_r": "alt",
    "option": "alt",
    "opt": "alt",
    "logo": "logo",
    "meta": "logo",
    "super": "logo",
    "cmd": "logo",
    "command": "logo",
    "win": "logo",
}



def canonical_modifier_name(name: str) -> ModifierName | None:
    """Resolve a key name or alias (`ctrl`, `cmd`, `option`, ...) to its modifier, or None."""

    return _KEY_ALIASES.get(str(name).strip().lower())

@dataclass(frozen=True)
class ModifierSet:
    """Modifier keys held at one instant."""

    keys: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        unknown = set(self.keys) - set(MODIFIER_NAMES)
        if unknown:
            raise ValueError(f"unknown modifier keys: {sorted(unknown)}")
        object.__setattr__(self, "keys", frozenset(self.keys))

    @classmethod
    def of(cls, *names: str) -> "ModifierSet":
        return cls.from_key_names(names)

    @classmethod
    def from_flags(cls, flags: Mapping[str, bool] | None) -> "ModifierSet":
        if not flags:
            return cls()
        held: set[str] = set()
        for name, pressed in flags.items():
            canonical = canonical_modifier_name(name)
            if canonical is not None and bool(pressed):
                held.add(canonical)
        return cls(frozenset(held))

    @classmethod
    def from_key_names(cls, names: Iterable[str]) -> "ModifierSet":
        held: set[str] = set()
        for name in names:
            canonical = canonical_modifier_name(name)
            if canonical is not None:
                held.add(canonical)
        return cls(frozenset(held))

    def contains_all(self, other: "ModifierSet") -> bool:
        return other.keys <= self.keys

    def as_flags(self) -> dict[str, bool]:
        return {name: name in self.keys for name in MODIFIER_NAMES}

    def __contains__(self, name: object) -> bool:
        return name in self.keys

    def __bool__(self) -> bool:
        return bool(self.keys)


@dataclass(frozen=True)
class InputEvent:
    event_type: EventType
    timestamp: float
    x: Optional[float] = None
    y: Optional[float] = None
    button: Optional[int] = None
    delta_x: Optional[float] = None
    delta_y: Optional[float] = None
    key: Optional[str] = None
    code: Optional[str] = None
    modifiers: Optional[dict[str, bool]] = None
    click_count: Optional[int] = None

    @property
    def modifier_set(self) -> ModifierSet:
        return ModifierSet.from_flags(self.modifiers)

    @property
    def has_position(self) -> bool:
        return self.x is not None and self.y is not None
