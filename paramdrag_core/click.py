from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Literal


ClickKind = Literal["single", "double", "triple"]

_NEXT_KIND: dict[str, ClickKind] = {
    "single": "double",
    "double": "triple",
    "triple": "triple",
}


@dataclass(frozen=True)
class ClickRecord:
    x: float
    y: float
    ts_s: float
    kind: ClickKind


def kind_from_click_count(click_count: int) -> ClickKind:
    """Map a host-reported click count to a ClickKind (counts past 3 stay triple)."""

    if click_count <= 1:
        return "single"
    if click_count == 2:
        return "double"
    return "triple"


def is_multi_click(kind: ClickKind) -> bool:
    return kind != "single"


class ClickTracker:
    """Classifies presses as single/double/triple by time and distance to the previous one.

    A press continues the sequence (`single -> double -> triple`, then triple again)
    when it lands within `double_click_threshold_s` and `max_distance_px` of the previous
    press; anything else starts over at `single`.
    """

    def __init__(self, double_click_threshold_s: float = 0.25, max_distance_px: float = 4.0) -> None:
        if double_click_threshold_s <= 0:
            raise ValueError("double_click_threshold_s must be > 0")
        if max_distance_px < 0:
            raise ValueError("max_distance_px must be >= 0")
        self._threshold_s = double_click_threshold_s
        self._max_distance_px = max_distance_px

    @property
    def double_click_threshold_s(self) -> float:
        return self._threshold_s

    @property
    def max_distance_px(self) -> float:
        return self._max_distance_px

    def classify(self, x: float, y: float, ts_s: float, previous: ClickRecord | None) -> ClickRecord:
        kind: ClickKind = "single"
        if previous is not None and self._continues(x, y, ts_s, previous):
            kind = _NEXT_KIND[previous.kind]
        return ClickRecord(x=x, y=y, ts_s=ts_s, kind=kind)

    def _continues(self, x: float, y: float, ts_s: float, previous: ClickRecord) -> bool:
        elapsed = ts_s - previous.ts_s
        if elapsed < 0 or elapsed > self._threshold_s:
            return False
        return math.hypot(x - previous.x, y - previous.y) <= self._max_distance_px
