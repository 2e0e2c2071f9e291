from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BoundingBox:
    """Screen-space rectangle of a control's interactive area (edges inclusive)."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("BoundingBox width/height must be >= 0")

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height

    @classmethod
    def square(cls, x: float, y: float, size: float) -> "BoundingBox":
        return cls(x=x, y=y, width=size, height=size)


def parse_bounds_notation(notation: str) -> BoundingBox:
    """Parse `x,y,w,h` into a BoundingBox."""

    raw = notation.strip()
    if not raw:
        raise ValueError("bounds notation must be non-empty")
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 4:
        raise ValueError("bounds must use `x,y,w,h` format")
    x, y, w, h = (float(p) for p in parts)
    return BoundingBox(x=x, y=y, width=w, height=h)
