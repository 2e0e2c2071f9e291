from __future__ import annotations

from dataclasses import dataclass, field
import math

import numpy as np


@dataclass(frozen=True, order=True)
class NormalizedValue:
    """A parameter position in `[0.0, 1.0]`, independent of real-world units.

    Construction never fails: out-of-range input is clamped to the nearer bound and
    NaN collapses to `0.0`.
    """

    value: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _clamp_unit(self.value))

    @classmethod
    def clamp(cls, x: float) -> "NormalizedValue":
        return cls(x)

    @classmethod
    def min(cls) -> "NormalizedValue":
        return cls(0.0)

    @classmethod
    def max(cls) -> "NormalizedValue":
        return cls(1.0)

    @classmethod
    def center(cls) -> "NormalizedValue":
        return cls(0.5)

    def as_f32(self) -> np.float32:
        return np.float32(self.value)

    def as_f64(self) -> float:
        return self.value

    def __float__(self) -> float:
        return self.value


def clamp(x: float) -> NormalizedValue:
    """Return `x` as a NormalizedValue, clamped into `[0, 1]`."""

    return NormalizedValue(x)


@dataclass
class NormalParam:
    """Current and default normalized positions for one parameter."""

    value: NormalizedValue = field(default_factory=NormalizedValue)
    default: NormalizedValue = field(default_factory=NormalizedValue)

    def __post_init__(self) -> None:
        if not isinstance(self.value, NormalizedValue):
            self.value = NormalizedValue(self.value)
        if not isinstance(self.default, NormalizedValue):
            self.default = NormalizedValue(self.default)

    def reset(self) -> NormalizedValue:
        self.value = self.default
        return self.value


def _clamp_unit(x: object) -> float:
    out = float(x)  # type: ignore[arg-type]
    if math.isnan(out):
        return 0.0
    if out < 0.0:
        return 0.0
    if out > 1.0:
        return 1.0
    return out
