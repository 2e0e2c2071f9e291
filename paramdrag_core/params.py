from __future__ import annotations

from dataclasses import dataclass, field
import math

from .normal import NormalizedValue, NormalParam
from .unit_math import amplitude_to_db_f64, db_to_amplitude_f64


@dataclass
class FloatParam:
    """A linear range of float values."""

    min: float
    max: float
    value: float
    default: float
    normal_param: NormalParam = field(default_factory=NormalParam, init=False, repr=False)

    def __post_init__(self) -> None:
        self.min = float(self.min)
        self.max = float(self.max)
        if not self.min < self.max:
            raise ValueError(f"min must be < max (got min={self.min}, max={self.max})")
        _require_in_range("value", self.value, self.min, self.max)
        _require_in_range("default", self.default, self.min, self.max)
        self.normal_param = NormalParam(
            value=self.value_to_normal(self.value),
            default=self.value_to_normal(self.default),
        )
        self.value = self.normal_to_value(self.normal_param.value)
        self.default = self.normal_to_value(self.normal_param.default)

    @property
    def normal(self) -> NormalizedValue:
        return self.normal_param.value

    @property
    def default_normal(self) -> NormalizedValue:
        return self.normal_param.default

    def value_to_normal(self, value: float) -> NormalizedValue:
        value = _clip(float(value), self.min, self.max)
        return NormalizedValue((value - self.min) / (self.max - self.min))

    def normal_to_value(self, normal: NormalizedValue) -> float:
        return self.min + _as_normal(normal).value * (self.max - self.min)

    def set_from_normal(self, normal: NormalizedValue | float) -> float:
        self.normal_param.value = _as_normal(normal)
        self.value = self.normal_to_value(self.normal_param.value)
        return self.value

    def set_value(self, value: float) -> float:
        return self.set_from_normal(self.value_to_normal(value))

    def reset(self) -> float:
        return self.set_from_normal(self.normal_param.default)


@dataclass
class IntParam(FloatParam):
    """A discrete range of integer values; the normal snaps to integer positions."""

    def value_to_normal(self, value: float) -> NormalizedValue:
        return super().value_to_normal(_round_half_away(float(value)))

    def normal_to_value(self, normal: NormalizedValue) -> float:
        return _round_half_away(super().normal_to_value(normal))

    def set_from_normal(self, normal: NormalizedValue | float) -> float:
        value = self.normal_to_value(_as_normal(normal))
        self.normal_param.value = self.value_to_normal(value)
        self.value = value
        return self.value

    def int_value(self) -> int:
        return int(self.value)


@dataclass
class LogDBParam(FloatParam):
    """A decibel range where values near 0 dB move slower than values far from it.

    `zero_db_normal` is the normalized position of 0 dB. Each side of that point maps
    its position fraction through amplitude, so the dB step per unit of normal grows
    toward the range edges. All intermediate math runs in float64.
    """

    zero_db_normal: float = 0.5

    def __post_init__(self) -> None:
        self.zero_db_normal = float(self.zero_db_normal)
        if not self.min <= 0.0 <= self.max:
            raise ValueError(f"LogDBParam range must include 0 dB (got min={self.min}, max={self.max})")
        if not 0.0 <= self.zero_db_normal <= 1.0:
            raise ValueError("zero_db_normal must be within [0, 1]")
        if self.min == 0.0 and self.zero_db_normal != 0.0:
            raise ValueError("zero_db_normal must be 0.0 when min is 0 dB")
        if self.max == 0.0 and self.zero_db_normal != 1.0:
            raise ValueError("zero_db_normal must be 1.0 when max is 0 dB")
        if self.min < 0.0 and self.zero_db_normal == 0.0:
            raise ValueError("zero_db_normal must be > 0.0 when min is below 0 dB")
        if self.max > 0.0 and self.zero_db_normal == 1.0:
            raise ValueError("zero_db_normal must be < 1.0 when max is above 0 dB")
        super().__post_init__()

    def value_to_normal(self, value: float) -> NormalizedValue:
        db = _clip(float(value), self.min, self.max)
        if db == 0.0:
            return NormalizedValue(self.zero_db_normal)
        if db < 0.0:
            p = _db_to_position(-db, -self.min)
            return NormalizedValue(self.zero_db_normal * (1.0 - p))
        p = _db_to_position(db, self.max)
        return NormalizedValue(self.zero_db_normal + p * (1.0 - self.zero_db_normal))

    def normal_to_value(self, normal: NormalizedValue) -> float:
        n = _as_normal(normal).value
        if n == self.zero_db_normal:
            return 0.0
        if n < self.zero_db_normal:
            p = (self.zero_db_normal - n) / self.zero_db_normal
            return -_position_to_db(p, -self.min)
        p = (n - self.zero_db_normal) / (1.0 - self.zero_db_normal)
        return _position_to_db(p, self.max)


@dataclass
class OctaveParam(FloatParam):
    """A frequency range with every octave spaced evenly (default 20 Hz to 20480 Hz)."""

    min: float = 20.0
    max: float = 20480.0
    value: float = 1000.0
    default: float = 1000.0

    def __post_init__(self) -> None:
        if float(self.min) <= 0.0:
            raise ValueError(f"OctaveParam min must be > 0 Hz (got {self.min})")
        super().__post_init__()

    @property
    def octaves(self) -> float:
        return math.log2(self.max / self.min)

    def value_to_normal(self, value: float) -> NormalizedValue:
        hz = _clip(float(value), self.min, self.max)
        return NormalizedValue(math.log2(hz / self.min) / self.octaves)

    def normal_to_value(self, normal: NormalizedValue) -> float:
        hz = self.min * (2.0 ** (_as_normal(normal).value * self.octaves))
        return _clip(hz, self.min, self.max)


def _db_to_position(db_magnitude: float, edge_magnitude: float) -> float:
    if edge_magnitude <= 0.0:
        return 0.0
    edge_span = 1.0 - float(db_to_amplitude_f64(-edge_magnitude))
    p = (1.0 - float(db_to_amplitude_f64(-db_magnitude))) / edge_span
    return _clip(p, 0.0, 1.0)


def _position_to_db(p: float, edge_magnitude: float) -> float:
    if edge_magnitude <= 0.0:
        return 0.0
    edge_span = 1.0 - float(db_to_amplitude_f64(-edge_magnitude))
    db = -float(amplitude_to_db_f64(1.0 - p * edge_span))
    return _clip(db, 0.0, edge_magnitude)


def _as_normal(normal: NormalizedValue | float) -> NormalizedValue:
    if isinstance(normal, NormalizedValue):
        return normal
    return NormalizedValue(normal)


def _require_in_range(name: str, value: float, lo: float, hi: float) -> None:
    if not lo <= float(value) <= hi:
        raise ValueError(f"{name} must be within [{lo}, {hi}] (got {value})")


def _round_half_away(x: float) -> float:
    # Halves round away from zero so every integer step spans the same width.
    return math.copysign(math.floor(abs(x) + 0.5), x)


def _clip(x: float, lo: float, hi: float) -> float:
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x
