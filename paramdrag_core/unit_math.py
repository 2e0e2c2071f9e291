from __future__ import annotations

from typing import Any

import numpy as np


ONE_OVER_20_F32 = np.float32(1.0 / 20.0)
ONE_OVER_20_F64 = np.float64(1.0 / 20.0)

_TEN_F32 = np.float32(10.0)
_TWENTY_F32 = np.float32(20.0)
_TEN_F64 = np.float64(10.0)
_TWENTY_F64 = np.float64(20.0)


def db_to_amplitude_f32(db: Any) -> Any:
    """Convert decibels to amplitude at single precision (`10^(db/20)`)."""

    with np.errstate(over="ignore", under="ignore"):
        return _unwrap(np.power(_TEN_F32, np.asarray(db, dtype=np.float32) * ONE_OVER_20_F32))


def db_to_amplitude_f64(db: Any) -> Any:
    """Convert decibels to amplitude at double precision (`10^(db/20)`)."""

    with np.errstate(over="ignore", under="ignore"):
        return _unwrap(np.power(_TEN_F64, np.asarray(db, dtype=np.float64) * ONE_OVER_20_F64))


def amplitude_to_db_f32(amplitude: Any) -> Any:
    """Convert amplitude to decibels at single precision (`20*log10(amp)`).

    Non-positive amplitudes follow IEEE `log10`: `0` gives `-inf`, negatives give `nan`.
    """

    with np.errstate(divide="ignore", invalid="ignore"):
        return _unwrap(_TWENTY_F32 * np.log10(np.asarray(amplitude, dtype=np.float32)))


def amplitude_to_db_f64(amplitude: Any) -> Any:
    """Convert amplitude to decibels at double precision (`20*log10(amp)`).

    Non-positive amplitudes follow IEEE `log10`: `0` gives `-inf`, negatives give `nan`.
    """

    with np.errstate(divide="ignore", invalid="ignore"):
        return _unwrap(_TWENTY_F64 * np.log10(np.asarray(amplitude, dtype=np.float64)))


# Double precision is the default entry point; multi-step chains stay in f64.
db_to_amplitude = db_to_amplitude_f64
amplitude_to_db = amplitude_to_db_f64


def _unwrap(out: Any) -> Any:
    if isinstance(out, np.ndarray) and out.ndim == 0:
        return out[()]
    return out
