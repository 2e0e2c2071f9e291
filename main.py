from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

from paramdrag_core import (
    DEFAULT_DRAG_CONFIG,
    LogDBParam,
    NormalizedValue,
    NormalParam,
    OctaveParam,
    amplitude_to_db_f32,
    amplitude_to_db_f64,
    db_to_amplitude_f32,
    db_to_amplitude_f64,
    load_drag_config,
)
from paramdrag_ui import DragGestureController, parse_bounds_notation, parse_hdi_input_event

LOGGER = logging.getLogger("paramdrag")

_CONVERSIONS = (
    "db-to-amp",
    "amp-to-db",
    "normal-to-db",
    "db-to-normal",
    "normal-to-octave",
    "octave-to-normal",
)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="paramdrag")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    convert = sub.add_parser("convert", help="Convert between normalized, decibel, amplitude and frequency values.")
    convert.add_argument("conversion", choices=_CONVERSIONS)
    convert.add_argument("value", type=float)
    convert.add_argument("--precision", choices=["f32", "f64"], default="f64")
    convert.add_argument("--min-db", type=float, default=-12.0)
    convert.add_argument("--max-db", type=float, default=12.0)
    convert.add_argument("--zero-db-normal", type=float, default=0.5)
    convert.add_argument("--min-hz", type=float, default=20.0)
    convert.add_argument("--max-hz", type=float, default=20480.0)

    replay = sub.add_parser("replay", help="Feed a JSONL HDI event script through a drag control.")
    replay.add_argument("events", type=Path)
    replay.add_argument("--config", type=Path, default=None, help="TOML file with a [drag] table.")
    replay.add_argument("--initial", type=float, default=0.5)
    replay.add_argument("--default", type=float, default=0.5)
    replay.add_argument("--bounds", type=str, default=None, help="Interactive bounds as `x,y,w,h`.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "convert":
        try:
            print(_format_number(_convert(args)))
        except ValueError as exc:
            parser.error(str(exc))
        return

    if args.command == "replay":
        try:
            bounds = parse_bounds_notation(args.bounds) if args.bounds is not None else None
        except ValueError as exc:
            parser.error(str(exc))
        config = load_drag_config(args.config) if args.config is not None else DEFAULT_DRAG_CONFIG
        emitted = _replay(args.events, config, args.initial, args.default, bounds)
        LOGGER.info("replay emitted %d values", emitted)
        return

    raise RuntimeError(f"unsupported command: {args.command}")


def _convert(args: argparse.Namespace) -> float:
    conversion = args.conversion
    value = args.value
    if conversion == "db-to-amp":
        fn = db_to_amplitude_f32 if args.precision == "f32" else db_to_amplitude_f64
        return float(fn(value))
    if conversion == "amp-to-db":
        fn = amplitude_to_db_f32 if args.precision == "f32" else amplitude_to_db_f64
        return float(fn(value))
    if conversion in ("normal-to-db", "db-to-normal"):
        param = LogDBParam(
            min=args.min_db,
            max=args.max_db,
            value=0.0,
            default=0.0,
            zero_db_normal=args.zero_db_normal,
        )
        if conversion == "normal-to-db":
            return param.normal_to_value(NormalizedValue(value))
        return param.value_to_normal(value).value
    param = OctaveParam(min=args.min_hz, max=args.max_hz, value=args.min_hz, default=args.min_hz)
    if conversion == "normal-to-octave":
        return param.normal_to_value(NormalizedValue(value))
    return param.value_to_normal(value).value


def _replay(path: Path, config, initial: float, default: float, bounds) -> int:
    if not path.exists():
        raise FileNotFoundError(f"event script not found: {path}")
    emitted: list[NormalizedValue] = []
    controller = DragGestureController.from_config(
        config,
        NormalParam(value=NormalizedValue(initial), default=NormalizedValue(default)),
        emitted.append,
        bounds=bounds,
    )
    with path.open("r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            raw = line.strip()
            if not raw or raw.startswith("#"):
                continue
            try:
                record = json.loads(raw)
            except json.JSONDecodeError as exc:
                raise ValueError(f"{path}:{line_no}: invalid JSON: {exc.msg}") from exc
            if not isinstance(record, dict):
                raise ValueError(f"{path}:{line_no}: each line must be a JSON object")
            event = parse_hdi_input_event(
                str(record.get("event_type", "")),
                record.get("payload"),
                ts_s=float(record.get("ts", 0.0)),
            )
            if event is None:
                LOGGER.debug("%s:%d: skipped unsupported event %r", path, line_no, record.get("event_type"))
                continue
            before = len(emitted)
            controller.handle_event(event)
            for value in emitted[before:]:
                print(f"value={value.value:.6f}")
    print(f"final value={controller.value.value:.6f} dragging={controller.is_dragging}")
    return len(emitted)


def _format_number(value: float) -> str:
    return f"{value:.6f}" if abs(value) < 1e6 else f"{value:.6e}"


if __name__ == "__main__":
    main()
