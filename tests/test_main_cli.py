from __future__ import annotations

import contextlib
import io
import json
from pathlib import Path
import tempfile
import unittest

import main as cli


def _run(argv: list[str]) -> list[str]:
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        cli.main(argv)
    return out.getvalue().splitlines()


class MainCliTests(unittest.TestCase):
    def test_convert(self) -> None:
        self.assertEqual(_run(["convert", "db-to-amp", "20"]), ["10.000000"])
        self.assertEqual(_run(["convert", "amp-to-db", "0.5", "--precision", "f32"]), ["-6.020600"])
        self.assertEqual(_run(["convert", "amp-to-db", "0"]), ["-inf"])
        self.assertEqual(_run(["convert", "normal-to-octave", "0.5"]), ["640.000000"])
        self.assertEqual(_run(["convert", "normal-to-db", "0.5"]), ["0.000000"])
        self.assertEqual(_run(["convert", "db-to-normal", "0", "--zero-db-normal", "0.75"]), ["0.750000"])

    def test_convert_rejects_invalid_range(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                cli.main(["convert", "normal-to-db", "0.5", "--min-db", "3"])

    def test_replay_script(self) -> None:
        records = [
            {"event_type": "pointer_down", "payload": {"x": 5, "y": 100, "button": "left"}, "ts": 0.0},
            {"event_type": "pointer_move", "payload": {"x": 5, "y": 50}},
            {"event_type": "pointer_up", "payload": {"button": "left"}},
            {"event_type": "sensor", "payload": {}},
        ]
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "events.jsonl"
            path.write_text("\n".join(json.dumps(r) for r in records) + "\n", encoding="utf-8")
            lines = _run(["replay", str(path)])
        self.assertEqual(lines, ["value=0.596250", "final value=0.596250 dragging=False"])

    def test_replay_with_config_and_bounds(self) -> None:
        records = [
            {"event_type": "key_down", "payload": {"key": "shift", "active_keys": ["shift"]}},
            {"event_type": "pointer_down", "payload": {"x": 500, "y": 100}},
            {"event_type": "pointer_down", "payload": {"x": 5, "y": 100}, "ts": 1.0},
            {"event_type": "pointer_move", "payload": {"x": 5, "y": 90}},
        ]
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "events.jsonl"
            path.write_text("\n".join(json.dumps(r) for r in records), encoding="utf-8")
            config = Path(td) / "drag.toml"
            config.write_text('[drag]\nbase_scalar = 0.01\nmodifier_keys = ["shift"]\nmodifier_scalar = 0.5\n', encoding="utf-8")
            lines = _run(["replay", str(path), "--config", str(config), "--bounds", "0,0,200,200", "--initial", "0.2"])
        self.assertEqual(lines, ["value=0.250000", "final value=0.250000 dragging=True"])


if __name__ == "__main__":
    unittest.main()
