from __future__ import annotations

import unittest

from paramdrag_core.click import ClickRecord, ClickTracker, is_multi_click, kind_from_click_count


class ClickTrackerTests(unittest.TestCase):
    def test_rapid_presses_advance_then_stay_triple(self) -> None:
        tracker = ClickTracker(double_click_threshold_s=0.25, max_distance_px=4.0)
        kinds = []
        previous = None
        for i in range(5):
            previous = tracker.classify(10.0, 10.0, 0.1 * i, previous)
            kinds.append(previous.kind)
        self.assertEqual(kinds, ["single", "double", "triple", "triple", "triple"])

    def test_slow_or_distant_press_starts_over(self) -> None:
        tracker = ClickTracker(double_click_threshold_s=0.25, max_distance_px=4.0)
        first = tracker.classify(10.0, 10.0, 0.0, None)
        self.assertEqual(tracker.classify(10.0, 10.0, 0.5, first).kind, "single")
        self.assertEqual(tracker.classify(20.0, 10.0, 0.1, first).kind, "single")
        self.assertEqual(tracker.classify(12.0, 12.0, 0.1, first).kind, "double")

    def test_clock_going_backwards_is_single(self) -> None:
        tracker = ClickTracker()
        previous = ClickRecord(x=0.0, y=0.0, ts_s=5.0, kind="single")
        self.assertEqual(tracker.classify(0.0, 0.0, 4.9, previous).kind, "single")

    def test_rejects_invalid_thresholds(self) -> None:
        with self.assertRaises(ValueError):
            ClickTracker(double_click_threshold_s=0.0)
        with self.assertRaises(ValueError):
            ClickTracker(max_distance_px=-1.0)

    def test_click_count_mapping(self) -> None:
        self.assertEqual(kind_from_click_count(1), "single")
        self.assertEqual(kind_from_click_count(2), "double")
        self.assertEqual(kind_from_click_count(3), "triple")
        self.assertEqual(kind_from_click_count(7), "triple")
        self.assertFalse(is_multi_click("single"))
        self.assertTrue(is_multi_click("double"))
        self.assertTrue(is_multi_click("triple"))


if __name__ == "__main__":
    unittest.main()
