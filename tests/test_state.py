"""
tests/test_state.py

Unit tests for the display state machine and frame layout helpers.
"""

from __future__ import annotations

import unittest

from analog_clock.state import (
    DEFAULT_WIDTH,
    MIN_WIDTH,
    WIDTH_STEP,
    DisplayState,
    FaceStyle,
    MarkerStyle,
    SecondMode,
    frame_size,
    widest_fitting,
)


class TestLayout(unittest.TestCase):
    def test_frame_size(self) -> None:
        self.assertEqual(frame_size(41), (21, 41))
        self.assertEqual(frame_size(MIN_WIDTH), (13, 25))

    def test_default_geometry(self) -> None:
        state = DisplayState()
        self.assertEqual((state.rows, state.cols), (21, 41))
        self.assertEqual(state.center, (10, 20))
        self.assertEqual(state.radius, 17)

    def test_widest_fitting(self) -> None:
        self.assertEqual(widest_fitting(80, 24), 45)
        self.assertEqual(widest_fitting(30, 24), 30)
        self.assertEqual(widest_fitting(10, 5), MIN_WIDTH)


class TestDisplayState(unittest.TestCase):
    def setUp(self) -> None:
        self.state = DisplayState()

    def test_defaults(self) -> None:
        self.assertEqual(self.state.second_mode, SecondMode.TICK)
        self.assertEqual(self.state.face_style, FaceStyle.FULL_CIRCLE)
        self.assertEqual(self.state.marker_style, MarkerStyle.NUMERIC)
        self.assertEqual(self.state.width, DEFAULT_WIDTH)
        self.assertTrue(self.state.continuous_minutes)
        self.assertFalse(self.state.second_tip_only)

    def test_second_mode_order(self) -> None:
        state = DisplayState(second_mode=SecondMode.OFF)
        seen = []
        for _ in range(3):
            state.cycle_second_mode()
            seen.append(state.second_mode)
        self.assertEqual(seen, [SecondMode.TICK, SecondMode.SWEEP, SecondMode.OFF])

    def test_face_style_order(self) -> None:
        seen = []
        for _ in range(4):
            self.state.cycle_face_style()
            seen.append(self.state.face_style)
        self.assertEqual(seen, [FaceStyle.TICKS, FaceStyle.HOUR_TICKS_ONLY,
                                FaceStyle.BLANK, FaceStyle.FULL_CIRCLE])

    def test_marker_style_order(self) -> None:
        seen = []
        for _ in range(3):
            self.state.cycle_marker_style()
            seen.append(self.state.marker_style)
        self.assertEqual(seen, [MarkerStyle.DOTS, MarkerStyle.OFF, MarkerStyle.NUMERIC])

    def test_cycles_close(self) -> None:
        cycles = [
            (self.state.cycle_second_mode, "second_mode", SecondMode.ORDER),
            (self.state.cycle_face_style, "face_style", FaceStyle.ORDER),
            (self.state.cycle_marker_style, "marker_style", MarkerStyle.ORDER),
        ]
        for cycle, field, order in cycles:
            for start in order:
                setattr(self.state, field, start)
                for _ in range(len(order)):
                    cycle()
                self.assertEqual(getattr(self.state, field), start)

    def test_toggles(self) -> None:
        self.state.toggle_continuous_minutes()
        self.state.toggle_second_tip_only()
        self.assertFalse(self.state.continuous_minutes)
        self.assertTrue(self.state.second_tip_only)
        self.state.toggle_continuous_minutes()
        self.state.toggle_second_tip_only()
        self.assertTrue(self.state.continuous_minutes)
        self.assertFalse(self.state.second_tip_only)

    def test_shrink_stops_at_minimum(self) -> None:
        state = DisplayState(width=MIN_WIDTH)
        state.shrink()
        self.assertEqual(state.width, MIN_WIDTH)

    def test_shrink_past_minimum_leaves_width(self) -> None:
        state = DisplayState(width=MIN_WIDTH + 2)
        state.shrink()
        self.assertEqual(state.width, MIN_WIDTH + 2)

    def test_grow_without_maximum(self) -> None:
        self.state.grow()
        self.assertEqual(self.state.width, DEFAULT_WIDTH + WIDTH_STEP)

    def test_grow_past_maximum_leaves_width(self) -> None:
        state = DisplayState(width=41, max_width=47)
        state.grow()
        self.assertEqual(state.width, 45)
        state.grow()
        self.assertEqual(state.width, 45)

    def test_width_capped_by_maximum_on_creation(self) -> None:
        self.assertEqual(DisplayState(width=61, max_width=45).width, 45)

    def test_fit_to_terminal(self) -> None:
        self.state.fit_to(80, 24)
        self.assertEqual(self.state.max_width, 45)
        self.assertEqual(self.state.width, DEFAULT_WIDTH)

        self.state.fit_to(30, 24)
        self.assertEqual(self.state.width, 30)

        self.state.fit_to(10, 5)
        self.assertEqual(self.state.width, MIN_WIDTH)

    def test_invalid_values_rejected(self) -> None:
        with self.assertRaises(ValueError):
            DisplayState(second_mode="spin")
        with self.assertRaises(ValueError):
            DisplayState(face_style="square")
        with self.assertRaises(ValueError):
            DisplayState(marker_style="roman")
        with self.assertRaises(ValueError):
            DisplayState(width=MIN_WIDTH - 1)
        with self.assertRaises(ValueError):
            DisplayState(max_width=MIN_WIDTH - 1)


if __name__ == "__main__":
    unittest.main()
