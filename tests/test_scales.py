from __future__ import annotations

import unittest

import numpy as np

from complex_visualizer.scales import (
    DataLimits,
    axis_ticks,
    build_transform,
    format_tick,
    format_ticks_for_axis,
    generate_nice_ticks,
    map_to_pixels,
)


class ScalesTests(unittest.TestCase):
    def test_default_window_gets_three_labels(self) -> None:
        ticks = axis_ticks(-100.0, 100.0, 3)
        self.assertEqual(ticks.tolist(), [-100.0, 0.0, 100.0])
        self.assertEqual(format_ticks_for_axis(ticks), ["-100", "0", "100"])

    def test_fractional_ticks_are_trimmed(self) -> None:
        ticks = generate_nice_ticks(0.0, 1.0, 3)
        self.assertEqual(format_ticks_for_axis(ticks), ["0", "0.5", "1"])

    def test_ticks_stay_inside_range(self) -> None:
        ticks = axis_ticks(-7.3, 12.9, 3)
        self.assertTrue(np.all(ticks >= -7.3))
        self.assertTrue(np.all(ticks <= 12.9))
        self.assertGreater(ticks.size, 0)

    def test_generate_nice_ticks_rejects_bad_target(self) -> None:
        with self.assertRaises(ValueError):
            generate_nice_ticks(0.0, 1.0, 0)

    def test_format_tick_switches_to_exponent_for_huge_values(self) -> None:
        self.assertEqual(format_tick(2.5e7), "2.5000e+07")
        self.assertEqual(format_tick(-0.0, step=1.0), "0")

    def test_transform_maps_limits_to_edges(self) -> None:
        transform = build_transform(DataLimits(xmin=-1.0, xmax=1.0, ymin=0.0, ymax=10.0), 101, 51)
        px, py = map_to_pixels(np.asarray([-1.0, 1.0]), np.asarray([0.0, 10.0]), transform, 101, 51)
        self.assertEqual(px.tolist(), [0, 100])
        self.assertEqual(py.tolist(), [50, 0])
        x, y = transform.inverse(*transform.forward(0.25, 7.5))
        self.assertAlmostEqual(x, 0.25)
        self.assertAlmostEqual(y, 7.5)

    def test_map_to_pixels_clips_only_when_asked(self) -> None:
        transform = build_transform(DataLimits(xmin=0.0, xmax=1.0, ymin=0.0, ymax=1.0), 11, 11)
        xs = np.asarray([2.0])
        ys = np.asarray([-1.0])
        px, py = map_to_pixels(xs, ys, transform, 11, 11)
        self.assertEqual((px.tolist(), py.tolist()), ([10], [10]))
        px, py = map_to_pixels(xs, ys, transform, 11, 11, clip=False)
        self.assertEqual((px.tolist(), py.tolist()), ([20], [20]))

    def test_nice_ticks_reject_overflowing_range(self) -> None:
        with self.assertRaises(ValueError):
            generate_nice_ticks(-1e308, 5e307, 3)
        with self.assertRaises(ValueError):
            axis_ticks(-1e308, 1.7e308, 3)

    def test_build_transform_rejects_degenerate_input(self) -> None:
        with self.assertRaises(ValueError):
            build_transform(DataLimits(xmin=0.0, xmax=0.0, ymin=0.0, ymax=1.0), 10, 10)
        with self.assertRaises(ValueError):
            build_transform(DataLimits(xmin=0.0, xmax=1.0, ymin=0.0, ymax=1.0), 1, 10)


if __name__ == "__main__":
    unittest.main()
