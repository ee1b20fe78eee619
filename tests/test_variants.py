from __future__ import annotations

import math
import unittest

from complex_visualizer.config import ChartConfig, ChartStyle
from complex_visualizer.errors import GeometryConstructionError
from complex_visualizer.geometry import Point, Viewport
from complex_visualizer.variants import (
    ChartVariant,
    Marker,
    Polyline,
    generate_chart,
    operation_result,
    sample_complex_curve,
)


class ComplexCurveTests(unittest.TestCase):
    def test_sampling_is_deterministic_and_visible(self) -> None:
        vp = Viewport(x=-10.0, y=-10.0, width=20.0, height=20.0)
        first = generate_chart(ChartVariant.COMPLEX_CURVE, vp)
        second = generate_chart(ChartVariant.COMPLEX_CURVE, vp)
        self.assertEqual(first, second)

        (line,) = first.primitives
        self.assertIsInstance(line, Polyline)
        assert isinstance(line, Polyline)
        self.assertEqual(len(line.points), 317)
        for _, y in line.points:
            self.assertGreater(y, -10.0)
            self.assertLess(y, 10.0)

    def test_samples_are_in_x_order(self) -> None:
        xs, _ = sample_complex_curve(Viewport(x=-3.0, y=-1.0, width=6.0, height=10.0), 1000)
        self.assertTrue(all(a < b for a, b in zip(xs.tolist(), xs.tolist()[1:])))

    def test_filter_drops_instead_of_clamping(self) -> None:
        xs, ys = sample_complex_curve(Viewport(x=-5.0, y=1.0, width=10.0, height=3.0), 1000)
        self.assertGreater(xs.size, 0)
        self.assertTrue(((ys > 1.0) & (ys < 4.0)).all())
        # the dip around x = 0 falls below the viewport and leaves a hole
        self.assertFalse(((xs > -0.9) & (xs < 0.9)).any())

    def test_resolution_includes_both_ends(self) -> None:
        xs, _ = sample_complex_curve(Viewport(x=-1.0, y=-1.0, width=2.0, height=10.0), 1000)
        self.assertEqual(xs.size, 1001)
        self.assertEqual(xs[0], -1.0)
        self.assertAlmostEqual(float(xs[-1]), 1.0, places=12)

    def test_curve_color_comes_from_style(self) -> None:
        config = ChartConfig(style=ChartStyle(curve_color=(1, 2, 3, 255)))
        frame = generate_chart(ChartVariant.COMPLEX_CURVE, Viewport.default(), config=config)
        self.assertEqual(frame.primitives[0].color, (1, 2, 3, 255))

    def test_caption_and_mesh(self) -> None:
        frame = generate_chart(ChartVariant.COMPLEX_CURVE, Viewport.default())
        self.assertEqual(frame.caption, "complex numbers")
        self.assertEqual((frame.mesh.x_labels, frame.mesh.y_labels), (3, 3))
        self.assertEqual(frame.bounds, (-100.0, 100.0, -100.0, 100.0))


class VectorVariantTests(unittest.TestCase):
    def test_rotate_quarter_turn(self) -> None:
        frame = generate_chart(
            ChartVariant.VECTOR_ROTATE,
            Viewport.default(),
            Point(1.0, 0.0),
            Point(0.0, math.pi / 2),
        )
        # vector2.x drives the rotation, so (0, pi/2) means no rotation at all
        first, second = frame.primitives
        assert isinstance(second, Marker)
        self.assertAlmostEqual(second.point[0], 1.0, places=12)
        self.assertAlmostEqual(second.point[1], 0.0, places=12)

        result = operation_result(ChartVariant.VECTOR_ROTATE, Point(1.0, 0.0), Point(math.pi / 2, 0.0))
        assert result is not None
        self.assertAlmostEqual(result.x, 0.0, places=12)
        self.assertAlmostEqual(result.y, 1.0, places=12)

    def test_scale_uses_only_x_of_second_operand(self) -> None:
        frame = generate_chart(ChartVariant.VECTOR_SCALE, Viewport.default(), Point(1.0, 0.0), Point(2.0, 0.0))
        _, result = frame.primitives
        assert isinstance(result, Marker)
        self.assertEqual(result.point, (2.0, 0.0))
        self.assertEqual(
            operation_result(ChartVariant.VECTOR_SCALE, Point(1.0, 1.0), Point(3.0, 99.0)),
            Point(3.0, 3.0),
        )

    def test_translate_markers(self) -> None:
        style = ChartStyle()
        frame = generate_chart(ChartVariant.VECTOR_TRANSLATE, Viewport.default(), Point(1.0, 2.0), Point(3.0, -1.0))
        self.assertEqual(
            frame.primitives,
            (
                Marker(point=(1.0, 2.0), radius=5, filled=True, color=style.vector_color),
                Marker(point=(4.0, 1.0), radius=5, filled=True, color=style.result_color),
            ),
        )
        self.assertEqual(frame.caption, "translate")

    def test_missing_operands_default_to_origin(self) -> None:
        frame = generate_chart(ChartVariant.VECTOR_TRANSLATE, Viewport.default())
        self.assertEqual([m.point for m in frame.primitives], [(0.0, 0.0), (0.0, 0.0)])

    def test_curve_has_no_operation_result(self) -> None:
        self.assertIsNone(operation_result(ChartVariant.COMPLEX_CURVE, Point(1.0, 1.0), Point(1.0, 1.0)))

    def test_variant_parses_operation_names(self) -> None:
        self.assertIs(ChartVariant("rotate"), ChartVariant.VECTOR_ROTATE)
        self.assertTrue(ChartVariant.VECTOR_SCALE.is_vector)
        self.assertFalse(ChartVariant.COMPLEX_CURVE.is_vector)


class DegenerateViewportTests(unittest.TestCase):
    def test_zero_width_is_rejected(self) -> None:
        with self.assertRaises(GeometryConstructionError):
            generate_chart(ChartVariant.COMPLEX_CURVE, Viewport(x=0.0, y=0.0, width=0.0, height=1.0))

    def test_negative_height_is_rejected(self) -> None:
        with self.assertRaises(GeometryConstructionError):
            generate_chart(ChartVariant.VECTOR_ROTATE, Viewport(x=0.0, y=0.0, width=1.0, height=-1.0))

    def test_non_finite_bounds_are_rejected(self) -> None:
        with self.assertRaises(GeometryConstructionError):
            generate_chart(ChartVariant.COMPLEX_CURVE, Viewport(x=math.inf, y=0.0, width=1.0, height=1.0))
        with self.assertRaises(GeometryConstructionError):
            generate_chart(ChartVariant.COMPLEX_CURVE, Viewport(x=0.0, y=math.nan, width=1.0, height=1.0))


if __name__ == "__main__":
    unittest.main()
