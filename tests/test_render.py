from __future__ import annotations

import unittest

import numpy as np

from complex_visualizer.cartesian import build_cartesian_2d
from complex_visualizer.config import ChartConfig, ChartStyle
from complex_visualizer.geometry import Point, Viewport
from complex_visualizer.raster import draw_polyline, new_canvas
from complex_visualizer.render import FrameRenderer
from complex_visualizer.variants import ChartFrame, ChartVariant, Marker, MeshSpec, generate_chart


def _render(config: ChartConfig, frame: ChartFrame, width: int = 400, height: int = 300):
    system = build_cartesian_2d(
        frame.bounds,
        width,
        height,
        config.layout,
        caption=frame.caption,
        x_labels=frame.mesh.x_labels,
        y_labels=frame.mesh.y_labels,
    )
    return FrameRenderer(config).render(frame, system), system


class FrameRendererTests(unittest.TestCase):
    def test_render_is_deterministic(self) -> None:
        config = ChartConfig()
        frame = generate_chart(ChartVariant.COMPLEX_CURVE, Viewport(-10.0, -10.0, 20.0, 20.0), config=config)
        first, _ = _render(config, frame)
        second, _ = _render(config, frame)
        self.assertEqual(first.shape, (300, 400, 4))
        self.assertTrue(np.array_equal(first, second))

    def test_curve_stays_inside_plot_area(self) -> None:
        red = (255, 0, 0, 255)
        config = ChartConfig(style=ChartStyle(curve_color=red))
        frame = generate_chart(ChartVariant.COMPLEX_CURVE, Viewport(-10.0, -10.0, 20.0, 20.0), config=config)
        canvas, system = _render(config, frame)
        hits = np.all(canvas == np.asarray(red, dtype=np.uint8), axis=2)
        ys, xs = np.nonzero(hits)
        self.assertGreater(xs.size, 0)
        area = system.area
        self.assertTrue(np.all(xs >= area.x0) and np.all(xs < area.x0 + area.width))
        self.assertTrue(np.all(ys >= area.y0) and np.all(ys < area.y0 + area.height))

    def test_caption_and_axes_are_drawn_in_margins(self) -> None:
        config = ChartConfig()
        frame = generate_chart(ChartVariant.VECTOR_SCALE, Viewport(-10.0, -10.0, 20.0, 20.0), config=config)
        canvas, system = _render(config, frame)
        self.assertEqual(tuple(canvas[5, 5]), config.style.background)
        caption_band = canvas[config.layout.margin : system.area.y0, :, :3]
        self.assertTrue(np.any(caption_band < 128))
        area = system.area
        bottom = area.y0 + area.height - 1
        self.assertEqual(tuple(canvas[bottom, area.x0 + 10]), config.style.axis_color)

    def test_vector_markers_land_on_mapped_points(self) -> None:
        config = ChartConfig()
        frame = generate_chart(
            ChartVariant.VECTOR_TRANSLATE,
            Viewport(-10.0, -10.0, 20.0, 20.0),
            Point(1.0, 0.0),
            Point(2.0, 0.0),
            config=config,
        )
        canvas, system = _render(config, frame)
        mapper = system.into_mapper()
        vx, vy = mapper.to_screen(1.0, 0.0)
        rx, ry = mapper.to_screen(3.0, 0.0)
        self.assertEqual(tuple(canvas[vy, vx]), config.style.vector_color)
        self.assertEqual(tuple(canvas[ry, rx]), config.style.result_color)

    def test_outlined_marker_leaves_centre_untouched(self) -> None:
        config = ChartConfig()
        color = (0, 200, 0, 255)
        frame = ChartFrame(
            variant=ChartVariant.VECTOR_TRANSLATE,
            caption="",
            bounds=(-10.0, 10.0, -10.0, 10.0),
            mesh=MeshSpec(),
            primitives=(
                Marker(point=(-5.0, -5.0), radius=5, filled=True, color=color),
                Marker(point=(5.0, 5.0), radius=5, filled=False, color=color),
            ),
        )
        canvas, system = _render(config, frame)
        mapper = system.into_mapper()
        fx, fy = mapper.to_screen(-5.0, -5.0)
        ox, oy = mapper.to_screen(5.0, 5.0)
        self.assertEqual(tuple(canvas[fy, fx]), color)
        self.assertNotEqual(tuple(canvas[oy, ox]), color)
        self.assertEqual(tuple(canvas[oy, ox + 5]), color)

    def test_non_finite_marker_is_skipped(self) -> None:
        config = ChartConfig()
        frame = ChartFrame(
            variant=ChartVariant.VECTOR_SCALE,
            caption="",
            bounds=(-1.0, 1.0, -1.0, 1.0),
            mesh=MeshSpec(),
            primitives=(Marker(point=(float("nan"), 0.0), radius=5, filled=True, color=(0, 200, 0, 255)),),
        )
        canvas, _ = _render(config, frame)
        self.assertFalse(np.any(np.all(canvas == np.asarray((0, 200, 0, 255), dtype=np.uint8), axis=2)))

    def test_unknown_primitive_is_rejected(self) -> None:
        config = ChartConfig()
        frame = ChartFrame(
            variant=ChartVariant.VECTOR_SCALE,
            caption="scale",
            bounds=(-1.0, 1.0, -1.0, 1.0),
            mesh=MeshSpec(),
            primitives=("circle",),  # type: ignore[arg-type]
        )
        with self.assertRaises(TypeError):
            _render(config, frame)


class PolylineTests(unittest.TestCase):
    def test_shared_vertex_is_blended_once(self) -> None:
        canvas = new_canvas(10, 3)
        draw_polyline(canvas, np.asarray([0, 5, 9]), np.asarray([1, 1, 1]), (0, 0, 0, 128))
        self.assertTrue(np.array_equal(canvas[1, 5], canvas[1, 2]))
        self.assertTrue(np.array_equal(canvas[1, 5], canvas[1, 8]))
        self.assertLess(int(canvas[1, 5, 0]), 255)

    def test_diagonal_segment_covers_both_endpoints(self) -> None:
        canvas = new_canvas(6, 6, color=(0, 0, 0, 0))
        draw_polyline(canvas, np.asarray([0, 5]), np.asarray([0, 5]), (9, 9, 9, 255))
        drawn = np.nonzero(canvas[:, :, 3])
        self.assertEqual(list(zip(drawn[0].tolist(), drawn[1].tolist())), [(i, i) for i in range(6)])

    def test_segments_off_canvas_are_skipped(self) -> None:
        canvas = new_canvas(8, 8)
        before = canvas.copy()
        draw_polyline(canvas, np.asarray([-50, -40, -30]), np.asarray([2, 3, 4]), (0, 0, 0, 255))
        self.assertTrue(np.array_equal(canvas, before))


if __name__ == "__main__":
    unittest.main()
