from __future__ import annotations

import numpy as np

from complex_visualizer.cartesian import Cartesian2D
from complex_visualizer.config import DEFAULT_CONFIG, ChartConfig
from complex_visualizer.raster import (
    blit,
    draw_circle_markers,
    draw_hline,
    draw_polyline,
    draw_text,
    draw_vline,
    new_canvas,
    text_size,
)
from complex_visualizer.scales import format_ticks_for_axis, map_to_pixels
from complex_visualizer.variants import ChartFrame, Marker, Polyline

TICK_MARK_LEN = 5
TICK_LABEL_PAD = 3


class FrameRenderer:
    """Rasterizes a :class:`ChartFrame` over a coordinate system.

    Drawing order is background, caption, mesh and axis labels, then data
    primitives. Data is drawn on a plot-sized layer so nothing leaks into the
    margins or label areas.
    """

    def __init__(self, config: ChartConfig = DEFAULT_CONFIG) -> None:
        self._config = config

    def render(self, frame: ChartFrame, system: Cartesian2D, canvas: np.ndarray | None = None) -> np.ndarray:
        style = self._config.style
        if canvas is None:
            canvas = new_canvas(system.canvas_width, system.canvas_height, color=style.background)
        self._draw_caption(canvas, frame.caption, system)
        self._draw_mesh(canvas, system)

        area = system.area
        layer = new_canvas(area.width, area.height, color=(0, 0, 0, 0))
        for primitive in frame.primitives:
            if isinstance(primitive, Polyline):
                self._draw_polyline(layer, primitive, system)
            elif isinstance(primitive, Marker):
                self._draw_marker(layer, primitive, system)
            else:
                raise TypeError(f"unsupported primitive: {type(primitive)!r}")
        blit(canvas, layer, area.x0, area.y0)
        return canvas

    def _draw_caption(self, canvas: np.ndarray, caption: str, system: Cartesian2D) -> None:
        if not caption:
            return
        layout = self._config.layout
        w, _ = text_size(caption, font_family=layout.font_family, font_size_px=layout.caption_font_px)
        draw_text(
            canvas,
            max(0, (system.canvas_width - w) // 2),
            layout.margin,
            caption,
            self._config.style.text_color,
            font_family=layout.font_family,
            font_size_px=layout.caption_font_px,
        )

    def _draw_mesh(self, canvas: np.ndarray, system: Cartesian2D) -> None:
        style = self._config.style
        layout = self._config.layout
        area = system.area
        left = area.x0
        right = area.x0 + area.width - 1
        top = area.y0
        bottom = area.y0 + area.height - 1

        tick_x = np.asarray(system.x_ticks, dtype=np.float64)
        tick_y = np.asarray(system.y_ticks, dtype=np.float64)
        px, _ = map_to_pixels(tick_x, np.zeros_like(tick_x), system.transform, area.width, area.height)
        _, py = map_to_pixels(np.zeros_like(tick_y), tick_y, system.transform, area.width, area.height)

        for x in px.tolist():
            draw_vline(canvas, left + x, top, bottom, style.mesh_color)
        for y in py.tolist():
            draw_hline(canvas, left, right, top + y, style.mesh_color)

        draw_vline(canvas, left, top, bottom, style.axis_color)
        draw_hline(canvas, left, right, bottom, style.axis_color)

        font_px = layout.label_font_px
        family = layout.font_family
        for x, label in zip(px.tolist(), format_ticks_for_axis(tick_x), strict=False):
            sx = left + x
            draw_vline(canvas, sx, bottom, bottom + TICK_MARK_LEN, style.axis_color)
            w, _ = text_size(label, font_family=family, font_size_px=font_px)
            draw_text(
                canvas,
                sx - w // 2,
                bottom + TICK_MARK_LEN + TICK_LABEL_PAD,
                label,
                style.text_color,
                font_family=family,
                font_size_px=font_px,
            )
        for y, label in zip(py.tolist(), format_ticks_for_axis(tick_y), strict=False):
            sy = top + y
            draw_hline(canvas, left - TICK_MARK_LEN, left, sy, style.axis_color)
            w, h = text_size(label, font_family=family, font_size_px=font_px)
            draw_text(
                canvas,
                left - TICK_MARK_LEN - TICK_LABEL_PAD - w,
                sy - h // 2,
                label,
                style.text_color,
                font_family=family,
                font_size_px=font_px,
            )

    def _draw_polyline(self, layer: np.ndarray, line: Polyline, system: Cartesian2D) -> None:
        if len(line.points) < 2:
            return
        pts = np.asarray(line.points, dtype=np.float64)
        xs, ys = system.to_local_pixels(pts[:, 0], pts[:, 1])
        draw_polyline(layer, xs, ys, line.color)

    def _draw_marker(self, layer: np.ndarray, marker: Marker, system: Cartesian2D) -> None:
        if not np.all(np.isfinite(marker.point)):
            return
        xs, ys = system.to_local_pixels(
            np.asarray([marker.point[0]], dtype=np.float64),
            np.asarray([marker.point[1]], dtype=np.float64),
        )
        draw_circle_markers(layer, xs, ys, marker.color, radius=marker.radius, filled=marker.filled)
