from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Hashable

import numpy as np

from complex_visualizer.config import ChartLayout
from complex_visualizer.errors import GeometryConstructionError
from complex_visualizer.mapper import CoordinateMapper, PlotArea
from complex_visualizer.scales import DataLimits, PlotTransform, axis_ticks, build_transform, map_to_pixels


def check_bounds(bounds: tuple[float, float, float, float]) -> DataLimits:
    xmin, xmax, ymin, ymax = bounds
    if not all(math.isfinite(v) for v in bounds):
        raise GeometryConstructionError(f"viewport bounds must be finite: {bounds}")
    if xmax <= xmin:
        raise GeometryConstructionError(f"degenerate x range: {xmin}..{xmax}")
    if ymax <= ymin:
        raise GeometryConstructionError(f"degenerate y range: {ymin}..{ymax}")
    if not math.isfinite(xmax - xmin) or not math.isfinite(ymax - ymin):
        raise GeometryConstructionError(f"viewport span overflows: {bounds}")
    return DataLimits(xmin=xmin, xmax=xmax, ymin=ymin, ymax=ymax)


def compute_plot_area(width: int, height: int, layout: ChartLayout, *, caption: str = "") -> PlotArea:
    left = layout.margin + layout.y_label_area
    right = width - layout.margin
    top = layout.margin + layout.caption_area(caption)
    bottom = height - layout.margin - layout.x_label_area
    plot_w = right - left
    plot_h = bottom - top
    if plot_w <= 1 or plot_h <= 1:
        raise GeometryConstructionError(f"canvas {width}x{height} too small for plot area after margins and label areas")
    return PlotArea(x0=left, y0=top, width=plot_w, height=plot_h)


@dataclass(frozen=True)
class Cartesian2D:
    """2-D cartesian coordinate system laid over a canvas."""

    limits: DataLimits
    area: PlotArea
    transform: PlotTransform
    canvas_width: int
    canvas_height: int
    x_ticks: tuple[float, ...] = ()
    y_ticks: tuple[float, ...] = ()

    def to_local_pixels(self, xs: np.ndarray, ys: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        return map_to_pixels(xs, ys, self.transform, self.area.width, self.area.height, clip=False)

    def into_mapper(self, state_key: Hashable | None = None) -> CoordinateMapper:
        return CoordinateMapper(
            area=self.area,
            limits=self.limits,
            transform=self.transform,
            canvas_width=self.canvas_width,
            canvas_height=self.canvas_height,
            state_key=state_key,
        )


def build_cartesian_2d(
    bounds: tuple[float, float, float, float],
    canvas_width: int,
    canvas_height: int,
    layout: ChartLayout,
    *,
    caption: str = "",
    x_labels: int = 3,
    y_labels: int = 3,
) -> Cartesian2D:
    limits = check_bounds(bounds)
    area = compute_plot_area(canvas_width, canvas_height, layout, caption=caption)
    transform = build_transform(limits, area.width, area.height)
    if not all(math.isfinite(v) and v != 0.0 for v in (transform.sx, transform.sy)):
        raise GeometryConstructionError(f"viewport span cannot be mapped onto {area.width}x{area.height} pixels")
    try:
        x_ticks = axis_ticks(limits.xmin, limits.xmax, x_labels)
        y_ticks = axis_ticks(limits.ymin, limits.ymax, y_labels)
    except ValueError as exc:
        raise GeometryConstructionError(f"cannot label axes for viewport {bounds}: {exc}") from exc
    return Cartesian2D(
        limits=limits,
        area=area,
        transform=transform,
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        x_ticks=tuple(x_ticks.tolist()),
        y_ticks=tuple(y_ticks.tolist()),
    )
