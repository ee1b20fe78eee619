from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable

from complex_visualizer.scales import DataLimits, PlotTransform


@dataclass(frozen=True)
class PlotArea:
    """Pixel rectangle of the plotted region inside the canvas (top-left origin)."""

    x0: int
    y0: int
    width: int
    height: int

    def contains(self, sx: int, sy: int) -> bool:
        return self.x0 <= sx < self.x0 + self.width and self.y0 <= sy < self.y0 + self.height


@dataclass(frozen=True)
class CoordinateMapper:
    """Screen to chart inverse for one render pass.

    Holds only what the layout produced: the plot area, the axis ranges and the
    canvas size. ``state_key`` records the chart state the pass was built for so
    owners can tell when the mapper no longer describes what is on screen.
    """

    area: PlotArea
    limits: DataLimits
    transform: PlotTransform
    canvas_width: int
    canvas_height: int
    state_key: Hashable | None = None

    def __call__(self, sx: int, sy: int) -> tuple[float, float] | None:
        sx = int(sx)
        sy = int(sy)
        if not self.contains(sx, sy):
            return None
        local_x = float(sx - self.area.x0)
        local_y = float((self.area.height - 1) - (sy - self.area.y0))
        return self.transform.inverse(local_x, local_y)

    def contains(self, sx: int, sy: int) -> bool:
        if sx < 0 or sy < 0 or sx >= self.canvas_width or sy >= self.canvas_height:
            return False
        return self.area.contains(sx, sy)

    def to_screen(self, cx: float, cy: float) -> tuple[int, int]:
        local_x, local_y = self.transform.forward(cx, cy)
        sx = self.area.x0 + int(round(local_x))
        sy = self.area.y0 + (self.area.height - 1) - int(round(local_y))
        return (sx, sy)

    @property
    def chart_bounds(self) -> tuple[float, float, float, float]:
        return (self.limits.xmin, self.limits.xmax, self.limits.ymin, self.limits.ymax)

    def matches(self, state_key: Any) -> bool:
        return self.state_key == state_key
