from __future__ import annotations

import numpy as np

from complex_visualizer.raster.canvas import RGBA, draw_pixel


def draw_circle_markers(
    dst: np.ndarray,
    xs: np.ndarray,
    ys: np.ndarray,
    color: RGBA,
    *,
    radius: int = 5,
    filled: bool = True,
) -> None:
    for x, y in zip(xs.tolist(), ys.tolist(), strict=False):
        _draw_circle(dst, int(x), int(y), color=color, radius=max(0, int(radius)), filled=filled)


def _draw_circle(dst: np.ndarray, cx: int, cy: int, color: RGBA, radius: int, filled: bool) -> None:
    if cx + radius < 0 or cy + radius < 0 or cx - radius >= dst.shape[1] or cy - radius >= dst.shape[0]:
        return
    r2 = radius * radius
    inner2 = (radius - 1) * (radius - 1) if radius > 0 else -1
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            d2 = dx * dx + dy * dy
            if d2 > r2:
                continue
            if not filled and d2 <= inner2:
                continue
            draw_pixel(dst, cx + dx, cy + dy, color)
