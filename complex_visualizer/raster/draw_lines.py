from __future__ import annotations

from collections.abc import Iterator

import numpy as np

from complex_visualizer.raster.canvas import RGBA, draw_pixel


def draw_polyline(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA) -> None:
    """Draw a 1px polyline through integer pixel vertices.

    Shared vertices are blended once so translucent colors do not darken at joints.
    """
    if xs.size < 2:
        return
    h, w = dst.shape[0], dst.shape[1]
    pts = list(zip(xs.tolist(), ys.tolist(), strict=False))
    for i, ((x0, y0), (x1, y1)) in enumerate(zip(pts, pts[1:])):
        if _outside(x0, y0, x1, y1, w, h):
            continue
        for k, (x, y) in enumerate(_bresenham(int(x0), int(y0), int(x1), int(y1))):
            if k == 0 and i > 0:
                continue
            draw_pixel(dst, x, y, color)


def _outside(x0: int, y0: int, x1: int, y1: int, w: int, h: int) -> bool:
    return max(x0, x1) < 0 or min(x0, x1) >= w or max(y0, y1) < 0 or min(y0, y1) >= h


def _bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    step_x = 1 if x0 < x1 else -1
    step_y = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += step_x
        if e2 <= dx:
            err += dx
            y0 += step_y
