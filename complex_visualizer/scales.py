from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

import numpy as np


@dataclass(frozen=True)
class DataLimits:
    xmin: float
    xmax: float
    ymin: float
    ymax: float


@dataclass(frozen=True)
class PlotTransform:
    """Chart to local pixel affine map; local y grows upwards from the bottom row."""

    sx: float
    tx: float
    sy: float
    ty: float

    def forward(self, x: float, y: float) -> tuple[float, float]:
        return (x * self.sx + self.tx, y * self.sy + self.ty)

    def inverse(self, px: float, py: float) -> tuple[float, float]:
        return ((px - self.tx) / self.sx, (py - self.ty) / self.sy)


def build_transform(limits: DataLimits, width: int, height: int) -> PlotTransform:
    if width <= 1 or height <= 1:
        raise ValueError("plot viewport width/height must be > 1")
    if limits.xmax <= limits.xmin or limits.ymax <= limits.ymin:
        raise ValueError("plot limits must have positive span")
    sx = (width - 1) / (limits.xmax - limits.xmin)
    tx = -limits.xmin * sx
    sy = (height - 1) / (limits.ymax - limits.ymin)
    ty = -limits.ymin * sy
    return PlotTransform(sx=sx, tx=tx, sy=sy, ty=ty)


def map_to_pixels(
    x: np.ndarray,
    y: np.ndarray,
    transform: PlotTransform,
    width: int,
    height: int,
    *,
    clip: bool = True,
) -> tuple[np.ndarray, np.ndarray]:
    px = np.rint(x * transform.sx + transform.tx).astype(np.int64)
    py = np.rint(y * transform.sy + transform.ty).astype(np.int64)
    py = (height - 1) - py
    if clip:
        np.clip(px, 0, width - 1, out=px)
        np.clip(py, 0, height - 1, out=py)
    return px, py


def generate_nice_ticks(vmin: float, vmax: float, target: int) -> np.ndarray:
    if target <= 0:
        raise ValueError("target must be > 0")
    if vmin == vmax:
        return np.asarray([vmin], dtype=np.float64)

    with np.errstate(over="ignore", invalid="ignore"):
        span = _nice_number(vmax - vmin, round_result=False)
        step = _nice_number(span / max(target - 1, 1), round_result=True)
        tick_min = np.floor(vmin / step) * step
        tick_max = np.ceil(vmax / step) * step
        stop = tick_max + 0.5 * step
    if not (np.isfinite(step) and step > 0 and np.isfinite(tick_min) and np.isfinite(stop)):
        raise ValueError(f"cannot place ticks on {vmin}..{vmax} in float64")

    ticks = np.arange(tick_min, stop, step, dtype=np.float64)
    # Normalize floating-point drift so values like -4.44e-16 become 0.
    ticks = np.rint(ticks / step) * step
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    return ticks


def ticks_within_range(ticks: np.ndarray, *, vmin: float, vmax: float) -> np.ndarray:
    if ticks.size == 0:
        return ticks
    step = float(abs(ticks[1] - ticks[0])) if ticks.size > 1 else max(1e-12, abs(vmax - vmin))
    eps = max(1e-12, step * 1e-6)
    mask = (ticks >= (vmin - eps)) & (ticks <= (vmax + eps))
    out = ticks[mask]
    if out.size == 0:
        return np.asarray([vmin, vmax], dtype=np.float64)
    return out


def axis_ticks(vmin: float, vmax: float, label_count: int) -> np.ndarray:
    return ticks_within_range(generate_nice_ticks(vmin, vmax, label_count), vmin=vmin, vmax=vmax)


def format_tick(value: float, *, step: float | None = None) -> str:
    if not np.isfinite(value):
        return str(value)
    if step is not None and np.isfinite(step) and step > 0 and abs(value) <= step * 1e-9:
        value = 0.0
    abs_v = abs(value)
    decimals = _decimals_from_step(step) if step is not None else 6
    if abs_v != 0 and (abs_v >= 1e6 or (step is not None and abs(step) < 1e-4) or abs_v < 1e-6):
        return f"{value:.4e}"

    d = Decimal(str(value))
    quant = Decimal("1").scaleb(-decimals)
    try:
        q = d.quantize(quant)
    except InvalidOperation:
        q = d
    out = format(q, "f")
    # Only trim trailing zeros for fractional values (preserve integer zeros like 30, 40).
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def format_ticks_for_axis(ticks: np.ndarray) -> list[str]:
    if ticks.size == 0:
        return []
    if ticks.size == 1:
        return [format_tick(float(ticks[0]))]
    step = float(abs(ticks[1] - ticks[0]))
    return [format_tick(float(v), step=step) for v in ticks]


def _nice_number(value: float, *, round_result: bool) -> float:
    exp = np.floor(np.log10(value))
    frac = value / (10**exp)

    if round_result:
        if frac < 1.5:
            nice_frac = 1.0
        elif frac < 3.0:
            nice_frac = 2.0
        elif frac < 7.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0
    else:
        if frac <= 1.0:
            nice_frac = 1.0
        elif frac <= 2.0:
            nice_frac = 2.0
        elif frac <= 5.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0

    return float(nice_frac * (10**exp))


def _decimals_from_step(step: float) -> int:
    if step <= 0 or not np.isfinite(step):
        return 6
    d = Decimal(str(step)).normalize()
    exp = d.as_tuple().exponent
    decimals = max(0, -int(exp))
    return min(12, decimals)
