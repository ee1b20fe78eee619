from __future__ import annotations

from dataclasses import dataclass, field, replace
import math
from pathlib import Path
import tomllib
from typing import Any

from complex_visualizer.geometry import Viewport


RGBA = tuple[int, int, int, int]

DEFAULT_RESOLUTION = 1000
DEFAULT_CANVAS_SIZE = (800, 600)
DEFAULT_VIEWPORT = (-100.0, -100.0, 200.0, 200.0)


@dataclass(frozen=True)
class ChartLayout:
    margin: int = 30
    x_label_area: int = 30
    y_label_area: int = 30
    caption_font_px: float = 20.0
    caption_pad: int = 10
    label_font_px: float = 12.0
    font_family: str = "sans-serif"

    def caption_area(self, caption: str) -> int:
        if not caption:
            return 0
        return int(math.ceil(self.caption_font_px)) + self.caption_pad


@dataclass(frozen=True)
class ChartStyle:
    background: RGBA = (255, 255, 255, 255)
    mesh_color: RGBA = (0, 0, 0, 40)
    axis_color: RGBA = (0, 0, 0, 255)
    text_color: RGBA = (0, 0, 0, 255)
    curve_color: RGBA = (0, 0, 0, 255)
    vector_color: RGBA = (62, 149, 255, 255)
    result_color: RGBA = (230, 72, 60, 255)
    marker_radius: int = 5
    label_count: int = 3


@dataclass(frozen=True)
class ChartConfig:
    resolution: int = DEFAULT_RESOLUTION
    canvas_width: int = DEFAULT_CANVAS_SIZE[0]
    canvas_height: int = DEFAULT_CANVAS_SIZE[1]
    viewport: tuple[float, float, float, float] = DEFAULT_VIEWPORT
    layout: ChartLayout = field(default_factory=ChartLayout)
    style: ChartStyle = field(default_factory=ChartStyle)

    def default_viewport(self) -> Viewport:
        x, y, width, height = self.viewport
        return Viewport(x=x, y=y, width=width, height=height)

    def with_canvas_size(self, width: int, height: int) -> "ChartConfig":
        if width <= 0 or height <= 0:
            raise ValueError("canvas width/height must be > 0")
        return replace(self, canvas_width=int(width), canvas_height=int(height))


DEFAULT_CONFIG = ChartConfig()


def load_chart_config(path: str | Path) -> ChartConfig:
    """Read a chart config TOML file.

    Top-level keys: ``resolution``, ``canvas_width``, ``canvas_height`` and
    ``viewport = [x, y, width, height]``. Optional ``[layout]`` and ``[style]``
    tables override the matching dataclass fields. Unknown keys are rejected.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"chart config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    return chart_config_from_mapping(raw)


def chart_config_from_mapping(raw: dict[str, Any]) -> ChartConfig:
    known = {"resolution", "canvas_width", "canvas_height", "viewport", "layout", "style"}
    _reject_unknown(raw, known, "config")

    resolution = _coerce_positive_int(raw.get("resolution", DEFAULT_RESOLUTION), "resolution")
    canvas_width = _coerce_positive_int(raw.get("canvas_width", DEFAULT_CANVAS_SIZE[0]), "canvas_width")
    canvas_height = _coerce_positive_int(raw.get("canvas_height", DEFAULT_CANVAS_SIZE[1]), "canvas_height")
    viewport = _coerce_viewport(raw.get("viewport", list(DEFAULT_VIEWPORT)))

    layout_raw = _coerce_table(raw.get("layout", {}), "layout")
    _reject_unknown(layout_raw, set(ChartLayout.__dataclass_fields__), "layout")
    layout_kwargs: dict[str, Any] = {}
    for key, value in layout_raw.items():
        if key == "font_family":
            if not isinstance(value, str) or not value.strip():
                raise ValueError("layout.font_family must be a non-empty string")
            layout_kwargs[key] = value
        elif key in {"caption_font_px", "label_font_px"}:
            layout_kwargs[key] = _coerce_positive_float(value, f"layout.{key}")
        else:
            layout_kwargs[key] = _coerce_non_negative_int(value, f"layout.{key}")

    style_raw = _coerce_table(raw.get("style", {}), "style")
    _reject_unknown(style_raw, set(ChartStyle.__dataclass_fields__), "style")
    style_kwargs: dict[str, Any] = {}
    for key, value in style_raw.items():
        if key in {"marker_radius", "label_count"}:
            style_kwargs[key] = _coerce_positive_int(value, f"style.{key}")
        else:
            style_kwargs[key] = _coerce_color(value, f"style.{key}")

    return ChartConfig(
        resolution=resolution,
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        viewport=viewport,
        layout=ChartLayout(**layout_kwargs),
        style=ChartStyle(**style_kwargs),
    )


def _reject_unknown(raw: dict[str, Any], known: set[str], label: str) -> None:
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"{label} has unknown keys: {', '.join(unknown)}")


def _coerce_table(value: Any, label: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{label} must be a table")
    return value


def _coerce_positive_int(value: Any, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{label} must be an integer")
    if value <= 0:
        raise ValueError(f"{label} must be > 0")
    return value


def _coerce_non_negative_int(value: Any, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{label} must be an integer")
    if value < 0:
        raise ValueError(f"{label} must be >= 0")
    return value


def _coerce_positive_float(value: Any, label: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{label} must be a number")
    out = float(value)
    if not math.isfinite(out) or out <= 0:
        raise ValueError(f"{label} must be a finite number > 0")
    return out


def _coerce_viewport(value: Any) -> tuple[float, float, float, float]:
    if not isinstance(value, list) or len(value) != 4:
        raise ValueError("viewport must be a list of [x, y, width, height]")
    out: list[float] = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise ValueError("viewport entries must be numbers")
        out.append(float(item))
    x, y, width, height = out
    if width <= 0 or height <= 0:
        raise ValueError("viewport width/height must be > 0")
    return (x, y, width, height)


def _coerce_color(value: Any, label: str) -> RGBA:
    if not isinstance(value, list) or len(value) not in {3, 4}:
        raise ValueError(f"{label} must be a list of 3 or 4 channel values")
    channels: list[int] = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, int) or item < 0 or item > 255:
            raise ValueError(f"{label} channels must be integers in [0, 255]")
        channels.append(item)
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = channels
    return (r, g, b, a)
