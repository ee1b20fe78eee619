from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

import numpy as np

from complex_visualizer.cartesian import check_bounds
from complex_visualizer.config import DEFAULT_CONFIG, RGBA, ChartConfig
from complex_visualizer.geometry import Point, Viewport


class ChartVariant(str, Enum):
    COMPLEX_CURVE = "complex"
    VECTOR_TRANSLATE = "translate"
    VECTOR_ROTATE = "rotate"
    VECTOR_SCALE = "scale"

    @property
    def is_vector(self) -> bool:
        return self is not ChartVariant.COMPLEX_CURVE

    @property
    def caption(self) -> str:
        return _CAPTIONS[self]


_CAPTIONS = {
    ChartVariant.COMPLEX_CURVE: "complex numbers",
    ChartVariant.VECTOR_TRANSLATE: "translate",
    ChartVariant.VECTOR_ROTATE: "rotate",
    ChartVariant.VECTOR_SCALE: "scale",
}


@dataclass(frozen=True)
class MeshSpec:
    x_labels: int = 3
    y_labels: int = 3


@dataclass(frozen=True)
class Polyline:
    points: tuple[tuple[float, float], ...]
    color: RGBA


@dataclass(frozen=True)
class Marker:
    point: tuple[float, float]
    radius: int
    filled: bool
    color: RGBA


Primitive: TypeAlias = Polyline | Marker


@dataclass(frozen=True)
class ChartFrame:
    """Everything the raster backend needs for one pass, in chart space."""

    variant: ChartVariant
    caption: str
    bounds: tuple[float, float, float, float]
    mesh: MeshSpec
    primitives: tuple[Primitive, ...]


def sample_complex_curve(viewport: Viewport, resolution: int) -> tuple[np.ndarray, np.ndarray]:
    """Sample y = x**2 across the viewport width, keeping only visible samples.

    Samples outside the open vertical range are dropped, not clamped.
    """
    if resolution <= 0:
        raise ValueError("resolution must be > 0")
    interval_shift = viewport.width / float(resolution)
    xs = interval_shift * np.arange(resolution + 1, dtype=np.float64) + viewport.x
    ys = xs * xs
    visible = (ys < viewport.y + viewport.height) & (ys > viewport.y)
    return xs[visible], ys[visible]


def generate_complex_curve(viewport: Viewport, config: ChartConfig = DEFAULT_CONFIG) -> tuple[Primitive, ...]:
    xs, ys = sample_complex_curve(viewport, config.resolution)
    points = tuple(zip(xs.tolist(), ys.tolist()))
    return (Polyline(points=points, color=config.style.curve_color),)


def operation_result(variant: ChartVariant, vector1: Point, vector2: Point) -> Point | None:
    """Apply the variant's vector operation; only ``vector2.x`` feeds rotate and scale."""
    if variant is ChartVariant.VECTOR_TRANSLATE:
        return vector1.translate(vector2)
    if variant is ChartVariant.VECTOR_ROTATE:
        return vector1.rotate(vector2.x)
    if variant is ChartVariant.VECTOR_SCALE:
        return vector1.scale(vector2.x)
    return None


def _vector_markers(vector1: Point, result: Point, config: ChartConfig) -> tuple[Primitive, ...]:
    radius = config.style.marker_radius
    return (
        Marker(point=vector1.as_tuple(), radius=radius, filled=True, color=config.style.vector_color),
        Marker(point=result.as_tuple(), radius=radius, filled=True, color=config.style.result_color),
    )


def generate_vector_translate(vector1: Point, vector2: Point, config: ChartConfig = DEFAULT_CONFIG) -> tuple[Primitive, ...]:
    return _vector_markers(vector1, vector1.translate(vector2), config)


def generate_vector_rotate(vector1: Point, vector2: Point, config: ChartConfig = DEFAULT_CONFIG) -> tuple[Primitive, ...]:
    return _vector_markers(vector1, vector1.rotate(vector2.x), config)


def generate_vector_scale(vector1: Point, vector2: Point, config: ChartConfig = DEFAULT_CONFIG) -> tuple[Primitive, ...]:
    return _vector_markers(vector1, vector1.scale(vector2.x), config)


_VECTOR_GENERATORS = {
    ChartVariant.VECTOR_TRANSLATE: generate_vector_translate,
    ChartVariant.VECTOR_ROTATE: generate_vector_rotate,
    ChartVariant.VECTOR_SCALE: generate_vector_scale,
}


def generate_chart(
    variant: ChartVariant,
    viewport: Viewport,
    vector1: Point | None = None,
    vector2: Point | None = None,
    *,
    config: ChartConfig = DEFAULT_CONFIG,
) -> ChartFrame:
    bounds = viewport.bounds()
    check_bounds(bounds)
    if variant is ChartVariant.COMPLEX_CURVE:
        primitives = generate_complex_curve(viewport, config)
    else:
        primitives = _VECTOR_GENERATORS[variant](
            vector1 if vector1 is not None else Point.zero(),
            vector2 if vector2 is not None else Point.zero(),
            config,
        )
    label_count = config.style.label_count
    return ChartFrame(
        variant=variant,
        caption=variant.caption,
        bounds=bounds,
        mesh=MeshSpec(x_labels=label_count, y_labels=label_count),
        primitives=primitives,
    )
