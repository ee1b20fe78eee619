from __future__ import annotations

import logging
import time
from typing import Hashable

from complex_visualizer.cartesian import build_cartesian_2d
from complex_visualizer.config import DEFAULT_CONFIG, ChartConfig
from complex_visualizer.errors import GeometryConstructionError, PresentationError
from complex_visualizer.geometry import Point, Viewport
from complex_visualizer.mapper import CoordinateMapper
from complex_visualizer.render import FrameRenderer
from complex_visualizer.surface import CanvasRegistry, Surface, SurfaceHandle, acquire_surface
from complex_visualizer.targets.base import DisplayFrame
from complex_visualizer.variants import ChartVariant, generate_chart, operation_result

LOGGER = logging.getLogger(__name__)


class ChartSession:
    """Owns one canvas, its viewport, the selected variant and the latest mapper.

    Mutators (``translate``, ``scale``, ``set_variant``, operand setters,
    ``resize``) only change state. The mapper from the last successful
    ``update`` keeps answering ``coord`` until the next ``update`` replaces
    it, so answers in between describe what is on screen, not the new state.
    ``is_stale`` reports that window.
    """

    def __init__(
        self,
        canvas_handle: SurfaceHandle,
        *,
        config: ChartConfig | None = None,
        registry: CanvasRegistry | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        self._config = config or DEFAULT_CONFIG
        self._surface: Surface = acquire_surface(canvas_handle, width=width, height=height, registry=registry)
        self._renderer = FrameRenderer(self._config)
        self._viewport = self._config.default_viewport()
        self._variant = ChartVariant.COMPLEX_CURVE
        self._vector1 = Point.zero()
        self._vector2 = Point.zero()
        self._last_frame: DisplayFrame | None = None
        self._last_render_ms = 0.0
        try:
            self._mapper = self._generate()
        except Exception:
            self._surface.release()
            raise

    @property
    def config(self) -> ChartConfig:
        return self._config

    @property
    def surface(self) -> Surface:
        return self._surface

    @property
    def variant(self) -> ChartVariant:
        return self._variant

    @property
    def vector1(self) -> Point:
        return self._vector1

    @vector1.setter
    def vector1(self, value: Point) -> None:
        self._vector1 = value

    @property
    def vector2(self) -> Point:
        return self._vector2

    @vector2.setter
    def vector2(self, value: Point) -> None:
        self._vector2 = value

    @property
    def mapper(self) -> CoordinateMapper:
        return self._mapper

    @property
    def last_frame(self) -> DisplayFrame | None:
        return self._last_frame

    @property
    def last_render_ms(self) -> float:
        return self._last_render_ms

    @property
    def is_stale(self) -> bool:
        return not self._mapper.matches(self._state_key())

    def get_viewport(self) -> Viewport:
        return self._viewport.copy()

    def set_viewport(self, viewport: Viewport) -> None:
        self._viewport = viewport.copy()

    def set_variant(self, variant: ChartVariant | str) -> None:
        self._variant = ChartVariant(variant)

    def set_vectors(self, vector1: Point, vector2: Point) -> None:
        self._vector1 = vector1
        self._vector2 = vector2

    def reset_vectors(self) -> None:
        self._vector1 = Point.zero()
        self._vector2 = Point.zero()

    def translate(self, delta: Point) -> None:
        self._viewport.translate(delta)

    def scale(self, factor: Point) -> None:
        self._viewport.scale(factor)

    def resize(self, width: int, height: int) -> None:
        self._surface.resize(width, height)

    def result(self) -> Point | None:
        return operation_result(self._variant, self._vector1, self._vector2)

    def update(self) -> None:
        try:
            mapper = self._generate()
        except (GeometryConstructionError, PresentationError) as exc:
            LOGGER.warning("chart update rejected; keeping previous frame: %s", exc)
            raise
        self._mapper = mapper

    def coord(self, screen_x: int, screen_y: int) -> Point | None:
        converted = self._mapper(screen_x, screen_y)
        if converted is None:
            return None
        return Point(converted[0], converted[1])

    def close(self) -> None:
        self._surface.release()

    def _state_key(self) -> Hashable:
        return (
            self._viewport.bounds(),
            self._variant,
            self._vector1,
            self._vector2,
            self._surface.size,
        )

    def _generate(self) -> CoordinateMapper:
        start = time.perf_counter()
        state_key = self._state_key()
        frame = generate_chart(
            self._variant,
            self._viewport,
            self._vector1,
            self._vector2,
            config=self._config,
        )
        system = build_cartesian_2d(
            frame.bounds,
            self._surface.width,
            self._surface.height,
            self._config.layout,
            caption=frame.caption,
            x_labels=frame.mesh.x_labels,
            y_labels=frame.mesh.y_labels,
        )
        canvas = self._surface.fill(self._config.style.background)
        self._renderer.render(frame, system, canvas)
        self._last_frame = self._surface.present(canvas)
        self._last_render_ms = (time.perf_counter() - start) * 1000.0
        LOGGER.debug(
            "rendered %s viewport=%s in %.1fms (revision=%d)",
            self._variant.value,
            frame.bounds,
            self._last_render_ms,
            self._last_frame.revision,
        )
        return system.into_mapper(state_key)
