from __future__ import annotations

import logging
from typing import Union

import numpy as np
import torch

from complex_visualizer.errors import PresentationError, SurfaceAcquisitionError
from complex_visualizer.raster import new_canvas
from complex_visualizer.raster.canvas import RGBA
from complex_visualizer.targets.base import DisplayFrame, RenderTarget

LOGGER = logging.getLogger(__name__)

SurfaceHandle = Union[str, RenderTarget]


class CanvasRegistry:
    """Maps canvas ids to render targets, the way a page maps element ids to canvases."""

    def __init__(self) -> None:
        self._targets: dict[str, RenderTarget] = {}

    def register(self, canvas_id: str, target: RenderTarget) -> None:
        if not canvas_id or not isinstance(canvas_id, str):
            raise ValueError("canvas id must be a non-empty string")
        if not isinstance(target, RenderTarget):
            raise TypeError(f"expected RenderTarget, got {type(target)!r}")
        self._targets[canvas_id] = target

    def unregister(self, canvas_id: str) -> None:
        self._targets.pop(canvas_id, None)

    def lookup(self, canvas_id: str) -> RenderTarget:
        try:
            return self._targets[canvas_id]
        except KeyError as exc:
            raise SurfaceAcquisitionError(f"cannot find canvas: {canvas_id}") from exc

    def __contains__(self, canvas_id: object) -> bool:
        return canvas_id in self._targets


DEFAULT_REGISTRY = CanvasRegistry()


class Surface:
    """Drawable area bound to one render target."""

    def __init__(self, target: RenderTarget, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("surface width/height must be > 0")
        self._target = target
        self._width = int(width)
        self._height = int(height)
        self._revision = 0
        self._released = False

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def target(self) -> RenderTarget:
        return self._target

    def resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("surface width/height must be > 0")
        self._width = int(width)
        self._height = int(height)

    def fill(self, color: RGBA) -> np.ndarray:
        return new_canvas(self._width, self._height, color=color)

    def present(self, rgba: np.ndarray) -> DisplayFrame:
        if self._released:
            raise PresentationError("surface has been released")
        if rgba.dtype != np.uint8 or rgba.ndim != 3 or rgba.shape[2] != 4:
            raise PresentationError(f"frame must be uint8 (H, W, 4), got {rgba.dtype} {rgba.shape}")
        if rgba.shape[0] != self._height or rgba.shape[1] != self._width:
            raise PresentationError(
                f"frame size {rgba.shape[1]}x{rgba.shape[0]} does not match surface {self._width}x{self._height}"
            )
        frame = DisplayFrame(
            revision=self._revision + 1,
            width=self._width,
            height=self._height,
            rgba=torch.from_numpy(np.ascontiguousarray(rgba)),
        )
        try:
            self._target.present_frame(frame)
        except Exception as exc:  # noqa: BLE001
            raise PresentationError(f"render target failed to present frame: {exc}") from exc
        self._revision = frame.revision
        return frame

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        self._target.stop()


def acquire_surface(
    handle: SurfaceHandle,
    *,
    width: int | None = None,
    height: int | None = None,
    registry: CanvasRegistry | None = None,
) -> Surface:
    """Resolve ``handle`` to a started target and wrap it in a :class:`Surface`.

    Explicit ``width``/``height`` win over the target's own size.
    """
    if isinstance(handle, str):
        target = (registry or DEFAULT_REGISTRY).lookup(handle)
    elif isinstance(handle, RenderTarget):
        target = handle
    else:
        raise SurfaceAcquisitionError(f"unsupported canvas handle: {type(handle)!r}")

    native = target.surface_size()
    w = width if width is not None else (native[0] if native is not None else None)
    h = height if height is not None else (native[1] if native is not None else None)
    if w is None or h is None:
        raise SurfaceAcquisitionError("canvas size is unknown; pass width and height")
    if w <= 0 or h <= 0:
        raise SurfaceAcquisitionError(f"canvas size must be > 0, got {w}x{h}")

    try:
        target.start()
    except Exception as exc:  # noqa: BLE001
        raise SurfaceAcquisitionError(f"render target failed to start: {exc}") from exc
    LOGGER.debug("acquired %s surface %dx%d", type(target).__name__, w, h)
    return Surface(target, w, h)
