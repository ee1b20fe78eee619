from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from .base import DisplayFrame, RenderTarget

LOGGER = logging.getLogger(__name__)


class PngFileTarget(RenderTarget):
    """Writes every presented frame to a PNG file, overwriting the previous one."""

    def __init__(self, path: str | Path, width: int, height: int) -> None:
        self._path = Path(path)
        self._width = width
        self._height = height
        self._started = False

    @property
    def path(self) -> Path:
        return self._path

    def start(self) -> None:
        parent = self._path.parent
        if not parent.exists():
            raise FileNotFoundError(f"output directory not found: {parent}")
        self._started = True

    def present_frame(self, frame: DisplayFrame) -> None:
        if not self._started:
            raise RuntimeError("png target not started")
        rgba = frame.rgba.detach().cpu().contiguous().numpy()
        Image.fromarray(rgba).save(self._path, format="PNG")
        LOGGER.debug("wrote frame revision=%d to %s", frame.revision, self._path)

    def stop(self) -> None:
        self._started = False

    def surface_size(self) -> tuple[int, int] | None:
        return (self._width, self._height)
