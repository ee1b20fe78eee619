from __future__ import annotations

from dataclasses import dataclass, field

from .base import DisplayFrame, RenderTarget


@dataclass
class HeadlessTarget(RenderTarget):
    """Keeps presented frames in memory; used for tests and scripted sessions."""

    width: int = 800
    height: int = 600
    keep_frames: int = 1
    started: bool = False
    frames_presented: int = 0
    frames: list[DisplayFrame] = field(default_factory=list)

    def start(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("headless target width/height must be > 0")
        self.started = True

    def present_frame(self, frame: DisplayFrame) -> None:
        if not self.started:
            raise RuntimeError("headless target not started")
        self.frames_presented += 1
        self.frames.append(frame)
        if self.keep_frames > 0 and len(self.frames) > self.keep_frames:
            del self.frames[: len(self.frames) - self.keep_frames]

    def stop(self) -> None:
        self.started = False

    def surface_size(self) -> tuple[int, int] | None:
        return (self.width, self.height)

    @property
    def last_frame(self) -> DisplayFrame | None:
        return self.frames[-1] if self.frames else None
