from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @classmethod
    def zero(cls) -> "Point":
        return cls(0.0, 0.0)

    @classmethod
    def init(cls, x: float, y: float) -> "Point":
        return cls(float(x), float(y))

    def translate(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def rotate(self, angle: float) -> "Point":
        """Rotate counter-clockwise about the origin by ``angle`` radians."""
        cos_t = math.cos(angle)
        sin_t = math.sin(angle)
        return Point(self.x * cos_t - self.y * sin_t, self.x * sin_t + self.y * cos_t)

    def scale(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def as_complex(self) -> complex:
        return complex(self.x, self.y)


@dataclass
class Viewport:
    """Axis-aligned chart-space rectangle; (x, y) is the bottom-left corner.

    Mutators do not validate. A zero or negative extent is only rejected when
    a coordinate system is built over it.
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def default(cls) -> "Viewport":
        return cls(x=-100.0, y=-100.0, width=200.0, height=200.0)

    @classmethod
    def for_zoom(cls, zoom: float, resolution: int = 1000) -> "Viewport":
        if zoom <= 0:
            raise ValueError("zoom must be > 0")
        limits = resolution / (2.0 * zoom)
        return cls(x=-limits - 1.0, y=-limits - 1.0, width=2.0 * limits + 2.0, height=2.0 * limits + 2.0)

    def translate(self, delta: Point) -> None:
        self.x += delta.x
        self.y += delta.y

    def scale(self, factor: Point) -> None:
        # Only the extents change; the bottom-left corner stays put.
        self.width *= factor.x
        self.height *= factor.y

    def bounds(self) -> tuple[float, float, float, float]:
        return (self.x, self.x + self.width, self.y, self.y + self.height)

    def copy(self) -> "Viewport":
        return Viewport(x=self.x, y=self.y, width=self.width, height=self.height)

    def is_valid(self) -> bool:
        xmin, xmax, ymin, ymax = self.bounds()
        if not all(math.isfinite(v) for v in (xmin, xmax, ymin, ymax)):
            return False
        return xmax > xmin and ymax > ymin
