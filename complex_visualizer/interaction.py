from __future__ import annotations

from dataclasses import dataclass

from complex_visualizer.geometry import Point
from complex_visualizer.session import ChartSession


OUT_OF_RANGE_TEXT = "Mouse pointer is out of range"
WHEEL_ZOOM_SENSITIVITY = 0.0001


def format_complex(point: Point) -> str:
    return f"{point.x:.3f} + {point.y:.3f}i"


def format_result(point: Point) -> str:
    return f"Result: {point.x} + {point.y}i"


@dataclass
class PanZoomController:
    """Translates pointer and wheel input into viewport changes on a session.

    Pointer coordinates arrive in display pixels of an element that may be
    scaled relative to the canvas; ``rect_width``/``rect_height`` give the
    displayed size so they can be mapped back to canvas pixels.
    """

    session: ChartSession
    drag_active: bool = False
    wheel_sensitivity: float = WHEEL_ZOOM_SENSITIVITY

    def on_pointer_down(self) -> None:
        self.drag_active = True

    def on_pointer_up(self) -> None:
        self.drag_active = False

    def on_scroll(self, delta_y: float) -> None:
        viewport = self.session.get_viewport()
        diff = -delta_y * self.wheel_sensitivity
        zoom = 1.0 - diff
        self.session.scale(Point(zoom, zoom))
        # Recentre using the extents from before the scale.
        self.session.translate(Point((diff / 2.0) * viewport.width, (diff / 2.0) * viewport.height))
        self.session.update()

    def on_pointer_move(
        self,
        offset_x: float,
        offset_y: float,
        *,
        rect_width: float,
        rect_height: float,
        movement_x: float = 0.0,
        movement_y: float = 0.0,
    ) -> str:
        if rect_width <= 0 or rect_height <= 0:
            raise ValueError("rect_width/rect_height must be > 0")
        surface = self.session.surface
        logic_x = int(offset_x * surface.width / rect_width)
        logic_y = int(offset_y * surface.height / rect_height)
        point = self.session.coord(logic_x, logic_y)
        text = format_complex(point) if point is not None else OUT_OF_RANGE_TEXT

        if self.drag_active and (movement_x or movement_y):
            viewport = self.session.get_viewport()
            dx = -(movement_x / rect_width) * viewport.width
            dy = (movement_y / rect_height) * viewport.height
            self.session.translate(Point(dx, dy))
            self.session.update()
        return text

    def result_text(self) -> str | None:
        result = self.session.result()
        if result is None:
            return None
        return format_result(result)
