from .canvas import blit, draw_hline, draw_pixel, draw_vline, new_canvas
from .draw_lines import draw_polyline
from .draw_markers import draw_circle_markers
from .draw_text import draw_text, text_size

__all__ = [
    "blit",
    "draw_circle_markers",
    "draw_hline",
    "draw_pixel",
    "draw_polyline",
    "draw_text",
    "draw_vline",
    "new_canvas",
    "text_size",
]
