from complex_visualizer.config import ChartConfig, ChartLayout, ChartStyle, load_chart_config
from complex_visualizer.errors import ChartError, GeometryConstructionError, PresentationError, SurfaceAcquisitionError
from complex_visualizer.geometry import Point, Viewport
from complex_visualizer.interaction import PanZoomController, format_complex
from complex_visualizer.mapper import CoordinateMapper, PlotArea
from complex_visualizer.session import ChartSession
from complex_visualizer.surface import CanvasRegistry, Surface, acquire_surface
from complex_visualizer.targets import DisplayFrame, HeadlessTarget, PngFileTarget, RenderTarget
from complex_visualizer.variants import ChartFrame, ChartVariant, Marker, Polyline, generate_chart, operation_result

__all__ = [
    "CanvasRegistry",
    "ChartConfig",
    "ChartError",
    "ChartFrame",
    "ChartLayout",
    "ChartSession",
    "ChartStyle",
    "ChartVariant",
    "CoordinateMapper",
    "DisplayFrame",
    "GeometryConstructionError",
    "HeadlessTarget",
    "Marker",
    "PanZoomController",
    "PlotArea",
    "Point",
    "Polyline",
    "PngFileTarget",
    "PresentationError",
    "RenderTarget",
    "Surface",
    "SurfaceAcquisitionError",
    "Viewport",
    "acquire_surface",
    "format_complex",
    "generate_chart",
    "load_chart_config",
    "operation_result",
]
