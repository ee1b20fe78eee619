from __future__ import annotations


class ChartError(Exception):
    """Base class for errors surfaced by a chart session."""


class SurfaceAcquisitionError(ChartError):
    """The render target handle is invalid or the surface cannot be started."""


class GeometryConstructionError(ChartError, ValueError):
    """Viewport bounds or canvas layout cannot form a coordinate system."""


class PresentationError(ChartError):
    """The render target failed to commit a frame."""
