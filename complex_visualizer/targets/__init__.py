from .base import DisplayFrame, RenderTarget
from .headless import HeadlessTarget
from .png_target import PngFileTarget

__all__ = ["DisplayFrame", "HeadlessTarget", "PngFileTarget", "RenderTarget"]
