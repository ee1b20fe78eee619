from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path
import sys

from complex_visualizer.config import DEFAULT_CONFIG, ChartConfig, load_chart_config
from complex_visualizer.errors import ChartError
from complex_visualizer.geometry import Point, Viewport
from complex_visualizer.interaction import OUT_OF_RANGE_TEXT, format_complex, format_result
from complex_visualizer.session import ChartSession
from complex_visualizer.targets.base import RenderTarget
from complex_visualizer.targets.headless import HeadlessTarget
from complex_visualizer.targets.png_target import PngFileTarget
from complex_visualizer.variants import ChartVariant

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="complex-visualizer")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render one chart variant to a PNG file.")
    _add_chart_arguments(render)
    render.add_argument("--output", type=Path, default=Path("chart.png"))

    coord = sub.add_parser("coord", help="Print the chart coordinate under a canvas pixel.")
    _add_chart_arguments(coord)
    coord.add_argument("pixel", type=int, nargs=2, metavar=("SX", "SY"))
    return parser


def _add_chart_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", type=Path, default=None, help="Chart config TOML file.")
    parser.add_argument("--variant", choices=[v.value for v in ChartVariant], default=ChartVariant.COMPLEX_CURVE.value)
    view = parser.add_mutually_exclusive_group()
    view.add_argument("--viewport", type=float, nargs=4, metavar=("X", "Y", "W", "H"), default=None)
    view.add_argument("--zoom", type=_positive_float, default=None, help="Square window of resolution/(2*zoom) around the origin.")
    parser.add_argument("--vector1", type=float, nargs=2, metavar=("RE", "IM"), default=(0.0, 0.0))
    parser.add_argument("--vector2", type=float, nargs=2, metavar=("RE", "IM"), default=(0.0, 0.0))
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise argparse.ArgumentTypeError(f"must be a finite number > 0, got {text}")
    return value


def _resolve_config(args: argparse.Namespace) -> ChartConfig:
    config = load_chart_config(args.config) if args.config is not None else DEFAULT_CONFIG
    if args.width is not None or args.height is not None:
        config = config.with_canvas_size(
            args.width if args.width is not None else config.canvas_width,
            args.height if args.height is not None else config.canvas_height,
        )
    return config


def _open_session(args: argparse.Namespace, config: ChartConfig, target: RenderTarget) -> ChartSession:
    session = ChartSession(target, config=config)
    try:
        if args.viewport is not None:
            x, y, w, h = args.viewport
            session.set_viewport(Viewport(x=x, y=y, width=w, height=h))
        elif args.zoom is not None:
            session.set_viewport(Viewport.for_zoom(args.zoom, config.resolution))
        session.set_variant(ChartVariant(args.variant))
        session.set_vectors(Point(*args.vector1), Point(*args.vector2))
        session.update()
    except Exception:
        session.close()
        raise
    return session


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        config = _resolve_config(args)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    try:
        if args.command == "render":
            target: RenderTarget = PngFileTarget(args.output, config.canvas_width, config.canvas_height)
            session = _open_session(args, config, target)
            try:
                result = session.result()
                if result is not None:
                    print(format_result(result))
                print(f"Rendered in {session.last_render_ms:.0f}ms -> {args.output}")
            finally:
                session.close()
            return 0

        session = _open_session(args, config, HeadlessTarget(width=config.canvas_width, height=config.canvas_height))
        try:
            point = session.coord(args.pixel[0], args.pixel[1])
            print(format_complex(point) if point is not None else OUT_OF_RANGE_TEXT)
        finally:
            session.close()
        return 0
    except ChartError as exc:
        LOGGER.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
