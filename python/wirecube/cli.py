# python/wirecube/cli.py
"""Command-line entry point: spin a cube or an OBJ model in the terminal."""

from __future__ import annotations

import argparse
import contextlib
import logging
import signal
import sys
from pathlib import Path
from typing import Iterator, Optional, Sequence

from . import __version__
from .animation import AnimationLoop
from .config import ANSI_COLORS, RenderConfig, load_render_config
from .display import AnsiDisplay
from .geometry import GeometryModel, default_cube
from .io import LoadError, load_obj

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wirecube",
        description="Render a rotating ASCII wireframe in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Spin the built-in cube until Ctrl-C
  python -m wirecube

  # Spin an OBJ model on a wider viewport
  python -m wirecube teapot.obj --width 120 --height 50

  # Render 200 frames then exit
  python -m wirecube --frames 200
        """,
    )
    parser.add_argument("model", nargs="?", type=Path, help="OBJ model file (default: unit cube)")
    parser.add_argument("--config", type=Path, help="JSON render config file")
    parser.add_argument("--width", type=int, help="Viewport width in characters")
    parser.add_argument("--height", type=int, help="Viewport height in characters")
    parser.add_argument("--fov", type=float, help="Field of view in degrees")
    parser.add_argument("--distance", type=float, help="Camera distance from the model origin")
    parser.add_argument("--interval", type=float, help="Sleep between frames in seconds")
    parser.add_argument("--frames", type=int, help="Stop after this many frames")
    parser.add_argument(
        "--clear",
        action="store_const",
        const=True,
        default=None,
        help="Clear the whole screen before every frame",
    )
    parser.add_argument("--color", choices=sorted(ANSI_COLORS), help="Foreground colour")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    # stderr keeps log lines out of the frame stream on stdout
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def load_model_or_default(path: Optional[Path], config: RenderConfig) -> GeometryModel:
    """Load ``path`` or fall back to the unit cube when absent or unusable."""

    if path is None:
        return default_cube()
    try:
        model = load_obj(path, target_size=config.target_size)
    except LoadError as exc:
        logger.warning("Failed to load model (%s). Using default cube.", exc)
        return default_cube()
    logger.info("Loaded OBJ: %s with %d vertices and %d edges", path, model.vertex_count, model.edge_count)
    return model


def _interrupt_on_sigterm(signum, frame):
    raise KeyboardInterrupt(f"signal {signum}")


@contextlib.contextmanager
def sigterm_as_interrupt() -> Iterator[None]:
    """Treat SIGTERM like Ctrl-C so the display is restored before exit."""

    if not hasattr(signal, "SIGTERM"):
        yield
        return
    previous = signal.signal(signal.SIGTERM, _interrupt_on_sigterm)
    try:
        yield
    finally:
        signal.signal(signal.SIGTERM, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    overrides = {
        "width": args.width,
        "height": args.height,
        "fov_deg": args.fov,
        "camera_distance": args.distance,
        "frame_interval": args.interval,
        "clear_screen": args.clear,
        "color": args.color,
    }
    try:
        config = load_render_config(args.config, overrides)
    except (OSError, TypeError, ValueError) as exc:
        parser.error(str(exc))
    if args.frames is not None and args.frames < 0:
        parser.error("--frames must be >= 0")

    model = load_model_or_default(args.model, config)
    display = AnsiDisplay(sys.stdout, clear_screen=config.clear_screen, color=config.color)
    with sigterm_as_interrupt():
        AnimationLoop(model, display, config).run(max_frames=args.frames)
    return 0


if __name__ == "__main__":
    sys.exit(main())
