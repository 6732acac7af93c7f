#!/usr/bin/env python3
"""Wireframe snapshot demo - render fixed rotations without the live loop.

Prints one frame per requested angle pair, or writes each frame to a text
file, which is handy for checking a model before animating it.

Usage:
    # Cube at three rotations
    python examples/wireframe_snapshot_demo.py

    # An OBJ model, frames saved as frames/snap_0000.txt ...
    python examples/wireframe_snapshot_demo.py examples/models_wire/octahedron.obj --export ./frames
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "python"))

from wirecube.animation import RotationState, render_frame
from wirecube.cli import configure_logging, load_model_or_default
from wirecube.config import load_render_config

DEFAULT_ANGLES = ((0.0, 0.0), (0.4, 0.7), (1.1, 2.3))


def main() -> int:
    parser = argparse.ArgumentParser(description="Render wireframe snapshots as text")
    parser.add_argument("model", nargs="?", type=Path, help="OBJ model (default: unit cube)")
    parser.add_argument("--width", type=int, default=80)
    parser.add_argument("--height", type=int, default=40)
    parser.add_argument("--export", type=Path, help="Directory for snap_NNNN.txt files")
    args = parser.parse_args()

    configure_logging()
    config = load_render_config(overrides={"width": args.width, "height": args.height})
    model = load_model_or_default(args.model, config)

    if args.export is not None:
        args.export.mkdir(parents=True, exist_ok=True)

    for idx, (ax, ay) in enumerate(DEFAULT_ANGLES):
        frame = render_frame(model, RotationState(angle_x=ax, angle_y=ay), config)
        if args.export is not None:
            path = args.export / f"snap_{idx:04d}.txt"
            path.write_text(frame.to_text(), encoding="utf-8")
            print(f"Wrote {path}")
        else:
            print(f"--- angle_x={ax:.2f} angle_y={ay:.2f} ---")
            print(frame.to_text(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
