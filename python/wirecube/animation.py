# python/wirecube/animation.py
"""
Real-time rotation loop for the ASCII wireframe renderer.

Provides:
    RotationState   - Two rotation angles advanced by fixed per-frame deltas
    render_frame    - One transform -> project -> rasterize pass
    AnimationLoop   - Renders, presents, advances and sleeps until stopped

Example:
    >>> from wirecube.animation import RotationState, render_frame
    >>> from wirecube.config import RenderConfig
    >>> from wirecube.geometry import default_cube
    >>> frame = render_frame(default_cube(), RotationState(), RenderConfig())
    >>> len(frame.rows())
    40
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .config import RenderConfig
from .display import Display, display_session
from .geometry import GeometryModel
from .projection import ScreenPoint, project_vertices
from .raster import FrameBuffer, draw_line
from .transform import rotate_vertices

logger = logging.getLogger(__name__)


@dataclass
class RotationState:
    angle_x: float = 0.0
    angle_y: float = 0.0
    delta_x: float = 0.02
    delta_y: float = 0.05

    @classmethod
    def from_config(cls, config: RenderConfig) -> "RotationState":
        return cls(delta_x=config.delta_x, delta_y=config.delta_y)

    def advance(self) -> None:
        # wrapped to one turn so long sessions keep full float precision
        self.angle_x = math.fmod(self.angle_x + self.delta_x, math.tau)
        self.angle_y = math.fmod(self.angle_y + self.delta_y, math.tau)


def render_frame(
    model: GeometryModel,
    rotation: RotationState,
    config: RenderConfig,
    buffer: Optional[FrameBuffer] = None,
) -> FrameBuffer:
    """Render ``model`` at the current rotation into a cleared frame buffer.

    The model itself is never modified; rotated positions are a fresh array.
    """

    if buffer is None:
        buffer = FrameBuffer.from_config(config)
    else:
        buffer.clear()

    rotated = rotate_vertices(model.positions, rotation.angle_x, rotation.angle_y)
    xy, depth = project_vertices(rotated, config)
    for i, j in model.edges:
        p1 = ScreenPoint(int(xy[i, 0]), int(xy[i, 1]), float(depth[i]))
        p2 = ScreenPoint(int(xy[j, 0]), int(xy[j, 1]), float(depth[j]))
        draw_line(buffer, p1, p2, config)
    return buffer


class AnimationLoop:
    """Drives the per-frame pipeline against a :class:`Display`."""

    def __init__(
        self,
        model: GeometryModel,
        display: Display,
        config: Optional[RenderConfig] = None,
        *,
        rotation: Optional[RotationState] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.model = model
        self.display = display
        self.config = config if config is not None else RenderConfig()
        self.rotation = rotation if rotation is not None else RotationState.from_config(self.config)
        self.sleep = sleep
        self.frame_count = 0
        self._buffer = FrameBuffer.from_config(self.config)

    def step(self) -> FrameBuffer:
        """Render and present one frame, then advance the rotation."""

        frame = render_frame(self.model, self.rotation, self.config, self._buffer)
        self.display.present(frame.rows())
        self.rotation.advance()
        self.frame_count += 1
        return frame

    def run(self, max_frames: Optional[int] = None) -> int:
        """Run until ``max_frames`` frames were shown or the user interrupts.

        The display is torn down on every exit path. Returns the number of
        frames presented.
        """

        logger.info(
            "Animating %d vertices / %d edges at %dx%d",
            self.model.vertex_count,
            self.model.edge_count,
            self.config.width,
            self.config.height,
        )
        with display_session(self.display):
            try:
                while max_frames is None or self.frame_count < max_frames:
                    self.step()
                    self.sleep(self.config.frame_interval)
            except KeyboardInterrupt:
                logger.info("Interrupted after %d frames", self.frame_count)
        return self.frame_count
