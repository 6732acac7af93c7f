# python/wirecube/raster.py
"""
Character-grid rasterization with depth shading.

Provides:
    ShadeRamp    - Ordered faint-to-bold characters with an explicit rank
    FrameBuffer  - Fixed-size grid of shade ranks, rendered to text rows
    draw_line    - Bresenham line with nearest-wins compositing

Example:
    >>> from wirecube.config import RenderConfig
    >>> from wirecube.projection import ScreenPoint
    >>> from wirecube.raster import FrameBuffer, draw_line
    >>> cfg = RenderConfig(width=8, height=3)
    >>> buf = FrameBuffer.from_config(cfg)
    >>> draw_line(buf, ScreenPoint(0, 1, 3.0), ScreenPoint(7, 1, 3.0), cfg)
    8
    >>> buf.rows()[1]
    '++++++++'
"""

from __future__ import annotations

import math
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .config import RenderConfig
from .projection import ScreenPoint

BACKGROUND_RANK = -1


class ShadeRamp:
    """Characters ordered from faint (rank 0) to bold (rank ``len - 1``).

    Boldness is the position in the ramp, never the character code.
    """

    def __init__(self, chars: str, background: str = " "):
        if not chars:
            raise ValueError("shade ramp must contain at least one character")
        self.chars = chars
        self.background = background
        self._lookup = np.array(list(background + chars), dtype="<U1")

    def __len__(self) -> int:
        return len(self.chars)

    def __getitem__(self, rank: int) -> str:
        if rank == BACKGROUND_RANK:
            return self.background
        return self.chars[rank]

    def rank(self, char: str) -> int:
        if char == self.background:
            return BACKGROUND_RANK
        idx = self.chars.find(char)
        if idx < 0:
            raise ValueError(f"{char!r} is not part of the shade ramp")
        return idx

    def is_bolder(self, a: int, b: int) -> bool:
        return a > b

    def render(self, ranks: np.ndarray) -> np.ndarray:
        # background rank -1 lands on slot 0 of the lookup table
        return self._lookup[ranks + 1]

    @classmethod
    def from_config(cls, config: RenderConfig) -> "ShadeRamp":
        return cls(config.shades, config.background)


class FrameBuffer:
    """Width x height grid; cells hold a shade rank or ``BACKGROUND_RANK``."""

    def __init__(self, width: int, height: int, ramp: ShadeRamp):
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self.width = int(width)
        self.height = int(height)
        self.ramp = ramp
        self.ranks = np.full((self.height, self.width), BACKGROUND_RANK, dtype=np.int16)

    @classmethod
    def from_config(cls, config: RenderConfig) -> "FrameBuffer":
        return cls(config.width, config.height, ShadeRamp.from_config(config))

    def clear(self) -> None:
        self.ranks.fill(BACKGROUND_RANK)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def plot(self, x: int, y: int, rank: int) -> bool:
        """Write ``rank`` if the cell is background or ``rank`` is bolder."""

        if not self.contains(x, y):
            return False
        current = int(self.ranks[y, x])
        if current == BACKGROUND_RANK or self.ramp.is_bolder(rank, current):
            self.ranks[y, x] = rank
            return True
        return False

    def char_at(self, x: int, y: int) -> str:
        return self.ramp[int(self.ranks[y, x])]

    def drawn_cells(self) -> int:
        return int(np.count_nonzero(self.ranks != BACKGROUND_RANK))

    def rows(self) -> List[str]:
        chars = self.ramp.render(self.ranks)
        return ["".join(row) for row in chars]

    def to_text(self) -> str:
        return "".join(row + "\n" for row in self.rows())


def shade_index(avg_depth: float, config: RenderConfig) -> int:
    """Map an average depth to a ramp rank; nearer is bolder.

    Depth equal to ``camera_distance`` (the model origin) lands on the middle
    of the ramp, and each unit of depth moves ``shade_density`` ranks.
    """

    top = len(config.shades) - 1
    mid = top * 0.5
    raw = mid - (avg_depth - config.camera_distance) * config.shade_density
    idx = int(math.floor(raw + 0.5))
    return min(max(idx, 0), top)


def _scaled_step(delta: int, k: int, steps: int) -> int:
    # offset along one axis after k of ``steps`` steps, rounded half away from the start
    if delta >= 0:
        return (2 * k * delta + steps) // (2 * steps)
    return -((2 * k * -delta + steps) // (2 * steps))


def _clip_steps(
    x0: int, y0: int, dx: int, dy: int, steps: int, bounds: Tuple[int, int]
) -> Optional[Tuple[int, int]]:
    """Liang-Barsky clip of the segment to ``bounds``, as an inclusive step range.

    The box is widened by one cell on every side, so each step whose rounded
    cell lies inside ``[0, width) x [0, height)`` stays in the range.
    """

    width, height = bounds
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0 + 1), (dx, width - x0), (-dy, y0 + 1), (dy, height - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        r = q / p
        if p < 0:
            t0 = max(t0, r)
        else:
            t1 = min(t1, r)
    if t0 > t1:
        return None
    return max(int(math.floor(t0 * steps)), 0), min(int(math.ceil(t1 * steps)), steps)


def line_cells(
    x0: int, y0: int, x1: int, y1: int, bounds: Optional[Tuple[int, int]] = None
) -> Iterator[Tuple[int, int]]:
    """Yield the integer cells of a Bresenham line, both endpoints included.

    With ``bounds=(width, height)`` the walk starts and stops near the viewport
    edges, so endpoints far off screen cost no more than the visible part. The
    cells yielded are the same ones the unclipped walk would put on screen.
    """

    dx = x1 - x0
    dy = y1 - y0
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        yield x0, y0
        return
    first, last = 0, steps
    if bounds is not None:
        span = _clip_steps(x0, y0, dx, dy, steps, bounds)
        if span is None:
            return
        first, last = span
    for k in range(first, last + 1):
        yield x0 + _scaled_step(dx, k, steps), y0 + _scaled_step(dy, k, steps)


def draw_line(buffer: FrameBuffer, p1: ScreenPoint, p2: ScreenPoint, config: RenderConfig) -> int:
    """Rasterize one edge into ``buffer``; returns the number of cells written.

    The segment is clipped to ``[0, width) x [0, height)`` before it is walked;
    cells outside are skipped silently.
    """

    rank = shade_index((p1.depth + p2.depth) * 0.5, config)
    bounds = (buffer.width, buffer.height)
    written = 0
    for x, y in line_cells(int(p1.x), int(p1.y), int(p2.x), int(p2.y), bounds):
        if buffer.plot(x, y, rank):
            written += 1
    return written
