# python/wirecube/projection.py
# Perspective projection of rotated model space onto the character grid
# RELEVANT FILES: python/wirecube/config.py, python/wirecube/raster.py, tests/test_projection.py

from __future__ import annotations

from typing import List, NamedTuple, Tuple

import numpy as np

from .config import RenderConfig
from .geometry import Vertex3D


class ScreenPoint(NamedTuple):
    x: int
    y: int
    depth: float


def project_vertices(points: np.ndarray, config: RenderConfig) -> Tuple[np.ndarray, np.ndarray]:
    """Project ``(N, 3)`` points to integer screen coordinates.

    Returns ``(xy, depth)`` where ``xy`` is an ``(N, 2)`` int64 array of
    column/row positions and ``depth`` the clamped view-axis distance.
    Coordinates are not clipped to the viewport.

    ``effective_z`` is clamped to ``config.min_depth`` so points at or behind
    the camera stay finite and never flip sign.
    """

    pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    depth = np.maximum(pts[:, 2] + config.camera_distance, config.min_depth)
    scale = config.fov_scale / depth * config.size_constant

    # rows grow downward, model Y grows upward
    sx = config.width // 2 + pts[:, 0] * scale * config.aspect_ratio
    sy = config.height // 2 - pts[:, 1] * scale

    xy = np.empty((pts.shape[0], 2), dtype=np.int64)
    xy[:, 0] = np.trunc(sx)
    xy[:, 1] = np.trunc(sy)
    return xy, depth


def project(vertex: Vertex3D, config: RenderConfig) -> ScreenPoint:
    xy, depth = project_vertices(np.asarray([tuple(vertex)], dtype=np.float64), config)
    return ScreenPoint(int(xy[0, 0]), int(xy[0, 1]), float(depth[0]))


def to_screen_points(xy: np.ndarray, depth: np.ndarray) -> List[ScreenPoint]:
    return [ScreenPoint(int(x), int(y), float(d)) for (x, y), d in zip(xy, depth)]
