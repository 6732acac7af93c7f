# python/wirecube/transform.py
# Per-frame model rotation about the X then Y axes
# RELEVANT FILES: python/wirecube/animation.py, tests/test_transform.py

from __future__ import annotations

import math

import numpy as np

from .geometry import Vertex3D


def _as_points(points: np.ndarray) -> np.ndarray:
    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError("expected array with shape (N, 3)")
    return arr


def rotate_x(points: np.ndarray, angle: float) -> np.ndarray:
    """Rotate ``(N, 3)`` points about the X axis; returns a new array."""

    pts = _as_points(points)
    c, s = math.cos(angle), math.sin(angle)
    out = pts.copy()
    out[:, 1] = pts[:, 1] * c - pts[:, 2] * s
    out[:, 2] = pts[:, 1] * s + pts[:, 2] * c
    return out


def rotate_y(points: np.ndarray, angle: float) -> np.ndarray:
    """Rotate ``(N, 3)`` points about the Y axis; returns a new array."""

    pts = _as_points(points)
    c, s = math.cos(angle), math.sin(angle)
    out = pts.copy()
    out[:, 0] = pts[:, 0] * c + pts[:, 2] * s
    out[:, 2] = -pts[:, 0] * s + pts[:, 2] * c
    return out


def rotate_vertices(points: np.ndarray, angle_x: float, angle_y: float) -> np.ndarray:
    """X rotation first, then Y rotation on the already X-rotated coordinates."""

    return rotate_y(rotate_x(points, angle_x), angle_y)


def rotate(vertex: Vertex3D, angle_x: float, angle_y: float) -> Vertex3D:
    out = rotate_vertices(np.asarray([tuple(vertex)], dtype=np.float64), angle_x, angle_y)[0]
    return Vertex3D(float(out[0]), float(out[1]), float(out[2]))
