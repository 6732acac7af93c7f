# python/wirecube/geometry.py
# Read-only wireframe geometry: vertex positions plus index-pair edges
# Exists so loader, transform and rasterizer share one validated container
# RELEVANT FILES: python/wirecube/io.py, python/wirecube/animation.py, tests/test_geometry.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, NamedTuple, Sequence, Tuple

import numpy as np


class Vertex3D(NamedTuple):
    x: float
    y: float
    z: float


class Edge(NamedTuple):
    i: int
    j: int


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr = np.ascontiguousarray(arr)
    arr.setflags(write=False)
    return arr


def validate_edges(edges: np.ndarray, vertex_count: int) -> None:
    """Raise ``ValueError`` if any edge references a missing vertex or itself."""

    if edges.size == 0:
        return
    if edges.ndim != 2 or edges.shape[1] != 2:
        raise ValueError("edges must have shape (M, 2)")
    if int(edges.min()) < 0 or int(edges.max()) >= vertex_count:
        raise ValueError(f"edge index out of range for {vertex_count} vertices")
    if np.any(edges[:, 0] == edges[:, 1]):
        raise ValueError("edges must connect two distinct vertices")


@dataclass(frozen=True, eq=False)
class GeometryModel:
    """Immutable vertex/edge container mirroring the renderer's input."""

    positions: np.ndarray
    edges: np.ndarray

    def __post_init__(self) -> None:
        positions = np.asarray(self.positions, dtype=np.float64)
        if positions.ndim != 2 or positions.shape[1] != 3:
            raise ValueError("positions must have shape (N, 3)")
        edges = np.asarray(self.edges, dtype=np.int64).reshape(-1, 2)
        validate_edges(edges, positions.shape[0])
        # copies, so callers holding the source arrays cannot mutate the model
        object.__setattr__(self, "positions", _readonly(positions.copy()))
        object.__setattr__(self, "edges", _readonly(edges.copy()))

    @classmethod
    def from_arrays(
        cls,
        vertices: Iterable[Sequence[float]],
        edges: Iterable[Sequence[int]],
    ) -> "GeometryModel":
        pos = np.asarray([tuple(v) for v in vertices], dtype=np.float64).reshape(-1, 3)
        idx = np.asarray([tuple(e) for e in edges], dtype=np.int64).reshape(-1, 2)
        return cls(positions=pos, edges=idx)

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def edge_count(self) -> int:
        return int(self.edges.shape[0])

    @property
    def vertices(self) -> Tuple[Vertex3D, ...]:
        return tuple(Vertex3D(*map(float, row)) for row in self.positions)

    def iter_edges(self) -> Iterable[Edge]:
        for i, j in self.edges:
            yield Edge(int(i), int(j))

    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return the axis-aligned bounding box as ``(min_xyz, max_xyz)``."""

        if self.vertex_count == 0:
            zero = np.zeros(3, dtype=np.float64)
            return zero, zero.copy()
        return self.positions.min(axis=0), self.positions.max(axis=0)


CUBE_VERTICES: Tuple[Tuple[float, float, float], ...] = (
    (-1.0, -1.0, -1.0), (1.0, -1.0, -1.0), (1.0, 1.0, -1.0), (-1.0, 1.0, -1.0),
    (-1.0, -1.0, 1.0), (1.0, -1.0, 1.0), (1.0, 1.0, 1.0), (-1.0, 1.0, 1.0),
)

CUBE_EDGES: Tuple[Tuple[int, int], ...] = (
    (0, 1), (1, 2), (2, 3), (3, 0),  # z = -1 face
    (4, 5), (5, 6), (6, 7), (7, 4),  # z = +1 face
    (0, 4), (1, 5), (2, 6), (3, 7),  # connecting edges
)


def default_cube() -> GeometryModel:
    """Unit cube with corners at +-1: 8 vertices, 12 edges."""

    return GeometryModel.from_arrays(CUBE_VERTICES, CUBE_EDGES)
