# python/wirecube/io.py
# Wavefront-style OBJ import producing wireframe geometry
# Handles v/f/l directives, relative indices and bounding-box normalization
# RELEVANT FILES: python/wirecube/geometry.py, python/wirecube/cli.py, tests/test_obj_import.py

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np

from .geometry import GeometryModel

logger = logging.getLogger(__name__)

DEFAULT_TARGET_SIZE = 2.0


class LoadError(Exception):
    """Base class for model loading failures."""


class ModelNotFoundError(LoadError, FileNotFoundError):
    """The model path could not be opened."""


class EmptyModelError(LoadError):
    """The file parsed but declared no vertices."""


class InvalidIndexError(LoadError):
    """An edge references a vertex that does not exist."""


def resolve_index(token: str, count: int) -> int:
    """Map an OBJ index token to a zero-based vertex index.

    Positive indices are 1-based. Non-positive indices count back from
    ``count``, the number of vertices declared *before* the current line,
    so ``-1`` is the most recent vertex. Anything after a ``/`` (texture or
    normal references) is ignored.
    """

    value = int(token.split("/", 1)[0])
    if value > 0:
        return value - 1
    return count + value


def _resolve_all(tokens: Sequence[str], count: int) -> List[int]:
    return [resolve_index(tok, count) for tok in tokens]


def face_edges(faces: Iterable[Sequence[int]]) -> List[Tuple[int, int]]:
    """Collapse face boundaries into unique ``(min, max)`` edges, sorted."""

    edge_set = set()
    for face in faces:
        n = len(face)
        for k in range(n):
            a, b = face[k], face[(k + 1) % n]
            if a == b:
                continue
            edge_set.add((a, b) if a < b else (b, a))
    return sorted(edge_set)


def normalize_bounds(positions: np.ndarray, target_size: float = DEFAULT_TARGET_SIZE) -> np.ndarray:
    """Center the bounding box on the origin and scale its largest extent to ``target_size``."""

    pos = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
    if pos.shape[0] == 0:
        return pos.copy()
    lo = pos.min(axis=0)
    hi = pos.max(axis=0)
    center = (lo + hi) * 0.5
    extent = float(np.max(hi - lo))
    scale = float(target_size) / extent if extent > 0.0 else 1.0
    return (pos - center) * scale


def parse_obj(
    lines: Iterable[str],
    *,
    target_size: float = DEFAULT_TARGET_SIZE,
    source: str = "<lines>",
) -> GeometryModel:
    """Parse OBJ text into a normalized :class:`GeometryModel`.

    Explicit ``l`` polylines take precedence; when none are present the
    edges are derived from ``f`` faces.

    Raises
    ------
    EmptyModelError
        No ``v`` directive parsed successfully.
    InvalidIndexError
        An ``f`` or ``l`` index resolves outside the vertex list.
    """

    vertices: List[Tuple[float, float, float]] = []
    faces: List[List[int]] = []
    line_edges: List[Tuple[int, int]] = []

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split()
        tag, args = parts[0], parts[1:]

        if tag == "v":
            try:
                x, y, z = (float(a) for a in args[:3])
            except ValueError:
                logger.warning("%s:%d: skipping malformed vertex %r", source, lineno, line)
                continue
            if not all(np.isfinite((x, y, z))):
                logger.warning("%s:%d: skipping non-finite vertex %r", source, lineno, line)
                continue
            vertices.append((x, y, z))
        elif tag == "f":
            try:
                face = _resolve_all(args, len(vertices))
            except ValueError:
                logger.warning("%s:%d: skipping malformed face %r", source, lineno, line)
                continue
            if len(face) >= 3:
                faces.append(face)
        elif tag == "l":
            try:
                polyline = _resolve_all(args, len(vertices))
            except ValueError:
                logger.warning("%s:%d: skipping malformed polyline %r", source, lineno, line)
                continue
            for a, b in zip(polyline, polyline[1:]):
                if a != b:
                    line_edges.append((a, b))
        # vt, vn, g, o, usemtl, s and friends carry nothing a wireframe needs

    if not vertices:
        raise EmptyModelError(f"no vertices found in {source}")

    edges = line_edges if line_edges else face_edges(faces)
    count = len(vertices)
    for a, b in edges:
        if not (0 <= a < count and 0 <= b < count):
            raise InvalidIndexError(
                f"edge ({a}, {b}) references a vertex outside [0, {count}) in {source}"
            )

    if not edges:
        logger.debug("%s: no edges derivable; model will render empty", source)

    positions = normalize_bounds(np.asarray(vertices, dtype=np.float64), target_size)
    return GeometryModel(positions=positions, edges=np.asarray(edges, dtype=np.int64).reshape(-1, 2))


def load_obj(
    path: Union[str, PathLike],
    *,
    target_size: float = DEFAULT_TARGET_SIZE,
) -> GeometryModel:
    """Load an OBJ file from disk.

    Parameters
    ----------
    path:
        Path to the OBJ file.
    target_size:
        Extent of the largest bounding-box axis after normalization.

    Raises
    ------
    ModelNotFoundError
        The file does not exist or cannot be opened.
    EmptyModelError, InvalidIndexError
        See :func:`parse_obj`.
    """

    p = Path(path)
    try:
        with p.open("r", encoding="utf-8", errors="replace") as fh:
            return parse_obj(fh, target_size=target_size, source=str(p))
    except OSError as exc:
        raise ModelNotFoundError(f"cannot open model file: {p}") from exc
