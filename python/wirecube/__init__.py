# python/wirecube/__init__.py
# Public API for the terminal wireframe renderer
# RELEVANT FILES: python/wirecube/animation.py, python/wirecube/io.py, python/wirecube/cli.py

__version__ = "0.1.0"

from .config import RenderConfig, load_render_config
from .geometry import Edge, GeometryModel, Vertex3D, default_cube
from .io import (
    EmptyModelError,
    InvalidIndexError,
    LoadError,
    ModelNotFoundError,
    load_obj,
    normalize_bounds,
    parse_obj,
)
from .transform import rotate, rotate_vertices, rotate_x, rotate_y
from .projection import ScreenPoint, project, project_vertices
from .raster import FrameBuffer, ShadeRamp, draw_line, line_cells, shade_index
from .display import AnsiDisplay, Display, display_session
from .animation import AnimationLoop, RotationState, render_frame

__all__ = [
    "__version__",
    "RenderConfig",
    "load_render_config",
    "Edge",
    "GeometryModel",
    "Vertex3D",
    "default_cube",
    "EmptyModelError",
    "InvalidIndexError",
    "LoadError",
    "ModelNotFoundError",
    "load_obj",
    "normalize_bounds",
    "parse_obj",
    "rotate",
    "rotate_vertices",
    "rotate_x",
    "rotate_y",
    "ScreenPoint",
    "project",
    "project_vertices",
    "FrameBuffer",
    "ShadeRamp",
    "draw_line",
    "line_cells",
    "shade_index",
    "AnsiDisplay",
    "Display",
    "display_session",
    "AnimationLoop",
    "RotationState",
    "render_frame",
]
