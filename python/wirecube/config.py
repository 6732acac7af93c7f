# python/wirecube/config.py
# Viewport, camera, shading and pacing configuration for the ASCII renderer
# Exists so projector and rasterizer take explicit parameters instead of module constants
# RELEVANT FILES: python/wirecube/projection.py, python/wirecube/raster.py, python/wirecube/cli.py, tests/test_config.py
from __future__ import annotations

import copy
import json
import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

ConfigSource = Union["RenderConfig", Mapping[str, Any], str, Path, None]

DEFAULT_SHADES = ".:-=+*#%@"

# ANSI SGR foreground codes
ANSI_COLORS: Dict[str, int] = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
}

_ALIASES: Dict[str, str] = {
    "w": "width",
    "h": "height",
    "fov": "fov_deg",
    "distance": "camera_distance",
    "cam_dist": "camera_distance",
    "scale": "size_constant",
    "ramp": "shades",
    "interval": "frame_interval",
    "clear": "clear_screen",
}


def _normalize_key(value: Any) -> str:
    return str(value).strip().lower().replace("-", "_").replace(" ", "_")


def _to_float(value: Any, label: str) -> float:
    try:
        out = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{label} must be numeric, got {value!r}") from exc
    if not math.isfinite(out):
        raise ValueError(f"{label} must be finite")
    return out


def _to_int(value: Any, label: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{label} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{label} must be an integer, got {value!r}") from exc


def _to_bool(value: Any, label: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        if key in {"1", "true", "yes", "on"}:
            return True
        if key in {"0", "false", "no", "off"}:
            return False
    if isinstance(value, int):
        return bool(value)
    raise ValueError(f"{label} must be a boolean, got {value!r}")


@dataclass
class RenderConfig:
    width: int = 80
    height: int = 40
    fov_deg: float = 90.0
    camera_distance: float = 3.0
    size_constant: float = 20.0
    min_depth: float = 0.1
    shades: str = DEFAULT_SHADES
    shade_density: float = 2.0
    background: str = " "
    target_size: float = 2.0
    delta_x: float = 0.02
    delta_y: float = 0.05
    frame_interval: float = 0.005
    clear_screen: bool = False
    color: Optional[str] = None

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def fov_scale(self) -> float:
        return 1.0 / math.tan(math.radians(self.fov_deg) * 0.5)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def copy(self) -> "RenderConfig":
        return copy.deepcopy(self)

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be > 0")
        if not (0.0 < self.fov_deg < 180.0):
            raise ValueError("fov_deg must be within (0, 180)")
        if self.camera_distance <= 0.0:
            raise ValueError("camera_distance must be > 0")
        if self.size_constant <= 0.0:
            raise ValueError("size_constant must be > 0")
        if self.min_depth <= 0.0:
            raise ValueError("min_depth must be > 0")
        if not self.shades:
            raise ValueError("shades must contain at least one character")
        if len(set(self.shades)) != len(self.shades):
            raise ValueError("shades must not repeat characters")
        if len(self.background) != 1:
            raise ValueError("background must be a single character")
        if self.background in self.shades:
            raise ValueError("background must not appear in shades")
        if self.shade_density < 0.0:
            raise ValueError("shade_density must be non-negative")
        if self.target_size <= 0.0:
            raise ValueError("target_size must be > 0")
        if self.frame_interval < 0.0:
            raise ValueError("frame_interval must be non-negative")
        if self.color is not None and self.color not in ANSI_COLORS:
            supported = ", ".join(sorted(ANSI_COLORS))
            raise ValueError(f"Unknown color: {self.color!r} (supported: {supported})")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: Optional["RenderConfig"] = None) -> "RenderConfig":
        base = copy.deepcopy(default) if default is not None else cls()
        for raw_key, value in data.items():
            key = _normalize_key(raw_key)
            key = _ALIASES.get(key, key)
            if key in {"width", "height"}:
                setattr(base, key, _to_int(value, key))
            elif key in {
                "fov_deg",
                "camera_distance",
                "size_constant",
                "min_depth",
                "shade_density",
                "target_size",
                "delta_x",
                "delta_y",
                "frame_interval",
            }:
                setattr(base, key, _to_float(value, key))
            elif key in {"shades", "background"}:
                setattr(base, key, str(value))
            elif key == "clear_screen":
                base.clear_screen = _to_bool(value, key)
            elif key == "color":
                base.color = None if value is None else _normalize_key(value)
            else:
                raise ValueError(f"Unknown render config key: {raw_key!r}")
        return base


def _load_from_path(path: Path) -> Mapping[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in {".json", ""}:
        data = json.loads(text)
        if not isinstance(data, Mapping):
            raise TypeError(f"render config file must contain a JSON object: {path}")
        return data
    raise ValueError(f"Unsupported render config file format: {path}")


def load_render_config(config: ConfigSource = None, overrides: Optional[Mapping[str, Any]] = None) -> RenderConfig:
    if isinstance(config, RenderConfig):
        cfg = config.copy()
    elif isinstance(config, Mapping):
        cfg = RenderConfig.from_mapping(config)
    elif isinstance(config, (str, Path)):
        cfg = RenderConfig.from_mapping(_load_from_path(Path(config)))
    elif config is None:
        cfg = RenderConfig()
    else:
        raise TypeError("config must be RenderConfig, mapping, path, or None")

    if overrides:
        present = {k: v for k, v in overrides.items() if v is not None}
        if present:
            cfg = RenderConfig.from_mapping(present, cfg)
    cfg.validate()
    return cfg
