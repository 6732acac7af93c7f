# Ensure `import wirecube` works from a fresh clone:
# put repo/python on sys.path so the package is importable without prior install.
import sys
from pathlib import Path

import pytest


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _ensure_python_path():
    pkg_dir = _repo_root() / "python"
    if str(pkg_dir) not in sys.path:
        sys.path.insert(0, str(pkg_dir))


_ensure_python_path()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "io: tests for OBJ model import"
    )
    config.addinivalue_line(
        "markers", "raster: tests for line rasterization and shading"
    )
    config.addinivalue_line(
        "markers", "e2e: full transform -> project -> rasterize pipeline"
    )


@pytest.fixture
def write_obj(tmp_path):
    """Write inline OBJ text to a temp file and return its path."""

    def _write(text: str, name: str = "model.obj") -> Path:
        path = tmp_path / name
        path.write_text(text.strip() + "\n", encoding="utf-8")
        return path

    return _write
