# tests/test_animation.py
# Frame pipeline end to end and the animation loop's pacing/teardown.

import io
import math
import time

import numpy as np
import pytest

from wirecube.animation import AnimationLoop, RotationState, render_frame
from wirecube.config import RenderConfig, load_render_config
from wirecube.display import CURSOR_HOME, CURSOR_SHOW, AnsiDisplay
from wirecube.geometry import default_cube
from wirecube.projection import project_vertices, to_screen_points
from wirecube.raster import FrameBuffer, draw_line


@pytest.fixture
def cfg() -> RenderConfig:
    return RenderConfig(width=80, height=40, fov_deg=90.0, camera_distance=3.0)


@pytest.mark.e2e
def test_cube_at_rest_fits_viewport_and_draws_every_edge(cfg) -> None:
    cube = default_cube()
    assert cube.vertex_count == 8
    assert cube.edge_count == 12

    xy, depth = project_vertices(cube.positions, cfg)
    assert np.all((xy[:, 0] >= 0) & (xy[:, 0] < cfg.width))
    assert np.all((xy[:, 1] >= 0) & (xy[:, 1] < cfg.height))

    points = to_screen_points(xy, depth)
    for edge in cube.iter_edges():
        buf = FrameBuffer.from_config(cfg)
        assert draw_line(buf, points[edge.i], points[edge.j], cfg) >= 1


@pytest.mark.e2e
def test_cube_front_face_is_bolder_than_back(cfg) -> None:
    frame = render_frame(default_cube(), RotationState(), cfg)
    xy, _ = project_vertices(default_cube().positions, cfg)
    # midpoints avoid corners shared with the connecting edges
    fx, fy = (xy[0] + xy[1]) // 2  # z = -1 edge, nearest
    bx, by = (xy[4] + xy[5]) // 2  # z = +1 edge, farthest
    front = frame.char_at(int(fx), int(fy))
    back = frame.char_at(int(bx), int(by))
    assert front == "#"
    assert back == "-"
    assert cfg.shades.index(front) > cfg.shades.index(back)


def test_render_frame_does_not_mutate_model(cfg) -> None:
    cube = default_cube()
    before = cube.positions.copy()
    render_frame(cube, RotationState(angle_x=0.8, angle_y=1.9), cfg)
    np.testing.assert_array_equal(cube.positions, before)


def test_render_frame_reuses_and_clears_buffer(cfg) -> None:
    cube = default_cube()
    buf = FrameBuffer.from_config(cfg)
    first = render_frame(cube, RotationState(), cfg, buf).rows()
    again = render_frame(cube, RotationState(), cfg, buf)
    assert again is buf
    assert again.rows() == first


def test_rotation_changes_the_picture(cfg) -> None:
    cube = default_cube()
    a = render_frame(cube, RotationState(), cfg).rows()
    b = render_frame(cube, RotationState(angle_x=0.6, angle_y=0.9), cfg).rows()
    assert a != b


def test_rotation_state_advances_and_wraps() -> None:
    state = RotationState(delta_x=0.02, delta_y=0.05)
    state.advance()
    assert state.angle_x == pytest.approx(0.02)
    assert state.angle_y == pytest.approx(0.05)
    for _ in range(10_000):
        state.advance()
    assert 0.0 <= state.angle_x < math.tau
    assert 0.0 <= state.angle_y < math.tau
    assert state.angle_y == pytest.approx(math.fmod(10_001 * 0.05, math.tau), abs=1e-9)


def test_loop_presents_frames_and_paces(cfg) -> None:
    out = io.StringIO()
    sleeps = []
    loop = AnimationLoop(default_cube(), AnsiDisplay(out), cfg, sleep=sleeps.append)
    assert loop.run(max_frames=3) == 3
    text = out.getvalue()
    assert text.count(CURSOR_HOME) == 3
    assert text.endswith(CURSOR_SHOW)
    assert sleeps == [cfg.frame_interval] * 3
    assert loop.rotation.angle_x == pytest.approx(3 * cfg.delta_x)
    # one frame is height rows of width characters
    frame = text.split(CURSOR_HOME)[1]
    assert frame.count("\n") == cfg.height
    assert all(len(row) == cfg.width for row in frame.split("\n")[: cfg.height])


def test_loop_zero_frames(cfg) -> None:
    out = io.StringIO()
    loop = AnimationLoop(default_cube(), AnsiDisplay(out), cfg, sleep=lambda s: None)
    assert loop.run(max_frames=0) == 0
    assert CURSOR_HOME not in out.getvalue()
    assert out.getvalue().endswith(CURSOR_SHOW)


def test_interrupt_stops_loop_and_restores_terminal(cfg) -> None:
    out = io.StringIO()
    calls = []

    def _sleep(seconds: float) -> None:
        calls.append(seconds)
        if len(calls) == 2:
            raise KeyboardInterrupt

    loop = AnimationLoop(default_cube(), AnsiDisplay(out), cfg, sleep=_sleep)
    assert loop.run() == 2
    assert out.getvalue().endswith(CURSOR_SHOW)


def test_edgeless_model_renders_blank(cfg) -> None:
    from wirecube.geometry import GeometryModel

    model = GeometryModel.from_arrays([(0.0, 0.0, 0.0)], [])
    frame = render_frame(model, RotationState(), cfg)
    assert frame.drawn_cells() == 0


@pytest.mark.e2e
def test_camera_inside_model_still_renders_quickly() -> None:
    # cube corners reach past the camera and project far off screen
    cfg = load_render_config({"camera_distance": 0.5, "min_depth": 1e-6})
    start = time.perf_counter()
    frame = render_frame(default_cube(), RotationState(), cfg)
    assert time.perf_counter() - start < 0.5
    assert frame.drawn_cells() > 0
