# tests/test_geometry.py
# GeometryModel invariants and the built-in cube.

import numpy as np
import pytest

from wirecube.geometry import Edge, GeometryModel, Vertex3D, default_cube


def test_default_cube_shape() -> None:
    cube = default_cube()
    assert cube.vertex_count == 8
    assert cube.edge_count == 12
    assert cube.positions.shape == (8, 3)
    assert set(np.abs(cube.positions).ravel()) == {1.0}


def test_default_cube_edges_are_unit_steps() -> None:
    cube = default_cube()
    for edge in cube.iter_edges():
        delta = cube.positions[edge.j] - cube.positions[edge.i]
        # every cube edge changes exactly one coordinate by 2
        assert sorted(np.abs(delta)) == [0.0, 0.0, 2.0]
    assert len({tuple(sorted(e)) for e in cube.iter_edges()}) == 12


def test_vertices_and_edges_views() -> None:
    cube = default_cube()
    assert cube.vertices[0] == Vertex3D(-1.0, -1.0, -1.0)
    assert next(iter(cube.iter_edges())) == Edge(0, 1)


def test_bounds() -> None:
    lo, hi = default_cube().bounds()
    np.testing.assert_array_equal(lo, [-1.0, -1.0, -1.0])
    np.testing.assert_array_equal(hi, [1.0, 1.0, 1.0])


def test_model_is_immutable_and_detached() -> None:
    src = np.zeros((2, 3))
    model = GeometryModel(positions=src, edges=np.array([[0, 1]]))
    src[0, 0] = 9.0
    assert model.positions[0, 0] == 0.0
    with pytest.raises(ValueError):
        model.positions[0, 0] = 1.0
    with pytest.raises(ValueError):
        model.edges[0, 0] = 1
    with pytest.raises(AttributeError):
        model.positions = np.ones((2, 3))  # type: ignore[misc]


@pytest.mark.parametrize("edges", [[(0, 2)], [(-1, 0)], [(1, 1)]])
def test_invalid_edges_rejected(edges) -> None:
    with pytest.raises(ValueError):
        GeometryModel.from_arrays([(0, 0, 0), (1, 0, 0)], edges)


def test_bad_position_shape_rejected() -> None:
    with pytest.raises(ValueError):
        GeometryModel(positions=np.zeros((4, 2)), edges=np.zeros((0, 2)))
