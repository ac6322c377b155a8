import numpy as np
import pytest

from growregions import (
    neighbor_offsets,
    check_method,
    resolve_candidates,
    geodesic_distance,
    neighbor_graph,
    format_seeds,
    restore_labels,
    propagate,
    InvalidDimensionality,
)


# -------- neighbor offsets -------------------------------------------------

@pytest.mark.parametrize("ndim, count", [(2, 8), (3, 26)])
@pytest.mark.parametrize("method", ["chessboard", "cityblock", "quasi-euclidean"])
def test_moore_neighborhood(ndim, count, method):
    offsets, weights = neighbor_offsets(ndim, method)
    assert offsets.shape == (count, ndim)
    assert weights.shape == (count,)
    assert not (offsets == 0).all(axis=1).any()
    assert set(np.unique(offsets)) == {-1, 0, 1}
    assert len({tuple(o) for o in offsets}) == count
    # row-major order
    assert [tuple(o) for o in offsets] == sorted(tuple(o) for o in offsets)


def test_weights_2d():
    _, w = neighbor_offsets(2, "chessboard")
    assert (w == 1).all()
    _, w = neighbor_offsets(2, "cityblock")
    assert (w == [2, 1, 2, 1, 1, 2, 1, 2]).all()
    _, w = neighbor_offsets(2, "quasi-euclidean")
    r2 = np.sqrt(2)
    np.testing.assert_allclose(w, [r2, 1, r2, 1, 1, r2, 1, r2])


def test_weights_3d():
    offsets, w = neighbor_offsets(3, "cityblock")
    assert (w == np.abs(offsets).sum(axis=1)).all()
    assert np.bincount(w.astype(int)).tolist() == [0, 6, 12, 8]
    _, q = neighbor_offsets(3)
    np.testing.assert_allclose(q, np.sqrt(w))


def test_offsets_reject_other_dims():
    with pytest.raises(InvalidDimensionality):
        neighbor_offsets(4)
    with pytest.raises(ValueError):
        neighbor_offsets(2, "manhattan")


def test_check_method_normalizes():
    assert check_method(" CityBlock ") == "cityblock"


# -------- tie-break resolver -----------------------------------------------

def test_resolve_smallest_wins_first_seen_on_tie():
    dest = [5, 3, 5, 3, 7]
    dist = [2.0, 1.0, 1.5, 1.0, 4.0]
    assert resolve_candidates(dest, dist).tolist() == [2, 1, 4]


def test_resolve_keeps_first_of_equal_run():
    assert resolve_candidates([9, 9, 9], [1.0, 1.0, 1.0]).tolist() == [0]
    assert resolve_candidates([9, 9, 9], [3.0, 2.0, 2.0]).tolist() == [1]


def test_resolve_empty():
    assert resolve_candidates([], []).size == 0


# -------- geodesic distance ------------------------------------------------

def test_geodesic_line():
    mask = np.ones((1, 5), dtype=bool)
    sources = np.zeros((1, 5), dtype=bool)
    sources[0, 0] = True
    assert (geodesic_distance(mask, sources) == [[0, 1, 2, 3, 4]]).all()


def test_geodesic_around_wall():
    mask = np.ones((3, 3), dtype=bool)
    mask[0:2, 1] = False
    sources = np.zeros((3, 3), dtype=bool)
    sources[0, 0] = True
    dist = geodesic_distance(mask, sources, "chessboard")
    assert np.isinf(dist[~mask]).all()
    assert dist[0, 2] == 4
    assert dist[2, 1] == 2


def test_geodesic_no_sources_and_bad_sources():
    mask = np.ones((2, 2), dtype=bool)
    assert np.isinf(geodesic_distance(mask, np.zeros((2, 2), dtype=bool))).all()
    mask[0, 0] = False
    sources = np.zeros((2, 2), dtype=bool)
    sources[0, 0] = True
    with pytest.raises(ValueError):
        geodesic_distance(mask, sources)
    with pytest.raises(ValueError):
        geodesic_distance(mask, np.zeros((3, 3), dtype=bool))


def test_neighbor_graph_edges():
    mask = np.ones((2, 2), dtype=bool)
    mask[1, 1] = False
    offsets, weights = neighbor_offsets(2, "cityblock")
    graph = neighbor_graph(mask, offsets, weights)
    assert graph.shape == (4, 4)
    # 0-1, 0-2, 1-2 in both directions
    assert graph.nnz == 6
    assert graph[1, 2] == 2
    assert graph[0, 3] == 0


# -------- seed grid and propagation ----------------------------------------

def test_format_seeds_codes():
    image = np.array([[3.0, 0, np.nan], [0, -1.0, 3.0]])
    grid = format_seeds(image)
    assert grid.codes.tolist() == [2, 0, -1, 0, 1, 2]
    assert grid.lut.tolist() == [0, -1.0, 3.0]
    assert grid.shape == (2, 3)
    assert np.isinf(grid.distances[[1, 2, 3]]).all()
    assert (grid.distances[[0, 4, 5]] == 0).all()


def test_propagate_in_place_and_rounds():
    image = np.array([[1.0, 0, 0, 0, 0, 2]])
    grid = format_seeds(image)
    offsets, weights = neighbor_offsets(2, "cityblock")
    rounds = propagate(grid, offsets, weights)
    # two growing rounds, one that finds nothing left to relax
    assert rounds == 3
    assert grid.codes.tolist() == [1, 1, 1, 2, 2, 2]
    assert (restore_labels(grid, image) == [[1, 1, 1, 2, 2, 2]]).all()
