import numpy as np
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import dijkstra

from .neighbors import DEFAULT_METHOD, neighbor_offsets


def _shifted_slices(off):
    src = []
    dst = []
    for v in off:
        if v == 0:
            src.append(slice(None))
            dst.append(slice(None))
        elif v > 0:
            src.append(slice(None, -v))
            dst.append(slice(v, None))
        else:
            vv = -v
            src.append(slice(vv, None))
            dst.append(slice(None, -vv))
    return tuple(src), tuple(dst)


def neighbor_graph(mask, offsets, weights):
    """
    Directed sparse graph over the True cells of ``mask``: an edge i -> j of
    weight w for every offset that maps traversable cell i onto traversable
    cell j inside the array. Nodes are C-order linear indices.
    """
    mask = np.asarray(mask, dtype=bool)
    total = mask.size
    idx = np.arange(total, dtype=np.int64).reshape(mask.shape)

    rows = []
    cols = []
    data = []
    for off, w in zip(offsets, weights):
        src, dst = _shifted_slices(off)
        m = mask[src] & mask[dst]
        if not np.any(m):
            continue
        rows.append(idx[src][m])
        cols.append(idx[dst][m])
        data.append(np.full(int(m.sum()), w, dtype=np.float64))

    if rows:
        rows = np.concatenate(rows)
        cols = np.concatenate(cols)
        data = np.concatenate(data)
    else:
        rows = cols = np.empty(0, dtype=np.int64)
        data = np.empty(0, dtype=np.float64)
    return csr_matrix((data, (rows, cols)), shape=(total, total))


def geodesic_distance(mask, sources, method=DEFAULT_METHOD):
    """
    Geodesic distance from the nearest source cell through the True cells of
    ``mask``, with the same neighborhood weights as the region growing.

    Cells outside the mask and cells with no path to a source are inf.
    """
    mask = np.asarray(mask, dtype=bool)
    sources = np.asarray(sources, dtype=bool)
    if sources.shape != mask.shape:
        raise ValueError(f"mask and sources must have same shape, got {mask.shape} vs {sources.shape}")
    if np.any(sources & ~mask):
        raise ValueError("All source cells must lie inside the mask.")

    dist = np.full(mask.shape, np.inf, dtype=np.float64)
    start = np.flatnonzero(sources)
    if start.size == 0:
        return dist

    offsets, weights = neighbor_offsets(mask.ndim, method)
    graph = neighbor_graph(mask, offsets, weights)
    found = dijkstra(graph, directed=True, indices=start, min_only=True)
    return found.reshape(mask.shape)
