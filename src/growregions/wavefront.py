# Multi-label geodesic region growing by round-synchronous wavefront relaxation.

import numpy as np
from numba import njit

from .format_seeds import UNLABELED


def _volume_layout(shape, offsets):
    """Lift a 2D grid to (H, W, 1) so a single 3D kernel serves both cases."""
    ndim = len(shape)
    vshape = np.ones(3, dtype=np.int64)
    vshape[:ndim] = shape
    voffsets = np.zeros((len(offsets), 3), dtype=np.int64)
    voffsets[:, :ndim] = offsets
    return vshape, voffsets


@njit(cache=True)
def _expand_frontier(frontier, dist, codes, vshape, offsets, weights):
    n0 = vshape[0]
    n1 = vshape[1]
    n2 = vshape[2]
    K = offsets.shape[0]
    cap = max(frontier.size * K, 1)
    dest = np.empty(cap, np.int64)
    cand = np.empty(cap, np.float64)
    lab = np.empty(cap, np.int32)
    e = 0
    for t in range(frontier.size):
        i = frontier[t]
        a = i // (n1 * n2)
        b = (i // n2) % n1
        c = i % n2
        di = dist[i]
        vi = codes[i]
        for k in range(K):
            aa = a + offsets[k, 0]
            bb = b + offsets[k, 1]
            cc = c + offsets[k, 2]
            if aa < 0 or aa >= n0 or bb < 0 or bb >= n1 or cc < 0 or cc >= n2:
                continue
            j = (aa * n1 + bb) * n2 + cc
            if codes[j] < 0:
                continue
            dj = di + weights[k]
            # strict: equal distances never overwrite, seeds (0) never beaten
            if not dj < dist[j]:
                continue
            dest[e] = j
            cand[e] = dj
            lab[e] = vi
            e += 1
    return dest[:e], cand[:e], lab[:e]


@njit(cache=True)
def _resolve_candidates(dest, cand, slot):
    # slot[j] is the position of destination j in winners, -1 when unseen;
    # it is handed back all -1 so the caller can reuse it across rounds.
    n = dest.size
    winners = np.empty(n, np.int64)
    m = 0
    for e in range(n):
        j = dest[e]
        s = slot[j]
        if s < 0:
            slot[j] = m
            winners[m] = e
            m += 1
        elif cand[e] < cand[winners[s]]:
            winners[s] = e
    for t in range(m):
        slot[dest[winners[t]]] = -1
    return winners[:m]


def resolve_candidates(destinations, distances):
    """
    Pick one winning candidate per destination cell.

    The smallest distance wins; on an exact tie the candidate seen first
    keeps its place. Returns indices into the candidate arrays, ordered by
    first appearance of their destination.
    """
    dest = np.asarray(destinations, dtype=np.int64)
    cand = np.asarray(distances, dtype=np.float64)
    if dest.size == 0:
        return np.empty(0, dtype=np.int64)
    slot = np.full(int(dest.max()) + 1, -1, dtype=np.int64)
    return _resolve_candidates(dest, cand, slot)


def propagate(grid, offsets, weights, verbose=False):
    """
    Grow all seed labels of ``grid`` outward until no distance can be lowered.

    Each round expands every frontier cell through every offset against the
    distances recorded before the round, keeps one candidate per target and
    writes the winners, which become the next frontier. A cell may be
    lowered again in a later round, so this is label-correcting relaxation.
    ``grid`` is updated in place; the number of rounds run is returned.
    """
    codes = grid.codes
    dist = grid.distances
    vshape, voffsets = _volume_layout(grid.shape, offsets)
    weights = np.ascontiguousarray(weights, dtype=np.float64)
    slot = np.full(codes.size, -1, dtype=np.int64)

    frontier = np.flatnonzero(codes > UNLABELED).astype(np.int64)
    rounds = 0
    while frontier.size:
        dest, cand, lab = _expand_frontier(frontier, dist, codes, vshape, voffsets, weights)
        win = _resolve_candidates(dest, cand, slot)
        frontier = dest[win]
        dist[frontier] = cand[win]
        codes[frontier] = lab[win]
        frontier.sort()
        rounds += 1

    if verbose:
        print('converged after {} rounds'.format(rounds))
    return rounds
