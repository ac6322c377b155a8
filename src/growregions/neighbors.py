import numpy as np
import scipy.ndimage

from .errors import InvalidDimensionality

METHODS = ("chessboard", "cityblock", "quasi-euclidean")
DEFAULT_METHOD = "quasi-euclidean"


def check_method(method):
    name = str(method).strip().lower()
    if name not in METHODS:
        raise ValueError(f"Unknown distance method {method!r}, expected one of {METHODS}")
    return name


def neighbor_offsets(ndim, method=DEFAULT_METHOD):
    """
    Full Moore neighborhood offsets and their traversal weights.

    Offsets come out of the connectivity block in row-major order, which is
    also ascending order of the flattened offset, so the offset index gives a
    fixed iteration order for tie-breaking.

    Parameters
    ----------
    ndim : int
        2 (8 neighbors) or 3 (26 neighbors).
    method : str
        'chessboard' (all 1), 'cityblock' (sum of |delta|) or
        'quasi-euclidean' (norm of the offset: 1, sqrt(2), sqrt(3)).

    Returns
    -------
    offsets : ndarray (K, ndim) int64
    weights : ndarray (K,) float64
    """
    if ndim not in (2, 3):
        raise InvalidDimensionality("Must be either 2D or 3D.")
    method = check_method(method)

    block = scipy.ndimage.generate_binary_structure(ndim, ndim)
    block[tuple([1] * ndim)] = 0
    offsets = np.array(np.where(block > 0)).T.astype(np.int64) - 1  # map to {-1,0,1}

    steps = np.abs(offsets).sum(axis=1)
    if method == "chessboard":
        weights = np.ones(len(offsets), dtype=np.float64)
    elif method == "cityblock":
        weights = steps.astype(np.float64)
    else:
        weights = np.sqrt(steps.astype(np.float64))
    return offsets, weights
