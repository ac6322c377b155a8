from __future__ import annotations

from typing import NamedTuple, Tuple

import numpy as np
from numpy.typing import NDArray

BLOCKED = -1
UNLABELED = 0


class SeedGrid(NamedTuple):
    """Flat working state of one region growing run."""
    codes: NDArray[np.int32]        # -1 blocked, 0 unlabeled, k>0 -> lut[k]
    distances: NDArray[np.float64]  # 0 at seeds, inf elsewhere until reached
    lut: NDArray                    # lut[0] = 0, lut[k] = k-th distinct seed value
    shape: Tuple[int, ...]


def blocked_mask(image):
    # only floating point images can carry the NaN sentinel
    if image.dtype.kind in "fc":
        return np.isnan(image)
    return np.zeros(image.shape, dtype=bool)


def seed_mask(image):
    return ~blocked_mask(image) & (image != 0)


def format_seeds(image):
    """
    Encode a seed image into a SeedGrid.

    Seed values are replaced by their rank among the distinct seed values
    (1..K) so the propagation kernels only ever deal with int32 codes; the
    lookup table maps them back afterwards.
    """
    image = np.ascontiguousarray(image)
    flat = image.ravel()
    blocked = blocked_mask(flat)
    seeds = np.flatnonzero(~blocked & (flat != 0))

    values, inverse = np.unique(flat[seeds], return_inverse=True)
    codes = np.zeros(flat.size, dtype=np.int32)
    codes[blocked] = BLOCKED
    codes[seeds] = inverse.ravel().astype(np.int32) + 1

    distances = np.full(flat.size, np.inf, dtype=np.float64)
    distances[seeds] = 0

    lut = np.zeros(values.size + 1, dtype=image.dtype)
    lut[1:] = values
    return SeedGrid(codes, distances, lut, tuple(image.shape))


def restore_labels(grid, image):
    """Label image in the caller's dtype: blocked cells untouched, unreached cells left at 0."""
    out = np.array(image, copy=True, order="C")
    flat = out.reshape(-1)
    reached = grid.codes > UNLABELED
    flat[reached] = grid.lut[grid.codes[reached]]
    return out
