# Multi-class, distance-based segmentation of 2D images and 3D volumes.

import warnings

import numpy as np

from .errors import InvalidDimensionality, NoSeedError, UnreachablePixelsWarning
from .format_seeds import SeedGrid, format_seeds, restore_labels, seed_mask, UNLABELED
from .geodesic import geodesic_distance
from .neighbors import DEFAULT_METHOD, check_method, neighbor_offsets
from .wavefront import propagate


def check_image(image):
    if not np.issubdtype(image.dtype, np.number) or image.dtype.kind == "c":
        raise TypeError(f"Must be numeric, got dtype {image.dtype}")
    if image.ndim not in (2, 3):
        raise InvalidDimensionality("Must be either 2D or 3D.")
    if not np.any(seed_mask(image)):
        raise NoSeedError("Must contain at least 1 seed, i.e., a non-NaN nonzero element.")


def _single_label(grid, method):
    # one seed label: a plain geodesic distance transform gives the same answer
    codes = grid.codes.reshape(grid.shape)
    dist = geodesic_distance(codes >= 0, codes > UNLABELED, method).ravel()
    codes = grid.codes.copy()
    codes[np.isfinite(dist)] = 1
    return SeedGrid(codes, dist, grid.lut, grid.shape)


def grow_regions(image, method=DEFAULT_METHOD, return_distances=False, verbose=False):
    """
    Grow seed labels over a 2D image or 3D volume by geodesic distance.

    Every traversable pixel takes the label of its geodesically nearest seed,
    measured only through traversable pixels with 8 (2D) or 26 (3D)
    connectivity. Exact distance ties go to the seed whose wave reached the
    pixel first in row-major scan order.

    Parameters
    ----------
    image : ndarray
        0 marks unlabelled pixels, NaN marks pixels not to label, any other
        value is a seed label. Not modified.
    method : str
        'chessboard', 'cityblock' or 'quasi-euclidean' (default).
    return_distances : bool
        Also return the geodesic distance transform.
    verbose : bool
        Print progress information.

    Returns
    -------
    labels : ndarray
        Same shape and dtype as ``image``. Pixels with no path to any seed
        keep 0 and trigger an UnreachablePixelsWarning.
    distances : ndarray, float64
        Only if ``return_distances``. 0 at seeds, inf at NaN and unreached
        pixels.
    """
    image = np.asarray(image)
    check_image(image)
    method = check_method(method)

    grid = format_seeds(image)
    nlabels = grid.lut.size - 1
    if verbose:
        print('number of seed labels', nlabels)

    if nlabels == 1:
        if verbose:
            print('single label, using geodesic distance transform')
        grid = _single_label(grid, method)
    else:
        offsets, weights = neighbor_offsets(image.ndim, method)
        propagate(grid, offsets, weights, verbose=verbose)

    unreached = int(np.count_nonzero(grid.codes == UNLABELED))
    if unreached:
        if verbose:
            print('unreachable pixels', unreached)
        warnings.warn("Some pixels were unreachable from the seed labels and were left unlabelled.",
                      UnreachablePixelsWarning, stacklevel=2)

    labels = restore_labels(grid, image)
    if return_distances:
        return labels, grid.distances.reshape(grid.shape)
    return labels
