from .label import grow_regions, check_image
from .neighbors import neighbor_offsets, check_method, METHODS, DEFAULT_METHOD
from .format_seeds import SeedGrid, format_seeds, restore_labels
from .wavefront import propagate, resolve_candidates
from .geodesic import geodesic_distance, neighbor_graph
from .errors import InvalidDimensionality, NoSeedError, UnreachablePixelsWarning

__all__ = [
    "grow_regions",
    "check_image",
    "neighbor_offsets",
    "check_method",
    "METHODS",
    "DEFAULT_METHOD",
    "SeedGrid",
    "format_seeds",
    "restore_labels",
    "propagate",
    "resolve_candidates",
    "geodesic_distance",
    "neighbor_graph",
    "InvalidDimensionality",
    "NoSeedError",
    "UnreachablePixelsWarning",
]
