class InvalidDimensionality(ValueError):
    """Input is not a 2D image or a 3D volume."""


class NoSeedError(ValueError):
    """Input holds no seed, i.e. no non-NaN nonzero element."""


class UnreachablePixelsWarning(UserWarning):
    """Some traversable pixels have no path to any seed and were left at 0."""
