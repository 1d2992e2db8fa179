"""Exception types raised by boxcore."""


class OutOfRangeError(ValueError):
    """A box dimension is non-positive, non-finite or above the ceiling."""


class FormatError(ValueError):
    """A format token or box text could not be understood."""
