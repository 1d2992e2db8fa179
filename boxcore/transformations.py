"""Transformations producing new boxes from existing ones."""

from __future__ import annotations

import numpy as np

from .system.box import Box


def compress(box: Box) -> Box:
    """
    Return the cube with the same volume as ``box``.

    The side is the cube root of the rounded volume, so the result goes
    through the usual bounds check.

    Example:
        >>> compress(Box(2, 4, 1))
        Box(length=2.0, width=2.0, height=2.0)
    """
    side = float(np.cbrt(box.volume))
    return Box.cubic(side)
