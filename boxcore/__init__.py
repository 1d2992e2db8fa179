"""
boxcore - A box measurement value with unit-aware construction.

Design Principles:
- Immutable value, stored in meters
- Validated on every construction path
- Canonical text form that parses back

Quick Start:
    >>> from boxcore import Box, UnitOfMeasure
    >>> box = Box(2500, 300, 4, UnitOfMeasure.MILLIMETER)
    >>> print(f"{box:cm}")
    250.0 cm × 30.0 cm × 0.4 cm
"""

__version__ = "0.1.0"

from . import ordering
from .exceptions import FormatError, OutOfRangeError
from .io import format_box, parse_box
from .system import MAX_DIMENSION, Box, UnitOfMeasure
from .transformations import compress

__all__ = [
    "ordering",
    "Box",
    "UnitOfMeasure",
    "MAX_DIMENSION",
    "compress",
    "format_box",
    "parse_box",
    "FormatError",
    "OutOfRangeError",
]
