"""Box value and units of measure."""

from .box import MAX_DIMENSION, Box
from .units import UnitOfMeasure

__all__ = ["Box", "MAX_DIMENSION", "UnitOfMeasure"]
