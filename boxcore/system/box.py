"""Box measurement value."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from dataclasses import InitVar, dataclass

import numpy as np
from numpy.typing import NDArray

from ..exceptions import OutOfRangeError
from ..io.text import format_dimensions, parse_dimensions
from .units import UnitOfMeasure, to_meters

# Largest allowed dimension, in meters (inclusive).
MAX_DIMENSION = 10.0

VOLUME_DECIMALS = 9
SURFACE_AREA_DECIMALS = 6

_NAMES = ("length", "width", "height")


@dataclass(frozen=True)
class Box:
    """
    Rectangular box with three dimensions stored in meters.

    Dimensions are converted from ``unit`` on construction and must each lie
    in (0, 10] meters. Their order is kept as given.

    Derived metrics are rounded with Python's built-in ``round``
    (round-half-to-even): volume to 9 decimal places, surface area to 6.

    Attributes:
        length: First dimension in meters.
        width: Second dimension in meters.
        height: Third dimension in meters.

    Example:
        >>> box = Box(250, 300, 400, UnitOfMeasure.CENTIMETER)
        >>> str(box)
        '2.500 m × 3.000 m × 4.000 m'
        >>> box.volume
        30.0
    """

    length: float = 10.0
    width: float = 10.0
    height: float = 10.0
    unit: InitVar[UnitOfMeasure] = UnitOfMeasure.METER

    def __post_init__(self, unit: UnitOfMeasure) -> None:
        """Convert dimensions to meters and check bounds."""
        meters = [to_meters(getattr(self, name), unit) for name in _NAMES]
        for name, value in zip(_NAMES, meters):
            # Chained comparison also rejects NaN
            if not 0.0 < value <= MAX_DIMENSION:
                raise OutOfRangeError(
                    f"{name} must be in (0, {MAX_DIMENSION:g}] meters, got {value}"
                )
        for name, value in zip(_NAMES, meters):
            # Use object.__setattr__ since dataclass is frozen
            object.__setattr__(self, name, value)

    @classmethod
    def cubic(cls, side: float, unit: UnitOfMeasure = UnitOfMeasure.METER) -> Box:
        """Create a cube with the given side length."""
        return cls(side, side, side, unit)

    @classmethod
    def from_millimeters(cls, dimensions: tuple[int, int, int]) -> Box:
        """
        Create a box from a triple of whole millimeters.

        Args:
            dimensions: (length, width, height) as integers in millimeters.

        Raises:
            TypeError: If a member is not an integer.
            OutOfRangeError: If a dimension is out of bounds.
        """
        a, b, c = (operator.index(value) for value in dimensions)
        return cls(a, b, c, UnitOfMeasure.MILLIMETER)

    @classmethod
    def parse(cls, text: str) -> Box:
        """
        Parse a box from its text form, e.g. "2.5 m × 300 cm × 4000 mm".

        Raises:
            TypeError: If text is not a string.
            FormatError: If the text is malformed.
            OutOfRangeError: If a parsed dimension is out of bounds.
        """
        length, width, height = parse_dimensions(text)
        return cls(length, width, height)

    @property
    def volume(self) -> float:
        """Return volume in cubic meters, rounded to 9 places."""
        return round(self.length * self.width * self.height, VOLUME_DECIMALS)

    @property
    def surface_area(self) -> float:
        """Return surface area in square meters, rounded to 6 places."""
        lw = self.length * self.width
        lh = self.length * self.height
        wh = self.width * self.height
        return round(2 * (lw + lh + wh), SURFACE_AREA_DECIMALS)

    @property
    def dimension_sum(self) -> float:
        """Return length + width + height in meters."""
        return self.length + self.width + self.height

    def format(self, unit: str | UnitOfMeasure = "m") -> str:
        """
        Render the box in a single unit.

        Args:
            unit: "m" (3 decimals), "cm" (1 decimal) or "mm" (no decimals).

        Raises:
            FormatError: If unit is anything else, including None or "".
        """
        return format_dimensions((self.length, self.width, self.height), unit)

    def to_array(self) -> NDArray[np.floating]:
        """Return [length, width, height] as a new float64 array."""
        return np.array([self.length, self.width, self.height], dtype=np.float64)

    def __str__(self) -> str:
        return self.format("m")

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return self.format(format_spec)

    def __hash__(self) -> int:
        h = 17
        for value in self:
            h = h * 23 + hash(value)
        return hash(h)

    def __add__(self, other: object) -> Box:
        """Combine two boxes by taking the larger value on each axis."""
        if not isinstance(other, Box):
            return NotImplemented
        return Box(
            max(self.length, other.length),
            max(self.width, other.width),
            max(self.height, other.height),
        )

    def __getitem__(self, index: int) -> float:
        index = operator.index(index)
        if index not in (0, 1, 2):
            raise IndexError(f"Box index {index} out of range [0, 3)")
        return getattr(self, _NAMES[index])

    def __iter__(self) -> Iterator[float]:
        yield self.length
        yield self.width
        yield self.height

    def __len__(self) -> int:
        return 3

