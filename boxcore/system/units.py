"""Units of measure accepted at the construction and text boundaries."""

from __future__ import annotations

from enum import Enum


class UnitOfMeasure(Enum):
    """Length unit, valued by its text symbol."""

    MILLIMETER = "mm"
    CENTIMETER = "cm"
    METER = "m"

    @property
    def per_meter(self) -> float:
        """Return how many of this unit make up one meter."""
        return _UNITS_PER_METER[self]

    @property
    def symbol(self) -> str:
        """Return the lower-case text symbol."""
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> UnitOfMeasure:
        """Look up a unit by its symbol, case-insensitively."""
        return cls(symbol.lower())


_UNITS_PER_METER = {
    UnitOfMeasure.MILLIMETER: 1000.0,
    UnitOfMeasure.CENTIMETER: 100.0,
    UnitOfMeasure.METER: 1.0,
}


def to_meters(value: float, unit: UnitOfMeasure | str) -> float:
    """
    Convert a magnitude given in ``unit`` to meters.

    The magnitude is divided by the unit count per meter, so
    ``to_meters(2500, UnitOfMeasure.MILLIMETER) == 2.5`` exactly.
    """
    return float(value / _UNITS_PER_METER[UnitOfMeasure(unit)])


def from_meters(value: float, unit: UnitOfMeasure | str) -> float:
    """Convert a magnitude in meters to ``unit``."""
    return float(value * _UNITS_PER_METER[UnitOfMeasure(unit)])
