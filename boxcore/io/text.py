"""
Text format for box dimensions.

A box is written as three clauses joined by " × " (U+00D7), each clause
being a number followed by a unit symbol:

    2.500 m × 3.000 m × 4.000 m
    250.0 cm × 300.0 cm × 400.0 cm
    2500 mm × 3000 mm × 4000 mm

Writing uses one unit for all clauses with a fixed precision per unit.
Reading accepts any unit per clause and is case-insensitive on the unit.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ..exceptions import FormatError
from ..system.units import UnitOfMeasure, from_meters, to_meters

if TYPE_CHECKING:
    from ..system.box import Box

SEPARATOR = "×"

# Decimal places written for each unit.
PRECISION = {
    UnitOfMeasure.METER: 3,
    UnitOfMeasure.CENTIMETER: 1,
    UnitOfMeasure.MILLIMETER: 0,
}

_NUMBER = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_WHITESPACE = re.compile(r"\s")


def _resolve_unit(unit: str | UnitOfMeasure | None) -> UnitOfMeasure:
    if isinstance(unit, UnitOfMeasure):
        return unit
    if isinstance(unit, str):
        for candidate in UnitOfMeasure:
            if candidate.symbol == unit:
                return candidate
    raise FormatError(f"Invalid format {unit!r}. Use 'm', 'cm', or 'mm'.")


def format_dimensions(
    dimensions: tuple[float, float, float], unit: str | UnitOfMeasure = "m"
) -> str:
    """
    Render three meter values in a single unit.

    Args:
        dimensions: (length, width, height) in meters.
        unit: "m", "cm", "mm" or a UnitOfMeasure. Symbols are case-sensitive.

    Returns:
        Canonical text, e.g. "1.000 m × 2.000 m × 3.000 m".

    Raises:
        FormatError: If the unit token is not recognized.
    """
    resolved = _resolve_unit(unit)
    digits = PRECISION[resolved]
    clauses = [
        f"{from_meters(value, resolved):.{digits}f} {resolved.symbol}"
        for value in dimensions
    ]
    return f" {SEPARATOR} ".join(clauses)


def _parse_clause(clause: str) -> float:
    # Each whitespace character separates, so doubled spaces give an empty token
    tokens = _WHITESPACE.split(clause.strip())
    if len(tokens) != 2:
        raise FormatError(
            f"Invalid clause {clause.strip()!r}. Use format 'A m × B m × C m'."
        )
    number, symbol = tokens

    if _NUMBER.fullmatch(number) is None:
        raise FormatError(f"Invalid number {number!r}")

    try:
        unit = UnitOfMeasure.from_symbol(symbol)
    except ValueError:
        raise FormatError(
            f"Invalid unit {symbol!r}. Use 'm', 'cm', or 'mm'."
        ) from None

    return to_meters(float(number), unit)


def parse_dimensions(text: str) -> tuple[float, float, float]:
    """
    Parse box text into three meter values.

    Bounds are not checked here; see Box.parse.

    Raises:
        TypeError: If text is not a string.
        FormatError: If the text does not follow the box format.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    parts = [part for part in text.split(SEPARATOR) if part]
    if len(parts) != 3:
        raise FormatError(
            f"Expected 3 clauses separated by '{SEPARATOR}', got {len(parts)}"
        )

    length, width, height = (_parse_clause(part) for part in parts)
    return length, width, height


def format_box(box: Box, unit: str | UnitOfMeasure = "m") -> str:
    """Render a box in the given unit."""
    return format_dimensions((box.length, box.width, box.height), unit)


def parse_box(text: str) -> Box:
    """Parse box text into a validated Box."""
    from ..system.box import Box

    return Box.parse(text)
