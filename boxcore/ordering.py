"""
Ordering of boxes by size.

Boxes have no natural order; these helpers sort them by volume, then
surface area, then the sum of the three dimensions.

Example:
    >>> from boxcore import Box, ordering
    >>> boxes = [Box(2.5, 3, 4), Box(1, 5, 2), Box(3, 3, 3)]
    >>> [b.volume for b in ordering.sort_boxes(boxes)]
    [10.0, 27.0, 30.0]
"""

from __future__ import annotations

from collections.abc import Iterable

from .system.box import Box


def sort_key(box: Box) -> tuple[float, float, float]:
    """Return (volume, surface_area, dimension_sum)."""
    return box.volume, box.surface_area, box.dimension_sum


def compare(a: Box, b: Box) -> int:
    """
    Three-way comparison of two boxes by size.

    Returns:
        -1 if a sorts before b, 1 if after, 0 if all three keys tie.
        Usable with functools.cmp_to_key.
    """
    key_a, key_b = sort_key(a), sort_key(b)
    return (key_a > key_b) - (key_a < key_b)


def sort_boxes(boxes: Iterable[Box], verbose: bool = False) -> list[Box]:
    """
    Sort boxes from smallest to largest.

    Args:
        boxes: Boxes to sort. Not modified.
        verbose: Print the boxes before and after sorting.

    Returns:
        New list, sorted by sort_key. The sort is stable.
    """
    boxes = list(boxes)

    if verbose:
        print(f"Boxes before sorting ({len(boxes)}):")
        for box in boxes:
            print(f"  {box}")

    result = sorted(boxes, key=sort_key)

    if verbose:
        print("\nBoxes after sorting:")
        for box in result:
            print(f"  {box}  V={box.volume:g} m³  A={box.surface_area:g} m²")

    return result
