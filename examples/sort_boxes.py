#!/usr/bin/env python
"""
Sort a few boxes by size and print them before and after.

Usage:
    python examples/sort_boxes.py
"""

from boxcore import Box, ordering


def main():
    print("=" * 60)
    print("Box Sorting")
    print("=" * 60)

    boxes = [
        Box(2.5, 3, 4),
        Box(1, 5, 2),
        Box(3, 3, 3),
    ]

    print()
    ordering.sort_boxes(boxes, verbose=True)

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
