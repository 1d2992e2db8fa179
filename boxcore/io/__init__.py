"""Text format for boxes."""

from .text import format_box, format_dimensions, parse_box, parse_dimensions

__all__ = [
    "format_box",
    "format_dimensions",
    "parse_box",
    "parse_dimensions",
]
