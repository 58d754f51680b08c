"""Helpers for laying out text in fixed-width components."""

from __future__ import annotations


def calculate_necessary_height(width: int, text: str) -> int:
    """Return the number of rows the text needs when wrapped at ``width``."""
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    lines = text.split("\n")
    wrapped = sum(len(line) // width for line in lines if len(line) >= width)
    return len(lines) + wrapped