"""
Support for the named color palettes.

A palette is a tuple of :class:`PaletteEntry` sorted by name in strictly
ascending order. That makes it possible to look up names with a binary search
instead of building a dictionary at import time.
"""
from bisect import bisect_left
from collections.abc import Sequence
import dataclasses

from ..color_types import RgbSpec


@dataclasses.dataclass(frozen=True, slots=True)
class PaletteEntry:
    """
    A named color.

    Attributes:
        name: is the lower-case name without spaces
        rgb: are the color's 8-bit red, green, and blue components
    """
    name: str
    rgb: RgbSpec


def search(palette: Sequence[PaletteEntry], name: str) -> None | RgbSpec:
    """Find the entry with exactly the given name in the sorted palette."""
    index = bisect_left(palette, name, key=lambda entry: entry.name)
    if index < len(palette) and palette[index].name == name:
        return palette[index].rgb
    return None


def is_sorted(palette: Sequence[PaletteEntry]) -> bool:
    """Determine whether the palette's names are strictly ascending."""
    return all(
        previous.name < current.name
        for previous, current in zip(palette, palette[1:])
    )
