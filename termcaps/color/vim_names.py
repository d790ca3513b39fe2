"""
Vim's built-in GUI color names.

These are the names Vim resolves for ``guifg`` and ``guibg`` without consulting
an ``rgb.txt`` file or the ``v:colornames`` dictionary. Note that a few of them
differ from their CSS namesakes, e.g., ``gray`` and ``green``, and that some of
them, e.g., ``darkyellow`` and ``lightred``, have no X11 counterpart.
"""
from .palette import PaletteEntry, search
from ..color_types import RgbSpec


NAMES: tuple[PaletteEntry, ...] = (
    PaletteEntry("black", (0x00, 0x00, 0x00)),
    PaletteEntry("blue", (0x00, 0x00, 0xff)),
    PaletteEntry("brown", (0xa5, 0x2a, 0x2a)),
    PaletteEntry("cyan", (0x00, 0xff, 0xff)),
    PaletteEntry("darkblue", (0x00, 0x00, 0x8b)),
    PaletteEntry("darkcyan", (0x00, 0x8b, 0x8b)),
    PaletteEntry("darkgray", (0xa9, 0xa9, 0xa9)),
    PaletteEntry("darkgreen", (0x00, 0x64, 0x00)),
    PaletteEntry("darkgrey", (0xa9, 0xa9, 0xa9)),
    PaletteEntry("darkmagenta", (0x8b, 0x00, 0x8b)),
    PaletteEntry("darkred", (0x8b, 0x00, 0x00)),
    PaletteEntry("darkyellow", (0x8b, 0x8b, 0x00)),
    PaletteEntry("gray", (0xbe, 0xbe, 0xbe)),
    PaletteEntry("green", (0x00, 0xff, 0x00)),
    PaletteEntry("grey", (0xbe, 0xbe, 0xbe)),
    PaletteEntry("grey40", (0x66, 0x66, 0x66)),
    PaletteEntry("grey50", (0x7f, 0x7f, 0x7f)),
    PaletteEntry("grey90", (0xe5, 0xe5, 0xe5)),
    PaletteEntry("lightblue", (0xad, 0xd8, 0xe6)),
    PaletteEntry("lightcyan", (0xe0, 0xff, 0xff)),
    PaletteEntry("lightgray", (0xd3, 0xd3, 0xd3)),
    PaletteEntry("lightgreen", (0x90, 0xee, 0x90)),
    PaletteEntry("lightgrey", (0xd3, 0xd3, 0xd3)),
    PaletteEntry("lightmagenta", (0xff, 0x8b, 0xff)),
    PaletteEntry("lightred", (0xff, 0x8b, 0x8b)),
    PaletteEntry("lightyellow", (0xff, 0xff, 0xe0)),
    PaletteEntry("magenta", (0xff, 0x00, 0xff)),
    PaletteEntry("orange", (0xff, 0xa5, 0x00)),
    PaletteEntry("purple", (0xa0, 0x20, 0xf0)),
    PaletteEntry("red", (0xff, 0x00, 0x00)),
    PaletteEntry("seagreen", (0x2e, 0x8b, 0x57)),
    PaletteEntry("slateblue", (0x6a, 0x5a, 0xcd)),
    PaletteEntry("violet", (0xee, 0x82, 0xee)),
    PaletteEntry("white", (0xff, 0xff, 0xff)),
    PaletteEntry("yellow", (0xff, 0xff, 0x00)),
)


def lookup(name: str) -> None | RgbSpec:
    """Look up the lower-case Vim color name."""
    return search(NAMES, name)
