"""
The terminal color value.

A :class:`Color` is either one of the 256 indexed colors, which terminals
render with their own palette, or an explicit RGB triple with 8-bit
components. Either way, instances are immutable and compare by value.
"""
import dataclasses
from typing import cast, Self

from . import serde
from ..color_types import ColorTag, CoordinateSpec, RgbSpec


_ALIASES = {
    'gray': 8,
    'grey': 8,
}


@dataclasses.dataclass(frozen=True, slots=True)
class Color:
    """
    A terminal color.

    Attributes:
        tag: is ``fixed`` for an 8-bit color and ``rgb`` for an RGB color
        coordinates: is a tuple with the index or the three RGB components

    The first 16 indexed colors are the standard colors, which are the only
    ones with names, e.g., ``Color.named("bright yellow")``. The remaining 240
    indexed colors form a 6x6x6 RGB cube followed by a 24-step gray gradient.

    This class validates the tag and coordinates upon creation.
    """
    tag: ColorTag
    coordinates: CoordinateSpec

    def __post_init__(self) -> None:
        if self.tag not in ('fixed', 'rgb'):
            raise ValueError(f'{self.tag} is not a valid color tag')

        count = 1 if self.tag == 'fixed' else 3
        if (l := len(self.coordinates)) != count:
            raise ValueError(f'{self.tag} should have {count} coordinates, not {l}')

        for c in self.coordinates:
            if not isinstance(c, int) or isinstance(c, bool) or not 0 <= c <= 255:
                raise ValueError(f'{self.tag} coordinate {c!r} is not between 0 and 255')

    @classmethod
    def fixed(cls, index: int) -> Self:
        """Create a new 8-bit color."""
        return cls('fixed', (index,))

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> Self:
        """Create a new RGB color."""
        return cls('rgb', (red, green, blue))

    @classmethod
    def named(cls, name: str) -> Self:
        """
        Create a new standard color by name. In addition to the sixteen names
        accepted by :meth:`parse`, this method also accepts ``gray`` and
        ``grey`` for bright black, since that color really is a gray.
        """
        index = _ALIASES.get(name.lower())
        if index is None:
            try:
                index = serde.STANDARD_NAMES.index(name.lower())
            except ValueError:
                raise ValueError(f'"{name}" is not a standard color name') from None
        return cls.fixed(index)

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Parse the textual color specification. This method raises a subclass
        of :class:`.ColorParseError` if the text is malformed. See
        :func:`.serde.parse` for the supported formats.
        """
        tag, coordinates = serde.parse(text)
        return cls(tag, coordinates)

    @property
    def is_fixed(self) -> bool:
        """Determine whether this color is an 8-bit color."""
        return self.tag == 'fixed'

    @property
    def index(self) -> None | int:
        """Get the 8-bit index or ``None`` for RGB colors."""
        return self.coordinates[0] if self.tag == 'fixed' else None

    @property
    def rgb_triple(self) -> None | RgbSpec:
        """Get the RGB components or ``None`` for 8-bit colors."""
        return cast(RgbSpec, self.coordinates) if self.tag == 'rgb' else None

    def __str__(self) -> str:
        return serde.stringify(self.tag, self.coordinates)
