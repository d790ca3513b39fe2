from typing import Literal, TypeAlias

# The 8-bit red, green, and blue components of a color
RgbSpec: TypeAlias = tuple[int, int, int]

# Identifies whether a color is an 8-bit index or an RGB triple
ColorTag: TypeAlias = Literal['fixed', 'rgb']

CoordinateSpec: TypeAlias = tuple[int] | RgbSpec
