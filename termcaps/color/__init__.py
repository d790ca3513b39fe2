"""
Terminal colors and their textual specifications.

:class:`Color` is the normalized value. :meth:`Color.parse` resolves hashed
hexadecimal colors (``#1a2b3c``), 8-bit colors (``@200``), namespaced names
(``css:rebeccapurple``, ``vim:seagreen``), and the sixteen standard names
(``bright red``).
"""
__all__ = (
    'Color',
    'ColorParseError',
    'MustBeAscii',
    'HexLiteralNotHex',
    'HexLiteralBadLength',
    'Invalid8BitNum',
    'UnrecognizedNamespace',
    'NotFoundInNamespace',
    'GeneralFailure',
)

from .serde import (
    ColorParseError,
    GeneralFailure,
    HexLiteralBadLength,
    HexLiteralNotHex,
    Invalid8BitNum,
    MustBeAscii,
    NotFoundInNamespace,
    UnrecognizedNamespace,
)
from .spec import Color
