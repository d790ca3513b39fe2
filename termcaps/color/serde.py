"""Support for parsing and formatting textual color specifications"""
from string import hexdigits
from typing import cast

from . import css_names, vim_names
from ..color_types import ColorTag, CoordinateSpec, RgbSpec


class ColorParseError(ValueError):
    """
    The superclass of all errors raised when a string does not specify a color.
    Since each subclass identifies a different deficiency, callers can either
    catch this class or a more specific one.
    """


class MustBeAscii(ColorParseError):
    """The color specification contains characters other than ASCII."""
    def __init__(self) -> None:
        super().__init__('colors cannot have non-ASCII characters')


class HexLiteralNotHex(ColorParseError):
    """The hashed hexadecimal color contains characters other than hex digits."""
    def __init__(self) -> None:
        super().__init__('hex color literal must only have hexadecimal characters')


class HexLiteralBadLength(ColorParseError):
    """
    The hashed hexadecimal color does not have six digits. This includes the
    three digit shorthand, e.g., ``#f3a``, which is not supported.
    """
    def __init__(self) -> None:
        super().__init__('hex color literal must have 6 characters')


class Invalid8BitNum(ColorParseError):
    """The ``@`` prefix is not followed by a decimal number between 0 and 255."""
    def __init__(self) -> None:
        super().__init__('invalid 8-bit color number')


class UnrecognizedNamespace(ColorParseError):
    """The color name has a namespace other than ``css`` or ``vim``."""
    def __init__(self, prefix: str) -> None:
        super().__init__(f'unrecognized color namespace "{prefix}"')
        self.prefix = prefix


class NotFoundInNamespace(ColorParseError):
    """The color name does not exist in its namespace."""
    def __init__(self, namespace: str, name: str) -> None:
        super().__init__(
            f'color name not found in namespace: no "{name}" in namespace `{namespace}`'
        )
        self.namespace = namespace
        self.name = name


class GeneralFailure(ColorParseError):
    """The string is not close enough to any color format to say more."""
    def __init__(self) -> None:
        super().__init__('could not parse color')


STANDARD_NAMES: tuple[str, ...] = (
    'black',
    'red',
    'green',
    'yellow',
    'blue',
    'magenta',
    'cyan',
    'white',
    'bright black',
    'bright red',
    'bright green',
    'bright yellow',
    'bright blue',
    'bright magenta',
    'bright cyan',
    'bright white',
)

_STANDARD_INDEX = {name: index for index, name in enumerate(STANDARD_NAMES)}

_NAMESPACES = (
    ('css:', css_names),
    ('vim:', vim_names),
)


def parse_hex(digits: str) -> RgbSpec:
    """Parse the six lower-case hexadecimal digits following the ``#``."""
    if not all(d in hexdigits for d in digits):
        raise HexLiteralNotHex()
    if len(digits) != 6:
        raise HexLiteralBadLength()
    return cast(RgbSpec, tuple(int(digits[n:n+2], base=16) for n in range(0, 6, 2)))


def parse_8bit(number: str) -> int:
    """Parse the decimal number following the ``@``."""
    # Decimal digits only, i.e., no sign, whitespace, or underscores
    if not number or not number.isdigit():
        raise Invalid8BitNum()
    value = int(number)
    if value > 255:
        raise Invalid8BitNum()
    return value


def parse(text: str) -> tuple[ColorTag, CoordinateSpec]:
    """
    Parse the textual color specification into its tag and coordinates.

    The supported formats are tried in strict order of priority:

     1. Anything with non-ASCII characters is rejected.
     2. The text is converted to lower case.
     3. ``#<6 hex digits>`` is an RGB color.
     4. ``@<0-255>`` is an 8-bit color.
     5. ``css:<name>`` is an RGB color from the CSS color keywords.
     6. ``vim:<name>`` is an RGB color from Vim's color names.
     7. One of the sixteen standard names, e.g., ``green`` or ``bright
        yellow``, is an 8-bit color between 0 and 15.

    Everything else is an error, either :class:`UnrecognizedNamespace` if the
    text looks like a namespaced name or :class:`GeneralFailure` if not.
    """
    if not text.isascii():
        raise MustBeAscii()

    text = text.lower()

    if text.startswith('#'):
        return 'rgb', parse_hex(text[1:])
    if text.startswith('@'):
        return 'fixed', (parse_8bit(text[1:]),)

    for prefix, names in _NAMESPACES:
        if text.startswith(prefix):
            name = text[len(prefix):]
            rgb = names.lookup(name)
            if rgb is None:
                raise NotFoundInNamespace(prefix[:-1], name)
            return 'rgb', rgb

    index = _STANDARD_INDEX.get(text)
    if index is not None:
        return 'fixed', (index,)

    prefix, colon, _ = text.partition(':')
    if colon:
        raise UnrecognizedNamespace(prefix)
    raise GeneralFailure()


def stringify(tag: ColorTag, coordinates: CoordinateSpec) -> str:
    """
    Format the tagged coordinates so that :func:`parse` accepts the result,
    i.e., as ``#<hex>`` for RGB colors and ``@<index>`` for 8-bit colors.
    """
    if tag == 'rgb':
        return '#' + ''.join(f'{c:02x}' for c in coordinates)
    return f'@{coordinates[0]}'
