"""
Terminal capabilities and their minimum shared sets.

A capability file is a YAML sequence of terminal descriptors. Each descriptor
names the terminal and records which styling, cursor, and scrolling features
it supports:

.. code-block:: yaml

    - name:
        compact: kitty
        pretty: Kitty
        term: xterm-kitty
      style:
        reset-all: true
        set-color:
          rgb:
            konsole: true
            xterm: true
        ...
      cursor:
        ...
      scroll:
        ...

Since several terminals may set ``$TERM`` to the same value, the capabilities
that can be relied upon for a given value are those shared by all of them.
Capability records hence form a lattice, with :func:`meet` keeping only what
both arguments support, and :func:`group_by_term` folds all descriptors with
the same ``$TERM`` value into their meet.

Parsing is strict: Unknown fields are errors and so are malformed compact
names. Every field may also be spelled in camelCase or kebab-case, with
:data:`EXTRA_SPELLINGS` listing the few additional spellings.
"""
from collections.abc import Iterable, Iterator, Mapping, Sequence
import enum
import functools
from importlib import resources
import logging
import os
import string
from typing import Any, ClassVar, Generic, Self, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictStr,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)
import yaml

from .catalog import CapabilityGroup, Catalog


logger = logging.getLogger(__name__)


# ======================================================================================
# Errors


class LoadError(Exception):
    """The superclass of all errors raised when loading terminal capabilities."""


class IoFailure(LoadError):
    """The capability file could not be read."""


class SchemaParseFailure(LoadError):
    """The capability file is not YAML or does not describe terminals."""


class DuplicateIdentity(LoadError):
    """
    Several terminal descriptors have the same compact name.

    Attributes:
        duplicates: are the duplicated names in the order they were first
            duplicated, each listed once
    """
    def __init__(self, duplicates: Sequence[str]) -> None:
        self.duplicates = tuple(duplicates)
        super().__init__(format_duplicates(self.duplicates))


def find_duplicates(names: Iterable[str]) -> list[str]:
    """Find all names that occur more than once, without stopping early."""
    seen: set[str] = set()
    duplicates: dict[str, None] = {}
    for name in names:
        if name in seen:
            duplicates[name] = None
        else:
            seen.add(name)
    return list(duplicates)


def format_duplicates(duplicates: Sequence[str]) -> str:
    if len(duplicates) == 1:
        return f'Duplicated terminal name: {duplicates[0]}'
    return (
        'Duplicated terminal names: '
        + ', '.join(duplicates[:-1])
        + ', and '
        + duplicates[-1]
    )


def check_unique(names: Iterable[str]) -> None:
    """Raise a :class:`DuplicateIdentity` error if any name repeats."""
    duplicates = find_duplicates(names)
    if duplicates:
        raise DuplicateIdentity(duplicates)


# ======================================================================================
# Field Spellings


EXTRA_SPELLINGS: dict[str, tuple[str, ...]] = {
    'xterm': ('Xterm',),
    'konsole': ('Konsole',),
    'kitty': ('Kitty',),
}


def spellings(field: str) -> tuple[str, ...]:
    """
    Determine all accepted spellings for the snake_case field name: the name
    itself, its camelCase and kebab-case versions, and its extra spellings.
    """
    head, *tail = field.split('_')
    camel = head + ''.join(word.capitalize() for word in tail)
    kebab = '-'.join((head, *tail))
    return tuple(dict.fromkeys((field, camel, kebab, *EXTRA_SPELLINGS.get(field, ()))))


@functools.cache
def _spelling_table(model: type[BaseModel]) -> Mapping[str, str]:
    return {
        spelling: field
        for field in model.model_fields
        for spelling in spellings(field)
    }


# Validation context marking input that comes from a capability file. Such input
# only ever uses the file format, never the models' own field names.
_DOCUMENT_CONTEXT = {'document': True}


def _from_document(info: ValidationInfo) -> bool:
    return bool(info.context and info.context.get('document'))


class _Schema(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    @model_validator(mode='before')
    @classmethod
    def _normalize_spellings(cls, data: Any) -> Any:
        if isinstance(data, cls) or not isinstance(data, Mapping):
            return data

        table = _spelling_table(cls)
        normalized: dict[Any, Any] = {}
        for key, value in data.items():
            # Unknown keys pass through for extra='forbid' to reject
            field = table.get(key, key) if isinstance(key, str) else key
            if field in normalized:
                raise ValueError(f'field "{field}" is given more than once')
            normalized[field] = value
        return normalized


# ======================================================================================
# The Capability Lattice


class _Lattice:
    """
    Operators for capabilities. ``x & y`` is the meet of two capabilities and
    ``x <= y`` holds if ``y`` supports everything ``x`` supports.
    """
    def meet(self, other: Self) -> Self:
        raise NotImplementedError()

    def leaves(self, path: str = '') -> Iterator[tuple[str, int]]:
        raise NotImplementedError()

    def __and__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return self.meet(other)

    def __le__(self, other: Self) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.meet(other) == self


def _join(path: str, name: str) -> str:
    return f'{path}.{name}' if path else name


class _Record(_Schema, _Lattice):
    """A record of capabilities, each either a boolean or another capability."""

    def meet(self, other: Self) -> Self:
        """Compute the field-wise meet of the two records."""
        values: dict[str, Any] = {}
        for name in type(self).model_fields:
            mine = getattr(self, name)
            theirs = getattr(other, name)
            if isinstance(mine, bool):
                values[name] = mine and theirs
            else:
                values[name] = mine.meet(theirs)
        return type(self).model_construct(**values)

    def leaves(self, path: str = '') -> Iterator[tuple[str, int]]:
        """
        Enumerate the record's leaves as pairs of dotted paths and ranks.
        Booleans rank 0 or 1, tiered capabilities rank by tier.
        """
        for name in type(self).model_fields:
            value = getattr(self, name)
            if isinstance(value, bool):
                yield _join(path, name), int(value)
            else:
                yield from value.leaves(_join(path, name))


TierT = TypeVar('TierT', bound=enum.IntEnum)
DetailT = TypeVar('DetailT', bound=_Record)


class _Tiered(BaseModel, _Lattice, Generic[TierT, DetailT]):
    """
    A tiered capability. Tiers are totally ordered, but the top tier carries
    a record with further details. The detail is present exactly when the tier
    is the top tier.

    In a capability file, a tiered capability is written either as a tier name
    or, for the top tier, as a mapping from the tier name to the details.
    """
    model_config = ConfigDict(extra='forbid', frozen=True)

    SPELLINGS: ClassVar[Mapping[str, enum.IntEnum]] = {}

    tier: TierT
    detail: None | DetailT = None

    @classmethod
    def _tier_named(cls, name: object) -> enum.IntEnum:
        tier = cls.SPELLINGS.get(name) if isinstance(name, str) else None
        if tier is None:
            raise ValueError(f'"{name}" is not a valid tier of {cls.__name__}')
        return tier

    @model_validator(mode='before')
    @classmethod
    def _parse_tier(cls, data: Any, info: ValidationInfo) -> Any:
        if isinstance(data, str):
            return {'tier': cls._tier_named(data)}

        from_document = _from_document(info)
        if (
            isinstance(data, Mapping)
            and len(data) == 1
            and (from_document or 'tier' not in data)
        ):
            ((name, detail),) = data.items()
            return {'tier': cls._tier_named(name), 'detail': detail}
        if from_document:
            raise ValueError(
                f'{cls.__name__} must be a tier name or map the top tier name to details'
            )
        return data

    @model_validator(mode='after')
    def _check_detail(self) -> Self:
        top = max(type(self.tier))
        if self.tier == top and self.detail is None:
            raise ValueError(f'{self.tier.name} requires details')
        if self.tier != top and self.detail is not None:
            raise ValueError(f'{self.tier.name} does not take details')
        return self

    def meet(self, other: Self) -> Self:
        """
        Compute the meet of two tiered capabilities. For different tiers, that
        is the lesser tier, which never carries details. For the same top
        tier, that is the top tier with the meet of the details.
        """
        if self.tier != other.tier:
            return self if self.tier < other.tier else other
        if self.detail is None or other.detail is None:
            return self
        return type(self).model_construct(
            tier=self.tier, detail=self.detail.meet(other.detail)
        )

    def leaves(self, path: str = '') -> Iterator[tuple[str, int]]:
        yield path, int(self.tier)
        if self.detail is not None:
            yield from self.detail.leaves(_join(path, 'detail'))


# --------------------------------------------------------------------------------------


class RgbDetail(_Record):
    """
    The styles of RGB colors a terminal supports. If neither is supported, the
    terminal really only supports 8-bit colors.

    Attributes:
        xterm: ``ESC[38:2:<I>:<R>:<G>:<B>m``, with the color space ``I``
            being ignored
        konsole: ``ESC[38;2;<R>;<G>;<B>m``, which nearly all modern terminals
            support, xterm included
    """
    xterm: StrictBool
    konsole: StrictBool


class ColorTier(enum.IntEnum):
    """
    The color support.

    Attributes:
        NONE: no colors at all
        FIXED_4BIT: the 16 standard colors via ``ESC[30–37m`` and ``ESC[90–97m``
        FIXED_8BIT: all 256 indexed colors via ``ESC[38;5;<N>m``
        RGB: 24-bit colors in addition to indexed colors
    """
    NONE = 0
    FIXED_4BIT = 1
    FIXED_8BIT = 2
    RGB = 3


class ColorSupport(_Tiered[ColorTier, RgbDetail]):
    """A terminal's support for text colors."""
    SPELLINGS: ClassVar[Mapping[str, enum.IntEnum]] = {
        'None': ColorTier.NONE,
        'none': ColorTier.NONE,
        'Fixed4Bit': ColorTier.FIXED_4BIT,
        'fixed4bit': ColorTier.FIXED_4BIT,
        'fixed-4bit': ColorTier.FIXED_4BIT,
        'Fixed8Bit': ColorTier.FIXED_8BIT,
        'fixed8bit': ColorTier.FIXED_8BIT,
        'fixed-8bit': ColorTier.FIXED_8BIT,
        'Rgb': ColorTier.RGB,
        'rgb': ColorTier.RGB,
        'RGB': ColorTier.RGB,
    }


class FancyDetail(_Record):
    """
    Attributes:
        double: double underlines via ``ESC[21m``
        kitty: kitty's underline shapes ``ESC[4:<0–5>m`` and underline colors
            ``ESC[58…m``
    """
    double: StrictBool
    kitty: StrictBool


class UnderlineTier(enum.IntEnum):
    NONE = 0
    BASIC = 1
    FANCY = 2


class UnderlineSupport(_Tiered[UnderlineTier, FancyDetail]):
    """A terminal's support for underlined text."""
    SPELLINGS: ClassVar[Mapping[str, enum.IntEnum]] = {
        'None': UnderlineTier.NONE,
        'none': UnderlineTier.NONE,
        'Basic': UnderlineTier.BASIC,
        'basic': UnderlineTier.BASIC,
        'Fancy': UnderlineTier.FANCY,
        'fancy': UnderlineTier.FANCY,
    }


class StyleCaps(_Record):
    """
    The capabilities for styling text.

    Attributes:
        reset_all: ``ESC[0m``; without it, no styles should be used at all
        set_color: the supported colors
        unset_color: ``ESC[39m`` and ``ESC[49m``
        set_inverse: ``ESC[7m``
        unset_inverse: ``ESC[27m``
        set_italics: ``ESC[3m``
        unset_italics: ``ESC[23m``
        set_bold: ``ESC[1m``
        set_faint: ``ESC[2m``
        unset_bold_faint: ``ESC[22m``
        set_underline: the supported underlines
        unset_underline: ``ESC[24m``
    """
    reset_all: StrictBool
    set_color: ColorSupport
    unset_color: StrictBool
    set_inverse: StrictBool
    unset_inverse: StrictBool
    set_italics: StrictBool
    unset_italics: StrictBool
    set_bold: StrictBool
    set_faint: StrictBool
    unset_bold_faint: StrictBool
    set_underline: UnderlineSupport
    unset_underline: StrictBool


class CursorStyleCaps(_Record):
    """
    The capabilities for changing the cursor's shape.

    Attributes:
        basic: VT520's ``ESC[<0–4> q`` for blinking or steady blocks and
            underlines
        xterm_extended: xterm's ``ESC[<5–6> q`` for bars
    """
    basic: StrictBool
    xterm_extended: StrictBool


class CursorCaps(_Record):
    """
    The capabilities for the cursor.

    Attributes:
        basic_movement: ``ESC[<N>A`` through ``ESC[<R>;<C>H``
        set_style: the supported cursor shapes
        save_and_restore: ``ESC[s`` and ``ESC[u``
    """
    basic_movement: StrictBool
    set_style: CursorStyleCaps
    save_and_restore: StrictBool


class ScrollCaps(_Record):
    """
    The capabilities for scrolling.

    Attributes:
        basic: ``ESC[<N>S`` and ``ESC[<N>T``
        set_region: ``ESC[<Top>;<Bottom>r``
    """
    basic: StrictBool
    set_region: StrictBool


class CapabilityRecord(_Record):
    """All capabilities of a terminal."""
    style: StyleCaps
    cursor: CursorCaps
    scroll: ScrollCaps


CapabilityT = TypeVar('CapabilityT', bound=_Lattice)


def meet(this: CapabilityT, other: CapabilityT) -> CapabilityT:
    """Determine the capabilities supported by both arguments."""
    return this.meet(other)


# ======================================================================================
# Terminal Descriptors


_COMPACT_CHARACTERS = frozenset(string.ascii_letters + string.digits + '-_')


def is_compact_name(name: str) -> bool:
    """Determine whether the name is non-empty and only uses ``[A-Za-z0-9_-]``."""
    return bool(name) and all(c in _COMPACT_CHARACTERS for c in name)


class TerminalIdentity(_Schema):
    """
    The names of a terminal.

    Attributes:
        compact: is the name used in code, e.g., ``gnome-terminal``
        pretty: is the human-readable name, e.g., ``GNOME Terminal``
        term: is the value of ``$TERM`` set by the terminal
    """
    compact: StrictStr
    pretty: StrictStr
    term: StrictStr

    @field_validator('compact')
    @classmethod
    def _check_compact(cls, value: str) -> str:
        if not is_compact_name(value):
            raise ValueError(
                'compact name must consist of alphanumerics, hyphens, or underscores'
            )
        return value


class TerminalDescriptor(BaseModel):
    """
    A terminal's names and capabilities. In a capability file, the
    capabilities appear next to the ``name`` field instead of being nested.
    """
    model_config = ConfigDict(extra='forbid', frozen=True)

    identity: TerminalIdentity
    caps: CapabilityRecord

    @model_validator(mode='before')
    @classmethod
    def _nest_capabilities(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, Mapping):
            return data
        if _from_document(info) or 'identity' not in data:
            caps = dict(data)
            identity = caps.pop('name', None)
            return {'identity': identity, 'caps': caps}
        return data

    @property
    def compact(self) -> str:
        return self.identity.compact

    @property
    def term(self) -> str:
        return self.identity.term


# ======================================================================================
# Loading and Grouping


_DOCUMENT = TypeAdapter(list[TerminalDescriptor])


def loads_descriptors(
    data: bytes | str, *, source: str = '<string>'
) -> tuple[TerminalDescriptor, ...]:
    """
    Parse the YAML capability document. This function raises a
    :class:`SchemaParseFailure` if the document is malformed and a
    :class:`DuplicateIdentity` error if compact names repeat.
    """
    try:
        document = yaml.safe_load(data)
    except yaml.YAMLError as x:
        raise SchemaParseFailure(f'{source} is not valid YAML: {x}') from x

    try:
        descriptors = _DOCUMENT.validate_python(document, context=_DOCUMENT_CONTEXT)
    except ValidationError as x:
        raise SchemaParseFailure(f'{source} does not describe terminals: {x}') from x

    logger.debug('parsed %d terminal descriptors from %s', len(descriptors), source)
    check_unique(descriptor.compact for descriptor in descriptors)
    return tuple(descriptors)


def load_descriptors(path: str | os.PathLike[str]) -> tuple[TerminalDescriptor, ...]:
    """Read and parse the capability file."""
    try:
        with open(path, mode='rb') as file:
            content = file.read()
    except OSError as x:
        raise IoFailure(f'could not read "{os.fspath(path)}": {x.strerror or x}') from x

    logger.debug('read %d bytes from %s', len(content), os.fspath(path))
    return loads_descriptors(content, source=os.fspath(path))


def group_by_term(descriptors: Iterable[TerminalDescriptor]) -> Catalog:
    """
    Group the descriptors by their ``$TERM`` value. Each group's minimum
    capabilities are the meet of all members' capabilities, folded in order of
    compact names.
    """
    ordered = sorted(descriptors, key=lambda d: d.compact)
    check_unique(descriptor.compact for descriptor in ordered)

    grouped: dict[str, list[TerminalDescriptor]] = {}
    for descriptor in ordered:
        grouped.setdefault(descriptor.term, []).append(descriptor)

    by_term: dict[str, CapabilityGroup] = {}
    for term in sorted(grouped):
        members = grouped[term]
        min_caps = functools.reduce(meet, (member.caps for member in members))
        by_term[term] = CapabilityGroup(min_caps, tuple(members))
        logger.debug('grouped %d terminals for TERM=%s', len(members), term)

    return Catalog(
        {descriptor.compact: descriptor for descriptor in ordered},
        by_term,
    )


def load(path: str | os.PathLike[str]) -> Catalog:
    """Load the capability file and group its terminals by ``$TERM`` value."""
    return group_by_term(load_descriptors(path))


def loads(data: bytes | str, *, source: str = '<string>') -> Catalog:
    """Parse the capability document and group its terminals by ``$TERM`` value."""
    return group_by_term(loads_descriptors(data, source=source))


def load_default() -> Catalog:
    """Load the capability data bundled with this package."""
    data = resources.files('termcaps').joinpath('capdata.yaml').read_bytes()
    return loads(data, source='capdata.yaml')
