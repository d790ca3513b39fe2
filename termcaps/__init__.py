"""
Terminal capabilities and colors.

This package loads descriptions of what terminal emulators support, computes
the capabilities shared by all terminals using the same ``$TERM`` value, and
parses textual color specifications into :class:`.Color` values.
"""
__all__ = (
    'CapabilityGroup',
    'CapabilityRecord',
    'Catalog',
    'Color',
    'ColorParseError',
    'DuplicateIdentity',
    'IoFailure',
    'LoadError',
    'SchemaParseFailure',
    'TerminalDescriptor',
    'TerminalIdentity',
    'current_capabilities',
    'group_by_term',
    'load',
    'load_default',
    'loads',
    'meet',
)

from .capinfo import (
    CapabilityRecord,
    DuplicateIdentity,
    IoFailure,
    LoadError,
    SchemaParseFailure,
    TerminalDescriptor,
    TerminalIdentity,
    group_by_term,
    load,
    load_default,
    loads,
    meet,
)
from .catalog import CapabilityGroup, Catalog
from .color import Color, ColorParseError
from .environment import current_capabilities
