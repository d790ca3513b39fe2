"""
The read-only catalog of terminal capabilities.

A :class:`Catalog` indexes the same terminal descriptors twice, once by compact
name and once by ``$TERM`` value. The latter index maps to
:class:`CapabilityGroup` instances, which combine the descriptors sharing the
``$TERM`` value with their minimum shared capabilities. Since neither catalogs
nor groups can be modified after creation, they can be freely shared, including
between threads.
"""
from collections.abc import Iterator, Mapping
import dataclasses
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .capinfo import CapabilityRecord, TerminalDescriptor, TerminalIdentity


@dataclasses.dataclass(frozen=True, slots=True)
class CapabilityGroup:
    """
    The terminals with the same ``$TERM`` value.

    Attributes:
        min_caps: are the capabilities supported by every member
        descriptors: are the members' descriptors sorted by compact name
    """
    min_caps: 'CapabilityRecord'
    descriptors: tuple['TerminalDescriptor', ...]

    def members(self) -> tuple['TerminalIdentity', ...]:
        """Get the members' identities sorted by compact name."""
        return tuple(descriptor.identity for descriptor in self.descriptors)

    def __len__(self) -> int:
        return len(self.descriptors)


@dataclasses.dataclass(frozen=True, slots=True)
class Catalog:
    """
    Terminal descriptors indexed by compact name and by ``$TERM`` value.

    Attributes:
        by_identity: maps compact names to descriptors
        by_term: maps ``$TERM`` values to groups of descriptors

    Both mappings are read-only and iterate in ascending key order. Every
    descriptor belongs to exactly the group for its own ``$TERM`` value.
    """
    by_identity: Mapping[str, 'TerminalDescriptor']
    by_term: Mapping[str, CapabilityGroup]

    def __post_init__(self) -> None:
        # Freeze the mappings in ascending key order
        for field in ('by_identity', 'by_term'):
            mapping = getattr(self, field)
            frozen = MappingProxyType({key: mapping[key] for key in sorted(mapping)})
            object.__setattr__(self, field, frozen)

        for term, group in self.by_term.items():
            for descriptor in group.descriptors:
                if descriptor.term != term:
                    raise ValueError(f'{descriptor.compact} does not use TERM={term}')
                if self.by_identity.get(descriptor.compact) is not descriptor:
                    raise ValueError(f'{descriptor.compact} is missing from catalog')
        if sum(len(group) for group in self.by_term.values()) != len(self.by_identity):
            raise ValueError('some terminals do not belong to any group')

    def get_by_term(self, term: str) -> None | CapabilityGroup:
        """
        Look up the group of terminals using the ``$TERM`` value. This method
        is the one to use for the current terminal.
        """
        return self.by_term.get(term)

    def get_by_name(self, compact: str) -> 'None | TerminalDescriptor':
        """
        Look up the terminal with the compact name. This method is the one to
        use when overriding the current terminal.
        """
        return self.by_identity.get(compact)

    def terms(self) -> tuple[str, ...]:
        """Get all known ``$TERM`` values in ascending order."""
        return tuple(self.by_term)

    def terminals(self) -> tuple['TerminalDescriptor', ...]:
        """Get all terminal descriptors sorted by compact name."""
        return tuple(self.by_identity.values())

    def groups(self) -> Iterator[tuple[str, CapabilityGroup]]:
        """Get an iterator over the ``$TERM`` values and their groups."""
        yield from self.by_term.items()

    def __contains__(self, term: object) -> bool:
        return term in self.by_term

    def __len__(self) -> int:
        return len(self.by_identity)
