"""
Selecting the current terminal's capabilities based on environment variables.

Three variables matter:

  * ``TERMCAPS_DATA`` names a capability file to use instead of the bundled one.
  * ``TERMCAPS_TERMINAL`` names the compact name of a terminal, which overrides
    the terminal implied by ``TERM``.
  * ``TERM`` is set by the terminal itself.

Empty variables count as undefined. All functions accept the environment as an
argument, defaulting to ``os.environ``.
"""
from collections.abc import Mapping
import logging
import os

from .capinfo import CapabilityRecord, load, load_default
from .catalog import Catalog


logger = logging.getLogger(__name__)

DATA_VARIABLE = 'TERMCAPS_DATA'
TERMINAL_VARIABLE = 'TERMCAPS_TERMINAL'


def _lookup(environ: None | Mapping[str, str], variable: str) -> None | str:
    if environ is None:
        environ = os.environ
    return environ.get(variable) or None


def load_configured_catalog(environ: None | Mapping[str, str] = None) -> Catalog:
    """
    Load the capability file named by ``TERMCAPS_DATA`` or, if the variable is
    undefined, the bundled capability data.
    """
    path = _lookup(environ, DATA_VARIABLE)
    if path is None:
        return load_default()
    logger.debug('loading terminal capabilities from %s=%s', DATA_VARIABLE, path)
    return load(path)


def current_capabilities(
    catalog: Catalog, environ: None | Mapping[str, str] = None
) -> None | CapabilityRecord:
    """
    Determine the current terminal's capabilities.

    If ``TERMCAPS_TERMINAL`` is defined, this function returns the named
    terminal's capabilities and raises a ``LookupError`` if the catalog has no
    such terminal. Otherwise, it returns the minimum capabilities of all
    terminals using the ``TERM`` value. If ``TERM`` is undefined or unknown, it
    returns ``None``.
    """
    name = _lookup(environ, TERMINAL_VARIABLE)
    if name is not None:
        descriptor = catalog.get_by_name(name)
        if descriptor is None:
            raise LookupError(f'{TERMINAL_VARIABLE}={name} is not a known terminal')
        return descriptor.caps

    term = _lookup(environ, 'TERM')
    if term is None:
        return None

    group = catalog.get_by_term(term)
    if group is None:
        logger.debug('TERM=%s is not a known terminal', term)
        return None
    return group.min_caps
