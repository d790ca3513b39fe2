import os
import tempfile
import unittest

from termcaps.capinfo import ColorTier, IoFailure
from termcaps.environment import current_capabilities, load_configured_catalog

from .builders import document, record, terminal


class TestEnvironment(unittest.TestCase):

    def setUp(self) -> None:
        self.catalog = load_configured_catalog({})

    def test_term(self) -> None:
        caps = current_capabilities(self.catalog, {'TERM': 'xterm-kitty'})
        kitty = self.catalog.get_by_name('kitty')
        assert kitty is not None
        self.assertEqual(caps, kitty.caps)

        caps = current_capabilities(self.catalog, {'TERM': 'xterm-256color'})
        assert caps is not None
        self.assertFalse(caps.style.set_faint)

    def test_unknown_term(self) -> None:
        self.assertIsNone(current_capabilities(self.catalog, {}))
        self.assertIsNone(current_capabilities(self.catalog, {'TERM': ''}))
        self.assertIsNone(current_capabilities(self.catalog, {'TERM': 'dumb'}))

    def test_override(self) -> None:
        caps = current_capabilities(
            self.catalog, {'TERM': 'xterm-256color', 'TERMCAPS_TERMINAL': 'urxvt'}
        )
        assert caps is not None
        self.assertEqual(caps.style.set_color.tier, ColorTier.RGB)
        self.assertFalse(caps.style.set_faint)
        self.assertTrue(caps.style.unset_inverse)

        caps = current_capabilities(
            self.catalog, {'TERM': 'xterm-kitty', 'TERMCAPS_TERMINAL': ''}
        )
        kitty = self.catalog.get_by_name('kitty')
        assert kitty is not None
        self.assertEqual(caps, kitty.caps)

        with self.assertRaises(LookupError):
            current_capabilities(self.catalog, {'TERMCAPS_TERMINAL': 'nope'})

    def test_data_file(self) -> None:
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, 'caps.yaml')
            with open(path, mode='w', encoding='utf8') as file:
                file.write(document(terminal('dumb', 'dumb', style__set_color='none')))

            catalog = load_configured_catalog({'TERMCAPS_DATA': path})
            self.assertEqual(catalog.terms(), ('dumb',))
            self.assertEqual(
                current_capabilities(catalog, {'TERM': 'dumb'}),
                record(style__set_color='none'),
            )

            with self.assertRaises(IoFailure):
                load_configured_catalog({'TERMCAPS_DATA': os.path.join(directory, 'nope')})
