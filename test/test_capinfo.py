import itertools
import os
import random
import tempfile
import unittest

from termcaps.capinfo import (
    CapabilityRecord,
    ColorSupport,
    ColorTier,
    DuplicateIdentity,
    FancyDetail,
    IoFailure,
    LoadError,
    RgbDetail,
    SchemaParseFailure,
    TerminalDescriptor,
    TerminalIdentity,
    UnderlineSupport,
    UnderlineTier,
    find_duplicates,
    format_duplicates,
    is_compact_name,
    load,
    load_default,
    load_descriptors,
    loads,
    loads_descriptors,
    meet,
    spellings,
)

from .builders import caps, document, random_record, record, terminal


class TestLattice(unittest.TestCase):

    RECORDS = [random_record(random.Random(seed)) for seed in range(12)]

    def test_commutative(self) -> None:
        for x, y in itertools.product(self.RECORDS, repeat=2):
            self.assertEqual(meet(x, y), meet(y, x))

    def test_associative(self) -> None:
        for x, y, z in itertools.product(self.RECORDS, repeat=3):
            self.assertEqual(meet(meet(x, y), z), meet(x, meet(y, z)))

    def test_idempotent(self) -> None:
        for x in self.RECORDS:
            self.assertEqual(meet(x, x), x)
            self.assertEqual(x & x, x)
            self.assertTrue(x <= x)

    def test_monotone(self) -> None:
        for x, y in itertools.product(self.RECORDS, repeat=2):
            m = meet(x, y)
            self.assertEqual(m, x & y)
            self.assertTrue(m <= x)
            self.assertTrue(m <= y)

            x_leaves = dict(x.leaves())
            y_leaves = dict(y.leaves())
            for path, rank in m.leaves():
                self.assertIn(path, x_leaves)
                self.assertIn(path, y_leaves)
                self.assertLessEqual(rank, x_leaves[path])
                self.assertLessEqual(rank, y_leaves[path])

    def test_leaves(self) -> None:
        leaves = dict(record().leaves())
        self.assertEqual(len(leaves), 16 + 4 + 2)
        self.assertEqual(leaves['style.reset_all'], 1)
        self.assertEqual(leaves['style.set_color'], ColorTier.RGB)
        self.assertEqual(leaves['style.set_color.detail.xterm'], 1)
        self.assertEqual(leaves['style.set_underline'], UnderlineTier.FANCY)
        self.assertEqual(leaves['cursor.set_style.xterm_extended'], 1)
        self.assertEqual(leaves['scroll.set_region'], 1)

        leaves = dict(record(style__set_color='none', style__set_bold=False).leaves())
        self.assertEqual(leaves['style.set_color'], ColorTier.NONE)
        self.assertEqual(leaves['style.set_bold'], 0)
        self.assertNotIn('style.set_color.detail.xterm', leaves)

    def test_booleans(self) -> None:
        m = meet(record(style__set_bold=False), record(scroll__basic=False))
        self.assertFalse(m.style.set_bold)
        self.assertFalse(m.scroll.basic)
        self.assertTrue(m.style.set_faint)
        self.assertTrue(m.scroll.set_region)

    def test_tiers(self) -> None:
        rgb = ColorSupport(tier=ColorTier.RGB, detail=RgbDetail(xterm=True, konsole=False))
        other_rgb = ColorSupport(tier=ColorTier.RGB, detail=RgbDetail(xterm=False, konsole=True))
        fixed8 = ColorSupport(tier=ColorTier.FIXED_8BIT)
        fixed4 = ColorSupport(tier=ColorTier.FIXED_4BIT)
        none = ColorSupport(tier=ColorTier.NONE)

        self.assertEqual(rgb & fixed8, fixed8)
        self.assertEqual(fixed8 & rgb, fixed8)
        self.assertIsNone((rgb & fixed4).detail)
        self.assertEqual(fixed4 & fixed8, fixed4)
        self.assertEqual(none & rgb, none)
        self.assertEqual(
            rgb & other_rgb,
            ColorSupport(tier=ColorTier.RGB, detail=RgbDetail(xterm=False, konsole=False)),
        )

        fancy = UnderlineSupport(tier=UnderlineTier.FANCY, detail=FancyDetail(double=True, kitty=False))
        basic = UnderlineSupport(tier=UnderlineTier.BASIC)
        self.assertEqual(fancy & basic, basic)
        self.assertEqual(fancy & fancy, fancy)
        self.assertTrue(basic <= fancy)
        self.assertFalse(fancy <= basic)

    def test_tier_invariant(self) -> None:
        with self.assertRaises(ValueError):
            ColorSupport(tier=ColorTier.RGB)
        with self.assertRaises(ValueError):
            ColorSupport(tier=ColorTier.FIXED_8BIT, detail=RgbDetail(xterm=True, konsole=True))
        with self.assertRaises(ValueError):
            UnderlineSupport(tier=UnderlineTier.FANCY)

    def test_mixed_types(self) -> None:
        with self.assertRaises(TypeError):
            record() & record().style  # type: ignore


class TestSchema(unittest.TestCase):

    def test_compact_name(self) -> None:
        for name in ('xterm-256color', 'foo_bar1', 'A', '-_-'):
            with self.subTest('valid', name=name):
                self.assertTrue(is_compact_name(name))
        for name in ('', 'bad name!', 'a.b', 'gnome/terminal', 'ü'):
            with self.subTest('invalid', name=name):
                self.assertFalse(is_compact_name(name))

    def test_bad_compact_name(self) -> None:
        for name in ('', 'bad name!'):
            with self.subTest('invalid', name=name):
                with self.assertRaises(SchemaParseFailure):
                    loads(document(terminal(name, 'xterm')))

        with self.assertRaises(ValueError):
            TerminalIdentity(compact='bad name!', pretty='Bad', term='xterm')

    def test_spellings(self) -> None:
        self.assertEqual(
            spellings('unset_bold_faint'),
            ('unset_bold_faint', 'unsetBoldFaint', 'unset-bold-faint'),
        )
        self.assertEqual(spellings('basic'), ('basic',))
        self.assertEqual(spellings('kitty'), ('kitty', 'Kitty'))

    def test_aliases(self) -> None:
        kebab = record()
        camel = CapabilityRecord.model_validate({
            'style': {
                'resetAll': True,
                'setColor': {'RGB': {'Konsole': True, 'Xterm': True}},
                'unsetColor': True,
                'setInverse': True,
                'unsetInverse': True,
                'setItalics': True,
                'unsetItalics': True,
                'setBold': True,
                'setFaint': True,
                'unsetBoldFaint': True,
                'setUnderline': {'Fancy': {'double': True, 'Kitty': True}},
                'unsetUnderline': True,
            },
            'cursor': {
                'basicMovement': True,
                'setStyle': {'basic': True, 'xtermExtended': True},
                'saveAndRestore': True,
            },
            'scroll': {
                'basic': True,
                'set_region': True,
            },
        })
        self.assertEqual(camel, kebab)

    def test_tier_spellings(self) -> None:
        for spelling, tier in {
            'None': ColorTier.NONE,
            'none': ColorTier.NONE,
            'Fixed4Bit': ColorTier.FIXED_4BIT,
            'fixed-4bit': ColorTier.FIXED_4BIT,
            'fixed8bit': ColorTier.FIXED_8BIT,
            'fixed-8bit': ColorTier.FIXED_8BIT,
        }.items():
            with self.subTest('color tier', spelling=spelling):
                self.assertEqual(ColorSupport.model_validate(spelling).tier, tier)

        self.assertEqual(
            record(style__set_underline='Basic').style.set_underline.tier,
            UnderlineTier.BASIC,
        )

    def test_duplicate_spellings(self) -> None:
        doc = caps()
        doc['style']['setBold'] = False
        with self.assertRaises(ValueError):
            CapabilityRecord.model_validate(doc)

    def test_python_construction(self) -> None:
        identity = TerminalIdentity(compact='a', pretty='A', term='xterm')
        descriptor = TerminalDescriptor.model_validate({'identity': identity, 'caps': record()})
        self.assertEqual(descriptor.compact, 'a')
        self.assertEqual(descriptor.caps, record())

        support = ColorSupport.model_validate({'tier': ColorTier.FIXED_8BIT})
        self.assertEqual(support, ColorSupport(tier=ColorTier.FIXED_8BIT))

    def test_schema_errors(self) -> None:
        bad_descriptors = {
            'unknown style field': terminal('a', 'xterm', style__set_blink=True),
            'bad color tier': terminal('a', 'xterm', style__set_color='fixed16bit'),
            'top tier without detail': terminal('a', 'xterm', style__set_color='rgb'),
            'lower tier with detail': terminal(
                'a', 'xterm', style__set_underline={'basic': {'double': True, 'kitty': True}}
            ),
            'unknown detail field': terminal(
                'a', 'xterm', style__set_color={'rgb': {'xterm': True, 'konsole': True, 'iterm': True}}
            ),
            'number instead of flag': terminal('a', 'xterm', scroll__basic=1),
            'string instead of flag': terminal('a', 'xterm', scroll__basic='true'),
            'missing flag': {
                'name': {'compact': 'a', 'pretty': 'A', 'term': 'xterm'},
                **{**caps(), 'scroll': {'basic': True}},
            },
            'missing section': {
                'name': {'compact': 'a', 'pretty': 'A', 'term': 'xterm'},
                'style': caps()['style'],
                'cursor': caps()['cursor'],
            },
            'unknown section': {**terminal('a', 'xterm'), 'keyboard': {'kitty': True}},
            'unknown name field': {
                **terminal('a', 'xterm'),
                'name': {'compact': 'a', 'pretty': 'A', 'term': 'xterm', 'version': '1'},
            },
            'missing name': caps(),
            'nested identity and caps': {
                'identity': {'compact': 'a', 'pretty': 'A', 'term': 'xterm'},
                'caps': caps(),
            },
            'tier and detail fields': terminal(
                'a', 'xterm',
                style__set_color={'tier': 3, 'detail': {'xterm': True, 'konsole': True}},
            ),
            'tier field': terminal('a', 'xterm', style__set_color={'tier': 2}),
            'tier number': terminal('a', 'xterm', style__set_underline=1),
            'two tiers': terminal(
                'a', 'xterm',
                style__set_underline={'fancy': {'double': True, 'kitty': True}, 'basic': None},
            ),
        }

        for label, descriptor in bad_descriptors.items():
            with self.subTest(label):
                with self.assertRaises(SchemaParseFailure):
                    loads(document(descriptor))

    def test_malformed_documents(self) -> None:
        for text in ('- name: [unclosed', '', 'name: foo', '42'):
            with self.subTest('malformed', text=text):
                with self.assertRaises(SchemaParseFailure) as context:
                    loads(text)
                self.assertIsInstance(context.exception, LoadError)
                self.assertIsNotNone(context.exception.__cause__)

    def test_empty_list(self) -> None:
        catalog = loads('[]')
        self.assertEqual(len(catalog), 0)
        self.assertEqual(catalog.terms(), ())


class TestDuplicates(unittest.TestCase):

    def test_find_duplicates(self) -> None:
        self.assertEqual(find_duplicates(['a', 'b', 'c']), [])
        self.assertEqual(find_duplicates(['a', 'a', 'b', 'b', 'b', 'c']), ['a', 'b'])
        self.assertEqual(find_duplicates(['b', 'a', 'b', 'a']), ['b', 'a'])

    def test_format_duplicates(self) -> None:
        self.assertEqual(format_duplicates(['a']), 'Duplicated terminal name: a')
        self.assertEqual(format_duplicates(['a', 'b']), 'Duplicated terminal names: a, and b')
        self.assertEqual(
            format_duplicates(['a', 'b', 'c']), 'Duplicated terminal names: a, b, and c'
        )

    def test_load_duplicates(self) -> None:
        for names, message in (
            (['a', 'a', 'b', 'b', 'b', 'c'], 'Duplicated terminal names: a, and b'),
            (['a', 'a', 'b', 'b', 'c', 'c'], 'Duplicated terminal names: a, b, and c'),
            (['x', 'a', 'x'], 'Duplicated terminal name: x'),
        ):
            with self.subTest('duplicates', names=names):
                doc = document(*(terminal(name, 'xterm') for name in names))
                with self.assertRaises(DuplicateIdentity) as context:
                    loads(doc)
                self.assertEqual(str(context.exception), message)
                self.assertEqual(len(set(context.exception.duplicates)), len(context.exception.duplicates))

    def test_compact_names_checked_first(self) -> None:
        doc = document(terminal('a', 'xterm'), terminal('a', 'xterm'), terminal('bad name', 'xterm'))
        with self.assertRaises(SchemaParseFailure):
            loads(doc)


class TestLoading(unittest.TestCase):

    def test_identical_group(self) -> None:
        doc = document(*(terminal(name, 'xterm-256color') for name in ('c', 'a', 'b')))
        catalog = loads(doc)
        group = catalog.get_by_term('xterm-256color')
        assert group is not None
        self.assertEqual(group.min_caps, record())
        self.assertEqual([identity.compact for identity in group.members()], ['a', 'b', 'c'])

    def test_minimum_group(self) -> None:
        doc = document(
            terminal('alacritty', 'xterm', style__set_faint=False),
            terminal(
                'urxvt', 'xterm',
                style__set_color={'rgb': {'xterm': False, 'konsole': True}},
                style__set_underline='Basic',
            ),
            terminal('kitty', 'xterm-kitty', cursor__save_and_restore=False),
        )
        catalog = loads(doc)

        group = catalog.get_by_term('xterm')
        assert group is not None
        style = group.min_caps.style
        self.assertEqual(style.set_color.tier, ColorTier.RGB)
        self.assertEqual(style.set_color.detail, RgbDetail(xterm=False, konsole=True))
        self.assertEqual(style.set_underline.tier, UnderlineTier.BASIC)
        self.assertIsNone(style.set_underline.detail)
        self.assertFalse(style.set_faint)
        self.assertTrue(group.min_caps.cursor.save_and_restore)

        kitty = catalog.get_by_term('xterm-kitty')
        assert kitty is not None
        self.assertFalse(kitty.min_caps.cursor.save_and_restore)

    def test_order_independent(self) -> None:
        terminals = [
            terminal('a', 'xterm', style__set_color='fixed8bit'),
            terminal('b', 'xterm', style__set_bold=False),
            terminal('c', 'xterm', style__set_underline='none', scroll__basic=False),
        ]
        expected = loads(document(*terminals)).get_by_term('xterm')
        assert expected is not None
        for permutation in itertools.permutations(terminals):
            group = loads(document(*permutation)).get_by_term('xterm')
            assert group is not None
            self.assertEqual(group.min_caps, expected.min_caps)

    def test_descriptors(self) -> None:
        descriptors = loads_descriptors(document(terminal('b', 'xterm'), terminal('a', 'vt100')))
        self.assertEqual([d.compact for d in descriptors], ['b', 'a'])
        self.assertEqual(descriptors[1].term, 'vt100')
        self.assertEqual(descriptors[1].identity.pretty, 'A')
        self.assertEqual(descriptors[0].caps, record())

    def test_file(self) -> None:
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, 'caps.yaml')
            with open(path, mode='w', encoding='utf8') as file:
                file.write(document(terminal('a', 'xterm')))

            self.assertEqual(len(load_descriptors(path)), 1)
            catalog = load(path)
            self.assertEqual(catalog.terms(), ('xterm',))

            with self.assertRaises(IoFailure) as context:
                load(os.path.join(directory, 'missing.yaml'))
            self.assertIsInstance(context.exception.__cause__, OSError)

            with self.assertRaises(IoFailure):
                load(directory)

    def test_default_data(self) -> None:
        catalog = load_default()
        self.assertEqual(
            catalog.terms(),
            ('alacritty', 'rxvt-unicode-256color', 'xterm', 'xterm-256color', 'xterm-kitty'),
        )

        group = catalog.get_by_term('xterm-256color')
        assert group is not None
        self.assertEqual(
            [identity.compact for identity in group.members()],
            ['gnome-terminal', 'libvte', 'xfce-terminal'],
        )
        libvte = catalog.get_by_name('libvte')
        assert libvte is not None
        self.assertEqual(group.min_caps, libvte.caps)

        kitty = catalog.get_by_name('kitty')
        assert kitty is not None
        self.assertEqual(kitty.identity.pretty, 'Kitty')
        self.assertEqual(kitty.caps.style.set_underline.tier, UnderlineTier.FANCY)
