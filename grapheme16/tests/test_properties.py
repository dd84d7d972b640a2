#!/usr/bin/env python3

import bisect
import threading
import unittest

from grapheme16 import _graphemedb, properties
from grapheme16.properties import GC, category_name, grapheme_category


class Properties(unittest.TestCase):
    def testTables(self):
        "data tables are sorted and do not overlap"
        self.assertEqual(set(_graphemedb.tables), {cat.name for cat in GC if cat != GC.Other})
        everything = []
        for name, table in _graphemedb.tables.items():
            self.assertTrue(table, name)
            for start, end in table:
                self.assertLessEqual(start, end)
                self.assertLessEqual(end, 0x10FFFF)
                # surrogates are never given a category
                self.assertFalse(start <= 0xDFFF and end >= 0xD800, f"{name} 0x{start:04X}")
            self.assertEqual(sorted(table), list(table))
            everything.extend(table)
        everything.sort()
        for (_, end), (start, _) in zip(everything, everything[1:]):
            self.assertLess(end, start)

    def testCategories(self):
        "individual codepoint categories"
        for codepoint, expected in (
            (ord("a"), GC.Other),
            (ord(" "), GC.Other),
            (0x0D, GC.Control),
            (0x0A, GC.Control),
            (0x00, GC.Control),
            (0x7F, GC.Control),
            (0xAD, GC.Control),
            (0x200B, GC.Control),
            (0x0300, GC.Extend),
            (0x0308, GC.Extend),
            (0x200C, GC.Extend),
            (0xFE0F, GC.Extend),
            (0x1F3FB, GC.Extend),
            (0x1F3FF, GC.Extend),
            (0xE0061, GC.Extend),
            (0x200D, GC.ZWJ),
            (0x1F1E6, GC.Regional_Indicator),
            (0x1F1FA, GC.Regional_Indicator),
            (0x1F1FF, GC.Regional_Indicator),
            (0x00A9, GC.Extended_Pictographic),
            (0x2642, GC.Extended_Pictographic),
            (0x2764, GC.Extended_Pictographic),
            (0x1F600, GC.Extended_Pictographic),
            (0x1F61C, GC.Extended_Pictographic),
            (0x1F44D, GC.Extended_Pictographic),
            (0x1F926, GC.Extended_Pictographic),
            (0x0903, GC.SpacingMark),
            (0x093F, GC.SpacingMark),
            (0x0600, GC.Prepend),
            (0x1100, GC.L),
            (0x1160, GC.V),
            (0x11A8, GC.T),
            (0xAC00, GC.LV),
            (0xAC1C, GC.LV),
            (0xAC01, GC.LVT),
            (0xD7A3, GC.LVT),
            (0x4E00, GC.Other),
            (0xFF01, GC.Other),
            (0xD800, GC.Other),
            (0xDC00, GC.Other),
            (0x10FFFF, GC.Other),
            (0x110000, GC.Other),
            (-1, GC.Other),
        ):
            self.assertEqual(expected, grapheme_category(codepoint), f"U+{codepoint:04X}")

    def testFastLookup(self):
        "direct table gives the same answers as searching the ranges"
        lookup = properties._get_lookup()
        self.assertEqual(properties.FAST_LOOKUP_LIMIT, len(lookup.fast))
        for codepoint in range(properties.FAST_LOOKUP_LIMIT):
            index = bisect.bisect_right(lookup.starts, codepoint) - 1
            if index >= 0 and codepoint <= lookup.ends[index]:
                expected = lookup.cats[index]
            else:
                expected = GC.Other
            self.assertEqual(expected, lookup.fast[codepoint], f"U+{codepoint:04X}")

    def testCategoryName(self):
        "category names from codepoints and characters"
        self.assertEqual("Extend", category_name(0x0301))
        self.assertEqual("Extend", category_name("\u0301"))
        self.assertEqual("Other", category_name("a"))
        self.assertEqual("Control", category_name("\r"))
        self.assertEqual("Regional_Indicator", category_name("\U0001f1fa"))
        self.assertEqual("LVT", category_name("\uac01"))
        self.assertRaises(ValueError, category_name, "")
        self.assertRaises(ValueError, category_name, "ab")
        self.assertRaises(TypeError, category_name, b"a")
        self.assertRaises(TypeError, category_name, 3.0)

    def testPredicates(self):
        "emoji and flag checks"
        self.assertTrue(properties.is_extended_pictographic("abc\U0001f61c"))
        self.assertTrue(properties.is_extended_pictographic("\u00a9"))
        self.assertFalse(properties.is_extended_pictographic("abc"))
        self.assertFalse(properties.is_extended_pictographic(""))
        # skin tone modifiers extend rather than being pictographic
        self.assertFalse(properties.is_extended_pictographic("\U0001f3fc"))
        self.assertTrue(properties.is_regional_indicator("\U0001f1fa\U0001f1f8"))
        self.assertFalse(properties.is_regional_indicator("US"))
        self.assertTrue(properties.has_category("a\u0301", GC.Extend | GC.ZWJ))
        self.assertFalse(properties.has_category("ab", GC.Extend | GC.ZWJ))
        self.assertRaises(TypeError, properties.is_regional_indicator, None)

    def testThreadedBuild(self):
        "building the lookup from many threads at once"
        saved = properties._lookup
        properties._lookup = None
        try:
            results = []
            barrier = threading.Barrier(8)

            def worker():
                barrier.wait()
                results.append((grapheme_category(0x1F61C), properties._lookup))

            threads = [threading.Thread(target=worker) for _ in range(8)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

            self.assertEqual(8, len(results))
            self.assertEqual({GC.Extended_Pictographic}, {cat for cat, _ in results})
            # only one lookup was ever published
            self.assertEqual(1, len({id(lookup) for _, lookup in results}))
        finally:
            properties._lookup = saved


if __name__ == "__main__":
    unittest.main()
