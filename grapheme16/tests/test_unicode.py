#!/usr/bin/env python3

import threading
import unittest

import grapheme16
import grapheme16.unicode
from grapheme16.unicode import (
    cluster_iter,
    cluster_iter_with_offsets,
    count_clusters,
    next_break,
    next_cluster,
    previous_break,
    previous_cluster,
    split_into_clusters,
)

# face, thumbs up with skin tone, thumbs up, facepalm with skin tone and gender
emoji = "\U0001f61c\U0001f44d\U0001f3fc\U0001f44d\U0001f926\U0001f3fb\u200d\u2642\ufe0f"
flag = "\U0001f1fa\U0001f1f8"

samples = (
    "",
    "a",
    "hello world",
    "a\r\nb\r\r\n\n",
    emoji,
    "\U0001f61c" + flag + "\U0001f44d",
    flag * 3 + "\U0001f1ec",
    "e\u0301le\u0300ve \u0915\u093f\u0915 \u1100\u1161\u11a8\uac00",
    "\u597d\u4e2a\uff01 g@1",
    "\ud800\u0308\udc00a\U0001f61c\udc00",
    "\u0600a\u00ad\u200d\U0001f469\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468",
)


class Unicode(unittest.TestCase):
    def testEmojiScenario(self):
        "walking forwards and backwards over emoji"
        self.assertEqual(15, grapheme16.unicode.code_unit_length(emoji))

        offset = 0
        seen = []
        for _ in range(5):
            offset = next_break(emoji, offset)
            seen.append(offset)
        self.assertEqual([2, 6, 8, 15, 15], seen)

        offset = 15
        seen = []
        for _ in range(5):
            offset = previous_break(emoji, offset)
            seen.append(offset)
        self.assertEqual([8, 6, 2, 0, 0], seen)

        self.assertEqual(4, count_clusters(emoji))
        self.assertEqual(
            [
                "\U0001f61c",
                "\U0001f44d\U0001f3fc",
                "\U0001f44d",
                "\U0001f926\U0001f3fb\u200d\u2642\ufe0f",
            ],
            split_into_clusters(emoji),
        )
        self.assertEqual("\U0001f44d", next_cluster(emoji, 6))
        self.assertEqual("\U0001f44d\U0001f3fc", previous_cluster(emoji, 6))

    def testSingleClusters(self):
        "sequences that are one cluster"
        for text, length in (
            (flag, 4),
            ("\U0001f3c3\U0001f3fd\u200d\u2640\ufe0f", 7),
            ("\r\n", 2),
            ("e\u0301", 2),
            ("\uac01", 1),
        ):
            self.assertEqual(1, count_clusters(text), repr(text))
            self.assertEqual(length, next_break(text, 0))
            self.assertEqual(0, previous_break(text, length))
            self.assertEqual([text], split_into_clusters(text))

    def testFlagNeighbours(self):
        "next and previous cluster text around a flag"
        text = "\U0001f61c" + flag + "\U0001f44d"
        self.assertEqual(flag, next_cluster(text, 2))
        self.assertEqual("\U0001f61c", previous_cluster(text, 2))
        self.assertEqual("\U0001f44d", next_cluster(text, 6))
        self.assertEqual(flag, previous_cluster(text, 6))
        self.assertEqual(3, count_clusters(text))

    def testCounts(self):
        "counting clusters"
        for text, expected in (
            ("", 0),
            ("abc", 3),
            ("a\r\nb", 3),
            ("\r\r\n", 2),
            ("\n\r", 2),
            (flag * 3 + "\U0001f1ec", 4),
            ("\u597d\u4e2a\uff01", 3),
            ("\U00010000", 1),
            ("\udc00\ud800", 2),
        ):
            self.assertEqual(expected, count_clusters(text), repr(text))
            self.assertEqual(expected, len(split_into_clusters(text)))
        self.assertEqual([], split_into_clusters(""))

    def testErrors(self):
        "wrong types"
        for func in next_break, previous_break, next_cluster, previous_cluster:
            self.assertRaises(TypeError, func, b"abc", 0)
            self.assertRaises(TypeError, func, None, 0)
            self.assertRaises(TypeError, func, "abc", 1.5)
            self.assertRaises(TypeError, func, "abc", "1")
        self.assertRaises(TypeError, previous_break, "abc")
        self.assertRaises(TypeError, count_clusters, b"abc")
        self.assertRaises(TypeError, count_clusters, None)
        self.assertRaises(TypeError, split_into_clusters, b"abc")
        self.assertRaises(TypeError, split_into_clusters, ["a"])

    def testClamping(self):
        "offsets outside the text do not raise"
        self.assertEqual(0, next_break("abc", -10))
        self.assertEqual(3, next_break("abc", 3))
        self.assertEqual(3, next_break("abc", 99))
        self.assertEqual(0, previous_break("abc", 0))
        self.assertEqual(0, previous_break("abc", -1))
        self.assertEqual(3, previous_break("abc", 99))
        self.assertEqual(0, next_break("", 0))
        self.assertEqual(0, previous_break("", 5))
        self.assertEqual("a", next_cluster("abc", -4))
        self.assertEqual("", next_cluster("abc", 3))
        self.assertEqual("", next_cluster("abc", 30))
        self.assertEqual("", previous_cluster("abc", 0))
        self.assertEqual("", previous_cluster("abc", -2))
        self.assertEqual("", previous_cluster("abc", 4))
        self.assertEqual(["a", "b", "c"], list(cluster_iter("abc", -3)))
        self.assertEqual([], list(cluster_iter("abc", 3)))

    def testSurrogates(self):
        "offsets inside pairs and separate surrogate items"
        self.assertEqual("\ude1c", next_cluster("\U0001f61ca", 1))
        self.assertEqual("\ud83d", previous_cluster("\U0001f61ca", 1))
        self.assertEqual(2, next_break("\U0001f61ca", 1))
        self.assertEqual(0, previous_break("\U0001f61ca", 1))

        # a str holding the two halves as separate items
        text = "\ud83d\ude1ca"
        clusters = split_into_clusters(text)
        self.assertEqual(["\ud83d\ude1c", "a"], clusters)
        self.assertEqual(2, len(clusters[0]))
        self.assertEqual(2, count_clusters(text))
        self.assertEqual(2, next_break(text, 0))

    def testProperties(self):
        "relationships that hold for any text"
        for text in samples:
            clusters = split_into_clusters(text)
            self.assertEqual(text, "".join(clusters))
            self.assertEqual(len(clusters), count_clusters(text))
            self.assertNotIn("", clusters)

            length = grapheme16.unicode.code_unit_length(text)
            offsets = list(cluster_iter_with_offsets(text))
            self.assertEqual(clusters, [c for _, _, c in offsets])
            if offsets:
                self.assertEqual(0, offsets[0][0])
                self.assertEqual(length, offsets[-1][1])
            for (_, end, _), (start, _, _) in zip(offsets, offsets[1:]):
                self.assertEqual(end, start)

            boundaries = [0] + [end for _, end, _ in offsets]
            for start, end in zip(boundaries, boundaries[1:]):
                self.assertLess(start, end)
                self.assertEqual(end, next_break(text, start))
                self.assertEqual(start, previous_break(text, end))

            for offset in range(length):
                after = next_break(text, offset)
                self.assertGreater(after, offset)
                self.assertIn(after, boundaries)
                self.assertEqual(min(b for b in boundaries if b > offset), after)
            for offset in range(1, length + 1):
                before = previous_break(text, offset)
                self.assertLess(before, offset)
                self.assertEqual(max(b for b in boundaries if b < offset), before)

    def testRestart(self):
        "iterating from a boundary gives the remaining clusters"
        clusters = split_into_clusters(emoji)
        self.assertEqual(clusters[2:], list(cluster_iter(emoji, 6)))
        self.assertEqual([(8, 15, clusters[3])], list(cluster_iter_with_offsets(emoji, 8)))

    def testThreads(self):
        "segmenting the same text from many threads"
        text = "".join(samples) * 20
        expected = split_into_clusters(text)
        results = []

        def worker():
            for _ in range(5):
                results.append(split_into_clusters(text) == expected and count_clusters(text) == len(expected))

        threads = [threading.Thread(target=worker) for _ in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual([True] * 30, results)

    def testPackage(self):
        "package level names"
        self.assertIs(grapheme16.next_break, next_break)
        self.assertIs(grapheme16.previous_break, previous_break)
        self.assertIs(grapheme16.split_into_clusters, split_into_clusters)
        self.assertIs(grapheme16.count_clusters, count_clusters)
        self.assertEqual("15.1", grapheme16.unicode_version)
        self.assertTrue(grapheme16.unicode.is_extended_pictographic(emoji))
        self.assertTrue(grapheme16.unicode.is_regional_indicator(flag))
        self.assertEqual("ZWJ", grapheme16.unicode.category_name(0x200D))


if __name__ == "__main__":
    unittest.main()
