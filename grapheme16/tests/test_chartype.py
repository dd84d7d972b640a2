#!/usr/bin/env python3

import unittest

from grapheme16.chartype import CharType, char_type, char_types, is_cjk


class CharTypes(unittest.TestCase):
    def testCharType(self):
        "classifying clusters"
        for cluster, expected in (
            ("\u597d", CharType.letter),
            ("\uff01", CharType.punctuation),
            ("g", CharType.letter),
            ("@", CharType.punctuation),
            ("1", CharType.letter),
            ("`", CharType.punctuation),
            ("!", CharType.punctuation),
            ("\u00bf", CharType.punctuation),
            ("$", CharType.other),
            ("+", CharType.other),
            (" ", CharType.other),
            ("\r\n", CharType.other),
            ("\U0001f61c", CharType.other),
            ("\U0001f1fa\U0001f1f8", CharType.other),
            ("a\u0301", CharType.letter),
            ("\uac01", CharType.letter),
            # non ASCII digits are not letters
            ("\u0663", CharType.other),
            ("", CharType.other),
        ):
            self.assertEqual(expected, char_type(cluster), repr(cluster))

        self.assertRaises(TypeError, char_type, None)
        self.assertRaises(TypeError, char_type, b"a")
        self.assertEqual("letter", CharType.letter.value)

    def testCharTypes(self):
        "classifying each cluster of text"
        self.assertEqual(
            [
                ("\u597d", CharType.letter),
                ("\uff01", CharType.punctuation),
                (" ", CharType.other),
                ("e\u0301", CharType.letter),
                ("\U0001f44d\U0001f3fc", CharType.other),
            ],
            list(char_types("\u597d\uff01 e\u0301\U0001f44d\U0001f3fc")),
        )
        self.assertEqual([], list(char_types("")))

    def testIsCJK(self):
        "detecting Chinese, Japanese and Korean characters"
        for cluster in ("\u597d", "\U00020000", "\u3042", "\u30a2", "\uac01", "\u9fff", "\U0002fa1f", "\u597dg"):
            self.assertTrue(is_cjk(cluster), repr(cluster))
        for cluster in ("g", "", "\uff01", "\u3000", "\U0001f61c", "g\u597d", "\U0002a6e0", "\ud840"):
            self.assertFalse(is_cjk(cluster), repr(cluster))
        # the two halves of a supplementary character as separate items
        self.assertTrue(is_cjk("\ud840\udc00"))
        self.assertRaises(TypeError, is_cjk, None)
        self.assertRaises(TypeError, is_cjk, b"a")


if __name__ == "__main__":
    unittest.main()
