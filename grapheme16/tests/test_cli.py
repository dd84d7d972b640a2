#!/usr/bin/env python3

import contextlib
import io
import os
import subprocess
import sys
import tempfile
import unittest

from grapheme16.__main__ import main

top_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class CommandLine(unittest.TestCase):
    def run_main(self, *args):
        "Returns exit code, stdout, stderr from running main"
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            try:
                code = main(list(args))
            except SystemExit as e:
                code = e.code
        return code, out.getvalue(), err.getvalue()

    def write_file(self, text):
        f = tempfile.NamedTemporaryFile("wt", encoding="utf8", suffix=".txt", delete=False)
        with f:
            f.write(text)
        self.addCleanup(os.remove, f.name)
        return f.name

    def exec(self, *args):
        return subprocess.run(
            [sys.executable, "-m", "grapheme16"] + list(args), capture_output=True, cwd=top_dir
        )

    def testCount(self):
        "count sub-command"
        code, out, _ = self.run_main("count", "a\r\nb")
        self.assertEqual(0, code)
        self.assertEqual("clusters: 3  code units: 4  codepoints: 4\n", out)

        code, out, _ = self.run_main("count", "\U0001f1fa\U0001f1f8", "a")
        self.assertEqual("clusters: 3  code units: 6  codepoints: 4\n", out)

        name = self.write_file("\U0001f61c\U0001f44d\U0001f3fc")
        code, out, _ = self.run_main("count", "--text-file", name)
        self.assertEqual("clusters: 2  code units: 6  codepoints: 3\n", out)

    def testShow(self):
        "show sub-command"
        code, out, _ = self.run_main("show", "a\u0301b")
        self.assertEqual(0, code)
        lines = out.splitlines()
        self.assertEqual("#0 span 0-2 code units 2 value: a\u0301", lines[0])
        self.assertIn("U+0301 COMBINING ACUTE ACCENT : Extend", lines[2])
        self.assertEqual("#1 span 2-3 code units 1 value: b", lines[3])
        self.assertEqual(5, len(lines))

        code, out, _ = self.run_main("-cc", "show", "\U0001f61cx")
        lines = out.splitlines()
        self.assertEqual("#0 span 0-2 code units 2 value: \U0001f61c", lines[0])
        self.assertEqual("  U+1F61C", lines[1])
        self.assertEqual("#1 span 2-3 code units 1 value: x", lines[2])

    def testCodepoint(self):
        "codepoint sub-command"
        code, out, _ = self.run_main("codepoint", "1F1FA", "z")
        self.assertEqual(0, code)
        self.assertIn("#0 U+1F1FA", out)
        self.assertIn("REGIONAL INDICATOR SYMBOL LETTER U : Regional_Indicator}  Code units: 2", out)
        self.assertIn("#1 U+007A", out)
        self.assertIn("LATIN SMALL LETTER Z : Other}  Code units: 1", out)

        for value in ("110000", "-1"):
            code, out, err = self.run_main("codepoint", value)
            self.assertEqual(2, code, value)
            self.assertIn(f"Codepoint {value} is out of range", err)
            self.assertNotIn("U+-", out)
        code, out, _ = self.run_main("codepoint", "10FFFF", "0")
        self.assertEqual(0, code)
        self.assertIn("#0 U+10FFFF", out)
        self.assertIn("#1 U+0000", out)

    def testNoText(self):
        "text is required"
        code, _, err = self.run_main("count")
        self.assertEqual(2, code)
        self.assertIn("--text-file", err)
        code, _, _ = self.run_main()
        self.assertEqual(2, code)

    def testBreakTest(self):
        "breaktest sub-command with passing and failing files"
        good = self.write_file(
            "# GraphemeBreakTest-15.1.0.txt\n"
            "\n"
            "÷ 0061 ÷ 0062 ÷\t#  ÷ [0.2] LATIN SMALL LETTER A (Other) ÷ [999.0] LATIN SMALL LETTER B (Other) ÷ [0.3]\n"
            "÷ 000D × 000A ÷\n"
            "÷ 1F1FA × 1F1F8 ÷ 1F1EC ÷\n"
            "÷ 1F469 × 200D × 1F468 ÷\n"
        )
        code, out, _ = self.run_main("breaktest", good)
        self.assertEqual(0, code)
        self.assertEqual("4 passed\n", out)

        bad = self.write_file("÷ 0061 × 0062 ÷\n÷ 0061 ÷ 0062 ÷\n")
        code, out, err = self.run_main("breaktest", bad)
        self.assertEqual(2, code)
        self.assertIn("1 tests failed, 1 passed", err)
        self.assertIn("Line 1 got breaks at [1, 2] expected at [2]", err)

        malformed = self.write_file("0061 ÷ 0062\n")
        code, _, _ = self.run_main("breaktest", malformed)
        self.assertEqual(2, code)

    def testModule(self):
        "running as python -m"
        proc = self.exec("count", "abc")
        self.assertEqual(0, proc.returncode, f"Failed {proc=}")
        self.assertEqual(b"clusters: 3  code units: 3  codepoints: 3", proc.stdout.strip())

        proc = self.exec("--help")
        self.assertEqual(0, proc.returncode, f"Failed {proc=}")
        self.assertIn(b"breaktest", proc.stdout)


if __name__ == "__main__":
    unittest.main()
