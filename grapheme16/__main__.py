#!/usr/bin/env python3

"Command line tools.  Run ``python3 -m grapheme16 --help``"

from __future__ import annotations

import argparse
import atexit
import logging
import sys
import unicodedata

from . import _breaker
from .codeunits import code_unit_length, iter_code_points, to_code_units
from .properties import category_name, unicode_version
from .unicode import cluster_iter, cluster_iter_with_offsets, count_clusters

logger = logging.getLogger("grapheme16.cli")


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="python3 -m grapheme16", description="Grapheme cluster tools")
    parser.add_argument(
        "-cc",
        "--compact-codepoints",
        dest="compact_codepoints",
        action="store_true",
        default=False,
        help="Only show hex codepoint values, not full details",
    )
    parser.add_argument(
        "--verbose", default=False, action="store_true", help="Log debug messages to stderr [%(default)s]"
    )

    subparsers = parser.add_subparsers(required=True)
    p = subparsers.add_parser("breaktest", help="Run Unicode GraphemeBreakTest.txt file")
    p.set_defaults(function="breaktest")
    p.add_argument("-v", default=False, action="store_true", dest="verbose_lines", help="Show each line as it is tested")
    p.add_argument("--fail-fast", default=False, action="store_true", help="Exit on first test failure")
    p.add_argument(
        "file",
        help="break test text file.  It can be downloaded from https://www.unicode.org/Public/UCD/latest/ucd/auxiliary/",
        type=argparse.FileType("rt", encoding="utf8"),
    )

    p = subparsers.add_parser("show", help="Show grapheme clusters of provided text")
    p.set_defaults(function="show")
    p.add_argument("--text-file", type=argparse.FileType("rt", encoding="utf8"))
    p.add_argument("text", nargs="*", help="Text to segment unless --text-file used")

    p = subparsers.add_parser("count", help="Count grapheme clusters and code units of provided text")
    p.set_defaults(function="count")
    p.add_argument("--text-file", type=argparse.FileType("rt", encoding="utf8"))
    p.add_argument("text", nargs="*", help="Text to count unless --text-file used")

    p = subparsers.add_parser("codepoint", help="Show information about codepoints")
    p.add_argument("text", nargs="+", help="If a hex constant then use that value, otherwise treat as text")
    p.set_defaults(function="codepoint")

    p = subparsers.add_parser("benchmark", help="Measure how long segmentation takes to iterate each cluster")
    p.set_defaults(function="benchmark")
    p.add_argument(
        "--size",
        type=float,
        default=1,
        help="How many million characters (codepoints) of text to use [%(default)s]",
    )
    p.add_argument("--seed", type=int, default=0, help="Random seed to use [%(default)s]")
    p.add_argument(
        "--text-file",
        type=argparse.FileType("rt", encoding="utf8"),
        help="Text source to use.  It is repeatedly shuffled and appended until the sized amount is available",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    "Runs the command line tools returning the exit code"
    parser = make_parser()
    options = parser.parse_args(args)

    if options.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    def codepoint_details(codepoint: int, counter: int | None = None) -> str:
        if options.compact_codepoints:
            return f"U+{codepoint:04X}"
        try:
            name = unicodedata.name(chr(codepoint))
        except ValueError:
            name = "(no name)"
        counter = f"#{counter}:" if counter is not None else ""
        return "{" + f"{counter}U+{codepoint:04X} {name} : {category_name(codepoint)}" + "}"

    def get_text() -> str:
        text = ""
        if options.text_file:
            # stop debug interpreter whining about file not being closed
            atexit.register(lambda: options.text_file.close())
            text += options.text_file.read()
        if options.text:
            if text:
                text += " "
            text += " ".join(options.text)
        if not text:
            parser.error("You must specify at least --text-file or text arguments")
        return text

    if options.function == "show":
        text = get_text()
        units = to_code_units(text)
        for counter, (begin, end, cluster) in enumerate(cluster_iter_with_offsets(text)):
            print(f"#{ counter } span { begin }-{ end } code units { end - begin } value: { cluster }")
            for offset, codepoint, _ in iter_code_points(units[begin:end]):
                print(" ", codepoint_details(codepoint, begin + offset))

    elif options.function == "count":
        text = get_text()
        print(f"clusters: { count_clusters(text) }  code units: { code_unit_length(text) }  codepoints: { len(text) }")

    elif options.function == "codepoint":
        codepoints = []
        for t in options.text:
            try:
                value = int(t, 16)
            except ValueError:
                codepoints.extend(codepoint for _, codepoint, _ in iter_code_points(to_code_units(t)))
                continue
            if not 0 <= value <= 0x10FFFF:
                parser.error(f"Codepoint { t } is out of range 0 to 10FFFF")
            codepoints.append(value)

        for i, cp in enumerate(codepoints):
            print(f"#{ i } U+{ cp:04X} - ", end="")
            try:
                print(chr(cp))
            except (UnicodeEncodeError, ValueError):
                print()
            print(f"Details: { codepoint_details(cp) }  Code units: { 2 if cp > 0xFFFF else 1 }")
            print()

    elif options.function == "breaktest":
        atexit.register(lambda: options.file.close())

        ok = "÷"
        not_ok = "×"
        passed: int = 0
        fails: list[str] = []
        for line_num, line in enumerate(options.file, 1):
            orig_line = line
            if not line.strip() or line.startswith("#"):
                continue
            line = line.split("#")[0].strip().split()
            if options.verbose_lines:
                print(f"{ line_num }: { orig_line.rstrip() }")
            if line[0] != ok or line[-1] != ok:
                parser.error(f"Line { line_num } doesn't start and end with { ok }")
            line = line[1:]
            text = ""
            breaks: list[int] = []
            codepoints: list[int] = []
            while line:
                c = line.pop(0)
                if c == not_ok:
                    continue
                if c == ok:
                    breaks.append(code_unit_length(text))
                    continue
                codepoints.append(int(c, 16))
                text += chr(codepoints[-1])

            seen = list(_breaker.boundaries(to_code_units(text)))
            if seen != breaks:
                fails.append(f"Line { line_num } got breaks at { seen } expected at { breaks }")
                fails.append(orig_line.strip())
                fails.append(" ".join(codepoint_details(cp, counter) for counter, cp in enumerate(codepoints)))
                fails.append("")
                if options.fail_fast:
                    break
                continue
            passed += 1

        logger.debug("Checked %d lines from %s", passed + len(fails) // 4, options.file.name)
        if fails:
            print(f"{ len(fails)//4 } tests failed, {passed:,} passed:", file=sys.stderr)
            for fail in fails:
                print(fail, file=sys.stderr)
            return 2
        print(f"{passed:,} passed")

    elif options.function == "benchmark":
        import random
        import time

        random.seed(options.seed)

        if options.text_file:
            atexit.register(lambda: options.text_file.close())
            base_text = options.text_file.read()
        else:
            base_text = (
                "The quick brown fox jumps over the lazy dog.\r\n"
                "哪个商标以人名为名，"
                "가가각 "
            )

        # the codepoints that combine, about 1% of the base text
        interesting = (
            "\U0001f61c\U0001f44d\U0001f3fc\U0001f44d\U0001f926\U0001f3fb\u200d\u2642\ufe0f"
            "\U0001f1fa\U0001f1f8a\u0301e\u0308\u0915\u093f"
        )
        base_text += interesting * max(1, int(len(base_text) * 0.01 / len(interesting)))

        print(f"Expanding text to { options.size } million chars ...", end="", flush=True)
        text = base_text
        while len(text) < options.size * 1_000_000:
            text += "".join(random.sample(base_text, len(base_text)))
        text = text[: int(options.size * 1_000_000)]
        logger.debug("Benchmark text is %d codepoints, %d code units", len(text), code_unit_length(text))

        print("\nResults in codepoints per second processed, returning each cluster.  Higher is faster.")
        print(f"\nBenchmarking grapheme16 unicode version { unicode_version }")

        for kind in ("iterate", "count"):
            print(f"{kind:>8}", end=" ", flush=True)
            start = time.process_time_ns()
            if kind == "count":
                count = count_clusters(text)
            else:
                count = 0
                for _ in cluster_iter(text):
                    count += 1
            end = time.process_time_ns()
            seconds = max(end - start, 1) / 1e9
            print(f"codepoints per second: { int(len(text)/seconds): 12,d}    clusters: {count: 11,d}")

    return 0


if __name__ == "__main__":
    # We output text non unicode compatible can't handle
    sys.stdout.reconfigure(errors="replace")
    sys.exit(main())
