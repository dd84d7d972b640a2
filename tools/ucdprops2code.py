#!/usr/bin/env python3

# Generates grapheme16/_graphemedb.py from the Unicode properties db

import sys
import os
import itertools
import pathlib
import re

try:
    batched = itertools.batched
except AttributeError:
    # Copied from https://docs.python.org/3/library/itertools.html#itertools.batched
    def batched(iterable, n):
        # batched('ABCDEFG', 3) --> ABC DEF G
        if n < 1:
            raise ValueError("n must be at least one")
        it = iter(iterable)
        while batch := tuple(itertools.islice(it, n)):
            yield batch


# output order, which is also the enum order
categories = (
    "Control",
    "Extend",
    "ZWJ",
    "Regional_Indicator",
    "Extended_Pictographic",
    "SpacingMark",
    "Prepend",
    "L",
    "V",
    "T",
    "LV",
    "LVT",
)

# CR and LF are only ever looked at by codepoint value
folded = {"CR": "Control", "LF": "Control"}

surrogates = (0xD800, 0xDFFF)

ucd_version = None


def extract_version(filename: str, source: str):
    global ucd_version
    if filename == "emoji-data.txt":
        for line in source.splitlines():
            if line.startswith("# Used with Emoji Version "):
                mo = re.match(r".*Version (?P<version>[^\s]+)\s.*", line)
                break
        else:
            raise ValueError("No matching version line found")
    else:
        mo = re.match(r"# [^-]+-(?P<version>.*)\.txt", source.splitlines()[0])
    # we only care about major.minor - emoji data doesn't even have patch
    version = ".".join(mo.group("version").split(".")[:2])
    if ucd_version is None:
        ucd_version = version
    elif ucd_version != version:
        sys.exit(f"Already saw {ucd_version=} but {filename=} is {version=}")


def parse_source_lines(source: str):
    for line in source.splitlines():
        if not line.strip() or line.startswith("#"):
            continue
        line = line[: line.index("#")]
        vals, prop = line.split(";", 1)
        prop = prop.strip()
        vals = vals.strip().split("..")
        if len(vals) == 1:
            yield int(vals[0], 16), int(vals[0], 16), prop
        else:
            yield int(vals[0], 16), int(vals[1], 16), prop


def populate(source: str, dest: dict[str, list], only: str | None = None):
    for start, end, prop in parse_source_lines(source):
        if only is not None and prop != only:
            continue
        prop = folded.get(prop, prop)
        if prop not in categories:
            sys.exit(f"Unexpected property {prop} at 0x{start:04X}")
        dest.setdefault(prop, []).append((start, end))


def without_surrogates(ranges: list[tuple[int, int]]):
    for start, end in ranges:
        if end < surrogates[0] or start > surrogates[1]:
            yield start, end
            continue
        if start < surrogates[0]:
            yield start, surrogates[0] - 1
        if end > surrogates[1]:
            yield surrogates[1] + 1, end


def merge_ranges(ranges: list[tuple[int, int]]) -> list[tuple[int, int]]:
    "Sorts and joins adjacent ranges"
    res: list[list[int]] = []
    for start, end in sorted(without_surrogates(ranges)):
        if res and start <= res[-1][1] + 1:
            res[-1][1] = max(end, res[-1][1])
        else:
            res.append([start, end])
    return [tuple(r) for r in res]


def check_disjoint(props: dict[str, list[tuple[int, int]]]):
    everything = sorted((start, end, name) for name, ranges in props.items() for start, end in ranges)
    for (_, end, name), (start, _, next_name) in zip(everything, everything[1:]):
        if start <= end:
            sys.exit(f"Codepoint 0x{start:04X} is both {name} and {next_name}")


def read_props(data_dir: str | None) -> dict[str, list[tuple[int, int]]]:
    def get_source(url: str) -> str:
        parts = url.split("/")
        if data_dir:
            candidates = (
                pathlib.Path(data_dir) / parts[-1],
                pathlib.Path(data_dir) / parts[-2] / parts[-1],
            )
            for url in candidates:
                if url.exists():
                    break
            else:
                sys.exit(f"Failed to find file in data dir.  Looked for\n{candidates}")

        print("Reading", url)
        if isinstance(url, str):
            source = urllib.request.urlopen(url).read().decode("utf8")
        else:
            source = url.read_text("utf8")

        return source

    props: dict[str, list[tuple[int, int]]] = {}

    source = get_source("https://www.unicode.org/Public/UCD/latest/ucd/auxiliary/GraphemeBreakProperty.txt")
    extract_version("GraphemeBreakProperty.txt", source)
    populate(source, props)

    source = get_source("https://www.unicode.org/Public/UCD/latest/ucd/emoji/emoji-data.txt")
    extract_version("emoji-data.txt", source)
    populate(source, props, only="Extended_Pictographic")

    props = {name: merge_ranges(props[name]) for name in categories}
    check_disjoint(props)
    return props


def generate_python(props: dict[str, list[tuple[int, int]]]) -> str:
    out: list[str] = []
    out.append(f'unicode_version = "{ ucd_version }"')
    out.append('"""The `Unicode version <https://www.unicode.org/versions/enumeratedversions.html>`__')
    out.append('that the data tables implement"""')
    out.append("")
    out.append("")
    for name in categories:
        ranges = props[name]
        out.append(f"# { len(ranges) } ranges")
        out.append(f"{ name } = (")
        for batch in batched(ranges, 4):
            out.append("    " + " ".join(f"(0x{ start:04X}, 0x{ end:04X})," for start, end in batch))
        out.append(")")
        out.append("")
    out.append("")
    out.append("tables = {")
    for name in categories:
        out.append(f'    "{ name }": { name },')
    out.append("}")
    return "\n".join(out) + "\n"


def replace_if_different(filename: str, contents: str) -> None:
    if not os.path.exists(filename) or pathlib.Path(filename).read_text(encoding="utf8") != contents:
        print(f"{ 'Creating' if not os.path.exists(filename) else 'Updating' } { filename }")
        pathlib.Path(filename).write_text(contents, encoding="utf8")


py_code_header = """\
# Generated by tools/ucdprops2code.py - Do not edit

"""

if __name__ == "__main__":
    import argparse
    import urllib.request

    p = argparse.ArgumentParser(description="Generate grapheme break tables from Unicode properties")
    p.add_argument(
        "--data-dir",
        help="Directory containing local copies of the relevant unicode database files.  If "
        "not supplied the latest files are read from https://www.unicode.org/Public/UCD/latest/ucd/",
    )
    p.add_argument("out_file", help="File to write code to with .py extension")

    options = p.parse_args()

    if not options.out_file.endswith(".py"):
        p.error("out_file should end in .py")

    props = read_props(options.data_dir)
    for name in categories:
        print(f"{ name:>24}: { len(props[name]):5,} ranges")

    replace_if_different(options.out_file, py_code_header + generate_python(props))
