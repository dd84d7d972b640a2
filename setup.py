#!/usr/bin/env python3

from __future__ import annotations

import os
import pathlib
import sys

from setuptools import setup, Command

project_urls = {
    "Documentation": "https://github.com/grapheme16/grapheme16/tree/master/doc",
    "Issue Tracker": "https://github.com/grapheme16/grapheme16/issues",
    "Code": "https://github.com/grapheme16/grapheme16",
}


# ensure files are closed
def read_whole_file(name, mode):
    assert mode == "rt"
    f = open(name, mode, encoding="utf8")
    try:
        return f.read()
    finally:
        f.close()


# work out version number
version = None
for line in read_whole_file(os.path.join("grapheme16", "__init__.py"), "rt").splitlines():
    if line.startswith("__version__"):
        version = line.split("=")[1].strip().strip('"')
        break
assert version


# Run test suite
class run_tests(Command):
    description = "Run test suite"

    # 'verbose' is builtin and defaults to 1 (--quiet is also builtin
    # and forces verbose to 0)
    user_options = [
        ("show-tests", "v", "Show each test being run"),
        ("locals", None, "Show local variables in test failure"),
    ]

    boolean_options = ["show-tests", "locals"]

    def initialize_options(self):
        self.show_tests = 0
        self.locals = False

    def finalize_options(self):
        pass

    def run(self):
        import unittest
        import grapheme16.tests.__main__

        suite = grapheme16.tests.__main__.load_suite()
        # verbosity of zero doesn't print anything, one prints a dot
        # per test and two prints each test name
        result = unittest.TextTestRunner(verbosity=self.show_tests + 1, tb_locals=self.locals).run(suite)
        if not result.wasSuccessful():
            sys.exit(1)


# Regenerate the codepoint tables from Unicode data files
class generate(Command):
    description = "Regenerate grapheme16/_graphemedb.py from Unicode data files"

    user_options = [
        ("data-dir=", None, "Directory containing GraphemeBreakProperty.txt and emoji-data.txt"),
    ]

    def initialize_options(self):
        self.data_dir = None

    def finalize_options(self):
        pass

    def run(self):
        import subprocess

        args = [sys.executable, os.path.join("tools", "ucdprops2code.py")]
        if self.data_dir:
            args += ["--data-dir", self.data_dir]
        args.append(os.path.join("grapheme16", "_graphemedb.py"))
        subprocess.run(args, check=True)


if __name__ == "__main__":
    setup(
        name="grapheme16",
        version=version,
        python_requires=">=3.9",
        description="Unicode grapheme cluster segmentation using UTF-16 code unit offsets",
        long_description=pathlib.Path("README.rst").read_text(encoding="utf8"),
        long_description_content_type="text/x-rst",
        url="https://github.com/grapheme16/grapheme16",
        project_urls=project_urls,
        classifiers=[
            "Development Status :: 5 - Production/Stable",
            "Intended Audience :: Developers",
            "Programming Language :: Python :: 3",
            "Topic :: Text Processing",
            "Topic :: Software Development :: Internationalization",
        ],
        keywords=["unicode", "grapheme", "utf-16", "segmentation"],
        platforms="any",
        packages=["grapheme16", "grapheme16.tests"],
        package_data={"grapheme16": ["py.typed"]},
        extras_require={"docs": ["sphinx", "sphinx_rtd_theme"]},
        cmdclass={
            "test": run_tests,
            "generate": generate,
        },
    )
