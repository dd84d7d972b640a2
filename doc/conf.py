# -*- coding: utf-8 -*-
#

import os
import sys

sys.path.insert(0, os.path.abspath(".."))

import grapheme16

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.extlinks",
    "sphinx.ext.intersphinx",
    "sphinx.ext.viewcode",
]

autodoc_preserve_defaults = True
autodoc_member_order = "bysource"

extlinks = {
    "issue": ("https://github.com/grapheme16/grapheme16/issues/%s", "issue %s"),
    "source": ("https://github.com/grapheme16/grapheme16/blob/master/%s", "%s"),
}

intersphinx_mapping = {"python": ("https://docs.python.org/3", None)}

# The suffix of source filenames.
source_suffix = ".rst"

# The master toctree document.
master_doc = "index"

pygments_style = "vs"

# General substitutions.
project = "grapheme16"
author = "grapheme16 developers"
copyright = f"2024, { author }"

# The default replacements for |version| and |release|
version = grapheme16.__version__
release = version

exclude_trees = ["build"]

extlinks_detect_hardcoded_links = True

# Options for HTML output

html_title = f"{ project } { version } documentation"
html_theme = "sphinx_rtd_theme"
html_theme_options = {
    "prev_next_buttons_location": "both",
}
html_last_updated_fmt = "%b %d, %Y"

nitpicky = True
