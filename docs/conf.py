#!/usr/bin/env python3
# Sphinx config

import sys
import os

_project_dir = os.path.abspath('..')
sys.path.insert(0, _project_dir)

# -- General configuration ------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
]

source_suffix = '.rst'
master_doc = 'index'

# General information about the project.
project = 'pazzfraze'
copyright = '2024, pazzfraze authors'

# The short X.Y version.
version = open(_project_dir + '/VERSION', 'r').read().strip()
# The full version, including alpha/beta/rc tags.
release = version

# List of patterns, relative to source directory, that match files and
# directories to ignore when looking for source files.
exclude_patterns = ['_build']

# The reST default role (used for this markup: `text`) to use for all
# documents.
default_role = 'py:obj'

pygments_style = 'sphinx'


# -- Options for HTML output ----------------------------------------------

html_theme = 'classic'

# Output file base name for HTML help builder.
htmlhelp_basename = 'pazzfrazedoc'


# -- Options for manual page output ---------------------------------------

# One entry per manual page. List of tuples
# (source start file, name, description, authors, manual section).
man_pages = [
    ('index', 'pazzfraze', 'Deterministic passphrase generator', ['pazzfraze authors'], 1),
]
