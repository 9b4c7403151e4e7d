# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys

import tomllib

sys.path.insert(0, os.path.abspath('../../src'))

# Release comes from pyproject.toml
with open('../../pyproject.toml', 'rb') as f:
    pyproject = tomllib.load(f)

# -- Project information -----------------------------------------------------

project = 'kvpubsub'
copyright = '2026, kvpubsub contributors'
author = 'kvpubsub contributors'
release = pyproject['project']['version']

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
]

templates_path = ['_templates']
exclude_patterns = []

# -- Options for HTML output -------------------------------------------------

html_theme = 'sphinx_rtd_theme'
html_static_path = ['_static']

# -- Options for autodoc -----------------------------------------------------
autodoc_default_options = {
    'members': True,
    'member-order': 'bysource',
    'special-members': '__init__',
    'exclude-members': '__weakref__'
}
