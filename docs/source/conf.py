# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))
sys.path.insert(1, os.path.abspath('../..'))

from datetime import date
import re
import branchflow

# -- Project information -----------------------------------------------------

project = 'branchflow'
author = 'The branchflow developers'
copyright = '2024-{}, The {} community'.format(date.today().year, project)
version = re.sub(r'\.dev.*$', r'.dev', branchflow.__version__)
release = version

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.napoleon',
    'sphinx.ext.doctest',
    'sphinx.ext.autodoc',
    'sphinx.ext.autosummary',
    'sphinx.ext.intersphinx',
    'sphinx.ext.mathjax',
    'sphinx.ext.viewcode',
]

napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_use_param = True
napoleon_use_ivar = False
napoleon_include_init_with_doc = True
napoleon_use_rtype = True

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'numpy': ('https://numpy.org/doc/stable/', None),
    'pandas': ('https://pandas.pydata.org/docs/', None),
    'networkx': ('https://networkx.org/documentation/stable/', None),
}

exclude_patterns = ['.DS_Store']
source_suffix = {'.rst': 'restructuredtext'}
master_doc = 'index'
add_function_parentheses = True
nitpicky = False

# -- Options for HTML output -------------------------------------------------

html_theme = 'pydata_sphinx_theme'
html_theme_options = {
    "collapse_navigation": False,
    "show_nav_level": 4,
    "navigation_depth": 6,
}
