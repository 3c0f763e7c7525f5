# Sphinx configuration for the pymatrix API reference.

import os
import sys

sys.path.insert(0, os.path.abspath('..'))

project = 'pymatrix'
author = 'pymatrix developers'
copyright = f'2026, {author}'
release = '0.1.0'
version = '.'.join(release.split('.')[:2])

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.intersphinx',
    'sphinx.ext.mathjax',
]

# Google style only
napoleon_google_docstrings = True
napoleon_numpy_docstrings = False
napoleon_use_rtype = False

autodoc_member_order = 'groupwise'
autodoc_typehints = 'signature'
autodoc_default_options = {
    'members': True,
    'show-inheritance': True,
}

exclude_patterns = ['_build']

html_theme = 'furo'
html_title = 'pymatrix'
html_theme_options = {
    'light_css_variables': {'color-brand-primary': '#3a6b35'},
    'dark_css_variables': {'color-brand-primary': '#8fc486'},
}

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'numpy': ('https://numpy.org/doc/stable/', None),
    'scipy': ('https://docs.scipy.org/doc/scipy/', None),
}
