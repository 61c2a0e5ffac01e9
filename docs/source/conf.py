# Configuration file for the Sphinx documentation builder.
#
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os, sys
# Make slater_ops importable by Sphinx (src/ layout)
sys.path.insert(0, os.path.abspath('../../src'))

project = 'slater-ops'
copyright = '2026, slater-ops developers'
author = 'slater-ops developers'

version = '0.1'
release = '0.1.0'

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.napoleon",     # parses NumPy style
    "sphinx.ext.viewcode",
    "sphinx.ext.doctest",
    "myst_parser",
]

templates_path = ['_templates']
exclude_patterns = []

# pyscf and qiskit are only needed for the chemistry and statevector helpers
autodoc_mock_imports = ["pyscf", "qiskit"]

# Autodoc / autosummary
autodoc_typehints = "description"
autodoc_default_options = {
    "members": True,
    "undoc-members": False,
    "show-inheritance": True,
}
autosummary_generate = True

# Napoleon config for NumPy style
napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_use_param = True
napoleon_use_rtype = True

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"
html_static_path = []
html_theme_options = {
    "navigation_depth": 4,
    "collapse_navigation": False,
}
