import os
import sys

# Put project root on sys.path so autodoc can import the package if needed
sys.path.insert(0, os.path.abspath("../.."))

project = "quadstat"
author = "quadstat contributors"

extensions = [
    "autoapi.extension",
    "sphinx.ext.doctest",
    "sphinx.ext.napoleon",
    "myst_nb",
    "sphinx_copybutton",
]
templates_path = []
exclude_patterns = []

nb_execution_mode = "off"

html_theme = "alabaster"

myst_enable_extensions = [
    "deflist",
    "colon_fence",
]

master_doc = "index"

# ---------------------------------------------------------------------------
# sphinx-autoapi: generate API reference for the `quadstat` package
# ---------------------------------------------------------------------------
autoapi_type = "python"
# Restrict autoapi to the package source directory so module names stay
# rooted at `quadstat.*`
autoapi_dirs = ["../../quadstat"]

autoapi_ignore = [
    "**/docs/**",
    "**/tests/**",
    "**/.venv/**",
    "**/__pycache__/**",
]

autodoc_typehints = "description"

autoapi_options = [
    "members",
    "undoc-members",
    "show-inheritance",
    "show-module-summary",
]

autoapi_python_class_content = "both"
