"""Sphinx configuration file."""

from importlib.metadata import version as get_version

project = "skycycle"
copyright = "2026, Corey Spohn"
author = "Corey Spohn"
release = get_version("skycycle")
version = ".".join(release.split(".")[:2])

# -- General configuration ---------------------------------------------------

extensions = [
    "myst_nb",
    "autoapi.extension",
    "sphinx.ext.autodoc",
    "sphinx.ext.viewcode",
    "sphinx.ext.mathjax",
    "IPython.sphinxext.ipython_console_highlighting",
]

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store", "jupyter_execute"]

autoapi_dirs = ["../src"]
autoapi_options = ["members", "undoc-members", "show-module-summary"]
autodoc_typehints = "description"

myst_enable_extensions = ["amsmath", "dollarmath", "colon_fence"]

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_book_theme"
master_doc = "index"
html_title = "skycycle"
html_theme_options = {"show_toc_level": 2}
html_context = {"default_mode": "dark"}
source_suffix = {
    ".rst": "restructuredtext",
    ".md": "myst-nb",
}
nb_execution_mode = "auto"
nb_execution_timeout = 120
