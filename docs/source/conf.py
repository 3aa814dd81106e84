# Configuration file for the Sphinx documentation builder.
#
# https://www.sphinx-doc.org/en/master/usage/configuration.html
import os
import sys
from pathlib import Path
from sphinx.ext import apidoc

project_path = Path(__file__).parent.parent.parent
on_rtd = os.environ.get('READTHEDOCS', None) == 'True'
sys.path.insert(0, str(project_path))

project = 'HelloServer'
release = "1.0.0"

master_doc = 'index'
source_suffix = '.rst'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
]

templates_path = ['_templates']
exclude_patterns = ['_build', '**tests**', '**setup**']

autodoc_member_order = 'bysource'
autoclass_content = 'both'
add_module_names = False
html_show_sourcelink = False

language = 'ru'

html_theme = 'sphinx_rtd_theme'
html_static_path = ['_static']


def setup(app):
    if not on_rtd:
        apidoc.main([
            '-f', '-e', '-M',
            '-o', './source/',
            str(project_path / 'hello_server'),
        ])
